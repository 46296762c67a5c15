"""Shared board fixtures: hand-checked open tours, row-major (row, col)."""

from __future__ import annotations

import pytest

TOUR_5X5 = [
    (0, 0), (1, 2), (0, 4), (2, 3), (4, 4), (3, 2), (4, 0), (2, 1), (0, 2), (1, 4),
    (3, 3), (4, 1), (2, 0), (0, 1), (1, 3), (3, 4), (4, 2), (3, 0), (1, 1), (0, 3),
    (2, 4), (4, 3), (3, 1), (1, 0), (2, 2),
]

TOUR_6X6 = [
    (0, 0), (2, 1), (4, 2), (5, 4), (3, 5), (1, 4), (0, 2), (2, 3), (4, 4), (2, 5),
    (0, 4), (1, 2), (2, 4), (0, 5), (1, 3), (0, 1), (2, 0), (4, 1), (5, 3), (4, 5),
    (3, 3), (5, 2), (4, 0), (3, 2), (1, 1), (0, 3), (1, 5), (3, 4), (5, 5), (4, 3),
    (5, 1), (3, 0), (2, 2), (1, 0), (3, 1), (5, 0),
]


@pytest.fixture()
def tour_5x5() -> list:
    return list(TOUR_5X5)


@pytest.fixture()
def tour_6x6() -> list:
    return list(TOUR_6X6)
