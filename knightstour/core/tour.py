from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Set, Tuple

from knightstour.core.levels import Level

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

KNIGHT_DELTAS: Tuple[Coord, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2),
    (1, -2), (1, 2), (2, -1), (2, 1),
)


def in_bounds(coord: Coord, board_size: int) -> bool:
    row, col = coord
    return 0 <= row < board_size and 0 <= col < board_size


def _is_square(coord: object) -> bool:
    """A (row, col) pair of plain ints; bools and floats are not squares."""
    if not isinstance(coord, (tuple, list)) or len(coord) != 2:
        return False
    return all(isinstance(v, int) and not isinstance(v, bool) for v in coord)


def is_knight_move(src: Coord, dst: Coord) -> bool:
    """True if ``dst`` is one L-shaped step (2+1) away from ``src``."""
    dr = abs(src[0] - dst[0])
    dc = abs(src[1] - dst[1])
    return (dr, dc) in ((2, 1), (1, 2))


class KnightMoves:
    """Lazy, re-iterable view of the on-board knight targets of one square."""

    def __init__(self, origin: Coord, board_size: int) -> None:
        self._origin = origin
        self._board_size = board_size

    def __iter__(self) -> Iterator[Coord]:
        row, col = self._origin
        for dr, dc in KNIGHT_DELTAS:
            target = (row + dr, col + dc)
            if in_bounds(target, self._board_size):
                yield target

    def __contains__(self, coord: object) -> bool:
        return any(target == coord for target in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single click on the board.

    Truthy only when the knight landed on a square it had not visited yet,
    so callers can write ``if engine.place_or_move(c): ...`` before checking
    for the win.
    """

    legal: bool
    new_square: bool = False
    score: int = 0
    complete: bool = False

    def __bool__(self) -> bool:
        return self.new_square


@dataclass(frozen=True)
class TourSnapshot:
    """Read-only view of the board handed to whatever draws it."""

    board_size: int
    position: Optional[Coord]
    visited: FrozenSet[Coord]
    legal_moves: Tuple[Coord, ...]
    score: int
    move_count: int
    complete: bool


class TourEngine:
    """Rules and bookkeeping for one knight's tour.

    ``history`` is the only mutable source of truth: the visited set is
    rebuilt from it whenever a move is taken back, so the two can never
    disagree. Rejections (illegal move, undo with nothing to undo) are
    reported through return values and leave the state untouched.
    """

    def __init__(self, level: Level) -> None:
        self._level = level
        self._board_size = level.board_size
        self._history: List[Coord] = []
        self._visited: Set[Coord] = set()
        self._score = 0

    @property
    def level(self) -> Level:
        """Scoring parameters in effect."""
        return self._level

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def position(self) -> Optional[Coord]:
        """Current knight square, or None before the first placement."""
        return self._history[-1] if self._history else None

    @property
    def score(self) -> int:
        return self._score

    @property
    def history(self) -> Tuple[Coord, ...]:
        return tuple(self._history)

    @property
    def visited(self) -> FrozenSet[Coord]:
        return frozenset(self._visited)

    @property
    def move_count(self) -> int:
        """Placements currently on the stack, the first one included."""
        return len(self._history)

    @property
    def squares_visited(self) -> int:
        return len(self._visited)

    @property
    def has_started(self) -> bool:
        return bool(self._history)

    def start(self, board_size: Optional[int] = None) -> None:
        """Throw away the current tour and begin an empty one."""
        self._board_size = self._level.board_size if board_size is None else board_size
        self._history = []
        self._visited = set()
        self._score = 0

    def place_or_move(self, coord: Coord) -> MoveResult:
        if not _is_square(coord):
            logger.debug("Rejected malformed square %r", coord)
            return MoveResult(legal=False, score=self._score, complete=self.is_complete())
        coord = (coord[0], coord[1])
        if not in_bounds(coord, self._board_size):
            logger.debug("Rejected off-board square %s", coord)
            return MoveResult(legal=False, score=self._score, complete=self.is_complete())

        current = self.position
        if current is None:
            self._history.append(coord)
            self._visited.add(coord)
            return MoveResult(legal=True, new_square=True, score=self._score, complete=self.is_complete())

        if not is_knight_move(current, coord):
            logger.debug("Rejected %s -> %s: not a knight move", current, coord)
            return MoveResult(legal=False, score=self._score, complete=self.is_complete())

        new_square = coord not in self._visited
        if new_square:
            self._score += self._level.points_per_move
            self._visited.add(coord)
        else:
            self._score -= self._level.revisit_penalty
        self._history.append(coord)
        return MoveResult(legal=True, new_square=new_square, score=self._score, complete=self.is_complete())

    def undo(self) -> bool:
        """Take back the last placement. Costs ``undo_penalty`` every time."""
        if not self._history:
            return False
        self._history.pop()
        self._score -= self._level.undo_penalty
        self._visited = set(self._history)
        return True

    def is_complete(self) -> bool:
        return len(self._visited) == self._board_size * self._board_size

    def legal_moves_from(self, coord: Coord) -> KnightMoves:
        """Squares one knight step from ``coord``; for highlighting only."""
        return KnightMoves(coord, self._board_size)

    def snapshot(self) -> TourSnapshot:
        position = self.position
        legal = tuple(self.legal_moves_from(position)) if position is not None else ()
        return TourSnapshot(
            board_size=self._board_size,
            position=position,
            visited=frozenset(self._visited),
            legal_moves=legal,
            score=self._score,
            move_count=self.move_count,
            complete=self.is_complete(),
        )
