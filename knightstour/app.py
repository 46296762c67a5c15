"""Application entry point and setup for the Knight's Tour game."""

import logging
from pathlib import Path
from typing import Optional

from knightstour.core.levels import LevelRepository
from knightstour.core.records import RecordStore
from knightstour.core.session import GameSession


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_session(
    level_key: Optional[str] = None,
    records_path: Optional[Path] = None,
    levels: Optional[LevelRepository] = None,
) -> GameSession:
    """Load the level catalog and record file and return a started session.

    The board renderer owns the returned session and feeds clicks into it.
    """
    levels = levels or LevelRepository()
    level = levels.get(level_key) if level_key else levels.default()
    record_store = RecordStore(records_path)

    logging.info(
        "Loaded %d levels; playing %s (best score %d)",
        len(levels.all()), level.name, record_store.best_score(level.board_size),
    )

    session = GameSession(level, record_store)
    session.start()
    return session
