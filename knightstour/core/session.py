from __future__ import annotations

import logging
from typing import Optional

from knightstour.core.levels import Level
from knightstour.core.records import AttemptRecords, CompletionRecords, RecordStore
from knightstour.core.tour import Coord, MoveResult, TourEngine, TourSnapshot

logger = logging.getLogger(__name__)


class GameSession:
    """Drives one tour at a time and reports its outcome to the record store.

    The engine knows nothing about records; this is the caller that joins
    them. A finished tour is written with ``record_completion`` on the
    winning click. A tour abandoned with at least one placement is written
    with ``record_attempt`` when the session ends (restart, level change or
    an explicit ``end``). Once the board is complete it is locked: further
    clicks and undos are refused until the next ``start``.
    """

    def __init__(self, level: Level, records: RecordStore) -> None:
        """Bind a session to a level and a record store; call ``start`` to play."""
        self._level = level
        self._records = records
        self._engine = TourEngine(level)
        self._ended = True
        self._last_completion: Optional[CompletionRecords] = None

    @property
    def level(self) -> Level:
        return self._level

    @property
    def engine(self) -> TourEngine:
        return self._engine

    @property
    def records(self) -> RecordStore:
        return self._records

    @property
    def last_completion(self) -> Optional[CompletionRecords]:
        """Records set by the winning click of the current tour, if it was won."""
        return self._last_completion

    @property
    def is_active(self) -> bool:
        """True while a tour is in progress and not yet recorded."""
        return not self._ended

    def start(self) -> None:
        """Begin a fresh tour on the current level."""
        self._engine = TourEngine(self._level)
        self._engine.start()
        self._ended = False
        self._last_completion = None
        logger.debug("Started %s", self._level.name)

    def restart(self) -> Optional[AttemptRecords]:
        """End the current tour (recording it as an attempt) and start again."""
        outcome = self.end()
        self.start()
        return outcome

    def select_level(self, level: Level) -> Optional[AttemptRecords]:
        outcome = self.end()
        self._level = level
        self.start()
        return outcome

    def click(self, coord: Coord) -> MoveResult:
        if self._ended or self._engine.is_complete():
            return MoveResult(legal=False, score=self._engine.score, complete=self._engine.is_complete())
        result = self._engine.place_or_move(coord)
        if result.complete:
            self._last_completion = self._records.record_completion(
                self._engine.board_size, self._engine.score, self._engine.move_count
            )
            self._ended = True
            logger.info(
                "Tour complete on %s: score=%d moves=%d",
                self._level.name, self._engine.score, self._engine.move_count,
            )
        return result

    def undo(self) -> bool:
        if self._ended or self._engine.is_complete():
            return False
        return self._engine.undo()

    def end(self) -> Optional[AttemptRecords]:
        """Close the current tour. Returns attempt records when one was written."""
        if self._ended:
            return None
        self._ended = True
        if self._engine.is_complete() or not self._engine.has_started:
            return None
        return self._records.record_attempt(
            self._engine.board_size, self._engine.score, self._engine.squares_visited
        )

    def snapshot(self) -> TourSnapshot:
        return self._engine.snapshot()
