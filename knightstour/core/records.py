from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

NO_MOVES_RECORD = 999

_HEADER = "# Knight's Tour High Scores"
_KEY_RE = re.compile(r"^(score|moves|attempt_score|attempt_squares)_(\d+)$")


@dataclass
class Record:
    best_score: int = 0
    fewest_moves: int = NO_MOVES_RECORD
    best_attempt_score: int = 0
    most_squares_visited: int = 0


class CompletionRecords(NamedTuple):
    """Which completed-tour records a finished session just beat."""

    new_best_score: bool
    new_fewest_moves: bool

    @property
    def any(self) -> bool:
        return self.new_best_score or self.new_fewest_moves


class AttemptRecords(NamedTuple):
    """Which unfinished-tour records an abandoned session just beat."""

    new_best_score: bool
    new_most_squares: bool

    @property
    def any(self) -> bool:
        return self.new_best_score or self.new_most_squares


# storage key prefix -> Record attribute
_FIELDS = {
    "score": "best_score",
    "moves": "fewest_moves",
    "attempt_score": "best_attempt_score",
    "attempt_squares": "most_squares_visited",
}


class RecordStore:
    """Best results per board size. Persists to disk across app restarts.

    Default file: ~/.knightstour/highscores.properties, one ``key=value`` line
    per metric (``score_8=310``, ``moves_8=64``, ...). Every update that beats
    a stored value rewrites the whole file before returning.
    """

    def __init__(self, file_path: Union[str, Path, None] = None) -> None:
        self._file_path = Path(file_path) if file_path else Path.home() / ".knightstour" / "highscores.properties"
        self._records = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get_record(self, board_size: int) -> Record:
        current = self._records.get(board_size, Record())
        return replace(current)

    def best_score(self, board_size: int) -> int:
        return self._records.get(board_size, Record()).best_score

    def fewest_moves(self, board_size: int) -> int:
        return self._records.get(board_size, Record()).fewest_moves

    def best_attempt_score(self, board_size: int) -> int:
        return self._records.get(board_size, Record()).best_attempt_score

    def most_squares_visited(self, board_size: int) -> int:
        return self._records.get(board_size, Record()).most_squares_visited

    def record_completion(self, board_size: int, score: int, move_count: int) -> CompletionRecords:
        current = self._records.get(board_size, Record())
        new_score = score > current.best_score
        new_moves = move_count < current.fewest_moves
        if new_score:
            current.best_score = score
            logger.info("New best score on %dx%d: %d", board_size, board_size, score)
        if new_moves:
            current.fewest_moves = move_count
            logger.info("New fewest moves on %dx%d: %d", board_size, board_size, move_count)
        if new_score or new_moves:
            self._records[board_size] = current
            self._save()
        return CompletionRecords(new_best_score=new_score, new_fewest_moves=new_moves)

    def record_attempt(self, board_size: int, score: int, squares_visited: int) -> AttemptRecords:
        current = self._records.get(board_size, Record())
        new_score = score > current.best_attempt_score
        new_squares = squares_visited > current.most_squares_visited
        if new_score:
            current.best_attempt_score = score
        if new_squares:
            current.most_squares_visited = squares_visited
        if new_score or new_squares:
            self._records[board_size] = current
            logger.info(
                "Attempt records on %dx%d: score=%d squares=%d",
                board_size, board_size, current.best_attempt_score, current.most_squares_visited,
            )
            self._save()
        return AttemptRecords(new_best_score=new_score, new_most_squares=new_squares)

    def reset(self, board_size: Optional[int] = None) -> None:
        """Clear records for one board size, or for all of them."""
        if board_size is None:
            self._records = {}
        else:
            self._records.pop(board_size, None)
        self._save()

    def save(self) -> None:
        """Persist current state to disk (e.g. on app exit)."""
        self._save()

    def _load(self) -> Dict[int, Record]:
        records: Dict[int, Record] = {}
        if not self._file_path.exists():
            return records
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load records from %s: %s", self._file_path, e)
            return records

        for lineno, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith(("#", "!")):
                continue
            key, sep, value = line.partition("=")
            m = _KEY_RE.match(key.strip())
            if not sep or not m:
                logger.warning("%s:%d: skipping unrecognised entry %r", self._file_path, lineno, line)
                continue
            try:
                number = int(value.strip())
            except ValueError:
                logger.warning("%s:%d: skipping non-integer value %r", self._file_path, lineno, value)
                continue
            record = records.setdefault(int(m.group(2)), Record())
            setattr(record, _FIELDS[m.group(1)], number)
        return records

    def _dump(self) -> str:
        lines = [_HEADER]
        for board_size in sorted(self._records):
            record = self._records[board_size]
            for prefix, attr in _FIELDS.items():
                lines.append(f"{prefix}_{board_size}={getattr(record, attr)}")
        return "\n".join(lines) + "\n"

    def _save(self) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(self._dump(), encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as e:
            logger.warning("Could not save records to %s: %s", self._file_path, e)
            if tmp_path.is_file():
                tmp_path.unlink()
