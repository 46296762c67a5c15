from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

_INT_FIELDS = ("board_size", "points_per_move", "revisit_penalty", "undo_penalty")


@dataclass(frozen=True)
class Level:
    key: str
    name: str
    board_size: int
    points_per_move: int
    revisit_penalty: int
    undo_penalty: int
    default: bool = False

    def describe(self) -> str:
        """One-line summary shown next to the level picker."""
        return (
            f"Board: {self.board_size}x{self.board_size} • Points/Move: {self.points_per_move}"
            f" • Revisit Penalty: -{self.revisit_penalty} • Undo Penalty: -{self.undo_penalty}"
        )

    def __str__(self) -> str:
        return self.name


class LevelRepository:
    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir or Path(__file__).resolve().parent.parent / "data" / "levels"
        self._levels = self._load_levels()

    def all(self) -> List[Level]:
        return list(self._levels.values())

    def get(self, key: str) -> Level:
        return self._levels[key]

    def default(self) -> Level:
        """The level marked ``default: true``, else the first one."""
        for level in self._levels.values():
            if level.default:
                return level
        return next(iter(self._levels.values()))

    def for_board_size(self, board_size: int) -> Level:
        for level in self._levels.values():
            if level.board_size == board_size:
                return level
        raise KeyError(board_size)

    def _load_levels(self) -> Dict[str, Level]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: Dict[str, Level] = {}

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            key = level_path.stem
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            levels[key] = _parse_level(key, level_path.name, raw)

        if not levels:
            raise ValueError("No level files (level*.yaml) found in data/levels")
        if sum(1 for level in levels.values() if level.default) > 1:
            raise ValueError("More than one level is marked as default")
        return levels


def _parse_level(key: str, file_name: str, raw: Any) -> Level:
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{file_name}: expected YAML mapping with 'name' and 'board_size'")
    name = raw.get("name")
    if not name or not isinstance(name, str):
        raise ValueError(f"{file_name}: missing or invalid 'name'")

    values: Dict[str, int] = {}
    for field in _INT_FIELDS:
        value = raw.get(field)
        # YAML true/false load as bool, which isinstance() accepts as int
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{file_name}: missing or invalid '{field}'")
        if value < 0:
            raise ValueError(f"{file_name}: '{field}' must not be negative")
        values[field] = value
    if values["board_size"] < 1:
        raise ValueError(f"{file_name}: 'board_size' must be at least 1")

    default = raw.get("default", False)
    if not isinstance(default, bool):
        raise ValueError(f"{file_name}: 'default' must be true or false")

    return Level(key=key, name=name.strip(), default=default, **values)
