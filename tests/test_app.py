"""Tests for knightstour.app – wiring of catalog, records and session."""

from __future__ import annotations

import logging
from pathlib import Path

from knightstour.app import configure_logging, create_session


class TestCreateSession:
    def test_default_level(self, tmp_path: Path):
        s = create_session(records_path=tmp_path / "scores.properties")
        assert s.level.board_size == 8
        assert s.is_active
        assert s.snapshot().position is None

    def test_named_level(self, tmp_path: Path):
        s = create_session("level1", records_path=tmp_path / "scores.properties")
        assert s.level.name == "Easy (6x6)"

    def test_uses_existing_records(self, tmp_path: Path):
        path = tmp_path / "scores.properties"
        path.write_text("score_10=900\n", encoding="utf-8")
        s = create_session("level3", records_path=path)
        assert s.records.best_score(10) == 900

    def test_plays_through(self, tmp_path: Path):
        path = tmp_path / "scores.properties"
        s = create_session(records_path=path)
        s.click((0, 0))
        s.click((2, 1))
        s.restart()
        assert s.records.best_attempt_score(8) == 10
        assert "attempt_score_8=10" in path.read_text(encoding="utf-8")


class TestConfigureLogging:
    def test_sets_root_handler(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        configure_logging(logging.DEBUG)
        assert calls["level"] == logging.DEBUG
        assert "%(name)s" in calls["format"]
