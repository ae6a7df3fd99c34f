"""Tests for settings, logging configuration and the activity log."""

import json
import logging
from pathlib import Path

import pytest

from maid.activity_log import ActivityLog
from maid.config import Settings
from maid.logging_config import configure_logging
from maid.rubric import RUBRIC_FILENAME


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAID_TOP_KEYWORD_COUNT", raising=False)
        cfg = Settings(_env_file=None)
        assert cfg.rubric_filename == RUBRIC_FILENAME
        assert cfg.top_keyword_count == 15
        assert cfg.min_keyword_length == 4
        assert isinstance(cfg.trash_root, Path)

    def test_environment_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MAID_TOP_KEYWORD_COUNT", "5")
        monkeypatch.setenv("MAID_TRASH_ROOT", str(tmp_path))
        monkeypatch.setenv("MAID_SPAWN_EXPIRY_TERMINAL", "false")
        cfg = Settings(_env_file=None)
        assert cfg.top_keyword_count == 5
        assert cfg.trash_root == tmp_path
        assert cfg.spawn_expiry_terminal is False

    def test_invalid_keyword_count_rejected(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, top_keyword_count=0)


class TestLogging:
    def test_file_handler(self, tmp_path):
        logger = configure_logging(log_level="DEBUG", log_dir=tmp_path, log_to_console=False, log_filename="run.log")
        logging.getLogger("maid.test").info("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in (tmp_path / "run.log").read_text(encoding="utf-8")
        logger.handlers.clear()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging(log_level="LOUD", log_to_console=False)


class TestActivityLog:
    def test_appends_jsonl(self, tmp_path):
        log = ActivityLog(tmp_path / "log.jsonl", run_id="abc")
        log.log("copied", Path("a.md"), Path("b.md"), "Guide")
        log.log("skip", Path("c.md"), None, "target exists")

        lines = (tmp_path / "log.jsonl").read_text(encoding="utf-8").splitlines()
        entries = [json.loads(line) for line in lines]
        assert [e["action"] for e in entries] == ["copied", "skip"]
        assert entries[1]["dest"] is None
        assert all(e["run_id"] == "abc" for e in entries)

    def test_disabled_writes_nothing(self, tmp_path):
        log = ActivityLog.disabled()
        log.log("copied", Path("a.md"), Path("b.md"))
        assert not log.enabled
        assert list(tmp_path.iterdir()) == []
