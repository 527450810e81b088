"""Tests for preference storage and logging setup."""

import json
import logging

from tasktree.global_config import (
    Preferences,
    Theme,
    get_config_dir,
    get_preferences,
    save_preferences,
)
from tasktree.logging_setup import resolve_level, setup_logging


class TestPreferences:
    """Tests for loading and saving preferences."""

    def test_config_dir_from_env(self, isolated_home):
        """TASKTREE_HOME selects and creates the directory."""
        assert get_config_dir() == isolated_home
        assert isolated_home.is_dir()

    def test_defaults_when_missing(self):
        prefs = get_preferences()
        assert prefs.theme == Theme.DARK
        assert prefs.seed_on_start is True

    def test_save_and_load(self, isolated_home):
        save_preferences(Preferences(theme=Theme.LIGHT, seed_on_start=False))
        data = json.loads((isolated_home / "config.json").read_text(encoding="utf-8"))
        assert data == {"theme": "light", "seed_on_start": False}
        assert get_preferences() == Preferences(theme=Theme.LIGHT, seed_on_start=False)

    def test_corrupt_file_falls_back(self, isolated_home, caplog):
        """Unreadable JSON gives defaults and a warning."""
        get_config_dir()
        (isolated_home / "config.json").write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="tasktree"):
            assert get_preferences() == Preferences()
        assert "Ignoring unreadable config" in caplog.text

    def test_invalid_value_falls_back(self, isolated_home):
        get_config_dir()
        (isolated_home / "config.json").write_text('{"theme": "neon"}', encoding="utf-8")
        assert get_preferences() == Preferences()


class TestLoggingSetup:
    """Tests for setup_logging."""

    def test_resolve_level(self, monkeypatch):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("bogus") == logging.INFO
        monkeypatch.setenv("TASKTREE_LOG_LEVEL", "WARNING")
        assert resolve_level(None) == logging.WARNING

    def test_writes_log_file(self, tmp_path):
        log_file = setup_logging(level="DEBUG", log_dir=tmp_path, console=False)
        logging.getLogger("tasktree.test").debug("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert log_file == tmp_path / "tasktree.log"
        assert "hello from test" in log_file.read_text(encoding="utf-8")

    def test_third_party_filtered(self, tmp_path):
        log_file = setup_logging(level="DEBUG", log_dir=tmp_path, console=False)
        logging.getLogger("somelib").warning("noisy warning")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "noisy warning" not in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        root = logging.getLogger()
        setup_logging(log_dir=tmp_path, console=True)
        count = len(root.handlers)
        setup_logging(log_dir=tmp_path, console=True)
        assert len(root.handlers) == count
