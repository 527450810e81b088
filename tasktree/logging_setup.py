"""Logging configuration.

The TUI owns the terminal while it runs, so full logs go to a file in the
config directory. Plain CLI commands additionally get a stderr handler
that only shows warnings and errors.
"""

import logging
import os
import sys
from pathlib import Path

from tasktree.global_config import get_config_dir

LEVEL_ENV_VAR = "TASKTREE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Handlers added by setup_logging, replaced on the next call
_installed: list[logging.Handler] = []


class _PackageFilter(logging.Filter):
    """Pass tasktree records; let third-party records through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "tasktree" or record.name.startswith("tasktree."):
            return True
        return record.levelno >= logging.ERROR


def resolve_level(level: str | None) -> int:
    """Turn a level name (or the environment default) into a logging level."""
    name = (level or os.environ.get(LEVEL_ENV_VAR) or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    *,
    level: str | None = None,
    log_dir: str | Path | None = None,
    console: bool = True,
) -> Path:
    """Configure root logging. Call once, before the first log call.

    Args:
        level: Level name for the file handler (defaults to
            TASKTREE_LOG_LEVEL, then INFO).
        log_dir: Directory for tasktree.log (defaults to the config dir).
        console: Add a WARNING-level stderr handler. Pass False when the
            TUI is about to take over the terminal.

    Returns:
        Path of the log file.
    """
    log_path = Path(log_dir) if log_dir else get_config_dir()
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / "tasktree.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    while _installed:
        handler = _installed.pop()
        root.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(resolve_level(level))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.addFilter(_PackageFilter())
    root.addHandler(file_handler)
    _installed.append(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        console_handler.addFilter(_PackageFilter())
        root.addHandler(console_handler)
        _installed.append(console_handler)

    return log_file
