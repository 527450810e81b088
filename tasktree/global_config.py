"""Global configuration storage for tasktree.

Stores user preferences in ~/.tasktree/config.json. Set TASKTREE_HOME to
use another directory. Task data itself is never written to disk.
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "TASKTREE_HOME"


class Theme(str, Enum):
    """Color theme of the terminal interface."""

    DARK = "dark"
    LIGHT = "light"


class Preferences(BaseModel):
    """User preferences."""

    theme: Theme = Theme.DARK
    seed_on_start: bool = True  # start sessions with the example forest


def get_config_dir() -> Path:
    """Get the tasktree config directory, creating it if needed."""
    override = os.environ.get(HOME_ENV_VAR)
    config_dir = Path(override) if override else Path.home() / ".tasktree"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_preferences() -> Preferences:
    """Load preferences, falling back to defaults if missing or unreadable."""
    config_file = get_config_dir() / "config.json"
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return Preferences(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring unreadable config {config_file}: {e}")
    return Preferences()  # defaults


def save_preferences(preferences: Preferences) -> None:
    """Save preferences."""
    config_file = get_config_dir() / "config.json"
    config_file.write_text(
        json.dumps(preferences.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
