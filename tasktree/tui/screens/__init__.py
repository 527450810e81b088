"""TUI screens for tasktree."""

from .edit import EditTitleModal
from .help import HelpModal

__all__ = [
    "EditTitleModal",
    "HelpModal",
]
