"""TUI widgets for tasktree."""

from .progress_panel import ProgressPanel
from .tree_view import ExpansionToggled, TaskHighlighted, TaskTreeWidget

__all__ = [
    "TaskTreeWidget",
    "TaskHighlighted",
    "ExpansionToggled",
    "ProgressPanel",
]
