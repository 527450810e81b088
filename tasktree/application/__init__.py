"""Application service layer for tasktree.

Services are pure functions over an explicit forest value; the caller
owns the forest and installs each returned value.

Services:
    tree_controller - Task creation, updates, deletion and progress queries
    editing - The single in-progress title edit

Example usage:
    >>> from tasktree.application import add_root_task, overall_progress, toggle_completed
    >>>
    >>> forest = add_root_task((), "Plan next sprint")
    >>> forest = toggle_completed(forest, forest[0].id)
    >>> overall_progress(forest)
    100.0
"""

from tasktree.application.editing import (
    VIEWING,
    EditState,
    begin_add_root,
    begin_add_subtask,
    cancel_edit,
    commit_edit,
    start_edit,
    update_draft,
)
from tasktree.application.tree_controller import (
    CompletionStats,
    add_root_task,
    add_subtask,
    completion_stats,
    delete_task,
    get_task,
    overall_progress,
    rename_task,
    root_stats,
    toggle_completed,
    toggle_expanded,
)

__all__ = [
    # Tree controller
    "add_root_task",
    "add_subtask",
    "rename_task",
    "toggle_completed",
    "toggle_expanded",
    "delete_task",
    "get_task",
    "completion_stats",
    "root_stats",
    "overall_progress",
    "CompletionStats",
    # Editing
    "EditState",
    "VIEWING",
    "start_edit",
    "update_draft",
    "cancel_edit",
    "commit_edit",
    "begin_add_root",
    "begin_add_subtask",
]
