"""Tree controller.

Translates user intents into task-model calls. Every operation takes the
caller's current forest and returns the next one; nothing is stored here.
An unknown id or a blank title turns an operation into a no-op, it never
raises.
"""

import logging
from collections.abc import Sequence
from typing import NamedTuple

from tasktree.domain.shared import Err, Ok, Result
from tasktree.domain.task import (
    Forest,
    Task,
    collect_ids,
    contains,
    find_node,
    insert_child,
    is_blank,
    map_node,
    new_task,
    remove_node,
)

logger = logging.getLogger(__name__)


class CompletionStats(NamedTuple):
    """Completed and total counts over one level of tasks."""

    completed: int
    total: int

    @property
    def progress_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total == 0:
            return 0.0
        return round(self.completed / self.total * 100, 1)


# =============================================================================
# Creation
# =============================================================================


def add_root_task(forest: Sequence[Task], title: str | None = None) -> Forest:
    """Append a new task as the last root.

    Args:
        forest: The current forest.
        title: Title for the new task. None gives the default title;
            a blank string discards the creation.

    Returns:
        New forest with the task appended.
    """
    if title is not None and is_blank(title):
        logger.debug("Discarded root task with blank title")
        return tuple(forest)
    task = new_task() if title is None else new_task(title.strip())
    logger.debug(f"Added root task {task.id}")
    return tuple(forest) + (task,)


def add_subtask(
    forest: Sequence[Task],
    parent_id: str,
    title: str | None = None,
) -> Forest:
    """Append a new subtask under ``parent_id`` and expand the parent.

    Args:
        forest: The current forest.
        parent_id: Id of the parent task.
        title: Title for the new task. None gives the default title;
            a blank string discards the creation.

    Returns:
        New forest, or an equal one if the parent does not exist.
    """
    if title is not None and is_blank(title):
        logger.debug(f"Discarded subtask of {parent_id} with blank title")
        return tuple(forest)
    if not contains(forest, parent_id):
        logger.debug(f"Parent {parent_id} not found, subtask not added")
        return tuple(forest)
    task = new_task() if title is None else new_task(title.strip())
    logger.debug(f"Added subtask {task.id} under {parent_id}")
    return insert_child(forest, parent_id, task)


# =============================================================================
# Updates
# =============================================================================


def rename_task(forest: Sequence[Task], task_id: str, text: str) -> Forest:
    """Set the title of ``task_id`` to the trimmed ``text``.

    A blank ``text`` discards the edit and returns an equal forest.
    """
    if is_blank(text):
        logger.debug(f"Discarded blank rename of {task_id}")
        return tuple(forest)
    title = text.strip()
    return map_node(forest, task_id, lambda node: node.model_copy(update={"title": title}))


def toggle_completed(forest: Sequence[Task], task_id: str) -> Forest:
    """Flip the completion flag of ``task_id`` only; subtasks are untouched."""
    return map_node(
        forest,
        task_id,
        lambda node: node.model_copy(update={"completed": not node.completed}),
    )


def toggle_expanded(forest: Sequence[Task], task_id: str) -> Forest:
    """Flip the expansion flag of ``task_id``."""
    return map_node(
        forest,
        task_id,
        lambda node: node.model_copy(update={"is_expanded": not node.is_expanded}),
    )


def delete_task(forest: Sequence[Task], task_id: str) -> Forest:
    """Remove ``task_id`` and its entire subtree."""
    node = find_node(forest, task_id)
    if node is None:
        logger.debug(f"Delete ignored, no task {task_id}")
        return tuple(forest)
    removed = collect_ids((node,))
    logger.debug(f"Deleting task {task_id} and {len(removed) - 1} descendant(s)")
    return remove_node(forest, task_id)


# =============================================================================
# Queries
# =============================================================================


def get_task(forest: Sequence[Task], task_id: str) -> Result[Task, str]:
    """Look up a task by id.

    Returns:
        Ok(Task) if found, or Err(str) if no task has that id.
    """
    task = find_node(forest, task_id)
    if task is None:
        return Err(f"Task not found: {task_id}")
    return Ok(task)


def completion_stats(node: Task) -> CompletionStats:
    """Count completed tasks among the direct subtasks of ``node``.

    Grandchildren are not counted.
    """
    done = sum(1 for child in node.subtasks if child.completed)
    return CompletionStats(completed=done, total=len(node.subtasks))


def root_stats(forest: Sequence[Task]) -> CompletionStats:
    """Count completed tasks among the roots of the forest."""
    done = sum(1 for root in forest if root.completed)
    return CompletionStats(completed=done, total=len(forest))


def overall_progress(forest: Sequence[Task]) -> float:
    """Percentage of root tasks that are completed.

    Returns:
        A value in [0, 100]; 0 for an empty forest.
    """
    return root_stats(forest).progress_percent
