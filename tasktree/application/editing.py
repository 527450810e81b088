"""Title editing state.

The presentation layer holds one ``EditState`` value next to its forest.
It is either viewing (no edit in progress) or editing exactly one task
with a draft title. The forest only changes when a non-blank draft is
committed; cancelling or committing a blank draft throws the draft away.
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel

from tasktree.application.tree_controller import add_root_task, add_subtask, rename_task
from tasktree.domain.task import Forest, Task, find_node

logger = logging.getLogger(__name__)


class EditState(BaseModel):
    """The single in-progress title edit, if any."""

    editing_id: str | None = None
    draft: str = ""

    model_config = {"frozen": True}

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


VIEWING = EditState()


def start_edit(state: EditState, task: Task) -> EditState:
    """Start editing ``task`` with its current title as the draft.

    Any other edit in progress is dropped without being committed.
    """
    if state.is_editing and state.editing_id != task.id:
        logger.debug(f"Discarding uncommitted edit of {state.editing_id}")
    return EditState(editing_id=task.id, draft=task.title)


def update_draft(state: EditState, text: str) -> EditState:
    """Replace the draft text. Does nothing while viewing."""
    if not state.is_editing:
        return state
    return state.model_copy(update={"draft": text})


def cancel_edit(state: EditState) -> EditState:
    """Drop the draft and go back to viewing."""
    return VIEWING


def commit_edit(forest: Sequence[Task], state: EditState) -> tuple[Forest, EditState]:
    """Apply the draft as the new title and go back to viewing.

    Returns:
        (forest, VIEWING). The forest is unchanged when nothing was being
        edited or the draft is blank.
    """
    if state.editing_id is None:
        return tuple(forest), VIEWING
    return rename_task(forest, state.editing_id, state.draft), VIEWING


def begin_add_root(forest: Sequence[Task], state: EditState) -> tuple[Forest, EditState]:
    """Add a root task and start editing its title."""
    updated = add_root_task(forest)
    return updated, start_edit(state, updated[-1])


def begin_add_subtask(
    forest: Sequence[Task],
    parent_id: str,
    state: EditState,
) -> tuple[Forest, EditState]:
    """Add a subtask under ``parent_id`` and start editing its title.

    An unknown parent leaves both the forest and the edit state as they were.
    """
    updated = add_subtask(forest, parent_id)
    parent = find_node(updated, parent_id)
    if parent is None:
        return tuple(forest), state
    return updated, start_edit(state, parent.subtasks[-1])
