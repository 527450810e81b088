"""Task domain models.

Pure domain models for the task forest. Tasks are frozen pydantic models:
every change produces a new node through ``model_copy``, never an in-place
mutation, so an old forest value stays valid after an update.
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TITLE = "New task"


def generate_id() -> str:
    """Generate a fresh task id.

    Ids are random 128-bit values rendered as hex; collisions are not
    checked for.
    """
    return uuid4().hex


class Task(BaseModel):
    """A node in the task forest.

    ``completed`` belongs to this node alone and never follows from the
    state of its subtasks. ``is_expanded`` is a display flag only.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=generate_id)
    title: str
    completed: bool = False
    subtasks: tuple["Task", ...] = ()
    is_expanded: bool = Field(default=False, alias="isExpanded")

    def is_leaf(self) -> bool:
        """Check if this task has no subtasks."""
        return len(self.subtasks) == 0


# An ordered sequence of root tasks. Operations accept any sequence and
# always hand back a tuple.
Forest = tuple[Task, ...]


def new_task(title: str = DEFAULT_TITLE) -> Task:
    """Create a task with default fields and a freshly generated id."""
    return Task(id=generate_id(), title=title)
