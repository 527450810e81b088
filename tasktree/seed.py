"""Seed forest shown when a session starts.

Parents are expanded so the whole example is visible on first render.
Ids are generated on every load.
"""

from typing import Any

from pydantic import ValidationError

from tasktree.domain.shared import Err, Result
from tasktree.domain.task import Forest, Task, validate_forest

SEED_DATA: list[dict[str, Any]] = [
    {
        "title": "Complete project documentation",
        "isExpanded": True,
        "subtasks": [
            {
                "title": "Write API documentation",
                "isExpanded": True,
                "subtasks": [{"title": "Research best practices"}],
            },
            {
                "title": "Create user guide",
                "isExpanded": True,
                "subtasks": [
                    {"title": "Add screenshots"},
                    {"title": "Record demo videos"},
                ],
            },
        ],
    },
    {
        "title": "Review code changes",
        "isExpanded": True,
        "subtasks": [{"title": "Check unit tests"}],
    },
    {"title": "Plan next sprint"},
    {"title": "Design system updates"},
]


def build_forest(data: list[dict[str, Any]]) -> Result[Forest, str]:
    """Build and validate a forest from nested task dicts.

    Missing ids are generated. Keys may use either ``isExpanded`` or
    ``is_expanded``.
    """
    try:
        forest = tuple(Task.model_validate(item) for item in data)
    except ValidationError as e:
        return Err(f"Invalid task data: {e.error_count()} error(s)")
    return validate_forest(forest)


def seed_forest() -> Result[Forest, str]:
    """Build the default seed forest."""
    return build_forest(SEED_DATA)
