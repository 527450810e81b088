"""Structural checks for forests coming from outside the controller.

Forests built only through the controller satisfy these by construction;
fixture data and hand-written seeds are checked before use.
"""

from collections.abc import Sequence

from tasktree.domain.shared import Err, Ok, Result

from .models import Forest, Task
from .traversal import iter_nodes


def is_blank(text: str) -> bool:
    """Check whether a candidate title is empty or whitespace only."""
    return not text.strip()


def validate_forest(forest: Sequence[Task]) -> Result[Forest, str]:
    """Check that ids are unique across all depths and titles are non-blank.

    Args:
        forest: The forest to check.

    Returns:
        Ok(forest as a tuple) when valid, or Err(str) describing the
        first problem found.
    """
    seen: set[str] = set()
    for node, depth in iter_nodes(forest):
        if node.id in seen:
            return Err(f"Duplicate task id: {node.id}")
        seen.add(node.id)
        if is_blank(node.title):
            return Err(f"Task {node.id} at depth {depth} has an empty title")
    return Ok(tuple(forest))
