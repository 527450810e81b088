"""Task domain - the task forest and its pure update primitives.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - Node of the forest (frozen pydantic model)
    Forest - Ordered tuple of root tasks

Traversal Functions:
    fold_forest - Fundamental fold operation
    iter_nodes - Depth-first walk with depths
    map_node - Replace one node by id
    insert_child - Append a subtask under a parent
    remove_node - Delete a node and its subtree
    find_node - Look a node up by id
"""

from .models import DEFAULT_TITLE, Forest, Task, generate_id, new_task
from .traversal import (
    collect_ids,
    contains,
    count_nodes,
    find_node,
    fold_forest,
    insert_child,
    iter_nodes,
    map_node,
    remove_node,
)
from .validation import is_blank, validate_forest

__all__ = [
    # Models
    "Task",
    "Forest",
    "DEFAULT_TITLE",
    "generate_id",
    "new_task",
    # Traversal - fundamental
    "fold_forest",
    "iter_nodes",
    "map_node",
    "insert_child",
    "remove_node",
    # Traversal - queries
    "find_node",
    "contains",
    "collect_ids",
    "count_nodes",
    # Validation
    "is_blank",
    "validate_forest",
]
