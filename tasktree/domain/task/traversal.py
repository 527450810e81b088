"""Pure forest traversal combinators.

All functions in this module are pure - no I/O, no side effects. They take
a forest in and return a new forest (or a value computed from it); the
input is never modified. Every walk visits the whole forest, so a node is
found at any depth.

Read-only walks (``iter_nodes``, ``fold_forest`` and the queries built on
them) use an explicit stack and handle any depth. The rebuilding
primitives ``map_node`` and ``remove_node`` recurse once per level, so
they are bounded by the interpreter's recursion limit: with the default
limit of 1000 that is a few hundred levels of nesting.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from .models import Forest, Task

T = TypeVar("T")


# =============================================================================
# Fundamental Operations
# =============================================================================


def fold_forest(
    forest: Sequence[Task],
    initial: T,
    f: Callable[[T, Task, int], T],
) -> T:
    """Fold over every node in the forest, depth-first.

    Args:
        forest: The forest to fold over
        initial: Starting accumulator value
        f: Function (accumulator, node, depth) -> new_accumulator,
           where roots have depth 0

    Returns:
        Final accumulated value after visiting all nodes
    """
    result = initial
    for node, depth in iter_nodes(forest):
        result = f(result, node, depth)
    return result


def iter_nodes(forest: Sequence[Task]) -> Iterator[tuple[Task, int]]:
    """Yield ``(node, depth)`` for every node in display order."""
    # Reversed pushes so siblings pop in their original order
    stack = [(root, 0) for root in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.subtasks))


def map_node(
    forest: Sequence[Task],
    target_id: str,
    transform: Callable[[Task], Task],
) -> Forest:
    """Replace the node with ``target_id`` by ``transform(node)``.

    Every level is rebuilt, including the ones below an already matched
    node. Ids are expected to be unique; if they are not, every matching
    node is transformed. When nothing matches, the result is a new forest
    equal in content to the input.

    Args:
        forest: The forest to update
        target_id: Id of the node to transform
        transform: Function (node) -> new_node

    Returns:
        New forest with the matching node replaced
    """

    def visit(node: Task) -> Task:
        if node.subtasks:
            node = node.model_copy(
                update={"subtasks": map_node(node.subtasks, target_id, transform)}
            )
        if node.id == target_id:
            return transform(node)
        return node

    return tuple(visit(node) for node in forest)


def insert_child(forest: Sequence[Task], parent_id: str, new_node: Task) -> Forest:
    """Append ``new_node`` as the last subtask of ``parent_id``.

    The parent is expanded so the new child is visible straight away.
    An unknown parent leaves the forest unchanged.
    """

    def append(parent: Task) -> Task:
        return parent.model_copy(
            update={"subtasks": parent.subtasks + (new_node,), "is_expanded": True}
        )

    return map_node(forest, parent_id, append)


def remove_node(forest: Sequence[Task], target_id: str) -> Forest:
    """Remove the node with ``target_id`` together with its whole subtree.

    The id is filtered out of the roots and, recursively, out of the
    subtasks of every surviving node.
    """
    return tuple(
        node.model_copy(update={"subtasks": remove_node(node.subtasks, target_id)})
        if node.subtasks
        else node
        for node in forest
        if node.id != target_id
    )


# =============================================================================
# Queries
# =============================================================================


def find_node(forest: Sequence[Task], target_id: str) -> Task | None:
    """Find a node by id anywhere in the forest.

    Returns:
        The first matching node (depth-first), or None
    """
    for node, _ in iter_nodes(forest):
        if node.id == target_id:
            return node
    return None


def contains(forest: Sequence[Task], target_id: str) -> bool:
    """Check whether a node with ``target_id`` exists at any depth."""
    return find_node(forest, target_id) is not None


def collect_ids(forest: Sequence[Task]) -> list[str]:
    """Return every id in the forest in display order."""

    def collect(acc: list[str], node: Task, depth: int) -> list[str]:
        acc.append(node.id)
        return acc

    return fold_forest(forest, [], collect)


def count_nodes(forest: Sequence[Task]) -> int:
    """Count every node in the forest, at every depth."""
    return fold_forest(forest, 0, lambda acc, node, depth: acc + 1)
