"""Shared utilities for tasktree CLI commands.

- Formatted output helpers (error, success, info)
- Task and forest formatting for display
- Loading the starting forest for a session
"""

from collections.abc import Sequence

import typer
from rich.markup import escape
from rich.tree import Tree as RichTree

from tasktree.application import completion_stats, root_stats
from tasktree.domain.shared import is_err
from tasktree.domain.task import Forest, Task, count_nodes
from tasktree.seed import seed_forest

# Escaped so Rich does not read the brackets as markup tags
CHECKED = escape("[x]")
UNCHECKED = escape("[ ]")


def print_error(msg: str) -> None:
    """Print a formatted error message to stderr."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print an informational message."""
    typer.echo(msg)


def format_task_label(task: Task) -> str:
    """Format one task as Rich markup: checkbox, title and subtask counter.

    The counter covers direct subtasks only and is omitted for leaves.
    """
    box = f"[green]{CHECKED}[/green]" if task.completed else f"[dim]{UNCHECKED}[/dim]"
    title = escape(task.title)
    if task.completed:
        title = f"[strike]{title}[/strike]"
    if task.is_leaf():
        return f"{box} {title}"
    stats = completion_stats(task)
    return f"{box} [bold]{title}[/bold] [cyan]({stats.completed}/{stats.total})[/cyan]"


def build_rich_tree(forest: Sequence[Task], expand_all: bool = False) -> RichTree:
    """Build a Rich tree for the forest.

    Collapsed tasks hide their subtasks unless ``expand_all`` is set.
    """
    stats = root_stats(forest)
    tree = RichTree(
        f"[bold]Tasks[/bold] {stats.completed}/{stats.total} done "
        f"({stats.progress_percent}%), {count_nodes(forest)} tasks in all"
    )

    def add(branch: RichTree, task: Task) -> None:
        node = branch.add(format_task_label(task))
        if task.subtasks and (expand_all or task.is_expanded):
            for child in task.subtasks:
                add(node, child)

    for root in forest:
        add(tree, root)
    return tree


def load_start_forest(empty: bool = False) -> Forest:
    """Return the forest a new session starts with.

    Raises:
        typer.Exit: If the seed data does not form a valid forest.
    """
    if empty:
        return ()
    result = seed_forest()
    if is_err(result):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value
