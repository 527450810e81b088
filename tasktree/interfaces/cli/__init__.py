"""CLI interface for tasktree using Typer.

Usage:
    tasktree run              # Open the interactive task tree
    tasktree show             # Print the starting forest
    tasktree progress         # Print root-level progress
    tasktree config show      # Print preferences

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer
from rich.console import Console

from tasktree import __version__
from tasktree.application import overall_progress, root_stats
from tasktree.global_config import Theme, get_preferences
from tasktree.interfaces.cli.commands import config
from tasktree.interfaces.cli.common import (
    build_rich_tree,
    load_start_forest,
    print_error,
    print_info,
)
from tasktree.logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tasktree",
    help="Hierarchical to-do list with nested subtasks",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tasktree version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log file level (or set TASKTREE_LOG_LEVEL)",
    ),
) -> None:
    """tasktree - organise work as a tree of tasks and subtasks."""
    # The TUI draws on the terminal, so it only logs to the file
    log_file = setup_logging(level=log_level, console=ctx.invoked_subcommand != "run")
    logger.debug(f"Logging to {log_file}")


app.add_typer(config.app, name="config")


@app.command("run")
def run(
    theme: Optional[Theme] = typer.Option(
        None, "--theme", "-t", help="Override the configured theme"
    ),
    empty: bool = typer.Option(
        False, "--empty", help="Start with no tasks instead of the examples"
    ),
) -> None:
    """Open the interactive task tree."""
    try:
        from tasktree.tui.app import TaskTreeApp
    except ImportError as e:
        print_error(f"Missing dependency - {e}")
        print_info("Install required packages: pip install textual")
        raise typer.Exit(1)

    preferences = get_preferences()
    forest = load_start_forest(empty=empty or not preferences.seed_on_start)
    logger.info(f"Starting session with {len(forest)} root tasks")
    TaskTreeApp(forest=forest, theme_choice=theme or preferences.theme).run()


@app.command("show")
def show(
    expand_all: bool = typer.Option(
        False, "--expand-all", "-a", help="Show collapsed subtasks too"
    ),
) -> None:
    """Print the starting forest as a tree."""
    forest = load_start_forest()
    Console().print(build_rich_tree(forest, expand_all=expand_all))


@app.command("progress")
def progress() -> None:
    """Print how many root tasks of the starting forest are completed."""
    forest = load_start_forest()
    stats = root_stats(forest)
    print_info(
        f"{stats.completed} / {stats.total} tasks completed "
        f"({overall_progress(forest)}%)"
    )
