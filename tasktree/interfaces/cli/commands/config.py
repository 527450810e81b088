"""Preference commands: show and change the stored configuration."""

import typer

from tasktree.global_config import Theme, get_config_dir, get_preferences, save_preferences
from tasktree.interfaces.cli.common import print_info, print_success

app = typer.Typer(help="Show or change preferences")


@app.command("show")
def show() -> None:
    """Print the current preferences."""
    preferences = get_preferences()
    print_info(f"Config dir:    {get_config_dir()}")
    print_info(f"Theme:         {preferences.theme.value}")
    print_info(f"Seed on start: {'yes' if preferences.seed_on_start else 'no'}")


@app.command("set-theme")
def set_theme(
    theme: Theme = typer.Argument(..., help="dark or light"),
) -> None:
    """Choose the color theme of the terminal interface."""
    preferences = get_preferences().model_copy(update={"theme": theme})
    save_preferences(preferences)
    print_success(f"Theme set to {theme.value}")


@app.command("set-seed")
def set_seed(
    enabled: bool = typer.Option(
        True, "--on/--off", help="Start sessions with the example tasks"
    ),
) -> None:
    """Choose whether new sessions start with the example tasks."""
    preferences = get_preferences().model_copy(update={"seed_on_start": enabled})
    save_preferences(preferences)
    print_success(f"Seed on start {'enabled' if enabled else 'disabled'}")
