"""CLI command groups for tasktree.

Command groups:
- config: Preference management (show, set-theme, set-seed)

Each command group is a Typer app registered with the main app using
app.add_typer().
"""

from tasktree.interfaces.cli.commands import config

__all__ = ["config"]
