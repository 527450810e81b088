"""Entry point for the tasktree CLI.

Usage:
    python -m tasktree.interfaces.cli.main

Or via installed entry point:
    tasktree <command>
"""

from tasktree.interfaces.cli import app


def main() -> None:
    """Run the tasktree CLI application."""
    app()


if __name__ == "__main__":
    main()
