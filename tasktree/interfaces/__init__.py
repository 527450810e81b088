"""Interfaces layer for tasktree.

Adapters for external interaction:
- CLI: Command-line interface using Typer
- TUI: Terminal UI using Textual (in tasktree/tui/)

The interfaces layer accepts user input, calls application services and
formats output; it holds no tree logic of its own.
"""
