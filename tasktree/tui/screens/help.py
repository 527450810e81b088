"""Keyboard shortcut reference."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Label


class HelpModal(ModalScreen):
    """Modal dialog showing keybinding help."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("question_mark", "dismiss", "Close"),
    ]

    CSS = """
    HelpModal {
        align: center middle;
    }

    #help-modal {
        width: 60;
        height: auto;
        max-height: 30;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
        color: $primary;
    }

    .help-section-title {
        text-style: bold;
        color: $secondary;
    }

    .help-row {
        layout: horizontal;
        height: 1;
    }

    .help-key {
        width: 15;
        color: $warning;
    }

    .help-desc {
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        """Compose the help modal content."""
        with Container(id="help-modal"):
            yield Label("tasktree - Keyboard Shortcuts", id="help-title")

            yield Label("Tasks", classes="help-section-title")
            yield self._help_row("a", "Add a root task")
            yield self._help_row("s", "Add a subtask to the selection")
            yield self._help_row("e / F2", "Rename the selected task")
            yield self._help_row("Space", "Toggle completed")
            yield self._help_row("Enter", "Expand / collapse")
            yield self._help_row("d / Delete", "Delete task and its subtasks")

            yield Label("Editing", classes="help-section-title")
            yield self._help_row("Enter", "Save the title")
            yield self._help_row("Escape", "Discard the edit")

            yield Label("Application", classes="help-section-title")
            yield self._help_row("t", "Switch dark / light theme")
            yield self._help_row("?", "Show this help")
            yield self._help_row("q", "Quit application")

            yield Label("")
            yield Label("Press Escape or ? to close", id="help-footer")

    def _help_row(self, key: str, description: str) -> Horizontal:
        """Create a help row with key and description."""
        return Horizontal(
            Label(f"  {key}", classes="help-key"),
            Label(description, classes="help-desc"),
            classes="help-row",
        )
