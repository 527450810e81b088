"""Title edit dialog.

Dismisses with the entered text on Enter and with None on Escape. Blank
text is still returned; the app's edit state decides to discard it.
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container
from textual.message import Message
from textual.screen import ModalScreen
from textual.widgets import Input, Label


class EditTitleModal(ModalScreen[Optional[str]]):
    """Modal with a single input prefilled with the current draft."""

    class DraftChanged(Message):
        """Posted on every keystroke so the app can track the draft."""

        def __init__(self, text: str) -> None:
            super().__init__()
            self.text = text

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    CSS = """
    EditTitleModal {
        align: center middle;
    }

    #edit-modal {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #edit-hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    def __init__(self, draft: str, heading: str = "Task title") -> None:
        super().__init__()
        self._draft = draft
        self._heading = heading

    def compose(self) -> ComposeResult:
        with Container(id="edit-modal"):
            yield Label(self._heading)
            yield Input(value=self._draft, placeholder="Enter task title...", id="title-input")
            yield Label("Press Enter to save, Esc to cancel", id="edit-hint")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.DraftChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
