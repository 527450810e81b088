"""Main tasktree TUI application.

TaskTreeApp owns the session state: the current forest and the single
in-progress title edit. Every action hands the forest to an application
service, installs the returned forest and redraws the widgets.
"""

import logging
from collections.abc import Sequence
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from tasktree.application import (
    VIEWING,
    EditState,
    begin_add_root,
    begin_add_subtask,
    cancel_edit,
    commit_edit,
    delete_task,
    get_task,
    start_edit,
    toggle_completed,
    toggle_expanded,
    update_draft,
)
from tasktree.domain.shared import unwrap_or
from tasktree.domain.task import Forest, Task
from tasktree.global_config import Theme
from tasktree.tui.screens import EditTitleModal, HelpModal
from tasktree.tui.widgets import ExpansionToggled, ProgressPanel, TaskHighlighted, TaskTreeWidget

logger = logging.getLogger(__name__)

TEXTUAL_THEMES = {
    Theme.DARK: "textual-dark",
    Theme.LIGHT: "textual-light",
}


class TaskTreeApp(App):
    """Interactive hierarchical to-do list."""

    TITLE = "tasktree"
    SUB_TITLE = "Organize your work"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    TaskTreeWidget {
        width: 2fr;
        height: 100%;
    }

    ProgressPanel {
        width: 1fr;
    }

    Footer {
        dock: bottom;
        height: 1;
    }
    """

    BINDINGS = [
        Binding("a", "add_root", "Add Task", show=True),
        Binding("s", "add_subtask", "Add Subtask", show=True),
        Binding("e", "edit_title", "Rename", show=True),
        Binding("f2", "edit_title", "Rename", show=False),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("delete", "delete_task", "Delete", show=False),
        Binding("t", "toggle_theme", "Theme", show=True),
        Binding("question_mark", "show_help", "Help", show=True, key_display="?"),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        forest: Sequence[Task] = (),
        theme_choice: Theme = Theme.DARK,
    ) -> None:
        """Initialize the app.

        Args:
            forest: The forest the session starts with.
            theme_choice: Initial color theme.
        """
        super().__init__()
        self._forest: Forest = tuple(forest)
        self._edit_state: EditState = VIEWING
        self._theme_choice = theme_choice

    @property
    def forest(self) -> Forest:
        """The current forest."""
        return self._forest

    @property
    def edit_state(self) -> EditState:
        """The current edit state."""
        return self._edit_state

    @property
    def theme_choice(self) -> Theme:
        """The active color theme."""
        return self._theme_choice

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-container"):
            yield TaskTreeWidget(id="task-tree")
            yield ProgressPanel(id="progress-panel")
        yield Footer()

    def on_mount(self) -> None:
        self._apply_theme()
        self._install(self._forest)
        self.query_one(TaskTreeWidget).focus()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_add_root(self) -> None:
        """Add a task at the end of the forest and rename it."""
        forest, state = begin_add_root(self._forest, self._edit_state)
        self._begin_edit(forest, state)

    def action_add_subtask(self) -> None:
        """Add a subtask under the selected task and rename it."""
        task = self._selected_task()
        if task is None:
            self.notify("No task selected", severity="warning")
            return
        forest, state = begin_add_subtask(self._forest, task.id, self._edit_state)
        self._begin_edit(forest, state)

    def action_edit_title(self) -> None:
        """Rename the selected task."""
        task = self._selected_task()
        if task is None:
            self.notify("No task selected", severity="warning")
            return
        self._begin_edit(self._forest, start_edit(self._edit_state, task))

    def action_toggle_completed(self) -> None:
        """Toggle completion of the selected task."""
        task = self._selected_task()
        if task is None:
            return
        self._install(toggle_completed(self._forest, task.id), cursor_id=task.id)

    def action_toggle_expanded(self) -> None:
        """Expand or collapse the selected task."""
        task = self._selected_task()
        if task is None:
            return
        self._install(toggle_expanded(self._forest, task.id), cursor_id=task.id)

    def action_delete_task(self) -> None:
        """Delete the selected task with all of its subtasks."""
        task = self._selected_task()
        if task is None:
            self.notify("No task selected", severity="warning")
            return
        self._install(delete_task(self._forest, task.id))
        self.notify(f"Deleted: {task.title}", severity="information")

    def action_toggle_theme(self) -> None:
        """Switch between the dark and light themes."""
        self._theme_choice = Theme.LIGHT if self._theme_choice == Theme.DARK else Theme.DARK
        self._apply_theme()

    def action_show_help(self) -> None:
        """Show the help modal with keybinding reference."""
        self.push_screen(HelpModal())

    # =========================================================================
    # Messages
    # =========================================================================

    def on_task_highlighted(self, message: TaskHighlighted) -> None:
        self.query_one(ProgressPanel).update_selection(message.task)

    def on_expansion_toggled(self, message: ExpansionToggled) -> None:
        self._install(toggle_expanded(self._forest, message.task_id), cursor_id=message.task_id)

    def on_edit_title_modal_draft_changed(self, message: EditTitleModal.DraftChanged) -> None:
        self._edit_state = update_draft(self._edit_state, message.text)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def _selected_task(self) -> Optional[Task]:
        """Get the selected task as it is in the current forest."""
        task = self.query_one(TaskTreeWidget).get_selected_task()
        if task is None:
            return None
        return unwrap_or(get_task(self._forest, task.id), None)

    def _begin_edit(self, forest: Forest, state: EditState) -> None:
        """Install ``forest`` and open the edit dialog for ``state``."""
        self._install(forest, cursor_id=state.editing_id)
        self._edit_state = state
        if state.is_editing:
            self.push_screen(EditTitleModal(state.draft), self._finish_edit)

    def _finish_edit(self, result: Optional[str]) -> None:
        """Commit or discard the edit once the dialog closes."""
        editing_id = self._edit_state.editing_id
        if result is None:
            self._edit_state = cancel_edit(self._edit_state)
            return
        state = update_draft(self._edit_state, result)
        forest, self._edit_state = commit_edit(self._forest, state)
        self._install(forest, cursor_id=editing_id)

    def _install(self, forest: Forest, cursor_id: Optional[str] = None) -> None:
        """Make ``forest`` the current forest and redraw."""
        self._forest = forest
        self.query_one(TaskTreeWidget).load_forest(forest, cursor_id=cursor_id)
        self.query_one(ProgressPanel).update_forest(forest)

    def _apply_theme(self) -> None:
        self.theme = TEXTUAL_THEMES[self._theme_choice]


__all__ = ["TaskTreeApp"]
