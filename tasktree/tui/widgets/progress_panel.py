"""Progress panel widget for the tasktree TUI."""

from collections.abc import Sequence
from typing import Optional

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import ProgressBar, Static

from tasktree.application import CompletionStats, completion_stats, root_stats
from tasktree.domain.task import Task


class ProgressPanel(Static):
    """Overall root-level progress plus the subtask progress of the selection."""

    DEFAULT_CSS = """
    ProgressPanel {
        background: $surface;
        padding: 1 2;
        border: solid $primary;
        height: auto;
    }

    ProgressPanel .progress-header {
        text-style: bold;
        margin-bottom: 1;
    }

    ProgressPanel ProgressBar {
        width: 100%;
        margin: 0 0 1 0;
    }

    ProgressPanel .no-selection {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._overall: Optional[CompletionStats] = None
        self._selected: Optional[Task] = None

    def compose(self) -> ComposeResult:
        """Create the panel structure."""
        with Vertical():
            yield Static("Progress", classes="progress-header")
            yield Static("0 / 0 tasks (0.0%)", id="overall-label")
            yield ProgressBar(total=100, show_eta=False, id="overall-bar")
            yield Static("No task selected", id="selected-label", classes="no-selection")
            yield ProgressBar(total=100, show_eta=False, id="selected-bar")

    def on_mount(self) -> None:
        self.query_one("#selected-bar", ProgressBar).display = False

    def update_forest(self, forest: Sequence[Task]) -> None:
        """Show root-level progress for a new forest."""
        self._overall = root_stats(forest)
        label = self.query_one("#overall-label", Static)
        label.update(
            f"{self._overall.completed} / {self._overall.total} tasks "
            f"({self._overall.progress_percent}%)"
        )
        self.query_one("#overall-bar", ProgressBar).update(
            total=100, progress=self._overall.progress_percent
        )

    def update_selection(self, task: Optional[Task]) -> None:
        """Show direct-subtask progress for the selected task."""
        self._selected = task
        label = self.query_one("#selected-label", Static)
        bar = self.query_one("#selected-bar", ProgressBar)

        if task is None:
            label.update("No task selected")
            bar.display = False
            return

        if task.is_leaf():
            label.update(f"{escape(task.title)}: no subtasks")
            bar.display = False
            return

        stats = completion_stats(task)
        label.update(
            f"{escape(task.title)}: {stats.completed} / {stats.total} subtasks "
            f"({stats.progress_percent}%)"
        )
        bar.update(total=100, progress=stats.progress_percent)
        bar.display = True

    @property
    def overall_stats(self) -> Optional[CompletionStats]:
        """The root-level stats last shown."""
        return self._overall
