"""Task tree widget for the tasktree TUI."""

from collections.abc import Sequence
from typing import Optional

from rich.markup import escape
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Tree
from textual.widgets.tree import TreeNode

from tasktree.application import completion_stats
from tasktree.domain.task import Task


# Completion icons
DONE_ICON = "[green]☑[/green]"  # Checked box
OPEN_ICON = "[dim]☐[/dim]"  # Empty box


def format_label(task: Task) -> str:
    """Build the markup label for one task."""
    icon = DONE_ICON if task.completed else OPEN_ICON
    title = escape(task.title)
    if task.completed:
        title = f"[strike]{title}[/strike]"
    if task.is_leaf():
        return f"{icon} {title}"
    stats = completion_stats(task)
    return f"{icon} [bold]{title}[/bold] [dim]({stats.completed}/{stats.total})[/dim]"


class TaskHighlighted(Message):
    """Posted when the cursor moves to a task (None when the tree is empty)."""

    def __init__(self, task: Optional[Task]) -> None:
        super().__init__()
        self.task = task


class ExpansionToggled(Message):
    """Posted when the user expands or collapses a task with the mouse."""

    def __init__(self, task_id: str) -> None:
        super().__init__()
        self.task_id = task_id


class TaskTreeWidget(Tree[Task]):
    """Read-only view of a forest.

    The widget never changes the forest itself. Expansion follows each
    task's ``is_expanded`` flag; user toggles are reported to the app,
    which installs a new forest and reloads the widget.
    """

    BINDINGS = [
        Binding("space", "app.toggle_completed", "Done", show=True),
        Binding("enter", "app.toggle_expanded", "Expand", show=True),
    ]

    DEFAULT_CSS = """
    TaskTreeWidget {
        background: $surface;
        padding: 1;
        border: solid $primary;
    }

    TaskTreeWidget > .tree--cursor {
        background: $accent;
        color: $text;
    }

    TaskTreeWidget:focus > .tree--cursor {
        background: $primary;
    }
    """

    def __init__(
        self,
        label: str = "Tasks",
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(label, id=id, classes=classes)
        self.set_reactive(Tree.show_root, False)
        self.set_reactive(Tree.auto_expand, False)
        self._forest: tuple[Task, ...] = ()
        self._task_nodes: dict[str, TreeNode[Task]] = {}  # task id -> node

    def load_forest(self, forest: Sequence[Task], cursor_id: Optional[str] = None) -> None:
        """Rebuild the widget from a forest.

        Args:
            forest: The forest to display.
            cursor_id: Task to place the cursor on; defaults to the first row.
        """
        self._forest = tuple(forest)
        self._task_nodes.clear()
        self.clear()

        for task in self._forest:
            self._add_task_node(self.root, task)
        self.root.expand()

        target = self._task_nodes.get(cursor_id) if cursor_id else None
        self.call_after_refresh(self._restore_cursor, target)

    def _add_task_node(self, parent: TreeNode[Task], task: Task) -> None:
        """Recursively add a task and its subtasks."""
        label = format_label(task)
        if task.is_leaf():
            node = parent.add_leaf(label, data=task)
        else:
            node = parent.add(label, data=task, expand=task.is_expanded)
            for child in task.subtasks:
                self._add_task_node(node, child)
        self._task_nodes[task.id] = node

    def _restore_cursor(self, target: Optional[TreeNode[Task]]) -> None:
        if target is not None:
            self.move_cursor(target)
        elif self._forest:
            self.cursor_line = 0
        self.post_message(TaskHighlighted(self.get_selected_task()))

    def get_selected_task(self) -> Optional[Task]:
        """Get the task under the cursor, if any."""
        cursor_node = self.cursor_node
        if cursor_node is None:
            return None
        return cursor_node.data

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted[Task]) -> None:
        event.stop()
        self.post_message(TaskHighlighted(event.node.data))

    def on_tree_node_expanded(self, event: Tree.NodeExpanded[Task]) -> None:
        event.stop()
        self._report_toggle(event.node)

    def on_tree_node_collapsed(self, event: Tree.NodeCollapsed[Task]) -> None:
        event.stop()
        self._report_toggle(event.node)

    def _report_toggle(self, node: TreeNode[Task]) -> None:
        # Nodes opened while loading already match their task
        task = node.data
        if task is not None and node.is_expanded != task.is_expanded:
            self.post_message(ExpansionToggled(task.id))

    @property
    def forest(self) -> tuple[Task, ...]:
        """The forest currently displayed."""
        return self._forest
