"""Tests for the Textual app, driven through the pilot."""

import pytest
from textual.widgets import Input

from tasktree.domain.task import DEFAULT_TITLE, find_node
from tasktree.global_config import Theme
from tasktree.tui.app import TaskTreeApp
from tasktree.tui.screens import EditTitleModal, HelpModal
from tasktree.tui.widgets import ProgressPanel, TaskTreeWidget
from tasktree.tui.widgets.tree_view import format_label


class TestFormatLabel:
    """Tests for tree labels."""

    def test_leaf(self, task_factory):
        label = format_label(task_factory("x", title="Plan"))
        assert "Plan" in label
        assert "(" not in label

    def test_parent_counter(self, task_factory):
        task = task_factory(
            "p", title="Docs", subtasks=[task_factory("a", completed=True), task_factory("b")]
        )
        assert "(1/2)" in format_label(task)

    def test_markup_in_title_escaped(self, task_factory):
        label = format_label(task_factory("x", title="[bold]literal"))
        assert "\\[bold]literal" in label


@pytest.mark.asyncio
async def test_mount_shows_forest(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        tree = app.query_one(TaskTreeWidget)
        assert tree.forest == forest
        assert tree.get_selected_task().id == "docs"
        assert app.query_one(ProgressPanel).overall_stats == (0, 2)


@pytest.mark.asyncio
async def test_space_toggles_completed(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("space")
        await pilot.pause()
        assert find_node(app.forest, "docs").completed is True
        assert find_node(app.forest, "api").completed is False
        assert app.query_one(ProgressPanel).overall_stats == (1, 2)


@pytest.mark.asyncio
async def test_enter_toggles_expanded(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()
        assert find_node(app.forest, "docs").is_expanded is True


@pytest.mark.asyncio
async def test_add_subtask_and_commit(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("s")
        await pilot.pause()
        assert isinstance(app.screen, EditTitleModal)
        assert app.edit_state.is_editing

        app.screen.query_one(Input).value = "Write changelog"
        await pilot.press("enter")
        await pilot.pause()

        docs = find_node(app.forest, "docs")
        assert docs.is_expanded is True
        assert docs.subtasks[-1].title == "Write changelog"
        assert not app.edit_state.is_editing


@pytest.mark.asyncio
async def test_add_root_then_cancel_keeps_default_title(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("a")
        await pilot.pause()
        app.screen.query_one(Input).value = "Discarded"
        await pilot.press("escape")
        await pilot.pause()

        assert len(app.forest) == 3
        assert app.forest[-1].title == DEFAULT_TITLE
        assert not app.edit_state.is_editing


@pytest.mark.asyncio
async def test_blank_rename_discarded(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("e")
        await pilot.pause()
        app.screen.query_one(Input).value = "   "
        await pilot.press("enter")
        await pilot.pause()
        assert app.forest == forest


@pytest.mark.asyncio
async def test_delete_removes_subtree(forest):
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("d")
        await pilot.pause()
        assert [root.id for root in app.forest] == ["review"]


@pytest.mark.asyncio
async def test_theme_toggle_and_help():
    app = TaskTreeApp(theme_choice=Theme.LIGHT)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.theme == "textual-light"
        await pilot.press("t")
        assert app.theme == "textual-dark"
        await pilot.press("question_mark")
        await pilot.pause()
        assert isinstance(app.screen, HelpModal)


@pytest.mark.asyncio
async def test_actions_on_empty_forest():
    app = TaskTreeApp()
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("space", "d", "s")
        await pilot.pause()
        assert app.forest == ()


@pytest.mark.asyncio
async def test_reload_keeps_widget_tree(forest):
    """Reloading the tree leaves the screen's widgets walkable."""
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("space", "space")
        await pilot.pause()
        widgets = list(app.screen.walk_children())
        assert app.query_one(TaskTreeWidget) in widgets
        assert app.query_one(ProgressPanel) in widgets


@pytest.mark.asyncio
async def test_node_toggle_updates_forest(forest):
    """Expanding and collapsing a node directly flows back into the forest."""
    app = TaskTreeApp(forest=forest)
    async with app.run_test() as pilot:
        await pilot.pause()
        tree = app.query_one(TaskTreeWidget)

        tree.cursor_node.toggle()
        await pilot.pause()
        await pilot.pause()
        assert find_node(app.forest, "docs").is_expanded is True

        assert tree.get_selected_task().id == "docs"
        tree.cursor_node.toggle()
        await pilot.pause()
        await pilot.pause()
        assert find_node(app.forest, "docs").is_expanded is False
