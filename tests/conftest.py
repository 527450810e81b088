"""Shared fixtures for tasktree tests."""

import logging

import pytest

from tasktree import logging_setup
from tasktree.domain.task import Task


def make_task(task_id, title=None, completed=False, subtasks=(), is_expanded=False):
    """Build a task with a fixed id."""
    return Task(
        id=task_id,
        title=title or f"Task {task_id}",
        completed=completed,
        subtasks=tuple(subtasks),
        is_expanded=is_expanded,
    )


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    home = tmp_path / "tasktree-home"
    monkeypatch.setenv("TASKTREE_HOME", str(home))
    monkeypatch.delenv("TASKTREE_LOG_LEVEL", raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging once a test is done."""
    yield
    root = logging.getLogger()
    while logging_setup._installed:
        handler = logging_setup._installed.pop()
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def task_factory():
    """Factory for tasks with fixed ids."""
    return make_task


@pytest.fixture
def forest():
    """Two roots; the first has two children, one of which has a child.

    docs
      api
        research
      guide
    review
    """
    return (
        make_task(
            "docs",
            subtasks=[
                make_task("api", subtasks=[make_task("research")]),
                make_task("guide"),
            ],
        ),
        make_task("review"),
    )


@pytest.fixture
def chain():
    """A single chain three levels deep with a sibling at each level.

    a
      b
        c
      b2
    a2
    """
    return (
        make_task(
            "a",
            subtasks=[
                make_task("b", subtasks=[make_task("c")]),
                make_task("b2"),
            ],
        ),
        make_task("a2"),
    )
