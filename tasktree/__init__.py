"""tasktree - a hierarchical to-do list with unbounded subtask nesting."""

__version__ = "0.1.0"
