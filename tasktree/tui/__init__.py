"""Terminal user interface for tasktree."""
