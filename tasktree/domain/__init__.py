"""Domain layer for tasktree.

- shared: Result type for explicit error handling
- task: the task forest model and its pure traversal functions
"""
