"""Shared domain utilities.

Example usage:
    >>> from tasktree.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def parse_theme(value: str) -> Result[str, str]:
    ...     if value not in ("dark", "light"):
    ...         return Err(f"Unknown theme: {value}")
    ...     return Ok(value)
"""

from tasktree.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
]
