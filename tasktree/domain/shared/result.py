"""Result type for lookups and validations that may fail.

Forest operations never raise for a missing id; they return the forest
unchanged. Queries that must tell the caller *why* nothing came back
(``get_task``, ``validate_forest``) return an ``Ok`` or an ``Err`` instead.

Example usage:
    >>> result = get_task(forest, "abc123")
    >>> if is_ok(result):
    ...     print(result.value.title)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Union rather than | because TypeVar aliases need it at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Err."""
    return isinstance(result, Err)


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Extract the Ok value, or return ``default`` for an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
