"""Helpers for picking elements and slices from sequences."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def max_element(
    values: Iterable[T],
    key: Callable[[T], Any] | None = None,
    default: T | None = None,
) -> T | None:
    """Return the first largest element, or ``default`` if there is none."""
    return max(values, key=key, default=default)


def min_element(
    values: Iterable[T],
    key: Callable[[T], Any] | None = None,
    default: T | None = None,
) -> T | None:
    """Return the first smallest element, or ``default`` if there is none."""
    return min(values, key=key, default=default)


def slice_of(values: Sequence[T], first: int = 0, last: int | None = None) -> list[T]:
    """Return a new list of the elements from ``first`` up to ``last``.

    Without ``last`` the slice runs to the end.
    """
    return list(values[first:last])