"""Sorting, formatting and reading of rows held as tuples."""

from __future__ import annotations

from enum import Enum
from operator import itemgetter
from typing import Any, MutableSequence, Sequence

from utilbox.strings import convert_from, convert_to


class Order(Enum):
    """Sort direction."""

    UP = False
    DOWN = True

    def __invert__(self) -> Order:
        return Order(not self.value)

    def __sub__(self, other: object) -> Order:
        if not isinstance(other, Order):
            return NotImplemented
        return Order(self.value != other.value)


def sort_by(order: Order, index: int, rows: MutableSequence[tuple[Any, ...]]) -> None:
    """Stably sort ``rows`` in place by the column ``index``.

    An index outside the columns of the rows leaves them unchanged.
    """
    if not rows or not 0 <= index < len(rows[0]):
        return
    rows.sort(key=itemgetter(index), reverse=Order(order) is Order.DOWN)


def as_string(index: int, row: Sequence[Any]) -> str:
    """Return column ``index`` of ``row`` as text, or an empty string if absent."""
    if not 0 <= index < len(row):
        return ""
    return convert_from(row[index])


def to_string(row: Sequence[Any]) -> str:
    """Return the columns of ``row`` as text, separated by commas."""
    return ",".join(convert_from(value) for value in row)


def from_strings(types: Sequence[type], values: Sequence[str]) -> tuple[Any, ...]:
    """Convert the leading ``values`` to ``types``, one column each."""
    if len(values) < len(types):
        raise ValueError(f"need at least {len(types)} values, got {len(values)}")
    return tuple(convert_to(kind, text) for kind, text in zip(types, values))