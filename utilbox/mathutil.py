"""Small numeric helpers."""

from __future__ import annotations

from typing import Any


def pow10(exp: int) -> int:
    """Return ten to the power of a non-negative ``exp``."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    return 10**exp


def pow2(exp: int) -> int:
    """Return two to the power of a non-negative ``exp``."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    return 2**exp


def signum(x: Any) -> int:
    """Return -1, 0 or 1 according to the sign of ``x``."""
    return int(0 < x) - int(x < 0)


def is_between(lower: Any, value: Any, upper: Any) -> bool:
    """Return True if ``lower <= value <= upper``."""
    return lower <= value <= upper


def limit(lower: Any, value: Any, upper: Any) -> Any:
    """Clamp ``value`` into the range ``lower`` .. ``upper``."""
    if value < lower:
        return lower
    if upper < value:
        return upper
    return value


def rolling_avg(average: Any, score: Any, weight: int) -> Any:
    """Blend ``score`` into ``average`` with the given ``weight``.

    Integers give an integer result truncated toward zero.
    """
    total = average * (weight - 1) + score
    if isinstance(total, int) and isinstance(weight, int):
        if weight == 0:
            raise ZeroDivisionError("weight must not be zero")
        quotient = abs(total) // abs(weight)
        return quotient if (total < 0) == (weight < 0) else -quotient
    return total / weight