"""Fixed-point money amounts tagged with a currency symbol."""

from __future__ import annotations

import functools
from typing import Any

from utilbox.mathutil import pow10
from utilbox.strings import convert_to, utf8_to_uint32

EURO = "€"
DOLLAR = "$"
POUND = "£"
YEN = "¥"
WON = "₩"
YUAN = "元"
NAIRA = "₦"
RUPEE = "₹"
RUBLE = "₽"

_DIGITS = frozenset("0123456789")


def _trunc_div(dividend: int, divisor: int) -> int:
    """Integer division truncated toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


@functools.total_ordering
class Currency:
    """An amount stored as an integer count of the smallest unit.

    An integer value is taken as that count; a float value is taken in
    whole units and truncated to ``precision`` decimals.
    """

    __slots__ = ("_full", "_symbol", "_precision")

    def __init__(self, value: int | float = 0, symbol: str = "", precision: int = 2) -> None:
        scale = pow10(precision)
        if isinstance(value, int):
            full = int(value)
        elif isinstance(value, float):
            full = int(value * scale)
        else:
            raise TypeError(f"cannot make an amount from {type(value).__name__}")
        self._full = full
        self._symbol = symbol
        self._precision = precision

    @classmethod
    def from_parts(
        cls, whole: int, fraction: int, symbol: str = "", precision: int = 2
    ) -> Currency:
        """Build an amount from whole units and a count of smallest units."""
        return cls(whole * pow10(precision) + fraction, symbol, precision)

    @classmethod
    def from_string(cls, text: str, symbol: str = "", precision: int = 2) -> Currency:
        """Read the first number in ``text``, skipping anything before it.

        Text without a readable number gives a zero amount.
        """
        start = next(
            (i for i, ch in enumerate(text) if ch in _DIGITS or ch == "-"), len(text)
        )
        return cls(float(convert_to(float, text[start:])), symbol, precision)

    @property
    def symbol(self) -> str:
        """The currency symbol."""
        return self._symbol

    @property
    def symbol_code(self) -> int:
        """The UTF-8 bytes of the symbol packed into an integer."""
        return utf8_to_uint32(self._symbol)

    @property
    def precision(self) -> int:
        """The number of decimals kept."""
        return self._precision

    @property
    def _scale(self) -> int:
        return pow10(self._precision)

    def _with(self, full: int) -> Currency:
        return Currency(full, self._symbol, self._precision)

    def _same_kind(self, other: Currency) -> bool:
        return self._symbol == other._symbol and self._precision == other._precision

    def _checked(self, other: Any) -> Currency:
        if not isinstance(other, Currency):
            raise TypeError(f"cannot combine an amount with {type(other).__name__}")
        if not self._same_kind(other):
            raise TypeError("cannot combine amounts of different currencies")
        return other

    def pre_decimals(self) -> int:
        """Return the whole units, truncated toward zero."""
        return _trunc_div(self._full, self._scale)

    def decimals(self) -> int:
        """Return the absolute count of units behind the decimal point."""
        return abs(self._full) % self._scale

    def all_digits(self) -> int:
        """Return the amount as a count of the smallest unit."""
        return self._full

    def as_real(self) -> float:
        """Return the amount in whole units as a float."""
        return self._full / self._scale

    def as_fix_real(self) -> str:
        """Format the amount with exactly ``precision`` decimals."""
        return f"{self.as_real():.{self._precision}f}"

    def with_symbol(self) -> str:
        """Format the amount with its symbol in front."""
        return f"{self._symbol}{self.as_fix_real()}"

    def __str__(self) -> str:
        return self.with_symbol()

    def __repr__(self) -> str:
        return (
            f"Currency({self._full!r}, symbol={self._symbol!r}, "
            f"precision={self._precision!r})"
        )

    def __float__(self) -> float:
        return self.as_real()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._same_kind(other) and self._full == other._full

    def __hash__(self) -> int:
        return hash((self._full, self._symbol, self._precision))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Currency) or not self._same_kind(other):
            return NotImplemented
        return self._full < other._full

    def __neg__(self) -> Currency:
        return self._with(-self._full)

    def __add__(self, other: Currency) -> Currency:
        return self._with(self._full + self._checked(other)._full)

    def __sub__(self, other: Currency) -> Currency:
        return self._with(self._full - self._checked(other)._full)

    def __mul__(self, factor: int | float) -> Currency:
        if isinstance(factor, Currency) or not isinstance(factor, (int, float)):
            return NotImplemented
        return self._with(int(self._full * factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: int | float) -> Currency:
        if isinstance(divisor, Currency) or not isinstance(divisor, (int, float)):
            return NotImplemented
        if isinstance(divisor, int):
            return self._with(_trunc_div(self._full, divisor))
        return self._with(int(self._full / divisor))


def euro(value: float) -> Currency:
    """Return an amount in euro, given in whole units."""
    return Currency(float(value), EURO)


def dollar(value: float) -> Currency:
    """Return an amount in dollar, given in whole units."""
    return Currency(float(value), DOLLAR)


def pound(value: float) -> Currency:
    """Return an amount in pound, given in whole units."""
    return Currency(float(value), POUND)


def yen(value: float) -> Currency:
    """Return an amount in yen, given in whole units."""
    return Currency(float(value), YEN)


def yuan(value: float) -> Currency:
    """Return an amount in yuan, given in whole units."""
    return Currency(float(value), YUAN)


def rupee(value: float) -> Currency:
    """Return an amount in rupee, given in whole units."""
    return Currency(float(value), RUPEE)


def ruble(value: float) -> Currency:
    """Return an amount in ruble, given in whole units."""
    return Currency(float(value), RUBLE)


def won(value: float) -> Currency:
    """Return an amount in won, given in whole units."""
    return Currency(float(value), WON)


def naira(value: float) -> Currency:
    """Return an amount in naira, given in whole units."""
    return Currency(float(value), NAIRA)