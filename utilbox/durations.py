"""Durations: building, splitting, formatting, parsing and measuring them.

Durations are :class:`datetime.timedelta` values.
"""

from __future__ import annotations

import io
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import IO, Any, Callable

from utilbox.dates import skip_delimiters

_MICRO = timedelta(microseconds=1)
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


@dataclass(frozen=True)
class DurationParts:
    """A duration split into hours, minutes, seconds and microseconds."""

    hours: int = 0
    mins: int = 0
    secs: int = 0
    micros: int = 0


def mkduration(hours: int = 0, mins: int = 0, secs: int = 0, micros: int = 0) -> timedelta:
    """Build a duration from hours, minutes, seconds and microseconds."""
    return timedelta(hours=hours, minutes=mins, seconds=secs, microseconds=micros)


def duration_to_parts(d: timedelta) -> DurationParts:
    """Split a duration into its parts, each truncated toward zero."""
    total = d // _MICRO
    sign = -1 if total < 0 else 1
    hours, rest = divmod(abs(total), _US_PER_HOUR)
    mins, rest = divmod(rest, _US_PER_MINUTE)
    secs, micros = divmod(rest, _US_PER_SECOND)
    return DurationParts(sign * hours, sign * mins, sign * secs, sign * micros)


def parts_to_duration(parts: DurationParts) -> timedelta:
    """Join parts back into a duration."""
    return mkduration(parts.hours, parts.mins, parts.secs, parts.micros)


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Quotient truncated toward zero and the remainder with the dividend's sign."""
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


def _padded(value: int, width: int) -> str:
    return str(value).rjust(width, "0")


def _format_clock(
    parts: DurationParts,
    hours: int,
    time_delimiter: str,
    add_micros: bool,
    has_prefix: bool,
) -> str:
    out: list[str] = []
    if hours or has_prefix:
        out.append(f"{_padded(hours, 2)}{time_delimiter}")
        has_prefix = True
    if parts.mins or has_prefix:
        out.append(f"{_padded(parts.mins, 2)}{time_delimiter}")
        has_prefix = True
    out.append(_padded(parts.secs, 2) if has_prefix else str(parts.secs))
    if add_micros:
        out.append(f".{_padded(parts.micros, 6)}")
    return "".join(out)


def format_duration_mt(
    d: timedelta,
    hours_per_mt: int = 8,
    separator: str = " ",
    time_delimiter: str = ":",
    add_micros: bool = False,
    minimize: bool = False,
) -> str:
    """Format a duration as man-days of ``hours_per_mt`` hours plus a clock time.

    With ``minimize`` leading zero fields are left out.
    """
    parts = duration_to_parts(d)
    days, hours = _trunc_divmod(parts.hours, hours_per_mt)
    has_prefix = not minimize
    prefix = ""
    if days or has_prefix:
        prefix = f"{days}{separator}"
        has_prefix = True
    return prefix + _format_clock(parts, hours, time_delimiter, add_micros, has_prefix)


def format_duration(
    d: timedelta,
    separator: str = " ",
    time_delimiter: str = ":",
    add_micros: bool = False,
    minimize: bool = False,
) -> str:
    """Format a duration as days of 24 hours plus a clock time."""
    return format_duration_mt(d, 24, separator, time_delimiter, add_micros, minimize)


def format_duration_only_h(
    d: timedelta,
    time_delimiter: str = ":",
    add_micros: bool = False,
    minimize: bool = False,
) -> str:
    """Format a duration as hours, minutes and seconds without days."""
    parts = duration_to_parts(d)
    return _format_clock(parts, parts.hours, time_delimiter, add_micros, not minimize)


def _peek(stream: IO[str]) -> str:
    pos = stream.tell()
    ch = stream.read(1)
    stream.seek(pos)
    return ch


def _read_int(stream: IO[str]) -> tuple[int, bool]:
    """Read a signed integer after optional white space; (0, False) on failure."""
    ch = _peek(stream)
    while ch and ch.isspace():
        stream.read(1)
        ch = _peek(stream)
    chars: list[str] = []
    if ch in ("+", "-"):
        chars.append(stream.read(1))
        ch = _peek(stream)
    digits = 0
    while ch and ch.isascii() and ch.isdigit():
        chars.append(stream.read(1))
        digits += 1
        ch = _peek(stream)
    if not digits:
        return 0, False
    return int("".join(chars)), True


def parse_duration(text: str | IO[str]) -> timedelta:
    """Parse days, hours, minutes, seconds and optional milliseconds after a dot."""
    stream = io.StringIO(text) if isinstance(text, str) else text
    fields = [0, 0, 0, 0]
    millis = 0
    complete = True
    for index in range(len(fields)):
        if not skip_delimiters(stream):
            complete = False
            break
        fields[index], ok = _read_int(stream)
        if not ok:
            complete = False
            break
    if complete and _peek(stream) == "." and skip_delimiters(stream):
        millis = _read_int(stream)[0]
    day, hour, minute, second = fields
    total_seconds = ((day * 24 + hour) * 60 + minute) * 60 + second
    return timedelta(milliseconds=total_seconds * 1000 + millis)


class Chronometer:
    """Measure the time elapsed since the last start."""

    def __init__(self) -> None:
        self._begin = time.perf_counter()

    def start(self) -> None:
        """Restart the measurement."""
        self._begin = time.perf_counter()

    def stop(self) -> timedelta:
        """Return the time elapsed since the last start."""
        return timedelta(seconds=time.perf_counter() - self._begin)

    def process(self, fn: Callable[[], Any]) -> timedelta:
        """Run ``fn`` and return how long it took."""
        self.start()
        fn()
        return self.stop()

    @staticmethod
    def run(fn: Callable[[], Any]) -> timedelta:
        """Run ``fn`` with a fresh chronometer and return how long it took."""
        return Chronometer().process(fn)


class AverageChronometer:
    """Accumulate several measurements and report their total and average."""

    def __init__(self) -> None:
        self._count = 0
        self._duration = timedelta(0)
        self._timer = Chronometer()

    def start(self) -> None:
        """Start one measurement."""
        self._timer.start()

    def stop(self) -> None:
        """End one measurement and add it to the total."""
        self._duration += self._timer.stop()
        self._count += 1

    def process(self, fn: Callable[[], Any]) -> None:
        """Measure one run of ``fn``."""
        self.start()
        fn()
        self.stop()

    def average_duration(self) -> timedelta:
        """Return the average measurement, or the total if nothing was measured."""
        if self._count:
            return self._duration // self._count
        return self._duration

    def cumulated_duration(self) -> timedelta:
        """Return the sum of all measurements."""
        return self._duration

    def count(self) -> int:
        """Return the number of measurements."""
        return self._count