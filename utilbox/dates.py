"""Calendar helpers: broken-down times, time points, formatting and parsing.

Broken-down times are :class:`time.struct_time` values, counts of seconds
since the epoch are plain integers and time points are timezone-aware
:class:`datetime.datetime` values (naive ones are taken as local time).
"""

from __future__ import annotations

import functools
import io
import time
from datetime import datetime, timedelta, timezone
from typing import IO, Union

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_DELIMITERS = frozenset(".:- \\T")
_LINE_ENDS = ("\n", "\r")

DateValue = Union[time.struct_time, int, float, datetime]


def _aware(tp: datetime) -> datetime:
    return tp if tp.tzinfo is not None else tp.astimezone()


def _to_time_t(tp: datetime) -> int:
    """Whole seconds since the epoch, truncated toward zero."""
    td = _aware(tp) - _EPOCH
    secs = td.days * 86400 + td.seconds
    if secs < 0 and td.microseconds:
        secs += 1
    return secs


def _from_time_t(t: int) -> datetime:
    try:
        return _EPOCH + timedelta(seconds=t)
    except OverflowError as exc:
        raise ValueError(f"time {t} is out of the representable range") from exc


def now() -> datetime:
    """Return the current time as an aware UTC time point."""
    return datetime.now(timezone.utc)


def mktm(
    year: int = 0,
    month: int = 0,
    day: int = 0,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    isdst: int = -1,
) -> time.struct_time:
    """Build a broken-down time; the fields are not normalised."""
    return time.struct_time((year, month, day, hour, minute, second, 6, 1, isdst))


def time_t2tm(t: float) -> time.struct_time:
    """Convert seconds since the epoch to local broken-down time."""
    return time.localtime(t)


def time_t2utc(t: float) -> time.struct_time:
    """Convert seconds since the epoch to UTC broken-down time."""
    return time.gmtime(t)


def tm2time_t(tm: time.struct_time) -> int:
    """Convert a local broken-down time to seconds since the epoch.

    Out-of-range fields are normalised the way ``mktime`` does it.
    """
    try:
        return int(time.mktime(tm))
    except OverflowError as exc:
        raise ValueError("broken-down time is out of range") from exc


@functools.cache
def get_local_time_offset() -> int:
    """Return the local offset from UTC in seconds, as of 2000-01-01."""
    t = tm2time_t(mktm(2000, 1, 1, 0, 0, 0, 0))
    local = tm2time_t(time_t2tm(t))
    utc = tm2time_t(time_t2utc(t))
    return local - utc


def mktime_point(
    year: int = 0,
    month: int = 0,
    day: int = 0,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millis: int = 0,
    isdst: int = -1,
) -> datetime:
    """Build a time point from local calendar fields."""
    t = tm2time_t(mktm(year, month, day, hour, minute, second, isdst))
    return _from_time_t(t) + timedelta(milliseconds=millis)


def local_time(tp: datetime) -> time.struct_time:
    """Return the local broken-down time of a time point."""
    return time_t2tm(_to_time_t(tp))


def utc_time(tp: datetime) -> time.struct_time:
    """Return the UTC broken-down time of a time point."""
    return time_t2utc(_to_time_t(tp))


def utc2time_t(tm: time.struct_time) -> int:
    """Convert a UTC broken-down time to seconds since the epoch."""
    return tm2time_t(tm) + get_local_time_offset()


def mktime_point_from_utc(
    year: int = 0,
    month: int = 0,
    day: int = 0,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millis: int = 0,
) -> datetime:
    """Build a time point from UTC calendar fields."""
    t = utc2time_t(mktm(year, month, day, hour, minute, second, 0))
    return _from_time_t(t) + timedelta(milliseconds=millis)


def is_leap_year(year: int) -> bool:
    """Return True for a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_of(tm: time.struct_time) -> int:
    """Return the full year of a broken-down time."""
    return tm.tm_year


def month_of(tm: time.struct_time) -> int:
    """Return the month, 1 to 12."""
    return tm.tm_mon


def day_of(tm: time.struct_time) -> int:
    """Return the day of the month."""
    return tm.tm_mday


def weekday_of(tm: time.struct_time) -> int:
    """Return the weekday with Monday as 0 and Sunday as 6."""
    return tm.tm_wday


def week_of_year(tm: time.struct_time) -> int:
    """Return the week number; weeks start on Monday, days before the first Monday are week 0."""
    return (tm.tm_yday - 1 + 7 - weekday_of(tm)) // 7


def first_day_of_week(year: int, week: int) -> int:
    """Return the Monday, as seconds since the epoch, of the week holding day ``week * 7``."""
    t = tm2time_t(mktm(year, 1, week * 7))
    tm = time_t2tm(t)
    wd = weekday_of(tm)
    if wd == 0:
        return t
    return tm2time_t(mktm(year_of(tm), 1, tm.tm_yday - wd))


def format_time(tm: time.struct_time, delimiter: str = ":") -> str:
    """Format hours, minutes and seconds as two digits each."""
    return f"{tm.tm_hour:02d}{delimiter}{tm.tm_min:02d}{delimiter}{tm.tm_sec:02d}"


def _as_tm(value: DateValue) -> time.struct_time:
    if isinstance(value, time.struct_time):
        return value
    if isinstance(value, datetime):
        return local_time(value)
    if isinstance(value, (int, float)):
        return time_t2tm(value)
    raise TypeError(f"cannot use {type(value).__name__} as a date")


def format_date(value: DateValue, delimiter: str = "-") -> str:
    """Format the date of a broken-down time, epoch seconds or a time point."""
    tm = _as_tm(value)
    return f"{year_of(tm)}{delimiter}{month_of(tm):02d}{delimiter}{day_of(tm):02d}"


def format_datetime(
    value: DateValue,
    date_delimiter: str = "-",
    separator: str = " ",
    time_delimiter: str = ":",
    add_micros: bool = False,
) -> str:
    """Format date and time of a broken-down time, epoch seconds or a time point.

    ``add_micros`` appends the six-digit microseconds of a time point; it
    has no effect on the other kinds of value.
    """
    tm = _as_tm(value)
    text = f"{format_date(tm, date_delimiter)}{separator}{format_time(tm, time_delimiter)}"
    if add_micros and isinstance(value, datetime):
        td = _aware(value) - _EPOCH
        micros = (td - timedelta(seconds=_to_time_t(value))) // timedelta(microseconds=1)
        text += f".{micros:06d}"
    return text


def _peek(stream: IO[str]) -> str:
    pos = stream.tell()
    ch = stream.read(1)
    stream.seek(pos)
    return ch


def skip_delimiters(stream: IO[str]) -> bool:
    """Skip date and time delimiters in ``stream``.

    Return True if more input on the same line follows.
    """
    while True:
        pos = stream.tell()
        ch = stream.read(1)
        if not ch or ch not in _DELIMITERS:
            stream.seek(pos)
            return bool(ch) and ch not in _LINE_ENDS


def _read_int(stream: IO[str]) -> tuple[int, bool]:
    """Read a signed integer after optional white space; (0, False) on failure."""
    ch = _peek(stream)
    while ch and ch.isspace():
        stream.read(1)
        ch = _peek(stream)
    chars = []
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


def _as_stream(text: str | IO[str]) -> IO[str]:
    return io.StringIO(text) if isinstance(text, str) else text


def _read_fields(stream: IO[str], values: list[int], with_fraction: bool) -> int:
    """Fill ``values`` in order from the stream; return the fraction part or 0."""
    for index in range(len(values)):
        if not skip_delimiters(stream):
            return 0
        values[index], ok = _read_int(stream)
        if not ok:
            return 0
    if with_fraction and _peek(stream) == "." and skip_delimiters(stream):
        return _read_int(stream)[0]
    return 0


def parse_date(text: str | IO[str]) -> datetime:
    """Parse year, month and day; missing fields default to January 1st."""
    fields = [0, 1, 1]
    _read_fields(_as_stream(text), fields, with_fraction=False)
    return mktime_point(*fields)


def parse_datetime(text: str | IO[str]) -> datetime:
    """Parse a local date and time with optional milliseconds after a dot."""
    fields = [0, 1, 1, 0, 0, 0]
    millis = _read_fields(_as_stream(text), fields, with_fraction=True)
    return mktime_point(*fields, millis)