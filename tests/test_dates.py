import io
import time
from datetime import date, datetime, timedelta, timezone

import pytest

from utilbox.dates import (
    day_of,
    first_day_of_week,
    format_date,
    format_datetime,
    format_time,
    get_local_time_offset,
    is_leap_year,
    local_time,
    mktime_point,
    mktime_point_from_utc,
    mktm,
    month_of,
    now,
    parse_date,
    parse_datetime,
    skip_delimiters,
    time_t2tm,
    time_t2utc,
    tm2time_t,
    utc2time_t,
    utc_time,
    week_of_year,
    weekday_of,
    year_of,
)

UTC = timezone.utc


@pytest.mark.parametrize(
    "year, expected", [(2000, True), (1900, False), (2024, True), (2023, False)]
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


def test_field_accessors_of_mktm():
    tm = mktm(2021, 7, 9, 10, 11, 12)
    assert (year_of(tm), month_of(tm), day_of(tm)) == (2021, 7, 9)


def test_epoch_in_utc():
    tm = time_t2utc(0)
    assert format_date(tm) == "1970-01-01"
    assert format_time(tm) == "00:00:00"


def test_format_time_with_delimiter():
    assert format_time(mktm(2000, 1, 1, 5, 6, 7), ".") == "05.06.07"


def test_format_date_with_delimiter():
    assert format_date(mktm(2021, 3, 4), "/") == "2021/03/04"


def test_format_datetime_of_struct():
    tm = mktm(2021, 3, 4, 5, 6, 7)
    assert format_datetime(tm) == "2021-03-04 05:06:07"
    assert format_datetime(tm, ".", "T", "-") == "2021.03.04T05-06-07"


def test_format_date_accepts_all_kinds():
    tp = mktime_point(2021, 3, 4, 12)
    assert format_date(tp) == "2021-03-04"
    assert format_date(tm2time_t(mktm(2021, 3, 4, 12))) == "2021-03-04"


def test_format_date_rejects_text():
    with pytest.raises(TypeError):
        format_date("2021-03-04")


def test_format_datetime_with_micros():
    tp = mktime_point(2021, 1, 15, 12, 0, 0, 250)
    assert format_datetime(tp, add_micros=True) == "2021-01-15 12:00:00.250000"
    assert format_datetime(tp) == "2021-01-15 12:00:00"


@pytest.mark.parametrize(
    "text", ["2021-01-15 12:34:56", "2021-01-15T12:34:56", "2021.01.15 12.34.56"]
)
def test_parse_datetime_round_trip(text):
    assert format_datetime(parse_datetime(text)) == "2021-01-15 12:34:56"


def test_parse_datetime_millis():
    with_millis = parse_datetime("2021-01-15 12:34:56.789")
    plain = parse_datetime("2021-01-15 12:34:56")
    assert with_millis - plain == timedelta(milliseconds=789)


def test_parse_date():
    assert parse_date("2021-01-15") == mktime_point(2021, 1, 15)


def test_parse_date_partial_defaults():
    assert parse_date("2021") == mktime_point(2021, 1, 1)


def test_parse_date_stops_at_line_end():
    assert parse_date("2021-02\n17") == mktime_point(2021, 2, 1)


def test_parse_date_from_stream():
    assert parse_date(io.StringIO("2020-06-30")) == mktime_point(2020, 6, 30)


def test_parse_date_empty_is_out_of_range():
    with pytest.raises(ValueError):
        parse_date("")


def test_skip_delimiters_stops_at_value():
    stream = io.StringIO("-- :x")
    assert skip_delimiters(stream) is True
    assert stream.read() == "x"


def test_skip_delimiters_line_end():
    stream = io.StringIO("..\n5")
    assert skip_delimiters(stream) is False
    assert stream.read() == "\n5"


def test_skip_delimiters_end_of_input():
    assert skip_delimiters(io.StringIO("...")) is False


def test_time_t_round_trip():
    t = 1_600_000_000
    assert tm2time_t(time_t2tm(t)) == t


def test_local_time_matches_time_t():
    tp = datetime(2020, 5, 6, 7, 8, 9, tzinfo=UTC)
    assert local_time(tp) == time_t2tm(int(tp.timestamp()))


def test_utc_time_fields():
    tp = datetime(2020, 2, 29, 1, 2, 3, tzinfo=UTC)
    tm = utc_time(tp)
    assert (year_of(tm), month_of(tm), day_of(tm)) == (2020, 2, 29)
    assert format_time(tm) == "01:02:03"
    assert weekday_of(tm) == date(2020, 2, 29).weekday()


def test_utc2time_t_inverts_utc_conversion():
    t = tm2time_t(mktm(2000, 1, 1, 12))
    assert utc2time_t(time_t2utc(t)) == t
    assert get_local_time_offset() == get_local_time_offset()


def test_mktime_point_from_utc():
    tp = mktime_point_from_utc(2000, 1, 1, 10, 20, 30, 500)
    assert tp == datetime(2000, 1, 1, 10, 20, 30, 500000, tzinfo=UTC)


def test_mktime_point_normalises_day():
    assert mktime_point(2021, 1, 32) == mktime_point(2021, 2, 1)


def test_now_is_current():
    assert abs(now() - datetime.now(UTC)) < timedelta(seconds=5)


@pytest.mark.parametrize("week", [1, 10, 26, 40])
def test_first_day_of_week_is_monday_before_day(week):
    t = first_day_of_week(2021, week)
    tm = time_t2tm(t)
    assert weekday_of(tm) == 0
    target = date(2021, 1, 1) + timedelta(days=week * 7 - 1)
    found = date(year_of(tm), month_of(tm), day_of(tm))
    assert 0 <= (target - found).days < 7


def test_week_of_year_changes_on_monday():
    start = tm2time_t(mktm(2021, 1, 1, 12))
    previous = week_of_year(time_t2tm(start))
    for offset in range(1, 60):
        tm = time_t2tm(start + offset * 86400)
        week = week_of_year(tm)
        if weekday_of(tm) == 0:
            assert week == previous + 1
        else:
            assert week == previous
        previous = week


def test_time_t2tm_is_local_time():
    t = 1_579_000_000
    assert time_t2tm(t) == time.localtime(t)