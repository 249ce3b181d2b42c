# utilbox

Small, dependency-free helpers for everyday Python code: string and UTF-8
helpers, CSV reading, a prefix-matching command-line option parser, calendar
and duration helpers, fixed-point currency amounts, row sorting, a wrapping
grid and a thread-safe blocking queue.

It is a library only; it installs no command of its own.

## Modules

- `utilbox.strings`: `starts_with`, `ends_with`, `ltrimmed`, `rtrimmed`,
  `trimmed`, `split`, `merge`, `replaced` (raises `ValueError` for an empty
  search text), `quoted` and `read_quoted`, `read_name`, `copy_until`,
  word-boundary search (`find_left_space`, `find_right_space`), text/value
  conversion (`convert_from`, `convert_to`), UTF-8 byte helpers
  (`is_continuation_char`, `get_left_char`, `get_right_char`,
  `utf8_to_uint32`, `uint32_to_utf8`) and byte-order-mark detection
  (`UtfBom`, `read_utf_bom`).
- `utilbox.mathutil`: `pow10`, `pow2`, `signum`, `is_between`, `limit`,
  `rolling_avg`.
- `utilbox.csv_reader`: delimiter-separated reading that accepts both `"` and
  `'` quoting, with a doubled quote standing for one quote character.
  `parse_csv_line` reads one line; `read_csv_data` yields every line as a list
  of strings; `read_csv_tuples` yields typed tuples, where `Skip` marks a
  column to ignore and missing columns get the zero value of their type. The
  lower-level `CharReader`, `parse_text`, `parse_none_text` and `parse_entry`
  are available too.
- `utilbox.command_line`: `Parser` and `Arg`. Options match by prefix, so
  `-nAlice` passes `Alice` to `-n`; an option that needs an argument without
  one raises `ValueError`. A `-h`/`--help` option that prints the help and
  exits is always present. `make_toggle`, `make_increment` and `make_value`
  build actions that update an attribute or a mapping key.
- `utilbox.vectors`: `max_element`, `min_element`, `slice_of`.
- `utilbox.dates`: broken-down times (`time.struct_time`), epoch seconds and
  aware `datetime` time points: `now`, `mktm`, `mktime_point`,
  `mktime_point_from_utc`, `local_time`, `utc_time`, `tm2time_t`,
  `utc2time_t`, `time_t2tm`, `time_t2utc`, `get_local_time_offset`,
  `is_leap_year`, `year_of`, `month_of`, `day_of`, `weekday_of`,
  `week_of_year`, `first_day_of_week`, `format_time`, `format_date`,
  `format_datetime`, `parse_date`, `parse_datetime`, `skip_delimiters`.
- `utilbox.durations`: `timedelta` helpers: `mkduration`,
  `duration_to_parts` / `parts_to_duration` (`DurationParts`),
  `format_duration`, `format_duration_mt`, `format_duration_only_h`,
  `parse_duration`, and the timers `Chronometer` and `AverageChronometer`.
- `utilbox.currency`: `Currency`, an integer count of the smallest unit with a
  symbol and a precision (default 2). Amounts add, subtract and compare only
  with amounts of the same symbol and precision; they multiply and divide by
  numbers. Shortcuts: `euro`, `dollar`, `pound`, `yen`, `yuan`, `rupee`,
  `ruble`, `won`, `naira`.
- `utilbox.tuples`: `Order` (`UP`, `DOWN`), `sort_by` for stable in-place
  sorting by a column, `as_string`, `to_string` and `from_strings`.
- `utilbox.matrix`: `Matrix`, a grid indexed as `m[x, y]` whose indices wrap
  around, and the walks `matrix_iterate` (a generator) and `matrix_traverse`
  (along anti-diagonals, stopping when the callback returns a false value).
- `utilbox.blocking_queue`: `BlockingQueue`, optionally bounded (adding to a
  full queue drops the oldest item), with `enqueue`, `enqueue_all`, `dequeue`,
  `dequeue_back`, `try_dequeue`, waiting helpers, `is_empty`, `clear` and
  `stop_waiters`. Timeouts are in seconds.
- `utilbox.fs_util`: `get_user_home`, `is_executable`, `execute`,
  `open_document` (through `xdg-open` outside Windows), `execute_or_open`,
  and `command`, which runs a shell command and returns a `CommandResult`
  with its exit code and standard output.

## Examples

```python
import io
from utilbox.csv_reader import Skip, read_csv_data, read_csv_tuples

rows = list(read_csv_data(io.StringIO("0123.456;'test'\n1234.567;'foo'"), ";", False))
# [['0123.456', 'test'], ['1234.567', 'foo']]

pairs = list(read_csv_tuples(io.StringIO("a;b\n1.1;2.2"), (float, float), ";", True))
# [(1.1, 2.2)]

second = list(read_csv_tuples(io.StringIO("a;b\n1.1;2.2"), (Skip, float), ";", True))
# [(Skip(), 2.2)]
```

```python
from utilbox.command_line import Arg, Parser

parser = Parser("demo")
seen = []
parser.add(Arg("-n", "--name", "<name>", "Set the name", seen.append))
parser.process(["-nAlice", "file.txt"])
# seen == ['Alice'], parser.remaining_args() == ['file.txt']
```

```python
from utilbox.durations import format_duration, format_duration_only_h, mkduration

format_duration(mkduration(26, 3, 4))          # '1 02:03:04'
format_duration_only_h(mkduration(1, 2, 3))    # '01:02:03'
format_duration(mkduration(secs=5), minimize=True)  # '5'
```

```python
from utilbox.currency import euro

total = euro(12.5) + euro(0.25)
str(total)            # '€12.75'
total.all_digits()    # 1275
```

```python
from utilbox.blocking_queue import BlockingQueue

q = BlockingQueue(maxsize=2)
q.enqueue_all([1, 2, 3])
q.dequeue(timeout=0.1)  # 2
```

```python
from utilbox.fs_util import command

result = command("pwd")
print(result.exit_code, result.output)
```

## Running the tests

```
pip install -e .[test]
pytest
```