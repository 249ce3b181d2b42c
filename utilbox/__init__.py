"""Small utilities: strings, CSV reading, option parsing, dates, durations, currency, matrices and a blocking queue."""

__version__ = "1.0.0"

__all__ = [
    "blocking_queue",
    "command_line",
    "csv_reader",
    "currency",
    "dates",
    "durations",
    "fs_util",
    "mathutil",
    "matrix",
    "strings",
    "tuples",
    "vectors",
]