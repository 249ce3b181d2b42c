"""Reading of delimiter separated text into string lists or typed tuples."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import IO, Any, Iterator, Sequence

from utilbox.strings import convert_to

EOF = ""
_LINE_ENDS = ("\n", "\r")
_QUOTES = ('"', "'")


class CharReader:
    """Read a text stream one character at a time, keeping the current one.

    ``ch`` holds the current character, or an empty string once the end of
    the stream was reached.
    """

    def __init__(self, stream: IO[str], ch: str = EOF) -> None:
        self.stream = stream
        self.ch = ch
        self.at_end = False

    @property
    def good(self) -> bool:
        """True while no read has hit the end of the stream."""
        return not self.at_end

    def advance(self) -> str:
        """Read the next character, make it current and return it."""
        ch = self.stream.read(1)
        if not ch:
            self.at_end = True
        self.ch = ch
        return ch


@dataclass(frozen=True)
class Skip:
    """Placeholder for a column that is read over and not converted."""

    def __str__(self) -> str:
        return ""


def _as_reader(source: CharReader | IO[str] | str) -> CharReader:
    if isinstance(source, CharReader):
        return source
    if isinstance(source, str):
        source = io.StringIO(source)
    return CharReader(source)


def _check_delimiter(split_char: str) -> None:
    if len(split_char) != 1:
        raise ValueError("the delimiter must be a single character")


def parse_text(reader: CharReader) -> str:
    """Read quoted text; the current character is the opening quote.

    A doubled quote stands for one quote character. Afterwards the current
    character is the one behind the closing quote.
    """
    end_char = reader.ch
    chars: list[str] = []
    while reader.ch != EOF:
        ch = reader.advance()
        if ch == end_char:
            ch = reader.advance()
            if ch != end_char:
                return "".join(chars)
        if ch != EOF:
            chars.append(ch)
    return "".join(chars)


def parse_none_text(reader: CharReader, split_char: str = ";") -> str:
    """Read from the current character up to a delimiter, line end or stream end."""
    chars: list[str] = []
    while reader.ch not in (split_char, *_LINE_ENDS, EOF):
        chars.append(reader.ch)
        reader.advance()
    return "".join(chars)


def parse_entry(reader: CharReader, split_char: str = ";") -> str:
    """Read the next entry, quoted or not, starting at the current character."""
    if reader.ch in _QUOTES:
        return parse_text(reader)
    return parse_none_text(reader, split_char)


def _read_line(reader: CharReader, split_char: str) -> list[str]:
    reader.advance()
    while reader.ch in _LINE_ENDS:
        reader.advance()
    fields = [parse_entry(reader, split_char)]
    while reader.ch == split_char:
        reader.advance()
        fields.append(parse_entry(reader, split_char))
    return fields


def parse_csv_line(stream: CharReader | IO[str] | str, split_char: str = ";") -> list[str]:
    """Read one line of entries from ``stream``, skipping leading line ends."""
    _check_delimiter(split_char)
    return _read_line(_as_reader(stream), split_char)


def read_csv_data(
    stream: CharReader | IO[str] | str,
    delimiter: str = ";",
    ignore_first: bool = False,
) -> Iterator[list[str]]:
    """Yield every line of ``stream`` as a list of strings.

    With ``ignore_first`` the first line (the header) is read and dropped.
    """
    _check_delimiter(delimiter)
    reader = _as_reader(stream)
    skip_next = ignore_first
    while reader.good:
        line = _read_line(reader, delimiter)
        if skip_next:
            skip_next = False
        else:
            yield line


def _read_element(reader: CharReader, kind: type, split_char: str) -> Any:
    text = parse_entry(reader, split_char)
    reader.advance()
    if kind is Skip:
        return Skip()
    return convert_to(kind, text)


def read_csv_tuples(
    stream: CharReader | IO[str] | str,
    types: Sequence[type],
    delimiter: str = ";",
    ignore_first: bool = False,
) -> Iterator[tuple[Any, ...]]:
    """Yield each line of ``stream`` as a tuple converted to ``types``.

    A :class:`Skip` type reads over its column. Missing columns get the
    zero value of their type.
    """
    _check_delimiter(delimiter)
    if not types:
        raise ValueError("at least one column type is needed")
    reader = _as_reader(stream)
    ignore = ignore_first
    reader.advance()
    while reader.good:
        while reader.ch in _LINE_ENDS:
            reader.advance()
        if not reader.good:
            break
        if ignore:
            while reader.ch not in (EOF, *_LINE_ENDS):
                reader.advance()
            ignore = False
        else:
            yield tuple(_read_element(reader, kind, delimiter) for kind in types)