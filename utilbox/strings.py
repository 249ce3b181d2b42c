"""String, UTF-8 and byte-order-mark helpers."""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass
from typing import IO, Any, Callable, ClassVar, Iterable, TypeVar

T = TypeVar("T")

_WHITE_SPACE = frozenset(" (){}[],.;:'\"!@#$%^&/*-+")
_C_SPACE = " \t\n\v\f\r"
_NAME_EXTRA = frozenset(".-_/@#")
_QUOTES = ('"', "'")

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def starts_with(text: str, prefix: str) -> bool:
    """Return True if ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Return True if ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def find_left_space(text: str, cursor_pos: int) -> int:
    """Return the start of the word left of ``cursor_pos``."""
    if not text:
        return 0
    last = len(text) - 1 if cursor_pos == 0 else min(cursor_pos - 1, len(text) - 1)
    pos = next((i for i in range(last, -1, -1) if text[i] not in _WHITE_SPACE), None)
    if pos is None:
        return 0
    boundary = next((i for i in range(pos, -1, -1) if text[i] in _WHITE_SPACE), None)
    return 0 if boundary is None else boundary + 1


def find_right_space(text: str, cursor_pos: int) -> int:
    """Return the start of the next word right of ``cursor_pos``."""
    pos = next(
        (i for i in range(cursor_pos + 1, len(text)) if text[i] in _WHITE_SPACE), None
    )
    if pos is None:
        return len(text)
    rest = text[pos:].lstrip(text[pos])
    return len(text) - len(rest) if rest else pos


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at ``delimiter`` as line-wise reading would.

    A trailing delimiter yields no empty last part, except that a text
    ending with a newline gets an empty last part appended.
    """
    parts: list[str] = []
    if text:
        parts = text.split(delimiter)
        if text.endswith(delimiter):
            parts.pop()
        if text.endswith("\n"):
            parts.append("")
    return parts


def merge(parts: Iterable[str], delimiter: str) -> str:
    """Join ``parts`` with ``delimiter``."""
    return delimiter.join(parts)


def ltrimmed(text: str) -> str:
    """Return ``text`` without leading white space."""
    return text.lstrip(_C_SPACE)


def rtrimmed(text: str) -> str:
    """Return ``text`` without trailing white space."""
    return text.rstrip(_C_SPACE)


def trimmed(text: str) -> str:
    """Return ``text`` without leading and trailing white space."""
    return text.strip(_C_SPACE)


def replaced(text: str, old: str, new: str) -> str:
    """Return ``text`` with every occurrence of ``old`` replaced by ``new``."""
    if not old:
        raise ValueError("the sequence to replace must not be empty")
    return text.replace(old, new)


def quoted(text: str) -> str:
    """Return ``text`` in double quotes, escaping quotes and backslashes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def read_quoted(stream: IO[str]) -> str:
    """Read a quoted string from a text stream.

    Leading white space is skipped; the string must start with ``'`` or ``"``
    and ends at the matching unescaped delimiter or at the end of the stream.
    """
    pos = stream.tell()
    ch = stream.read(1)
    while ch and ch.isspace():
        pos = stream.tell()
        ch = stream.read(1)
    if ch not in _QUOTES or not ch:
        stream.seek(pos)
        raise ValueError("Expected string delimiter ' or \" !")
    delim = ch
    chars: list[str] = []
    while ch := stream.read(1):
        if ch == "\\":
            escaped = stream.read(1)
            if not escaped:
                break
            chars.append(escaped)
        elif ch == delim:
            break
        else:
            chars.append(ch)
    return "".join(chars)


def _is_name_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in _NAME_EXTRA


def read_name(stream: IO[str]) -> str:
    """Read a name made of letters, digits and ``.-_/@#`` from a text stream.

    The first character that does not belong to the name stays unread.
    """
    chars: list[str] = []
    while True:
        pos = stream.tell()
        ch = stream.read(1)
        if not ch:
            break
        if not _is_name_char(ch):
            stream.seek(pos)
            break
        chars.append(ch)
    return "".join(chars)


def copy_until(iterable: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the leading items of ``iterable`` for which ``predicate`` holds."""
    return list(itertools.takewhile(predicate, iterable))


def convert_from(value: Any) -> str:
    """Format ``value`` as text the way stream output does."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def convert_to(kind: type, text: str) -> Any:
    """Read a value of ``kind`` from the start of ``text``.

    Numbers are read from the leading part of the text; text that does not
    start with a number gives the zero value of the type.
    """
    if kind is str:
        return text
    if kind is bool:
        match = _INT_RE.match(text)
        return bool(match) and int(match.group(1)) == 1
    if kind is int:
        match = _INT_RE.match(text)
        return int(match.group(1)) if match else 0
    if kind is float:
        match = _FLOAT_RE.match(text)
        return float(match.group(1)) if match else 0.0
    return kind(text)


def is_continuation_char(byte: int) -> bool:
    """Return True if ``byte`` is a UTF-8 continuation byte."""
    return (byte & 0b11000000) == 0b10000000


def get_left_char(data: bytes, pos: int) -> int:
    """Return the start of the UTF-8 character left of ``pos``."""
    if pos < 1:
        return pos
    cp = pos - 1
    while cp > 0 and is_continuation_char(data[cp]):
        cp -= 1
    return cp


def get_right_char(data: bytes, pos: int) -> int:
    """Return the start of the UTF-8 character right of ``pos``."""
    size = len(data)
    cp = min(size, pos + 1)
    while cp < size and is_continuation_char(data[cp]):
        cp += 1
    return cp


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def utf8_to_uint32(data: bytes | str) -> int:
    """Pack the first four UTF-8 bytes of ``data`` into an integer, little endian."""
    return int.from_bytes(_as_bytes(data)[:4].ljust(4, b"\0"), "little")


def uint32_to_utf8(value: int) -> bytes:
    """Unpack an integer made by :func:`utf8_to_uint32` into UTF-8 bytes."""
    raw = (value & 0xFFFFFFFF).to_bytes(4, "little")
    return raw.split(b"\0", 1)[0]


@dataclass(frozen=True)
class UtfBom:
    """A unicode byte order mark: its length and up to four bytes."""

    size: int
    prefix: bytes = b"\0\0\0\0"

    NO_UTF: ClassVar[UtfBom]
    UTF_8: ClassVar[UtfBom]
    UTF_32LE: ClassVar[UtfBom]
    UTF_32BE: ClassVar[UtfBom]
    UTF_16LE: ClassVar[UtfBom]
    UTF_16BE: ClassVar[UtfBom]

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix", bytes(self.prefix[:4]).ljust(4, b"\0"))

    def matches(self, data: bytes) -> bool:
        """Return True if ``data`` starts with this mark."""
        head = bytes(data[:4]).ljust(4, b"\0")
        return (
            head[:2] == self.prefix[:2]
            and (self.size < 3 or head[2] == self.prefix[2])
            and (self.size < 4 or head[3] == self.prefix[3])
        )


UtfBom.NO_UTF = UtfBom(0)
UtfBom.UTF_8 = UtfBom(3, b"\xef\xbb\xbf")
UtfBom.UTF_32LE = UtfBom(4, b"\xff\xfe")
UtfBom.UTF_32BE = UtfBom(4, b"\0\0\xfe\xff")
UtfBom.UTF_16LE = UtfBom(2, b"\xff\xfe")
UtfBom.UTF_16BE = UtfBom(2, b"\xfe\xff")

_KNOWN_BOMS = (
    UtfBom.UTF_8,
    UtfBom.UTF_32LE,
    UtfBom.UTF_32BE,
    UtfBom.UTF_16LE,
    UtfBom.UTF_16BE,
)


def read_utf_bom(stream: IO[bytes]) -> UtfBom:
    """Detect the byte order mark of a binary stream.

    The stream is left positioned behind the mark, or at its start if no
    known mark was found.
    """
    data = stream.read(4)
    for bom in _KNOWN_BOMS:
        if bom.matches(data):
            stream.seek(bom.size)
            return bom
    stream.seek(0)
    return UtfBom.NO_UTF