"""A small command line option parser with prefix matched options."""

from __future__ import annotations

import sys
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import IO, Any, Callable, Iterable, Iterator

from utilbox.strings import convert_to

Action = Callable[[str], None]


@dataclass
class Arg:
    """One option: short and long form, argument name, help text and action.

    An option without an action is recognised and consumed, but runs nothing.
    """

    short_cmd: str
    long_cmd: str
    needed_arg: str = ""
    explanation: str = ""
    action: Action | None = None

    @property
    def _help_width(self) -> int:
        return len(self.short_cmd) + len(self.needed_arg) + 4 + len(self.long_cmd)

    def _run(self, value: str) -> None:
        if self.action is not None:
            self.action(value)


class Parser:
    """Match arguments against options by prefix and run their actions.

    A ``-h``/``--help`` option that prints the help and exits is always added.
    """

    def __init__(self, app_name: str = "", args: Iterable[Arg] = ()) -> None:
        self._app_name = app_name
        self._commands: list[Arg] = list(args)
        self._remaining: list[str] = []
        self._commands.append(Arg("-h", "--help", "", "This help", self._help_and_exit))

    def _help_and_exit(self, _: str) -> None:
        self.show_help(sys.stdout)
        sys.exit(0)

    def add(self, *args: Arg | Iterable[Arg]) -> None:
        """Add options, given singly or as iterables of options."""
        for item in args:
            if isinstance(item, Arg):
                self._commands.append(item)
            else:
                self._commands.extend(item)

    def _find(self, item: str) -> tuple[Arg, str] | None:
        for cmd in self._commands:
            if item.startswith(cmd.short_cmd):
                return cmd, cmd.short_cmd
            if item.startswith(cmd.long_cmd):
                return cmd, cmd.long_cmd
        return None

    @staticmethod
    def _execute(cmd: Arg, match: str, item: str, rest: Iterator[str]) -> None:
        if not cmd.needed_arg:
            cmd._run("")
        elif len(item) > len(match):
            cmd._run(item[len(match):])
        else:
            value = next(rest, None)
            if value is None:
                raise ValueError(f"missing argument after {match}")
            cmd._run(value)

    def process(self, args: Iterable[str] | None = None) -> None:
        """Process ``args`` (default: the program's arguments without its name).

        Arguments that match no option are kept as remaining arguments.
        """
        rest = iter(sys.argv[1:] if args is None else args)
        for item in rest:
            found = self._find(item)
            if found is None:
                self._remaining.append(item)
            else:
                self._execute(found[0], found[1], item, rest)

    def show_help(self, out: IO[str] | None = None) -> None:
        """Write the application name and an aligned table of options."""
        out = sys.stdout if out is None else out
        width = max((cmd._help_width for cmd in self._commands), default=0)
        out.write(f"{self._app_name}\navailable options:\n")
        for cmd in self._commands:
            padding = " " * (width - cmd._help_width)
            out.write(
                f"  {cmd.short_cmd}|{cmd.long_cmd} {cmd.needed_arg}{padding}"
                f" : {cmd.explanation}\n"
            )

    def remaining_args(self) -> list[str]:
        """Return the arguments that matched no option."""
        return list(self._remaining)

    def name(self) -> str:
        """Return the application name."""
        return self._app_name


def _get(target: Any, attr: str) -> Any:
    if isinstance(target, MutableMapping):
        return target[attr]
    return getattr(target, attr)


def _set(target: Any, attr: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[attr] = value
    else:
        setattr(target, attr, value)


def make_toggle(target: Any, attr: str) -> Action:
    """Return an action that flips the flag ``attr`` of ``target``."""

    def toggle(_: str) -> None:
        _set(target, attr, not _get(target, attr))

    return toggle


def make_increment(target: Any, attr: str) -> Action:
    """Return an action that adds one to ``attr`` of ``target``."""

    def increment(_: str) -> None:
        _set(target, attr, _get(target, attr) + 1)

    return increment


def make_value(target: Any, attr: str, kind: type | None = None) -> Action:
    """Return an action that stores its argument, converted, in ``attr``.

    Without ``kind`` the type of the current value is used.
    """

    def store(text: str) -> None:
        value_kind = type(_get(target, attr)) if kind is None else kind
        _set(target, attr, convert_to(value_kind, text))

    return store