"""Helpers to find the user's home, run programs and open documents."""

from __future__ import annotations

import os
import stat
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

PathLike = str | os.PathLike


@dataclass(frozen=True)
class CommandResult:
    """Exit code and standard output of a shell command."""

    exit_code: int
    output: str


def get_user_home() -> Path:
    """Return the user's home directory from the environment, or ``.``.

    ``HOME`` is tried first, then ``USERPROFILE``, then ``HOMEDRIVE``
    joined with ``HOMEPATH``.
    """
    for name in ("HOME", "USERPROFILE"):
        value = os.environ.get(name)
        if value:
            return Path(value)
    drive = os.environ.get("HOMEDRIVE")
    if drive:
        home_path = os.environ.get("HOMEPATH")
        if home_path:
            return Path(drive + os.sep + home_path)
    return Path(".")


def _is_windows() -> bool:
    return sys.platform.startswith("win")


def is_executable(path: PathLike) -> bool:
    """Return True if ``path`` is executable.

    On Windows that is a name ending in ``.exe``; elsewhere any execute
    permission bit. A missing file raises :class:`FileNotFoundError`.
    """
    if _is_windows():
        return os.fspath(path).endswith(".exe")
    mode = os.stat(path).st_mode
    return bool(mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH))


def execute(path: PathLike) -> int:
    """Run ``path`` through the shell and return its exit status."""
    return subprocess.run(os.fspath(path), shell=True, check=False).returncode


def open_document(path: PathLike) -> int:
    """Open ``path`` with the desktop's default application.

    On Windows returns 1 on success; elsewhere the exit status of
    ``xdg-open`` (127 if it cannot be found).
    """
    if _is_windows():
        os.startfile(os.fspath(path))  # type: ignore[attr-defined]
        return 1
    try:
        return subprocess.run(["xdg-open", os.fspath(path)], check=False).returncode
    except FileNotFoundError:
        return 127


def execute_or_open(path: PathLike) -> int:
    """Run ``path`` if it is executable, otherwise open it as a document."""
    return execute(path) if is_executable(path) else open_document(path)


def command(cmdline: PathLike) -> CommandResult:
    """Run ``cmdline`` through the shell and capture its standard output."""
    try:
        completed = subprocess.run(
            os.fspath(cmdline),
            shell=True,
            stdout=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise RuntimeError("starting the command failed") from exc
    output = completed.stdout.decode("utf-8", errors="replace")
    return CommandResult(completed.returncode, output)