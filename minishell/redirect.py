"""Opening the files named by a command's redirections."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TextIO

from minishell.env import Environment
from minishell.messages import PREFIX, report
from minishell.parser import Redirect, RedirectKind

_FILE_MODE = 0o644
_OUTPUT_FLAGS = {
    RedirectKind.OUT_OVERWRITE: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
    RedirectKind.OUT_APPEND: os.O_WRONLY | os.O_CREAT | os.O_APPEND,
}


class RedirectError(Exception):
    """A redirection target could not be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{PREFIX}{path}: {reason}")
        self.path = path
        self.reason = reason

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> RedirectError:
        return cls(path, exc.strerror or str(exc))


def _close(fd: int | None) -> None:
    if fd is not None:
        os.close(fd)


def open_output_files(outputs: Sequence[Redirect]) -> int | None:
    """Create or open every output target in order and return the last descriptor.

    Each earlier descriptor is closed once the next one is opened.
    Returns ``None`` when there are no output redirections, meaning standard
    output is kept. Raises ``RedirectError`` when a file cannot be opened and
    ``ValueError`` for a redirection that is not an output.
    """
    last: int | None = None
    for redirect in outputs:
        flags = _OUTPUT_FLAGS.get(redirect.kind)
        if flags is None:
            _close(last)
            raise ValueError(f"not an output redirection: {redirect.kind}")
        _close(last)
        last = None
        try:
            last = os.open(redirect.arg, flags, _FILE_MODE)
        except OSError as exc:
            raise RedirectError.from_os_error(redirect.arg, exc) from exc
    return last


def open_input_files(inputs: Sequence[Redirect]) -> int | None:
    """Open every input target for reading and return the last descriptor.

    Each earlier descriptor is closed once the next one is opened.
    Returns ``None`` when there are no input redirections, meaning standard
    input is kept. Raises ``RedirectError`` when a file cannot be opened.
    """
    last: int | None = None
    for redirect in inputs:
        _close(last)
        last = None
        try:
            last = os.open(redirect.arg, os.O_RDONLY)
        except OSError as exc:
            raise RedirectError.from_os_error(redirect.arg, exc) from exc
    return last


def check_input_files(
    inputs: Sequence[Redirect],
    env: Environment,
    stderr: TextIO | None = None,
) -> bool:
    """Tell whether every input target can be opened for reading.

    The first failure is reported, sets the exit status to 1 and stops the
    check.
    """
    for redirect in inputs:
        try:
            fd = os.open(redirect.arg, os.O_RDONLY)
        except OSError as exc:
            report(str(RedirectError.from_os_error(redirect.arg, exc)) + "\n", stderr)
            env.exit_status = 1
            return False
        os.close(fd)
    return True


def is_path(text: str | None) -> bool:
    """Tell whether ``text`` names a path: a ``/`` after at most two dots."""
    if text is None:
        return False
    for char in text[:3]:
        if char == "/":
            return True
        if char != ".":
            break
    return False