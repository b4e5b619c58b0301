"""Commands the shell runs itself: export, unset, exit, pwd and env."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from minishell.env import Environment

_DIGITS = "0123456789"
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: TextIO | None) -> TextIO:
    return sys.stderr if stream is None else stream


def _is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_alnum(char: str) -> bool:
    return _is_alpha(char) or char in _DIGITS


def is_long(text: str) -> bool:
    """Tell whether ``text`` is an optional sign and digits fitting a signed 64-bit integer."""
    body = text[1:] if text[:1] in ("-", "+") else text
    negative = text[:1] == "-"
    value = 0
    for char in body:
        if char not in _DIGITS:
            return False
        digit = int(char)
        value = value * 10 - digit if negative else value * 10 + digit
        if not _LONG_MIN <= value <= _LONG_MAX:
            return False
    return True


def _to_int(text: str) -> int:
    body = text.lstrip("+-")
    value = int(body) if body else 0
    return -value if text.startswith("-") else value


def is_valid_key(text: str) -> bool:
    """Tell whether the part of ``text`` before ``=`` is a valid variable name."""
    key = text.split("=", 1)[0]
    for position, char in enumerate(key):
        if position == 0 and not (_is_alpha(char) or char == "_"):
            return False
        if position != 0 and not (_is_alnum(char) or char == "_"):
            return False
    return text != "="


def builtin_export(
    env: Environment,
    args: list[str],
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Set every ``KEY=VALUE`` argument; return the exit status."""
    if len(args) == 1:
        _out(stdout).write("export: not enough arguments\n")
        return 1
    status = 0
    for arg in args[1:]:
        if not is_valid_key(arg):
            _err(stderr).write(
                f"minishell: export: `{arg}': not a valid identifier\n"
            )
            status = 1
        elif "=" in arg:
            env.add(arg)
    return status


def builtin_unset(env: Environment, args: list[str]) -> int:
    """Remove every named variable; always succeeds."""
    for key in args[1:]:
        env.delete(key)
    return 0


def builtin_exit(
    env: Environment, args: list[str], stderr: TextIO | None = None
) -> int:
    """Raise ``ShellExit``, or return 1 when given too many arguments."""
    if len(args) == 1:
        raise ShellExit(env.exit_status & 0xFF)
    if not is_long(args[1]):
        _err(stderr).write(
            f"minishell: exit: {args[1]}: numeric argument required\n"
        )
        raise ShellExit(255)
    if len(args) == 2:
        raise ShellExit(_to_int(args[1]) & 0xFF)
    _err(stderr).write("minishell: exit: too many arguments\n")
    return 1


def builtin_pwd(stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """Print the working directory; always succeeds."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(stderr).write(f"minishell: pwd: {exc.strerror or exc}\n")
        return 0
    _out(stdout).write(cwd + "\n")
    return 0


def builtin_env(
    env: Environment,
    args: list[str],
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Print every variable as ``KEY=VALUE``; always succeeds."""
    if len(args) != 1:
        _err(stderr).write("env: too many arguments\n")
    out = _out(stdout)
    for entry in env.to_list():
        out.write(entry + "\n")
    return 0