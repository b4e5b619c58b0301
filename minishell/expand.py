"""Expansion of ``$NAME`` and ``$?`` in a command line."""

from __future__ import annotations

from minishell.env import Environment

_DIGITS = "0123456789"


def _is_alnum(char: str) -> bool:
    return len(char) == 1 and (
        ("a" <= char <= "z") or ("A" <= char <= "Z") or char in _DIGITS
    )


def is_env_key_char(char: str) -> bool:
    """Tell whether ``char`` may follow ``$`` to start an expansion."""
    return _is_alnum(char) or char in ("_", "?") and char != ""


def is_env_delimiter(char: str) -> bool:
    """Tell whether ``char`` ends a variable name."""
    return not (_is_alnum(char) or char == "_")


def special_value(key: str, env: Environment) -> str | None:
    """Value of a one-character special parameter; only ``?`` is known."""
    if key == "?":
        return str(env.exit_status)
    return None


def env_value(text: str, env: Environment) -> tuple[str | None, int]:
    """Look up the variable named at the start of ``text`` (the part after ``$``).

    Returns the value, or ``None`` if unset, and the number of characters
    of ``text`` that form the name.
    """
    if not text:
        return None, 0
    first = text[0]
    if first in _DIGITS or first == "?":
        return special_value(first, env), 1
    length = 0
    while length < len(text) and not is_env_delimiter(text[length]):
        length += 1
    if length == 0:
        return None, 0
    return env.find(text[:length]), length


def escape_pipes(value: str | None, quote: str = "") -> str | None:
    """Quote every ``|`` in an expanded value so it is not read as a pipe."""
    if value is None:
        return None
    quote = quote or ""
    return value.replace("|", f'{quote}"|"{quote}')


def _update_quote(char: str, quote: str) -> str:
    if char in ("'", '"'):
        if not quote:
            return char
        if quote == char:
            return ""
    return quote


def expand_env(line: str, env: Environment) -> str:
    """Replace variables outside single quotes; quote characters are kept."""
    parts: list[str] = []
    quote = ""
    i = 0
    while i < len(line):
        char = line[i]
        quote = _update_quote(char, quote)
        nxt = line[i + 1] if i + 1 < len(line) else ""
        if char == "$" and quote != "'" and is_env_key_char(nxt):
            value, consumed = env_value(line[i + 1 :], env)
            expanded = escape_pipes(value, quote)
            if expanded is not None:
                parts.append(expanded)
            i += 1 + consumed
        else:
            parts.append(char)
            i += 1
    return "".join(parts)