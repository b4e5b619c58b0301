"""Error messages printed by the shell."""

from __future__ import annotations

import sys
from typing import TextIO

PREFIX = "minishell: "


def command_not_found(command: str) -> str:
    """Message for a command that could not be found."""
    return f"{PREFIX}{command}: command not found\n"


def unclosed_quote() -> str:
    """Message for a line that ends inside a quote."""
    return f"{PREFIX}syntax error unclosed quote\n"


def syntax_error(word: str | None) -> str:
    """Message for an unexpected token; ``None`` means end of line."""
    shown = "newline" if word is None else word
    return f"{PREFIX}syntax error near unexpected token `{shown}'\n"


def report(message: str, stream: TextIO | None = None) -> None:
    """Write ``message`` to ``stream``, or to standard error."""
    target = sys.stderr if stream is None else stream
    target.write(message)
    target.flush()