"""Commands built from tokens: name, arguments and redirections."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TextIO

from minishell.env import Environment
from minishell.messages import report, syntax_error
from minishell.tokenizer import Token, TokenKind, is_in_redirect_word

SYNTAX_ERROR_STATUS = 258


class RedirectKind(enum.Enum):
    """How a redirection target is used."""

    IN = enum.auto()
    HEREDOC = enum.auto()
    EXPANDED_HEREDOC = enum.auto()
    OUT_OVERWRITE = enum.auto()
    OUT_APPEND = enum.auto()


_KINDS_BY_OPERATOR = {
    "<": RedirectKind.IN,
    "<<": RedirectKind.HEREDOC,
    ">": RedirectKind.OUT_OVERWRITE,
    ">>": RedirectKind.OUT_APPEND,
}


@dataclass
class Redirect:
    """One redirection: a file name (or heredoc delimiter) and its kind."""

    arg: str
    kind: RedirectKind


@dataclass
class Command:
    """One simple command of a pipeline."""

    name: str | None = None
    args: list[str] = field(default_factory=list)
    inputs: list[Redirect] = field(default_factory=list)
    outputs: list[Redirect] = field(default_factory=list)
    next_pipe: bool = False
    is_error: bool = False
    is_heredoc_error: bool = False

    def add_word(self, word: str) -> None:
        """Take ``word`` as the command name, or as an argument once named."""
        if self.name is None:
            self.name = word
        else:
            self.args.append(word)


def redirect_kind(word: str) -> RedirectKind:
    """Kind of redirection named by an operator; ``ValueError`` otherwise."""
    try:
        return _KINDS_BY_OPERATOR[word]
    except KeyError:
        raise ValueError(f"not a redirection operator: {word!r}") from None


def add_redirect(
    command: Command,
    operator: Token,
    target: Token | None,
    env: Environment,
    stderr: TextIO | None = None,
) -> Redirect | None:
    """Attach the redirection ``operator target`` to ``command``.

    A missing target or a target that is itself an operator is a syntax
    error: it is reported, the command is marked as failed, the exit status
    becomes 258 and ``None`` is returned.
    """
    if target is None or target.kind is TokenKind.REDIRECT:
        report(syntax_error(None if target is None else target.word), stderr)
        env.exit_status = SYNTAX_ERROR_STATUS
        command.is_error = True
        return None
    redirect = Redirect(target.word, redirect_kind(operator.word))
    if is_in_redirect_word(operator.word):
        command.inputs.append(redirect)
    else:
        command.outputs.append(redirect)
    return redirect


def syntax_error_in_front(
    token: Token | None,
    command: Command,
    env: Environment,
    stderr: TextIO | None = None,
) -> Command:
    """Report an unexpected leading token and mark ``command`` as failed."""
    report(syntax_error(None if token is None else token.word), stderr)
    command.is_error = True
    env.exit_status = 1
    return command