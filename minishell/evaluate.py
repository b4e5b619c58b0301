"""Removing quotes from tokens and giving each token its kind."""

from __future__ import annotations

from typing import TextIO

from minishell.expand import is_env_delimiter
from minishell.messages import report, unclosed_quote
from minishell.tokenizer import Token, TokenKind, is_redirect_word, split_tokens

_EVAL_CHARS = "'\"$\\"


def should_eval(word: str) -> bool:
    """Tell whether ``word`` holds a quote, ``$`` or backslash."""
    return any(char in _EVAL_CHARS for char in word)


def is_change_quote_flag(quote: str, char: str) -> bool:
    """Tell whether ``char`` opens or closes a quote given the current one."""
    if char not in ("'", '"'):
        return False
    return not quote or char == quote


def is_expand(quote: str) -> bool:
    """Tell whether variables are expanded inside ``quote``."""
    return quote in ("", '"')


def is_add_dollar(text: str) -> bool:
    """Tell whether ``text`` starts with a ``$`` that names no variable."""
    return text[:1] == "$" and is_env_delimiter(text[1:2])


def token_kind(word: str | None) -> TokenKind:
    """Kind of a token judged by its text before quotes are removed."""
    if word is None:
        return TokenKind.NULL
    if word == "|":
        return TokenKind.PIPE
    if is_redirect_word(word):
        return TokenKind.REDIRECT
    return TokenKind.DEFAULT


def evaluate_word(word: str) -> tuple[str, bool]:
    """Remove quote characters from ``word``.

    Returns the text and whether every quote was closed.
    """
    quote = ""
    parts: list[str] = []
    for position, char in enumerate(word):
        if is_change_quote_flag(quote, char):
            quote = "" if quote == char else char
        elif is_add_dollar(word[position:]):
            parts.append("$")
        else:
            parts.append(char)
    return "".join(parts), not quote


def evaluate(tokens: list[Token], stderr: TextIO | None = None) -> list[Token]:
    """Evaluate every token; an unclosed quote gives a syntax-error token."""
    evaluated: list[Token] = []
    for token in tokens:
        kind = token_kind(token.word)
        if should_eval(token.word):
            text, closed = evaluate_word(token.word)
            if not closed:
                report(unclosed_quote(), stderr)
                kind = TokenKind.SYNTAX_ERROR
            evaluated.append(Token(text, kind))
        else:
            evaluated.append(Token(token.word, kind))
    return evaluated


def tokenize(line: str, stderr: TextIO | None = None) -> list[Token]:
    """Split an expanded line into evaluated tokens.

    A line with no tokens gives a single empty token.
    """
    tokens = [
        Token(word, TokenKind.REDIRECT if is_redirect_word(word) else TokenKind.DEFAULT)
        for word in split_tokens(line)
    ]
    if not tokens:
        tokens.append(Token("", TokenKind.NULL))
    return evaluate(tokens, stderr)