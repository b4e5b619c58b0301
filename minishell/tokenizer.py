"""Splitting a command line into words, redirection operators and pipes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DELIMITERS = " \t\n\f\r"
_META_CHARS = "<>|"
_QUOTES = ("'", '"')


class TokenKind(enum.Enum):
    """What a token stands for once the line has been split."""

    SYNTAX_ERROR = enum.auto()
    DEFAULT = enum.auto()
    PIPE = enum.auto()
    REDIRECT = enum.auto()
    NULL = enum.auto()


@dataclass(frozen=True)
class Token:
    """One word of a command line and its kind."""

    word: str
    kind: TokenKind = TokenKind.DEFAULT


def is_delimiter(char: str) -> bool:
    """Tell whether ``char`` separates words outside quotes."""
    return len(char) == 1 and char in _DELIMITERS


def is_meta_char(char: str) -> bool:
    """Tell whether ``char`` is a redirection or pipe character."""
    return len(char) == 1 and char in _META_CHARS


def is_in_redirect_word(word: str | None) -> bool:
    """Tell whether ``word`` is ``<`` or ``<<``."""
    return word in ("<", "<<")


def is_out_redirect_word(word: str | None) -> bool:
    """Tell whether ``word`` is ``>`` or ``>>``."""
    return word in (">", ">>")


def is_redirect_word(word: str | None) -> bool:
    """Tell whether ``word`` is any redirection operator."""
    return is_in_redirect_word(word) or is_out_redirect_word(word)


def update_quote(char: str, quote: str) -> str:
    """Return the quote in force after reading ``char``; ``""`` means none."""
    if char in _QUOTES:
        if not quote:
            return char
        if quote == char:
            return ""
    return quote


def next_token(line: str) -> tuple[str, int]:
    """Read the first token of ``line``.

    Returns the token text, which is empty when only delimiters were read,
    and the number of characters of ``line`` consumed.
    """
    quote = ""
    chars: list[str] = []
    length = len(line)
    i = 0
    while i < length:
        char = line[i]
        quote = update_quote(char, quote)
        if not is_delimiter(char) or quote:
            chars.append(char)
            if (
                is_meta_char(char)
                and char != "|"
                and i + 1 < length
                and line[i + 1] == char
            ):
                i += 1
                chars.append(line[i])
        following = line[i + 1] if i + 1 < length else ""
        ends_word = (
            is_delimiter(following)
            or is_meta_char(following)
            or is_meta_char(line[i])
        )
        if (chars and not quote and ends_word) or i == length - 1:
            break
        i += 1
    return "".join(chars), min(i + 1, length) if length else 0


def split_tokens(line: str) -> list[str]:
    """Split ``line`` into token texts, dropping empty ones."""
    words: list[str] = []
    position = 0
    while position < len(line):
        word, consumed = next_token(line[position:])
        position += max(consumed, 1)
        if word:
            words.append(word)
    return words