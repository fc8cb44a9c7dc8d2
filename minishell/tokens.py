"""Token kinds, metacharacter matching and token classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

METACHARS: tuple[str, ...] = (">>", "<<", "<", ">", "|")


class TokenType(IntEnum):
    """Kind of a lexical token.

    Each operator's value is (code of its first character - 1) * its length.
    """

    TEXT = 0
    SINGLE_LESS = 59
    SINGLE_GREAT = 61
    DOUBLE_LESS = 118
    DOUBLE_GREAT = 122
    PIPE = 123


def match_metachar(text: str | None) -> str | None:
    """Return the metacharacter that ``text`` starts with, or None."""
    if not text:
        return None
    for meta in METACHARS:
        if text[0] != meta[0]:
            continue
        if len(meta) == 1 or text[1:2] == meta[1]:
            return meta
    return None


def classify(content: str | None) -> TokenType:
    """Return the token type of a word produced by the lexer."""
    meta = match_metachar(content)
    if meta is None:
        return TokenType.TEXT
    return TokenType((ord(meta[0]) - 1) * len(meta))


@dataclass
class Token:
    """A word of the command line together with its kind."""

    content: str | None
    type: TokenType = TokenType.TEXT

    def is_redirection(self) -> bool:
        """True for the four redirection operators."""
        return self.type not in (TokenType.TEXT, TokenType.PIPE)