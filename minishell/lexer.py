"""Splitting a command line into classified tokens."""

from __future__ import annotations

from minishell.tokens import Token, classify, match_metachar

QUOTES = "'\""


def quote_length(text: str) -> int:
    """Length of the quoted run that ``text`` starts with, closing quote included.

    An unclosed quote runs to the end of ``text``.
    """
    if not text:
        return 0
    closing = text.find(text[0], 1)
    return len(text) if closing == -1 else closing + 1


def token_length(text: str) -> int:
    """Length of the first word of ``text``.

    A word ends at a space or before a metacharacter; a metacharacter at the
    start is a word on its own. Quoted runs are taken whole.
    """
    pos = 0
    while pos < len(text) and text[pos] != " ":
        meta = match_metachar(text[pos:])
        if meta:
            return len(meta) if pos == 0 else pos
        if text[pos] in QUOTES:
            pos += quote_length(text[pos:])
            continue
        pos += 1
    return pos


def split_words(line: str | None) -> list[str]:
    """Split ``line`` into words, skipping the spaces between them."""
    words: list[str] = []
    rest = line or ""
    while True:
        rest = rest.lstrip(" ")
        if not rest:
            return words
        length = token_length(rest)
        words.append(rest[:length])
        rest = rest[length:]


def tokenize(line: str | None) -> list[Token]:
    """Split ``line`` into words and classify each one."""
    return [Token(word, classify(word)) for word in split_words(line)]