"""Expansion of variables, exit statuses and ``~`` in command-line words."""

from __future__ import annotations

from dataclasses import replace

from minishell.state import ShellState
from minishell.tokens import Token, TokenType

QUOTES = "'\""
_NAME_STOP = " \"'$"
_LONE_DOLLAR_FOLLOWERS = ("", " ", '"', "'")


def _join(left: str | None, right: str | None) -> str | None:
    """Concatenate, keeping None only when both sides are None."""
    if left is None and right is None:
        return None
    return (left or "") + (right or "")


def _expand_special(word: str, pos: int, state: ShellState) -> tuple[str | None, int]:
    """Expand the ``$`` or ``~`` at ``pos``.

    Returns the text to append (None for nothing) and the index of the last
    character consumed.
    """
    if word[pos] == "~":
        return state.env.get("HOME"), pos
    following = word[pos + 1:pos + 2]
    if following == "$":
        return str(state.exit_status), pos + 1
    if following == "?":
        return str(state.exec_output), pos + 1
    if following in _LONE_DOLLAR_FOLLOWERS:
        return "$", pos
    end = pos + 1
    while end < len(word) and word[end] not in _NAME_STOP:
        end += 1
    return state.env.get(word[pos + 1:end]), end - 1


def expand_word(word: str | None, state: ShellState) -> str | None:
    """Remove quotes and expand ``$NAME``, ``$?``, ``$$`` and ``~`` in ``word``.

    Nothing is expanded inside single quotes. Returns None when the word
    expands to nothing at all.
    """
    text = word or ""
    result: str | None = None
    quote: str | None = None
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in QUOTES and quote in (None, char):
            quote = None if quote else char
        elif quote != "'" and char in "$~":
            piece, pos = _expand_special(text, pos, state)
            result = _join(result, piece)
        else:
            result = (result or "") + char
        pos += 1
    return result


def expand_tokens(tokens: list[Token], state: ShellState) -> list[Token]:
    """Expand every word of ``tokens`` that is subject to expansion.

    Words after a redirection keep their original text when they would
    expand to nothing; heredoc delimiters are left alone.
    """
    expanded = list(tokens)
    index = 0
    while index < len(expanded):
        token = expanded[index]
        if token.type == TokenType.TEXT:
            expanded[index] = replace(token, content=expand_word(token.content, state))
        elif index + 1 < len(expanded) and token.type != TokenType.PIPE:
            if token.type != TokenType.DOUBLE_LESS:
                target = expanded[index + 1]
                content = expand_word(target.content, state)
                if content is not None:
                    expanded[index + 1] = replace(target, content=content)
            index += 1
        index += 1
    return expanded


def _drop_empty(tokens: list[Token]) -> list[Token]:
    if tokens and tokens[0].content is None:
        # The token that moves to the front is kept without being checked.
        return tokens[1:2] + [token for token in tokens[2:] if token.content is not None]
    return [token for token in tokens if token.content is not None]


def expand(tokens: list[Token], state: ShellState) -> list[Token]:
    """Expand ``tokens`` and drop the words that expanded to nothing.

    After a syntax error (status 2) the tokens are returned unchanged.
    """
    if state.exec_output == 2:
        return list(tokens)
    return _drop_empty(expand_tokens(tokens, state))