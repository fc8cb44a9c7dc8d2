"""Syntax checking of a token list, with continuation after a trailing pipe."""

from __future__ import annotations

from collections.abc import Callable

from minishell.errors import print_error
from minishell.lexer import tokenize
from minishell.state import ShellState
from minishell.tokens import Token, TokenType

ReadLine = Callable[[str], "str | None"]

SYNTAX_ERROR = "-bash: syntax error near unexpected token '"


def is_blank(text: str | None) -> bool:
    """True when ``text`` is missing or holds nothing but spaces."""
    return text is None or not text.lstrip(" ")


def read_continuation(read_line: ReadLine) -> str | None:
    """Prompt with '> ' until a non-blank line is given.

    Returns None when input ends or is interrupted.
    """
    while True:
        try:
            line = read_line("> ")
        except KeyboardInterrupt:
            return None
        if line is None:
            return None
        if not is_blank(line):
            return line


def drop_tokens_keeping_heredocs(tokens: list[Token], stop_index: int) -> list[Token]:
    """Discard tokens after a syntax error at ``stop_index``.

    Heredoc operators before the error are kept together with their
    delimiters, so that their input is still read.
    """
    kept: list[Token] = []
    index = 0
    while index < len(tokens):
        if index < stop_index and tokens[index].type == TokenType.DOUBLE_LESS:
            kept.extend(tokens[index:index + 2])
            index += 2
            continue
        if index == stop_index:
            stop_index = -1
        index += 1
    return kept


def _lex_error(tokens: list[Token], index: int, state: ShellState) -> list[Token]:
    print_error(SYNTAX_ERROR, tokens[index].content, "'\n")
    state.exec_output = 2
    return drop_tokens_keeping_heredocs(tokens, index)


def _file_error(tokens: list[Token], index: int, state: ShellState) -> list[Token]:
    following = tokens[index + 1].content if index + 1 < len(tokens) else "newline"
    print_error(SYNTAX_ERROR, following, "'\n")
    state.exec_output = 258
    return drop_tokens_keeping_heredocs(tokens, index)


def check_syntax(tokens: list[Token], state: ShellState, read_line: ReadLine) -> list[Token]:
    """Check ``tokens`` and return the list the rest of the shell works on.

    A trailing pipe asks for more input, which is appended to the tokens and
    to ``state.cmd``. On a syntax error the message is printed, the status
    set and only the heredocs before the error are kept.
    """
    tokens = list(tokens)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        has_next = index + 1 < len(tokens)
        if index == 0 and token.type == TokenType.PIPE:
            return _lex_error(tokens, index, state)
        if token.is_redirection():
            if not has_next or tokens[index + 1].type != TokenType.TEXT:
                return _file_error(tokens, index, state)
        elif token.type == TokenType.PIPE:
            if has_next and tokens[index + 1].type == TokenType.PIPE:
                return _lex_error(tokens, index, state)
            if not has_next:
                line = read_continuation(read_line)
                if line is None:
                    return []
                tokens.extend(tokenize(line))
                state.cmd = (state.cmd or "") + " " + line
                continue
        index += 1
    return tokens