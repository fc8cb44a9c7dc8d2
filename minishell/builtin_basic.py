"""The echo, env, pwd and exit builtins."""

from __future__ import annotations

import os
from itertools import takewhile
from typing import TextIO

from minishell.errors import print_error
from minishell.state import ShellExit, ShellState

_WHITESPACE = " \t\n\v\f\r"


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def parse_int(text: str | None) -> int:
    """Read a leading, optionally signed decimal integer as a 32-bit int.

    Leading whitespace is skipped and reading stops at the first non-digit;
    with no digits the result is 0.
    """
    rest = (text or "").lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    value = _to_int32(int(digits)) if digits else 0
    return _to_int32(sign * value)


def is_all_numeric(text: str | None) -> bool:
    """True when every character of ``text`` is an ASCII digit."""
    return all("0" <= ch <= "9" for ch in text or "")


def run_echo(args: list[str], out: TextIO, state: ShellState) -> None:
    """Print the arguments after ``args[0]``; a leading ``-n`` drops the newline."""
    words = list(args[1:])
    no_newline = bool(words) and words[0] == "-n"
    if no_newline:
        words = words[1:]
    out.write(" ".join(words))
    if not no_newline:
        out.write("\n")
    out.flush()
    state.exec_output = 0


def run_env(out: TextIO, state: ShellState) -> None:
    """Print every variable that has a value as ``NAME=value``."""
    for var in state.env:
        if var.value is not None:
            out.write(f"{var.name or ''}={var.value}\n")
        state.exec_output = 0
    out.flush()


def run_pwd(out: TextIO, state: ShellState) -> None:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = ""
    out.write(cwd + "\n")
    out.flush()


def run_exit(args: list[str], state: ShellState) -> None:
    """Leave the shell by raising ShellExit with the requested status.

    With more than one argument an error is printed, the status set to 1
    and the shell keeps running.
    """
    operands = args[1:]
    if len(operands) > 1:
        print_error("bash: exit: too many arguments\n")
        state.exec_output = 1
        return
    if operands:
        if is_all_numeric(operands[0]):
            state.exec_output = parse_int(operands[0])
        else:
            print_error("bash: exit: ", operands[0], ": numeric argument required\n")
            state.exec_output = 255
    else:
        state.exec_output = 0
    raise ShellExit(state.exec_output % 256)