"""Per-session shell state and signal handling."""

from __future__ import annotations

import os
import signal
import sys
from dataclasses import dataclass, field
from typing import Any

from minishell.environment import Environment
from minishell.tokens import Token


class ShellExit(Exception):
    """Raised to leave the shell with a given exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


@dataclass
class ShellState:
    """Everything the shell keeps between and during command lines."""

    env: Environment = field(default_factory=Environment)
    exit_status: int = 0
    exec_output: int = 0
    cmd: str | None = None
    tokens: list[Token] = field(default_factory=list)
    commands: list[Any] = field(default_factory=list)
    heredoc_fd: int = 0

    def reset_line(self) -> None:
        """Drop everything built for the current line and close its files."""
        self.cmd = None
        self.tokens = []
        for command in self.commands:
            command.close()
        self.commands = []
        if self.heredoc_fd > 2:
            try:
                os.close(self.heredoc_fd)
            except OSError:
                pass
        self.heredoc_fd = 0

    def check_eof(self) -> None:
        """Leave the shell with status 131 when input has ended."""
        if self.cmd is None:
            self.exit_status = 131
            raise ShellExit(131)

    def handle_interrupt(self, signum: int, frame: Any) -> None:
        """React to Ctrl+C: record status 130 and start a fresh line."""
        if signum == signal.SIGINT:
            self.exit_status = 130
            sys.stdout.write("\n")
            sys.stdout.flush()


def install_signal_handlers(state: ShellState) -> None:
    """Route SIGINT to ``state`` and ignore SIGQUIT."""
    signal.signal(signal.SIGINT, state.handle_interrupt)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)