"""Diagnostic output on standard error."""

from __future__ import annotations

import sys


def print_error(*args: str | None) -> None:
    """Write the given pieces, skipping None, to standard error."""
    sys.stderr.write("".join(part for part in args if part is not None))
    sys.stderr.flush()