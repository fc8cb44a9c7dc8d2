"""The shell's ordered table of environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from minishell.tokens import match_metachar


@dataclass
class EnvVar:
    """One variable; a value of None means declared but unset."""

    name: str | None
    value: str | None = None


def env_name(entry: str | None) -> str | None:
    """Return the part of ``entry`` before the first '=', or None if empty."""
    if not entry:
        return None
    name = entry.split("=", 1)[0]
    return name or None


def _name_end(arg: str) -> int | None:
    """Index where a well-formed name stops, or None if a character is bad."""
    starts_with_letter = arg[:1].isascii() and arg[:1].isalpha()
    for index, char in enumerate(arg):
        if char in (" ", "="):
            return index
        if ("0" < char < "9" and not starts_with_letter) or match_metachar(arg[index:]):
            return None
    return len(arg)


def is_valid_identifier(arg: str | None) -> bool:
    """Check an ``export``/``unset`` argument for a usable variable name."""
    if arg is None or arg[:1] in (" ", "="):
        return False
    end = _name_end(arg)
    if end is None:
        return False
    return end == len(arg) or arg[end] == "="


class Environment:
    """Variables in insertion order, as the shell keeps them."""

    def __init__(self, entries: Iterable[str] | None = None) -> None:
        self._vars: list[EnvVar] = []
        for entry in entries or ():
            self.add(entry)

    def add(self, entry: str) -> EnvVar:
        """Append a variable from a ``NAME=value`` or ``NAME`` string."""
        name = env_name(entry)
        rest = entry[len(name or ""):]
        value = rest[1:] if rest.startswith("=") and len(rest) > 1 else None
        var = EnvVar(name, value)
        self._vars.append(var)
        return var

    def _find(self, name: str | None) -> EnvVar | None:
        if name is None:
            return None
        return next((var for var in self._vars if var.name == name), None)

    def get(self, name: str | None) -> str | None:
        """Value of the first variable called ``name``, or None."""
        var = self._find(name)
        return var.value if var else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._find(name) is not None

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)

    def update(self, name: str | None, value: str | None) -> bool:
        """Set an existing variable's value; False if there is none."""
        var = self._find(name)
        if var is None:
            return False
        var.value = value
        return True

    def delete(self, name: str | None) -> bool:
        """Remove the first variable called ``name``; False if absent."""
        var = self._find(name)
        if var is None:
            return False
        self._vars.remove(var)
        return True

    def to_envp(self) -> list[str]:
        """``NAME=value`` strings of the set variables, last added first."""
        return [f"{var.name}={var.value}" for var in reversed(self._vars) if var.value is not None]