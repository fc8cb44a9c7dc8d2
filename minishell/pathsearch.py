"""Looking up command names in the directories listed by PATH."""

from __future__ import annotations

import os

from minishell.environment import Environment


def candidate_paths(path_value: str | None, name: str) -> list[str]:
    """Each non-empty PATH directory joined with ``name``, in order."""
    return [f"{directory}/{name}" for directory in (path_value or "").split(":") if directory]


def resolve_command(name: str | None, env: Environment) -> str | None:
    """Return the first existing PATH candidate for ``name``, else ``name``."""
    if not name or "PATH" not in env:
        return name
    for candidate in candidate_paths(env.get("PATH"), name):
        if os.access(candidate, os.F_OK):
            return candidate
    return name