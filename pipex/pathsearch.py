"""Looking up environment variables and executables on the search path."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.errors import CommandNotFoundError, EnvError
from pipex.text import split

Environment = Mapping[str, str] | Iterable[str]


def _entries(env: Environment) -> list[tuple[str, str]]:
    if isinstance(env, Mapping):
        return list(env.items())
    pairs = []
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep:
            pairs.append((name, value))
    return pairs


def _require_env(env: Environment | None) -> list[tuple[str, str]]:
    if env is None:
        raise EnvError()
    if isinstance(env, Mapping):
        if not env:
            raise EnvError()
        return list(env.items())
    env = list(env)
    if not env:
        raise EnvError()
    return _entries(env)


def getenv(name: str, env: Environment) -> str | None:
    """Value of the first variable called name, or None.

    env is either a mapping or a sequence of ``NAME=value`` strings.
    """
    for key, value in _entries(env):
        if key == name:
            return value
    return None


def _search(name: str, entries: list[tuple[str, str]]) -> str | None:
    path_value = next((value for key, value in entries if key == "PATH"), None)
    if path_value is None:
        return None
    for directory in split(path_value, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK | os.F_OK):
            return candidate
    return None


def find_command(name: str, env: Environment) -> str | None:
    """First ``dir/name`` on PATH that is executable, or None.

    An empty environment raises EnvError.
    """
    return _search(name, _require_env(env))


def resolve_command(command: str, env: Environment) -> tuple[str, list[str]]:
    """Split a command line on spaces and locate its program.

    Returns the program's path and the argument list, program name first.
    Raises EnvError for an empty environment and CommandNotFoundError when
    the command is blank or not on PATH.
    """
    entries = _require_env(env)
    words = split(command, " ")
    if not words:
        raise CommandNotFoundError()
    path = _search(words[0], entries)
    if path is None:
        raise CommandNotFoundError()
    return path, words