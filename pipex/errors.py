"""Exceptions raised when a pipeline cannot be set up or run."""

from __future__ import annotations


class PipexError(Exception):
    """Base class for every error the pipeline reports to the user."""

    default_message = "pipex error"

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UsageError(PipexError):
    """The command line does not have the expected shape."""

    default_message = "Error, expected 4 arguments"


class EnvError(PipexError):
    """No environment is available to look commands up in."""

    default_message = "Env error"


class CommandNotFoundError(PipexError):
    """A command is empty or cannot be found on the search path."""

    default_message = "execve : Command not found"