"""Setting up and running a chain of commands joined by pipes."""

from __future__ import annotations

import os
import subprocess
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import IO, BinaryIO

from pipex.errors import PipexError, UsageError
from pipex.heredoc import read_heredoc
from pipex.pathsearch import Environment, resolve_command

HEREDOC_KEYWORD = "here_doc"
USAGE_MESSAGE = "Error, expected atleat 4 arguments"
HEREDOC_USAGE_MESSAGE = "Error, expected atleast 5 arguments using here_doc"
MISSING_INPUT_MESSAGE = "No such file or directory"


def _environment_dict(env: Environment | None) -> dict[str, str]:
    if env is None:
        return {}
    if isinstance(env, Mapping):
        return dict(env)
    variables: dict[str, str] = {}
    for entry in env:
        name, sep, value = entry.partition("=")
        if sep and name not in variables:
            variables[name] = value
    return variables


@dataclass
class Pipeline:
    """Commands to run in sequence, each feeding the next.

    With a limiter set, input comes from a here-document and the output
    file is appended to; otherwise input comes from infile and the output
    file is truncated.
    """

    commands: list[str]
    infile: str | None
    outfile: str
    env: dict[str, str] = field(default_factory=dict)
    limiter: str | None = None

    @property
    def is_heredoc(self) -> bool:
        return self.limiter is not None

    def open_input(self, stdin: IO | None = None) -> BinaryIO:
        """Open the stream the first command reads from.

        For a here-document the lines are read from stdin up to the limiter.
        A missing input file raises PipexError.
        """
        if self.limiter is not None:
            if stdin is None:
                raise PipexError("here_doc needs an input stream")
            document = read_heredoc(stdin, self.limiter)
            if isinstance(document, str):
                document = document.encode()
            buffer = tempfile.TemporaryFile()
            buffer.write(document)
            buffer.seek(0)
            return buffer
        if self.infile is None:
            raise PipexError(MISSING_INPUT_MESSAGE)
        try:
            return open(self.infile, "rb")
        except OSError as exc:
            raise PipexError(MISSING_INPUT_MESSAGE) from exc

    def open_output(self) -> BinaryIO:
        """Open the output file with mode 0644, appending or truncating."""
        flags = os.O_WRONLY | os.O_CREAT
        flags |= os.O_APPEND if self.is_heredoc else os.O_TRUNC
        try:
            fd = os.open(self.outfile, flags, 0o644)
        except OSError as exc:
            raise PipexError(f"{self.outfile}: {exc.strerror}") from exc
        return os.fdopen(fd, "wb")

    def run(self, stdin: IO | None = None) -> list[int | PipexError]:
        """Run every command and wait for all of them.

        Returns, for each command in order, its exit status or the error that
        kept it from starting. A command that cannot start leaves the next
        one reading an empty input.
        """
        outcomes: list[int | PipexError | None] = [None] * len(self.commands)
        processes: list[tuple[int, subprocess.Popen]] = []
        last = len(self.commands) - 1
        with self.open_input(stdin) as source, self.open_output() as sink:
            upstream: IO | None = source
            for index, command in enumerate(self.commands):
                downstream = sink if index == last else subprocess.PIPE
                process = None
                try:
                    path, args = resolve_command(command, self.env)
                    process = subprocess.Popen(
                        args,
                        executable=path,
                        stdin=upstream if upstream is not None else subprocess.DEVNULL,
                        stdout=downstream,
                        env=self.env,
                    )
                except PipexError as exc:
                    outcomes[index] = exc
                except OSError as exc:
                    outcomes[index] = PipexError(f"execve: {exc.strerror}")
                if upstream is not None and upstream is not source:
                    upstream.close()
                upstream = None
                if process is not None:
                    processes.append((index, process))
                    if index != last:
                        upstream = process.stdout
            if upstream is not None and upstream is not source:
                upstream.close()
            for index, process in processes:
                outcomes[index] = process.wait()
        return [outcome for outcome in outcomes if outcome is not None]


def parse_args(argv: list[str], env: Environment | None) -> Pipeline:
    """Build a Pipeline from the arguments that follow the program name.

    ``infile cmd1 ... cmdN outfile`` reads from infile; ``here_doc LIMITER
    cmd1 ... cmdN outfile`` reads a here-document. Raises UsageError when
    too few arguments are given.
    """
    argv = list(argv)
    if len(argv) < 4:
        raise UsageError(USAGE_MESSAGE)
    variables = _environment_dict(env)
    if argv[0] == HEREDOC_KEYWORD:
        if len(argv) < 5:
            raise UsageError(HEREDOC_USAGE_MESSAGE)
        return Pipeline(
            commands=argv[2:-1],
            infile=None,
            outfile=argv[-1],
            env=variables,
            limiter=argv[1],
        )
    return Pipeline(
        commands=argv[1:-1],
        infile=argv[0],
        outfile=argv[-1],
        env=variables,
    )