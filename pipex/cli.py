"""Command-line entry point: infile "cmd1" ... "cmdN" outfile."""

from __future__ import annotations

import os
import sys
from typing import IO

from pipex.errors import PipexError
from pipex.pathsearch import Environment
from pipex.pipeline import parse_args


def run(
    argv: list[str],
    env: Environment | None = None,
    stdin: IO | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Parse argv, run the pipeline and report problems on stderr.

    The exit status is 0 in every case, errors included.
    """
    if env is None:
        env = os.environ
    if stdin is None:
        stdin = sys.stdin.buffer
    if stderr is None:
        stderr = sys.stderr
    try:
        pipeline = parse_args(argv, env)
        outcomes = pipeline.run(stdin)
    except PipexError as exc:
        stderr.write(f"{exc}\n")
        return 0
    for outcome in outcomes:
        if isinstance(outcome, PipexError):
            stderr.write(f"{outcome}\n")
    stderr.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run with the process's own arguments, environment and streams."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, os.environ, sys.stdin.buffer, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())