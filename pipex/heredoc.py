"""Reading lines and here-documents from a stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield lines from stream, each with its newline; the last may lack one."""
    while True:
        line = stream.readline()
        if not line:
            return
        yield line


def read_heredoc(stream: IO[AnyStr], limiter: str) -> AnyStr | str:
    """Collect lines from stream up to the limiter line.

    A line ends the document when it starts with limiter and is exactly one
    character longer (normally the newline). The limiter line itself is not
    included. Reaching the end of the stream ends the document too.
    """
    collected = []
    empty: AnyStr | str = ""
    for line in iter_lines(stream):
        if isinstance(line, bytes):
            empty = b""
            key = limiter.encode()
        else:
            key = limiter
        if line.startswith(key) and len(line) - 1 == len(key):
            break
        collected.append(line)
    return empty.join(collected)