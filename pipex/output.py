"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os

from pipex.chars import itoa


def _write_all(fd: int, data: bytes) -> int:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def put_char(c: str, fd: int) -> int:
    """Write a single character to fd; returns the number of bytes written."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return _write_all(fd, c.encode())


def put_str(text: str | None, fd: int) -> int:
    """Write text to fd; None writes nothing. Returns bytes written."""
    if text is None:
        return 0
    return _write_all(fd, text.encode())


def put_endl(text: str | None, fd: int) -> int:
    """Write text and a newline to fd; None writes nothing. Returns bytes written."""
    if text is None:
        return 0
    return _write_all(fd, text.encode() + b"\n")


def put_nbr(n: int, fd: int) -> int:
    """Write a 32-bit signed integer in decimal to fd. Returns bytes written."""
    return _write_all(fd, itoa(n).encode())