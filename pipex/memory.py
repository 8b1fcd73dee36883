"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first n bytes of buf to zero in place."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of nmemb elements of size bytes each.

    A zero count or size gives a one-byte buffer; a product that would
    overflow the platform's size type raises MemoryError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if nmemb and size > SIZE_MAX // nmemb:
        raise MemoryError("requested size overflows")
    if nmemb == 0 or size == 0:
        return bytearray(1)
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to c (taken modulo 256) in the first n bytes."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first unequal bytes in the first n, or 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest; returns dest."""
    _check_count(n, dest, src)
    if dest is src:
        return dest
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes within buf from offset src to offset dest, overlap allowed."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("range exceeds buffer length")
    if dest == src or n == 0:
        return buf
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with c (taken modulo 256); returns buf."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf