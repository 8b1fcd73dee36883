"""String helpers with C-library semantics expressed over Python strings.

Positions are returned as indices, and ``None`` stands for "not found".
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str, what: str = "character") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single {what}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping the empty pieces between repeated separators."""
    _single_char(sep, "separator character")
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first c in text; a NUL matches the end of the string."""
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last c in text; a NUL matches the end of the string."""
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of text."""
    return str(text)


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, char) for each character, in place.

    Whatever f returns, other than None, replaces the character at that index.
    """
    for index, char in enumerate(chars):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for every character of text."""
    return "".join(f(index, char) for index, char in enumerate(text))


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including its terminator.

    Returns the copied text, truncated to at most size - 1 characters, and
    the full length of src, so truncation shows as a length >= size.
    """
    _non_negative(size, "size")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including its terminator.

    Returns the resulting text and the length the full result would need.
    When dst already fills the buffer it is returned unchanged together with
    len(src) + size.
    """
    _non_negative(size, "size")
    dst_len = len(dst)
    src_len = len(src)
    if dst_len >= size:
        return dst, src_len + size
    return dst + src[: size - dst_len - 1], dst_len + src_len


def strlen(text: str) -> int:
    """Number of characters in text."""
    return len(text)


def _char_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders a and b."""
    _non_negative(n, "n")
    if n == 0:
        return 0
    index = 0
    while (
        index < len(a)
        and index < len(b)
        and index + 1 < n
        and a[index] == b[index]
    ):
        index += 1
    return _char_at(a, index) - _char_at(b, index)


def strcmp(a: str, b: str) -> int:
    """Compare two strings; the sign of the result orders a and b."""
    index = 0
    while index < len(a) and index < len(b) and a[index] == b[index]:
        index += 1
    return _char_at(a, index) - _char_at(b, index)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first little lying wholly within the first length characters of big."""
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]