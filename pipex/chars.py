"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \n\t\r\f\v")
_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _wrap_int(value: int) -> int:
    """Reduce a value to a signed 32-bit integer, two's complement style."""
    value &= (1 << _INT_BITS) - 1
    if value > _INT_MAX:
        value -= 1 << _INT_BITS
    return value


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; others are returned as given."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; others are returned as given."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. The result wraps to 32 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)