"""Character classification and case conversion over the ASCII range.

Every function takes either an integer code or a one-character string.
Case conversion returns the same kind of value it was given.
"""

from __future__ import annotations


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: int | str, low: int, high: int, shift: int) -> int | str:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map a lowercase ASCII letter to uppercase; leave anything else alone."""
    return _convert(c, 97, 122, -32)


def to_lower(c: int | str) -> int | str:
    """Map an uppercase ASCII letter to lowercase; leave anything else alone."""
    return _convert(c, 65, 90, 32)