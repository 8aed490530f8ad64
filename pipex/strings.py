"""String helpers with the edge-case behaviour of the classic C string routines.

Positions are returned as indices, or None where the C routine would return a
null pointer. Routines that fill a destination buffer return the new text
together with the length the C routine reports.
"""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Callable, MutableSequence

_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits yields 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def itoa(number: int) -> str:
    """Format an integer in decimal, with a leading minus sign when negative."""
    return format(number, "d")


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.find(c)
    return None if index == -1 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first needle lying wholly within the first length characters.

    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; the end of a string counts as code 0.

    Returns the code difference of the first unequal pair, or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for x, y in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
        if x == "\0":
            break
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the text that fits and the full length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size else ""
    return copied, len(src)
def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length the append tried to create. When
    size does not exceed len(dst), dst is unchanged and size + len(src) is reported.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str],
    func: Callable[[int, MutableSequence[str]], None],
) -> None:
    """Call func(index, text) for every position so func may change text in place."""
    for index in range(len(text)):
        func(index, text)