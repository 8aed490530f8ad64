"""Writing characters, strings, lines and integers to a text stream."""

from __future__ import annotations

from typing import TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(text: str, stream: TextIO) -> None:
    """Write text as is."""
    stream.write(text)


def put_endl(text: str, stream: TextIO) -> None:
    """Write text followed by a newline."""
    stream.write(text)
    stream.write("\n")


def put_nbr(number: int, stream: TextIO) -> None:
    """Write an integer in decimal, with a leading minus sign when negative."""
    stream.write(format(number, "d"))