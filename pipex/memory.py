"""Byte buffer operations: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into dest and return dest."""
    if dest is src:
        return dest
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dest, overlap allowed."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if dest + n > len(buffer) or src + n > len(buffer):
        raise ValueError("range runs past the end of the buffer")
    if dest != src:
        buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate count * size zeroed bytes, refusing sizes that overflow."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} bytes overflows the address space")
    return bytearray(count * size)