"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Iterator, Protocol, Union

BUFFER_SIZE = 42
MAX_FD = 1024

Chunk = Union[bytes, str]


class _Readable(Protocol):
    def read(self, size: int) -> Chunk: ...


def _find_newline(data: Chunk) -> int:
    """Return the index of the first newline in data, or -1 if there is none."""
    marker: Chunk = "\n" if isinstance(data, str) else b"\n"
    return data.find(marker)  # type: ignore[arg-type]


class LineReader:
    """Split what a stream yields into lines, each ending with its newline.

    The stream is read buffer_size units at a time until a newline is seen or
    the stream is exhausted. Text left after the last newline is returned as a
    final line without one.
    """

    def __init__(self, stream: _Readable, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Chunk | None = None

    def _read_until_newline(self) -> Chunk | None:
        pending = self._pending
        while pending is None or _find_newline(pending) == -1:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if isinstance(chunk, (bytearray, memoryview)):
                chunk = bytes(chunk)
            pending = chunk if pending is None else pending + chunk
        return pending

    def next_line(self) -> Chunk | None:
        """Return the next line, or None once the stream is exhausted.

        A read error discards anything buffered and propagates.
        """
        try:
            pending = self._read_until_newline()
        except OSError:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        end = _find_newline(pending)
        if end == -1:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[: end + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.next_line()) is not None:
            yield line


class _DescriptorStream:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self._fd, size)


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from a file descriptor, or None.

    Each descriptor keeps its own buffer between calls. None is returned at
    end of input, on a read error and for descriptors outside 0..1023.
    """
    if fd < 0 or fd >= MAX_FD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(_DescriptorStream(fd))
        _readers[fd] = reader
    try:
        line = reader.next_line()
    except OSError:
        line = None
    if line is None:
        _readers.pop(fd, None)
    return line