"""Reading a source line by line in fixed-size chunks."""

from __future__ import annotations

import io
import os
from typing import Iterator, Union

BUFFER_SIZE = 42

Line = Union[str, bytes]


class LineReader:
    """Return successive lines of a file descriptor or a readable stream.

    Each line keeps its trailing newline; the last line may lack one. Data read
    past the end of a line is kept for the next call.
    """

    def __init__(self, source, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, bool):
            raise TypeError("source must be a file descriptor or a readable stream")
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            text = False
        elif callable(getattr(source, "read", None)):
            text = isinstance(source, io.TextIOBase)
        else:
            raise TypeError("source must be a file descriptor or a readable stream")
        self._source = source
        self._buffer_size = buffer_size
        self._newline: Line = "\n" if text else b"\n"
        self._buffer: Line = "" if text else b""

    def _read_chunk(self) -> Line:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        chunk = self._source.read(self._buffer_size)
        return chunk if chunk else self._buffer[:0]

    def _take_line(self) -> Line:
        """Remove and return the buffered text up to and including the first newline."""
        index = self._buffer.find(self._newline)
        cut = len(self._buffer) if index < 0 else index + 1
        line, self._buffer = self._buffer[:cut], self._buffer[cut:]
        return line

    def read_line(self) -> Line | None:
        """Return the next line, or None once the source is exhausted."""
        line = self._take_line()
        while not line.endswith(self._newline):
            chunk = self._read_chunk()
            if not chunk:
                break
            self._buffer += chunk
            line += self._take_line()
        return line or None

    def __iter__(self) -> Iterator[Line]:
        while (line := self.read_line()) is not None:
            yield line