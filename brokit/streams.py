"""Input and output adapters for streaming compression."""

from __future__ import annotations

from typing import BinaryIO

__all__ = [
    "BytesOutput",
    "FileInput",
    "FileOutput",
    "MemoryInput",
    "MemoryOutput",
    "OutputFullError",
]


class OutputFullError(OSError):
    """Raised when a write would exceed the room an output has."""


class MemoryInput:
    """Reads successive chunks of an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self.reset(data)

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    def reset(self, data: bytes) -> None:
        """Start reading ``data`` from its beginning."""
        self._data = bytes(data)
        self._pos = 0

    def read(self, n: int) -> bytes | None:
        """Return the next chunk of at most ``n`` bytes, or ``None`` at the end."""
        if n < 0:
            raise ValueError(f"read size must be non-negative, got {n}")
        if self._pos == len(self._data):
            return None
        chunk = self._data[self._pos:self._pos + n]
        self._pos += len(chunk)
        return chunk


class MemoryOutput:
    """Writes into a fixed-capacity in-memory buffer."""

    def __init__(self, capacity: int) -> None:
        self.reset(capacity)

    @property
    def position(self) -> int:
        """Number of bytes written so far."""
        return len(self._buffer)

    @property
    def capacity(self) -> int:
        return self._capacity

    def reset(self, capacity: int) -> None:
        """Discard what was written and allow ``capacity`` bytes."""
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        """Append ``data``, all or nothing."""
        if len(self._buffer) + len(data) > self._capacity:
            raise OutputFullError(
                f"writing {len(data)} bytes at {len(self._buffer)}"
                f" exceeds capacity {self._capacity}"
            )
        self._buffer += data

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class BytesOutput:
    """Appends to a growing byte string of at most ``max_size`` bytes."""

    def __init__(self, max_size: int) -> None:
        self.reset(max_size)

    def reset(self, max_size: int) -> None:
        """Start a new, empty byte string limited to ``max_size`` bytes."""
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._max_size = max_size
        self._buffer = bytearray()

    def write(self, data: bytes) -> None:
        """Append ``data``, all or nothing."""
        if len(self._buffer) + len(data) > self._max_size:
            raise OutputFullError(
                f"output would grow past its maximum of {self._max_size} bytes"
            )
        self._buffer += data

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class FileInput:
    """Reads chunks of at most ``max_read_size`` bytes from a binary file."""

    def __init__(self, f: BinaryIO, max_read_size: int) -> None:
        if max_read_size < 1:
            raise ValueError(f"max_read_size must be positive, got {max_read_size}")
        self._file = f
        self._max_read_size = max_read_size
        self._eof = False

    def read(self, n: int) -> bytes | None:
        """Return up to ``n`` bytes, or ``None`` once the file is exhausted.

        A zero-byte request returns ``b""`` unless the end was already seen.
        """
        if n < 0:
            raise ValueError(f"read size must be non-negative, got {n}")
        if n == 0:
            return None if self._eof else b""
        n = min(n, self._max_read_size)
        chunk = self._file.read(n)
        if len(chunk) < n:
            self._eof = True
        return chunk or None


class FileOutput:
    """Writes to a binary file."""

    def __init__(self, f: BinaryIO) -> None:
        self._file = f

    def write(self, data: bytes) -> None:
        """Write all of ``data``; raise :class:`OSError` on a short write."""
        written = self._file.write(data)
        if written is not None and written != len(data):
            raise OSError(f"short write: {written} of {len(data)} bytes")