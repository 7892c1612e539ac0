"""Sliding window over the input data."""

from __future__ import annotations

__all__ = ["RingBuffer"]

_SLACK = 7
"""Zero bytes kept past the tail so eight-byte reads never run off the end."""


class RingBuffer:
    """A circular window of ``2**window_bits`` bytes.

    Writing a byte stores it at ``position % 2**window_bits``. The buffer also
    mirrors its first ``2**tail_bits`` bytes just past the window, so that
    ``buffer[i] == buffer[i + window_size]`` for ``i < tail_size``.
    """

    def __init__(self, window_bits: int, tail_bits: int) -> None:
        if window_bits < 0 or tail_bits < 0:
            raise ValueError("window_bits and tail_bits must be non-negative")
        self._window_size = 1 << window_bits
        self._mask = self._window_size - 1
        self._tail_size = 1 << tail_bits
        self._pos = 0
        self._buffer = bytearray(self._window_size + self._tail_size + _SLACK)

    @property
    def position(self) -> int:
        """Logical cursor position: the number of bytes written."""
        return self._pos

    @property
    def mask(self) -> int:
        """Bit mask turning a logical position into a physical one."""
        return self._mask

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def tail_size(self) -> int:
        return self._tail_size

    @property
    def buffer(self) -> memoryview:
        """Read-only view of the whole physical buffer, tail and slack included."""
        return memoryview(self._buffer).toreadonly()

    def write(self, data: bytes) -> None:
        """Push ``data`` into the ring; it may not exceed the window size."""
        n = len(data)
        if n > self._window_size:
            raise ValueError(
                f"cannot write {n} bytes into a window of {self._window_size}"
            )
        data = bytes(data)
        masked_pos = self._pos & self._mask
        self._write_tail(data, masked_pos)
        size = self._window_size
        if masked_pos + n <= size:
            self._buffer[masked_pos:masked_pos + n] = data
        else:
            first = min(n, size + self._tail_size - masked_pos)
            self._buffer[masked_pos:masked_pos + first] = data[:first]
            rest = data[size - masked_pos:]
            self._buffer[:len(rest)] = rest
        self._pos += n

    def _write_tail(self, data: bytes, masked_pos: int) -> None:
        if masked_pos < self._tail_size:
            count = min(len(data), self._tail_size - masked_pos)
            start = self._window_size + masked_pos
            self._buffer[start:start + count] = data[:count]

    def reset(self) -> None:
        """Move the cursor back to the start."""
        self._pos = 0

    def __getitem__(self, position: int) -> int:
        """Byte stored for logical ``position``."""
        return self._buffer[position & self._mask]