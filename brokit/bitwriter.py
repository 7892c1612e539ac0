"""Least-significant-bit-first bit writer."""

from __future__ import annotations

__all__ = ["BitWriter", "MAX_BITS_PER_WRITE"]

MAX_BITS_PER_WRITE = 56
"""Largest number of bits accepted by a single :meth:`BitWriter.write_bits`."""


class BitWriter:
    """Writes bits into bytes at increasing addresses, LSB first within a byte."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bits written so far."""
        return self._position

    def write_bits(self, n_bits: int, bits: int) -> None:
        """Append the low ``n_bits`` of ``bits``; ``bits`` must fit in them."""
        if not 0 <= n_bits <= MAX_BITS_PER_WRITE:
            raise ValueError(
                f"n_bits must be between 0 and {MAX_BITS_PER_WRITE}, got {n_bits}"
            )
        if not 0 <= bits < (1 << n_bits):
            raise ValueError(f"value {bits} does not fit in {n_bits} bits")
        end = self._position + n_bits
        needed = (end + 7) >> 3
        if len(self._buffer) < needed:
            self._buffer.extend(bytes(needed - len(self._buffer)))
        shifted = bits << (self._position & 7)
        index = self._position >> 3
        while shifted:
            self._buffer[index] |= shifted & 0xFF
            shifted >>= 8
            index += 1
        self._position = end

    def prepare_storage(self) -> None:
        """Check that the writer sits on a byte boundary before raw storage."""
        if self._position & 7:
            raise ValueError(
                f"bit position {self._position} is not on a byte boundary"
            )
        del self._buffer[self._position >> 3:]

    def getvalue(self) -> bytes:
        """Return the written bytes, the last one padded with zero bits."""
        return bytes(self._buffer[: (self._position + 7) >> 3])