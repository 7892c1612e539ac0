"""Symbol histograms for literals, commands, distances and context maps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = [
    "BLOCK_TYPE_ALPHABET_SIZE",
    "CONTEXT_MAP_ALPHABET_SIZE",
    "DISTANCE_CONTEXT_BITS",
    "Histogram",
    "LITERAL_ALPHABET_SIZE",
    "LITERAL_CONTEXT_BITS",
]

LITERAL_ALPHABET_SIZE = 256
CONTEXT_MAP_ALPHABET_SIZE = 272
"""256 Huffman tree indexes plus 16 run length codes."""
BLOCK_TYPE_ALPHABET_SIZE = 258
"""256 block types plus 2 special symbols."""

LITERAL_CONTEXT_BITS = 6
DISTANCE_CONTEXT_BITS = 2


class Histogram:
    """Population counts over an alphabet of ``size`` symbols."""

    __slots__ = ("data", "total_count", "bit_cost")

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"alphabet size must be positive, got {size}")
        self.data: list[int] = [0] * size
        self.total_count = 0
        self.bit_cost = 0.0

    @property
    def size(self) -> int:
        """Number of symbols in the alphabet."""
        return len(self.data)

    def _check(self, value: int) -> None:
        if not 0 <= value < len(self.data):
            raise IndexError(
                f"symbol {value} outside alphabet of size {len(self.data)}"
            )

    def add(self, value: int) -> None:
        """Count one occurrence of ``value``."""
        self._check(value)
        self.data[value] += 1
        self.total_count += 1

    def remove(self, value: int) -> None:
        """Take back one occurrence of ``value``."""
        self._check(value)
        if self.data[value] == 0:
            raise ValueError(f"symbol {value} has no occurrences to remove")
        self.data[value] -= 1
        self.total_count -= 1

    def add_many(self, values: Iterable[int]) -> None:
        """Count every symbol in ``values``."""
        for value in values:
            self.add(value)

    def add_histogram(self, other: Histogram) -> None:
        """Add the counts of ``other``, which must share this alphabet size."""
        if other.size != self.size:
            raise ValueError(
                f"cannot add histogram of size {other.size} to one of size {self.size}"
            )
        self.total_count += other.total_count
        self.data = [a + b for a, b in zip(self.data, other.data)]

    def clear(self) -> None:
        """Reset every count to zero."""
        self.data = [0] * len(self.data)
        self.total_count = 0

    def copy(self) -> Histogram:
        """Return an independent copy."""
        clone = Histogram(self.size)
        clone.data = list(self.data)
        clone.total_count = self.total_count
        clone.bit_cost = self.bit_cost
        return clone

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, value: int) -> int:
        self._check(value)
        return self.data[value]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Histogram):
            return NotImplemented
        return self.data == other.data and self.total_count == other.total_count

    def __repr__(self) -> str:
        return f"Histogram(size={self.size}, total_count={self.total_count})"