"""Prefix codes for block lengths: each code covers a range of values."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "BLOCK_LENGTH_PREFIX_CODES",
    "NUM_BLOCK_LENGTH_PREFIXES",
    "PrefixCodeRange",
    "block_length_range",
]


@dataclass(frozen=True)
class PrefixCodeRange:
    """The values ``[offset, offset + 2**nbits)`` belonging to one prefix code."""

    offset: int
    nbits: int

    @property
    def end(self) -> int:
        """First value past the range."""
        return self.offset + (1 << self.nbits)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.offset <= value < self.end


BLOCK_LENGTH_PREFIX_CODES: tuple[PrefixCodeRange, ...] = tuple(
    PrefixCodeRange(offset, nbits)
    for offset, nbits in (
        (1, 2), (5, 2), (9, 2), (13, 2),
        (17, 3), (25, 3), (33, 3), (41, 3),
        (49, 4), (65, 4), (81, 4), (97, 4),
        (113, 5), (145, 5), (177, 5), (209, 5),
        (241, 6), (305, 6), (369, 7), (497, 8),
        (753, 9), (1265, 10), (2289, 11), (4337, 12),
        (8433, 13), (16625, 24),
    )
)
"""Value ranges of the block length prefix codes, indexed by code."""

NUM_BLOCK_LENGTH_PREFIXES = len(BLOCK_LENGTH_PREFIX_CODES)


def block_length_range(code: int) -> PrefixCodeRange:
    """Return the range of block lengths covered by prefix ``code``."""
    if not 0 <= code < NUM_BLOCK_LENGTH_PREFIXES:
        raise ValueError(
            f"block length prefix code must be in 0..{NUM_BLOCK_LENGTH_PREFIXES - 1},"
            f" got {code}"
        )
    return BLOCK_LENGTH_PREFIX_CODES[code]