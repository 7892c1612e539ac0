"""Lookup table from command prefix codes to insert and copy length ranges."""

from __future__ import annotations

from dataclasses import dataclass

from brokit.prefix import PrefixCodeRange

__all__ = [
    "COMMAND_LUT",
    "COPY_LENGTH_CODES",
    "INSERT_LENGTH_CODES",
    "NUM_COMMAND_PREFIXES",
    "CommandLutEntry",
    "command_lut_entry",
]

INSERT_LENGTH_CODES: tuple[PrefixCodeRange, ...] = tuple(
    PrefixCodeRange(offset, nbits)
    for offset, nbits in (
        (0, 0), (1, 0), (2, 0), (3, 0), (4, 0), (5, 0), (6, 1), (8, 1),
        (10, 2), (14, 2), (18, 3), (26, 3), (34, 4), (50, 4), (66, 5), (98, 5),
        (130, 6), (194, 7), (322, 8), (578, 9), (1090, 10), (2114, 12),
        (6210, 14), (22594, 24),
    )
)
"""Insert length ranges, indexed by insert length code."""

COPY_LENGTH_CODES: tuple[PrefixCodeRange, ...] = tuple(
    PrefixCodeRange(offset, nbits)
    for offset, nbits in (
        (2, 0), (3, 0), (4, 0), (5, 0), (6, 0), (7, 0), (8, 0), (9, 0),
        (10, 1), (12, 1), (14, 2), (18, 2), (22, 3), (30, 3), (38, 4), (54, 4),
        (70, 5), (102, 5), (134, 6), (198, 7), (326, 8), (582, 9),
        (1094, 10), (2118, 24),
    )
)
"""Copy length ranges, indexed by copy length code."""

# Each block of 64 command codes combines a base insert code, a base copy
# code and whether the last distance is implied (0) or sent explicitly (-1).
_CELLS = (
    (0, 0, 0), (0, 8, 0),
    (0, 0, -1), (0, 8, -1),
    (8, 0, -1), (8, 8, -1),
    (0, 16, -1), (16, 0, -1),
    (8, 16, -1), (16, 8, -1),
    (16, 16, -1),
)

NUM_COMMAND_PREFIXES = 64 * len(_CELLS)


@dataclass(frozen=True)
class CommandLutEntry:
    """Decoded meaning of one command prefix code."""

    insert_len_extra_bits: int
    copy_len_extra_bits: int
    distance_code: int
    context: int
    insert_len_offset: int
    copy_len_offset: int


def _build_lut() -> tuple[CommandLutEntry, ...]:
    entries = []
    for insert_base, copy_base, distance_code in _CELLS:
        for index in range(64):
            insert_code = insert_base + (index >> 3)
            copy_code = copy_base + (index & 7)
            insert = INSERT_LENGTH_CODES[insert_code]
            copy = COPY_LENGTH_CODES[copy_code]
            entries.append(
                CommandLutEntry(
                    insert_len_extra_bits=insert.nbits,
                    copy_len_extra_bits=copy.nbits,
                    distance_code=distance_code,
                    context=min(copy_code, 3),
                    insert_len_offset=insert.offset,
                    copy_len_offset=copy.offset,
                )
            )
    return tuple(entries)


COMMAND_LUT: tuple[CommandLutEntry, ...] = _build_lut()
"""All command prefix codes, indexed by code."""


def command_lut_entry(code: int) -> CommandLutEntry:
    """Return the table entry for command prefix ``code``."""
    if not 0 <= code < NUM_COMMAND_PREFIXES:
        raise ValueError(
            f"command prefix code must be in 0..{NUM_COMMAND_PREFIXES - 1},"
            f" got {code}"
        )
    return COMMAND_LUT[code]