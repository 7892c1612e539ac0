"""Context modelling: map the two previous bytes to a literal context id."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "CONTEXT_LOOKUP",
    "CONTEXT_LOOKUP_OFFSETS",
    "ContextMode",
    "context_id",
]


class ContextMode(IntEnum):
    """The four literal context modelling modes."""

    LSB6 = 0
    MSB6 = 1
    UTF8 = 2
    SIGNED = 3


_WHITESPACE = frozenset(b"\t\n\r")
_QUOTES = frozenset(b"\"'")
_OPENING = frozenset(b"(<[{")
_CLOSING = frozenset(b")>]}")
_SEPARATORS = frozenset(b",;:")
_VOWELS = frozenset(b"aeiou")


def _is_control(byte: int) -> bool:
    return byte < 0x20 or byte == 0x7F


def _last_byte_class(byte: int) -> int:
    """Classify an ASCII byte as the last byte in UTF8 mode (0..15)."""
    ch = chr(byte)
    if byte in _WHITESPACE:
        return 1
    if _is_control(byte):
        return 0
    if byte == 0x20:
        return 2
    if byte in _QUOTES:
        return 4
    if ch == "%":
        return 5
    if byte in _OPENING:
        return 6
    if byte in _CLOSING:
        return 7
    if byte in _SEPARATORS:
        return 8
    if ch == ".":
        return 9
    if ch == "=":
        return 10
    if ch.isdigit():
        return 11
    if "A" <= ch <= "Z":
        return 12 if (byte | 0x20) in _VOWELS else 13
    if "a" <= ch <= "z":
        return 14 if byte in _VOWELS else 15
    return 3


def _second_byte_class(byte: int) -> int:
    """Classify an ASCII byte as the second last byte in UTF8 mode (0..3)."""
    ch = chr(byte)
    if _is_control(byte) or byte == 0x20:
        return 0
    if ch.isdigit() or "A" <= ch <= "Z":
        return 2
    if "a" <= ch <= "z":
        return 3
    return 1


def _signed_bucket(byte: int) -> int:
    if byte == 0:
        return 0
    if byte < 16:
        return 1
    if byte < 64:
        return 2
    if byte < 128:
        return 3
    if byte < 192:
        return 4
    if byte < 240:
        return 5
    if byte < 255:
        return 6
    return 7


def _build_lookup() -> bytes:
    utf8_last = [_last_byte_class(b) << 2 for b in range(128)]
    utf8_last += [b & 1 for b in range(128, 192)]
    utf8_last += [2 | (b & 1) for b in range(192, 256)]

    utf8_second = [_second_byte_class(b) for b in range(128)]
    utf8_second += [0 if b < 224 else 2 for b in range(128, 256)]

    signed_second = [_signed_bucket(b) for b in range(256)]
    signed_last = [bucket << 3 for bucket in signed_second]
    lsb6_last = [b & 0x3F for b in range(256)]
    msb6_last = [b >> 2 for b in range(256)]
    six_bit_second = [0] * 256

    table = (
        utf8_last
        + utf8_second
        + signed_second
        + signed_last
        + lsb6_last
        + msb6_last
        + six_bit_second
    )
    return bytes(table)


CONTEXT_LOOKUP: bytes = _build_lookup()
"""Common lookup table shared by all context modes (1792 entries)."""

CONTEXT_LOOKUP_OFFSETS: dict[ContextMode, tuple[int, int]] = {
    ContextMode.LSB6: (1024, 1536),
    ContextMode.MSB6: (1280, 1536),
    ContextMode.UTF8: (0, 256),
    ContextMode.SIGNED: (768, 512),
}
"""Table offsets for the last byte and the second last byte, per mode."""


def context_id(p1: int, p2: int, mode: ContextMode | int) -> int:
    """Return the context id (0..63) for last byte ``p1`` and second last ``p2``."""
    for name, value in (("p1", p1), ("p2", p2)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} must be a byte value, got {value}")
    try:
        mode = ContextMode(mode)
    except ValueError:
        raise ValueError(f"unknown context mode: {mode!r}") from None
    offset1, offset2 = CONTEXT_LOOKUP_OFFSETS[mode]
    return CONTEXT_LOOKUP[offset1 + p1] | CONTEXT_LOOKUP[offset2 + p2]