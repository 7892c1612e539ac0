"""Literal cost model: estimated bits per literal from a sliding-window histogram."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "estimate_bit_costs_for_literals",
    "estimate_bit_costs_for_literals_utf8",
    "utf8_position",
]

_WINDOW_HALF = 2000
_UTF8_WINDOW_HALF = 495
_EXPENSIVE_PREFIX = 2000


def _log2(value: int) -> float:
    return math.log2(value) if value > 0 else 0.0


def utf8_position(last: int, c: int, clamp: int) -> int:
    """Return where the byte after ``c`` sits in a UTF-8 sequence, at most ``clamp``.

    0 means a first byte, 1 a second byte and 2 a third byte.
    """
    if c < 128:
        return 0
    if c >= 192:
        return min(1, clamp)
    if last < 0xE0:
        return 0
    return min(2, clamp)


def _prepare(
    data: Sequence[int], pos: int, length: int | None, mask: int | None
) -> tuple[bytes, int, int]:
    data = bytes(data)
    if pos < 0:
        raise ValueError(f"pos must be non-negative, got {pos}")
    if length is None:
        length = max(len(data) - pos, 0)
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if mask is None:
        # All bits set: masking leaves every position unchanged.
        mask = -1
        if pos + length > len(data):
            raise ValueError(
                f"range [{pos}, {pos + length}) exceeds data of {len(data)} bytes"
            )
    elif mask < 0 or (length and mask >= len(data)):
        raise ValueError(f"mask {mask} does not fit data of {len(data)} bytes")
    return data, length, mask


def _decide_multi_byte_stats_level(
    data: bytes, pos: int, length: int, mask: int
) -> int:
    counts = [0, 0, 0]
    last_c = 0
    for i in range(length):
        c = data[(pos + i) & mask]
        counts[utf8_position(last_c, c, 2)] += 1
        last_c = c
    # Level 2 would model three-byte sequences but 1 compresses better.
    max_utf8 = 1
    if counts[1] + counts[2] < 25:
        max_utf8 = 0
    return max_utf8


def estimate_bit_costs_for_literals(
    data: Sequence[int],
    pos: int = 0,
    length: int | None = None,
    mask: int | None = None,
) -> list[float]:
    """Estimate the entropy-coded bit cost of each literal in ``[pos, pos + length)``.

    ``mask`` turns logical positions into indexes of ``data`` when it is a ring
    buffer; without it positions index ``data`` directly. The result holds one
    cost per literal, in order.
    """
    data, length, mask = _prepare(data, pos, length, mask)
    histogram = [0] * 256
    in_window = min(_WINDOW_HALF, length)
    for i in range(in_window):
        histogram[data[(pos + i) & mask]] += 1

    costs: list[float] = []
    for i in range(length):
        if i - _WINDOW_HALF >= 0:
            histogram[data[(pos + i - _WINDOW_HALF) & mask]] -= 1
            in_window -= 1
        if i + _WINDOW_HALF < length:
            histogram[data[(pos + i + _WINDOW_HALF) & mask]] += 1
            in_window += 1
        histo = histogram[data[(pos + i) & mask]] or 1
        lit_cost = _log2(in_window) - _log2(histo) + 0.029
        if lit_cost < 1.0:
            lit_cost = lit_cost * 0.5 + 0.5
        costs.append(lit_cost)
    return costs


def estimate_bit_costs_for_literals_utf8(
    data: Sequence[int],
    pos: int = 0,
    length: int | None = None,
    mask: int | None = None,
) -> list[float]:
    """Like :func:`estimate_bit_costs_for_literals`, with separate statistics
    per position inside UTF-8 sequences."""
    data, length, mask = _prepare(data, pos, length, mask)

    def at(offset: int) -> int:
        return 0 if offset < 0 else data[(pos + offset) & mask]

    max_utf8 = _decide_multi_byte_stats_level(data, pos, length, mask)
    histogram = [[0] * 256 for _ in range(3)]
    in_window_utf8 = [0, 0, 0]
    window_half = _UTF8_WINDOW_HALF

    last_c = 0
    utf8_pos = 0
    for i in range(min(window_half, length)):
        c = at(i)
        histogram[utf8_pos][c] += 1
        in_window_utf8[utf8_pos] += 1
        utf8_pos = utf8_position(last_c, c, max_utf8)
        last_c = c

    costs: list[float] = []
    for i in range(length):
        if i - window_half >= 0:
            past = utf8_position(
                at(i - window_half - 2), at(i - window_half - 1), max_utf8
            )
            histogram[past][at(i - window_half)] -= 1
            in_window_utf8[past] -= 1
        if i + window_half < length:
            future = utf8_position(
                at(i + window_half - 2), at(i + window_half - 1), max_utf8
            )
            histogram[future][at(i + window_half)] += 1
            in_window_utf8[future] += 1
        current = utf8_position(at(i - 2), at(i - 1), max_utf8)
        histo = histogram[current][at(i)] or 1
        lit_cost = _log2(in_window_utf8[current]) - _log2(histo) + 0.02905
        if lit_cost < 1.0:
            lit_cost = lit_cost * 0.5 + 0.5
        # The first bytes are made more expensive; it helps compression.
        if i < _EXPENSIVE_PREFIX:
            lit_cost += 0.7 - ((_EXPENSIVE_PREFIX - i) / 2000.0 * 0.35)
        costs.append(lit_cost)
    return costs