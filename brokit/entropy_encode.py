"""Entropy encoding (Huffman) utilities."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = [
    "CODE_LENGTH_CODES",
    "MAX_CODE_DEPTH",
    "convert_bit_depths_to_symbols",
    "create_huffman_tree",
    "optimize_huffman_counts_for_rle",
    "reverse_bits",
    "write_huffman_tree",
]

CODE_LENGTH_CODES = 18
"""Size of the alphabet used to code Huffman code lengths."""

MAX_CODE_DEPTH = 15
"""Largest bit depth a symbol of a code tree may have."""

REPEAT_PREVIOUS_CODE = 16
"""Code-length symbol repeating the previous non-zero length (2 extra bits)."""

REPEAT_ZERO_CODE = 17
"""Code-length symbol repeating a zero length (3 extra bits)."""

_REVERSED_NIBBLES = (
    0x0, 0x8, 0x4, 0xC, 0x2, 0xA, 0x6, 0xE,
    0x1, 0x9, 0x5, 0xD, 0x3, 0xB, 0x7, 0xF,
)

_INITIAL_PREVIOUS_VALUE = 8


def _assign_depths(
    tree: list[tuple[float, int, int]], root: int, depth: list[int]
) -> None:
    stack = [(root, 0)]
    while stack:
        index, level = stack.pop()
        _, left, right_or_value = tree[index]
        if left >= 0:
            stack.append((left, level + 1))
            stack.append((right_or_value, level + 1))
        else:
            depth[right_or_value] = level


def create_huffman_tree(data: Sequence[int], tree_limit: int) -> list[int]:
    """Return the bit depth of every symbol of a Huffman code for ``data``.

    ``data`` holds population counts; symbols with a zero count get depth 0.
    No depth exceeds ``tree_limit``: small counts are raised to a growing
    floor until the tree fits.
    """
    counts = list(data)
    if any(count < 0 for count in counts):
        raise ValueError("population counts must be non-negative")
    length = len(counts)
    depth = [0] * length
    used = sum(1 for count in counts if count)
    if used == 0:
        return depth
    if tree_limit < 1 or used > (1 << tree_limit):
        raise ValueError(
            f"{used} symbols cannot fit in a code tree of depth {tree_limit}"
        )

    count_limit = 1
    while True:
        leaves = [
            (max(counts[i], count_limit), -1, i)
            for i in reversed(range(length))
            if counts[i]
        ]
        n = len(leaves)
        if n == 1:
            depth[leaves[0][2]] = 1
            break

        # sorted() is stable, so equal counts keep their order.
        tree: list[tuple[float, int, int]] = sorted(leaves, key=lambda node: node[0])
        sentinel = (math.inf, -1, -1)
        tree.append(sentinel)
        tree.append(sentinel)

        i = 0
        j = n + 1
        for _ in range(n - 1):
            if tree[i][0] <= tree[j][0]:
                left = i
                i += 1
            else:
                left = j
                j += 1
            if tree[i][0] <= tree[j][0]:
                right = i
                i += 1
            else:
                right = j
                j += 1
            # The trailing sentinel becomes the new parent node.
            tree[-1] = (tree[left][0] + tree[right][0], left, right)
            tree.append(sentinel)

        _assign_depths(tree, 2 * n - 1, depth)

        if max(depth) <= tree_limit:
            break
        count_limit *= 2
    return depth


def optimize_huffman_counts_for_rle(counts: Sequence[int]) -> list[int]:
    """Return counts adjusted so that the resulting code lengths RLE-compress well.

    The input is left untouched; the result has the same length.
    """
    counts = list(counts)
    length = len(counts)
    if sum(1 for count in counts if count) < 16:
        return counts

    while counts[length - 1] == 0:
        length -= 1

    nonzeros = 0
    smallest_nonzero = 1 << 30
    for count in counts[:length]:
        if count:
            nonzeros += 1
            smallest_nonzero = min(smallest_nonzero, count)
    if nonzeros < 5:
        return counts
    zeros = length - nonzeros
    if smallest_nonzero < 4 and zeros < 6:
        # Fill isolated holes; each fill is seen by the next position.
        for i in range(1, length - 1):
            if counts[i - 1] != 0 and counts[i] == 0 and counts[i + 1] != 0:
                counts[i] = 1
    if nonzeros < 28:
        return counts

    # Mark runs that can already be RLE-coded: zeros of 5 or more,
    # non-zeros of 7 or more.
    good_for_rle = [False] * length
    symbol = counts[0]
    stride = 0
    for i in range(length + 1):
        if i == length or counts[i] != symbol:
            if (symbol == 0 and stride >= 5) or (symbol != 0 and stride >= 7):
                good_for_rle[i - stride:i] = [True] * stride
            stride = 1
            if i != length:
                symbol = counts[i]
        else:
            stride += 1

    # Replace counts that lead to more RLE codes; 24.8 fixed point.
    streak_limit = 1240
    stride = 0
    limit = 256 * (counts[0] + counts[1] + counts[2]) // 3 + 420
    total = 0
    for i in range(length + 1):
        if (
            i == length
            or good_for_rle[i]
            or (i != 0 and good_for_rle[i - 1])
            or abs(256 * counts[i] - limit) >= streak_limit
        ):
            if stride >= 4 or (stride >= 3 and total == 0):
                count = max((total + stride // 2) // stride, 1)
                if total == 0:
                    count = 0
                counts[i - stride:i] = [count] * stride
            stride = 0
            total = 0
            if i < length - 2:
                limit = 256 * (counts[i] + counts[i + 1] + counts[i + 2]) // 3 + 420
            elif i < length:
                limit = 256 * counts[i]
            else:
                limit = 0
        stride += 1
        if i != length:
            total += counts[i]
            if stride >= 4:
                limit = (256 * total + stride // 2) // stride
            if stride == 4:
                limit += 120
    return counts


def _repetitions(
    previous_value: int, value: int, repetitions: int
) -> list[tuple[int, int]]:
    out: list[tuple[int, int]] = []
    if previous_value != value:
        out.append((value, 0))
        repetitions -= 1
    if repetitions == 7:
        out.append((value, 0))
        repetitions -= 1
    if repetitions < 3:
        out.extend([(value, 0)] * repetitions)
    else:
        repetitions -= 3
        run: list[tuple[int, int]] = []
        while repetitions >= 0:
            run.append((REPEAT_PREVIOUS_CODE, repetitions & 0x3))
            repetitions = (repetitions >> 2) - 1
        out.extend(reversed(run))
    return out


def _zero_repetitions(repetitions: int) -> list[tuple[int, int]]:
    out: list[tuple[int, int]] = []
    if repetitions == 11:
        out.append((0, 0))
        repetitions -= 1
    if repetitions < 3:
        out.extend([(0, 0)] * repetitions)
    else:
        repetitions -= 3
        run: list[tuple[int, int]] = []
        while repetitions >= 0:
            run.append((REPEAT_ZERO_CODE, repetitions & 0x7))
            repetitions = (repetitions >> 3) - 1
        out.extend(reversed(run))
    return out


def _runs(depth: Sequence[int]) -> list[tuple[int, int]]:
    runs: list[tuple[int, int]] = []
    for value in depth:
        if runs and runs[-1][0] == value:
            runs[-1] = (value, runs[-1][1] + 1)
        else:
            runs.append((value, 1))
    return runs


def _decide_over_rle_use(depth: Sequence[int]) -> tuple[bool, bool]:
    total_reps_zero = 0
    total_reps_non_zero = 0
    count_reps_zero = 0
    count_reps_non_zero = 0
    for value, reps in _runs(depth):
        if reps >= 3 and value == 0:
            total_reps_zero += reps
            count_reps_zero += 1
        if reps >= 4 and value != 0:
            total_reps_non_zero += reps
            count_reps_non_zero += 1
    total_reps_non_zero -= count_reps_non_zero * 2
    total_reps_zero -= count_reps_zero * 2
    return total_reps_non_zero > 2, total_reps_zero > 2


def write_huffman_tree(depth: Sequence[int]) -> tuple[list[int], list[int]]:
    """Encode bit depths as code-length symbols with their extra bits.

    Returns ``(symbols, extra_bits)`` of equal length. Symbols 0..15 are
    literal depths, 16 repeats the previous non-zero depth and 17 repeats
    zero. Trailing zero depths are dropped.
    """
    depth = list(depth)
    if any(not 0 <= d <= MAX_CODE_DEPTH for d in depth):
        raise ValueError(f"bit depths must be in 0..{MAX_CODE_DEPTH}")
    length = len(depth)
    new_length = length
    while new_length and depth[new_length - 1] == 0:
        new_length -= 1
    trimmed = depth[:new_length]

    use_rle_for_non_zero = False
    use_rle_for_zero = False
    if length > 50:
        # Shorter codes seem not to benefit from RLE.
        use_rle_for_non_zero, use_rle_for_zero = _decide_over_rle_use(trimmed)

    pairs: list[tuple[int, int]] = []
    previous_value = _INITIAL_PREVIOUS_VALUE
    for value, run in _runs(trimmed):
        use_rle = use_rle_for_non_zero if value else use_rle_for_zero
        chunks = [run] if use_rle else [1] * run
        for reps in chunks:
            if value == 0:
                pairs.extend(_zero_repetitions(reps))
            else:
                pairs.extend(_repetitions(previous_value, value, reps))
                previous_value = value
    symbols = [symbol for symbol, _ in pairs]
    extra_bits = [extra for _, extra in pairs]
    return symbols, extra_bits


def reverse_bits(num_bits: int, bits: int) -> int:
    """Reverse the order of the low ``num_bits`` bits of ``bits``."""
    if not 1 <= num_bits <= 16:
        raise ValueError(f"num_bits must be in 1..16, got {num_bits}")
    if not 0 <= bits <= 0xFFFF:
        raise ValueError(f"bits must fit in 16 bits, got {bits}")
    result = _REVERSED_NIBBLES[bits & 0xF]
    for _ in range(4, num_bits, 4):
        result <<= 4
        bits >>= 4
        result |= _REVERSED_NIBBLES[bits & 0xF]
    result >>= -num_bits & 0x3
    return result & 0xFFFF


def convert_bit_depths_to_symbols(depth: Sequence[int]) -> list[int]:
    """Return the canonical code of each symbol, bit-reversed for LSB-first output.

    Symbols of depth 0 do not exist and get code 0.
    """
    depth = list(depth)
    if any(not 0 <= d <= MAX_CODE_DEPTH for d in depth):
        raise ValueError(f"bit depths must be in 0..{MAX_CODE_DEPTH}")
    max_bits = MAX_CODE_DEPTH + 1
    bl_count = [0] * max_bits
    for d in depth:
        bl_count[d] += 1
    bl_count[0] = 0

    next_code = [0] * max_bits
    code = 0
    for bits in range(1, max_bits):
        code = (code + bl_count[bits - 1]) << 1
        next_code[bits] = code & 0xFFFF

    symbols = []
    for d in depth:
        if d:
            symbols.append(reverse_bits(d, next_code[d]))
            next_code[d] = (next_code[d] + 1) & 0xFFFF
        else:
            symbols.append(0)
    return symbols