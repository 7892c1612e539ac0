# brokit

Building blocks for a Brotli-style compressor. The package is pure Python and
has no runtime dependencies.

## What is inside

- `brokit.context`: the `ContextMode` enum (`LSB6`, `MSB6`, `UTF8`, `SIGNED`)
  and `context_id(p1, p2, mode)`. The function maps the last byte `p1` and the
  second last byte `p2` to a literal context id in 0..63. The shared table is
  `CONTEXT_LOOKUP`, with the per-mode offsets in `CONTEXT_LOOKUP_OFFSETS`.
- `brokit.prefix`: the frozen dataclass `PrefixCodeRange(offset, nbits)`, which
  covers the values `[offset, offset + 2**nbits)`. It supports `in` and has an
  `end` property. `block_length_range(code)` returns the range for one of the
  26 block-length prefix codes.
- `brokit.command_lut`:
  - `CommandLutEntry` and `command_lut_entry(code)` give the insert-length and
    copy-length offsets, the number of extra bits, the distance code and the
    context for each of the 704 command prefix codes.
  - `INSERT_LENGTH_CODES` and `COPY_LENGTH_CODES` hold the underlying ranges.
- `brokit.histogram`: `Histogram(size)` counts symbols. It has these methods:
  - `add`, `remove`, `add_many`, `add_histogram` and `clear` to change the
    counts.
  - `copy` to make an independent copy.
  - Indexing, iteration and equality.
  - `remove` raises `ValueError` when the symbol has no occurrences left.
  - A symbol outside the alphabet raises `IndexError`.
- `brokit.entropy_encode`: Huffman code construction with a depth limit.
  - `create_huffman_tree(data, tree_limit)` returns the bit depth of each
    symbol.
  - `optimize_huffman_counts_for_rle(counts)` returns adjusted counts whose code
    lengths compress better with run-length encoding.
  - `write_huffman_tree(depth)` returns `(symbols, extra_bits)`. Symbol 16
    repeats the previous non-zero length and symbol 17 repeats zero.
  - `convert_bit_depths_to_symbols(depth)` returns canonical codes, bit-reversed
    so they can be written least significant bit first.
  - `reverse_bits(num_bits, bits)` reverses the low `num_bits` bits of a value.
- `brokit.literal_cost`: estimates how many bits each literal will cost, from a
  histogram over a sliding window.
  - `estimate_bit_costs_for_literals(data, pos=0, length=None, mask=None)`
    handles data in general.
  - `estimate_bit_costs_for_literals_utf8(...)` keeps separate statistics for
    each position inside a UTF-8 sequence.
  - `utf8_position(last, c, clamp)` classifies the byte that follows `c`.
- `brokit.ringbuffer`: `RingBuffer(window_bits, tail_bits)` is a circular window.
  - `write(data)` and `reset()` change its contents and position.
  - It keeps a copy of its first `2**tail_bits` bytes after the end of the
    window.
  - It exposes `position`, `mask`, `window_size`, `tail_size` and a read-only
    `buffer` view.
- `brokit.bitwriter`: `BitWriter` packs bits into bytes, least significant bit
  first.
  - `write_bits(n_bits, bits)` writes up to 56 bits per call.
  - `prepare_storage()` checks that the writer is on a byte boundary.
  - `getvalue()` returns the bytes written, with the last byte padded with
    zero bits.
- `brokit.streams`: input and output adapters.
  - `MemoryInput` and `FileInput` read chunks and return `None` at the end.
  - `MemoryOutput` and `BytesOutput` hold their output in memory up to a size
    limit, and `FileOutput` writes to a file.
  - A write past the limit of `MemoryOutput` or `BytesOutput` raises
    `OutputFullError`, a subclass of `OSError`.

## Example

```python
from brokit.bitwriter import BitWriter
from brokit.entropy_encode import convert_bit_depths_to_symbols, create_huffman_tree

counts = [10, 5, 3, 1, 0, 7]
depths = create_huffman_tree(counts, 15)
codes = convert_bit_depths_to_symbols(depths)

writer = BitWriter()
for depth, code in zip(depths, codes):
    if depth:
        writer.write_bits(depth, code)
print(writer.position, writer.getvalue().hex())
```

## What it does not do

This package provides the components only. It has no function that compresses
or decompresses a whole stream, and it writes no container or meta-block
format. It also has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```