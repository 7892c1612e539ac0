import pytest
from hypothesis import given, strategies as st

from brokit.ringbuffer import RingBuffer


def _tail_mirrors(rb):
    buf = rb.buffer
    size = rb.window_size
    return all(buf[i] == buf[i + size] for i in range(rb.tail_size))


def test_simple_write_and_position():
    rb = RingBuffer(4, 2)
    rb.write(b"abcdefghij")
    assert rb.position == 10
    assert bytes(rb.buffer[:10]) == b"abcdefghij"
    assert _tail_mirrors(rb)


def test_wrapping_write():
    rb = RingBuffer(4, 2)
    first = b"abcdefghij"
    second = b"klmnopqrst"
    rb.write(first)
    rb.write(second)
    data = first + second
    assert rb.position == len(data)
    assert bytes(rb.buffer[:16]) == data[16:] + data[4:16]
    assert _tail_mirrors(rb)


def test_logical_indexing():
    rb = RingBuffer(3, 1)
    data = b"0123456789AB"
    rb.write(data[:8])
    rb.write(data[8:])
    for p in range(len(data) - 8, len(data)):
        assert rb[p] == data[p]


def test_mask_and_sizes():
    rb = RingBuffer(5, 3)
    assert rb.mask == rb.window_size - 1
    assert rb.window_size == 1 << 5
    assert rb.tail_size == 1 << 3


def test_slack_is_zero():
    rb = RingBuffer(3, 1)
    rb.write(b"\xff" * 8)
    rb.write(b"\xff" * 8)
    end = rb.window_size + rb.tail_size
    assert bytes(rb.buffer[end:]) == bytes(len(rb.buffer) - end)


def test_reset_rewinds_cursor():
    rb = RingBuffer(4, 2)
    rb.write(b"hello")
    rb.reset()
    assert rb.position == 0
    rb.write(b"HE")
    assert bytes(rb.buffer[:5]) == b"HEllo"


def test_buffer_is_read_only():
    rb = RingBuffer(2, 1)
    rb.write(b"ab")
    with pytest.raises(TypeError):
        rb.buffer[0] = 1
    assert rb.buffer[0] == ord("a")
    assert rb[0] == ord("a")


def test_oversized_write_rejected():
    rb = RingBuffer(3, 1)
    with pytest.raises(ValueError):
        rb.write(bytes(9))


def test_negative_bits_rejected():
    with pytest.raises(ValueError):
        RingBuffer(-1, 0)


@given(
    st.lists(st.binary(min_size=0, max_size=16), min_size=1, max_size=20),
    st.integers(min_value=0, max_value=4),
)
def test_recent_window_and_tail_invariant(chunks, tail_bits):
    rb = RingBuffer(4, tail_bits)
    written = b""
    for chunk in chunks:
        rb.write(chunk)
        written += chunk
        assert rb.position == len(written)
        assert _tail_mirrors(rb)
    for p in range(max(0, len(written) - rb.window_size), len(written)):
        assert rb[p] == written[p]