import io

import pytest

from brokit.streams import (
    BytesOutput,
    FileInput,
    FileOutput,
    MemoryInput,
    MemoryOutput,
    OutputFullError,
)


def test_memory_input_reads_in_chunks_then_none():
    source = MemoryInput(b"abcdefg")
    assert source.read(3) == b"abc"
    assert source.read(3) == b"def"
    assert source.read(3) == b"g"
    assert source.position == 7
    assert source.read(3) is None


def test_memory_input_zero_read_before_end():
    source = MemoryInput(b"xy")
    assert source.read(0) == b""
    assert source.position == 0


def test_memory_input_reset():
    source = MemoryInput(b"ab")
    source.read(2)
    source.reset(b"new")
    assert source.read(10) == b"new"


def test_memory_output_respects_capacity():
    sink = MemoryOutput(5)
    sink.write(b"abc")
    with pytest.raises(OutputFullError):
        sink.write(b"def")
    assert sink.getvalue() == b"abc"
    assert sink.position == 3
    sink.write(b"de")
    assert sink.getvalue() == b"abcde"


def test_memory_output_reset_discards():
    sink = MemoryOutput(3)
    sink.write(b"abc")
    sink.reset(10)
    sink.write(b"0123456789")
    assert sink.getvalue() == b"0123456789"


def test_bytes_output_limit_and_reset():
    sink = BytesOutput(4)
    sink.write(b"ab")
    sink.write(b"cd")
    with pytest.raises(OutputFullError):
        sink.write(b"e")
    assert sink.getvalue() == b"abcd"
    sink.reset(1)
    assert sink.getvalue() == b""
    with pytest.raises(OutputFullError):
        sink.write(b"xy")


def test_output_full_is_os_error():
    with pytest.raises(OSError):
        MemoryOutput(0).write(b"a")


def test_file_input_caps_read_size():
    source = FileInput(io.BytesIO(b"abcdefgh"), 3)
    assert source.read(100) == b"abc"
    assert source.read(2) == b"de"
    assert source.read(100) == b"fgh"
    assert source.read(100) is None


def test_file_input_zero_read_tracks_end():
    source = FileInput(io.BytesIO(b"ab"), 16)
    assert source.read(0) == b""
    assert source.read(16) == b"ab"
    assert source.read(0) is None


def test_file_input_rejects_bad_size():
    with pytest.raises(ValueError):
        FileInput(io.BytesIO(b""), 0)


def test_file_round_trip():
    buffer = io.BytesIO()
    sink = FileOutput(buffer)
    sink.write(b"hello ")
    sink.write(b"world")
    buffer.seek(0)
    source = FileInput(buffer, 4)
    chunks = []
    while (chunk := source.read(4)) is not None:
        chunks.append(chunk)
    assert b"".join(chunks) == b"hello world"
    assert all(len(chunk) <= 4 for chunk in chunks)