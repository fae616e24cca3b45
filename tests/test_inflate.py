# tests/test_inflate.py
"""
Tests for block inflation.
"""
import os
import zlib

import pytest

from hicsparse.lowlevel import ByteCursor
from hicsparse.exceptions import DecompressionError, HicFormatError
from hicsparse._internal.inflate import inflate, read_block


def test_inflate_grows_buffer_past_initial_ratio():
    # Zeros compress far better than 1:1, so the first buffer is too small.
    original = bytes(200_000)
    compressed = zlib.compress(original)
    assert len(original) > len(compressed) * 2
    assert inflate(compressed, initial_ratio=1) == original


def test_inflate_incompressible_data():
    original = os.urandom(4096)
    assert inflate(zlib.compress(original)) == original


def test_inflate_empty_input_is_empty():
    assert inflate(b"") == b""


def test_inflate_corrupt_stream_raises():
    with pytest.raises(DecompressionError) as excinfo:
        inflate(b"definitely not zlib", offset=123)
    assert excinfo.value.offset == 123
    assert excinfo.value.size == len(b"definitely not zlib")
    assert isinstance(excinfo.value.__cause__, zlib.error)


def test_inflate_cut_off_stream_raises():
    compressed = zlib.compress(b"contact records" * 100)
    with pytest.raises(DecompressionError, match="end marker"):
        inflate(compressed[: len(compressed) // 2])


def test_read_block_seeks_and_inflates():
    payload = b"block payload"
    compressed = zlib.compress(payload)
    cursor = ByteCursor(b"prefix" + compressed + b"suffix")
    assert read_block(cursor, 6, len(compressed)) == payload


def test_read_block_zero_size_is_noop():
    cursor = ByteCursor(b"abc")
    cursor.seek(1)
    assert read_block(cursor, 999, 0) == b""
    assert cursor.position() == 1


def test_read_block_negative_size_raises():
    cursor = ByteCursor(b"abc")
    with pytest.raises(HicFormatError, match="negative block size") as excinfo:
        read_block(cursor, 2, -1)
    assert excinfo.value.offset == 2
