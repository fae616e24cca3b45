# tests/test_records.py
"""
Tests for the per-layout contact record decoding of a single block.
"""
import struct

import numpy as np
import pytest

from hicsparse.types import BlockLayout
from hicsparse.exceptions import HicFormatError, TruncatedReadError
from hicsparse._internal.records import decode_block, select_layout
from hic_builder import dense_block, float_bits, legacy_block, rows_block, typed_block


@pytest.mark.parametrize("version, use_short, block_type, expected", [
    (6, 0, 0, BlockLayout.LEGACY_TRIPLES),
    (6, 1, 2, BlockLayout.LEGACY_TRIPLES),
    (7, 0, 1, BlockLayout.LIST_OF_ROWS_SHORT),
    (8, 1, 1, BlockLayout.LIST_OF_ROWS_FLOAT),
    (8, 0, 2, BlockLayout.DENSE_SHORT),
    (9, 5, 2, BlockLayout.DENSE_FLOAT),
    (8, 1, 3, BlockLayout.UNKNOWN),
    (8, 0, 0, BlockLayout.UNKNOWN),
])
def test_select_layout(version, use_short, block_type, expected):
    assert select_layout(version, use_short, block_type) == expected


def test_legacy_triples():
    data = legacy_block([(0, 0, 3.0), (1, 2, 4.5)])
    chromosome, bin1, bin2, count = decode_block(data, 6, chromosome_id=3)

    np.testing.assert_array_equal(chromosome, [3, 3])
    np.testing.assert_array_equal(bin1, [0, 1])
    np.testing.assert_array_equal(bin2, [0, 2])
    np.testing.assert_array_equal(count, [3.0, 4.5])
    assert count.dtype == np.float64


def test_list_of_rows_float_counts():
    data = rows_block(10, 20, {1: [(2, 7.25)]}, use_short=1)
    chromosome, bin1, bin2, count = decode_block(data, 8, chromosome_id=4)

    np.testing.assert_array_equal(chromosome, [4])
    np.testing.assert_array_equal(bin1, [12])
    np.testing.assert_array_equal(bin2, [21])
    np.testing.assert_array_equal(count, [7.25])


def test_list_of_rows_short_counts_over_several_rows():
    data = rows_block(100, 200, {0: [(0, 5), (4, 6)], 3: [(1, -7)]}, use_short=0)
    _, bin1, bin2, count = decode_block(data, 7, chromosome_id=0)

    np.testing.assert_array_equal(bin1, [100, 104, 101])
    np.testing.assert_array_equal(bin2, [200, 200, 203])
    np.testing.assert_array_equal(count, [5.0, 6.0, -7.0])


def test_list_of_rows_keeps_zero_and_sentinel_like_counts():
    data = rows_block(0, 0, {0: [(0, -32768), (1, 0)]}, use_short=0)
    _, _, _, count = decode_block(data, 8, chromosome_id=0)
    np.testing.assert_array_equal(count, [-32768.0, 0.0])


def test_list_of_rows_without_rows():
    data = rows_block(0, 0, {})
    columns = decode_block(data, 8, chromosome_id=1)
    assert all(len(c) == 0 for c in columns)


def test_dense_short_skips_sentinel():
    data = dense_block(10, 20, 3, [1, -32768, 2, -32768, 5], use_short=0)
    chromosome, bin1, bin2, count = decode_block(data, 8, chromosome_id=2)

    # Points 0, 2 and 4 are present: (row 0, col 0), (row 0, col 2), (row 1, col 1).
    np.testing.assert_array_equal(chromosome, [2, 2, 2])
    np.testing.assert_array_equal(bin1, [10, 12, 11])
    np.testing.assert_array_equal(bin2, [20, 20, 21])
    np.testing.assert_array_equal(count, [1.0, 2.0, 5.0])


def test_dense_float_skips_only_exact_nan_pattern():
    other_nan = float_bits(0x7FC00001)
    data = dense_block(0, 0, 2, [1.5, float_bits(0x7FC00000), other_nan, 0.0], use_short=1)
    _, bin1, bin2, count = decode_block(data, 8, chromosome_id=0)

    np.testing.assert_array_equal(bin1, [0, 0, 1])
    np.testing.assert_array_equal(bin2, [0, 1, 1])
    assert count[0] == 1.5
    assert np.isnan(count[1])
    assert count[2] == 0.0


def test_dense_all_sentinel_yields_no_records():
    data = dense_block(0, 0, 2, [-32768] * 4, use_short=0)
    columns = decode_block(data, 8, chromosome_id=0)
    assert all(len(c) == 0 for c in columns)


def test_dense_with_zero_width_is_format_error():
    data = dense_block(0, 0, 0, [1, 2], use_short=0)
    with pytest.raises(HicFormatError, match="row width"):
        decode_block(data, 8, chromosome_id=0)


def test_unknown_type_tag_is_empty(caplog):
    columns = decode_block(typed_block(7, b"\xff" * 16), 8, chromosome_id=0)
    assert all(len(c) == 0 for c in columns)
    assert "unknown type tag 7" in caplog.text


def test_empty_buffer_is_empty():
    columns = decode_block(b"", 8, chromosome_id=0)
    assert [c.dtype for c in columns] == [np.int32, np.int32, np.int32, np.float64]
    assert all(len(c) == 0 for c in columns)


def test_truncated_block_raises():
    data = legacy_block([(0, 0, 3.0), (1, 2, 4.5)])
    with pytest.raises(TruncatedReadError):
        decode_block(data[:-2], 6, chromosome_id=0)

    header_only = struct.pack("<iii", 1, 0, 0)
    with pytest.raises(TruncatedReadError):
        decode_block(header_only, 8, chromosome_id=0)
