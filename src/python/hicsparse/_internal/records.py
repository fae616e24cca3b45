# hicsparse/_internal/records.py

"""
Internal decoding of the contact records held in one decompressed block.

A block uses exactly one of several layouts, chosen by the archive version,
the block's type tag and its "use short" flag. `select_layout` names the
layout and `decode_block` dispatches to one reader per layout.
"""

import logging

import numpy as np

from ..lowlevel import ByteCursor
from ..types import (
    BlockLayout,
    BlockType,
    DENSE_FLOAT_SENTINEL_BITS,
    DENSE_SHORT_SENTINEL,
    MODERN_BLOCK_VERSION,
)
from ..exceptions import HicFormatError
from . import numpy_utils
from .numpy_utils import Columns

logger = logging.getLogger(__name__)


def select_layout(version: int, use_short: int = 0, block_type: int = 0) -> BlockLayout:
    """
    Names the record layout of a block.

    Note that a "use short" flag of 0 selects 16-bit integer counts and any
    other value selects 32-bit float counts.

    Args:
        version: The archive version.
        use_short: The block's "use short" flag (version 7+ only).
        block_type: The block's type tag (version 7+ only).

    Returns:
        The BlockLayout; UNKNOWN for type tags without a known layout.
    """
    if version < MODERN_BLOCK_VERSION:
        return BlockLayout.LEGACY_TRIPLES

    short_counts = use_short == 0
    match (block_type, short_counts):
        case (BlockType.LIST_OF_ROWS, True):
            return BlockLayout.LIST_OF_ROWS_SHORT
        case (BlockType.LIST_OF_ROWS, False):
            return BlockLayout.LIST_OF_ROWS_FLOAT
        case (BlockType.DENSE, True):
            return BlockLayout.DENSE_SHORT
        case (BlockType.DENSE, False):
            return BlockLayout.DENSE_FLOAT
        case _:
            return BlockLayout.UNKNOWN


def _read_legacy(cursor: ByteCursor, total_records: int) -> tuple:
    triples = cursor.read_array(numpy_utils.LEGACY_RECORD_DTYPE, max(total_records, 0))
    return triples['x'], triples['y'], triples['count']


def _read_list_of_rows(cursor: ByteCursor, x_offset: int, y_offset: int, entry_dtype: np.dtype) -> tuple:
    bins1, bins2, counts = [], [], []
    for _ in range(cursor.read_int16()):
        bin_y = y_offset + cursor.read_int16()
        total_columns = cursor.read_int16()
        entries = cursor.read_array(entry_dtype, max(total_columns, 0))
        bins1.append(x_offset + entries['x'].astype(numpy_utils.BIN_DTYPE))
        bins2.append(np.full(len(entries), bin_y, dtype=numpy_utils.BIN_DTYPE))
        counts.append(entries['count'])
    if not bins1:
        return (), (), ()
    return np.concatenate(bins1), np.concatenate(bins2), np.concatenate(counts)


def _read_dense(cursor: ByteCursor, x_offset: int, y_offset: int, value_dtype: np.dtype) -> tuple:
    total_points = max(cursor.read_int32(), 0)
    width = cursor.read_int16()
    values = cursor.read_array(value_dtype, total_points)
    if total_points == 0:
        return (), (), ()
    if width <= 0:
        raise HicFormatError(f"Dense block has non-positive row width {width}")

    if value_dtype.kind == 'f':
        # Only the exact NaN bit pattern marks an empty cell.
        present = values.view('<u4') != DENSE_FLOAT_SENTINEL_BITS
    else:
        present = values != DENSE_SHORT_SENTINEL

    point = np.flatnonzero(present)
    row, column = np.divmod(point, width)
    return x_offset + column, y_offset + row, values[present]


def decode_block(data: bytes, version: int, chromosome_id: int) -> Columns:
    """
    Decodes the contact records of one decompressed block.

    Every record of the list-of-rows and legacy layouts is kept; dense
    blocks drop cells holding the empty-cell sentinel. Blocks with an
    unrecognised type tag decode to no records.

    Args:
        data: The decompressed block.
        version: The archive version.
        chromosome_id: Id placed in the chromosome column of every record.

    Returns:
        The (chromosome, bin1, bin2, count) columns.
    """
    if not data:
        return numpy_utils.empty_columns()

    cursor = ByteCursor(data)
    total_records = cursor.read_int32()
    if version < MODERN_BLOCK_VERSION:
        x_offset = y_offset = 0
        layout = select_layout(version)
    else:
        x_offset = cursor.read_int32()
        y_offset = cursor.read_int32()
        use_short = cursor.read_int8()
        block_type = cursor.read_int8()
        layout = select_layout(version, use_short, block_type)

    match layout:
        case BlockLayout.LEGACY_TRIPLES:
            decoded = _read_legacy(cursor, total_records)
        case BlockLayout.LIST_OF_ROWS_SHORT:
            decoded = _read_list_of_rows(cursor, x_offset, y_offset, numpy_utils.ROW_ENTRY_SHORT_DTYPE)
        case BlockLayout.LIST_OF_ROWS_FLOAT:
            decoded = _read_list_of_rows(cursor, x_offset, y_offset, numpy_utils.ROW_ENTRY_FLOAT_DTYPE)
        case BlockLayout.DENSE_SHORT:
            decoded = _read_dense(cursor, x_offset, y_offset, numpy_utils.DENSE_SHORT_DTYPE)
        case BlockLayout.DENSE_FLOAT:
            decoded = _read_dense(cursor, x_offset, y_offset, numpy_utils.DENSE_FLOAT_DTYPE)
        case _:
            logger.warning("Ignoring block with unknown type tag %d", block_type)
            return numpy_utils.empty_columns()
    return numpy_utils.make_columns(chromosome_id, *decoded)
