# hicsparse/_internal/numpy_utils.py

"""
Internal utilities for the numpy columns of decoded contact records.

This module fixes the output dtypes and the packed on-disk record dtypes
used to read whole runs of block entries at once.
"""

from typing import Sequence, Tuple, TypeAlias
import numpy as np

# Output columns: (chromosome, bin1, bin2, count).
Columns: TypeAlias = Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]

CHROMOSOME_DTYPE = np.dtype('int32')
BIN_DTYPE = np.dtype('int32')
COUNT_DTYPE = np.dtype('float64')
POSITION_DTYPE = np.dtype('int64')

# --- On-disk record dtypes (packed, little-endian) ---

LEGACY_RECORD_DTYPE = np.dtype([('x', '<i4'), ('y', '<i4'), ('count', '<f4')])
ROW_ENTRY_SHORT_DTYPE = np.dtype([('x', '<i2'), ('count', '<i2')])
ROW_ENTRY_FLOAT_DTYPE = np.dtype([('x', '<i2'), ('count', '<f4')])
DENSE_SHORT_DTYPE = np.dtype('<i2')
DENSE_FLOAT_DTYPE = np.dtype('<f4')


def empty_columns() -> Columns:
    """Four zero-length columns with the output dtypes."""
    return (
        np.empty(0, dtype=CHROMOSOME_DTYPE),
        np.empty(0, dtype=BIN_DTYPE),
        np.empty(0, dtype=BIN_DTYPE),
        np.empty(0, dtype=COUNT_DTYPE),
    )


def make_columns(chromosome_id: int, bin1, bin2, count) -> Columns:
    """
    Casts decoded bins and counts to the output dtypes and adds a constant
    chromosome column.

    Raises:
        ValueError: If the three inputs differ in length.
    """
    bin1 = np.asarray(bin1, dtype=BIN_DTYPE)
    bin2 = np.asarray(bin2, dtype=BIN_DTYPE)
    count = np.asarray(count, dtype=COUNT_DTYPE)
    if not (len(bin1) == len(bin2) == len(count)):
        raise ValueError(
            f"Column lengths differ: bin1={len(bin1)}, bin2={len(bin2)}, count={len(count)}"
        )
    chromosome = np.full(len(bin1), chromosome_id, dtype=CHROMOSOME_DTYPE)
    return chromosome, bin1, bin2, count


def concatenate_columns(batches: Sequence[Columns]) -> Columns:
    """Concatenates column batches in order."""
    if not batches:
        return empty_columns()
    return tuple(
        np.concatenate([batch[i] for batch in batches]) for i in range(4)
    )
