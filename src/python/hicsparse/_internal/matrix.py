# hicsparse/_internal/matrix.py

"""
Internal parsing of matrix descriptors and their block directories.
"""

import logging
from typing import Iterator, Optional, Tuple

from ..dataclasses import ArchiveInfo, BlockDirectoryEntry, MatrixInfo, ResolutionLevel
from ..lowlevel import ByteCursor
from ..types import ABSENT_OFFSET

logger = logging.getLogger(__name__)


def _read_level(cursor: ByteCursor) -> ResolutionLevel:
    unit = cursor.read_cstring()
    index = cursor.read_int32()
    cursor.read_float32()  # sumCounts
    cursor.read_float32()  # occupiedCellCount
    cursor.read_float32()  # stdDev
    cursor.read_float32()  # percent95
    bin_size = cursor.read_int32()
    cursor.read_int32()  # block bin count
    cursor.read_int32()  # block column count
    total_blocks = cursor.read_int32()
    blocks = tuple(
        BlockDirectoryEntry(
            block_id=cursor.read_int32(),
            offset=cursor.read_int64(),
            size=cursor.read_int32(),
        )
        for _ in range(total_blocks)
    )
    return ResolutionLevel(index=index, unit=unit, bin_size=bin_size, blocks=blocks)


def read_matrix(cursor: ByteCursor, offset: int) -> Optional[MatrixInfo]:
    """
    Reads a complete matrix descriptor, every resolution level included.

    Returns None for the "absent" offset.
    """
    if offset == ABSENT_OFFSET:
        return None
    cursor.seek(offset)
    chromosome1 = cursor.read_int32()
    chromosome2 = cursor.read_int32()
    levels = tuple(_read_level(cursor) for _ in range(cursor.read_int32()))
    return MatrixInfo(chromosome1=chromosome1, chromosome2=chromosome2, levels=levels)


def is_decoded_pair(info: ArchiveInfo, chromosome1: int, chromosome2: int) -> bool:
    """
    Whether contacts of this chromosome pair are decoded.

    Only intra-chromosome matrices are, and never the self-matrix of the
    synthetic "ALL" chromosome.
    """
    if chromosome1 != chromosome2:
        return False
    return not (info.first_chromosome_is_all and chromosome1 == 0)


def iter_matrix_blocks(
    cursor: ByteCursor,
    offset: int,
    info: ArchiveInfo,
    resolution_index: int,
    *,
    chromosome: Optional[int] = None,
) -> Iterator[Tuple[int, BlockDirectoryEntry]]:
    """
    Yields `(chromosome_id, block)` for every block of one matrix at the
    selected resolution.

    Levels are matched by their position in the descriptor. Directories of
    the other levels are read only to move past them. Each block is yielded
    with the cursor position saved, so the consumer may seek to the block.

    Args:
        cursor: Cursor over the archive.
        offset: File offset of the matrix descriptor, or -1 for "absent".
        info: The parsed header.
        resolution_index: Index of the selected resolution.
        chromosome: If given, matrices of any other chromosome are skipped
            once their ids have been read.
    """
    if offset == ABSENT_OFFSET:
        return
    cursor.seek(offset)
    chromosome1 = cursor.read_int32()
    chromosome2 = cursor.read_int32()
    if not is_decoded_pair(info, chromosome1, chromosome2):
        logger.debug("Skipping matrix %d_%d at %d", chromosome1, chromosome2, offset)
        return
    if chromosome is not None and chromosome1 != chromosome:
        logger.debug("Skipping matrix %d_%d at %d (not requested)", chromosome1, chromosome2, offset)
        return

    total_levels = cursor.read_int32()
    for position in range(total_levels):
        level = _read_level(cursor)
        if position != resolution_index:
            continue
        logger.debug(
            "Matrix %d_%d: %d blocks at bin size %d",
            chromosome1, chromosome2, len(level.blocks), level.bin_size,
        )
        for block in level.blocks:
            with cursor.saved_position():
                yield chromosome1, block
