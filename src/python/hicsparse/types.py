# hicsparse/types.py

"""
Core enumerations and on-disk constants for the hicsparse library.
"""
from enum import IntEnum

MAGIC = b"HIC"
MIN_VERSION = 6
# First version whose blocks carry bin offsets and a type tag.
MODERN_BLOCK_VERSION = 7
ABSENT_OFFSET = -1

# Empty-cell markers of the dense layout.
DENSE_SHORT_SENTINEL = -32768
DENSE_FLOAT_SENTINEL_BITS = 0x7FC00000


class BlockType(IntEnum):
    """
    Type tag stored in the header of a version 7+ block.

    Tags not listed here are read as empty blocks.
    """
    LIST_OF_ROWS = 1
    DENSE = 2


class BlockLayout(IntEnum):
    """
    Every record layout a decompressed block can use.

    Selected from the archive version, the block type tag and the
    "use short" flag by `_internal.records.select_layout`.
    """
    UNKNOWN = 0
    LEGACY_TRIPLES = 1

    LIST_OF_ROWS_SHORT = 2
    LIST_OF_ROWS_FLOAT = 3

    DENSE_SHORT = 4
    DENSE_FLOAT = 5
