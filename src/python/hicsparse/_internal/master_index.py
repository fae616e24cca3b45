# hicsparse/_internal/master_index.py

"""
Internal parsing of the master index (the footer).
"""

import logging
from typing import Iterator, List

from ..dataclasses import FooterEntry
from ..lowlevel import ByteCursor

logger = logging.getLogger(__name__)


def iter_footer(cursor: ByteCursor, master_offset: int) -> Iterator[FooterEntry]:
    """
    Yields every entry of the master index, in file order.

    Each entry is yielded with the cursor position saved, so the consumer
    may seek to the entry's matrix and read it before asking for the next
    entry. The leading byte count is read and ignored; entries are
    delimited individually. Normalization and expected-value sections that
    follow the entries are not read.
    """
    cursor.seek(master_offset)
    cursor.read_int32()  # total bytes
    total_entries = cursor.read_int32()
    logger.debug("Footer at %d lists %d matrices", master_offset, total_entries)
    for _ in range(total_entries):
        key = cursor.read_cstring()
        offset = cursor.read_int64()
        size = cursor.read_int32()
        with cursor.saved_position():
            yield FooterEntry(key=key, offset=offset, size=size)


def read_footer(cursor: ByteCursor, master_offset: int) -> List[FooterEntry]:
    """Reads the whole master index into a list."""
    return list(iter_footer(cursor, master_offset))
