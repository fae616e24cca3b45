# hicsparse/_internal/header.py

"""
Internal parsing of the archive header.
"""

import logging

from ..dataclasses import ArchiveInfo
from ..exceptions import InvalidFormatError, UnsupportedVersionError
from ..lowlevel import ByteCursor
from ..types import MAGIC, MIN_VERSION

logger = logging.getLogger(__name__)


def read_header(cursor: ByteCursor) -> ArchiveInfo:
    """
    Reads the header from the start of the archive.

    The header holds, in order: the NUL-terminated magic string, the
    version, the master index offset, the genome id, an attribute
    dictionary, the chromosome dictionary and the list of base-pair
    resolutions.

    Raises:
        InvalidFormatError: If the magic string is not "HIC".
        UnsupportedVersionError: If the version is older than 6.
    """
    cursor.seek(0)
    magic = cursor.read_bytes(len(MAGIC))
    if magic != MAGIC:
        raise InvalidFormatError(magic)
    cursor.read_cstring()  # terminator

    version = cursor.read_int32()
    if version < MIN_VERSION:
        raise UnsupportedVersionError(version, minimum=MIN_VERSION)

    master_offset = cursor.read_int64()
    genome = cursor.read_cstring()

    attributes = {}
    for _ in range(cursor.read_int32()):
        key = cursor.read_cstring()
        attributes[key] = cursor.read_cstring()

    names, lengths = [], []
    for _ in range(cursor.read_int32()):
        names.append(cursor.read_cstring())
        lengths.append(cursor.read_int32())

    total_resolutions = cursor.read_int32()
    resolutions = [cursor.read_int32() for _ in range(total_resolutions)]

    info = ArchiveInfo(
        version=version,
        master_offset=master_offset,
        genome=genome,
        chromosome_names=tuple(names),
        chromosome_lengths=tuple(lengths),
        resolutions=tuple(resolutions),
        attributes=attributes,
    )
    logger.debug(
        "Header: version=%d genome=%r chromosomes=%d resolutions=%s master=%d",
        version, genome, info.total_chromosomes, resolutions, master_offset,
    )
    return info
