# hicsparse/__init__.py
"""
Decoding of .hic contact-matrix archives into sparse contact records.
"""
from .file import Reader, open
from .types import BlockType, BlockLayout
from .dataclasses import (
    ArchiveInfo,
    BlockDirectoryEntry,
    ContactRecords,
    FooterEntry,
    MatrixInfo,
    ResolutionLevel,
)
from .exceptions import (
    HicError,
    HicConfigError,
    HicFormatError,
    InvalidFormatError,
    UnsupportedVersionError,
    ResolutionNotFoundError,
    TruncatedReadError,
    UnterminatedStringError,
    DecompressionError,
)
from .convenience import read_hic

__version__ = "0.1.0"

# Define what gets imported with 'from hicsparse import *'
__all__ = [
    'open',
    'read_hic',
    'Reader',
    'BlockType',
    'BlockLayout',
    'ArchiveInfo',
    'BlockDirectoryEntry',
    'ContactRecords',
    'FooterEntry',
    'MatrixInfo',
    'ResolutionLevel',
    'HicError',
    'HicConfigError',
    'HicFormatError',
    'InvalidFormatError',
    'UnsupportedVersionError',
    'ResolutionNotFoundError',
    'TruncatedReadError',
    'UnterminatedStringError',
    'DecompressionError',
    '__version__',
]
