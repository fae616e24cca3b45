# hicsparse/_internal/inflate.py

"""
Internal zlib inflation of a single compressed block.
"""

import logging
import zlib

from ..exceptions import DecompressionError, HicFormatError
from ..lowlevel import ByteCursor

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_RATIO = 4


def inflate(data: bytes, *, offset: int = 0, initial_ratio: int = DEFAULT_INITIAL_RATIO) -> bytes:
    """
    Decompresses one complete zlib stream.

    The output buffer starts at `initial_ratio` times the input size and is
    doubled whenever the stream still has pending input or output. The
    stream must reach its end marker; a stream that stops early is an error.

    Args:
        data: The compressed bytes.
        offset: File offset of the block, for error reporting.
        initial_ratio: First output capacity as a multiple of `len(data)`.

    Returns:
        The decompressed bytes.

    Raises:
        DecompressionError: If zlib reports an error or the stream is cut off.
    """
    if not data:
        return b""

    decompressor = zlib.decompressobj()
    capacity = max(1, len(data) * initial_ratio)
    out = bytearray()
    pending = data
    try:
        while True:
            out += decompressor.decompress(pending, capacity)
            pending = decompressor.unconsumed_tail
            if decompressor.eof or not pending:
                break
            capacity *= 2
            logger.debug("Growing inflate buffer for block at %d to %d bytes", offset, capacity)
        # Flush output still buffered inside the decompressor.
        out += decompressor.flush()
    except zlib.error as e:
        raise DecompressionError(str(e), offset=offset, size=len(data)) from e

    if not decompressor.eof:
        raise DecompressionError("stream ended before its end marker", offset=offset, size=len(data))
    return bytes(out)


def read_block(cursor: ByteCursor, offset: int, size: int, *, initial_ratio: int = DEFAULT_INITIAL_RATIO) -> bytes:
    """Seeks to a block, reads `size` compressed bytes and inflates them."""
    if size < 0:
        raise HicFormatError(f"Block directory lists a negative block size {size}", offset=offset)
    if size == 0:
        return b""
    cursor.seek(offset)
    return inflate(cursor.read_bytes(size), offset=offset, initial_ratio=initial_ratio)
