# hicsparse/lowlevel.py
"""
A positioned, bounds-checked binary reader over an archive or a block.

This module isolates all byte-level decoding from the rest of the library.
Every read checks that enough bytes remain and raises a typed error
otherwise, so the directory walkers never see short reads.
"""

import contextlib
import io
import struct
from typing import BinaryIO, Iterator, Union

import numpy as np

from .exceptions import HicFormatError, TruncatedReadError, UnterminatedStringError

_INT8 = struct.Struct("<b")
_INT16 = struct.Struct("<h")
_INT32 = struct.Struct("<i")
_INT64 = struct.Struct("<q")
_FLOAT32 = struct.Struct("<f")

_CSTRING_CHUNK = 256


class ByteCursor:
    """
    A seekable little-endian reader.

    Wraps either a binary file object opened for reading or an in-memory
    buffer (for decompressed blocks). Offsets carried by errors are
    positions within that source.
    """
    def __init__(self, source: Union[BinaryIO, bytes, bytearray, memoryview]):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)
        self._stream = source
        self._stream.seek(0, io.SEEK_END)
        self._size = self._stream.tell()
        self._stream.seek(0)

    @property
    def size(self) -> int:
        return self._size

    def position(self) -> int:
        return self._stream.tell()

    def remaining(self) -> int:
        return max(0, self._size - self._stream.tell())

    def seek(self, offset: int) -> None:
        if offset < 0 or offset > self._size:
            raise HicFormatError(
                f"Offset lies outside of the data (size={self._size})",
                offset=offset,
            )
        self._stream.seek(offset)

    @contextlib.contextmanager
    def saved_position(self) -> Iterator[int]:
        """
        Restores the current position when the block exits.

        Used wherever a forward offset is followed and the caller must then
        keep reading the directory it came from. The position is restored on
        every exit path while the source is open; an error raised inside
        still propagates.
        """
        saved = self.position()
        try:
            yield saved
        finally:
            # A generator may be finalised after its file was closed.
            if not self._stream.closed:
                self._stream.seek(saved)

    def read_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {count}")
        start = self.position()
        data = self._stream.read(count)
        if len(data) != count:
            raise TruncatedReadError(start, count, len(data))
        return data

    def _unpack(self, fmt: struct.Struct):
        return fmt.unpack(self.read_bytes(fmt.size))[0]

    def read_int8(self) -> int:
        return self._unpack(_INT8)

    def read_int16(self) -> int:
        return self._unpack(_INT16)

    def read_int32(self) -> int:
        return self._unpack(_INT32)

    def read_int64(self) -> int:
        return self._unpack(_INT64)

    def read_float32(self) -> float:
        return self._unpack(_FLOAT32)

    def read_array(self, dtype: Union[str, np.dtype], count: int) -> np.ndarray:
        """Reads `count` consecutive values of `dtype` (with explicit byte order)."""
        dt = np.dtype(dtype)
        if count < 0:
            raise ValueError(f"Cannot read a negative number of values: {count}")
        return np.frombuffer(self.read_bytes(dt.itemsize * count), dtype=dt)

    def read_cstring(self) -> str:
        """Reads a NUL-terminated UTF-8 string and moves past the terminator."""
        start = self.position()
        parts = []
        while True:
            chunk = self._stream.read(_CSTRING_CHUNK)
            if not chunk:
                raise UnterminatedStringError(start)
            end = chunk.find(b"\0")
            if end != -1:
                parts.append(chunk[:end])
                # Step back over whatever was read past the terminator.
                self._stream.seek(end + 1 - len(chunk), io.SEEK_CUR)
                break
            parts.append(chunk)
        return b"".join(parts).decode("utf-8", errors="replace")
