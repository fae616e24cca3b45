# hicsparse/file.py
"""The high-level Reader and the `open` factory function."""

import builtins
import logging
from functools import cached_property
from typing import Iterator, List, Optional, Tuple, Union

from .abc import HicFileBase
from .lowlevel import ByteCursor
from .dataclasses import ArchiveInfo, ContactRecords, FooterEntry, MatrixInfo
from ._internal import header, inflate, master_index, matrix, records
from .exceptions import HicConfigError, ResolutionNotFoundError

logger = logging.getLogger(__name__)


def open(
    path: str,
    *,
    resolution: Optional[int] = None,
    initial_inflate_ratio: int = inflate.DEFAULT_INITIAL_RATIO,
) -> "Reader":
    """
    Opens a .hic archive for reading.
    This function is the primary entry point for the library.

    Args:
        path (str): Path to the .hic file.
        resolution (int, optional): Default bin size for `read_contacts()`.
        initial_inflate_ratio (int): First output buffer size for block
            inflation, as a multiple of the compressed size. The buffer
            grows as needed.

    Returns:
        A Reader object, typically used within a `with` statement.

    Raises:
        HicConfigError: If the file cannot be opened.
        HicFormatError: If the header is not that of a supported archive.
        ValueError: If arguments are invalid.
    """
    if resolution is not None and resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}.")
    if initial_inflate_ratio <= 0:
        raise ValueError(f"initial_inflate_ratio must be positive, got {initial_inflate_ratio}.")
    try:
        handle = builtins.open(path, 'rb')
    except OSError as e:
        raise HicConfigError(f"File {path} cannot be opened for reading: {e}") from e

    reader = Reader(handle, resolution=resolution, initial_inflate_ratio=initial_inflate_ratio)
    try:
        # Fail early on files that are not supported archives.
        reader.info
    except Exception:
        reader.close()
        raise
    return reader


class Reader(HicFileBase):
    """
    A file handle for reading a .hic archive.
    Created via `hicsparse.open(...)`.
    """
    def __init__(
        self,
        handle,
        *,
        resolution: Optional[int] = None,
        initial_inflate_ratio: int = inflate.DEFAULT_INITIAL_RATIO,
    ):
        self._handle = handle
        self._cursor = ByteCursor(handle)
        self._resolution = resolution
        self._initial_inflate_ratio = initial_inflate_ratio

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("Operation attempted on a closed Reader.")

    @cached_property
    def info(self) -> ArchiveInfo:
        """The parsed archive header."""
        self._check_open()
        return header.read_header(self._cursor)

    @cached_property
    def footer(self) -> List[FooterEntry]:
        """Every entry of the master index, in file order."""
        self._check_open()
        return master_index.read_footer(self._cursor, self.info.master_offset)

    @property
    def version(self) -> int:
        return self.info.version

    @property
    def genome(self) -> str:
        return self.info.genome

    @property
    def attributes(self) -> dict:
        return dict(self.info.attributes)

    @property
    def resolutions(self) -> Tuple[int, ...]:
        """The bin sizes stored in the archive, in file order."""
        return self.info.resolutions

    @property
    def chromosomes(self) -> Tuple[str, ...]:
        """Chromosome names exposed to callers ("ALL" excluded)."""
        return self.info.labels

    def matrix(self, key: str) -> Optional[MatrixInfo]:
        """
        Reads the full descriptor of the matrix stored under `key`
        (e.g. "1_1"), or returns None when the footer has no such key.
        """
        self._check_open()
        for entry in self.footer:
            if entry.key == key:
                return matrix.read_matrix(self._cursor, entry.offset)
        return None

    def _resolution_index(self, resolution: Optional[int]) -> int:
        if resolution is None:
            resolution = self._resolution
        if resolution is None:
            raise ValueError("No resolution given to open() or to this call.")
        index = self.info.resolution_index(resolution)
        if index is None:
            raise ResolutionNotFoundError(resolution, self.info.resolutions)
        return index

    def _chromosome_id(self, chromosome: Union[int, str, None]) -> Optional[int]:
        if chromosome is None or isinstance(chromosome, int):
            return chromosome
        names = self.info.chromosome_names
        if chromosome not in names:
            raise KeyError(f"Unknown chromosome {chromosome!r}; known: {', '.join(self.chromosomes)}")
        return names.index(chromosome)

    def iter_blocks(
        self,
        resolution: Optional[int] = None,
        *,
        chromosome: Union[int, str, None] = None,
    ) -> Iterator[ContactRecords]:
        """
        Decodes the archive block by block.

        Walks every footer entry in order and yields one batch of records per
        block of each decoded matrix at `resolution`.

        Args:
            resolution: Bin size; defaults to the one given to `open()`.
            chromosome: Optional chromosome name or internal id. When given,
                blocks of other chromosomes are not fetched.

        Raises:
            ResolutionNotFoundError: If the archive does not store `resolution`.
        """
        self._check_open()
        index = self._resolution_index(resolution)
        chromosome_id = self._chromosome_id(chromosome)
        info = self.info
        cursor = self._cursor

        for entry in master_index.iter_footer(cursor, info.master_offset):
            for matrix_chromosome, block in matrix.iter_matrix_blocks(
                cursor, entry.offset, info, index, chromosome=chromosome_id
            ):
                data = inflate.read_block(
                    cursor, block.offset, block.size,
                    initial_ratio=self._initial_inflate_ratio,
                )
                columns = records.decode_block(data, info.version, matrix_chromosome)
                yield ContactRecords(
                    *columns,
                    labels=info.labels,
                    first_chromosome_is_all=info.first_chromosome_is_all,
                )

    def read_contacts(
        self,
        resolution: Optional[int] = None,
        *,
        chromosome: Union[int, str, None] = None,
    ) -> ContactRecords:
        """
        Decodes every intra-chromosome contact at `resolution`.

        Records appear in the order their blocks are visited. Nothing is
        returned when decoding fails part way.

        Args:
            resolution: Bin size; defaults to the one given to `open()`.
            chromosome: Optional chromosome name or internal id to restrict
                the decode to.

        Returns:
            A ContactRecords object holding the four output columns.

        Raises:
            ResolutionNotFoundError: If the archive does not store `resolution`.
        """
        batches = list(self.iter_blocks(resolution, chromosome=chromosome))
        info = self.info
        result = ContactRecords.concatenate(
            batches, labels=info.labels, first_chromosome_is_all=info.first_chromosome_is_all,
        )
        logger.debug("Decoded %d records from %d blocks", len(result), len(batches))
        return result

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed
