# hicsparse/stream/readers.py
"""
Advanced, high-level reader classes for per-matrix streaming.
"""
from typing import Dict, Iterator, List, Optional, Tuple, Union, overload

from ..file import Reader
from ..dataclasses import ContactRecords


class MatrixReader:
    """
    Groups decoded contacts by chromosome.

    The blocks of each intra-chromosome matrix are decoded and merged into
    one ContactRecords per chromosome, in footer order. Iterating yields
    `(chromosome_name, records)` pairs; indexing takes a chromosome name.

    Usage:
        with hicsparse.open("sample.hic") as f:
            for name, contacts in MatrixReader(f, resolution=10000):
                process(name, contacts.bin1, contacts.bin2, contacts.count)

            chr2 = MatrixReader(f, resolution=10000)["2"]
    """
    def __init__(self, reader: Reader, resolution: Optional[int] = None):
        """
        Initializes the matrix reader.

        Args:
            reader: An opened `hicsparse.Reader` instance.
            resolution: The bin size to decode; defaults to the one given to
                        `hicsparse.open()`.
        """
        if not isinstance(reader, Reader):
            raise TypeError("reader must be a hicsparse.Reader object.")

        self.reader = reader
        self.resolution = resolution
        self._by_chromosome: Optional[Dict[int, ContactRecords]] = None

    def _decode(self) -> Dict[int, ContactRecords]:
        """Decodes every block once and groups the batches per chromosome."""
        if self._by_chromosome is not None:
            return self._by_chromosome

        info = self.reader.info
        batches: Dict[int, List[ContactRecords]] = {}
        for batch in self.reader.iter_blocks(self.resolution):
            if len(batch) == 0:
                continue
            batches.setdefault(int(batch.chromosome[0]), []).append(batch)

        self._by_chromosome = {
            chromosome_id: ContactRecords.concatenate(
                parts, labels=info.labels,
                first_chromosome_is_all=info.first_chromosome_is_all,
            )
            for chromosome_id, parts in batches.items()
        }
        return self._by_chromosome

    @property
    def names(self) -> List[str]:
        """Names of the chromosomes holding at least one contact."""
        names = self.reader.info.chromosome_names
        return [names[i] for i in self._decode()]

    def __len__(self) -> int:
        return len(self._decode())

    def __contains__(self, name: str) -> bool:
        return name in self.names

    @overload
    def __getitem__(self, key: str) -> ContactRecords: ...

    @overload
    def __getitem__(self, key: int) -> ContactRecords: ...

    def __getitem__(self, key: Union[str, int]) -> ContactRecords:
        """
        Returns the contacts of one chromosome, by name or internal id.
        A chromosome without contacts yields an empty ContactRecords.
        """
        info = self.reader.info
        if isinstance(key, str):
            if key not in info.chromosome_names:
                raise KeyError(f"Unknown chromosome {key!r}")
            key = info.chromosome_names.index(key)
        elif not isinstance(key, int):
            raise TypeError(f"Key must be a chromosome name or id, not {type(key).__name__}")
        elif not (0 <= key < info.total_chromosomes):
            raise IndexError("Chromosome id out of range.")

        found = self._decode().get(key)
        if found is None:
            return ContactRecords.empty(info.labels, info.first_chromosome_is_all)
        return found

    def __iter__(self) -> Iterator[Tuple[str, ContactRecords]]:
        names = self.reader.info.chromosome_names
        for chromosome_id, contacts in self._decode().items():
            yield names[chromosome_id], contacts

    def close(self) -> None:
        """Closes the underlying reader."""
        self.reader.close()

    def __enter__(self) -> "MatrixReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
