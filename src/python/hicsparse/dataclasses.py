# hicsparse/dataclasses.py
"""
Dataclasses for the directory structures of a .hic archive.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from ._internal import numpy_utils


@dataclass(frozen=True, slots=True)
class ArchiveInfo:
    """Information extracted from the archive header."""
    version: int
    master_offset: int
    genome: str
    chromosome_names: Tuple[str, ...]
    chromosome_lengths: Tuple[int, ...]
    resolutions: Tuple[int, ...]
    attributes: dict = field(default_factory=dict, compare=False)

    @property
    def total_chromosomes(self) -> int:
        return len(self.chromosome_names)

    @property
    def first_chromosome_is_all(self) -> bool:
        """True when chromosome 0 is the synthetic whole-genome aggregate."""
        return bool(self.chromosome_names) and self.chromosome_names[0].upper() == "ALL"

    @property
    def labels(self) -> Tuple[str, ...]:
        """Chromosome names exposed to callers, without the "ALL" entry."""
        if self.first_chromosome_is_all:
            return self.chromosome_names[1:]
        return self.chromosome_names

    def resolution_index(self, resolution: int) -> Optional[int]:
        """0-based position of `resolution` in the resolution list, or None."""
        selected = None
        for i, value in enumerate(self.resolutions):
            if value == resolution:
                selected = i
        return selected


@dataclass(frozen=True, slots=True)
class FooterEntry:
    """One entry of the master index: where a matrix descriptor lives."""
    key: str
    offset: int
    size: int


@dataclass(frozen=True, slots=True)
class BlockDirectoryEntry:
    """Location of one compressed block."""
    block_id: int
    offset: int
    size: int


@dataclass(frozen=True, slots=True)
class ResolutionLevel:
    """Per-resolution metadata of a matrix and its block directory."""
    index: int
    unit: str
    bin_size: int
    blocks: Tuple[BlockDirectoryEntry, ...]


@dataclass(frozen=True, slots=True)
class MatrixInfo:
    """A matrix descriptor: the chromosome pair and its resolution levels."""
    chromosome1: int
    chromosome2: int
    levels: Tuple[ResolutionLevel, ...]

    @property
    def is_diagonal(self) -> bool:
        return self.chromosome1 == self.chromosome2


@dataclass(frozen=True, slots=True, eq=False)
class ContactRecords:
    """
    Decoded contacts as four parallel columns.

    `chromosome` holds internal chromosome ids (indices into the header's
    chromosome dictionary, "ALL" included); `labels` holds the names
    exposed to callers, "ALL" excluded.
    """
    chromosome: np.ndarray
    bin1: np.ndarray
    bin2: np.ndarray
    count: np.ndarray
    labels: Tuple[str, ...] = ()
    first_chromosome_is_all: bool = False

    def __len__(self) -> int:
        return len(self.count)

    @classmethod
    def empty(cls, labels: Tuple[str, ...] = (), first_chromosome_is_all: bool = False) -> "ContactRecords":
        return cls(*numpy_utils.empty_columns(), labels=labels,
                   first_chromosome_is_all=first_chromosome_is_all)

    @classmethod
    def concatenate(
        cls,
        batches: Sequence["ContactRecords"],
        labels: Tuple[str, ...] = (),
        first_chromosome_is_all: bool = False,
    ) -> "ContactRecords":
        """Merges batches in order into one set of columns."""
        columns = numpy_utils.concatenate_columns(
            [(b.chromosome, b.bin1, b.bin2, b.count) for b in batches]
        )
        return cls(*columns, labels=labels, first_chromosome_is_all=first_chromosome_is_all)

    def label_codes(self) -> np.ndarray:
        """Chromosome ids shifted to index into `labels`."""
        if self.first_chromosome_is_all:
            return self.chromosome - 1
        return self.chromosome.copy()

    def chromosome_names(self) -> np.ndarray:
        """The label of every record, as an object array."""
        names = np.asarray(self.labels, dtype=object)
        return names[self.label_codes()] if len(self) else np.empty(0, dtype=object)

    def positions(self, resolution: int) -> Tuple[np.ndarray, np.ndarray]:
        """Base-pair coordinates of both bins at `resolution`."""
        dtype = numpy_utils.POSITION_DTYPE
        return (
            self.bin1.astype(dtype) * resolution,
            self.bin2.astype(dtype) * resolution,
        )

    def to_dict(self, resolution: int) -> Dict[str, np.ndarray]:
        """
        Column mapping ready for a data frame: chromosome label, both
        base-pair positions and the interaction count.
        """
        position1, position2 = self.positions(resolution)
        return {
            "chromosome": self.chromosome_names(),
            "position1": position1,
            "position2": position2,
            "interaction": self.count,
        }
