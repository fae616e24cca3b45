# hicsparse/convenience.py
"""
High-level convenience functions for common single-call decodes.
"""
from typing import Union

from .file import open as hic_open
from .dataclasses import ContactRecords


def read_hic(
    filepath: str,
    resolution: int,
    *,
    chromosome: Union[int, str, None] = None,
) -> ContactRecords:
    """
    Decodes every intra-chromosome contact of a .hic file at one resolution.

    This is a high-level wrapper for the most common read operation.

    Args:
        filepath: The path to the .hic file.
        resolution: The bin size to decode.
        chromosome: (Optional) Restrict the decode to one chromosome, by
                    name or internal id.

    Returns:
        The decoded ContactRecords.

    Raises:
        ResolutionNotFoundError: If the file does not store `resolution`;
            the error's `available` attribute lists those it does.
    """
    with hic_open(filepath, resolution=resolution) as f:
        return f.read_contacts(chromosome=chromosome)
