# tests/conftest.py
"""
Pytest configuration and shared fixtures for the test suite.
"""
import pytest
from pathlib import Path

from hic_builder import HicArchiveBuilder, legacy_block, rows_block, dense_block


@pytest.fixture
def write_archive(tmp_path: Path):
    """
    Returns a function writing a HicArchiveBuilder to a fresh file and
    returning its path as a string.
    """
    counter = iter(range(1_000_000))

    def _write(builder: HicArchiveBuilder) -> str:
        return builder.write(tmp_path / f"archive_{next(counter)}.hic")

    return _write


@pytest.fixture(scope="session")
def standard_archive(tmp_path_factory) -> Path:
    """
    A version 8 archive with an "ALL" chromosome and two real chromosomes,
    stored at resolutions [5000, 10000].

    Contacts at 10000 (resolution index 1):
      chromosome "1" (id 1): 3 records over two blocks, plus one empty block
      chromosome "2" (id 2): 2 records (dense block with one empty cell)
    The "ALL" self-matrix and the 1_2 inter-chromosome matrix hold contacts
    that must never be decoded.
    """
    filepath = tmp_path_factory.getbasetemp() / "standard.hic"
    builder = HicArchiveBuilder()
    builder.add_matrix(
        0, 0,
        [rows_block(0, 0, {0: [(0, 99.0)]})],
        [rows_block(0, 0, {0: [(0, 99.0)]})],
    )
    builder.add_matrix(
        1, 1,
        [rows_block(0, 0, {0: [(0, 1.0)]})],
        [
            rows_block(10, 20, {1: [(2, 7.25), (3, 1.5)]}),
            None,
            rows_block(100, 100, {0: [(0, 4.0)]}, use_short=0),
        ],
    )
    builder.add_matrix(
        1, 2,
        [rows_block(0, 0, {0: [(0, 50.0)]})],
        [rows_block(0, 0, {0: [(0, 50.0)]})],
    )
    builder.add_matrix(
        2, 2,
        [],
        [dense_block(5, 6, 2, [3, -32768, 8], use_short=0)],
    )
    builder.write(filepath)
    return filepath


@pytest.fixture(scope="session")
def legacy_archive(tmp_path_factory) -> Path:
    """A version 6 archive without an "ALL" chromosome, one resolution."""
    filepath = tmp_path_factory.getbasetemp() / "legacy.hic"
    builder = HicArchiveBuilder(
        version=6,
        chromosomes=[("chr1", 1000), ("chr2", 500)],
        resolutions=[25000],
    )
    builder.add_matrix(0, 0, [legacy_block([(0, 0, 3.0), (1, 2, 4.5)])])
    builder.add_matrix(1, 1, [legacy_block([(7, 9, 2.0)])])
    builder.write(filepath)
    return filepath
