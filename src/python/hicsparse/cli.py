# hicsparse/cli.py
"""
Command-line dump of the intra-chromosome contacts of a .hic file.

Writes one tab-separated line per contact:
chromosome, position1, position2, interaction.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from .file import open as hic_open
from .exceptions import HicError, ResolutionNotFoundError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hicsparse",
        description="Dump the intra-chromosome contacts of a .hic file as sparse TSV.",
    )
    parser.add_argument("path", help="Path to the .hic file.")
    parser.add_argument("resolution", type=int, help="Bin size to decode, in base pairs.")
    parser.add_argument("--chromosome", help="Only dump this chromosome.")
    parser.add_argument(
        "-o", "--output", default="-",
        help="Output file (default: standard output).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def write_tsv(out, columns: dict) -> None:
    for name, position1, position2, interaction in zip(
        columns["chromosome"], columns["position1"], columns["position2"], columns["interaction"]
    ):
        count = np.format_float_positional(interaction, trim="-")
        out.write(f"{name}\t{position1}\t{position2}\t{count}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the dump with optional argv.

    Args:
        argv: Optional list of arguments (if None, use existing sys.argv).

    Returns:
        Exit code: 0 on success, 1 when the file cannot be decoded.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        with hic_open(args.path, resolution=args.resolution) as f:
            contacts = f.read_contacts(chromosome=args.chromosome)
    except ResolutionNotFoundError as e:
        print(f"Cannot find resolution {e.requested}.", file=sys.stderr)
        print("Available resolutions:", file=sys.stderr)
        for resolution in e.available:
            print(f"\t{resolution}", file=sys.stderr)
        return 1
    except (HicError, KeyError) as e:
        print(f"hicsparse: {e}", file=sys.stderr)
        return 1

    columns = contacts.to_dict(args.resolution)
    logger.info("Writing %d contacts", len(contacts))
    if args.output == "-":
        write_tsv(sys.stdout, columns)
    else:
        with open(args.output, "w", encoding="utf-8") as out:
            write_tsv(out, columns)
    return 0
