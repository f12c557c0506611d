"""Command line entry point: print a modular multiplicative inverse."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .modular import extended_euclid


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptoeq",
        description="Print the inverse of NUMBER modulo MODULO.",
    )
    parser.add_argument("number", nargs="?", type=int, default=3)
    parser.add_argument("modulo", nargs="?", type=int, default=11)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _parser().parse_args(argv)
    try:
        inverse = extended_euclid(args.number, args.modulo)
    except (ValueError, ZeroDivisionError) as error:
        print(f"cryptoeq: {error}", file=sys.stderr)
        return 1
    print(inverse)
    return 0


if __name__ == "__main__":
    sys.exit(main())