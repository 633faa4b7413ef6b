"""Build a bitset from the command line and print its words."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from .api import pretty
from .binding import Profile, bind
from .typehints import BitRange

logger = logging.getLogger(__name__)


def nonnegative(value: str) -> int:
    """Parse a non-negative integer argument."""
    try:
        index = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if index < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {index}")
    return index


def bit_range(value: str) -> BitRange:
    """Parse a ``LO:HI`` range argument."""
    lo, sep, hi = value.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected LO:HI, got {value!r}")
    return nonnegative(lo), nonnegative(hi)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Build a bitset and print its words as a table.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "-o",
        "--output-file",
        type=argparse.FileType("w"),
        default=sys.stdout,
        help="Where to write the table. Defaults to stdout.",
    )
    p.add_argument(
        "-c",
        "--capacity",
        type=nonnegative,
        default=None,
        help="Number of bits to allocate up front.",
    )
    p.add_argument(
        "--fill",
        action="store_true",
        help="Start with bits [0, capacity) set.",
    )
    p.add_argument(
        "-s",
        "--set",
        dest="set_",
        type=nonnegative,
        action="append",
        default=[],
        help="A bit to set.",
    )
    p.add_argument(
        "-r",
        "--range",
        dest="ranges",
        type=bit_range,
        action="append",
        default=[],
        help="A half-open LO:HI range of bits to set.",
    )
    p.add_argument(
        "-x",
        "--clear",
        type=nonnegative,
        action="append",
        default=[],
        help="A bit to clear, applied after every set.",
    )
    p.add_argument(
        "-t",
        "--tablefmt",
        type=str,
        default="simple",
        help="tabulate table format.",
    )
    p.add_argument(
        "-p",
        "--profile",
        choices=[profile.value for profile in Profile],
        default=None,
        help="Binding profile. Defaults to $DENSEBITS_PROFILE, then full.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log buffer growth.",
    )
    args = p.parse_args(argv)
    if args.fill and args.capacity is None:
        p.error("--fill requires --capacity")
    return args


def main(
    *,
    output_file: TextIO,
    capacity: int | None,
    fill: bool,
    set_: Sequence[int],
    ranges: Sequence[BitRange],
    clear: Sequence[int],
    tablefmt: str,
    profile: str | None,
) -> None:
    """Build a bitset from the given bits and ranges and print it."""
    bits = bind(profile)
    logger.debug("using the %s profile", bits.profile.value)

    bitset = bits.allocate(capacity, fill)
    for index in set_:
        bits.set(index, bitset)
    for lo, hi in ranges:
        bits.set_range(lo, hi, bitset)
    for index in clear:
        bits.clear(index, bitset)

    print(pretty(bitset, tablefmt=tablefmt), file=output_file)
    print(f"count: {bits.count(bitset)}", file=output_file)


if __name__ == "__main__":  # pragma: no cover
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    main(
        output_file=args.output_file,
        capacity=args.capacity,
        fill=args.fill,
        set_=args.set_,
        ranges=args.ranges,
        clear=args.clear,
        tablefmt=args.tablefmt,
        profile=args.profile,
    )
