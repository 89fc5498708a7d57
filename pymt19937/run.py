"""Command line interface printing raw MT19937 outputs."""

from __future__ import annotations

import argparse
import logging

from .constants import DEFAULT_SEED, N
from .generator import MT19937Generator

LOGGER = logging.getLogger(__name__)

_FORMATS = {
    "dec": "{:d}",
    "hex": "{:08x}",
}


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print 32-bit outputs of an MT19937 generator")
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Seed in [0, 2**32 - 1] (default: {DEFAULT_SEED})",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of values to print")
    parser.add_argument("--skip", type=int, default=0, help="Number of values to discard first")
    parser.add_argument(
        "--format",
        choices=sorted(_FORMATS),
        default="dec",
        help="Output format of each value",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.count < 0:
        parser.error("--count must be non-negative")
    if args.skip < 0:
        parser.error("--skip must be non-negative")

    try:
        generator = MT19937Generator(args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    generator.discard(args.skip)

    template = _FORMATS[args.format]
    remaining = args.count
    while remaining:
        block = generator.random_raw(min(remaining, N))
        for value in block:
            print(template.format(int(value)))
        remaining -= block.size

    LOGGER.info(
        "Generated %d values for seed %d after %d twists", args.count, generator.seed, generator.twists
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
