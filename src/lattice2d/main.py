"""Command line entry point.

Prints a lattice neighborhood either as JSON or as a character grid::

    lattice2d chebyshev-ring 1 1 2 --box 0 0 5 5 --format grid
"""

import argparse
import json
import logging
import sys

from lattice2d.config import settings
from lattice2d.neighborhood import (
    BoundingBox,
    chebyshev_ring_exact,
    manhattan_disk_up_to,
    manhattan_ring_exact,
    neighborhood_mask,
    square_up_to,
)

ENUMERATORS = {
    "manhattan-ring": manhattan_ring_exact,
    "manhattan-disk": manhattan_disk_up_to,
    "square": square_up_to,
    "chebyshev-ring": chebyshev_ring_exact,
}

OUTPUT_FORMATS = ("json", "grid")


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the command line tool."""
    level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lattice2d",
        description="Enumerate lattice points around a center",
    )
    parser.add_argument("shape", choices=sorted(ENUMERATORS), help="Neighborhood to enumerate")
    parser.add_argument("x", type=int, help="Center x")
    parser.add_argument("y", type=int, help="Center y")
    parser.add_argument("distance", type=int, help="Distance from the center")
    parser.add_argument(
        "--box",
        type=int,
        nargs=4,
        metavar=("MIN_X", "MIN_Y", "MAX_X", "MAX_Y"),
        default=None,
        help="Inclusive clip box",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help=f"Output format (default: {settings.output_format})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def render_grid(points, box: BoundingBox) -> str:
    """Draw points inside ``box`` as text, highest row first."""
    mask = neighborhood_mask(points, box)
    rows = []
    for row in mask[::-1]:
        rows.append(
            "".join(settings.grid_emitted_char if cell else settings.grid_empty_char for cell in row)
        )
    return "\n".join(rows)


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return an exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    output_format = args.format or settings.output_format
    if output_format not in OUTPUT_FORMATS:
        parser.error(f"unknown output format: {output_format}")
    if output_format == "grid" and args.box is None:
        parser.error("--format grid requires --box")

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    box = BoundingBox.from_bounds(*args.box) if args.box else None
    enumerate_points = ENUMERATORS[args.shape]

    try:
        points = list(enumerate_points((args.x, args.y), args.distance, box))
    except Exception:
        logger.exception("Failed to enumerate %s", args.shape)
        return 1

    logger.info(
        "%s around (%d, %d) at distance %d: %d points",
        args.shape, args.x, args.y, args.distance, len(points),
    )

    if output_format == "grid":
        print(render_grid(points, box))
    else:
        print(json.dumps([[x, y] for x, y in points]))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
