import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import DIST_JUMP_KM, REJECT_LOG_NAME, TIME_GAP_MINUTES
from .io import MissingColumnsError
from .pipeline import process_file

logger = logging.getLogger("trips_segmentation")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trips-geojson",
        description="Split timestamped GPS points into trips and export them as GeoJSON LineStrings.",
    )
    parser.add_argument("input", help="CSV file with a header and lat/lon/time columns")
    parser.add_argument("-o", "--output", default=None,
                        help="GeoJSON destination (default: input path with .geojson)")
    parser.add_argument("--rejects", default=REJECT_LOG_NAME,
                        help=f"Reject log path (default: {REJECT_LOG_NAME})")
    parser.add_argument("--max-gap-minutes", type=float, default=TIME_GAP_MINUTES,
                        help=f"Split when consecutive points are more than this many minutes apart (default: {TIME_GAP_MINUTES:g})")
    parser.add_argument("--max-jump-km", type=float, default=DIST_JUMP_KM,
                        help=f"Split when consecutive points are more than this many km apart (default: {DIST_JUMP_KM:g})")
    parser.add_argument("--no-numba", dest="use_numba", action="store_false",
                        help="Use the pure-Python segmentation kernel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        summary = process_file(
            args.input,
            args.output,
            args.rejects,
            max_gap_minutes=args.max_gap_minutes,
            max_jump_km=args.max_jump_km,
            use_numba=args.use_numba,
        )
    except MissingColumnsError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("ERROR: %s", e)
        return 1

    logger.debug("%(rows)d rows, %(rejected)d rejected, %(trips)d trips, %(exported)d exported", summary)
    logger.info("GeoJSON written to %s", summary["output"])
    return 0
