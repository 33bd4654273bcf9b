"""Command line front end: convert frequency strings and look up their band."""
import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from rigfreq import __version__
from rigfreq.config import (
    INPUT_FORMATS, OUTPUT_FORMATS, load_settings,
    INPUT_FORMAT_KEY, OUTPUT_FORMAT_KEY, LOG_LEVEL_KEY, N1MM_RADIO_NR_KEY
)
from rigfreq.core.formatters import format_short_mhz, group_mhz_digits
from rigfreq.core.parsers import get_parser
from rigfreq.protocols.n1mm import radio_info_to_mhz
from rigfreq.utils.band_helpers import band_to_bcd, frequency_to_band_mhz

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# One renderer per name in config.OUTPUT_FORMATS
OUTPUTS: Dict[str, Callable[[float], str]] = {
    "dotted": group_mhz_digits,
    "short": format_short_mhz,
    "mhz": lambda mhz: f"{mhz:.6f}",
    "band": frequency_to_band_mhz,
    "bcd": lambda mhz: f"{band_to_bcd(frequency_to_band_mhz(mhz)):04b}",
}


def configure_logging(level: str) -> None:
    """Send log output to stderr at the given level name."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser(settings: Dict[str, str]) -> argparse.ArgumentParser:
    """Build the argument parser, with defaults taken from the settings."""
    parser = argparse.ArgumentParser(
        prog="rigfreq",
        description="Convert amateur radio frequency strings and look up their band.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="frequency strings to convert",
    )
    parser.add_argument(
        "-f", "--format",
        dest="input_format",
        choices=INPUT_FORMATS,
        default=settings[INPUT_FORMAT_KEY],
        help="convention the input values use (default: %(default)s)",
    )
    parser.add_argument(
        "-o", "--output",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=settings[OUTPUT_FORMAT_KEY],
        help="what to print for each value (default: %(default)s)",
    )
    parser.add_argument(
        "--radio-info",
        type=argparse.FileType("rb"),
        metavar="FILE",
        help="read an N1MM+ RadioInfo XML payload from FILE ('-' for stdin)",
    )
    parser.add_argument(
        "--tx",
        action="store_true",
        help="use the transmit frequency of the RadioInfo payload",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log debug output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool.

    Returns:
        int: 0 when every value converted, 1 otherwise
    """
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if not args.values and args.radio_info is None:
        parser.error("nothing to convert: give at least one VALUE or --radio-info FILE")

    configure_logging("DEBUG" if args.verbose else settings[LOG_LEVEL_KEY])
    logger.debug(f"rigfreq {__version__}: {args.input_format} -> {args.output_format}")

    render = OUTPUTS[args.output_format]
    ok = True

    try:
        if args.radio_info is not None:
            with args.radio_info as payload_file:
                payload = payload_file.read()
            mhz = radio_info_to_mhz(payload, radio_nr=settings[N1MM_RADIO_NR_KEY], tx=args.tx)
            if mhz is None:
                logger.error("No usable frequency in RadioInfo payload")
                ok = False
            else:
                print(render(mhz))

        parse = get_parser(args.input_format)
        for value in args.values:
            mhz = parse(value)
            if mhz is None:
                logger.error(f"Invalid {args.input_format} frequency: {value!r}")
                print("")
                ok = False
            else:
                print(render(mhz))
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        return 1

    return 0 if ok else 1
