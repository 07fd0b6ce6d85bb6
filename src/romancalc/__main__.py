"""
romancalc command line entry point

Converts Roman numerals to integers and back, adds numerals, and runs a
round-trip self check over the supported range.
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from romancalc.converter import NumeralConverter
from romancalc.utils import ConfigurationError, InvalidNumeral, load_config
from romancalc.verify import verify_round_trip

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for romancalc.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        prog="romancalc",
        description="romancalc - Convert and add Roman numerals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a numeral to an integer
  python -m romancalc parse MCMXCIV

  # Convert an integer to a numeral
  python -m romancalc render 2024

  # Add two numerals
  python -m romancalc sum XIV LX

  # Check every value from 1 to 3999 survives a round trip
  python -m romancalc verify
        """,
    )
    parser.add_argument("--config", help="Path to a config.json file.")
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="Accept lower-case numerals (overrides the config file).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Convert a Roman numeral to an integer.")
    parse_cmd.add_argument("numeral")

    render_cmd = subparsers.add_parser("render", help="Convert an integer to a Roman numeral.")
    render_cmd.add_argument("value", type=int)

    sum_cmd = subparsers.add_parser("sum", help="Add two Roman numerals.")
    sum_cmd.add_argument("first")
    sum_cmd.add_argument("second")

    verify_cmd = subparsers.add_parser("verify", help="Run the round-trip self check.")
    verify_cmd.add_argument("--start", type=int, default=1)
    verify_cmd.add_argument("--stop", type=int, default=3999)
    verify_cmd.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar."
    )

    return parser.parse_args(argv)


def run_command(
    args: argparse.Namespace, converter: NumeralConverter, max_workers: int
) -> int:
    """
    Runs the selected command and prints its result.

    Args:
        args: Command-line arguments
        converter: The converter to use
        max_workers: Worker threads for the verify command

    Returns:
        The process exit code
    """
    if args.command == "parse":
        print(converter.parse(args.numeral))
    elif args.command == "render":
        print(converter.render(args.value))
    elif args.command == "sum":
        print(converter.sum(args.first, args.second))
    elif args.command == "verify":
        failures = verify_round_trip(
            converter,
            start=args.start,
            stop=args.stop,
            max_workers=max_workers,
            progress=not args.no_progress,
        )
        if failures:
            return 1
        print(f"OK: {args.stop - args.start + 1} value(s) verified")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point.

    This orchestrates a run:
    1. Parses command-line arguments
    2. Loads configuration and sets up logging
    3. Runs the requested command
    """
    try:
        args = parse_arguments(argv)

        load_dotenv()
        config = load_config(args.config)
        logging.basicConfig(
            level=config["log_level"],
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        converter = NumeralConverter(
            case_insensitive=args.ignore_case or config["case_insensitive"]
        )
        exit_code = run_command(args, converter, config["max_workers"])

    except (ConfigurationError, InvalidNumeral) as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
