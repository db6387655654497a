"""
Education Finance Data Manager CLI
==================================

Command-line interface for education finance data.

Commands
--------
- edfin download: Download or refresh the cached datasets
- edfin get: Query finance data and print or save it
- edfin variables: List variable metadata
- edfin states: List valid state codes

Example Usage
-------------
# Cache both datasets
$ edfin download

# Kentucky and Tennessee, 2020-2022, in 2022 dollars, saved to Parquet
$ edfin get --year 2020:2022 --geo KY,TN --cpi-adj 2022 --output ky_tn.parquet

# Expenditure variables in the full dataset
$ edfin variables --dataset-type full --category expenditure

For detailed help on each command:
$ edfin download --help
$ edfin get --help
"""

import argparse
import logging
import sys
from typing import Sequence

from .download import configure_download_parser, handle_download_command
from .query import (
    configure_get_parser,
    configure_states_parser,
    configure_variables_parser,
    handle_get_command,
    handle_states_command,
    handle_variables_command,
)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the edfin CLI.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Command line arguments. If None, uses sys.argv[1:]

    Returns
    -------
    int
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="edfin",
        description="Education Finance Data Manager - Query U.S. school district finance data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cache both datasets
  edfin download

  # Force a fresh download of the full dataset
  edfin download --dataset-type full --refresh

  # All states for 2022
  edfin get --year 2022

  # Several states, all years, saved as CSV
  edfin get --year all --geo IN,KY,OH,TN --output regional.csv

  # Revenue variables
  edfin variables --category revenue
        """,
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level (default: INFO)",
    )

    # Create subcommands
    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Command to execute",
    )

    download_parser = subparsers.add_parser(
        "download",
        help="Download or refresh the cached datasets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    configure_download_parser(download_parser)

    get_parser = subparsers.add_parser(
        "get",
        help="Query finance data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    configure_get_parser(get_parser)

    variables_parser = subparsers.add_parser(
        "variables",
        help="List variable metadata",
    )
    configure_variables_parser(variables_parser)

    states_parser = subparsers.add_parser(
        "states",
        help="List valid state codes",
    )
    configure_states_parser(states_parser)

    # Parse arguments
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    # Execute command
    handlers = {
        "download": handle_download_command,
        "get": handle_get_command,
        "variables": handle_variables_command,
        "states": handle_states_command,
    }
    try:
        return handlers[args.command](args)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        logging.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
