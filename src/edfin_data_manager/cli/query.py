"""
Query Command CLI
=================

Command-line interface for querying finance data and listing metadata.
"""

import argparse
import logging

import polars as pl

from ..core.config import DATASET_TYPES, NO_CPI_TOKEN
from ..core.exceptions import EdfinError
from ..core.query import get_finance_data
from ..core.workflows import export_workflow
from ..schemas import CATEGORIES, get_valid_state_codes, list_variables

logger = logging.getLogger(__name__)


def configure_get_parser(parser: argparse.ArgumentParser) -> None:
    """
    Configure the get subcommand parser.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to configure
    """
    parser.description = """
Query education finance data.

Examples:
  # All states for 2022
  edfin get --year 2022

  # Kentucky, 2020-2022, in 2015 dollars
  edfin get --year 2020:2022 --geo KY --cpi-adj 2015

  # Full dataset saved to Stata
  edfin get --year 2022 --geo KY --dataset-type full --output ky_2022.dta
    """

    parser.add_argument(
        "--year",
        type=str,
        default="2022",
        metavar="YEAR",
        help="Year ('2022'), range ('2020:2022'), or 'all' (default: 2022)",
    )

    parser.add_argument(
        "--geo",
        type=str,
        default="all",
        metavar="STATES",
        help="'all' or comma-separated state codes, e.g. 'IN,KY,OH,TN' (default: all)",
    )

    parser.add_argument(
        "--dataset-type",
        choices=DATASET_TYPES,
        default="skinny",
        help="Dataset variant (default: skinny)",
    )

    parser.add_argument(
        "--cpi-adj",
        type=str,
        default=NO_CPI_TOKEN,
        metavar="YEAR",
        help="Baseline year for CPI adjustment, or 'none' (default: none)",
    )

    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Download fresh data even if the cache is current",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress download and cache messages",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        metavar="PATH",
        help="Save results to a .parquet, .csv or .dta file instead of printing",
    )

    parser.set_defaults(handler=handle_get_command)


def configure_variables_parser(parser: argparse.ArgumentParser) -> None:
    """Configure the variables subcommand parser."""
    parser.add_argument(
        "--dataset-type",
        choices=DATASET_TYPES,
        default="skinny",
        help="Dataset variant (default: skinny)",
    )
    parser.add_argument(
        "--category",
        choices=[*CATEGORIES, "all"],
        default="all",
        help="Variable category (default: all)",
    )
    parser.set_defaults(handler=handle_variables_command)


def configure_states_parser(parser: argparse.ArgumentParser) -> None:
    """Configure the states subcommand parser."""
    parser.set_defaults(handler=handle_states_command)


def handle_get_command(args: argparse.Namespace) -> int:
    """
    Handle the get command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments

    Returns
    -------
    int
        Exit code (0 for success, non-zero for failure)
    """
    query = dict(
        yr=args.year,
        geo=args.geo,
        dataset_type=args.dataset_type,
        cpi_adj=args.cpi_adj,
        refresh=args.refresh,
        quiet=args.quiet,
    )
    try:
        if args.output:
            export_workflow(args.output, **query)
        else:
            df = get_finance_data(**query)
            print(df)
    except (EdfinError, ValueError) as e:
        logger.error(f"Query failed: {e}")
        return 1

    return 0


def handle_variables_command(args: argparse.Namespace) -> int:
    """Handle the variables command."""
    variables = list_variables(dataset_type=args.dataset_type, category=args.category)
    with pl.Config(tbl_rows=-1, fmt_str_lengths=80):
        print(variables.select("name", "type", "category", "source", "first_yr_avail"))
    return 0


def handle_states_command(args: argparse.Namespace) -> int:
    """Handle the states command."""
    print(",".join(get_valid_state_codes()))
    return 0
