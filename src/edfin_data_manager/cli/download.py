"""
Download Command CLI
====================

Command-line interface for downloading the cached finance datasets.
"""

import argparse
import logging

import requests

from ..core.config import DATASET_TYPES
from ..core.workflows import refresh_cache_workflow

logger = logging.getLogger(__name__)


def configure_download_parser(parser: argparse.ArgumentParser) -> None:
    """
    Configure the download subcommand parser.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to configure
    """
    parser.description = """
Download the education finance datasets into the local cache.

Cached copies younger than 30 days are kept unless --refresh is given.

Examples:
  # Cache both datasets
  edfin download

  # Refresh only the skinny dataset
  edfin download --dataset-type skinny --refresh
    """

    parser.add_argument(
        "--dataset-type",
        choices=[*DATASET_TYPES, "all"],
        default="all",
        help="Dataset to download (default: all)",
    )

    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Download even if the cached copy is current",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress download progress messages",
    )

    parser.set_defaults(handler=handle_download_command)


def handle_download_command(args: argparse.Namespace) -> int:
    """
    Handle the download command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments

    Returns
    -------
    int
        Exit code (0 for success, non-zero for failure)
    """
    if args.dataset_type == "all":
        dataset_types = DATASET_TYPES
    else:
        dataset_types = (args.dataset_type,)

    try:
        results = refresh_cache_workflow(
            dataset_types=dataset_types,
            force=args.refresh,
            quiet=args.quiet,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"Download failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not write to the cache: {e}")
        return 1

    for dataset_type, downloaded in results.items():
        status = "downloaded" if downloaded else "cached"
        print(f"{dataset_type}: {status}")
    return 0
