#!/usr/bin/env python3
"""
Example: Download Education Finance Data
========================================

This example uses refresh_cache_workflow to put current copies of both
dataset variants into the local cache.

The workflow downloads:
- skinny: 41 core variables (identifiers, revenue, spending, demographics)
- full: the skinny variables plus 48 detailed expenditure variables

Cached copies younger than 30 days are reused unless force=True. The cache
location can be changed with the EDFIN_CACHE_DIR environment variable.

Usage:
    python examples/01_example_download_finance_data.py

Alternatively, you can use the CLI:
    edfin download
"""

import logging

from edfin_data_manager.core import get_default_cache, refresh_cache_workflow


def main():
    """Download both dataset variants into the cache."""

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    logger = logging.getLogger(__name__)

    force = False  # Set to True to re-download current files

    try:
        results = refresh_cache_workflow(force=force)
    except Exception as e:
        logger.error(f"Error during download: {e}")
        return False

    for dataset_type, downloaded in results.items():
        logger.info(f"{dataset_type}: {'downloaded' if downloaded else 'already cached'}")
    return True


if __name__ == "__main__":
    success = main()

    print("\n" + "=" * 60)
    print("Download completed successfully!" if success else "Download failed!")
    print("=" * 60)

    if success:
        print(f"\nCache directory: {get_default_cache().root}")
        print("\nNext steps:")
        print("  See 02_example_query_finance_data.py")
