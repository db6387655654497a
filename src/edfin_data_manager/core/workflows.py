"""
Education Finance Data Workflows
================================

High-level orchestration functions used by the CLI.

Functions
---------
- refresh_cache_workflow: Download or refresh cached dataset artifacts
- export_workflow: Query finance data and save it to a file

Example Usage
-------------
>>> from edfin_data_manager.core.workflows import refresh_cache_workflow
>>> refresh_cache_workflow(["skinny"], force=True)
{'skinny': True}
"""

import logging
from pathlib import Path
from typing import Iterable

from ..utils.export import EXPORT_FORMATS, export_finance_data
from .cache import CacheManager, get_default_cache
from .config import DATASET_TYPES
from .params import validate_dataset_type
from .query import ensure_artifact, get_finance_data

logger = logging.getLogger(__name__)


def refresh_cache_workflow(
    dataset_types: Iterable[str] = DATASET_TYPES,
    force: bool = False,
    quiet: bool = False,
    cache: CacheManager | None = None,
) -> dict[str, bool]:
    """
    Make sure the cache holds current copies of the requested datasets.

    Parameters
    ----------
    dataset_types : Iterable[str], optional
        Variants to fetch. Default is both "skinny" and "full".
    force : bool, default False
        Re-download even when the cached copy is current.
    quiet : bool, default False
        Suppress progress notices.
    cache : CacheManager | None, optional
        Cache to use; defaults to the process-wide cache.

    Returns
    -------
    dict[str, bool]
        For each variant, whether it was downloaded.

    Notes
    -----
    All variants are validated before any download. A failed download
    stops the workflow and propagates the error.
    """
    dataset_types = [validate_dataset_type(x) for x in dataset_types]
    if cache is None:
        cache = get_default_cache()

    logger.info("=" * 60)
    logger.info("Education Finance Cache Refresh")
    logger.info("=" * 60)
    logger.info(f"Datasets: {', '.join(dataset_types)}")
    logger.info(f"Cache: {cache.root}")
    logger.info(f"Force: {force}")

    results = {}
    for dataset_type in dataset_types:
        _, downloaded = ensure_artifact(
            dataset_type, refresh=force, quiet=quiet, cache=cache
        )
        results[dataset_type] = downloaded

    logger.info("Cache refresh completed successfully!")
    return results


def export_workflow(
    output: Path | str,
    yr="2022",
    geo="all",
    dataset_type="skinny",
    cpi_adj="none",
    refresh: bool = False,
    quiet: bool = False,
    cache: CacheManager | None = None,
) -> Path:
    """
    Query finance data and write it to ``output``.

    The file format follows the suffix of ``output`` (.parquet, .csv or
    .dta). Query parameters are the same as for ``get_finance_data``.

    Returns
    -------
    Path
        The written file.
    """
    output = Path(output)
    if output.suffix.lower() not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format '{output.suffix}'. "
            f"Expected one of: {', '.join(EXPORT_FORMATS)}"
        )

    df = get_finance_data(
        yr=yr,
        geo=geo,
        dataset_type=dataset_type,
        cpi_adj=cpi_adj,
        refresh=refresh,
        quiet=quiet,
        cache=cache,
    )
    return export_finance_data(df, output)


__all__ = [
    "refresh_cache_workflow",
    "export_workflow",
]
