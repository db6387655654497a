"""
Education Finance Data Queries
==============================

This module implements ``get_finance_data``, the main entry point for reading
the district finance panel (school years 2011-12 through 2021-22).

A query runs in a fixed order:

1. Validate the year, geography, dataset type and CPI baseline (no I/O).
2. Download the dataset artifact into the cache when it is missing, older
   than ``MAX_CACHE_AGE_DAYS``, or ``refresh=True``.
3. Load the artifact and check its columns against the variable registry.
4. Look up the baseline CPI on the unfiltered data.
5. Filter by year, then by state.
6. Rescale currency columns to baseline-year dollars.

Example Usage
-------------
>>> from edfin_data_manager import get_finance_data
>>> ky = get_finance_data(yr="2020:2022", geo="KY")
>>> adjusted = get_finance_data(yr="2020:2022", geo="KY", cpi_adj="2015")
"""

import logging
from pathlib import Path

import polars as pl

from ..utils.io import read_artifact
from ..utils.schema import check_dataset_schema
from .cache import CacheManager, get_default_cache
from .config import (
    MAX_CACHE_AGE_DAYS,
    STATE_COLUMN,
    YEAR_COLUMN,
    get_artifact_url,
    get_cache_name,
)
from .cpi import baseline_cpi_for_year, normalize
from .download import fetch_artifact
from .params import (
    AllStates,
    GeoSpec,
    SingleYear,
    YearRange,
    YearSpec,
    parse_query_parameters,
)


logger = logging.getLogger(__name__)


def ensure_artifact(
    dataset_type: str,
    refresh: bool = False,
    quiet: bool = False,
    cache: CacheManager | None = None,
) -> tuple[Path, bool]:
    """
    Make sure a current copy of a dataset artifact is in the cache.

    Parameters
    ----------
    dataset_type : {"skinny", "full"}
        Dataset variant (assumed already validated).
    refresh : bool, optional
        Download even if the cached copy is current. Default is False.
    quiet : bool, optional
        Suppress progress notices. Default is False.
    cache : CacheManager | None, optional
        Cache to use; defaults to the process-wide cache.

    Returns
    -------
    tuple[Path, bool]
        The cached file path and whether a download happened.
    """
    if cache is None:
        cache = get_default_cache()

    cache_name = get_cache_name(dataset_type)
    cache.ensure_cache_dir()
    cache_file_path = cache.resolve(cache_name)

    download_required = refresh or not cache.is_current(cache_name, MAX_CACHE_AGE_DAYS)

    if download_required:
        if not quiet:
            logger.info("Downloading education finance data...")
        fetch_artifact(get_artifact_url(dataset_type), cache_file_path, quiet=quiet)
        if not quiet:
            logger.info("Download complete.")
    elif not quiet:
        logger.info("Using cached data. Use refresh=True to download fresh data.")

    return cache_file_path, download_required


def filter_years(df: pl.DataFrame, year: YearSpec) -> pl.DataFrame:
    """Keep rows whose school year matches ``year``."""
    if isinstance(year, SingleYear):
        return df.filter(pl.col(YEAR_COLUMN) == year.year)
    if isinstance(year, YearRange):
        return df.filter(pl.col(YEAR_COLUMN).is_between(year.start, year.end, closed="both"))
    return df


def filter_states(df: pl.DataFrame, geo: GeoSpec) -> pl.DataFrame:
    """Keep rows whose state code is in ``geo``."""
    if isinstance(geo, AllStates):
        return df
    return df.filter(pl.col(STATE_COLUMN).is_in(list(geo.codes)))


def get_finance_data(
    yr="2022",
    geo="all",
    dataset_type="skinny",
    cpi_adj="none",
    refresh: bool = False,
    quiet: bool = False,
    cache: CacheManager | None = None,
) -> pl.DataFrame:
    """
    Get education finance data.

    Data combine the NCES F-33 Survey, Census Bureau Small Area Income and
    Poverty Estimates (SAIPE), and community data from the ACS 5-Year
    Estimates.

    Parameters
    ----------
    yr : str | int, optional
        A single year ("2022"), an inclusive range ("2020:2022"), or "all".
        Years are school end years between 2012 and 2022. Default is "2022".
    geo : str, optional
        "all" for all states, a state code ("KY"), or a comma-separated list
        of state codes ("IN,KY,OH,TN"). Default is "all".
    dataset_type : {"skinny", "full"}, optional
        "skinny" (default) excludes the detailed expenditure data for faster
        downloads; "full" includes it.
    cpi_adj : str | int | None, optional
        "none" (default) for no adjustment, or a baseline year between 2012
        and 2022. Revenue, expenditure and economic variables are then
        expressed in that school year's dollars, and a ``cpi_adj_index``
        column holds the adjustment index used for each row.
    refresh : bool, optional
        Force a new download even if the cached data is current.
    quiet : bool, optional
        Suppress download and cache notices. Default is False.
    cache : CacheManager | None, optional
        Cache to use; defaults to the process-wide cache.

    Returns
    -------
    pl.DataFrame
        One row per district and school year.

    Raises
    ------
    InvalidParameterError
        If any parameter is invalid (raised before any download).
    SchemaMismatchError
        If the cached artifact lacks registry columns.
    MissingBaselineError
        If the data has no rows for the CPI baseline year.
    requests.exceptions.RequestException, OSError
        If the download or cache write fails.

    Examples
    --------
    >>> df = get_finance_data(yr="2022", geo="all")
    >>> regional = get_finance_data(yr="all", geo="IN,KY,OH,TN")
    >>> full = get_finance_data(yr="2022", geo="KY", dataset_type="full")
    >>> (
    ...     get_finance_data(yr="2022", geo="KY")
    ...     .select("dist_name", "rev_total", "exp_cur_total")
    ...     .sort("rev_total", descending=True)
    ... )
    """
    params = parse_query_parameters(yr, geo, dataset_type, cpi_adj)

    cache_file_path, _ = ensure_artifact(
        params.dataset_type, refresh=refresh, quiet=quiet, cache=cache
    )

    data = read_artifact(cache_file_path)
    data = check_dataset_schema(data, params.dataset_type)

    # Baseline CPI comes from the unfiltered data
    baseline_cpi = None
    if params.cpi_baseline is not None:
        baseline_cpi = baseline_cpi_for_year(data, params.cpi_baseline)

    data = filter_years(data, params.year)
    data = filter_states(data, params.geo)

    if params.cpi_baseline is not None:
        data = normalize(data, baseline_cpi, params.dataset_type)

    logger.debug("Returning %d rows", data.height)
    return data


__all__ = [
    "ensure_artifact",
    "filter_years",
    "filter_states",
    "get_finance_data",
]
