"""
CPI adjustment of currency columns.

Revenue, expenditure and selected economic variables are rescaled into a
baseline school year's dollars using the school-year-aligned CPI-U index
(``cpi_sy12``, July-June average):

    adjusted = value * cpi_sy12 / baseline_cpi

The baseline CPI value is taken from the full (unfiltered) table so that a
baseline year outside the requested years still works.
"""

import logging

import polars as pl

from ..schemas.variables import currency_columns
from .config import CPI_COLUMN, CPI_INDEX_COLUMN, YEAR_COLUMN
from .exceptions import MissingBaselineError


logger = logging.getLogger(__name__)


def baseline_cpi_for_year(df: pl.DataFrame, year: int) -> float:
    """Return the CPI index of the first row whose year equals ``year``.

    All rows of a school year carry the same national CPI value, so the
    first match is used without further checks.

    Raises
    ------
    MissingBaselineError
        If no row has ``year``, or its CPI value is missing.
    """
    baseline_data = df.filter(pl.col(YEAR_COLUMN) == year)
    if baseline_data.height == 0:
        raise MissingBaselineError(year)
    baseline_cpi = baseline_data[CPI_COLUMN][0]
    if baseline_cpi is None or baseline_cpi != baseline_cpi:
        raise MissingBaselineError(
            year, f"The CPI value for baseline year {year} is missing."
        )
    return baseline_cpi


def normalize(df: pl.DataFrame, baseline_cpi: float, dataset_type: str) -> pl.DataFrame:
    """
    Rescale currency columns to baseline-year dollars.

    Parameters
    ----------
    df : pl.DataFrame
        Finance data containing ``cpi_sy12``.
    baseline_cpi : float
        CPI index of the baseline school year.
    dataset_type : {"skinny", "full"}
        Dataset variant; "full" adds the detailed expenditure columns to the
        rescale set.

    Returns
    -------
    pl.DataFrame
        A new frame with currency columns rescaled and a ``cpi_adj_index``
        column (row CPI / baseline CPI) appended. Columns not present in
        ``df`` are skipped; all other columns are unchanged.
    """
    cols_to_adjust = [col for col in currency_columns(dataset_type) if col in df.columns]
    logger.debug(
        "Adjusting %d columns to baseline CPI %s", len(cols_to_adjust), baseline_cpi
    )
    cpi = pl.col(CPI_COLUMN)
    return df.with_columns(
        (cpi / baseline_cpi).alias(CPI_INDEX_COLUMN),
        *[(pl.col(col) * cpi / baseline_cpi).alias(col) for col in cols_to_adjust],
    )


__all__ = [
    "baseline_cpi_for_year",
    "normalize",
]
