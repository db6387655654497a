"""
Export utilities (Parquet, CSV, Stata)
======================================

Helpers to save query results, with variable labels from the registry when
exporting to Stata.
"""

import logging
from pathlib import Path

import pandas as pd
import polars as pl

from ..schemas.variables import FULL_ONLY_VARIABLES, SKINNY_VARIABLES


logger = logging.getLogger(__name__)

EXPORT_FORMATS = (".parquet", ".csv", ".dta")


def prepare_finance_data_for_stata(
    df: pl.DataFrame,
) -> tuple[pd.DataFrame, dict[str, str]]:
    """Convert to pandas and build variable labels for Stata export.

    Returns the pandas DataFrame and a variable labels dict suitable for
    ``DataFrame.to_stata(..., variable_labels=...)``. Names and labels are
    trimmed to Stata limits (32 and 80 characters).
    """
    descriptions = {
        name: description
        for name, *_, description in SKINNY_VARIABLES + FULL_ONLY_VARIABLES
    }
    descriptions["cpi_adj_index"] = "CPI adjustment index (row CPI / baseline CPI)"

    pdf = df.to_pandas()
    pdf.columns = [x[0:32] for x in pdf.columns]
    variable_labels = {
        key[0:32]: value[0:80]
        for key, value in descriptions.items()
        if key[0:32] in pdf.columns
    }

    return pdf, variable_labels


def export_finance_data(df: pl.DataFrame, file: Path | str) -> Path:
    """
    Save finance data to ``file``; the format follows the file suffix.

    Parameters
    ----------
    df : pl.DataFrame
        Data returned by ``get_finance_data`` or ``list_variables``.
    file : Path | str
        Output path ending in ``.parquet``, ``.csv`` or ``.dta``.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    ValueError
        If the suffix is not a supported export format.
    """
    file = Path(file)
    suffix = file.suffix.lower()
    if suffix not in EXPORT_FORMATS:
        raise ValueError(
            f"Unsupported export format '{file.suffix}'. "
            f"Expected one of: {', '.join(EXPORT_FORMATS)}"
        )
    file.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".parquet":
        df.write_parquet(file)
    elif suffix == ".csv":
        df.write_csv(file)
    else:
        pdf, variable_labels = prepare_finance_data_for_stata(df)
        pdf.to_stata(file, write_index=False, variable_labels=variable_labels)

    logger.info("Saved %d rows to %s", df.height, file)
    return file


__all__ = [
    "prepare_finance_data_for_stata",
    "export_finance_data",
]
