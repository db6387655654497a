"""
Schema utilities: check loaded artifacts against the variable registry.
"""

import logging

import polars as pl

from ..core.exceptions import SchemaMismatchError
from ..schemas.variables import dataset_columns


logger = logging.getLogger(__name__)


def missing_columns(df: pl.DataFrame, dataset_type: str) -> list[str]:
    """Return registry columns for ``dataset_type`` that ``df`` lacks, in registry order."""
    present = set(df.columns)
    return [col for col in dataset_columns(dataset_type) if col not in present]


def check_dataset_schema(df: pl.DataFrame, dataset_type: str) -> pl.DataFrame:
    """Raise SchemaMismatchError if ``df`` lacks expected columns; otherwise return it.

    Extra columns are allowed and logged at debug level.
    """
    missing = missing_columns(df, dataset_type)
    if missing:
        raise SchemaMismatchError(dataset_type, missing)
    extra = [col for col in df.columns if col not in set(dataset_columns(dataset_type))]
    if extra:
        logger.debug("Ignoring %d unregistered column(s): %s", len(extra), extra)
    return df


__all__ = [
    "missing_columns",
    "check_dataset_schema",
]
