"""
Input/Output utilities for cached finance artifacts (format detection, loading).
"""

import logging
from pathlib import Path

import polars as pl
import pyreadr
from pyreadr.custom_errors import LibrdataError, PyreadrError

from ..core.exceptions import ArtifactFormatError


logger = logging.getLogger(__name__)

PARQUET_MAGIC = b"PAR1"


def detect_artifact_format(file_path: Path | str) -> str:
    """Return ``"parquet"`` or ``"rds"`` based on the file's leading bytes.

    Parquet files start with ``PAR1``; anything else is treated as an R
    serialized data file (gzip, bzip2, xz or uncompressed).
    """
    with open(file_path, "rb") as f:
        header = f.read(len(PARQUET_MAGIC))
    if header == PARQUET_MAGIC:
        return "parquet"
    return "rds"


def read_artifact(file_path: Path | str) -> pl.DataFrame:
    """
    Load a cached artifact into a Polars DataFrame.

    Parameters
    ----------
    file_path : Path | str
        Path to an ``.rds`` data frame or a Parquet file.

    Returns
    -------
    pl.DataFrame
        The artifact contents.

    Raises
    ------
    ArtifactFormatError
        If the file does not hold a readable data frame.
    """
    file_path = Path(file_path)
    file_format = detect_artifact_format(file_path)
    logger.debug("Reading %s artifact: %s", file_format, file_path)

    if file_format == "parquet":
        try:
            return pl.read_parquet(file_path)
        except (pl.exceptions.PolarsError, OSError) as e:
            raise ArtifactFormatError(f"Could not read {file_path}: {e}") from e

    try:
        result = pyreadr.read_r(str(file_path))
    except (PyreadrError, LibrdataError) as e:
        raise ArtifactFormatError(f"Could not read {file_path}: {e}") from e
    if not result:
        raise ArtifactFormatError(f"{file_path} does not contain a data frame.")
    df = next(iter(result.values()))
    return pl.from_pandas(df)


__all__ = [
    "detect_artifact_format",
    "read_artifact",
]
