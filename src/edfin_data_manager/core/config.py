# -*- coding: utf-8 -*-
"""
Configuration management for the education finance data manager.

This module handles cache location, artifact URLs and the fixed parameter
domains (years, states, dataset variants) used by the query functions.
"""

# Import Packages
from decouple import config
from pathlib import Path
from platformdirs import user_cache_dir
from typing import Literal

# Cache Location
# Note: same directory name as the edfinr R package, so both share one cache
APP_NAME = "edfinr"
CACHE_DIR = Path(config("EDFIN_CACHE_DIR", default=user_cache_dir(APP_NAME)))
MAX_CACHE_AGE_DAYS = config("EDFIN_MAX_CACHE_AGE_DAYS", default=30, cast=int)

# Download timeout in seconds (unset means the request may block indefinitely)
DOWNLOAD_TIMEOUT = config(
    "EDFIN_DOWNLOAD_TIMEOUT",
    default=None,
    cast=lambda value: None if value in (None, "") else float(value),
)


# ============================================================================
# Remote Artifacts
# ============================================================================

DatasetType = Literal["skinny", "full"]

DATASET_TYPES = ("skinny", "full")

# File stem shared by the remote artifacts and their cache entries
ARTIFACT_STEM = "edfinr_data_fy12_fy22"
ARTIFACT_BASE_URL = "https://edfinr-tidy-data.s3.us-east-2.amazonaws.com"

ARTIFACT_URLS = {
    "skinny": config(
        "EDFIN_SKINNY_URL", default=f"{ARTIFACT_BASE_URL}/{ARTIFACT_STEM}_skinny.rds"
    ),
    "full": config(
        "EDFIN_FULL_URL", default=f"{ARTIFACT_BASE_URL}/{ARTIFACT_STEM}_full.rds"
    ),
}


# ============================================================================
# Parameter Domains
# ============================================================================

# School years, labelled by end year (2022 = 2021-22)
MIN_YEAR = 2012
MAX_YEAR = 2022
VALID_YEARS = range(MIN_YEAR, MAX_YEAR + 1)

# All US states plus DC, in the order reported by get_valid_state_codes()
STATE_CODES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
    "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
    "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
    "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
    "DC",
)

ALL_TOKEN = "all"
NO_CPI_TOKEN = "none"


# ============================================================================
# Column Names
# ============================================================================

YEAR_COLUMN = "year"
STATE_COLUMN = "state"
CPI_COLUMN = "cpi_sy12"
CPI_INDEX_COLUMN = "cpi_adj_index"


# ============================================================================
# Helper Functions
# ============================================================================


def get_artifact_url(dataset_type: DatasetType) -> str:
    """Return the remote artifact URL for a dataset variant.

    Parameters
    ----------
    dataset_type : {"skinny", "full"}
        Dataset variant.

    Returns
    -------
    str
        The configured download URL.
    """
    return ARTIFACT_URLS[dataset_type]


def get_cache_name(dataset_type: DatasetType) -> str:
    """Return the cache file name for a dataset variant.

    Parameters
    ----------
    dataset_type : {"skinny", "full"}
        Dataset variant.

    Returns
    -------
    str
        File name inside the cache directory, e.g.
        ``edfinr_data_fy12_fy22_skinny.rds``.
    """
    return f"{ARTIFACT_STEM}_{dataset_type}.rds"
