"""
Education Finance Data Manager
==============================

Tools for working with a cleaned panel of U.S. public school district
finances (school years 2011-12 through 2021-22).

This package provides functionality for:
- Downloading and caching the pre-joined "skinny" and "full" datasets
- Filtering by school year and state
- Adjusting dollar amounts to a baseline school year with CPI-U
- Listing variable metadata

Data sources: NCES F-33 Survey, NCES CCD Directory, Census Bureau SAIPE,
ACS 5-Year Estimates, and BLS CPI-U.

Example Usage
-------------
>>> from edfin_data_manager import get_finance_data, list_variables

>>> # Data for Kentucky and Tennessee, 2020-2022
>>> df = get_finance_data(yr="2020:2022", geo="KY,TN")

>>> # Detailed expenditures in 2015 dollars
>>> full = get_finance_data(yr="all", geo="KY", dataset_type="full", cpi_adj="2015")

>>> # Expenditure variables in the full dataset
>>> list_variables(dataset_type="full", category="expenditure")

Notes
-----
Datasets are cached in the per-user cache directory and re-downloaded when
the cached copy is older than 30 days, or when ``refresh=True``.
"""

__version__ = "0.1.0"

from .core import (
    CacheManager,
    EdfinError,
    InvalidParameterError,
    MissingBaselineError,
    SchemaMismatchError,
    get_finance_data,
)
from .schemas import (
    get_states,
    get_valid_state_codes,
    list_variables,
)

__all__ = [
    "__version__",
    # Queries
    "get_finance_data",
    "list_variables",
    "get_valid_state_codes",
    "get_states",
    # Cache
    "CacheManager",
    # Errors
    "EdfinError",
    "InvalidParameterError",
    "MissingBaselineError",
    "SchemaMismatchError",
]
