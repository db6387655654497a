"""
Education Finance Data Schema
=============================

Static metadata describing every column of the skinny (41 columns) and full
(89 columns) datasets: name, declared type, category, originating source,
first school year with data, and a description.

Functions
---------
- list_variables: Variable metadata for a dataset variant, optionally by category
- dataset_columns: Column names expected in a dataset variant
- currency_columns: Dollar-denominated columns rescaled by CPI adjustment
- get_valid_state_codes: The 51 state codes accepted as geography filters

Notes
-----
The query functions check loaded artifacts against ``dataset_columns`` and
derive the CPI rescale set from ``currency_columns``, so the registry is the
single source for both.
"""

from ..core.config import STATE_CODES
from .variables import (
    CATEGORIES,
    currency_columns,
    dataset_columns,
    list_variables,
)


def get_valid_state_codes() -> list[str]:
    """
    Return the two-letter state codes accepted by ``get_finance_data``.

    Returns
    -------
    list[str]
        The 50 US states plus DC (51 codes).

    Examples
    --------
    >>> get_valid_state_codes()[:3]
    ['AL', 'AK', 'AZ']
    """
    return list(STATE_CODES)


# Alias matching the edfinr R package function name
get_states = get_valid_state_codes


__all__ = [
    "CATEGORIES",
    "list_variables",
    "dataset_columns",
    "currency_columns",
    "get_valid_state_codes",
    "get_states",
]
