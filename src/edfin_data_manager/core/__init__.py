"""
Core Education Finance Data Functionality
=========================================

This module contains the query engine and the pieces it is built from.

Modules
-------
- config: Cache location, artifact URLs, and parameter domains
- cache: On-disk artifact cache with age-based freshness
- download: Artifact downloads into the cache
- params: Parsing and validation of query parameters
- cpi: CPI adjustment of currency columns
- query: get_finance_data
- workflows: Cache refresh and export workflows used by the CLI
"""

# Import configuration constants
from .config import (
    CACHE_DIR,
    MAX_CACHE_AGE_DAYS,
    DATASET_TYPES,
    VALID_YEARS,
    STATE_CODES,
    get_artifact_url,
    get_cache_name,
)

from .exceptions import (
    EdfinError,
    InvalidParameterError,
    MissingBaselineError,
    SchemaMismatchError,
    ArtifactFormatError,
)

from .cache import (
    CacheManager,
    get_default_cache,
)

from .download import fetch_artifact

from .params import (
    AllYears,
    SingleYear,
    YearRange,
    AllStates,
    StateSet,
    QueryParameters,
    parse_year_spec,
    parse_geo_spec,
    validate_dataset_type,
    parse_cpi_baseline,
    parse_query_parameters,
)

from .cpi import (
    baseline_cpi_for_year,
    normalize,
)

from .query import (
    ensure_artifact,
    get_finance_data,
)

from .workflows import (
    refresh_cache_workflow,
    export_workflow,
)

__all__ = [
    # Configuration
    "CACHE_DIR",
    "MAX_CACHE_AGE_DAYS",
    "DATASET_TYPES",
    "VALID_YEARS",
    "STATE_CODES",
    "get_artifact_url",
    "get_cache_name",
    # Errors
    "EdfinError",
    "InvalidParameterError",
    "MissingBaselineError",
    "SchemaMismatchError",
    "ArtifactFormatError",
    # Cache and download
    "CacheManager",
    "get_default_cache",
    "fetch_artifact",
    # Parameters
    "AllYears",
    "SingleYear",
    "YearRange",
    "AllStates",
    "StateSet",
    "QueryParameters",
    "parse_year_spec",
    "parse_geo_spec",
    "validate_dataset_type",
    "parse_cpi_baseline",
    "parse_query_parameters",
    # CPI adjustment
    "baseline_cpi_for_year",
    "normalize",
    # Queries and workflows
    "ensure_artifact",
    "get_finance_data",
    "refresh_cache_workflow",
    "export_workflow",
]
