"""
Utility Functions for Education Finance Data
============================================

This module contains helper functions for reading cached artifacts, checking
them against the variable registry, and exporting query results.

Modules
-------
- io: Artifact format detection and loading (RDS or Parquet)
- schema: Column checks against the variable registry
- export: Parquet, CSV and Stata export
"""

from .io import (
    detect_artifact_format,
    read_artifact,
)
from .schema import (
    check_dataset_schema,
    missing_columns,
)
from .export import (
    export_finance_data,
    prepare_finance_data_for_stata,
)

__all__ = [
    # Artifact handling
    "detect_artifact_format",
    "read_artifact",

    # Schema checks
    "check_dataset_schema",
    "missing_columns",

    # Export functions
    "export_finance_data",
    "prepare_finance_data_for_stata",
]
