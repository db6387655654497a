"""
Exception types raised by the education finance data manager.

Input validation errors subclass ``ValueError`` so callers that already
catch ``ValueError`` keep working. Network and filesystem failures are not
wrapped: ``requests`` exceptions and ``OSError`` propagate unchanged.
"""


class EdfinError(Exception):
    """Base class for all package errors."""


class InvalidParameterError(EdfinError, ValueError):
    """A query parameter (year, geography, dataset type, CPI baseline) is invalid."""


class MissingBaselineError(EdfinError, LookupError):
    """The loaded data has no usable CPI value for the requested baseline year."""

    def __init__(self, year: int, message: str | None = None):
        self.year = year
        if message is None:
            message = f"No data available for the specified baseline year {year}."
        super().__init__(message)


class SchemaMismatchError(EdfinError, ValueError):
    """A loaded artifact is missing columns the registry expects."""

    def __init__(self, dataset_type: str, missing: list[str]):
        self.dataset_type = dataset_type
        self.missing = list(missing)
        super().__init__(
            f"The {dataset_type} dataset is missing {len(self.missing)} expected "
            f"column(s): {', '.join(self.missing)}. Try refresh=True to download "
            "a fresh copy."
        )


class ArtifactFormatError(EdfinError, ValueError):
    """A cached artifact could not be read as a data table."""


__all__ = [
    "EdfinError",
    "InvalidParameterError",
    "MissingBaselineError",
    "SchemaMismatchError",
    "ArtifactFormatError",
]
