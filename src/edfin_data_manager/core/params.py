"""
Query parameter parsing and validation.

The user-facing query parameters are small strings ("2020:2022",
"IN,KY,OH,TN", "none"). This module turns them into structured values once,
so the query engine never re-parses strings:

- year:        AllYears | SingleYear(year) | YearRange(start, end)
- geography:   AllStates | StateSet(codes)
- dataset:     "skinny" | "full"
- CPI baseline: None | year

Every parser raises :class:`InvalidParameterError` with a message naming the
offending value. Nothing here touches the network or the filesystem.
"""

import re
from dataclasses import dataclass
from typing import Union

from .config import (
    ALL_TOKEN,
    DATASET_TYPES,
    MAX_YEAR,
    MIN_YEAR,
    NO_CPI_TOKEN,
    STATE_CODES,
    VALID_YEARS,
)
from .exceptions import InvalidParameterError


_INTEGER_PATTERN = re.compile(r"^[+-]?\d+(?:\.0*)?$")


# ============================================================================
# Structured Parameter Types
# ============================================================================


@dataclass(frozen=True)
class AllYears:
    """No year filtering."""


@dataclass(frozen=True)
class SingleYear:
    """A single school year (end year)."""

    year: int


@dataclass(frozen=True)
class YearRange:
    """An inclusive range of school years."""

    start: int
    end: int


YearSpec = Union[AllYears, SingleYear, YearRange]


@dataclass(frozen=True)
class AllStates:
    """No geography filtering."""


@dataclass(frozen=True)
class StateSet:
    """An explicit list of state codes, in the order given."""

    codes: tuple[str, ...]


GeoSpec = Union[AllStates, StateSet]


@dataclass(frozen=True)
class QueryParameters:
    """Validated parameters for a single ``get_finance_data`` call."""

    year: YearSpec
    geo: GeoSpec
    dataset_type: str
    cpi_baseline: int | None


# ============================================================================
# Parsers
# ============================================================================


def _parse_int(token: str) -> int | None:
    """Return ``token`` as an int, or None if it is not an integral number.

    Integral decimals such as ``"2022.0"`` are accepted.
    """
    token = token.strip()
    if not _INTEGER_PATTERN.match(token):
        return None
    return int(token.split(".")[0])


def _coerce_token(value, name: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidParameterError(
            f"{name} must be a string or an integer, got {type(value).__name__}."
        )
    return str(value)


def parse_year_spec(value: "str | int | YearSpec") -> YearSpec:
    """Parse a year specification.

    Parameters
    ----------
    value : str | int | YearSpec
        ``"all"``, a single year (``"2022"`` or ``2022``), or an inclusive
        range ``"2020:2022"``.

    Returns
    -------
    YearSpec
        AllYears, SingleYear or YearRange.

    Raises
    ------
    InvalidParameterError
        For non-numeric tokens, ranges without exactly two parts, years
        outside 2012-2022, or reversed ranges.

    Examples
    --------
    >>> parse_year_spec("2020:2022")
    YearRange(start=2020, end=2022)
    >>> parse_year_spec("all")
    AllYears()
    """
    if isinstance(value, (AllYears, SingleYear, YearRange)):
        return value
    yr = _coerce_token(value, "Year")

    if yr == ALL_TOKEN:
        return AllYears()

    if ":" in yr:
        parts = yr.split(":")
        if len(parts) != 2:
            raise InvalidParameterError(
                f"Invalid year range '{yr}'. Year range must be in format "
                "'start:end', e.g., '2020:2022'."
            )
        start_yr, end_yr = (_parse_int(part) for part in parts)
        if start_yr is None or end_yr is None:
            raise InvalidParameterError(
                f"Invalid year range '{yr}'. Year range must contain valid numeric years."
            )
        if start_yr not in VALID_YEARS or end_yr not in VALID_YEARS:
            raise InvalidParameterError(
                f"Invalid year range '{yr}'. Years must be between {MIN_YEAR} and {MAX_YEAR}."
            )
        if start_yr > end_yr:
            raise InvalidParameterError(
                f"Invalid year range '{yr}'. Start year must be less than or equal to end year."
            )
        return YearRange(start_yr, end_yr)

    single_yr = _parse_int(yr)
    if single_yr is None:
        raise InvalidParameterError(
            f"Invalid year '{yr}'. Year must be a valid number, a range "
            "(e.g., '2020:2022'), or 'all'."
        )
    if single_yr not in VALID_YEARS:
        raise InvalidParameterError(
            f"Invalid year '{yr}'. Year must be between {MIN_YEAR} and {MAX_YEAR}."
        )
    return SingleYear(single_yr)


def parse_geo_spec(value: "str | GeoSpec") -> GeoSpec:
    """Parse a geography specification.

    ``"all"`` or a comma-separated list of two-letter state codes. Codes are
    compared exactly as given (no trimming or case folding).

    Raises
    ------
    InvalidParameterError
        Naming every unrecognized code.
    """
    if isinstance(value, (AllStates, StateSet)):
        return value
    if not isinstance(value, str):
        raise InvalidParameterError(
            f"Geography must be a string, got {type(value).__name__}."
        )

    if value == ALL_TOKEN:
        return AllStates()

    states = value.split(",")
    invalid_states = [state for state in states if state not in STATE_CODES]
    if invalid_states:
        shown = ", ".join(
            state if state and state == state.strip() else repr(state)
            for state in invalid_states
        )
        raise InvalidParameterError(
            f"Invalid state code(s): {shown}. "
            "State codes must be valid two-letter US state codes."
        )
    return StateSet(tuple(states))


def validate_dataset_type(value) -> str:
    """Return ``value`` if it is a known dataset variant ("skinny" or "full")."""
    if value not in DATASET_TYPES:
        raise InvalidParameterError(
            f"Invalid dataset_type {value!r}. dataset_type must be either 'skinny' or 'full'."
        )
    return value


def parse_cpi_baseline(value: "str | int | None") -> int | None:
    """Parse a CPI baseline.

    Parameters
    ----------
    value : str | int | None
        ``"none"`` (or None) for no adjustment, otherwise a school year
        between 2012 and 2022.

    Returns
    -------
    int | None
        The baseline year, or None when no adjustment is requested.
    """
    if value is None:
        return None
    cpi_adj = _coerce_token(value, "cpi_adj")
    if cpi_adj == NO_CPI_TOKEN:
        return None

    cpi_year = _parse_int(cpi_adj)
    if cpi_year is None:
        raise InvalidParameterError(
            f"Invalid cpi_adj '{cpi_adj}'. cpi_adj must be 'none' or a valid year "
            f"between {MIN_YEAR} and {MAX_YEAR}."
        )
    if cpi_year not in VALID_YEARS:
        raise InvalidParameterError(
            f"Invalid cpi_adj '{cpi_adj}'. cpi_adj year must be between {MIN_YEAR} and {MAX_YEAR}."
        )
    return cpi_year


def parse_query_parameters(
    yr="2022",
    geo="all",
    dataset_type="skinny",
    cpi_adj="none",
) -> QueryParameters:
    """Validate all four query parameters, failing on the first invalid one."""
    return QueryParameters(
        year=parse_year_spec(yr),
        geo=parse_geo_spec(geo),
        dataset_type=validate_dataset_type(dataset_type),
        cpi_baseline=parse_cpi_baseline(cpi_adj),
    )


__all__ = [
    "AllYears",
    "SingleYear",
    "YearRange",
    "YearSpec",
    "AllStates",
    "StateSet",
    "GeoSpec",
    "QueryParameters",
    "parse_year_spec",
    "parse_geo_spec",
    "validate_dataset_type",
    "parse_cpi_baseline",
    "parse_query_parameters",
]
