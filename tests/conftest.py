"""
Shared fixtures: synthetic finance artifacts and a fake downloader.

The synthetic data has one district per state for every school year
2012-2022, with every registry column present. ``cpi_sy12`` rises by 0.025
per year and each currency column varies by row, so CPI scaling is visible.
"""

import polars as pl
import pytest

from edfin_data_manager.core import query
from edfin_data_manager.core.cache import CacheManager
from edfin_data_manager.core.config import (
    CPI_COLUMN,
    DATASET_TYPES,
    STATE_CODES,
    VALID_YEARS,
    get_artifact_url,
)
from edfin_data_manager.schemas.variables import FULL_ONLY_VARIABLES, SKINNY_VARIABLES


def cpi_for_year(year: int) -> float:
    return 1.0 + 0.025 * (year - 2012)


def build_finance_frame(
    dataset_type: str = "skinny",
    years=VALID_YEARS,
    states=STATE_CODES,
) -> pl.DataFrame:
    variables = SKINNY_VARIABLES
    if dataset_type == "full":
        variables = SKINNY_VARIABLES + FULL_ONLY_VARIABLES

    rows = [(year, state) for year in years for state in states]
    n = len(rows)
    data = {}
    for name, type_, *_ in variables:
        if name == "year":
            data[name] = [year for year, _ in rows]
        elif name == "state":
            data[name] = [state for _, state in rows]
        elif name == "ncesid":
            data[name] = [f"{state}00001" for _, state in rows]
        elif name == CPI_COLUMN:
            data[name] = [cpi_for_year(year) for year, _ in rows]
        elif type_ == "character":
            data[name] = ["x"] * n
        elif type_ == "integer":
            data[name] = [1] * n
        else:
            data[name] = [10.0 * (i + 1) for i in range(n)]
    return pl.DataFrame(data)


class FakeFetcher:
    """Stands in for ``fetch_artifact``; writes Parquet and records calls."""

    def __init__(self, frames: dict[str, pl.DataFrame] | None = None, error=None):
        self.frames = frames or {}
        self.error = error
        self.calls = []

    def __call__(self, url, dest_path, timeout=None, quiet=False):
        self.calls.append((url, dest_path))
        if self.error is not None:
            raise self.error
        dataset_type = next(dt for dt in DATASET_TYPES if get_artifact_url(dt) == url)
        frame = self.frames.get(dataset_type)
        if frame is None:
            frame = build_finance_frame(dataset_type)
        frame.write_parquet(dest_path)
        return dest_path


@pytest.fixture
def make_frame():
    return build_finance_frame


@pytest.fixture
def cache(tmp_path) -> CacheManager:
    return CacheManager(tmp_path / "cache")


@pytest.fixture
def fake_fetch(monkeypatch) -> FakeFetcher:
    fetcher = FakeFetcher()
    monkeypatch.setattr(query, "fetch_artifact", fetcher)
    return fetcher
