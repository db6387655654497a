"""Tests for :func:`edfin_data_manager.get_finance_data`."""

import logging
import os
import time

import polars as pl
import pytest
import requests

from edfin_data_manager import InvalidParameterError, SchemaMismatchError, get_finance_data
from edfin_data_manager.core import query
from edfin_data_manager.core.config import STATE_CODES, get_artifact_url, get_cache_name

from conftest import FakeFetcher


def _years(df):
    return set(df["year"].to_list())


def _states(df):
    return set(df["state"].to_list())


@pytest.mark.parametrize("year", range(2012, 2023))
def test_single_year_returns_only_that_year(cache, fake_fetch, year):
    df = get_finance_data(yr=str(year), cache=cache, quiet=True)
    assert _years(df) == {year}
    assert df.height == len(STATE_CODES)


@pytest.mark.parametrize("spec, expected", [("2020:2022", {2020, 2021, 2022}), ("2012:2013", {2012, 2013}), ("2016:2016", {2016})])
def test_year_range_returns_inclusive_range(cache, fake_fetch, spec, expected):
    df = get_finance_data(yr=spec, cache=cache, quiet=True)
    assert _years(df) == expected


def test_year_range_intersects_available_years(cache, monkeypatch, make_frame):
    fetcher = FakeFetcher({"skinny": make_frame(years=[2014, 2016, 2018])})
    monkeypatch.setattr(query, "fetch_artifact", fetcher)

    df = get_finance_data(yr="2015:2018", cache=cache, quiet=True)

    assert _years(df) == {2016, 2018}


def test_all_years_does_not_filter(cache, fake_fetch):
    df = get_finance_data(yr="all", cache=cache, quiet=True)
    assert _years(df) == set(range(2012, 2023))
    assert df.height == 11 * len(STATE_CODES)


def test_geography_filter(cache, fake_fetch):
    df = get_finance_data(yr="all", geo="IN,KY,OH,TN", cache=cache, quiet=True)
    assert _states(df) == {"IN", "KY", "OH", "TN"}

    df_all = get_finance_data(yr="2022", geo="all", cache=cache, quiet=True)
    assert _states(df_all) == set(STATE_CODES)


def test_ky_tn_2020_2022_scenario(cache, fake_fetch, make_frame):
    df = get_finance_data(yr="2020:2022", geo="KY,TN", cache=cache, quiet=True)

    source = make_frame()
    expected = source.filter(
        pl.col("year").is_in([2020, 2021, 2022]) & pl.col("state").is_in(["KY", "TN"])
    )
    assert _years(df) == {2020, 2021, 2022}
    assert _states(df) == {"KY", "TN"}
    assert df.height == expected.height == 6


@pytest.mark.parametrize(
    "kwargs",
    [
        {"yr": "2030"},
        {"yr": "abc"},
        {"yr": "2022:2012"},
        {"yr": "2012:2015:2018"},
        {"geo": "ZZ"},
        {"dataset_type": "wide"},
        {"cpi_adj": "2040"},
        {"cpi_adj": "latest"},
    ],
)
def test_invalid_parameters_fail_before_any_io(cache, fake_fetch, kwargs):
    with pytest.raises(InvalidParameterError):
        get_finance_data(cache=cache, **kwargs)
    assert fake_fetch.calls == []
    assert not cache.root.exists()


def test_invalid_state_error_names_code(cache, fake_fetch):
    with pytest.raises(InvalidParameterError, match="ZZ"):
        get_finance_data(geo="KY,ZZ", cache=cache)


def test_second_call_uses_cache(cache, fake_fetch):
    get_finance_data(yr="2022", cache=cache, quiet=True)
    get_finance_data(yr="2021", cache=cache, quiet=True)
    assert len(fake_fetch.calls) == 1


def test_refresh_forces_download(cache, fake_fetch):
    get_finance_data(cache=cache, quiet=True)
    get_finance_data(cache=cache, quiet=True, refresh=True)
    assert len(fake_fetch.calls) == 2


def test_stale_cache_is_downloaded_again(cache, fake_fetch):
    get_finance_data(cache=cache, quiet=True)
    then = time.time() - 31 * 24 * 60 * 60
    os.utime(cache.resolve(get_cache_name("skinny")), (then, then))

    get_finance_data(cache=cache, quiet=True)

    assert len(fake_fetch.calls) == 2


def test_each_dataset_type_has_its_own_cache_entry(cache, fake_fetch):
    get_finance_data(cache=cache, quiet=True)
    get_finance_data(dataset_type="full", cache=cache, quiet=True)

    urls = [url for url, _ in fake_fetch.calls]
    assert urls == [get_artifact_url("skinny"), get_artifact_url("full")]
    assert cache.resolve(get_cache_name("skinny")).exists()
    assert cache.resolve(get_cache_name("full")).exists()


def test_full_dataset_has_more_columns(cache, fake_fetch):
    skinny = get_finance_data(cache=cache, quiet=True)
    full = get_finance_data(dataset_type="full", cache=cache, quiet=True)
    assert skinny.width == 41
    assert full.width == 89
    assert set(skinny.columns) < set(full.columns)


def test_failed_refresh_propagates_and_keeps_cache(cache, monkeypatch):
    good = FakeFetcher()
    monkeypatch.setattr(query, "fetch_artifact", good)
    get_finance_data(cache=cache, quiet=True)
    cached = cache.resolve(get_cache_name("skinny"))
    before = cached.read_bytes()

    failing = FakeFetcher(error=requests.ConnectionError("unreachable"))
    monkeypatch.setattr(query, "fetch_artifact", failing)
    with pytest.raises(requests.ConnectionError):
        get_finance_data(cache=cache, quiet=True, refresh=True)

    assert cached.read_bytes() == before


def test_missing_columns_raise_schema_error(cache, monkeypatch, make_frame):
    fetcher = FakeFetcher({"skinny": make_frame().drop("mhi", "enroll")})
    monkeypatch.setattr(query, "fetch_artifact", fetcher)

    with pytest.raises(SchemaMismatchError) as excinfo:
        get_finance_data(cache=cache, quiet=True)

    assert excinfo.value.missing == ["enroll", "mhi"]


def test_notices_are_logged_unless_quiet(cache, fake_fetch, caplog):
    with caplog.at_level(logging.INFO, logger="edfin_data_manager"):
        get_finance_data(cache=cache)
        get_finance_data(cache=cache)
    messages = [record.getMessage() for record in caplog.records]
    assert "Downloading education finance data..." in messages
    assert "Download complete." in messages
    assert any(message.startswith("Using cached data.") for message in messages)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="edfin_data_manager"):
        get_finance_data(cache=cache, quiet=True)
    assert caplog.records == []
