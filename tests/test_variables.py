"""Tests for the variable registry and state codes."""

import polars as pl
import pytest

from edfin_data_manager import (
    InvalidParameterError,
    get_states,
    get_valid_state_codes,
    list_variables,
)
from edfin_data_manager.schemas import CATEGORIES, currency_columns, dataset_columns


def test_list_variables_row_counts():
    assert list_variables().height == 41
    assert list_variables(dataset_type="skinny").height == 41
    assert list_variables(dataset_type="full").height == 89


def test_list_variables_columns_and_types():
    variables = list_variables("full")
    assert variables.columns == ["name", "type", "category", "source", "first_yr_avail", "description"]
    assert variables.schema["first_yr_avail"] == pl.Int64
    assert variables["name"].n_unique() == 89
    assert set(variables["type"].unique().to_list()) == {"character", "integer", "numeric"}
    assert set(variables["category"].unique().to_list()) == set(CATEGORIES)


def test_full_is_superset_of_skinny():
    skinny = set(list_variables("skinny")["name"].to_list())
    full = set(list_variables("full")["name"].to_list())
    assert skinny < full
    assert len(full - skinny) == 48


def test_full_expenditure_is_strict_superset():
    skinny = set(list_variables("skinny", category="expenditure")["name"].to_list())
    full = set(list_variables("full", category="expenditure")["name"].to_list())
    assert len(skinny) == 6
    assert len(full) == 54
    assert skinny < full


def test_unknown_category_returns_empty_table():
    variables = list_variables(category="sports")
    assert variables.height == 0
    assert variables.columns[0] == "name"


def test_invalid_dataset_type_raises():
    with pytest.raises(InvalidParameterError):
        list_variables(dataset_type="medium")


def test_registry_details():
    variables = list_variables("full")
    row = variables.filter(pl.col("name") == "exp_cur_resa").row(0, named=True)
    assert row["first_yr_avail"] == 2018
    assert row["source"] == "NCES F-33 Survey"

    cpi = variables.filter(pl.col("name") == "cpi_sy12").row(0, named=True)
    assert cpi["source"] == "BLS CPI-U"
    assert cpi["category"] == "economic"

    covid = variables.filter(pl.col("name").str.starts_with("exp_covid"))
    assert covid.height == 8
    assert set(covid["first_yr_avail"].to_list()) == {2020, 2021}


def test_dataset_columns_order():
    columns = dataset_columns("skinny")
    assert columns[:3] == ["ncesid", "year", "state"]
    assert columns[-1] == "lea_type_id"
    assert dataset_columns("full")[:41] == columns


def test_currency_columns_exclude_non_dollar_fields():
    skinny = currency_columns("skinny")
    assert len(skinny) == 20
    assert {"rev_total_unadj", "exp_cur_total", "rev_exp_pp_diff", "mhi", "mpv"} <= set(skinny)
    for col in ["cpi_sy12", "enroll", "ba_plus_pct", "stpov_pct", "year", "lea_type_id"]:
        assert col not in skinny

    full = currency_columns("full")
    assert len(full) == 68
    assert "exp_supp_ops_sal" in full


def test_valid_state_codes():
    codes = get_valid_state_codes()
    assert len(codes) == 51
    assert len(set(codes)) == 51
    assert codes[0] == "AL"
    assert codes[-1] == "DC"
    assert get_states() == codes


def test_valid_state_codes_returns_a_copy():
    codes = get_valid_state_codes()
    codes.append("ZZ")
    assert "ZZ" not in get_valid_state_codes()
