"""Tests for artifact loading and export utilities."""

import gzip

import pandas as pd
import polars as pl
import pytest
import pyreadr

from edfin_data_manager.utils import (
    check_dataset_schema,
    detect_artifact_format,
    export_finance_data,
    missing_columns,
    read_artifact,
)
from edfin_data_manager import SchemaMismatchError, list_variables
from edfin_data_manager.core.exceptions import ArtifactFormatError


def test_detect_artifact_format(tmp_path, make_frame):
    parquet_file = tmp_path / "data.rds"
    make_frame(years=[2022], states=["KY"]).write_parquet(parquet_file)
    assert detect_artifact_format(parquet_file) == "parquet"

    rds_file = tmp_path / "other.rds"
    with gzip.open(rds_file, "wb") as f:
        f.write(b"X\n")
    assert detect_artifact_format(rds_file) == "rds"


def test_read_artifact_parquet(tmp_path, make_frame):
    frame = make_frame(years=[2021, 2022], states=["KY", "TN"])
    path = tmp_path / "data.rds"
    frame.write_parquet(path)

    result = read_artifact(path)

    assert result.equals(frame)


def test_read_artifact_truncated_parquet(tmp_path, make_frame):
    path = tmp_path / "data.rds"
    make_frame(years=[2022], states=["KY"]).write_parquet(path)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) // 2])

    with pytest.raises(ArtifactFormatError, match="Could not read"):
        read_artifact(path)


def test_read_artifact_rds(tmp_path):
    pdf = pd.DataFrame(
        {
            "year": [2021.0, 2022.0],
            "state": ["KY", "TN"],
            "rev_total": [100.5, 200.25],
        }
    )
    path = tmp_path / "data.rds"
    pyreadr.write_rds(str(path), pdf)

    result = read_artifact(path)

    assert isinstance(result, pl.DataFrame)
    assert result["state"].to_list() == ["KY", "TN"]
    assert result["rev_total"].to_list() == [100.5, 200.25]


def test_check_dataset_schema(make_frame):
    frame = make_frame(years=[2022], states=["KY"])
    assert check_dataset_schema(frame, "skinny") is frame
    assert missing_columns(frame, "skinny") == []

    with pytest.raises(SchemaMismatchError) as excinfo:
        check_dataset_schema(frame, "full")
    assert len(excinfo.value.missing) == 48
    assert "exp_emp_salary" in str(excinfo.value)


def test_export_parquet_and_csv(tmp_path, make_frame):
    frame = make_frame(years=[2022], states=["KY", "TN"])

    parquet_file = export_finance_data(frame, tmp_path / "out" / "data.parquet")
    assert pl.read_parquet(parquet_file).equals(frame)

    csv_file = export_finance_data(frame, tmp_path / "data.csv")
    assert pl.read_csv(csv_file).height == 2


def test_export_stata_with_labels(tmp_path):
    variables = pl.DataFrame(
        {
            "year": [2022, 2022],
            "state": ["KY", "TN"],
            "rev_total": [100.0, 200.0],
            "cpi_adj_index": [1.0, 1.0],
        }
    )
    path = export_finance_data(variables, tmp_path / "data.dta")

    with pd.read_stata(path, iterator=True) as reader:
        labels = reader.variable_labels()
    assert labels["rev_total"] == "Total adjusted revenue (all sources)"
    assert labels["cpi_adj_index"].startswith("CPI adjustment index")
    assert pd.read_stata(path)["state"].tolist() == ["KY", "TN"]


def test_export_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported export format"):
        export_finance_data(list_variables(), tmp_path / "vars.xlsx")
