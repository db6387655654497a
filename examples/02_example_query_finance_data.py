"""
02_example_query_finance_data.py
Kentucky and Tennessee districts, 2020-2022, in 2022 dollars.
"""

import polars as pl

from edfin_data_manager import get_finance_data

df = get_finance_data(yr="2020:2022", geo="KY,TN", cpi_adj="2022")

print(f"Rows: {df.height}, columns: {df.width}")

# Per-pupil current spending by state and year
summary = (
    df.group_by("state", "year")
    .agg(
        pl.col("exp_cur_total").sum() / pl.col("enroll").sum(),
        pl.col("cpi_adj_index").first(),
    )
    .rename({"exp_cur_total": "exp_cur_pp"})
    .sort("state", "year")
)
print(summary)
