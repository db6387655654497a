"""
99_example_print_variables.py
Prints the variable registry for both dataset variants.
"""

import polars as pl

from edfin_data_manager import list_variables

for dataset_type in ["skinny", "full"]:
    variables = list_variables(dataset_type=dataset_type)
    print(f"{dataset_type} dataset: {variables.height} variables")
    print(variables.group_by("category").len().sort("category"))

print("Variables added after 2012:")
with pl.Config(tbl_rows=-1, fmt_str_lengths=80):
    print(
        list_variables("full")
        .filter(pl.col("first_yr_avail") > 2012)
        .select("name", "first_yr_avail", "description")
    )
