"""
Variable registry for the skinny and full finance datasets.

Each entry is ``(name, type, category, source, first_yr_avail, description)``.
The skinny dataset has the first 41 variables; the full dataset adds 48
detailed expenditure variables.
"""

import polars as pl

from ..core.config import CPI_COLUMN
from ..core.params import validate_dataset_type


F33 = "NCES F-33 Survey"
BLS = "BLS CPI-U"
ACS = "5-Year ACS Survey"
SAIPE = "Census Bureau SAIPE"
CCD = "NCES CCD Directory"

CATEGORIES = (
    "id",
    "time",
    "geographic",
    "demographic",
    "revenue",
    "expenditure",
    "economic",
    "governance",
)

# Categories holding dollar amounts; the CPI index itself is excluded below
CURRENCY_CATEGORIES = ("revenue", "expenditure", "economic")

SKINNY_VARIABLES = [
    # Identifiers and time
    ("ncesid", "character", "id", F33, 2012, "NCES district ID"),
    ("year", "integer", "time", F33, 2012, "School year (end year, e.g., 2022 = 2021-2022)"),
    ("state", "character", "geographic", F33, 2012, "State abbreviation"),
    ("dist_name", "character", "id", F33, 2012, "District name"),
    ("enroll", "numeric", "demographic", F33, 2012, "Total district enrollment (V33)"),
    # Revenue
    ("rev_total_pp", "numeric", "revenue", F33, 2012, "Total adjusted revenue per-pupil (all sources)"),
    ("rev_local_pp", "numeric", "revenue", F33, 2012, "Local adjusted revenue per-pupil"),
    ("rev_state_pp", "numeric", "revenue", F33, 2012, "State adjusted revenue per-pupil"),
    ("rev_fed_pp", "numeric", "revenue", F33, 2012, "Federal adjusted revenue per-pupil"),
    ("rev_total", "numeric", "revenue", F33, 2012, "Total adjusted revenue (all sources)"),
    ("rev_local", "numeric", "revenue", F33, 2012, "Total adjusted local revenue"),
    ("rev_state", "numeric", "revenue", F33, 2012, "Total adjusted state revenue"),
    ("rev_fed", "numeric", "revenue", F33, 2012, "Total adjusted federal revenue"),
    ("rev_total_unadj", "numeric", "revenue", F33, 2012, "Total raw revenue (TOTALREV)"),
    ("rev_local_unadj", "numeric", "revenue", F33, 2012, "Local raw revenue (TLOCREV)"),
    ("rev_state_unadj", "numeric", "revenue", F33, 2012, "State raw revenue (TSTEREV)"),
    ("rev_fed_unadj", "numeric", "revenue", F33, 2012, "Federal raw revenue (TFEDREV)"),
    # Current expenditure
    ("exp_cur_pp", "numeric", "expenditure", F33, 2016,
     "Current expenditure per-pupil (CE1 + CE2 (+ CE3 when available) divided by V33)"),
    ("rev_exp_pp_diff", "numeric", "expenditure", F33, 2016, "Revenue minus expenditure per-pupil"),
    ("exp_cur_st_loc", "numeric", "expenditure", F33, 2016, "Current expenditure from state/local sources (CE1)"),
    ("exp_cur_fed", "numeric", "expenditure", F33, 2016, "Current expenditure from federal sources (CE2)"),
    ("exp_cur_resa", "numeric", "expenditure", F33, 2018, "Current expenditure by RESA on behalf of LEAs (CE3)"),
    ("exp_cur_total", "numeric", "expenditure", F33, 2016,
     "Total current expenditure (CE1 + CE2 (+ CE3 when available))"),
    # Economic
    (CPI_COLUMN, "numeric", "economic", BLS, 2012,
     "Consumer Price Index (base year 2011-2012, calculated with HALF2 of first year "
     "and HALF 1 of second year in school year span)"),
    ("mhi", "numeric", "economic", ACS, 2012, "Median household income (B19013_001)"),
    ("mpv", "numeric", "economic", ACS, 2012, "Median property value (B25077_001)"),
    # Demographic
    ("adult_pop", "numeric", "demographic", ACS, 2012, "Adult population (B15003_001)"),
    ("ba_plus_pop", "numeric", "demographic", ACS, 2012,
     "Adults with bachelor's degree or higher (B15003_022 + B15003_023 + B15003_024 + B15003_025)"),
    ("ba_plus_pct", "numeric", "demographic", ACS, 2012, "Percent of adults with bachelor's degree or higher"),
    ("total_pop", "numeric", "demographic", SAIPE, 2012, "Total population"),
    ("student_pop", "numeric", "demographic", SAIPE, 2012, "Student-aged population (5-17)"),
    ("stpov_pop", "numeric", "demographic", SAIPE, 2012, "Student-aged population in poverty"),
    ("stpov_pct", "numeric", "demographic", SAIPE, 2012, "Percent of students in poverty"),
    # Geography and governance
    ("cong_dist", "character", "geographic", CCD, 2012,
     "Congressional district (Formatted as numeric state code with two-digit district "
     "code e.g., '2101' = KY-01)"),
    ("state_leaid", "character", "id", CCD, 2012, "State-assigned LEA ID"),
    ("county", "character", "geographic", CCD, 2012, "County name"),
    ("cbsa", "character", "geographic", CCD, 2012, "Core Based Statistical Area"),
    ("urbanicity", "character", "geographic", CCD, 2012,
     "Urbanicity (NCES categories condensed into City, Suburb, Town, Rural)"),
    ("schlev", "character", "governance", CCD, 2012, "LEA or school level"),
    ("lea_type", "character", "governance", CCD, 2012, "LEA type description"),
    ("lea_type_id", "integer", "governance", CCD, 2012, "LEA type numeric code"),
]

# (name, first_yr_avail, description); all numeric F-33 expenditure columns
_FULL_EXPENDITURE = [
    ("exp_emp_salary", 2012, "Total employee salaries (Z32)"),
    ("exp_emp_bene", 2012, "Total employee benefits (Z34)"),
    ("exp_textbooks", 2012, "Textbooks (V93)"),
    ("exp_utilities", 2015, "Utilities and energy services (V95)"),
    ("exp_tech_supp", 2015, "Technology-related supplies and purchased services (V02)"),
    ("exp_tech_equip", 2015, "Technology-related equipment (K14)"),
    ("exp_pay_private_sch", 2012, "Payments to private schools (V91)"),
    ("exp_pay_charter_sch", 2012, "Payments to charter schools (V92)"),
    ("exp_pay_other_lea", 2012, "Payments to other LEAs (Q11)"),
    ("exp_other_sys_pay", 2012, "Payments to other systems (V91 + V92 + Q11)"),
    ("exp_instr_total", 2012, "Instruction - Total (E13)"),
    ("exp_instr_sal", 2012, "Instruction - Salaries (Z33)"),
    ("exp_instr_bene", 2012, "Instruction - Benefits (V10)"),
    ("exp_supp_stu_total", 2012, "Support services, students - Total (E17)"),
    ("exp_supp_stu_sal", 2012, "Support services, students - Salaries (V11)"),
    ("exp_supp_stu_bene", 2012, "Support services, students - Benefits, (V12)"),
    ("exp_supp_instr_total", 2012, "Support services, instructional staff - Total (E07)"),
    ("exp_supp_instr_sal", 2012, "Support services, instructional staff - Salaries (V13)"),
    ("exp_supp_instr_bene", 2012, "Support services, instructional staff - Benefits (V14)"),
    ("exp_supp_gen_admin_total", 2012, "Support services, general administration - Total (E08)"),
    ("exp_supp_gen_admin_sal", 2012, "Support services, general administration - Salaries (V15)"),
    ("exp_supp_gen_admin_bene", 2012, "Support services, general administration - Benefits (V16)"),
    ("exp_supp_sch_admin_total", 2012, "Support services, school administration - Total (E09)"),
    ("exp_supp_sch_admin_sal", 2012, "Support services, school administration - Salaries (V17)"),
    ("exp_supp_sch_admin_bene", 2012, "Support services, school administration - Benefits (V18)"),
    ("exp_supp_ops_total", 2012, "Support services, operation and maintenance of plant - Total (V40)"),
    ("exp_supp_ops_sal", 2012, "Support services, operation and maintenance of plant - Salaries (V21)"),
    ("exp_supp_ops_bene", 2012, "Support services, operation and maintenance of plant - Benefits (V22)"),
    ("exp_supp_trans_total", 2012, "Support services, student transportation - Total (V45)"),
    ("exp_supp_trans_sal", 2012, "Support services, student transportation - Salaries (V23)"),
    ("exp_supp_trans_bene", 2012, "Support services, student transportation - Benefits (V24)"),
    ("exp_central_serv_total", 2012, "Business/central/other support services - Total (V90)"),
    ("exp_central_serv_sal", 2012, "Business/central/other support services - Salaries (V37)"),
    ("exp_central_serv_bene", 2012, "Business/central/other support services - Benefits (V38)"),
    ("exp_noninstr_food_total", 2012, "Food services - Total (E11)"),
    ("exp_noninstr_food_sal", 2012, "Food services - Salaries (V29)"),
    ("exp_noninstr_food_bene", 2012, "Food services - Benefits (V30)"),
    ("exp_noninstr_ent_ops_total", 2012, "Enterprise operations - Total (V60)"),
    ("exp_noninstr_ent_ops_bene", 2012, "Enterprise operations - Benefits (V32)"),
    ("exp_noninstr_other", 2012, "Other non-instructional services (V65)"),
    ("exp_covid_total", 2020, "COVID-19 Federal Assistance Funds - Total expenditures (AE1)"),
    ("exp_covid_instr", 2020, "COVID-19 Federal Assistance Funds - Instructional expenditures (AE2)"),
    ("exp_covid_supp", 2020, "COVID-19 Federal Assistance Funds - Support services expenditures (AE3)"),
    ("exp_covid_cap_out", 2020, "COVID-19 Federal Assistance Funds - Capital outlay expenditures (AE4)"),
    ("exp_covid_tech_supp", 2020,
     "COVID-19 Federal Assistance Funds - Technology-related supplies and purchased services "
     "expenditures (AE5)"),
    ("exp_covid_tech_equip", 2020,
     "COVID-19 Federal Assistance Funds - Technology-related equipment expenditures (AE6)"),
    ("exp_covid_supp_plant", 2021,
     "COVID-19 Federal Assistance Funds - Support services operation and maintenance of plant "
     "expenditures (AE7)"),
    ("exp_covid_food", 2021, "COVID-19 Federal Assistance Funds - Food services operations (AE8)"),
]

FULL_ONLY_VARIABLES = [
    (name, "numeric", "expenditure", F33, first_yr, description)
    for name, first_yr, description in _FULL_EXPENDITURE
]

VARIABLE_SCHEMA = {
    "name": pl.String,
    "type": pl.String,
    "category": pl.String,
    "source": pl.String,
    "first_yr_avail": pl.Int64,
    "description": pl.String,
}


def _variables_for(dataset_type: str) -> list[tuple]:
    if dataset_type == "skinny":
        return SKINNY_VARIABLES
    return SKINNY_VARIABLES + FULL_ONLY_VARIABLES


def list_variables(dataset_type: str = "skinny", category: str = "all") -> pl.DataFrame:
    """
    List the variables available in the education finance dataset.

    Parameters
    ----------
    dataset_type : {"skinny", "full"}, optional
        Dataset variant. The full dataset includes every skinny variable.
        Default is "skinny".
    category : str, optional
        Keep only variables in this category ("id", "time", "geographic",
        "demographic", "revenue", "expenditure", "economic", "governance"),
        or "all" (default). Unknown categories give an empty table.

    Returns
    -------
    pl.DataFrame
        Columns: name, type, category, source, first_yr_avail, description.

    Raises
    ------
    InvalidParameterError
        If ``dataset_type`` is not "skinny" or "full".

    Examples
    --------
    >>> list_variables().height
    41
    >>> list_variables("full", category="expenditure").height
    54
    """
    validate_dataset_type(dataset_type)
    variables = pl.DataFrame(
        _variables_for(dataset_type), schema=VARIABLE_SCHEMA, orient="row"
    )
    if category != "all":
        variables = variables.filter(pl.col("category") == category)
    return variables


def dataset_columns(dataset_type: str) -> list[str]:
    """Return the column names expected in a dataset variant, in order."""
    validate_dataset_type(dataset_type)
    return [entry[0] for entry in _variables_for(dataset_type)]


def currency_columns(dataset_type: str) -> list[str]:
    """Return the dollar-denominated columns of a dataset variant.

    These are the numeric revenue, expenditure and economic variables,
    without the CPI index itself.
    """
    validate_dataset_type(dataset_type)
    return [
        name
        for name, type_, category, *_ in _variables_for(dataset_type)
        if category in CURRENCY_CATEGORIES and type_ == "numeric" and name != CPI_COLUMN
    ]


__all__ = [
    "CATEGORIES",
    "SKINNY_VARIABLES",
    "FULL_ONLY_VARIABLES",
    "list_variables",
    "dataset_columns",
    "currency_columns",
]
