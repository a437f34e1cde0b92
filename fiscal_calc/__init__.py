"""fiscal-calc: October-to-September fiscal year calculation."""

from fiscal_calc.calculator import (
    FISCAL_YEAR_START_MONTH,
    MIN_DATE,
    FiscalYearRangeError,
    compute_fiscal_year,
    fiscal_year_bounds,
    fiscal_year_long,
    fiscal_year_short,
    is_min_date,
)

__all__ = [
    "FISCAL_YEAR_START_MONTH",
    "MIN_DATE",
    "FiscalYearRangeError",
    "compute_fiscal_year",
    "fiscal_year_bounds",
    "fiscal_year_long",
    "fiscal_year_short",
    "is_min_date",
]
