"""Pydantic v2 schema models for fiscal-calc input and output validation.

- FiscalYearQuery: date input parsing and calendar validation
- FiscalYearResult: resolved fiscal year with label and bounds
- FiscalYearRange: inclusive fiscal year span
"""

from fiscal_calc.schemas.models import (
    FiscalYearQuery,
    FiscalYearRange,
    FiscalYearResult,
)

__all__ = [
    "FiscalYearQuery",
    "FiscalYearRange",
    "FiscalYearResult",
]
