"""Current fiscal year configuration for fiscal-calc.

Resolves today's fiscal year once at import time. Code that needs the
current fiscal year or its labels should import from this module instead
of hardcoding year strings.

Example:
    October 15, 2025 -> FY2026 (FY26)
    September 30, 2025 -> FY2025 (FY25)
"""

from datetime import date

from fiscal_calc.calculator import (
    compute_fiscal_year,
    fiscal_year_bounds,
    fiscal_year_long,
    fiscal_year_short,
)


def current_fiscal_year(today: date | None = None) -> int:
    """Compute the fiscal year for a given date.

    Args:
        today: Date to compute for. Defaults to today's date.

    Returns:
        Fiscal year as a 4-digit integer (e.g., 2026).
    """
    if today is None:
        today = date.today()
    return compute_fiscal_year(today)


FISCAL_YEAR_INT: int = current_fiscal_year()
"""Current fiscal year as integer (e.g., 2026)."""

FISCAL_YEAR_SHORT: str = fiscal_year_short(FISCAL_YEAR_INT)
"""Current fiscal year in short format (e.g., "FY26")."""

FISCAL_YEAR_LONG: str = fiscal_year_long(FISCAL_YEAR_INT)
"""Current fiscal year in long format (e.g., "FY2026")."""

_start, _end = fiscal_year_bounds(FISCAL_YEAR_INT)

FISCAL_YEAR_START: str = _start.isoformat()
"""First day of the current fiscal year (e.g., "2025-10-01")."""

FISCAL_YEAR_END: str = _end.isoformat()
"""Last day of the current fiscal year (e.g., "2026-09-30")."""
