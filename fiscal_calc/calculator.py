"""Fiscal year calculation on the October 1 boundary.

A fiscal year runs from October 1 of calendar year N through September 30
of calendar year N+1 and is labeled N+1:
    - January through September: the calendar year is the fiscal year
    - October through December: the next calendar year is the fiscal year

The earliest representable date (``datetime.min``) is reserved as an
"unset" marker and maps to fiscal year 0. Callers that model a missing
date should prefer ``None`` at the call site; the sentinel branch exists
for values that arrive already defaulted to the minimum.

Example:
    October 15, 2025 -> FY2026 (FY26)
    September 30, 2025 -> FY2025 (FY25)
    0001-01-01 00:00:00 -> 0
"""

import logging
from datetime import date, datetime

logger = logging.getLogger(__name__)

FISCAL_YEAR_START_MONTH: int = 10
"""Calendar month (October) on which a new fiscal year begins."""

MIN_DATE: datetime = datetime.min
"""Sentinel date (0001-01-01 00:00:00) that maps to fiscal year 0."""

MIN_FISCAL_YEAR: int = 1
MAX_FISCAL_YEAR: int = date.max.year + 1


class FiscalYearRangeError(ValueError):
    """Raised when a fiscal year falls outside the representable range.

    Attributes:
        fiscal_year: The rejected fiscal year value.
    """

    def __init__(self, fiscal_year: int):
        self.fiscal_year = fiscal_year
        super().__init__(
            f"Fiscal year {fiscal_year} is outside the supported range "
            f"[{MIN_FISCAL_YEAR}, {MAX_FISCAL_YEAR}]"
        )


def is_min_date(value: date) -> bool:
    """Return True if ``value`` is the sentinel minimum date.

    Only calendar and clock fields are compared. Any ``tzinfo`` is
    ignored, so ``datetime.min`` tagged as UTC (or any other offset) still
    counts. A plain ``date`` has no clock fields and matches on
    0001-01-01 alone.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == MIN_DATE
    return value == MIN_DATE.date()


def compute_fiscal_year(value: date) -> int:
    """Compute the fiscal year for a date.

    Time of day, day of month and time zone never affect the result,
    except through the exact sentinel check.

    Args:
        value: A ``date`` or ``datetime`` (naive or aware).

    Returns:
        0 for the sentinel minimum date, otherwise the calendar year for
        January-September and the calendar year plus one for
        October-December.
    """
    if is_min_date(value):
        return 0
    if value.month < FISCAL_YEAR_START_MONTH:
        return value.year
    return value.year + 1


def fiscal_year_bounds(fiscal_year: int) -> tuple[date, date]:
    """Return the first and last calendar day of a fiscal year.

    FY1 would start in year 0 and FY10000 would end in year 10000; both
    are clamped to ``date.min`` / ``date.max``.

    Raises:
        FiscalYearRangeError: If ``fiscal_year`` is not in [1, 10000].
            The sentinel result 0 is rejected; it is not a fiscal period.
    """
    if not MIN_FISCAL_YEAR <= fiscal_year <= MAX_FISCAL_YEAR:
        raise FiscalYearRangeError(fiscal_year)

    start_year = fiscal_year - 1
    if start_year < date.min.year:
        logger.debug("FY%d start clamped to %s", fiscal_year, date.min)
        start = date.min
    else:
        start = date(start_year, FISCAL_YEAR_START_MONTH, 1)

    if fiscal_year > date.max.year:
        logger.debug("FY%d end clamped to %s", fiscal_year, date.max)
        end = date.max
    else:
        end = date(fiscal_year, FISCAL_YEAR_START_MONTH - 1, 30)

    return start, end


def fiscal_year_short(fiscal_year: int) -> str:
    """Short label, e.g. 2026 -> "FY26", 2005 -> "FY05"."""
    return f"FY{fiscal_year % 100:02d}"


def fiscal_year_long(fiscal_year: int) -> str:
    """Long label, e.g. 2026 -> "FY2026"."""
    return f"FY{fiscal_year}"
