"""Pydantic v2 validation models for fiscal-calc inputs and outputs.

The calculator itself assumes it always receives a valid date. These
models are the construction layer in front of it: raw strings from the
command line are parsed and calendar-checked here, so schema violations
surface as ``ValidationError`` before any fiscal year is computed.

Models:
- FiscalYearQuery -> one date (string or date object) to resolve
- FiscalYearResult -> resolved fiscal year with label and bounds
- FiscalYearRange -> inclusive span of fiscal years
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from fiscal_calc.calculator import (
    MAX_FISCAL_YEAR,
    MIN_FISCAL_YEAR,
    compute_fiscal_year,
)


# Extended ISO-8601 subset that datetime.fromisoformat parses identically on
# every supported Python. Fractions are 3 or 6 digits; offsets need a time.
ISO_MOMENT_RE = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}"
    r"(?:T[0-9]{2}:[0-9]{2}"
    r"(?::[0-9]{2}(?:\.[0-9]{3}|\.[0-9]{6})?)?"
    r"(?:Z|[+-][0-9]{2}:[0-9]{2})?)?"
)


# ── Query ──

class FiscalYearQuery(BaseModel):
    """A single date to resolve to a fiscal year.

    Accepts ``date``/``datetime`` objects or ISO-8601 strings. A bare
    ``date`` is promoted to midnight of that day. Time zone offsets are
    kept on the value but never converted.
    """

    moment: datetime = Field(
        ...,
        description="Date or datetime to resolve (ISO-8601 when given as text)",
        examples=["2023-10-01", "2024-02-29T13:45:00", "0001-01-01T00:00:00Z"],
    )

    @field_validator("moment", mode="before")
    @classmethod
    def parse_moment(cls, v: object) -> datetime:
        if isinstance(v, datetime):
            return v
        if isinstance(v, date):
            return datetime(v.year, v.month, v.day)
        if isinstance(v, str):
            text = v.strip()
            if not text:
                raise ValueError("Date string is empty")
            if not ISO_MOMENT_RE.fullmatch(text):
                raise ValueError(
                    f"Invalid ISO date '{v}': expected YYYY-MM-DD or "
                    f"YYYY-MM-DDTHH:MM[:SS[.fff|.ffffff]][Z|+HH:MM]"
                )
            # fromisoformat only accepts a trailing "Z" from Python 3.11 on
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError as exc:
                raise ValueError(f"Invalid ISO date '{v}': {exc}") from exc
        raise ValueError(
            f"Expected a date, datetime or ISO-8601 string, got {type(v).__name__}"
        )

    @property
    def fiscal_year(self) -> int:
        """Fiscal year of ``moment`` (0 for the sentinel minimum date)."""
        return compute_fiscal_year(self.moment)


# ── Result ──

class FiscalYearResult(BaseModel):
    """Resolved fiscal year for one input.

    ``label``, ``start`` and ``end`` are None when the input was the
    sentinel minimum date, which has no fiscal period.
    """

    input: str = Field(..., description="Input exactly as supplied")
    fiscal_year: int = Field(
        ...,
        ge=0,
        le=MAX_FISCAL_YEAR,
        description="Fiscal year, or 0 for the sentinel minimum date",
        examples=[2024, 0],
    )
    label: Optional[str] = Field(
        default=None,
        description="Display label (e.g., FY24 or FY2024)",
    )
    start: Optional[date] = Field(
        default=None,
        description="First day of the fiscal year",
    )
    end: Optional[date] = Field(
        default=None,
        description="Last day of the fiscal year",
    )


# ── Range ──

class FiscalYearRange(BaseModel):
    """Inclusive range of fiscal years."""

    start: int = Field(
        ...,
        ge=MIN_FISCAL_YEAR,
        le=MAX_FISCAL_YEAR,
        description="First fiscal year (e.g., 2022)",
    )
    end: int = Field(
        ...,
        ge=MIN_FISCAL_YEAR,
        le=MAX_FISCAL_YEAR,
        description="Last fiscal year (e.g., 2026)",
    )

    @model_validator(mode="after")
    def validate_order(self) -> "FiscalYearRange":
        if self.start > self.end:
            raise ValueError(
                f"start ({self.start}) must not be after end ({self.end})"
            )
        return self

    @property
    def years(self) -> list[int]:
        """Every fiscal year in the range, ascending."""
        return list(range(self.start, self.end + 1))
