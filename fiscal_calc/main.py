"""fiscal-calc: command-line fiscal year lookup.

Usage:
    python -m fiscal_calc.main                          # Current fiscal year
    python -m fiscal_calc.main 2023-10-01               # FY for one date
    python -m fiscal_calc.main 2023-09-30 2023-10-01    # Several dates
    python -m fiscal_calc.main 2024-02-29 --bounds      # Include first/last day
    python -m fiscal_calc.main 2024-02-29 --label short # FY24 instead of 2024
    python -m fiscal_calc.main 2024-02-29 --json        # Machine-readable output
    python -m fiscal_calc.main --range 2022 2026        # FY2022..FY2026 with bounds
"""

import argparse
import json
import logging
import sys
from datetime import date

from pydantic import ValidationError

from fiscal_calc.calculator import (
    fiscal_year_bounds,
    fiscal_year_long,
    fiscal_year_short,
)
from fiscal_calc.schemas import FiscalYearQuery, FiscalYearRange, FiscalYearResult

logger = logging.getLogger(__name__)

LABELS = {
    "short": fiscal_year_short,
    "long": fiscal_year_long,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Resolve dates to October-September fiscal years.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("dates", nargs="*", metavar="DATE",
                        help="ISO-8601 date or datetime (default: today)")
    parser.add_argument("--bounds", action="store_true",
                        help="Show the first and last day of each fiscal year")
    parser.add_argument("--label", choices=sorted(LABELS),
                        help="Print a FY label instead of the bare year")
    parser.add_argument("--range", nargs=2, type=int, metavar=("START", "END"),
                        help="List fiscal years START..END with their first and last day")
    parser.add_argument("--json", action="store_true",
                        help="Emit results as a JSON list")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose logging")
    args = parser.parse_args(argv)
    if args.range and args.dates:
        parser.error("--range cannot be combined with DATE arguments")
    return args


def resolve(raw: str, label: str | None = None) -> FiscalYearResult:
    """Resolve one raw date string into a FiscalYearResult.

    Raises:
        ValidationError: If ``raw`` is not a valid ISO-8601 date.
    """
    query = FiscalYearQuery(moment=raw)
    fy = query.fiscal_year
    logger.debug("%s -> fiscal year %d", raw, fy)
    if fy == 0:
        return FiscalYearResult(input=raw, fiscal_year=0)

    start, end = fiscal_year_bounds(fy)
    return FiscalYearResult(
        input=raw,
        fiscal_year=fy,
        label=LABELS[label](fy) if label else None,
        start=start,
        end=end,
    )


def expand_range(start: int, end: int, label: str | None = None) -> list[FiscalYearResult]:
    """Build one result per fiscal year in START..END, inclusive.

    Raises:
        ValidationError: If the range is reversed or outside [1, 10000].
    """
    fy_range = FiscalYearRange(start=start, end=end)
    results = []
    for fy in fy_range.years:
        first, last = fiscal_year_bounds(fy)
        results.append(FiscalYearResult(
            input=str(fy),
            fiscal_year=fy,
            label=LABELS[label](fy) if label else None,
            start=first,
            end=last,
        ))
    logger.debug("Expanded FY%d..FY%d into %d fiscal years", start, end, len(results))
    return results


def format_result(result: FiscalYearResult, bounds: bool = False) -> str:
    """Render a result as one line of text."""
    value = result.label or str(result.fiscal_year)
    line = f"{result.input}\t{value}"
    if bounds and result.start is not None:
        line += f"\t{result.start.isoformat()}..{result.end.isoformat()}"
    return line


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.range:
        start, end = args.range
        try:
            results = expand_range(start, end, args.label)
        except ValidationError as exc:
            logger.warning("Rejected range %d..%d", start, end)
            print(f"Error: invalid fiscal year range {start}..{end}: {exc}", file=sys.stderr)
            return 1
    else:
        results = []
        for raw in args.dates or [date.today().isoformat()]:
            try:
                results.append(resolve(raw, args.label))
            except ValidationError as exc:
                logger.warning("Rejected input %r", raw)
                print(f"Error: invalid date '{raw}': {exc}", file=sys.stderr)
                return 1

    if args.json:
        print(json.dumps([r.model_dump(mode="json") for r in results], indent=2))
    else:
        for r in results:
            print(format_result(r, bounds=args.bounds or bool(args.range)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
