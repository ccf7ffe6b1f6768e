"""Fixed-width text rendering of an aggregated report.

Output is deterministic for a given input so reports can be diffed. Layout::

    INCOME               EXPENSE              MONTHLY   CATEGORY   ACCOUNT
    work                                        800.00
                         petrol               ( 256.80) car        direct debit
    ----------------------------------------------------------------------
    TOTAL:                                      352.00

    Breakdown:
    car           256.80

    Coverage:
       256.80 -> direct debit
         0.00 (unallocated)

Signed money occupies a 9-character field: a leading space stands in for the
sign of non-negative values, and negatives are shown as the magnitude wrapped
in parentheses. Trailing whitespace is stripped from every line.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from .models import AccountCoverage, CategoryBreakdown, Report, ReportRow

INCOME_WIDTH = 20
EXPENSE_WIDTH = 20
CATEGORY_WIDTH = 10
# Digits field inside the signed money column; the column adds two sign slots.
AMOUNT_WIDTH = 7
MONEY_WIDTH = AMOUNT_WIDTH + 2

_CENT = Decimal("0.01")


def _quantize(value: Decimal) -> Decimal:
    # abs() also folds a negated zero into a plain zero.
    return abs(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def _cell(text: str | None, width: int) -> str:
    # Pad and truncate; labels never wrap.
    return f"{text or '':<{width}.{width}}"


def format_money(value: Decimal) -> str:
    """Render a signed value: ``"  800.00 "`` or ``"( 171.20)"``."""

    digits = f"{_quantize(value):>{AMOUNT_WIDTH}.2f}"
    if value < 0:
        return f"({digits})"
    return f" {digits} "


def format_magnitude(value: Decimal) -> str:
    """Render an unsigned value right-aligned in the money column width."""

    return f"{_quantize(value):>{MONEY_WIDTH}.2f}"


def _line(*cells: str) -> str:
    return " ".join(cells).rstrip()


def _header() -> str:
    return _line(
        _cell("INCOME", INCOME_WIDTH),
        _cell("EXPENSE", EXPENSE_WIDTH),
        _cell("MONTHLY", MONEY_WIDTH),
        _cell("CATEGORY", CATEGORY_WIDTH),
        "ACCOUNT",
    )


def format_row(row: ReportRow) -> str:
    return _line(
        _cell(row.income_label, INCOME_WIDTH),
        _cell(row.expense_label, EXPENSE_WIDTH),
        format_money(row.monthly_value),
        _cell(row.category, CATEGORY_WIDTH),
        row.account or "",
    )


def _table_lines(rows: Iterable[ReportRow], total: Decimal) -> list[str]:
    header = _header()
    lines = [header]
    lines.extend(format_row(row) for row in rows)
    lines.append("-" * len(header))
    label_width = INCOME_WIDTH + 1 + EXPENSE_WIDTH
    lines.append(_line(f"{'TOTAL:':<{label_width}}", format_money(total)))
    return lines


def _breakdown_lines(breakdown: CategoryBreakdown) -> list[str]:
    lines = ["Breakdown:"]
    for label, value in breakdown.items():
        # Pad but do not truncate: distinct labels must stay distinct here.
        lines.append(_line(f"{label:<{CATEGORY_WIDTH}}", format_magnitude(value)))
    return lines


def _coverage_lines(coverage: AccountCoverage) -> list[str]:
    lines = ["Coverage:"]
    for account, value in coverage.accounts.items():
        lines.append(f"{format_magnitude(value)} -> {account}")
    lines.append(f"{format_magnitude(coverage.unallocated)} (unallocated)")
    return lines


def render(
    rows: Iterable[ReportRow],
    total: Decimal,
    breakdown: CategoryBreakdown,
    coverage: AccountCoverage,
) -> str:
    """Render the three report sections as a newline-terminated string."""

    sections = [
        _table_lines(rows, total),
        _breakdown_lines(breakdown),
        _coverage_lines(coverage),
    ]
    return "\n\n".join("\n".join(lines) for lines in sections) + "\n"


def render_report(report: Report) -> str:
    return render(report.rows, report.total, report.breakdown, report.coverage)


__all__ = [
    "format_money",
    "format_magnitude",
    "format_row",
    "render",
    "render_report",
]
