"""Report aggregation.

:func:`aggregate` turns an ordered ledger snapshot into the row table, the
signed monthly total, the per-category expense breakdown and the per-account
coverage. It performs no I/O and does not sort, merge or deduplicate: every
transaction yields exactly one row, in ledger order, and bucket order is the
order in which each label is first seen.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from .models import (
    OTHER_BUCKET,
    AccountCoverage,
    CategoryBreakdown,
    Kind,
    Report,
    ReportRow,
    Transaction,
)
from .normalize import monthly_value


def build_row(tx: Transaction) -> ReportRow:
    value = monthly_value(tx)
    is_expense = tx.kind is Kind.EXPENSE
    return ReportRow(
        income_label=None if is_expense else tx.name,
        expense_label=tx.name if is_expense else None,
        monthly_value=value,
        category=tx.category,
        account=tx.account,
    )


def build_breakdown(rows: Iterable[ReportRow]) -> CategoryBreakdown:
    breakdown: CategoryBreakdown = {}
    for row in rows:
        if row.kind is not Kind.EXPENSE:
            continue
        label = row.category or OTHER_BUCKET
        breakdown[label] = breakdown.get(label, Decimal(0)) + row.magnitude
    return breakdown


def build_coverage(rows: Iterable[ReportRow]) -> AccountCoverage:
    accounts: dict[str, Decimal] = {}
    unallocated = Decimal(0)
    for row in rows:
        if row.kind is not Kind.EXPENSE:
            continue
        if row.account:
            accounts[row.account] = accounts.get(row.account, Decimal(0)) + row.magnitude
        else:
            unallocated += row.magnitude
    return AccountCoverage(accounts=accounts, unallocated=unallocated)


def aggregate(transactions: Iterable[Transaction]) -> Report:
    """Aggregate a ledger snapshot into a :class:`~pfr.models.Report`.

    The result unpacks as ``rows, total, breakdown, coverage``.
    """

    rows = [build_row(tx) for tx in transactions]
    total = sum((row.monthly_value for row in rows), Decimal(0))
    return Report(
        rows=rows,
        total=total,
        breakdown=build_breakdown(rows),
        coverage=build_coverage(rows),
    )


__all__ = ["aggregate", "build_row", "build_breakdown", "build_coverage"]
