"""Public report API.

The report is a pure function of an ordered transaction sequence. Callers that
hold a :class:`~pfr.storage.LedgerStore` pass it explicitly to
:func:`generate_report`; nothing here reads ambient state.
"""

from __future__ import annotations

from collections.abc import Iterable

from .logging_setup import get_logger
from .models import Report, Transaction
from .render import render_report
from .report import aggregate
from .storage import LedgerStore

_logger = get_logger("pfr.api")


def build_report(transactions: Iterable[Transaction]) -> Report:
    return aggregate(transactions)


def report_text(transactions: Iterable[Transaction]) -> str:
    """Aggregate and render ``transactions`` in one step."""

    return render_report(aggregate(transactions))


def generate_report(store: LedgerStore) -> str:
    """Load the store's ledger snapshot and render its report.

    Storage errors (``LedgerNotFound``/``LedgerCorrupt``) propagate unchanged.
    """

    transactions = store.load()
    report = aggregate(transactions)
    _logger.debug(
        "report:generated rows=%d total=%s categories=%d accounts=%d",
        len(report.rows),
        report.total,
        len(report.breakdown),
        len(report.coverage.accounts),
    )
    return render_report(report)


__all__ = ["build_report", "report_text", "generate_report"]
