"""Public interface for the ``pfr`` (personal finance reporter) package.

Symbol re-exports only; see the submodules for behavior.
"""

from .api import build_report, generate_report, report_text
from .errors import (
    InvalidFrequency,
    InvalidKind,
    InvalidSnapshotName,
    InvalidTransaction,
    LedgerCorrupt,
    LedgerError,
    LedgerExists,
    LedgerNotFound,
    MalformedAmount,
    NameIsAlreadyTaken,
    PfrError,
    SnapshotNotFound,
)
from .models import (
    OTHER_BUCKET,
    UNALLOCATED_BUCKET,
    AccountCoverage,
    CategoryBreakdown,
    Frequency,
    Kind,
    Report,
    ReportRow,
    Transaction,
    Transactions,
)
from .normalize import WEEKLY_MULTIPLIER, normalize
from .render import render
from .report import aggregate
from .storage import LedgerStore

__all__ = [
    # API
    "aggregate",
    "normalize",
    "render",
    "build_report",
    "report_text",
    "generate_report",
    "LedgerStore",
    "WEEKLY_MULTIPLIER",
    # Models / types
    "Kind",
    "Frequency",
    "Transaction",
    "Transactions",
    "ReportRow",
    "CategoryBreakdown",
    "AccountCoverage",
    "Report",
    "OTHER_BUCKET",
    "UNALLOCATED_BUCKET",
    # Errors
    "PfrError",
    "InvalidTransaction",
    "InvalidKind",
    "InvalidFrequency",
    "MalformedAmount",
    "LedgerError",
    "LedgerNotFound",
    "LedgerExists",
    "LedgerCorrupt",
    "NameIsAlreadyTaken",
    "SnapshotNotFound",
    "InvalidSnapshotName",
]
