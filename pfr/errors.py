"""Error kinds raised by ``pfr``.

Two families exist:

- ``InvalidTransaction`` and its subclasses are raised when a
  :class:`~pfr.models.Transaction` is constructed from bad input. They also
  derive from ``ValueError`` so callers that only care about "bad value" can
  catch that.
- ``LedgerError`` and its subclasses describe failures of the on-disk ledger
  and its snapshots.

The report engine itself (normalize/aggregate/render) raises nothing of its
own; it is total over well-formed transactions.
"""

from __future__ import annotations


class PfrError(Exception):
    """Base class for every error surfaced to the CLI user."""


# ---------------------------------------------------------------------------
# Construction-time errors
# ---------------------------------------------------------------------------


class InvalidTransaction(PfrError, ValueError):
    pass


class InvalidKind(InvalidTransaction):
    def __init__(self, raw: object) -> None:
        super().__init__(f"unknown transaction kind {raw!r}; expected 'income' or 'expense'")
        self.raw = raw


class InvalidFrequency(InvalidTransaction):
    def __init__(self, raw: object) -> None:
        super().__init__(f"unknown frequency {raw!r}; expected 'weekly' or 'monthly'")
        self.raw = raw


class MalformedAmount(InvalidTransaction):
    def __init__(self, raw: object, reason: str = "must be a non-negative number") -> None:
        super().__init__(f"invalid amount {raw!r}: {reason}")
        self.raw = raw


# ---------------------------------------------------------------------------
# Storage errors
# ---------------------------------------------------------------------------


class LedgerError(PfrError):
    pass


class LedgerNotFound(LedgerError):
    def __init__(self, path: object) -> None:
        super().__init__(f"no ledger at {path}; run 'pfr init' first")
        self.path = path


class LedgerExists(LedgerError):
    def __init__(self, path: object) -> None:
        super().__init__(f"a ledger already exists at {path}")
        self.path = path


class LedgerCorrupt(LedgerError):
    def __init__(self, path: object, detail: str) -> None:
        super().__init__(f"could not load ledger from {path}: {detail}")
        self.path = path


class NameIsAlreadyTaken(LedgerError):
    def __init__(self, name: str) -> None:
        super().__init__(f"a transaction called {name!r} is already present in the ledger")
        self.name = name


class SnapshotNotFound(LedgerError):
    def __init__(self, path: object) -> None:
        super().__init__(f"no snapshot at {path}")
        self.path = path


class InvalidSnapshotName(LedgerError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"invalid snapshot name {name!r}: use letters, digits, '.', '_' or '-' "
            "and start with a letter or digit"
        )
        self.name = name


__all__ = [
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
