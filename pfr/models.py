"""Data models and type aliases for ``pfr``.

Three groups live here:

- The ledger record, :class:`Transaction`, plus its ``Kind`` and ``Frequency``
  tags. Transactions are validated on construction and never mutated.
- The derived report types produced by :func:`pfr.report.aggregate`
  (:class:`ReportRow`, :data:`CategoryBreakdown`, :class:`AccountCoverage`
  and the :class:`Report` tuple). None of these are persisted.
- Pydantic DTOs describing the JSON ledger file on disk.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import InvalidFrequency, InvalidKind, InvalidTransaction, MalformedAmount

# Presentation defaults applied at aggregation time only.
OTHER_BUCKET = "(other)"
UNALLOCATED_BUCKET = "(unallocated)"


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class Kind(enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, raw: str | Kind) -> Kind:
        if isinstance(raw, Kind):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        raise InvalidKind(raw)


class Frequency(enum.Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"

    @classmethod
    def parse(cls, raw: str | Frequency) -> Frequency:
        """Resolve a recurrence tag, case-insensitively.

        The short tags ``wkly`` and ``mthly`` written by older ledgers are
        accepted as aliases.
        """

        if isinstance(raw, Frequency):
            return raw
        if isinstance(raw, str):
            key = raw.strip().lower()
            found = _FREQUENCY_ALIASES.get(key)
            if found is not None:
                return found
        raise InvalidFrequency(raw)


_FREQUENCY_ALIASES: dict[str, Frequency] = {
    "weekly": Frequency.WEEKLY,
    "wkly": Frequency.WEEKLY,
    "monthly": Frequency.MONTHLY,
    "mthly": Frequency.MONTHLY,
}


# ---------------------------------------------------------------------------
# Ledger record
# ---------------------------------------------------------------------------


def _to_amount(raw: object) -> Decimal:
    # Booleans are ints; reject them explicitly.
    if isinstance(raw, bool):
        raise MalformedAmount(raw, "must be a number")
    if isinstance(raw, Decimal):
        d = raw
    elif isinstance(raw, int):
        d = Decimal(raw)
    elif isinstance(raw, float):
        d = Decimal(repr(raw))
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            raise MalformedAmount(raw, "amount is empty")
        try:
            d = Decimal(s)
        except InvalidOperation as exc:
            raise MalformedAmount(raw, "not a number") from exc
    else:
        raise MalformedAmount(raw, "must be a number")

    if not d.is_finite():
        raise MalformedAmount(raw, "must be finite")
    if d < 0:
        raise MalformedAmount(raw, "must not be negative")
    return d


@dataclass(frozen=True, slots=True)
class Transaction:
    """One recurring income or expense line of the ledger.

    ``amount`` is always a non-negative magnitude; the sign is implied by
    ``kind``. ``category`` and ``account`` are optional: ``None`` means the
    field was never given, while ``""`` means it was given empty. The report
    treats both as "uncategorized"/"unallocated".
    """

    kind: Kind
    frequency: Frequency
    name: str
    amount: Decimal
    category: str | None = None
    account: str | None = None

    def __post_init__(self) -> None:
        # Accept tag strings and plain numbers; store canonical values.
        object.__setattr__(self, "kind", Kind.parse(self.kind))
        object.__setattr__(self, "frequency", Frequency.parse(self.frequency))
        object.__setattr__(self, "amount", _to_amount(self.amount))

        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidTransaction("transaction name must be a non-empty string")
        for label in ("category", "account"):
            value = getattr(self, label)
            if value is not None and not isinstance(value, str):
                raise InvalidTransaction(f"transaction {label} must be a string when set")

    @classmethod
    def parse(
        cls,
        kind: str,
        frequency: str,
        name: str,
        amount: str,
        *,
        category: str | None = None,
        account: str | None = None,
    ) -> Transaction:
        """Build a transaction from raw user-supplied strings."""

        return cls(
            kind=Kind.parse(kind),
            frequency=Frequency.parse(frequency),
            name=name,
            amount=_to_amount(amount),
            category=category,
            account=account,
        )

    @property
    def is_expense(self) -> bool:
        return self.kind is Kind.EXPENSE


type Transactions = Sequence[Transaction]
"""An ordered ledger snapshot. Order is significant: it is the report order."""


# ---------------------------------------------------------------------------
# Derived report views
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ReportRow:
    """One table row, derived from exactly one transaction.

    Only one of ``income_label``/``expense_label`` is set. ``monthly_value``
    is signed: positive for income, negative (or zero) for expenses.
    """

    income_label: str | None
    expense_label: str | None
    monthly_value: Decimal
    category: str | None = None
    account: str | None = None

    @property
    def kind(self) -> Kind:
        return Kind.EXPENSE if self.expense_label is not None else Kind.INCOME

    @property
    def magnitude(self) -> Decimal:
        return abs(self.monthly_value)


type CategoryBreakdown = dict[str, Decimal]
"""Category label (or ``(other)``) to summed expense magnitude, first-seen order."""


@dataclass(frozen=True, slots=True)
class AccountCoverage:
    """Amount to set aside per account to fund all expenses charged to it.

    ``accounts`` keeps first-seen order. ``unallocated`` collects expenses
    with no account and is always present, even when zero.
    """

    accounts: dict[str, Decimal] = field(default_factory=dict)
    unallocated: Decimal = Decimal(0)

    @property
    def total(self) -> Decimal:
        return sum(self.accounts.values(), Decimal(0)) + self.unallocated

    def items(self) -> Iterator[tuple[str, Decimal]]:
        """Yield named buckets in first-seen order, then the unallocated bucket."""

        yield from self.accounts.items()
        yield UNALLOCATED_BUCKET, self.unallocated


class Report(NamedTuple):
    """The aggregator's output: rows plus the three derived views."""

    rows: list[ReportRow]
    """One row per transaction, in ledger order."""

    total: Decimal
    """Signed net monthly cash flow."""

    breakdown: CategoryBreakdown
    """Expense magnitude per category."""

    coverage: AccountCoverage
    """Expense magnitude per account."""


# ---------------------------------------------------------------------------
# DTOs for the JSON ledger file
# ---------------------------------------------------------------------------

# Bump only when the on-disk ledger JSON shape changes.
LEDGER_SCHEMA_VERSION: int = 1


class LedgerEntry(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Kind
    frequency: Frequency
    name: str
    amount: Decimal
    category: str | None = None
    account: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, v: object) -> object:
        return Kind.parse(v) if isinstance(v, str) else v

    @field_validator("frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, v: object) -> object:
        return Frequency.parse(v) if isinstance(v, str) else v

    @classmethod
    def from_transaction(cls, tx: Transaction) -> LedgerEntry:
        return cls(
            kind=tx.kind,
            frequency=tx.frequency,
            name=tx.name,
            amount=tx.amount,
            category=tx.category,
            account=tx.account,
        )

    def to_transaction(self) -> Transaction:
        return Transaction(
            kind=self.kind,
            frequency=self.frequency,
            name=self.name,
            amount=self.amount,
            category=self.category,
            account=self.account,
        )


class LedgerFile(BaseModel):
    """Top-level schema for the ledger JSON file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int = LEDGER_SCHEMA_VERSION
    transactions: list[LedgerEntry] = []

    @field_validator("schema_version")
    @classmethod
    def _known_version(cls, v: int) -> int:
        if v != LEDGER_SCHEMA_VERSION:
            raise ValueError(f"unsupported ledger schema_version {v}")
        return v
