"""JSON ledger persistence.

A :class:`LedgerStore` owns one ledger file and hands out ordered
:class:`~pfr.models.Transaction` lists. It is the only place that knows about
the on-disk format; the report engine receives plain transaction sequences.

File shape (validated by :class:`~pfr.models.LedgerFile`)::

    {"schema_version": 1,
     "transactions": [{"kind": "expense", "frequency": "weekly",
                       "name": "petrol", "amount": "60",
                       "category": "car", "account": "direct debit"}]}

Atomicity: writes target ``<file>.tmp`` first and then ``os.replace`` into
place.
"""

from __future__ import annotations

import contextlib
import json
import os
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from .config import default_ledger_path
from .errors import (
    InvalidTransaction,
    LedgerCorrupt,
    LedgerError,
    LedgerExists,
    LedgerNotFound,
    NameIsAlreadyTaken,
)
from .logging_setup import get_logger
from .models import LedgerEntry, LedgerFile, Transaction

_logger = get_logger("pfr.storage")


def read_ledger_file(path: Path) -> list[Transaction]:
    """Parse and validate a ledger file, returning transactions in file order.

    Raises ``LedgerNotFound`` when ``path`` is absent and ``LedgerCorrupt``
    when it cannot be decoded or does not match the schema.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise LedgerNotFound(path) from exc
    except UnicodeDecodeError as exc:
        raise LedgerCorrupt(path, "not valid UTF-8") from exc
    except OSError as exc:
        raise LedgerError(f"could not read {path}: {exc}") from exc

    try:
        parsed = LedgerFile.model_validate_json(text)
        return [entry.to_transaction() for entry in parsed.transactions]
    except ValidationError as exc:
        _logger.warning("ledger:invalid path=%s errors=%d", os.fspath(path), exc.error_count())
        raise LedgerCorrupt(path, _summarize(exc)) from exc
    except InvalidTransaction as exc:
        _logger.warning("ledger:invalid_entry path=%s", os.fspath(path))
        raise LedgerCorrupt(path, str(exc)) from exc


def write_ledger_file(path: Path, transactions: Iterable[Transaction]) -> None:
    """Write ``transactions`` to ``path`` atomically, creating parent dirs."""

    doc = LedgerFile(transactions=[LedgerEntry.from_transaction(tx) for tx in transactions])
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(
            json.dumps(doc.model_dump(mode="json"), ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
        os.replace(tmp, path)
    except OSError as exc:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()
        raise LedgerError(f"could not write {path}: {exc}") from exc


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
    return f"{loc}: {first.get('msg', 'invalid')}"


class LedgerStore:
    """The current ledger, bound to a file path.

    Pass a store (not a path or a global) to anything that needs the ledger;
    tests build one over a temporary directory.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path).expanduser() if path is not None else default_ledger_path()

    def __repr__(self) -> str:  # pragma: no cover - trivial repr
        return f"LedgerStore(path={os.fspath(self.path)!r})"

    def exists(self) -> bool:
        return self.path.is_file()

    def init(self, *, overwrite: bool = False) -> None:
        """Create an empty ledger. Refuses to replace one unless ``overwrite``."""

        if self.exists() and not overwrite:
            raise LedgerExists(self.path)
        write_ledger_file(self.path, [])
        _logger.info("ledger:init path=%s", os.fspath(self.path))

    def load(self) -> list[Transaction]:
        transactions = read_ledger_file(self.path)
        _logger.debug("ledger:load path=%s count=%d", os.fspath(self.path), len(transactions))
        return transactions

    def save(self, transactions: Iterable[Transaction]) -> None:
        items = list(transactions)
        write_ledger_file(self.path, items)
        _logger.debug("ledger:save path=%s count=%d", os.fspath(self.path), len(items))

    def add(self, transaction: Transaction) -> None:
        """Append ``transaction``; names must be unique within a ledger."""

        transactions = self.load()
        if any(tx.name == transaction.name for tx in transactions):
            raise NameIsAlreadyTaken(transaction.name)
        transactions.append(transaction)
        self.save(transactions)
        _logger.info(
            "ledger:add name=%s kind=%s frequency=%s",
            transaction.name,
            transaction.kind.value,
            transaction.frequency.value,
        )


__all__ = ["LedgerStore", "read_ledger_file", "write_ledger_file"]
