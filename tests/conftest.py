"""Pytest configuration for test isolation.

The CLI and ``LedgerStore()`` default to ``$PFR_HOME/ledger.json`` (falling
back to ``~/.pfr``). To keep tests hermetic we point ``PFR_HOME`` at a per-test
temporary directory and reset the package logging configuration afterwards,
since ``configure_logging`` binds its handler to whatever ``sys.stderr`` was
current when the CLI first ran.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path

import pytest

import pfr.logging_setup as logging_setup
from pfr import Frequency, Kind, LedgerStore, Transaction


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    data_dir = tmp_path / "pfr-home"
    data_dir.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("PFR_HOME", os.fspath(data_dir))
    monkeypatch.delenv("PFR_LOG_LEVEL", raising=False)
    # .env lookup is relative to CWD; keep it inside the sandbox too.
    monkeypatch.chdir(tmp_path)
    return data_dir


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("pfr")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False


@pytest.fixture
def store(_isolate_data_dir: Path) -> LedgerStore:
    return LedgerStore(_isolate_data_dir / "ledger.json")


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """The canonical four-line ledger used across report tests."""

    return [
        Transaction(Kind.INCOME, Frequency.MONTHLY, "work", Decimal("800")),
        Transaction(
            Kind.EXPENSE,
            Frequency.WEEKLY,
            "petrol",
            Decimal("60"),
            category="car",
            account="direct debit",
        ),
        Transaction(Kind.EXPENSE, Frequency.WEEKLY, "food", Decimal("40"), account="direct debit"),
        Transaction(
            Kind.EXPENSE,
            Frequency.MONTHLY,
            "car insurance",
            Decimal("20"),
            category="car",
            account="automatic",
        ),
    ]
