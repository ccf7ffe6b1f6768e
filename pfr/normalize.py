"""Frequency normalization to a nominal monthly basis.

A month is a fixed nominal length, not a calendar month. The weekly multiplier
is the literal ``4.28`` used by every historical report; it is deliberately
not ``30/7`` (≈ 4.2857), which would shift all existing outputs.
"""

from __future__ import annotations

from decimal import Decimal

from .models import Frequency, Kind, Transaction

WEEKLY_MULTIPLIER = Decimal("4.28")
MONTHLY_MULTIPLIER = Decimal(1)

_MULTIPLIERS: dict[Frequency, Decimal] = {
    Frequency.WEEKLY: WEEKLY_MULTIPLIER,
    Frequency.MONTHLY: MONTHLY_MULTIPLIER,
}


def multiplier(frequency: Frequency) -> Decimal:
    return _MULTIPLIERS[frequency]


def normalize(amount: Decimal, frequency: Frequency) -> Decimal:
    """Return the unsigned monthly-equivalent of ``amount``.

    >>> normalize(Decimal("40"), Frequency.WEEKLY)
    Decimal('171.20')
    """

    return amount * multiplier(frequency)


def monthly_value(tx: Transaction) -> Decimal:
    """Signed monthly-equivalent of a transaction; expenses are negative."""

    value = normalize(tx.amount, tx.frequency)
    return -value if tx.kind is Kind.EXPENSE else value


__all__ = ["WEEKLY_MULTIPLIER", "MONTHLY_MULTIPLIER", "multiplier", "normalize", "monthly_value"]
