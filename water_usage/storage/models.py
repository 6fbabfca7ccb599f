"""
Data models for storage layer.

Defines the persisted usage record.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Union


@dataclass(frozen=True)
class UsageRecord:
    """Litres used on a single calendar day.

    The store holds at most one record per day; logging the same day
    again overwrites the amount.
    """
    date: date
    amount: float

    def __post_init__(self):
        """Validate amount is non-negative."""
        if self.amount < 0:
            raise ValueError("amount cannot be negative")

    def to_dict(self) -> Dict[str, Union[str, int, float]]:
        """Encode as a JSON-ready mapping.

        Whole amounts are written as integers so the file reads ``50``
        rather than ``50.0``.
        """
        amount = self.amount
        if float(amount).is_integer():
            amount = int(amount)
        return {"date": self.date.isoformat(), "amount": amount}
