"""
Repository pattern for data access.

Persists usage records as a pretty-printed JSON array in a single file.
The whole array is read, modified and rewritten on every save.
"""

import json
import logging
import math
from datetime import date
from pathlib import Path
from typing import Any, Iterable, List, Optional

from water_usage.core.calendar import WeekRange, parse_day

from .models import UsageRecord

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent / "water_usage.json"


def _coerce_amount(value: Any) -> float:
    """Read a stored amount, treating missing or non-numeric values as zero."""
    amount = 0.0
    if isinstance(value, bool) or value is None:
        return amount
    if isinstance(value, (int, float)):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value.strip() or 0)
        except ValueError:
            return 0.0
    return amount if math.isfinite(amount) else 0.0


class UsageRepository:
    """Repository for the dated usage log.

    Only one process is expected to touch the file during a run, so no
    locking is done.
    """

    def __init__(self, data_path: Optional[str] = None):
        """Initialize the repository with a data file path.

        Args:
            data_path: Path to the JSON data file (defaults to
                ``water_usage.json`` inside the package directory)
        """
        self.data_path = Path(data_path) if data_path else DEFAULT_DATA_FILE

    def ensure_data_file(self) -> None:
        """Create the data file as an empty array if it does not exist."""
        if self.data_path.exists():
            return
        logger.debug("Creating empty data file at %s", self.data_path)
        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        self._write_raw([])

    def load(self) -> List[UsageRecord]:
        """Load all records with a readable date.

        Corrupt or missing content is treated as no data.
        """
        records = []
        for item in self._read_raw():
            record = _record_from_item(item)
            if record is not None:
                records.append(record)
        return records

    def upsert(self, today: date, amount: float) -> UsageRecord:
        """Save ``amount`` for ``today``, replacing any existing entry.

        Items the repository cannot interpret are kept as they are.

        Args:
            today: Calendar day of the entry
            amount: Litres used

        Returns:
            The saved record

        Raises:
            OSError: If the data file cannot be written
        """
        record = UsageRecord(date=today, amount=amount)
        items = self._read_raw()
        key = today.isoformat()

        for index, item in enumerate(items):
            if isinstance(item, dict) and item.get("date") == key:
                logger.debug("Replacing entry for %s", key)
                items[index] = record.to_dict()
                break
        else:
            logger.debug("Appending entry for %s", key)
            items.append(record.to_dict())

        self._write_raw(items)
        return record

    @staticmethod
    def sum_in_range(records: Iterable[UsageRecord], week_range: WeekRange) -> float:
        """Sum the litres of every record inside ``week_range`` (inclusive)."""
        return sum(
            (record.amount for record in records if week_range.contains(record.date)),
            0.0,
        )

    def _read_raw(self) -> List[Any]:
        try:
            with open(self.data_path, "r", encoding="utf-8") as f:
                parsed = json.load(f)
        except (OSError, ValueError) as e:
            logger.debug("Treating %s as empty: %s", self.data_path, e)
            return []

        if not isinstance(parsed, list):
            logger.debug("Treating %s as empty: top-level value is not an array", self.data_path)
            return []
        return parsed

    def _write_raw(self, items: List[Any]) -> None:
        with open(self.data_path, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=2)


def _record_from_item(item: Any) -> Optional[UsageRecord]:
    if not isinstance(item, dict):
        return None
    day = parse_day(item.get("date"))
    if day is None:
        return None
    return UsageRecord(date=day, amount=max(_coerce_amount(item.get("amount")), 0.0))
