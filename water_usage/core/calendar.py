"""
Calendar-day helpers.

Weeks run Monday to Sunday. All values are ``datetime.date`` objects,
so there is no time-of-day or timezone component anywhere.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Tuple

DAYS_PER_WEEK = 7
ISO_DAY_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
MONDAY = 0


@dataclass(frozen=True)
class WeekRange:
    """Inclusive Monday-to-Sunday window."""
    start: date
    end: date

    def __post_init__(self):
        """Validate the window is exactly one Monday-to-Sunday week."""
        if self.start.weekday() != MONDAY:
            raise ValueError(f"week must start on a Monday, got {self.start.isoformat()}")
        if self.end - self.start != timedelta(days=DAYS_PER_WEEK - 1):
            raise ValueError("week must span exactly 7 days")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


def parse_day(value) -> Optional[date]:
    """Parse a ``YYYY-MM-DD`` string, returning None if it is not one."""
    if not isinstance(value, str):
        return None
    if not ISO_DAY_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_weekly_report_day(today: date) -> bool:
    """Weekly summaries are printed on Mondays only."""
    return today.weekday() == MONDAY


def week_ending(end: date) -> WeekRange:
    """Build the week whose last day is ``end`` (a Sunday)."""
    return WeekRange(start=end - timedelta(days=DAYS_PER_WEEK - 1), end=end)


def week_ranges(today: date) -> Tuple[WeekRange, WeekRange]:
    """Return ``(last_week, prev_week)`` for a Monday.

    ``last_week`` ends on the Sunday immediately before ``today`` and
    ``prev_week`` is the full week before that.

    Raises:
        ValueError: If ``today`` is not a Monday
    """
    if not is_weekly_report_day(today):
        raise ValueError(f"{today.isoformat()} is not a Monday")

    last_week = week_ending(today - timedelta(days=1))
    prev_week = week_ending(today - timedelta(days=DAYS_PER_WEEK + 1))
    return last_week, prev_week
