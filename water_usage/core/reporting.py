"""
Usage reporting.

Compares a day's usage against baseline averages and, on Mondays,
last week's total against the week before.
"""

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional

from water_usage.config.loader import ReportingConfig
from water_usage.storage.repository import UsageRepository

from .calendar import WeekRange, is_weekly_report_day, week_ranges


class WeeklyStatus(Enum):
    """Outcome of the week-over-week comparison."""
    NO_DATA = "no_data"              # Nothing logged in either week
    NO_PRIOR_WEEK = "no_prior_week"  # Only last week has data
    COMPARED = "compared"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (-2.5 -> -2, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def percent_diff(value: float, baseline: float) -> float:
    """Percentage difference of ``value`` from ``baseline``.

    A zero baseline gives 0 instead of dividing by zero.
    """
    if baseline == 0:
        return 0.0
    return (value - baseline) / baseline * 100


def format_diff(diff: float) -> str:
    """Render a percentage difference as ``+12% vs baseline``."""
    rounded = round_half_up(diff)
    sign = '+' if rounded > 0 else ''
    return f"{sign}{rounded}% vs baseline"


def _format_litres(amount: float) -> str:
    return f"{amount:.1f} L"


def _format_baseline(baseline: float) -> str:
    return f"{baseline:g}"


@dataclass(frozen=True)
class DailyComparison:
    """Today's usage against the local and global averages."""
    amount: float
    local_baseline: float
    global_baseline: float
    local_diff: str
    global_diff: str

    def lines(self) -> List[str]:
        return [
            f"You: {_format_litres(self.amount)}",
            f"Local average ({_format_baseline(self.local_baseline)} L/day): {self.local_diff}",
            f"Global average ({_format_baseline(self.global_baseline)} L/day): {self.global_diff}",
        ]


def daily_comparison(amount: float, config: Optional[ReportingConfig] = None) -> DailyComparison:
    """Compare one day's usage with the configured baselines.

    Args:
        amount: Litres used today
        config: Baselines to compare against (defaults to 150 / 173 L)

    Returns:
        DailyComparison with both formatted differences
    """
    config = config or ReportingConfig()
    return DailyComparison(
        amount=amount,
        local_baseline=config.local_baseline_litres,
        global_baseline=config.global_baseline_litres,
        local_diff=format_diff(percent_diff(amount, config.local_baseline_litres)),
        global_diff=format_diff(percent_diff(amount, config.global_baseline_litres)),
    )


@dataclass(frozen=True)
class WeeklySummary:
    """Totals for the last two Monday-to-Sunday weeks and their change."""
    last_week: WeekRange
    prev_week: WeekRange
    last_week_total: float
    prev_week_total: float
    status: WeeklyStatus
    change_percent: Optional[int] = None

    @property
    def direction(self) -> Optional[str]:
        if self.change_percent is None:
            return None
        if self.change_percent > 0:
            return "increase"
        if self.change_percent < 0:
            return "decrease"
        return "no change"

    def lines(self) -> List[str]:
        if self.status is WeeklyStatus.NO_DATA:
            return ["No data for the past two weeks yet."]
        if self.status is WeeklyStatus.NO_PRIOR_WEEK:
            return ["No data for the prior week to compare against."]
        return [
            f"Total last week: {_format_litres(self.last_week_total)}",
            f"Total prior week: {_format_litres(self.prev_week_total)}",
            f"Change: {abs(self.change_percent)}% {self.direction}",
        ]


def summarize_weeks(
    last_week: WeekRange,
    prev_week: WeekRange,
    last_week_total: float,
    prev_week_total: float
) -> WeeklySummary:
    """Classify two weekly totals into a summary."""
    if last_week_total == 0 and prev_week_total == 0:
        status, change = WeeklyStatus.NO_DATA, None
    elif prev_week_total == 0:
        status, change = WeeklyStatus.NO_PRIOR_WEEK, None
    else:
        status = WeeklyStatus.COMPARED
        change = round_half_up((last_week_total - prev_week_total) / prev_week_total * 100)

    return WeeklySummary(
        last_week=last_week,
        prev_week=prev_week,
        last_week_total=last_week_total,
        prev_week_total=prev_week_total,
        status=status,
        change_percent=change,
    )


def weekly_change(today: date, repository: UsageRepository) -> Optional[WeeklySummary]:
    """Compare last week's total with the week before.

    Only Mondays produce a summary; any other day returns None.

    Args:
        today: Current calendar day
        repository: Store to read the logged records from

    Returns:
        WeeklySummary, or None when ``today`` is not a Monday
    """
    if not is_weekly_report_day(today):
        return None

    records = repository.load()
    last_week, prev_week = week_ranges(today)
    return summarize_weeks(
        last_week,
        prev_week,
        repository.sum_in_range(records, last_week),
        repository.sum_in_range(records, prev_week),
    )
