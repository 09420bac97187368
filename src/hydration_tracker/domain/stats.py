"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DailyStats:
    """Totals for a single calendar day.

    ``achievement_rate`` is the raw percentage and is not rounded.
    """

    date: str
    total_amount: int
    goal_amount: int
    achievement_rate: float
    intake_count: int


@dataclass(frozen=True)
class WeeklyStats:
    """Totals for a seven day run starting at ``week_start``."""

    week_start: str
    week_end: str
    average_amount: float
    total_amount: int
    achieved_days: int
    daily_stats: list[DailyStats]


@dataclass(frozen=True)
class MonthlyStats:
    """Totals for a calendar month."""

    year: int
    month: int
    average_amount: float
    total_amount: int
    achieved_days: int
    total_days: int
    weekly_stats: list[WeeklyStats]


@dataclass(frozen=True)
class ChartPoint:
    """One bar of the history chart."""

    date: str
    amount: int
    goal: int
    achievement: int


@dataclass(frozen=True)
class HistorySummary:
    """Chart points and headline figures for a history period."""

    period: str
    points: list[ChartPoint]
    total_days: int
    achieved_days: int
    average_amount: int
    max_amount: int
    achievement_rate: int
