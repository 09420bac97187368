"""Aggregation of intake events into daily, weekly and monthly stats.

Every function here is pure. Events are bucketed by their stored
``calendar_date`` string, and date ranges are filtered by comparing ISO
``YYYY-MM-DD`` strings, which sort in chronological order.
"""

import calendar
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from hydration_tracker.domain.intakes import IntakeEvent
from hydration_tracker.domain.stats import DailyStats, MonthlyStats, WeeklyStats
from hydration_tracker.rounding import round_half_up

DAYS_IN_WEEK = 7
COMPLETE_RATE = 100


def daily_total(events: Iterable[IntakeEvent]) -> int:
    """Return the summed amount of the given events."""
    return sum(event.amount for event in events)


def daily_stats(
    events: Iterable[IntakeEvent], goal_amount: int, day: str
) -> DailyStats:
    """Return stats for the events attributed to ``day``."""
    day_events = [event for event in events if event.calendar_date == day]
    total = daily_total(day_events)
    rate = total / goal_amount * 100 if goal_amount > 0 else 0
    return DailyStats(
        date=day,
        total_amount=total,
        goal_amount=goal_amount,
        achievement_rate=rate,
        intake_count=len(day_events),
    )


def weekly_stats(
    events: Iterable[IntakeEvent], goal_amount: int, week_start: str
) -> WeeklyStats:
    """Return stats for the seven days starting at ``week_start``.

    The average always divides by seven, including days with no intake. A day
    counts as achieved when its rate rounded half-up reaches 100, so 1999 of a
    2000 ml goal counts here but not in monthly_stats.
    """
    week_end = add_days(week_start, DAYS_IN_WEEK - 1)
    week_events = _filter_range(events, week_start, week_end)

    daily: list[DailyStats] = []
    total = 0
    achieved = 0
    for offset in range(DAYS_IN_WEEK):
        stats = daily_stats(week_events, goal_amount, add_days(week_start, offset))
        daily.append(stats)
        total += stats.total_amount
        if round_half_up(stats.achievement_rate) >= COMPLETE_RATE:
            achieved += 1

    return WeeklyStats(
        week_start=week_start,
        week_end=week_end,
        average_amount=total / DAYS_IN_WEEK,
        total_amount=total,
        achieved_days=achieved,
        daily_stats=daily,
    )


def monthly_stats(
    events: Iterable[IntakeEvent], goal_amount: int, year: int, month: int
) -> MonthlyStats:
    """Return stats for a calendar month.

    Boundary weeks are computed from the month's events only, so days outside
    the month read as zero. A day counts as achieved when its total reaches
    the goal amount, and the average divides by recorded days only.
    """
    start = _format_date(year, month, 1)
    end = last_day_of_month(year, month)
    month_events = _filter_range(events, start, end)

    weeks = [
        weekly_stats(month_events, goal_amount, week_start)
        for week_start in weeks_in_month(year, month)
    ]

    totals_by_day: dict[str, int] = {}
    for event in month_events:
        totals_by_day[event.calendar_date] = (
            totals_by_day.get(event.calendar_date, 0) + event.amount
        )

    total = 0
    achieved = 0
    recorded = 0
    for day in range(1, calendar.monthrange(year, month)[1] + 1):
        day_total = totals_by_day.get(_format_date(year, month, day), 0)
        total += day_total
        if day_total > 0:
            recorded += 1
        if day_total >= goal_amount:
            achieved += 1

    return MonthlyStats(
        year=year,
        month=month,
        average_amount=total / recorded if recorded > 0 else 0,
        total_amount=total,
        achieved_days=achieved,
        total_days=recorded,
        weekly_stats=weeks,
    )


def achievement_rate(total: int, goal: int) -> int:
    """Return the rounded achievement percentage, or 0 without a goal."""
    if goal <= 0:
        return 0
    return round_half_up(total / goal * 100)


def add_days(day: str, days: int) -> str:
    """Shift an ISO date string by a number of days."""
    return (date.fromisoformat(day) + timedelta(days=days)).isoformat()


def last_day_of_month(year: int, month: int) -> str:
    """Return the ISO date of the month's last day."""
    return _format_date(year, month, calendar.monthrange(year, month)[1])


def weeks_in_month(year: int, month: int) -> list[str]:
    """Return the Monday week starts that overlap the month."""
    first = date(year, month, 1)
    last = date.fromisoformat(last_day_of_month(year, month))
    current = first - timedelta(days=first.weekday())
    weeks = []
    while current <= last:
        weeks.append(current.isoformat())
        current += timedelta(days=DAYS_IN_WEEK)
    return weeks


def _filter_range(
    events: Iterable[IntakeEvent], start: str, end: str
) -> Sequence[IntakeEvent]:
    return [event for event in events if start <= event.calendar_date <= end]


def _format_date(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"
