"""Statistics service that feeds stored intakes into the aggregation engine."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum

from hydration_tracker.domain.intakes import IntakeEvent
from hydration_tracker.domain.stats import (
    ChartPoint,
    DailyStats,
    HistorySummary,
    MonthlyStats,
    WeeklyStats,
)
from hydration_tracker.rounding import round_half_up
from hydration_tracker.services.aggregation import (
    COMPLETE_RATE,
    DAYS_IN_WEEK,
    achievement_rate,
    add_days,
    daily_stats,
    daily_total,
    last_day_of_month,
    monthly_stats,
    weekly_stats,
)
from hydration_tracker.services.goals import (
    hourly_recommendation,
    hours_left_in_day,
    remaining_per_hour,
)
from hydration_tracker.services.intakes import IntakeRepository
from hydration_tracker.services.progress import (
    Celebration,
    ProgressTier,
    celebration_message,
    progress_color_tier,
    progress_width,
)
from hydration_tracker.services.settings import SettingsService

HISTORY_START = "2020-01-01"
MAX_CHART_DAYS = 30
JANUARY = 1


class HistoryPeriod(str, Enum):
    """Window shown on the history screen."""

    WEEK = "week"
    MONTH = "month"
    ALL = "all"


@dataclass(frozen=True)
class TodayProgress:
    """Progress towards today's goal with pacing figures."""

    date: str
    total_amount: int
    goal_amount: int
    achievement_rate: int
    progress_width: float
    tier: ProgressTier
    celebration: Celebration | None
    hourly_recommendation: int
    hours_left: int
    remaining_per_hour: int
    intakes: list[IntakeEvent]


@dataclass
class StatsService:
    """Service for computing stats from the intake store."""

    repository: IntakeRepository
    settings_service: SettingsService

    def get_day(self, day: str) -> DailyStats:
        """Return stats for one calendar date."""
        events = self.repository.list_by_date(day)
        return daily_stats(events, self._goal_amount(), day)

    def get_week(self, week_start: str) -> WeeklyStats:
        """Return stats for the seven days from ``week_start``."""
        week_end = add_days(week_start, DAYS_IN_WEEK - 1)
        events = self.repository.list_by_date_range(week_start, week_end)
        return weekly_stats(events, self._goal_amount(), week_start)

    def get_current_week(self, today: date) -> WeeklyStats:
        """Return stats for the Monday-anchored week containing ``today``."""
        monday = today - timedelta(days=today.weekday())
        return self.get_week(monday.isoformat())

    def get_month(self, year: int, month: int) -> MonthlyStats:
        """Return stats for a calendar month."""
        events = self.repository.list_by_date_range(
            f"{year:04d}-{month:02d}-01", last_day_of_month(year, month)
        )
        return monthly_stats(events, self._goal_amount(), year, month)

    def get_today_progress(self, now: datetime | None = None) -> TodayProgress:
        """Return today's progress, display tiers and pacing."""
        moment = now or datetime.now().astimezone()
        today = moment.date().isoformat()
        events = sorted(
            self.repository.list_by_date(today),
            key=lambda event: event.occurred_at_ms,
        )
        goal = self._goal_amount()
        total = daily_total(events)
        rate = achievement_rate(total, goal)
        hours_left = hours_left_in_day(moment)
        return TodayProgress(
            date=today,
            total_amount=total,
            goal_amount=goal,
            achievement_rate=rate,
            progress_width=progress_width(total, goal),
            tier=progress_color_tier(rate),
            celebration=celebration_message(rate),
            hourly_recommendation=hourly_recommendation(goal),
            hours_left=hours_left,
            remaining_per_hour=remaining_per_hour(total, goal, hours_left),
            intakes=events,
        )

    def get_history(self, period: HistoryPeriod, today: date) -> HistorySummary:
        """Return chart points and summary figures for a history period."""
        period = HistoryPeriod(period)
        start = _history_start(period, today)
        events = self.repository.list_by_date_range(start, today.isoformat())
        goal = self._goal_amount()

        by_date: dict[str, list[IntakeEvent]] = {}
        for event in events:
            by_date.setdefault(event.calendar_date, []).append(event)
        dates = sorted(by_date)
        if period is HistoryPeriod.WEEK:
            display_days = DAYS_IN_WEEK
        elif period is HistoryPeriod.MONTH:
            display_days = MAX_CHART_DAYS
        else:
            display_days = min(len(dates), MAX_CHART_DAYS)
        recent = dates[-display_days:] if display_days else []

        points = []
        for day in recent:
            amount = daily_total(by_date[day])
            points.append(
                ChartPoint(
                    date=day,
                    amount=amount,
                    goal=goal,
                    achievement=achievement_rate(amount, goal),
                )
            )

        total_days = len(points)
        achieved = sum(1 for point in points if point.achievement >= COMPLETE_RATE)
        total = sum(point.amount for point in points)
        return HistorySummary(
            period=period.value,
            points=points,
            total_days=total_days,
            achieved_days=achieved,
            average_amount=round_half_up(total / total_days) if total_days else 0,
            max_amount=max((point.amount for point in points), default=0),
            achievement_rate=(
                round_half_up(achieved / total_days * 100) if total_days else 0
            ),
        )

    def _goal_amount(self) -> int:
        return self.settings_service.get_goal().goal_amount


def _history_start(period: HistoryPeriod, today: date) -> str:
    if period is HistoryPeriod.WEEK:
        return (today - timedelta(days=DAYS_IN_WEEK)).isoformat()
    if period is HistoryPeriod.MONTH:
        if today.month == JANUARY:
            year, month = today.year - 1, 12
        else:
            year, month = today.year, today.month - 1
        day = min(today.day, calendar.monthrange(year, month)[1])
        return date(year, month, day).isoformat()
    return HISTORY_START
