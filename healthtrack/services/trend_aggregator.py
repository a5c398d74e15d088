"""
trend_aggregator.py — Chart Series
Turns a sparse, unordered pile of daily logs into a fixed-length,
date-ordered window with zero placeholders for the missing days.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, timedelta

from healthtrack.models.daily_log import DailyLogEntry, TrendPoint
from healthtrack.models.stats import HealthStats
from healthtrack.services.score_engine import round_half_up


class TrendAggregator:
    @staticmethod
    def build_window(
        entries: Iterable[DailyLogEntry],
        window_size: int = 7,
        end_date: date | None = None,
    ) -> list[TrendPoint]:
        """Exactly `window_size` points, one per day, ending at `end_date`."""
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")

        ordered = sorted(entries, key=lambda e: e.date)
        if end_date is None:
            end_date = ordered[-1].date if ordered else date.today()
        start_date = end_date - timedelta(days=window_size - 1)

        # Stable sort keeps input order within a date, so the last duplicate wins
        by_date = {e.date: e for e in ordered if start_date <= e.date <= end_date}

        points = []
        for offset in range(window_size):
            day = start_date + timedelta(days=offset)
            entry = by_date.get(day)
            points.append(TrendPoint.from_entry(entry) if entry else TrendPoint.placeholder(day))
        return points

    @staticmethod
    def compute_period_change(series: Sequence, metric_key: str) -> int:
        """Signed % change between the last two points; 0 when it can't be computed."""
        if len(series) < 2:
            return 0
        previous = _metric(series[-2], metric_key)
        latest = _metric(series[-1], metric_key)
        if previous == 0:
            return 0
        return round_half_up((latest - previous) / previous * 100)

    @staticmethod
    def format_change(change: int) -> str:
        return f"+{change}%" if change >= 0 else f"{change}%"

    @staticmethod
    def summarize(entries: Sequence[DailyLogEntry]) -> HealthStats:
        if not entries:
            return HealthStats()
        count = len(entries)
        return HealthStats(
            avg_sleep=round(sum(e.sleep_hours for e in entries) / count, 1),
            avg_water=round(sum(e.water_consumed for e in entries) / count, 1),
            avg_mood=round(sum(e.mood for e in entries) / count, 1),
            total_exercise_minutes=sum(e.exercise_duration for e in entries),
            logs_count=count,
        )


def _metric(point, key: str) -> float:
    if isinstance(point, Mapping):
        value = point.get(key, 0)
    else:
        value = getattr(point, key, 0)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return 0.0
    return float(value)
