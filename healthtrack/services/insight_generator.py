"""
insight_generator.py — Rule-based Insights
Evaluates declarative threshold tables over recent logs and returns short
insight / recommendation messages in a fixed priority order.
"""

import operator
from collections.abc import Iterable
from dataclasses import dataclass

from healthtrack.models.daily_log import DailyLogEntry


_COMPARISONS = {
    "lt": operator.lt,
    "le": operator.le,
    "gt": operator.gt,
    "ge": operator.ge,
}


@dataclass(frozen=True)
class Rule:
    metric: str
    threshold: float
    comparison: str
    message: str

    def fires(self, value: float) -> bool:
        return _COMPARISONS[self.comparison](value, self.threshold)


ACTIVE_DAY_MINUTES = 15

# Evaluated against window statistics, see window_statistics()
INSIGHT_RULES = (
    Rule("avg_sleep", 7, "lt",
         "You're averaging less than 7 hours of sleep. A consistent bedtime can help you recover better."),
    Rule("avg_water", 6, "lt",
         "Your water intake has averaged under 6 glasses a day. Keep a water bottle nearby to stay hydrated."),
    Rule("mood_change", -10, "lt",
         "Your mood has been declining over the past few days. Make time for activities that lift your spirits."),
    Rule("active_days", 3, "lt",
         "You exercised for more than 15 minutes on fewer than 3 days. Aim for a more regular activity routine."),
)
BALANCED_INSIGHT = "Your health metrics look balanced. Keep up the great work!"

# Evaluated against fields of the latest entry
RECOMMENDATION_RULES = (
    Rule("nutrition", 70, "lt",
         "Add more whole foods and vegetables to your meals to improve your nutrition score."),
    Rule("sleep_hours", 7, "lt",
         "Try going to bed 30 minutes earlier to get at least 7 hours of sleep."),
    Rule("mood", 70, "lt",
         "Take a short break for something you enjoy, like a walk or a call with a friend."),
    Rule("water_consumed", 6, "lt",
         "Drink a glass of water with every meal to reach at least 6 glasses a day."),
    Rule("exercise_duration", 20, "lt",
         "Even a 20-minute exercise session can have significant health benefits."),
)
CONTINUE_PLAN = "You're on track. Continue with your current health plan!"

MOTIVATION_MESSAGES = (
    "Every step counts on your health journey!",
    "Small consistent changes lead to big results over time.",
    "You're investing in your future well-being with each healthy choice.",
    "Progress is progress, no matter how small. Keep going!",
    "Your commitment to tracking your health is already a big achievement.",
)


def window_statistics(entries: list[DailyLogEntry]) -> dict:
    """Aggregates the insight rules look at. Needs at least one entry."""
    ordered = sorted(entries, key=lambda e: (e.date, e.mood))
    count = len(ordered)
    return {
        "avg_sleep": sum(e.sleep_hours for e in ordered) / count,
        "avg_water": sum(e.water_consumed for e in ordered) / count,
        "mood_change": ordered[-1].mood - ordered[0].mood,
        "active_days": sum(1 for e in ordered if e.exercise_duration > ACTIVE_DAY_MINUTES),
    }


class InsightGenerator:
    @staticmethod
    def generate_insights(recent_entries: Iterable[DailyLogEntry], rules=INSIGHT_RULES) -> list[str]:
        entries = list(recent_entries)
        if len(entries) < 2:
            return []
        stats = window_statistics(entries)
        messages = [r.message for r in rules if r.fires(stats[r.metric])]
        return messages or [BALANCED_INSIGHT]

    @staticmethod
    def generate_recommendations(latest_entry: DailyLogEntry | None, rules=RECOMMENDATION_RULES) -> list[str]:
        if latest_entry is None:
            return []
        messages = [r.message for r in rules if r.fires(getattr(latest_entry, r.metric, 0) or 0)]
        return messages or [CONTINUE_PLAN]

    @staticmethod
    def motivation_message(log_count: int) -> str:
        """Fixed message per log count, so repeated views read the same."""
        return MOTIVATION_MESSAGES[max(0, min(log_count, len(MOTIVATION_MESSAGES) - 1))]
