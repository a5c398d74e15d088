"""
score_engine.py — Daily Health Score
Normalizes one day's log into 0..100 category scores and folds them
into a weighted 0..100 composite score.
"""

import math

from healthtrack.models.daily_log import DailyLogEntry


SLEEP_TARGET_HOURS = 8.0
WATER_TARGET_GLASSES = 8.0
ACTIVITY_TARGET_MINUTES = 30.0  # 30 min of exercise = 100% activity

# weight key → breakdown category
CATEGORIES = {
    "nutrition": "Nutrition",
    "sleep": "Sleep",
    "mood": "Mood",
    "water": "Water",
    "activity": "Activity",
}

DEFAULT_WEIGHTS = {
    "nutrition": 0.30,
    "sleep": 0.25,
    "mood": 0.15,
    "water": 0.15,
    "activity": 0.15,
}

# Goal-specific emphasis, re-normalized before use
_GOAL_WEIGHTS = {
    "Improve sleep": {"nutrition": 0.20, "sleep": 0.40, "mood": 0.15, "water": 0.10, "activity": 0.15},
    "Manage stress": {"nutrition": 0.20, "sleep": 0.25, "mood": 0.30, "water": 0.10, "activity": 0.15},
    "Lose weight": {"nutrition": 0.35, "sleep": 0.15, "mood": 0.10, "water": 0.15, "activity": 0.25},
    "Gain muscle": {"nutrition": 0.35, "sleep": 0.20, "mood": 0.05, "water": 0.15, "activity": 0.25},
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


class ScoreEngine:
    @staticmethod
    def normalize_weights(weights: dict | None) -> dict:
        """Scale weights so they sum to 1.0. Unknown keys are ignored, missing ones count as 0."""
        if not weights:
            return dict(DEFAULT_WEIGHTS)
        cleaned = {k: max(0.0, float(weights.get(k, 0) or 0)) for k in CATEGORIES}
        total = sum(cleaned.values())
        if total <= 0:
            return dict(DEFAULT_WEIGHTS)
        return {k: w / total for k, w in cleaned.items()}

    @staticmethod
    def weights_for_goal(goal: str | None) -> dict:
        return ScoreEngine.normalize_weights(_GOAL_WEIGHTS.get(goal or "", DEFAULT_WEIGHTS))

    @staticmethod
    def compute_category_breakdown(entry: DailyLogEntry) -> dict[str, float]:
        """Per-category scores in [0, 100]; every category is always present."""
        sleep = (entry.sleep_hours or 0) / SLEEP_TARGET_HOURS * 100
        water = (entry.water_consumed or 0) / WATER_TARGET_GLASSES * 100
        activity = (entry.exercise_duration or 0) / ACTIVITY_TARGET_MINUTES * 100
        return {
            "Nutrition": _clamp(entry.nutrition or 0),
            "Sleep": _clamp(sleep),
            "Mood": _clamp(entry.mood or 0),
            "Water": _clamp(water),
            "Activity": _clamp(activity),
        }

    @staticmethod
    def compute_composite_score(entry: DailyLogEntry, weights: dict | None = None) -> int:
        """Weighted sum of the breakdown, rounded to an int in [0, 100]."""
        w = ScoreEngine.normalize_weights(weights) if weights is not None else DEFAULT_WEIGHTS
        breakdown = ScoreEngine.compute_category_breakdown(entry)
        total = sum(breakdown[category] * w[key] for key, category in CATEGORIES.items())
        return round_half_up(_clamp(total))
