# Pydantic models shared by the services and the API layer

from healthtrack.models.daily_log import DailyLogEntry, TrendPoint, TREND_METRICS
from healthtrack.models.profile import UserProfile
from healthtrack.models.plan import HealthPlan, Feedback
from healthtrack.models.stats import HealthStats, DailyProgress

__all__ = [
    "DailyLogEntry",
    "TrendPoint",
    "TREND_METRICS",
    "UserProfile",
    "HealthPlan",
    "Feedback",
    "HealthStats",
    "DailyProgress",
]
