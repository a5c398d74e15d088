import datetime as dt

from pydantic import BaseModel


class HealthStats(BaseModel):
    avg_sleep: float = 0.0
    avg_water: float = 0.0
    avg_mood: float = 0.0
    total_exercise_minutes: int = 0
    logs_count: int = 0


class DailyProgress(BaseModel):
    """Which categories were logged for one day."""

    date: dt.date
    nutrition: bool = False
    sleep: bool = False
    mood: bool = False
    water: bool = False
    completion_percentage: int = 0
