import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from healthtrack.models.daily_log import GLASS_LITERS


class HealthPlan(BaseModel):
    """Daily targets derived from the user's goal."""

    model_config = ConfigDict(frozen=True)

    goal: str
    water_intake: str  # display, e.g. "3.2L"
    water_liters: float
    sleep_hours: str  # display, e.g. "7-8 hours"
    sleep_min: float
    sleep_max: float
    exercise: str
    meals: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)

    @property
    def water_target(self) -> float:
        """Water target in logged glasses."""
        return self.water_liters / GLASS_LITERS

    @property
    def sleep_optimal(self) -> float:
        return (self.sleep_min + self.sleep_max) / 2


class Feedback(BaseModel):
    date: dt.date
    adherence: str
    suggestions: list[str]
    motivation: str
