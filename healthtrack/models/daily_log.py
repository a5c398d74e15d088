import datetime as dt
import math
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# Labels the log form sends instead of numbers
MOOD_LABELS = {"awful": 10, "bad": 30, "okay": 50, "good": 70, "great": 90}
MEAL_QUALITY_LABELS = {"poor": 30, "average": 60, "good": 80, "excellent": 95}

# Glass size used to convert plan targets (liters) into logged glasses
GLASS_LITERS = 0.25


def to_metric(value, labels: dict | None = None) -> float:
    """Coerce a raw metric to a non-negative float. Anything unusable is 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        text = value.strip().lower()
        if labels and text in labels:
            return float(labels[text])
        try:
            value = float(text)
        except ValueError:
            return 0.0
    if not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return float(value)


def parse_day(value) -> dt.date:
    """Accept a date, a datetime or an ISO string (timestamps are cut to the day)."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        return dt.date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def _split_list(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(v) for v in value]


class DailyLogEntry(BaseModel):
    """One day's metrics as submitted by the user. Identity is the date."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    date: dt.date
    mood: float = 0.0
    sleep_hours: float = Field(
        0.0, validation_alias=AliasChoices("sleep_hours", "sleepHours"), serialization_alias="sleepHours"
    )
    water_consumed: float = Field(
        0.0,
        validation_alias=AliasChoices("water_consumed", "waterConsumed", "waterIntake"),
        serialization_alias="waterConsumed",
    )
    nutrition: float = Field(0.0, validation_alias=AliasChoices("nutrition", "mealQuality"))
    exercise_duration: int = Field(
        0,
        validation_alias=AliasChoices("exercise_duration", "exerciseDuration"),
        serialization_alias="exerciseDuration",
    )
    stress_level: float = Field(
        0.0, validation_alias=AliasChoices("stress_level", "stressLevel"), serialization_alias="stressLevel"
    )
    exercise: str = ""
    meals: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        return parse_day(v)

    @field_validator("mood", mode="before")
    @classmethod
    def coerce_mood(cls, v):
        return to_metric(v, MOOD_LABELS)

    @field_validator("nutrition", mode="before")
    @classmethod
    def coerce_nutrition(cls, v):
        return to_metric(v, MEAL_QUALITY_LABELS)

    @field_validator("sleep_hours", "water_consumed", "stress_level", mode="before")
    @classmethod
    def coerce_number(cls, v):
        return to_metric(v)

    @field_validator("exercise_duration", mode="before")
    @classmethod
    def coerce_minutes(cls, v):
        return int(round(to_metric(v)))

    @field_validator("exercise", mode="before")
    @classmethod
    def coerce_exercise(cls, v):
        return "" if v is None else str(v)

    @field_validator("meals", "symptoms", mode="before")
    @classmethod
    def coerce_list(cls, v):
        return _split_list(v)

    @classmethod
    def field_name(cls, key: str) -> str:
        """Resolve a wire name such as `waterIntake` to its field name."""
        for name, info in cls.model_fields.items():
            alias = info.validation_alias
            if key == name or (isinstance(alias, AliasChoices) and key in alias.choices):
                return name
        return key

    def supplied(self, field: str) -> bool:
        """True when the field came in with the log and holds a positive value."""
        return field in self.model_fields_set and getattr(self, field, 0) > 0

    def to_wire(self) -> dict:
        """camelCase payload for the log storage backend."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Metrics carried on every trend point
TREND_METRICS = ("mood", "sleep", "water", "nutrition", "stress", "exercise")


class TrendPoint(BaseModel):
    """One date of a gap-filled chart series."""

    model_config = ConfigDict(frozen=True)

    date: dt.date
    mood: float = 0.0
    sleep: float = 0.0
    water: float = 0.0
    nutrition: float = 0.0
    stress: float = 0.0
    exercise: float = 0.0
    is_placeholder: bool = False

    @classmethod
    def from_entry(cls, entry: DailyLogEntry) -> "TrendPoint":
        return cls(
            date=entry.date,
            mood=entry.mood,
            sleep=entry.sleep_hours,
            water=entry.water_consumed,
            nutrition=entry.nutrition,
            stress=entry.stress_level,
            exercise=entry.exercise_duration,
        )

    @classmethod
    def placeholder(cls, day: dt.date) -> "TrendPoint":
        return cls(date=day, is_placeholder=True)
