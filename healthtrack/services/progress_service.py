"""
progress_service.py — Daily Progress
Reports which categories (nutrition, sleep, mood, water) made it into
a day's log and how complete that day is.
"""

from collections.abc import Iterable
from datetime import date

from healthtrack.models.daily_log import DailyLogEntry
from healthtrack.models.stats import DailyProgress
from healthtrack.services.score_engine import round_half_up


# progress flag → log field
_TRACKED = {
    "nutrition": "nutrition",
    "sleep": "sleep_hours",
    "mood": "mood",
    "water": "water_consumed",
}


class ProgressService:
    @staticmethod
    def daily_progress(entries: Iterable[DailyLogEntry], day: date | None = None) -> DailyProgress:
        d = day or date.today()
        entry = None
        for e in entries:
            if e.date == d:
                entry = e  # last one for the day wins

        if entry is None:
            return DailyProgress(date=d)

        flags = {name: entry.supplied(field) for name, field in _TRACKED.items()}
        logged = sum(flags.values())
        return DailyProgress(
            date=d,
            completion_percentage=round_half_up(logged / len(_TRACKED) * 100),
            **flags,
        )
