"""
context.py — Request-scoped health state.
Goal, profile and log cache for one user, passed explicitly to whoever
calls the scoring services. Nothing here is global.
"""
import json
from datetime import date

from pydantic import ValidationError

from healthtrack.models.daily_log import DailyLogEntry, parse_day
from healthtrack.models.profile import UserProfile


class HealthContext:
    def __init__(self, goal: str = "", profile: UserProfile | None = None, logs=None):
        self.goal = goal
        self.profile = profile or UserProfile()
        self._logs: dict[date, DailyLogEntry] = {}
        self.set_logs(logs or [])

    @classmethod
    def load(cls, store) -> "HealthContext":
        """Build a context from a LogStoreClient (profile + all logs)."""
        data = store.fetch_profile()
        try:
            profile = UserProfile.model_validate(data)
        except ValidationError:
            profile = UserProfile()
        return cls(goal=data.get("goal") or "", profile=profile, logs=store.fetch_logs())

    # ------------------------------------------------------------------
    @property
    def logs(self) -> list[DailyLogEntry]:
        """All cached logs, oldest first."""
        return [self._logs[d] for d in sorted(self._logs)]

    def set_logs(self, logs):
        self._logs = {}
        for entry in logs:
            self.add_log(entry)

    def add_log(self, entry: DailyLogEntry):
        """Store a log; an existing log for the same date is replaced."""
        self._logs[entry.date] = entry

    def update_log(self, day, **changes) -> DailyLogEntry | None:
        """Apply field changes to the log for `day`. Returns the new entry, None if absent."""
        d = parse_day(day)
        current = self._logs.get(d)
        if current is None:
            return None
        data = current.model_dump()
        data.update({DailyLogEntry.field_name(key): value for key, value in changes.items()})
        data["date"] = d
        updated = DailyLogEntry.model_validate(data)
        self._logs[d] = updated
        return updated

    def latest(self) -> DailyLogEntry | None:
        return self._logs[max(self._logs)] if self._logs else None

    def recent(self, n: int = 7) -> list[DailyLogEntry]:
        return self.logs[-n:] if n > 0 else []

    @property
    def is_profile_complete(self) -> bool:
        return self.profile.is_complete

    def export_json(self) -> str:
        export = {
            "profile": {**self.profile.model_dump(mode="json", by_alias=True), "goal": self.goal},
            "logs": [e.to_wire() for e in self.logs],
        }
        return json.dumps(export, indent=2)

    def reset(self):
        self.goal = ""
        self.profile = UserProfile()
        self._logs = {}
