"""
plan_service.py — Goal Plans & Adherence
Maps a health goal to daily targets, measures how closely logs follow
them, and builds the per-log feedback card.
"""

from collections.abc import Sequence

from healthtrack.models.daily_log import DailyLogEntry
from healthtrack.models.plan import Feedback, HealthPlan
from healthtrack.services.insight_generator import InsightGenerator
from healthtrack.services.score_engine import round_half_up


EXERCISE_TARGET_MINUTES = 20
WATER_SHORTFALL_RATIO = 0.8

_PLANS = {
    "Lose weight": dict(
        water_intake="3.2L", water_liters=3.2,
        sleep_hours="7-8 hours", sleep_min=7, sleep_max=8,
        exercise="45 min cardio + 15 min strength training",
        meals=["High-protein breakfast", "Low-carb lunch", "Small portion dinner"],
        tips=["Avoid sugary drinks", "Eat slowly", "Take 10,000 steps daily"],
    ),
    "Improve sleep": dict(
        water_intake="2.5L", water_liters=2.5,
        sleep_hours="8-9 hours", sleep_min=8, sleep_max=9,
        exercise="30 min yoga + 20 min walk",
        meals=["Light dinner 3 hours before bed", "Caffeine-free after 2pm"],
        tips=["No screens 1 hour before bed", "Keep bedroom cool and dark", "Consistent sleep schedule"],
    ),
    "Gain muscle": dict(
        water_intake="4L", water_liters=4.0,
        sleep_hours="8 hours", sleep_min=8, sleep_max=8,
        exercise="45 min weight training + 10 min core",
        meals=["Protein-rich breakfast", "Post-workout protein shake", "Carb-rich dinner"],
        tips=["Focus on progressive overload", "Rest 48 hours between muscle groups", "Track protein intake"],
    ),
    "Manage stress": dict(
        water_intake="3L", water_liters=3.0,
        sleep_hours="7-8 hours", sleep_min=7, sleep_max=8,
        exercise="20 min meditation + 30 min walk",
        meals=["Balanced meals rich in Omega-3", "Avoid excessive caffeine"],
        tips=["Practice deep breathing", "Take regular breaks", "Journal daily"],
    ),
}

_DEFAULT_PLAN = dict(
    water_intake="2.5L", water_liters=2.5,
    sleep_hours="7-8 hours", sleep_min=7, sleep_max=8,
    exercise="30 min moderate activity",
    meals=["Balanced meals", "Regular eating schedule"],
    tips=["Stay hydrated", "Get enough sleep"],
)


def _fmt_hours(value: float) -> str:
    return f"{value:g}"


class PlanService:
    @staticmethod
    def plan_for_goal(goal: str | None) -> HealthPlan:
        goal = goal or ""
        return HealthPlan(goal=goal, **_PLANS.get(goal, _DEFAULT_PLAN))

    @staticmethod
    def adherence_stats(entries: Sequence[DailyLogEntry], plan: HealthPlan | None) -> dict:
        """Average adherence (0..100) to the plan's water, sleep and exercise targets."""
        if plan is None or not entries:
            return {"water": 0, "sleep": 0, "exercise": 0}

        water_sum = sleep_sum = exercise_sum = 0.0
        optimal_sleep = plan.sleep_optimal
        for e in entries:
            water_sum += min(e.water_consumed / plan.water_target, 1) if plan.water_target else 0
            if optimal_sleep:
                deviation = abs(e.sleep_hours - optimal_sleep) / optimal_sleep
                sleep_sum += max(0.0, 1 - deviation)
            if e.exercise_duration > EXERCISE_TARGET_MINUTES:
                exercise_sum += 1
            else:
                exercise_sum += e.exercise_duration / EXERCISE_TARGET_MINUTES

        count = len(entries)
        return {
            "water": round_half_up(water_sum / count * 100),
            "sleep": round_half_up(sleep_sum / count * 100),
            "exercise": round_half_up(exercise_sum / count * 100),
        }

    @staticmethod
    def feedback(entry: DailyLogEntry, plan: HealthPlan | None, log_count: int = 0) -> Feedback:
        suggestions = []
        met = 0

        if plan is not None:
            if entry.water_consumed < plan.water_target * WATER_SHORTFALL_RATIO:
                suggestions.append(f"Try to increase your water intake to reach your goal of {plan.water_intake}")
            else:
                met += 1

            if entry.sleep_hours < plan.sleep_min:
                suggestions.append(f"You need more sleep. Aim for at least {_fmt_hours(plan.sleep_min)} hours")
            elif entry.sleep_hours > plan.sleep_max:
                suggestions.append(f"You might be oversleeping. Aim for {plan.sleep_hours}")
            else:
                met += 1

        if entry.exercise_duration < EXERCISE_TARGET_MINUTES:
            if plan is not None:
                suggestions.append(f"Try to exercise longer. Your plan recommends: {plan.exercise}")
            else:
                suggestions.append("Even short 20-minute exercise sessions can have significant health benefits.")
        else:
            met += 1

        if plan is None:
            adherence = "No health plan available for comparison."
        elif met >= 3:
            adherence = "Great adherence to your plan!"
        elif met >= 1:
            adherence = "Partial adherence to your plan."
        else:
            adherence = "You're not following your plan closely."

        if not suggestions:
            suggestions.append("Keep maintaining your current routine!")

        return Feedback(
            date=entry.date,
            adherence=adherence,
            suggestions=suggestions,
            motivation=InsightGenerator.motivation_message(log_count),
        )
