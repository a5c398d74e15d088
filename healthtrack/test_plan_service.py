from datetime import date

import pytest

from healthtrack.models.daily_log import DailyLogEntry
from healthtrack.services.insight_generator import MOTIVATION_MESSAGES
from healthtrack.services.plan_service import PlanService
from healthtrack.services.progress_service import ProgressService


DAY = date(2024, 5, 1)


def test_plan_for_known_goal():
    plan = PlanService.plan_for_goal("Lose weight")
    assert plan.goal == "Lose weight"
    assert plan.water_intake == "3.2L"
    assert plan.water_target == pytest.approx(12.8)
    assert (plan.sleep_min, plan.sleep_max) == (7, 8)
    assert "Eat slowly" in plan.tips


def test_plan_single_value_sleep_range():
    plan = PlanService.plan_for_goal("Gain muscle")
    assert plan.sleep_min == plan.sleep_max == 8
    assert plan.sleep_optimal == 8


def test_unknown_goal_gets_default_plan():
    plan = PlanService.plan_for_goal("Run a marathon")
    assert plan.water_intake == "2.5L"
    assert plan.exercise == "30 min moderate activity"
    assert PlanService.plan_for_goal(None).goal == ""


def test_adherence_stats():
    plan = PlanService.plan_for_goal(None)  # 10 glasses, 7-8 hours
    entries = [DailyLogEntry(date=DAY, water_consumed=5, sleep_hours=7.5, exercise_duration=10)]
    assert PlanService.adherence_stats(entries, plan) == {"water": 50, "sleep": 100, "exercise": 50}


def test_adherence_caps_and_averages():
    plan = PlanService.plan_for_goal(None)
    entries = [
        DailyLogEntry(date=DAY, water_consumed=20, sleep_hours=7.5, exercise_duration=60),
        DailyLogEntry(date=date(2024, 5, 2), water_consumed=0, sleep_hours=0, exercise_duration=0),
    ]
    assert PlanService.adherence_stats(entries, plan) == {"water": 50, "sleep": 50, "exercise": 50}


def test_adherence_without_data():
    plan = PlanService.plan_for_goal(None)
    zeros = {"water": 0, "sleep": 0, "exercise": 0}
    assert PlanService.adherence_stats([], plan) == zeros
    assert PlanService.adherence_stats([DailyLogEntry(date=DAY)], None) == zeros


def test_feedback_all_targets_met():
    plan = PlanService.plan_for_goal("Lose weight")
    entry = DailyLogEntry(date=DAY, water_consumed=12, sleep_hours=7.5, exercise_duration=45)
    fb = PlanService.feedback(entry, plan, log_count=1)
    assert fb.date == DAY
    assert fb.adherence == "Great adherence to your plan!"
    assert fb.suggestions == ["Keep maintaining your current routine!"]
    assert fb.motivation == MOTIVATION_MESSAGES[1]


def test_feedback_partial():
    plan = PlanService.plan_for_goal("Improve sleep")
    entry = DailyLogEntry(date=DAY, water_consumed=10, sleep_hours=6, exercise_duration=10)
    fb = PlanService.feedback(entry, plan)
    assert fb.adherence == "Partial adherence to your plan."
    assert fb.suggestions == [
        "You need more sleep. Aim for at least 8 hours",
        "Try to exercise longer. Your plan recommends: 30 min yoga + 20 min walk",
    ]


def test_feedback_nothing_met():
    plan = PlanService.plan_for_goal("Manage stress")
    entry = DailyLogEntry(date=DAY, water_consumed=1, sleep_hours=11, exercise_duration=0)
    fb = PlanService.feedback(entry, plan)
    assert fb.adherence == "You're not following your plan closely."
    assert fb.suggestions[0] == "Try to increase your water intake to reach your goal of 3L"
    assert fb.suggestions[1] == "You might be oversleeping. Aim for 7-8 hours"
    assert len(fb.suggestions) == 3


def test_feedback_without_plan():
    entry = DailyLogEntry(date=DAY, exercise_duration=5)
    fb = PlanService.feedback(entry, None)
    assert fb.adherence == "No health plan available for comparison."
    assert fb.suggestions == ["Even short 20-minute exercise sessions can have significant health benefits."]


def test_progress_partial_day():
    entry = DailyLogEntry.model_validate({"date": "2024-05-01", "mood": 70, "sleepHours": 7})
    progress = ProgressService.daily_progress([entry], DAY)
    assert progress.mood and progress.sleep
    assert not progress.water and not progress.nutrition
    assert progress.completion_percentage == 50


def test_progress_complete_day():
    entry = DailyLogEntry(date=DAY, mood=70, sleep_hours=7, water_consumed=6, nutrition=80)
    assert ProgressService.daily_progress([entry], DAY).completion_percentage == 100


def test_progress_missing_day():
    entry = DailyLogEntry(date=DAY, mood=70)
    progress = ProgressService.daily_progress([entry], date(2024, 5, 2))
    assert progress.date == date(2024, 5, 2)
    assert progress.completion_percentage == 0


def test_progress_zero_values_are_not_logged():
    entry = DailyLogEntry(date=DAY, mood=0, water_consumed=3)
    progress = ProgressService.daily_progress([entry], DAY)
    assert not progress.mood
    assert progress.water
    assert progress.completion_percentage == 25
