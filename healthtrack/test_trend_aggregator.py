from datetime import date, timedelta

import pytest

from healthtrack.models.daily_log import DailyLogEntry, TrendPoint
from healthtrack.services.trend_aggregator import TrendAggregator


def _log(day, **fields):
    return DailyLogEntry(date=day, **fields)


def test_empty_input_is_all_placeholders():
    window = TrendAggregator.build_window([], 7, date(2024, 5, 7))
    assert len(window) == 7
    assert all(p.is_placeholder for p in window)
    assert all(p.mood == p.sleep == p.water == p.nutrition == p.stress == 0 for p in window)
    assert window[0].date == date(2024, 5, 1)
    assert window[-1].date == date(2024, 5, 7)


def test_empty_input_defaults_to_today():
    window = TrendAggregator.build_window([])
    assert len(window) == 7
    assert window[-1].date == date.today()


def test_sparse_entries_are_gap_filled():
    entries = [
        _log(date(2024, 5, 7), mood=80, sleep_hours=8),
        _log(date(2024, 5, 1), mood=60, sleep_hours=6),
        _log(date(2024, 5, 4), mood=70, sleep_hours=7),
    ]
    window = TrendAggregator.build_window(entries, 7)

    assert [p.date for p in window] == [date(2024, 5, 1) + timedelta(days=i) for i in range(7)]
    placeholders = [p.date for p in window if p.is_placeholder]
    assert placeholders == [date(2024, 5, 2), date(2024, 5, 3), date(2024, 5, 5), date(2024, 5, 6)]
    assert window[0].mood == 60
    assert window[3].sleep == 7
    assert window[6].mood == 80


def test_extra_entries_are_truncated():
    start = date(2024, 1, 1)
    entries = [_log(start + timedelta(days=i), mood=i) for i in range(30)]
    window = TrendAggregator.build_window(entries, 7)
    assert len(window) == 7
    assert window[0].mood == 23
    assert window[-1].mood == 29
    assert not any(p.is_placeholder for p in window)


@pytest.mark.parametrize("size", [1, 2, 7, 14, 30])
def test_window_length_and_order(size):
    entries = [_log(date(2024, 3, d), mood=50) for d in (3, 9, 1, 20, 9)]
    window = TrendAggregator.build_window(entries, size)
    assert len(window) == size
    assert all(a.date < b.date for a, b in zip(window, window[1:]))


def test_explicit_end_date_drops_later_entries():
    entries = [_log(date(2024, 5, 10), mood=90), _log(date(2024, 5, 2), mood=40)]
    window = TrendAggregator.build_window(entries, 3, end_date=date(2024, 5, 3))
    assert [p.date for p in window] == [date(2024, 5, 1), date(2024, 5, 2), date(2024, 5, 3)]
    assert window[1].mood == 40
    assert all(p.mood != 90 for p in window)


def test_duplicate_dates_last_one_wins():
    entries = [_log(date(2024, 5, 2), mood=40), _log(date(2024, 5, 2), mood=65)]
    window = TrendAggregator.build_window(entries, 2)
    assert len(window) == 2
    assert window[-1].mood == 65


def test_invalid_window_size():
    with pytest.raises(ValueError):
        TrendAggregator.build_window([], 0)


def test_period_change_on_mappings():
    assert TrendAggregator.compute_period_change([{"mood": 50}, {"mood": 75}], "mood") == 50
    assert TrendAggregator.compute_period_change([{"mood": 100}, {"mood": 75}], "mood") == -25


def test_period_change_on_trend_points():
    series = [
        TrendPoint(date=date(2024, 5, 1), sleep=6),
        TrendPoint(date=date(2024, 5, 2), sleep=7),
    ]
    assert TrendAggregator.compute_period_change(series, "sleep") == 17


def test_period_change_guards():
    assert TrendAggregator.compute_period_change([{"mood": 0}, {"mood": 75}], "mood") == 0
    assert TrendAggregator.compute_period_change([{"mood": 75}], "mood") == 0
    assert TrendAggregator.compute_period_change([], "mood") == 0
    assert TrendAggregator.compute_period_change([{"mood": 10}, {"mood": 20}], "unknown") == 0


def test_format_change_sign():
    assert TrendAggregator.format_change(50) == "+50%"
    assert TrendAggregator.format_change(0) == "+0%"
    assert TrendAggregator.format_change(-12) == "-12%"


def test_summarize():
    entries = [
        _log(date(2024, 5, 1), sleep_hours=7, water_consumed=6, mood=60, exercise_duration=20),
        _log(date(2024, 5, 2), sleep_hours=8, water_consumed=7, mood=75, exercise_duration=45),
    ]
    stats = TrendAggregator.summarize(entries)
    assert stats.avg_sleep == 7.5
    assert stats.avg_water == 6.5
    assert stats.avg_mood == 67.5
    assert stats.total_exercise_minutes == 65
    assert stats.logs_count == 2


def test_summarize_empty():
    stats = TrendAggregator.summarize([])
    assert stats.logs_count == 0
    assert stats.avg_sleep == 0
