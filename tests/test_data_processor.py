from datetime import date, datetime

import pytest

from stridestat.services import DataProcessor, calendar
from stridestat.services.data_processor import round_bpm, round_distance, split_minutes
from tests.conftest import CREATED_AT, NOW, make_activity


def test_parse_activity_camel_case():
    activity = DataProcessor.parse_activity(
        {
            "date": "2025-12-22",
            "distance": 5.25,
            "duration": 32,
            "heartRate": {"min": 140, "max": 178, "average": 163},
            "caloriesBurned": 410,
        }
    )
    assert activity.date == date(2025, 12, 22)
    assert activity.heart_rate.average == 163
    assert activity.calories_burned == 410


def test_parse_activity_invalid():
    with pytest.raises(ValueError):
        DataProcessor.parse_activity({"date": "2025-12-22", "distance": -1})


def test_rounding_policies():
    assert round_distance(8.25) == 8.3
    assert round_distance(5.25 + 3.05) == 8.3
    assert round_bpm(156.5) == 157
    assert round_bpm(156.49) == 156


def test_split_minutes():
    duration = split_minutes(135)
    assert (duration.hours, duration.minutes) == (2, 15)
    assert duration.formatted == "2h 15min"


def test_filter_by_window_is_inclusive(activities):
    window = calendar.week_window(date(2025, 12, 24))
    extra = make_activity(date(2025, 12, 28))
    before = make_activity(date(2025, 12, 21))
    result = DataProcessor.filter_by_window(activities + [extra, before], window)
    assert [a.date for a in result] == [date(2025, 12, 22), date(2025, 12, 23), date(2025, 12, 28)]


def test_daily_heart_rate(activities):
    points, window = DataProcessor.daily_heart_rate(activities, NOW)

    assert window.start_date == datetime(2025, 12, 22)
    assert len(points) == 7
    assert [p.day_label for p in points] == ["Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"]
    assert points[0].date == "2025-12-22"
    assert (points[0].min, points[0].max, points[0].average) == (140, 178, 163)
    assert points[1].average == 150
    for point in points[2:]:
        assert point.min is None and point.max is None and point.average is None


def test_daily_heart_rate_without_data():
    points, _ = DataProcessor.daily_heart_rate([], date(2025, 12, 24))
    assert len(points) == 7
    assert all(p.average is None for p in points)
    assert points[-1].date == "2025-12-28"


def test_daily_heart_rate_first_activity_of_a_day_wins():
    first = make_activity(date(2025, 12, 24), hr=(120, 150, 130))
    second = make_activity(date(2025, 12, 24), hr=(150, 190, 170))
    points, _ = DataProcessor.daily_heart_rate([first, second], NOW)
    assert points[2].average == 130


def test_weekly_distance_series(activities):
    points, window = DataProcessor.weekly_distance_series(activities, NOW)

    assert window.start_date == datetime(2025, 12, 1)
    assert [p.week_label for p in points] == ["S1", "S2", "S3", "S4"]
    assert [p.total_km for p in points] == [0, 10.0, 0, 8.3]
    assert points[0].start_date == "2025-12-01"
    assert points[0].end_date == "2025-12-07"
    assert points[3].end_date == "2025-12-28"


def test_weekly_totals_match_window_sum():
    activities = [
        make_activity(date(2025, 12, 1), 4.0),
        make_activity(date(2025, 12, 9), 6.5),
        make_activity(date(2025, 12, 9), 2.5),
        make_activity(date(2025, 12, 20), 12.0),
        make_activity(date(2025, 12, 28), 7.0),
        make_activity(date(2025, 11, 30), 99.0),
    ]
    points, window = DataProcessor.weekly_distance_series(activities, date(2025, 12, 24))
    subset = DataProcessor.filter_by_window(activities, window)
    assert sum(p.total_km for p in points) == pytest.approx(sum(a.distance for a in subset))


def test_averages(activities):
    week = activities[:2]
    assert DataProcessor.average_bpm(week) == 157
    assert DataProcessor.average_distance(activities) == 6.1


def test_averages_on_empty_input():
    assert DataProcessor.average_bpm([]) == 0
    assert DataProcessor.average_distance([]) == 0


def test_period_statistics(activities):
    stats = DataProcessor.period_statistics(activities, CREATED_AT, NOW)

    assert stats.total_distance == 18.3
    assert stats.total_calories == 1360
    assert stats.total_minutes == 112
    assert stats.session_count == 3
    assert stats.rest_days == 21
    assert stats.formatted_duration == "1h 52min"


def test_period_statistics_excludes_outside_activities(activities):
    outside = [
        make_activity(date(2025, 11, 30), 50.0),
        make_activity(date(2025, 12, 25), 50.0),
    ]
    stats = DataProcessor.period_statistics(activities + outside, CREATED_AT, NOW)
    assert stats.session_count == 3
    assert stats.total_distance == 18.3


def test_period_statistics_counts_distinct_days():
    activities = [make_activity(date(2025, 12, 3)), make_activity(date(2025, 12, 3))]
    stats = DataProcessor.period_statistics(activities, CREATED_AT, NOW)
    assert stats.session_count == 2
    assert stats.rest_days == 23


def test_period_statistics_empty():
    stats = DataProcessor.period_statistics([], CREATED_AT, NOW)
    assert stats.total_distance == 0
    assert stats.total_calories == 0
    assert stats.total_minutes == 0
    assert stats.session_count == 0
    assert stats.rest_days == 24
    assert stats.duration.formatted == "0h 0min"


def test_period_statistics_future_creation_date():
    stats = DataProcessor.period_statistics([], date(2026, 1, 10), NOW)
    assert stats.rest_days == 0


def test_activities_to_dataframe(activities):
    df = DataProcessor.activities_to_dataframe(activities)
    assert len(df) == 3
    assert df["hr_average"].tolist() == [163, 150, 160]
    assert DataProcessor.activities_to_dataframe([]).empty
