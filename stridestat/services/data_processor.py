"""Data processing service for activities."""

import math
from datetime import date, datetime, timedelta
from typing import Any, Union
import pandas as pd
from pydantic import ValidationError
from stridestat.models.activity import ActivitySession, DateWindow
from stridestat.models.dashboard import (
    DailyHeartRatePoint,
    DurationBreakdown,
    PeriodStatistics,
    WeeklyDistancePoint,
)
from stridestat.services import calendar
from stridestat.services.date_format import day_labels, week_label

# Rounding and empty-input policies
DISTANCE_DECIMALS = 1
EMPTY_AVERAGE = 0

DATAFRAME_COLUMNS = [
    "date",
    "distance",
    "duration",
    "calories_burned",
    "hr_min",
    "hr_max",
    "hr_average",
]


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round with halves going up, on the value scaled by ``10 ** decimals``."""
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def round_distance(value: float) -> float:
    return round_half_up(value, DISTANCE_DECIMALS)


def round_bpm(value: float) -> int:
    return int(round_half_up(value))


def split_minutes(total_minutes: int) -> DurationBreakdown:
    """Split minutes into hours and minutes, e.g. 135 -> "2h 15min"."""
    hours, minutes = divmod(int(total_minutes), 60)
    return DurationBreakdown(hours=hours, minutes=minutes, formatted=f"{hours}h {minutes}min")


class DataProcessor:
    """Filter and aggregate running activities."""

    @staticmethod
    def parse_activity(raw_activity: dict[str, Any]) -> ActivitySession:
        """
        Parse a raw backend record into an ActivitySession.

        Args:
            raw_activity: Activity as returned by the SportSee API

        Returns:
            ActivitySession instance

        Raises:
            ValueError: If the record is missing fields or holds invalid values
        """
        try:
            return ActivitySession.model_validate(raw_activity)
        except ValidationError as e:
            raise ValueError(f"Invalid activity record: {e}")

    @staticmethod
    def filter_by_window(
        activities: list[ActivitySession], window: DateWindow
    ) -> list[ActivitySession]:
        """
        Keep activities whose day falls inside a window.

        Args:
            activities: Activities to filter
            window: Inclusive window

        Returns:
            Filtered list, input order preserved
        """
        return [a for a in activities if window.contains(calendar.start_of_day(a.date))]

    @staticmethod
    def daily_heart_rate(
        activities: list[ActivitySession],
        reference_date: Union[date, datetime],
        locale: str = "fr",
    ) -> tuple[list[DailyHeartRatePoint], DateWindow]:
        """
        Get heart rate for each day of a calendar week.

        Always returns 7 points, Monday first. When several activities share
        a day only the first one is charted.

        Args:
            activities: Activities to look into
            reference_date: Any date inside the wanted week
            locale: Locale of the day labels

        Returns:
            Tuple of (daily points, week window)
        """
        window = calendar.week_window(reference_date)
        monday = window.start_date.date()

        by_day: dict[date, ActivitySession] = {}
        for activity in activities:
            by_day.setdefault(activity.date, activity)

        points = []
        for offset, label in enumerate(day_labels(locale)):
            current_day = monday + timedelta(days=offset)
            activity = by_day.get(current_day)
            heart_rate = activity.heart_rate if activity else None
            points.append(
                DailyHeartRatePoint(
                    day_label=label,
                    min=heart_rate.min if heart_rate else None,
                    max=heart_rate.max if heart_rate else None,
                    average=heart_rate.average if heart_rate else None,
                    date=current_day.isoformat(),
                )
            )

        return points, window

    @staticmethod
    def weekly_distance_series(
        activities: list[ActivitySession],
        reference_date: Union[date, datetime],
        locale: str = "fr",
    ) -> tuple[list[WeeklyDistancePoint], DateWindow]:
        """
        Get distance per calendar week over four weeks.

        Always returns 4 points, oldest week first; weeks without activity
        report 0 km.

        Args:
            activities: Activities to aggregate
            reference_date: Any date inside the most recent week
            locale: Locale of the week labels

        Returns:
            Tuple of (weekly points, four-week window)
        """
        window = calendar.four_week_window(reference_date)

        points = []
        for index in range(calendar.WEEKS_PER_PERIOD):
            week = calendar.week_window(window.start_date + timedelta(weeks=index))
            week_activities = DataProcessor.filter_by_window(activities, week)
            total_km = sum(a.distance for a in week_activities)
            points.append(
                WeeklyDistancePoint(
                    week_label=week_label(index + 1, locale),
                    total_km=round_distance(total_km),
                    start_date=week.start_date.date().isoformat(),
                    end_date=week.end_date.date().isoformat(),
                )
            )

        return points, window

    @staticmethod
    def average_bpm(activities: list[ActivitySession]) -> int:
        """Mean of the average heart rates, 0 when there is no activity."""
        if not activities:
            return EMPTY_AVERAGE
        total = sum(a.heart_rate.average for a in activities)
        return round_bpm(total / len(activities))

    @staticmethod
    def average_distance(activities: list[ActivitySession]) -> float:
        """Mean distance per session in km, 0 when there is no activity."""
        if not activities:
            return EMPTY_AVERAGE
        total = sum(a.distance for a in activities)
        return round_distance(total / len(activities))

    @staticmethod
    def period_statistics(
        activities: list[ActivitySession],
        created_at: Union[date, datetime],
        now: datetime,
    ) -> PeriodStatistics:
        """
        Calculate statistics from account creation up to today.

        Args:
            activities: All activities of the user
            created_at: Account creation date
            now: Current moment

        Returns:
            PeriodStatistics instance
        """
        window = DateWindow(
            start_date=calendar.start_of_day(created_at),
            end_date=calendar.end_of_day(now),
        )
        df = DataProcessor.activities_to_dataframe(
            DataProcessor.filter_by_window(activities, window)
        )
        days_in_period = max(0, calendar.inclusive_day_count(created_at, now))

        if df.empty:
            return PeriodStatistics(
                total_distance=0,
                total_calories=0,
                total_minutes=0,
                session_count=0,
                rest_days=days_in_period,
                duration=split_minutes(0),
            )

        total_minutes = int(df["duration"].sum())
        active_days = int(df["date"].nunique())

        return PeriodStatistics(
            total_distance=round_distance(float(df["distance"].sum())),
            total_calories=int(df["calories_burned"].sum()),
            total_minutes=total_minutes,
            session_count=len(df),
            rest_days=max(0, days_in_period - active_days),
            duration=split_minutes(total_minutes),
        )

    @staticmethod
    def activities_to_dataframe(activities: list[ActivitySession]) -> pd.DataFrame:
        """
        Convert activities to a flat pandas DataFrame.

        Args:
            activities: List of activities

        Returns:
            DataFrame with one row per activity
        """
        if not activities:
            return pd.DataFrame(columns=DATAFRAME_COLUMNS)

        rows = [
            {
                "date": a.date,
                "distance": a.distance,
                "duration": a.duration,
                "calories_burned": a.calories_burned,
                "hr_min": a.heart_rate.min,
                "hr_max": a.heart_rate.max,
                "hr_average": a.heart_rate.average,
            }
            for a in activities
        ]
        return pd.DataFrame(rows, columns=DATAFRAME_COLUMNS)
