"""Data models for the application."""

from .activity import ActivitySession, DateWindow, HeartRate
from .user import LoginResponse, UserInfo, UserProfile, UserStatistics
from .dashboard import (
    DailyHeartRatePoint,
    DashboardOverview,
    DistanceFourWeekView,
    DurationBreakdown,
    HeartRateWeekView,
    NavigationState,
    PeriodStatistics,
    ProfileOverview,
    WeeklyDistancePoint,
    WeeklySummary,
)

__all__ = [
    "ActivitySession",
    "DateWindow",
    "HeartRate",
    "LoginResponse",
    "UserInfo",
    "UserProfile",
    "UserStatistics",
    "DailyHeartRatePoint",
    "DashboardOverview",
    "DistanceFourWeekView",
    "DurationBreakdown",
    "HeartRateWeekView",
    "NavigationState",
    "PeriodStatistics",
    "ProfileOverview",
    "WeeklyDistancePoint",
    "WeeklySummary",
]
