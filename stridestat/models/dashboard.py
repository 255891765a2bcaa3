"""View models produced for the dashboard and profile pages."""

from typing import Optional
from pydantic import BaseModel, Field
from .activity import DateWindow
from .user import UserProfile


class DailyHeartRatePoint(BaseModel):
    """Heart rate of a single day; values are None when nothing was recorded."""

    day_label: str
    min: Optional[int] = None
    max: Optional[int] = None
    average: Optional[int] = None
    date: str = Field(description="ISO calendar date (YYYY-MM-DD)")


class WeeklyDistancePoint(BaseModel):
    """Distance covered during one calendar week."""

    week_label: str
    total_km: float
    start_date: str
    end_date: str


class DurationBreakdown(BaseModel):
    hours: int
    minutes: int
    formatted: str


class PeriodStatistics(BaseModel):
    """Totals computed since account creation."""

    total_distance: float = Field(description="Distance in km, 1 decimal")
    total_calories: int
    total_minutes: int
    session_count: int
    rest_days: int
    duration: DurationBreakdown

    @property
    def formatted_duration(self) -> str:
        return self.duration.formatted


class NavigationState(BaseModel):
    """Which way a chart may move from its current offset."""

    offset: int
    step: int
    can_go_backward: bool
    can_go_forward: bool
    previous_offset: Optional[int] = None
    next_offset: Optional[int] = None


class HeartRateWeekView(BaseModel):
    """Heart rate chart for one calendar week."""

    points: list[DailyHeartRatePoint]
    window: DateWindow
    average_bpm: int
    date_range: str
    navigation: NavigationState


class DistanceFourWeekView(BaseModel):
    """Distance chart for four consecutive calendar weeks."""

    points: list[WeeklyDistancePoint]
    window: DateWindow
    average_distance: float
    date_range: str
    navigation: NavigationState


class WeeklySummary(BaseModel):
    """Progress of the current calendar week."""

    window: DateWindow
    period_label: str
    sessions_completed: int
    weekly_goal: int
    sessions_remaining: int
    total_duration: int = Field(description="Minutes")
    total_distance: float = Field(description="Kilometers, 1 decimal")


class ProfileOverview(BaseModel):
    """Profile card and statistics since account creation."""

    profile: UserProfile
    member_since: str
    statistics: PeriodStatistics


class DashboardOverview(BaseModel):
    """Everything the dashboard page displays."""

    profile: UserProfile
    member_since: str
    total_distance: float
    heart_rate: HeartRateWeekView
    distance: DistanceFourWeekView
    weekly_summary: WeeklySummary
