"""Dashboard view service.

Builds the chart and summary view models from an already fetched activity
list, the user profile and an explicit current moment.
"""

import logging
from datetime import datetime

from stridestat.models.activity import ActivitySession
from stridestat.models.dashboard import (
    DashboardOverview,
    DistanceFourWeekView,
    HeartRateWeekView,
    ProfileOverview,
    WeeklySummary,
)
from stridestat.models.user import UserProfile
from stridestat.services import calendar
from stridestat.services.data_processor import DataProcessor, round_distance
from stridestat.services.date_format import format_date_long, format_date_range, format_period

logger = logging.getLogger(__name__)


class DashboardService:
    """Service for dashboard view models."""

    def __init__(
        self,
        profile: UserProfile,
        activities: list[ActivitySession],
        now: datetime,
        locale: str = "fr",
        default_weekly_goal: int = 4,
    ):
        """Initialize dashboard service.

        Args:
            profile: Profile of the user, supplies the account creation date.
            activities: Every activity since account creation.
            now: Current moment, used as the reference for offset 0.
            locale: Locale of labels and dates.
            default_weekly_goal: Goal used when the profile defines none.
        """
        self.profile = profile
        self.activities = activities
        self.now = now
        self.locale = locale
        self.default_weekly_goal = default_weekly_goal

    @property
    def created_at(self):
        return self.profile.created_at

    def heart_rate_view(self, offset: int = 0) -> HeartRateWeekView:
        """Heart rate per day of the week ``offset`` weeks away from now."""
        offset = calendar.clamp_offset(offset)
        reference = calendar.offset_date(self.now, offset)
        points, window = DataProcessor.daily_heart_rate(self.activities, reference, self.locale)
        week_activities = DataProcessor.filter_by_window(self.activities, window)

        return HeartRateWeekView(
            points=points,
            window=window,
            average_bpm=DataProcessor.average_bpm(week_activities),
            date_range=format_date_range(window.start_date, window.end_date, self.locale),
            navigation=calendar.navigation_state(
                offset, calendar.HEART_RATE_STEP, window, self.created_at
            ),
        )

    def distance_view(self, offset: int = 0) -> DistanceFourWeekView:
        """Distance per week over the four weeks ending ``offset`` weeks away from now."""
        offset = calendar.clamp_offset(offset)
        reference = calendar.offset_date(self.now, offset)
        points, window = DataProcessor.weekly_distance_series(
            self.activities, reference, self.locale
        )
        period_activities = DataProcessor.filter_by_window(self.activities, window)

        return DistanceFourWeekView(
            points=points,
            window=window,
            average_distance=DataProcessor.average_distance(period_activities),
            date_range=format_date_range(window.start_date, window.end_date, self.locale),
            navigation=calendar.navigation_state(
                offset, calendar.DISTANCE_STEP, window, self.created_at
            ),
        )

    def weekly_summary(self) -> WeeklySummary:
        """Sessions, duration and distance of the current calendar week."""
        window = calendar.week_window(self.now)
        week_activities = DataProcessor.filter_by_window(self.activities, window)

        goal = self.profile.weekly_goal
        if goal is None:
            goal = self.default_weekly_goal
        completed = len(week_activities)

        return WeeklySummary(
            window=window,
            period_label=format_period(window.start_date, window.end_date, self.locale),
            sessions_completed=completed,
            weekly_goal=goal,
            sessions_remaining=max(0, goal - completed),
            total_duration=sum(a.duration for a in week_activities),
            total_distance=round_distance(sum(a.distance for a in week_activities)),
        )

    def profile_overview(self) -> ProfileOverview:
        return ProfileOverview(
            profile=self.profile,
            member_since=format_date_long(self.created_at, self.locale),
            statistics=DataProcessor.period_statistics(self.activities, self.created_at, self.now),
        )

    def overview(self, heart_rate_offset: int = 0, distance_offset: int = 0) -> DashboardOverview:
        """Assemble every block of the dashboard page."""
        statistics = DataProcessor.period_statistics(self.activities, self.created_at, self.now)
        logger.debug(
            f"Dashboard built from {len(self.activities)} activities "
            f"(heart rate offset {heart_rate_offset}, distance offset {distance_offset})"
        )
        return DashboardOverview(
            profile=self.profile,
            member_since=format_date_long(self.created_at, self.locale),
            total_distance=statistics.total_distance,
            heart_rate=self.heart_rate_view(heart_rate_offset),
            distance=self.distance_view(distance_offset),
            weekly_summary=self.weekly_summary(),
        )
