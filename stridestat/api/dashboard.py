"""Dashboard endpoints."""

import logging
from fastapi import APIRouter, Depends, Query
from stridestat.models.dashboard import (
    DashboardOverview,
    DistanceFourWeekView,
    HeartRateWeekView,
    ProfileOverview,
    WeeklySummary,
)
from stridestat.services import DashboardService
from .deps import get_dashboard_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["dashboard"])


@router.get("/dashboard")
async def dashboard(
    heart_rate_offset: int = Query(0, description="Weeks from the current week, 0 or negative"),
    distance_offset: int = Query(0, description="Weeks from the current week, 0 or negative"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardOverview:
    """Main dashboard data: profile card, both charts and the current week."""
    return service.overview(heart_rate_offset, distance_offset)


@router.get("/dashboard/heart-rate")
async def heart_rate(
    offset: int = Query(0, description="Weeks from the current week, 0 or negative"),
    service: DashboardService = Depends(get_dashboard_service),
) -> HeartRateWeekView:
    """Heart rate chart of one calendar week."""
    return service.heart_rate_view(offset)


@router.get("/dashboard/distance")
async def distance(
    offset: int = Query(0, description="Weeks from the current week, 0 or negative"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DistanceFourWeekView:
    """Distance chart of four calendar weeks."""
    return service.distance_view(offset)


@router.get("/dashboard/weekly-summary")
async def weekly_summary(service: DashboardService = Depends(get_dashboard_service)) -> WeeklySummary:
    return service.weekly_summary()


@router.get("/profile")
async def profile(service: DashboardService = Depends(get_dashboard_service)) -> ProfileOverview:
    """Profile page data with statistics since account creation."""
    return service.profile_overview()
