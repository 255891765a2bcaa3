"""Activities endpoints."""

import logging
from datetime import datetime
from fastapi import APIRouter, Depends
from stridestat.models.dashboard import PeriodStatistics
from stridestat.services import DataProcessor
from .deps import UserData, get_now, load_user_data

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("/list")
async def list_activities(data: UserData = Depends(load_user_data)):
    """
    Get every activity since account creation.

    Returns:
        Activities and count
    """
    activities = sorted(data.activities, key=lambda a: a.date)
    return {
        "activities": [a.model_dump() for a in activities],
        "count": len(activities),
    }


@router.get("/statistics")
async def get_statistics(
    data: UserData = Depends(load_user_data),
    now: datetime = Depends(get_now),
) -> PeriodStatistics:
    """Get totals and rest days since account creation."""
    statistics = DataProcessor.period_statistics(
        data.activities, data.user.profile.created_at, now
    )
    logger.info(
        f"Computed statistics over {statistics.session_count} sessions for user {data.user.profile.first_name}"
    )
    return statistics
