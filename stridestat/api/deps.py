"""Shared request dependencies."""

import logging
from dataclasses import dataclass
from datetime import datetime
from fastapi import Depends, HTTPException, Request
from stridestat.config import Settings, get_settings
from stridestat.models.activity import ActivitySession
from stridestat.models.user import UserInfo
from stridestat.services import DashboardService, SessionManager, SportSeeAPIError, SportSeeService

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session_id"
CLEAR_COOKIE_HEADER = f'{SESSION_COOKIE}=""; Max-Age=0; Path=/; HttpOnly; SameSite=lax'


@dataclass
class UserData:
    """Data fetched from the backend for one request."""

    session_id: str
    user: UserInfo
    activities: list[ActivitySession]


def get_now() -> datetime:
    """Clock used by every view; overridden in tests."""
    return datetime.now()


def get_session_manager(request: Request) -> SessionManager:
    return request.app.state.session_manager


def get_sportsee_service(request: Request) -> SportSeeService:
    return request.app.state.sportsee_service


def get_session_data(request: Request) -> dict:
    """Helper to get and validate session."""
    session_manager = get_session_manager(request)
    session_id = request.cookies.get(SESSION_COOKIE)

    if not session_id:
        raise HTTPException(status_code=401, detail="Not authenticated")

    session = session_manager.get_session(session_id)
    if not session or not session.get("token"):
        raise HTTPException(status_code=401, detail="Session expired")

    return session


async def load_user_data(
    request: Request,
    session: dict = Depends(get_session_data),
    service: SportSeeService = Depends(get_sportsee_service),
    now: datetime = Depends(get_now),
) -> UserData:
    """
    Fetch the profile and every activity since account creation.

    A token rejected by the backend destroys the local session.
    """
    session_id = request.cookies.get(SESSION_COOKIE)
    token = session["token"]

    try:
        user = await service.get_user_info(token)
        activities = await service.get_all_activities_since_creation(
            token, user.profile.created_at, now.date()
        )
    except SportSeeAPIError as e:
        if e.is_auth_error:
            logger.info(f"Backend rejected token, closing session: {e}")
            get_session_manager(request).delete_session(session_id)
            raise HTTPException(
                status_code=401,
                detail=e.message,
                headers={"Set-Cookie": CLEAR_COOKIE_HEADER},
            )
        logger.error(f"Error loading user data: {e}")
        raise HTTPException(status_code=e.status, detail=e.message)

    return UserData(session_id=session_id, user=user, activities=activities)


def get_dashboard_service(
    data: UserData = Depends(load_user_data),
    now: datetime = Depends(get_now),
    settings: Settings = Depends(get_settings),
) -> DashboardService:
    return DashboardService(
        profile=data.user.profile,
        activities=data.activities,
        now=now,
        locale=settings.locale,
        default_weekly_goal=settings.default_weekly_goal,
    )
