"""Authentication endpoints."""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse
from stridestat.config import Settings, get_settings
from stridestat.services import SessionManager, SportSeeAPIError, SportSeeService
from .deps import SESSION_COOKIE, get_session_manager, get_sportsee_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    session_manager: SessionManager = Depends(get_session_manager),
    service: SportSeeService = Depends(get_sportsee_service),
    settings: Settings = Depends(get_settings),
):
    """
    Login to the SportSee backend.

    Args:
        username: SportSee username
        password: SportSee password

    Returns:
        Redirect to dashboard on success
    """
    if not username or not password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    try:
        credentials = await service.login(username, password)
    except SportSeeAPIError as e:
        logger.error(f"Login failed for {username}: {e}")
        raise HTTPException(status_code=e.status, detail=e.message)
    except Exception as e:
        logger.error(f"Unexpected error during login: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    session_id = session_manager.create_session(
        {
            "token": credentials.token,
            "user_id": credentials.user_id,
            "username": username,
        }
    )
    logger.info(f"User {username} logged in successfully")

    redirect_response = RedirectResponse(url="/dashboard", status_code=303)
    redirect_response.set_cookie(
        key=SESSION_COOKIE,
        value=session_id,
        httponly=True,
        max_age=settings.session_cookie_max_age,
        samesite="lax",
    )
    return redirect_response


@router.post("/logout")
async def logout(request: Request, session_manager: SessionManager = Depends(get_session_manager)):
    """Logout and destroy session."""
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id and session_manager.delete_session(session_id):
        logger.info("Session closed")

    redirect_response = RedirectResponse(url="/", status_code=303)
    redirect_response.delete_cookie(SESSION_COOKIE)
    return redirect_response


@router.get("/status")
async def status(request: Request, session_manager: SessionManager = Depends(get_session_manager)):
    """Check authentication status."""
    session_id = request.cookies.get(SESSION_COOKIE)
    session = session_manager.get_session(session_id) if session_id else None

    if not session:
        return {"authenticated": False}

    return {
        "authenticated": True,
        "username": session.get("username"),
        "user_id": session.get("user_id"),
        "active_sessions": session_manager.get_active_session_count(),
    }
