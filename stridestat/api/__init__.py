"""API endpoints."""

from .auth import router as auth_router
from .activities import router as activities_router
from .dashboard import router as dashboard_router

__all__ = ["auth_router", "activities_router", "dashboard_router"]
