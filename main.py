"""Main FastAPI application for StrideStat."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from stridestat.api import auth_router, activities_router, dashboard_router
from stridestat.api.deps import SESSION_COOKIE
from stridestat.config import get_settings
from stridestat.services import SessionManager, SportSeeService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    settings = get_settings()

    logger.info("Starting StrideStat application...")
    session_manager = SessionManager(timeout_minutes=settings.session_timeout_minutes)
    await session_manager.start_cleanup_task()
    app.state.session_manager = session_manager
    app.state.sportsee_service = SportSeeService(
        base_url=settings.api_base_url, timeout=settings.api_timeout
    )
    logger.info(f"Using SportSee backend at {settings.api_base_url}")

    yield

    logger.info("Shutting down StrideStat application...")
    await session_manager.stop_cleanup_task()


app = FastAPI(
    title="StrideStat",
    description="Running dashboard built on the SportSee backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(activities_router)


@app.get("/")
async def index(request: Request):
    """Entry point: go to the dashboard when already logged in."""
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id:
        session_manager: SessionManager = request.app.state.session_manager
        if session_manager.get_session(session_id):
            return RedirectResponse(url="/dashboard", status_code=303)

    return {"service": "StrideStat", "authenticated": False, "login": "/auth/login"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "StrideStat"}


def main():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
