"""SportSee backend service."""

from datetime import date
from typing import Optional
import logging
import httpx
from stridestat.models.activity import ActivitySession
from stridestat.models.user import LoginResponse, UserInfo
from stridestat.services.data_processor import DataProcessor

logger = logging.getLogger(__name__)


class SportSeeAPIError(ValueError):
    """Error reported by, or while reaching, the SportSee backend."""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message)
        self.message = message
        self.status = status

    @property
    def is_auth_error(self) -> bool:
        return self.status in (401, 403)


class SportSeeService:
    """Client for the SportSee REST API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize SportSee service.

        Args:
            base_url: Root URL of the backend
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        )

    @staticmethod
    def _auth_headers(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def _error_message(response: httpx.Response, default: str) -> str:
        try:
            payload = response.json()
        except ValueError:
            return default
        if isinstance(payload, dict) and payload.get("message"):
            return str(payload["message"])
        return default

    async def login(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate against the backend.

        Args:
            username: SportSee username
            password: SportSee password

        Returns:
            LoginResponse holding the bearer token

        Raises:
            SportSeeAPIError: If credentials are rejected or the backend is unreachable
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    "/api/login", json={"username": username, "password": password}
                )
        except httpx.HTTPError as e:
            logger.error(f"SportSee login request failed: {e}")
            raise SportSeeAPIError(
                "Unable to reach the server. Check that the backend is running.", 503
            )

        if response.is_error:
            message = self._error_message(response, "Invalid credentials")
            logger.warning(f"SportSee login rejected for {username}: {response.status_code}")
            raise SportSeeAPIError(message, response.status_code)

        logger.info(f"Successfully logged in to SportSee as {username}")
        return LoginResponse.model_validate(response.json())

    async def _get(self, path: str, token: str, failure: str, params: Optional[dict] = None):
        try:
            async with self._client() as client:
                response = await client.get(
                    path, headers=self._auth_headers(token), params=params
                )
        except httpx.HTTPError as e:
            logger.error(f"Request to {path} failed: {e}")
            raise SportSeeAPIError(failure, 503)

        if response.status_code in (401, 403):
            raise SportSeeAPIError("Session expired. Please log in again.", response.status_code)
        if response.is_error:
            logger.error(f"{path} answered {response.status_code}")
            raise SportSeeAPIError(failure, response.status_code)

        try:
            return response.json()
        except ValueError:
            raise SportSeeAPIError(f"{failure}: invalid JSON", 502)

    async def get_user_info(self, token: str) -> UserInfo:
        """
        Get the profile of the authenticated user.

        Raises:
            SportSeeAPIError: On backend or transport error
        """
        payload = await self._get(
            "/api/user-info", token, "Failed to retrieve user information"
        )
        try:
            return UserInfo.model_validate(payload)
        except ValueError as e:
            raise SportSeeAPIError(f"Invalid user information: {e}", 502)

    async def get_activities(
        self, token: str, start_week: date, end_week: date
    ) -> list[ActivitySession]:
        """
        Get running sessions between two dates.

        Args:
            token: Bearer token
            start_week: First day of the requested period
            end_week: Last day of the requested period

        Returns:
            List of activities

        Raises:
            SportSeeAPIError: On backend or transport error
        """
        payload = await self._get(
            "/api/user-activity",
            token,
            "Failed to retrieve activities",
            params={"startWeek": start_week.isoformat(), "endWeek": end_week.isoformat()},
        )
        try:
            activities = [DataProcessor.parse_activity(raw) for raw in payload]
        except (TypeError, ValueError) as e:
            raise SportSeeAPIError(f"Invalid activity data: {e}", 502)

        logger.info(f"Retrieved {len(activities)} activities from {start_week} to {end_week}")
        return activities

    async def get_all_activities_since_creation(
        self, token: str, created_at: date, today: date
    ) -> list[ActivitySession]:
        """Get every activity from account creation up to today."""
        return await self.get_activities(token, created_at, today)
