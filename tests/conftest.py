"""Pytest configuration and fixtures."""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from main import app
from stridestat.api.deps import get_now, get_sportsee_service
from stridestat.models.activity import ActivitySession
from stridestat.models.user import LoginResponse, UserInfo, UserProfile
from stridestat.services import SportSeeAPIError

# Wednesday
NOW = datetime(2025, 12, 24, 10, 30)
CREATED_AT = date(2025, 12, 1)


def make_activity(day, distance=5.0, duration=30, hr=(140, 170, 155), calories=300):
    """Build an ActivitySession from the backend's camelCase payload."""
    return ActivitySession.model_validate(
        {
            "date": day.isoformat() if isinstance(day, date) else day,
            "distance": distance,
            "duration": duration,
            "heartRate": {"min": hr[0], "max": hr[1], "average": hr[2]},
            "caloriesBurned": calories,
        }
    )


@pytest.fixture
def profile():
    return UserProfile(
        first_name="Sophie",
        last_name="Martin",
        created_at=CREATED_AT,
        age=32,
        weight=60,
        height=165,
    )


@pytest.fixture
def activities():
    return [
        make_activity(date(2025, 12, 22), 5.25, 32, (140, 178, 163), 410),
        make_activity(date(2025, 12, 23), 3.05, 20, (135, 170, 150), 250),
        make_activity(date(2025, 12, 10), 10.0, 60, (130, 180, 160), 700),
    ]


class FakeSportSeeService:
    """In-memory stand-in for the SportSee backend client."""

    def __init__(self, profile, activities):
        self.user = UserInfo(profile=profile)
        self.activities = activities
        self.error = None
        self.calls = []

    async def login(self, username, password):
        self.calls.append(("login", username))
        if password != "secret":
            raise SportSeeAPIError("Invalid credentials", 401)
        return LoginResponse(token="token-123", user_id="42")

    async def get_user_info(self, token):
        self.calls.append(("user_info", token))
        if self.error:
            raise self.error
        return self.user

    async def get_all_activities_since_creation(self, token, created_at, today):
        self.calls.append(("activities", created_at, today))
        return list(self.activities)


@pytest.fixture
def fake_service(profile, activities):
    return FakeSportSeeService(profile, activities)


@pytest.fixture
def client(fake_service):
    app.dependency_overrides[get_sportsee_service] = lambda: fake_service
    app.dependency_overrides[get_now] = lambda: NOW
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_client(client):
    response = client.post(
        "/auth/login",
        data={"username": "sophie", "password": "secret"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client
