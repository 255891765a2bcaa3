"""User account models."""

import datetime as dt
from typing import Optional
from pydantic import BaseModel, Field


class LoginResponse(BaseModel):
    """Token issued by the SportSee backend."""

    token: str
    user_id: str = Field(alias="userId")

    class Config:
        populate_by_name = True


class UserProfile(BaseModel):
    """Profile of the authenticated user."""

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    created_at: dt.date = Field(alias="createdAt", description="Account creation date")
    age: Optional[int] = None
    weight: Optional[float] = Field(None, description="Weight in kg")
    height: Optional[int] = Field(None, description="Height in cm")
    profile_picture: Optional[str] = Field(None, alias="profilePicture")
    weekly_goal: Optional[int] = Field(None, alias="weeklyGoal", description="Sessions per week")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "firstName": "Sophie",
                "lastName": "Martin",
                "createdAt": "2025-01-01",
                "age": 32,
                "weight": 60,
                "height": 165,
                "profilePicture": "http://localhost:8000/images/sophie.jpg",
            }
        }


class UserStatistics(BaseModel):
    """Lifetime statistics as reported by the backend."""

    total_distance: str = Field("0", alias="totalDistance")
    total_sessions: int = Field(0, alias="totalSessions")
    total_duration: int = Field(0, alias="totalDuration", description="Minutes")

    class Config:
        populate_by_name = True


class UserInfo(BaseModel):
    """Payload of the user-info endpoint."""

    profile: UserProfile
    statistics: UserStatistics = Field(default_factory=UserStatistics)
