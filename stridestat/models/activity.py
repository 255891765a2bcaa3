"""Activity data models."""

import datetime as dt
from pydantic import BaseModel, Field


class HeartRate(BaseModel):
    """Heart rate measured during a session, in bpm."""

    min: int = Field(description="Lowest heart rate in bpm")
    max: int = Field(description="Highest heart rate in bpm")
    average: int = Field(description="Average heart rate in bpm")


class ActivitySession(BaseModel):
    """Running session as returned by the SportSee backend."""

    date: dt.date
    distance: float = Field(ge=0, description="Distance in kilometers")
    duration: int = Field(ge=0, description="Duration in minutes")
    heart_rate: HeartRate = Field(alias="heartRate")
    calories_burned: int = Field(0, ge=0, alias="caloriesBurned")

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "date": "2025-12-22",
                "distance": 5.25,
                "duration": 32,
                "heartRate": {"min": 140, "max": 178, "average": 163},
                "caloriesBurned": 410,
            }
        }


class DateWindow(BaseModel):
    """Inclusive date range used to filter activities."""

    start_date: dt.datetime
    end_date: dt.datetime

    class Config:
        frozen = True

    def contains(self, moment: dt.datetime) -> bool:
        """Check whether a moment falls inside the window (bounds included)."""
        return self.start_date <= moment <= self.end_date
