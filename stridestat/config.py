"""Application settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # SportSee backend
    api_base_url: str = "http://localhost:8000"
    api_timeout: float = 10.0

    # Sessions
    session_timeout_minutes: int = 60
    session_cookie_max_age: int = 3600

    # Display
    locale: str = "fr"
    default_weekly_goal: int = 4

    class Config:
        env_prefix = "STRIDESTAT_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
