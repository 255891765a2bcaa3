"""Services for the application."""

from .session import SessionManager
from .data_processor import DataProcessor
from .sportsee import SportSeeAPIError, SportSeeService
from .dashboard import DashboardService

__all__ = [
    "SessionManager",
    "DataProcessor",
    "SportSeeAPIError",
    "SportSeeService",
    "DashboardService",
]
