"""Session management service."""

import asyncio
import logging
import secrets
from datetime import datetime, timedelta
from typing import Any, Optional

logger = logging.getLogger(__name__)

CLEANUP_INTERVAL_SECONDS = 300


class SessionManager:
    """Keeps SportSee tokens in memory, keyed by an opaque cookie value."""

    def __init__(self, timeout_minutes: int = 60):
        """
        Initialize session manager.

        Args:
            timeout_minutes: Idle time after which a session expires
        """
        self.timeout = timedelta(minutes=timeout_minutes)
        self.sessions: dict[str, dict[str, Any]] = {}
        self.last_activity: dict[str, datetime] = {}
        self._cleanup_task: Optional[asyncio.Task] = None

    async def start_cleanup_task(self):
        """Start background task to clean up expired sessions."""
        if self._cleanup_task is None:
            self._cleanup_task = asyncio.create_task(self._cleanup_loop())

    async def stop_cleanup_task(self):
        if self._cleanup_task is not None:
            self._cleanup_task.cancel()
            try:
                await self._cleanup_task
            except asyncio.CancelledError:
                pass
            self._cleanup_task = None

    async def _cleanup_loop(self):
        while True:
            await asyncio.sleep(CLEANUP_INTERVAL_SECONDS)
            removed = self.purge_expired()
            if removed:
                logger.info(f"Removed {removed} expired session(s)")

    def purge_expired(self, now: Optional[datetime] = None) -> int:
        """
        Delete every expired session.

        Returns:
            Number of sessions removed
        """
        now = now or datetime.now()
        expired = [
            session_id
            for session_id, last_active in self.last_activity.items()
            if now - last_active > self.timeout
        ]
        for session_id in expired:
            self.delete_session(session_id)
        return len(expired)

    def create_session(self, data: Optional[dict[str, Any]] = None) -> str:
        """
        Create a new session.

        Args:
            data: Initial session data (token, user_id, username)

        Returns:
            Session ID
        """
        session_id = secrets.token_urlsafe(32)
        self.sessions[session_id] = dict(data or {})
        self.last_activity[session_id] = datetime.now()
        return session_id

    def get_session(self, session_id: str) -> Optional[dict[str, Any]]:
        """
        Get session data and refresh its expiry.

        Returns:
            Session data or None if the session is unknown or expired
        """
        if session_id not in self.sessions:
            return None

        if self._is_expired(session_id):
            self.delete_session(session_id)
            return None

        self.last_activity[session_id] = datetime.now()
        return self.sessions[session_id]

    def update_session(self, session_id: str, data: dict[str, Any]) -> bool:
        if session_id not in self.sessions:
            return False

        self.sessions[session_id].update(data)
        self.last_activity[session_id] = datetime.now()
        return True

    def delete_session(self, session_id: str) -> bool:
        if session_id in self.sessions:
            del self.sessions[session_id]
            del self.last_activity[session_id]
            return True
        return False

    def _is_expired(self, session_id: str) -> bool:
        last_active = self.last_activity.get(session_id)
        if last_active is None:
            return True
        return datetime.now() - last_active > self.timeout

    def get_active_session_count(self) -> int:
        """Get the number of active sessions."""
        return len(self.sessions)
