"""
Session management for the Bitvavo client.

Creates the aiohttp session lazily and closes it on teardown.
"""

import aiohttp
from typing import Optional
from contextlib import asynccontextmanager

from .models.config import ConnectionConfig


class SessionManager:
    """Manages HTTP session lifecycle for the Bitvavo client."""

    def __init__(self, config: ConnectionConfig):
        """Initialize session manager with configuration."""
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def create_session(self) -> aiohttp.ClientSession:
        """Return the open session, creating it on first use."""
        if self._session is not None and not self._session.closed:
            return self._session

        self._session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self._config.timeout),
            headers={
                "User-Agent": self._config.user_agent,
                "Accept": "application/json",
            },
        )
        return self._session

    async def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._session

    @asynccontextmanager
    async def managed_session(self):
        """Context manager that closes the session on exit."""
        session = await self.create_session()
        try:
            yield session
        finally:
            await self.close_session()
