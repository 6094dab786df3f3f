"""
Configuration models for the Bitvavo client.

Immutable configuration structures validated on construction.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import (
    DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, MAX_ACCESS_WINDOW
)
from ..utils import validate_url


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for the Bitvavo client connection.

    Credentials are deliberately not part of the config; they live in
    ``ApiCredentials`` so they can be wiped when the client closes.
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    access_window: Optional[int] = None  # milliseconds, sent only when signing
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not validate_url(self.base_url):
            raise ValueError("Base URL must be a valid HTTP/HTTPS URL")
        # Normalize so paths can be appended directly
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

        if self.access_window is not None and not 0 < self.access_window <= MAX_ACCESS_WINDOW:
            raise ValueError(
                f"Access window must be between 1 and {MAX_ACCESS_WINDOW} ms, got {self.access_window}"
            )
