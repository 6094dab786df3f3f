"""
Authentication and signing utilities for the Bitvavo API.
"""

import hashlib
import hmac
from typing import Callable, Dict, Optional

from .constants import (
    ACCESS_KEY_HEADER,
    ACCESS_SIGNATURE_HEADER,
    ACCESS_TIMESTAMP_HEADER,
    ACCESS_WINDOW_HEADER,
)
from .errors import InvalidCredentials
from .utils import current_timestamp_ms


def _to_buffer(value: str, name: str) -> bytearray:
    """Copy credential text into a wipeable buffer, validating its shape."""
    if not isinstance(value, str) or not value:
        raise InvalidCredentials(f"API {name} cannot be empty")
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError:
        raise InvalidCredentials(f"API {name} must be ASCII text") from None
    if not all(0x21 <= byte <= 0x7E for byte in raw):
        raise InvalidCredentials(f"API {name} contains whitespace or control characters")
    return bytearray(raw)


class ApiCredentials:
    """Holds an API key and secret in buffers that can be overwritten.

    The material never shows up in ``repr`` or in error messages.
    """

    __slots__ = ("_api_key", "_api_secret", "_wiped")

    def __init__(self, api_key: str, api_secret: str):
        self._api_key = _to_buffer(api_key, "key")
        self._api_secret = _to_buffer(api_secret, "secret")
        self._wiped = False

    @property
    def wiped(self) -> bool:
        return self._wiped

    def wipe(self) -> None:
        """Overwrite key and secret in place with zeros."""
        for buffer in (self._api_key, self._api_secret):
            buffer[:] = bytes(len(buffer))
        self._wiped = True

    def _check(self) -> None:
        if self._wiped:
            raise InvalidCredentials("API credentials have been wiped")

    def key(self) -> str:
        self._check()
        return self._api_key.decode("ascii")

    def hmac_sha256(self, message: bytes) -> str:
        """Lower-case hex HMAC-SHA256 of ``message`` keyed with the secret."""
        self._check()
        return hmac.new(self._api_secret, message, hashlib.sha256).hexdigest()

    def __repr__(self) -> str:
        state = "wiped" if self._wiped else "set"
        return f"ApiCredentials(<{state}>)"


class BitvavoSigner:
    """
    Handles request signing for Bitvavo API authentication.

    The signature is the HMAC-SHA256 of ``timestamp + method + path + body``
    where ``path`` starts with ``/v2/`` and includes the query string. GET
    requests have an empty body.
    """

    def __init__(
        self,
        credentials: ApiCredentials,
        access_window: Optional[int] = None,
        clock: Callable[[], int] = current_timestamp_ms,
    ):
        """
        Initialize the signer.

        Args:
            credentials: API key and secret
            access_window: Optional access window in milliseconds
            clock: Source of epoch-millisecond timestamps
        """
        self.credentials = credentials
        self.access_window = access_window
        self._clock = clock

    def signature(self, timestamp: str, method: str, path: str, body: str = "") -> str:
        """Compute the request signature for fixed inputs."""
        message = f"{timestamp}{method.upper()}{path}{body}"
        return self.credentials.hmac_sha256(message.encode("utf-8"))

    def get_auth_headers(self, method: str, path: str, body: str = "") -> Dict[str, str]:
        """
        Build the authentication headers for one request.

        Args:
            method: HTTP method
            path: Request path including the API prefix and query string
            body: Serialized JSON body, empty for GET

        Returns:
            Dictionary of authentication headers

        Raises:
            InvalidCredentials: If the credentials were wiped
        """
        timestamp = str(self._clock())
        headers = {
            ACCESS_KEY_HEADER: self.credentials.key(),
            ACCESS_TIMESTAMP_HEADER: timestamp,
            ACCESS_SIGNATURE_HEADER: self.signature(timestamp, method, path, body),
        }
        if self.access_window is not None:
            headers[ACCESS_WINDOW_HEADER] = str(self.access_window)
        return headers
