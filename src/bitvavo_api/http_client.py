"""
HTTP client for the Bitvavo API.

Handles URL assembly, request signing, execution and response
classification. Exactly one request is sent per call; nothing is retried.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

import aiohttp
from aiohttp import ClientSession

from .auth import BitvavoSigner
from .constants import API_PREFIX
from .envelope import parse_response
from .errors import TransportError
from .models.config import ConnectionConfig
from .utils import build_query

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP client specialized for Bitvavo API interactions."""

    def __init__(
        self,
        config: ConnectionConfig,
        signer: Optional[BitvavoSigner] = None,
    ):
        """Initialize HTTP client; without a signer every request is unsigned."""
        self._config = config
        self._signer = signer

    @property
    def signed(self) -> bool:
        return self._signer is not None

    @staticmethod
    def build_path(endpoint: str, params: Optional[Iterable[Tuple[str, Any]]] = None) -> str:
        """Path as sent and signed, e.g. ``/v2/BTC-EUR/book?depth=2``."""
        return f"{API_PREFIX}/{endpoint}{build_query(params)}"

    async def request(
        self,
        session: ClientSession,
        method: str,
        endpoint: str,
        params: Optional[Iterable[Tuple[str, Any]]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Execute one request and return the decoded JSON payload.

        Args:
            session: Open aiohttp session
            method: HTTP method
            endpoint: Endpoint path relative to the API prefix (e.g. ``"ticker/price"``)
            params: Ordered query parameters; ``None`` values are omitted
            body: JSON body for POST requests

        Raises:
            InvalidCredentials: Before any I/O, if signing is impossible
            TransportError: If the request could not be completed
            ExchangeError: If the exchange rejected the request
            CodecError: If the response body is malformed
        """
        method = method.upper()
        path = self.build_path(endpoint, params)
        url = f"{self._config.base_url}{path}"
        payload = json.dumps(body, separators=(",", ":")) if body is not None else ""

        headers = {}
        if self._signer is not None:
            headers.update(self._signer.get_auth_headers(method, path, payload))
        if payload:
            headers["Content-Type"] = "application/json"

        try:
            async with session.request(
                method=method,
                url=url,
                headers=headers,
                data=payload or None,
            ) as response:
                status = response.status
                raw = await response.read()
        except asyncio.TimeoutError as e:
            logger.error(f"{method} {path} timed out")
            raise TransportError(f"Request timeout: {method} {path}") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TransportError(f"Request failed: {method} {path}: {e}") from e

        logger.debug(f"{method} {path} -> {status}")
        return parse_response(status, raw)
