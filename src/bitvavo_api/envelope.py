"""
Response classification for the Bitvavo API.

A response with a 2xx status carries the endpoint's payload. Any other
status carries an error envelope ``{"errorCode": int, "error": str}``.
The two paths never mix: an error-shaped body with a success status is
handed back as a payload (and will fail to decode as one).
"""

import json
from typing import Any

from .errors import CodecError, ExchangeError, InvalidType, MissingField


def is_success(status: int) -> bool:
    return 200 <= status < 300


def _load_json(status: int, body: bytes) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        snippet = body[:200].decode("utf-8", errors="replace")
        raise CodecError(f"Invalid JSON response (Status {status}): {snippet}") from e


def parse_error(status: int, body: bytes) -> ExchangeError:
    """Decode an error envelope into an ``ExchangeError``.

    Raises ``CodecError`` when the body is not a well-formed envelope.
    """
    data = _load_json(status, body)
    if not isinstance(data, dict):
        raise InvalidType("error envelope object", data)

    for key in ("errorCode", "error"):
        if key not in data:
            raise MissingField(key)

    code = data["errorCode"]
    message = data["error"]
    if not isinstance(code, int) or isinstance(code, bool):
        raise InvalidType("integer", code, "errorCode")
    if not isinstance(message, str):
        raise InvalidType("string", message, "error")

    return ExchangeError(code, message, status_code=status)


def parse_response(status: int, body: bytes) -> Any:
    """Return the decoded JSON payload of a successful response.

    Raises:
        ExchangeError: If the status is not 2xx and the body is a valid envelope
        CodecError: If the body (of either kind) is malformed
    """
    if is_success(status):
        return _load_json(status, body)
    raise parse_error(status, body)
