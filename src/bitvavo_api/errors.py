"""
Exception hierarchy for the Bitvavo client.

Callers can tell apart failures of the network, failures to decode a body,
errors reported by the exchange itself and unusable credentials.
"""

from typing import Any, Iterable, Optional


class BitvavoError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(BitvavoError):
    """The request did not complete (connection refused, timeout, ...)."""


class CodecError(BitvavoError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingField(CodecError):
    """A required field (or positional element) is absent."""

    def __init__(self, field: str):
        super().__init__(f"missing field `{field}`", field=field)


class InvalidValue(CodecError):
    """A value is outside the closed set accepted for its field."""

    def __init__(self, value: Any, expected: Iterable[str], field: Optional[str] = None):
        self.value = value
        self.expected = tuple(expected)
        super().__init__(
            f"invalid value: {value!r}, expected one of [{', '.join(self.expected)}]",
            field=field,
        )


class InvalidType(CodecError):
    """A JSON value has the wrong type for its field."""

    def __init__(self, expected: str, value: Any, field: Optional[str] = None):
        self.expected = expected
        self.value = value
        location = f" for `{field}`" if field else ""
        super().__init__(
            f"invalid type{location}: expected {expected}, got {type(value).__name__}",
            field=field,
        )


class ExchangeError(BitvavoError):
    """The exchange understood the request and rejected it."""

    def __init__(self, code: int, message: str, status_code: Optional[int] = None):
        super().__init__(f"bitvavo: {code}: {message}")
        self.code = code
        self.message = message
        self.status_code = status_code


class InvalidCredentials(BitvavoError):
    """API key or secret cannot be used for signing."""


class UnknownSymbolError(BitvavoError):
    """The exchange returned no entry for the requested symbol."""

    def __init__(self, symbol: str):
        super().__init__(f"no balance returned for symbol {symbol!r}")
        self.symbol = symbol
