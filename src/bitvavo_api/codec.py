"""
Wire codec for Bitvavo JSON payloads.

Records are frozen dataclasses. Most of them travel as JSON objects keyed by
camelCase names; a few (order book quotes, candles) travel as fixed-order
arrays and are marked with the ``@positional`` decorator. Closed string sets
are ``WireEnum`` subclasses whose member values are the exact wire tokens.

``decode(hint, value)`` and ``encode(value)`` are the only entry points the
rest of the package uses. Nothing in here logs or performs I/O.
"""

import dataclasses
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Optional, Union, get_args, get_origin, get_type_hints
from uuid import UUID

from .errors import CodecError, InvalidType, InvalidValue, MissingField

_NONE_TYPE = type(None)


class WireEnum(Enum):
    """Enumeration whose values are the tokens used by the exchange."""

    @classmethod
    def from_wire(cls, value: Any, field: Optional[str] = None) -> "WireEnum":
        """Map a wire token to its member, rejecting anything outside the set."""
        if not isinstance(value, str):
            raise InvalidType("string", value, field)
        try:
            return cls(value)
        except ValueError:
            raise InvalidValue(value, [member.value for member in cls], field) from None

    def to_wire(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def positional(cls):
    """Mark a dataclass as encoded as a JSON array in field declaration order."""
    cls.__positional__ = True
    return cls


def is_positional(cls) -> bool:
    return getattr(cls, "__positional__", False)


def wire_name(field: dataclasses.Field) -> str:
    """Return the JSON key of a keyed-record field (camelCase unless overridden)."""
    if "wire" in field.metadata:
        return field.metadata["wire"]
    head, *rest = field.name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@lru_cache(maxsize=None)
def _type_hints(cls) -> Dict[str, Any]:
    return get_type_hints(cls)


def _optional_inner(hint: Any) -> Optional[Any]:
    """Return ``X`` for ``Optional[X]``, else None."""
    if get_origin(hint) is Union:
        args = [arg for arg in get_args(hint) if arg is not _NONE_TYPE]
        if len(args) == 1 and len(get_args(hint)) == 2:
            return args[0]
    return None


# Decoding

def decode(hint: Any, value: Any, field: Optional[str] = None) -> Any:
    """Decode a JSON value into the type described by ``hint``."""
    inner = _optional_inner(hint)
    if inner is not None:
        return None if value is None else decode(inner, value, field)

    if get_origin(hint) in (list, List):
        (item_hint,) = get_args(hint)
        if not isinstance(value, list):
            raise InvalidType("array", value, field)
        return [decode(item_hint, item, field) for item in value]

    if isinstance(hint, type):
        if issubclass(hint, WireEnum):
            return hint.from_wire(value, field)
        if dataclasses.is_dataclass(hint):
            if is_positional(hint):
                return decode_positional(hint, value)
            return decode_object(hint, value)
        if hint is bool:
            if not isinstance(value, bool):
                raise InvalidType("boolean", value, field)
            return value
        if hint is int:
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidType("integer", value, field)
            return value
        if hint is str:
            if not isinstance(value, str):
                raise InvalidType("string", value, field)
            return value
        if hint is UUID:
            if not isinstance(value, str):
                raise InvalidType("UUID string", value, field)
            try:
                return UUID(value)
            except ValueError:
                raise CodecError(f"invalid UUID {value!r}", field=field) from None

    raise TypeError(f"Unsupported wire type: {hint!r}")


def decode_object(cls, data: Any):
    """Decode a keyed JSON object into the dataclass ``cls``.

    Optional fields may be absent or null. Unknown keys are ignored so that
    fields added by the exchange do not break older clients.
    """
    if not isinstance(data, dict):
        raise InvalidType(f"object {cls.__name__}", data)

    hints = _type_hints(cls)
    values = {}
    for field in dataclasses.fields(cls):
        key = wire_name(field)
        hint = hints[field.name]
        raw = data.get(key)

        if raw is None and _optional_inner(hint) is not None:
            values[field.name] = None
            continue
        if key not in data:
            if field.default is not dataclasses.MISSING:
                continue
            raise MissingField(key)

        values[field.name] = decode(hint, raw, key)

    return cls(**values)


def decode_positional(cls, values: Any):
    """Decode a fixed-order JSON array into the dataclass ``cls``.

    Elements map onto fields by position. A short array raises
    ``MissingField`` naming the first absent field; trailing extra elements
    are ignored.
    """
    if not isinstance(values, (list, tuple)):
        raise InvalidType(f"array {cls.__name__}", values)

    hints = _type_hints(cls)
    decoded = {}
    for index, field in enumerate(dataclasses.fields(cls)):
        if index >= len(values):
            raise MissingField(field.name)
        decoded[field.name] = decode(hints[field.name], values[index], field.name)

    return cls(**decoded)


# Encoding

def encode(value: Any) -> Any:
    """Encode a record, enum or plain value into its JSON form."""
    if isinstance(value, WireEnum):
        return value.to_wire()
    if isinstance(value, UUID):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        if is_positional(type(value)):
            return encode_positional(value)
        return encode_object(value)
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    return value


def encode_object(record) -> Dict[str, Any]:
    """Encode a keyed record; fields set to None are left out."""
    encoded = {}
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        if value is None:
            continue
        encoded[wire_name(field)] = encode(value)
    return encoded


def encode_positional(record) -> List[Any]:
    return [encode(getattr(record, field.name)) for field in dataclasses.fields(record)]
