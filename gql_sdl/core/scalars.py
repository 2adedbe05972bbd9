"""Scalar kinds and their value handlers.

Each scalar kind has a handler that decides which Python values belong to
its value domain and how such a value is written as an SDL literal. The
typedef chain uses the handlers to validate and render default values.

Example usage:
    from gql_sdl.core.scalars import ScalarRegistry, ScalarType
    from gql_sdl.core.typedefs import ScalarDefinition

    registry = ScalarRegistry()
    handler = registry.get(ScalarType.DATETIME)
    handler.accepts("2024-01-15T10:30:00Z")  # True
    handler.serialize(datetime(2024, 1, 15))  # '"2024-01-15T00:00:00"'

    # Custom handler
    class PositiveIntHandler:
        def accepts(self, value):
            return isinstance(value, int) and not isinstance(value, bool) and value > 0

        def serialize(self, value):
            return str(value)

    registry.register(ScalarType.INT, PositiveIntHandler())
    ScalarDefinition(ScalarType.INT, registry=registry).default(-1)  # InvalidDefaultValue
"""

import ipaddress
import json
import math
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from .errors import NAME_PATTERN

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
URL_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://\S+$")
PHONE_PATTERN = re.compile(r"^\+[1-9]\d{1,14}$")


class ScalarType(Enum):
    """Scalar kinds understood by the backend."""
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    ID = "ID"
    DATE = "Date"
    DATETIME = "DateTime"
    TIMESTAMP = "Timestamp"
    EMAIL = "Email"
    URL = "URL"
    IPADDRESS = "IPAddress"
    PHONE_NUMBER = "PhoneNumber"
    BIGINT = "BigInt"
    JSON = "JSON"


def quote(value: str) -> str:
    """Render a Python string as a double-quoted SDL string literal."""
    return json.dumps(value, ensure_ascii=False)


def to_sdl_value(value: Any) -> str:
    """Render a JSON-like Python value as an SDL input value literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return repr(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Cannot render non-finite float {value!r} as an SDL value")
        return repr(value)
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_sdl_value(v) for v in value) + "]"
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str) or not NAME_PATTERN.match(key):
                raise ValueError(f"Object key {key!r} is not a GraphQL name")
        items = ", ".join(f"{k}: {to_sdl_value(v)}" for k, v in value.items())
        return "{ " + items + " }" if items else "{}"
    raise TypeError(f"Cannot render {type(value).__name__} as an SDL value")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@runtime_checkable
class ScalarHandler(Protocol):
    """Protocol for scalar value handlers.

    Implement this protocol to change which defaults a scalar accepts.
    """

    def accepts(self, value: Any) -> bool:
        """Return True if ``value`` belongs to the scalar's value domain."""
        ...

    def serialize(self, value: Any) -> str:
        """Render an accepted value as an SDL literal."""
        ...


class StringHandler:
    """Handler for String scalars."""

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)

    def serialize(self, value: str) -> str:
        return quote(value)


class PatternHandler(StringHandler):
    """Handler for string scalars constrained by a regular expression."""

    def __init__(self, pattern: re.Pattern):
        self.pattern = pattern

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str) and bool(self.pattern.match(value))


class IntHandler:
    """Handler for 32-bit Int scalars."""

    def accepts(self, value: Any) -> bool:
        return _is_int(value) and INT_MIN <= value <= INT_MAX

    def serialize(self, value: int) -> str:
        return str(value)


class BigIntHandler:
    """Handler for BigInt and Timestamp scalars (unbounded integers)."""

    def accepts(self, value: Any) -> bool:
        return _is_int(value)

    def serialize(self, value: int) -> str:
        return str(value)


class FloatHandler:
    """Handler for Float scalars. Integers are accepted as floats."""

    def accepts(self, value: Any) -> bool:
        if _is_int(value):
            return True
        return isinstance(value, float) and math.isfinite(value)

    def serialize(self, value: float) -> str:
        return repr(value)


class BooleanHandler:
    """Handler for Boolean scalars."""

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)

    def serialize(self, value: bool) -> str:
        return "true" if value else "false"


class IDHandler:
    """Handler for ID scalars, written as strings."""

    def accepts(self, value: Any) -> bool:
        return (isinstance(value, str) and value != "") or _is_int(value)

    def serialize(self, value: Any) -> str:
        return quote(str(value))


class DateHandler:
    """Handler for Date scalars using ISO 8601 date format."""

    def accepts(self, value: Any) -> bool:
        if isinstance(value, datetime):
            return False
        if isinstance(value, date):
            return True
        if isinstance(value, str):
            try:
                date.fromisoformat(value)
            except ValueError:
                return False
            return True
        return False

    def serialize(self, value: Any) -> str:
        if isinstance(value, date):
            return quote(value.isoformat())
        return quote(value)


class DateTimeHandler:
    """Handler for DateTime scalars using ISO 8601 format."""

    def accepts(self, value: Any) -> bool:
        if isinstance(value, datetime):
            return True
        if isinstance(value, str):
            try:
                datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return False
            return True
        return False

    def serialize(self, value: Any) -> str:
        if isinstance(value, datetime):
            return quote(value.isoformat())
        return quote(value)


class IPAddressHandler(StringHandler):
    """Handler for IPAddress scalars (IPv4 or IPv6)."""

    def accepts(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            ipaddress.ip_address(value)
        except ValueError:
            return False
        return True


class JSONHandler:
    """Handler for JSON scalars. Any JSON-like value is accepted."""

    def accepts(self, value: Any) -> bool:
        try:
            to_sdl_value(value)
        except (TypeError, ValueError):
            return False
        return True

    def serialize(self, value: Any) -> str:
        return to_sdl_value(value)


class ScalarRegistry:
    """Registry of value handlers per scalar kind.

    Example:
        registry = ScalarRegistry()
        registry.get(ScalarType.INT).accepts(3)  # True
    """

    def __init__(self):
        self._handlers: dict[ScalarType, ScalarHandler] = {}
        self._register_defaults()

    def _register_defaults(self):
        """Register built-in default handlers."""
        self.register(ScalarType.STRING, StringHandler())
        self.register(ScalarType.INT, IntHandler())
        self.register(ScalarType.FLOAT, FloatHandler())
        self.register(ScalarType.BOOLEAN, BooleanHandler())
        self.register(ScalarType.ID, IDHandler())
        self.register(ScalarType.DATE, DateHandler())
        self.register(ScalarType.DATETIME, DateTimeHandler())
        self.register(ScalarType.TIMESTAMP, BigIntHandler())
        self.register(ScalarType.EMAIL, PatternHandler(EMAIL_PATTERN))
        self.register(ScalarType.URL, PatternHandler(URL_PATTERN))
        self.register(ScalarType.IPADDRESS, IPAddressHandler())
        self.register(ScalarType.PHONE_NUMBER, PatternHandler(PHONE_PATTERN))
        self.register(ScalarType.BIGINT, BigIntHandler())
        self.register(ScalarType.JSON, JSONHandler())

    def register(self, scalar: ScalarType, handler: ScalarHandler):
        """Register a handler for a scalar kind."""
        self._handlers[scalar] = handler

    def get(self, scalar: ScalarType) -> ScalarHandler | None:
        """Get the handler for a scalar kind, or None if not registered."""
        return self._handlers.get(scalar)

    def has(self, scalar: ScalarType) -> bool:
        """Check if a handler is registered for a scalar kind."""
        return scalar in self._handlers


default_registry = ScalarRegistry()
