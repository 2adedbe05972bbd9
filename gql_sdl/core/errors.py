"""Errors raised while building schema objects.

Every check happens when an object is constructed. Rendering never raises.
"""

import re

NAME_PATTERN = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

# Names that cannot be used as enum values
RESERVED_ENUM_VALUES = frozenset({"true", "false", "null"})


class SchemaError(ValueError):
    """Base class for all schema building errors."""


class InvalidIdentifier(SchemaError):
    """A name is not a legal GraphQL name."""

    def __init__(self, name: object, kind: str = "name"):
        self.name = name
        self.kind = kind
        super().__init__(f"Invalid {kind}: {name!r}")


class InvalidDefaultValue(SchemaError):
    """A default value lies outside the field's value domain."""

    def __init__(self, value: object, type_name: str):
        self.value = value
        self.type_name = type_name
        super().__init__(f"Invalid default value {value!r} for {type_name}")


class InvalidFieldType(SchemaError):
    """A value was used where a field type definition is expected."""

    def __init__(self, value: object, kind: str = "field type"):
        self.value = value
        self.kind = kind
        super().__init__(f"Invalid {kind}: {value!r}")


class MissingSchema(SchemaError):
    """A connector was configured without a schema reference."""

    def __init__(self):
        super().__init__("An OpenAPI connector requires a schema")


class InvalidOperationForState(SchemaError):
    """A modifier was called on a definition that does not allow it."""

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"'{operation}' is not allowed on {state}")


class DuplicateScopeField(SchemaError):
    """A unique constraint scope names the same field twice."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Duplicate field in unique scope: {field_name!r}")


class SchemaSyntaxError(SchemaError):
    """The assembled document is not syntactically valid SDL."""

    def __init__(self, message: str, document: str):
        self.document = document
        super().__init__(message)


def validate_name(name: object, kind: str = "name") -> str:
    """Return ``name`` if it is a legal GraphQL name, else raise."""
    if not isinstance(name, str) or not NAME_PATTERN.match(name):
        raise InvalidIdentifier(name, kind)
    return name
