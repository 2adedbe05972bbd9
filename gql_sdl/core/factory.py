"""Shorthand constructors for field definitions.

    from gql_sdl.core import g

    g.string().optional()
    g.enum_ref(role).default("USER")
    g.ref("Post").list()
"""

from typing import Any

from .enums import Enum
from .scalars import ScalarType
from .typedefs import EnumDefinition, ListDefinition, ReferenceDefinition, ScalarDefinition


class FieldFactory:
    """Creates leaf definitions, one method per scalar kind."""

    def scalar(self, scalar: ScalarType) -> ScalarDefinition:
        return ScalarDefinition(scalar)

    def string(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.STRING)

    def int(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.INT)

    def float(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.FLOAT)

    def boolean(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.BOOLEAN)

    def id(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.ID)

    def date(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.DATE)

    def datetime(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.DATETIME)

    def timestamp(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.TIMESTAMP)

    def email(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.EMAIL)

    def url(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.URL)

    def ip_address(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.IPADDRESS)

    def phone_number(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.PHONE_NUMBER)

    def bigint(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.BIGINT)

    def json(self) -> ScalarDefinition:
        return ScalarDefinition(ScalarType.JSON)

    def enum_ref(self, referenced_enum: Enum) -> EnumDefinition:
        return EnumDefinition(referenced_enum)

    def ref(self, referenced_type: Any) -> ReferenceDefinition:
        """Reference an object type by name or by a ``Type``."""
        return ReferenceDefinition(referenced_type)

    def list_of(self, definition) -> ListDefinition:
        return ListDefinition(definition)


g = FieldFactory()
