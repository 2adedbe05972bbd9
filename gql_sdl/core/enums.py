"""Enum declarations.

An ``Enum`` is declared once and referenced by field definitions through
``EnumDefinition``, which copies the variants at construction time.
"""

from typing import Iterable

from .errors import RESERVED_ENUM_VALUES, InvalidIdentifier, SchemaError, validate_name


class Enum:
    """A named enum with an ordered list of variants.

    Example:
        role = Enum("Role", ["ADMIN", "USER"])
        str(role)  # 'enum Role {\\n  ADMIN\\n  USER\\n}'
    """

    def __init__(self, name: str, variants: Iterable[str]):
        self.name = validate_name(name, "enum name")
        self.variants = [validate_name(v, "enum variant") for v in variants]
        for variant in self.variants:
            if variant in RESERVED_ENUM_VALUES:
                raise InvalidIdentifier(variant, "enum variant (reserved word)")
        if not self.variants:
            raise SchemaError(f"Enum {name} must have at least one variant")
        if len(set(self.variants)) != len(self.variants):
            raise SchemaError(f"Enum {name} has duplicate variants")

    def __str__(self) -> str:
        body = "\n".join(f"  {variant}" for variant in self.variants)
        return f"enum {self.name} {{\n{body}\n}}"

    def __repr__(self) -> str:
        return f"Enum({self.name!r}, {self.variants!r})"
