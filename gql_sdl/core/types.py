"""Object type declarations whose fields use the definition chain."""

from .errors import InvalidFieldType, InvalidIdentifier, validate_name
from .typedefs import TypeDefinition


class Type:
    """A named object type with ordered fields.

    Example:
        post = Type("Post").field("title", g.string()).field("tags", g.string().list())
        str(post)  # 'type Post {\\n  title: String!\\n  tags: [String!]!\\n}'
    """

    def __init__(self, name: str):
        self.name = validate_name(name, "type name")
        self.fields: list[tuple[str, TypeDefinition]] = []

    def field(self, name: str, definition: TypeDefinition) -> "Type":
        """Append a field and return the type for chaining."""
        validate_name(name, "field name")
        if not isinstance(definition, TypeDefinition):
            raise InvalidFieldType(definition, "field definition")
        if any(existing == name for existing, _ in self.fields):
            raise InvalidIdentifier(name, f"duplicate field on {self.name}")
        self.fields.append((name, definition))
        return self

    def __str__(self) -> str:
        body = "\n".join(f"  {name}: {definition}" for name, definition in self.fields)
        if not body:
            return f"type {self.name}"
        return f"type {self.name} {{\n{body}\n}}"
