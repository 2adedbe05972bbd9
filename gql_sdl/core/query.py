"""Custom queries and mutations backed by resolvers.

Renders an ``extend type`` block:

    query = Query("feed", QueryType.QUERY, g.ref("Post").list(), "feed")
    query.push_argument("first", g.int()).push_argument("after", g.string().optional())
    print(query)
    # extend type Query {
    #   feed(first: Int!, after: String): [Post!]! @resolver(name: "feed")
    # }
"""

from enum import Enum

from .errors import InvalidFieldType, InvalidIdentifier, validate_name
from .scalars import quote
from .typedefs import (
    EnumDefinition,
    ListDefinition,
    ReferenceDefinition,
    ScalarDefinition,
    TypeDefinition,
)

INPUT_TYPES = (ScalarDefinition, EnumDefinition, ListDefinition, ReferenceDefinition)
OUTPUT_TYPES = INPUT_TYPES


class QueryType(Enum):
    """Root type a custom operation extends."""
    QUERY = "Query"
    MUTATION = "Mutation"


class QueryArgument:
    """A named argument of a custom query."""

    def __init__(self, name: str, type: TypeDefinition):
        self.name = validate_name(name, "argument name")
        if not isinstance(type, INPUT_TYPES):
            raise InvalidFieldType(type, "argument type")
        self.type = type

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


class Query:
    """A query or mutation with ordered arguments and a resolver.

    Argument names are not deduplicated: pushing the same name twice
    renders both arguments.
    """

    def __init__(
        self,
        name: str,
        type: QueryType,
        returns: TypeDefinition,
        resolver: str,
    ):
        self.name = validate_name(name, "query name")
        try:
            self.type = QueryType(type)
        except ValueError as e:
            raise InvalidIdentifier(type, "query type") from e
        if not isinstance(returns, OUTPUT_TYPES):
            raise InvalidFieldType(returns, "return type")
        if not isinstance(resolver, str) or not resolver.strip():
            raise InvalidIdentifier(resolver, "resolver name")
        self.arguments: list[QueryArgument] = []
        self.returns = returns
        self.resolver = resolver

    def push_argument(self, name: str, type: TypeDefinition) -> "Query":
        """Append an argument and return the query for chaining."""
        self.arguments.append(QueryArgument(name, type))
        return self

    def __str__(self) -> str:
        header = f"extend type {self.type.value} {{"
        args = ", ".join(str(arg) for arg in self.arguments)
        args_str = f"({args})" if args else ""
        query = f"  {self.name}{args_str}: {self.returns} @resolver(name: {quote(self.resolver)})"
        footer = "}"
        return f"{header}\n{query}\n{footer}"
