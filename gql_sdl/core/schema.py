"""Assembly of rendered fragments into one SDL document.

Sections render in a fixed order: enums, object types, queries and
mutations, then connectors. Within a section, insertion order is kept.
Fragments are separated by one blank line.
"""

import copy
import textwrap
from typing import Iterable, Optional

from graphql import DocumentNode, GraphQLSyntaxError, parse

from .enums import Enum
from .errors import SchemaError, SchemaSyntaxError
from .hooks import HookRunner
from .openapi import Connector, PartialConnector
from .query import Query, QueryType
from .typedefs import TypeDefinition
from .types import Type


class Schema:
    """Collects schema objects and renders the document."""

    def __init__(self):
        self.enums: list[Enum] = []
        self.types: list[Type] = []
        self.queries: list[Query] = []
        self.connectors: list[Connector] = []

    def enum(self, name: str, variants: Iterable[str]) -> Enum:
        """Declare an enum and add it to the schema."""
        declared = Enum(name, variants)
        self.enums.append(declared)
        return declared

    def type(self, name: str, fields: Optional[dict[str, TypeDefinition]] = None) -> Type:
        """Declare an object type, optionally with its fields, and add it."""
        declared = Type(name)
        for field_name, definition in (fields or {}).items():
            declared.field(field_name, definition)
        self.types.append(declared)
        return declared

    def _operation(
        self,
        query_type: QueryType,
        name: str,
        returns: TypeDefinition,
        resolver: str,
        args: Optional[dict[str, TypeDefinition]],
    ) -> Query:
        query = Query(name, query_type, returns, resolver)
        for arg_name, arg_type in (args or {}).items():
            query.push_argument(arg_name, arg_type)
        self.queries.append(query)
        return query

    def query(
        self,
        name: str,
        returns: TypeDefinition,
        resolver: str,
        args: Optional[dict[str, TypeDefinition]] = None,
    ) -> Query:
        """Add a custom query."""
        return self._operation(QueryType.QUERY, name, returns, resolver, args)

    def mutation(
        self,
        name: str,
        returns: TypeDefinition,
        resolver: str,
        args: Optional[dict[str, TypeDefinition]] = None,
    ) -> Query:
        """Add a custom mutation."""
        return self._operation(QueryType.MUTATION, name, returns, resolver, args)

    def datasource(self, connector: PartialConnector | Connector, namespace: Optional[str] = None) -> Connector:
        """Add a connector. A partial connector needs a namespace."""
        if isinstance(connector, PartialConnector):
            if namespace is None:
                raise SchemaError("A partial connector needs a namespace")
            connector = connector.finalize(namespace)
        elif not isinstance(connector, Connector):
            raise SchemaError(f"Not a connector: {connector!r}")
        elif namespace is not None and namespace != connector.namespace:
            raise SchemaError(
                f"Connector is already finalized as {connector.namespace!r}"
            )
        self.connectors.append(connector)
        return connector

    def add(self, item: Enum | Type | Query | Connector):
        """Add an already built object to the matching section."""
        if isinstance(item, Enum):
            self.enums.append(item)
        elif isinstance(item, Type):
            self.types.append(item)
        elif isinstance(item, Query):
            self.queries.append(item)
        elif isinstance(item, Connector):
            self.connectors.append(item)
        else:
            raise SchemaError(f"Cannot add {type(item).__name__} to a schema")
        return item

    def copy(self) -> "Schema":
        """Shallow copy with independent section lists."""
        clone = copy.copy(self)
        clone.enums = list(self.enums)
        clone.types = list(self.types)
        clone.queries = list(self.queries)
        clone.connectors = list(self.connectors)
        return clone

    def fragments(self) -> list[str]:
        """Rendered fragments in document order."""
        fragments = [str(e) for e in self.enums]
        fragments.extend(str(t) for t in self.types)
        fragments.extend(str(q) for q in self.queries)
        fragments.extend(
            "extend schema\n" + textwrap.indent(str(c), "  ") for c in self.connectors
        )
        return fragments

    def render(self, hooks: Optional[HookRunner] = None) -> str:
        """Render the whole document, running hooks if given."""
        schema = self
        if hooks is not None:
            schema = hooks.run_pre_hooks(self.copy())
        content = "\n\n".join(schema.fragments())
        if hooks is not None:
            content = hooks.run_post_hooks(content)
        return content

    def to_ast(self, hooks: Optional[HookRunner] = None) -> DocumentNode:
        """Parse the rendered document with graphql-core.

        Only syntax is checked; references are not resolved.

        Raises:
            SchemaSyntaxError: If the document does not parse
        """
        document = self.render(hooks)
        try:
            return parse(document)
        except GraphQLSyntaxError as e:
            raise SchemaSyntaxError(f"Rendered schema is not valid SDL: {e.message}", document) from e

    def __str__(self) -> str:
        return self.render()
