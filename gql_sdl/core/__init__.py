"""Core modules for building GraphQL SDL."""

from .auth import AuthOperation, AuthRule, AuthRules, AuthStrategy
from .cache import FieldCacheParams, MutationInvalidation
from .enums import Enum
from .errors import (
    DuplicateScopeField,
    InvalidDefaultValue,
    InvalidFieldType,
    InvalidIdentifier,
    InvalidOperationForState,
    MissingSchema,
    SchemaError,
    SchemaSyntaxError,
)
from .factory import FieldFactory, g
from .header import Header, HeaderForward, Headers
from .hooks import (
    AddHeaderHook,
    FilterNamesHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
)
from .openapi import Connector, OpenAPIParams, OpenAPITransforms, PartialConnector
from .query import Query, QueryArgument, QueryType
from .scalars import ScalarHandler, ScalarRegistry, ScalarType
from .schema import Schema
from .typedefs import (
    AuthDefinition,
    CacheDefinition,
    DefaultDefinition,
    EnumDefinition,
    ListDefinition,
    ReferenceDefinition,
    ResolverDefinition,
    ScalarDefinition,
    SearchDefinition,
    TypeDefinition,
    UniqueDefinition,
)
from .types import Type

__all__ = [
    # Errors
    "SchemaError",
    "InvalidIdentifier",
    "InvalidDefaultValue",
    "InvalidFieldType",
    "InvalidOperationForState",
    "DuplicateScopeField",
    "MissingSchema",
    "SchemaSyntaxError",
    # Scalars
    "ScalarType",
    "ScalarHandler",
    "ScalarRegistry",
    # Field definitions
    "TypeDefinition",
    "ScalarDefinition",
    "EnumDefinition",
    "ReferenceDefinition",
    "ListDefinition",
    "AuthDefinition",
    "SearchDefinition",
    "UniqueDefinition",
    "DefaultDefinition",
    "ResolverDefinition",
    "CacheDefinition",
    "FieldFactory",
    "g",
    # Directive payloads
    "AuthRules",
    "AuthRule",
    "AuthStrategy",
    "AuthOperation",
    "FieldCacheParams",
    "MutationInvalidation",
    # Schema objects
    "Enum",
    "Type",
    "Query",
    "QueryArgument",
    "QueryType",
    "Schema",
    # Connectors
    "Header",
    "HeaderForward",
    "Headers",
    "OpenAPIParams",
    "OpenAPITransforms",
    "PartialConnector",
    "Connector",
    # Hooks
    "PreRenderHook",
    "PostRenderHook",
    "AddHeaderHook",
    "FilterNamesHook",
    "HookRunner",
]
