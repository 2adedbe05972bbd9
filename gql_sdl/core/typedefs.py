"""Field type definitions and their modifier chain.

A field definition starts from a leaf (scalar, enum or reference) and is
refined by calling modifier methods. Every call returns a new definition
that owns the previous one, so a leaf can seed any number of chains:

    email = ScalarDefinition(ScalarType.EMAIL)
    email.unique().search()          # Email! @search @unique
    email.optional().list()          # [Email]!
    email.list().optional()          # [Email!]

Which modifiers may follow is decided by two tables: what the current
definition exposes next (``NEXT_MODIFIERS``) and what the underlying field
kind supports at all (``BASE_MODIFIERS``). A modifier is never applied
twice. Anything else raises ``InvalidOperationForState`` at call time.

Directives always render in ``DIRECTIVE_ORDER``, whatever the call order.
"""

import copy
from typing import Any, Iterable, Optional

from .auth import AuthRuleF, build_rules
from .cache import FieldCacheParams
from .enums import Enum
from .errors import (
    DuplicateScopeField,
    InvalidDefaultValue,
    InvalidIdentifier,
    InvalidOperationForState,
    validate_name,
)
from .scalars import ScalarRegistry, ScalarType, default_registry, quote

OPTIONAL = "optional"
LIST = "list"
AUTH = "auth"
SEARCH = "search"
UNIQUE = "unique"
DEFAULT = "default"
RESOLVER = "resolver"
CACHE = "cache"

ALL_MODIFIERS = frozenset({OPTIONAL, LIST, AUTH, SEARCH, UNIQUE, DEFAULT, RESOLVER, CACHE})

DIRECTIVE_ORDER = (AUTH, SEARCH, UNIQUE, DEFAULT, RESOLVER, CACHE)

# Field kind -> modifiers that make sense for it
BASE_MODIFIERS: dict[str, frozenset[str]] = {
    "scalar": ALL_MODIFIERS,
    "enum": ALL_MODIFIERS,
    "reference": frozenset({OPTIONAL, LIST, AUTH, RESOLVER, CACHE}),
    "list": frozenset({OPTIONAL, AUTH, SEARCH, RESOLVER, CACHE}),
    "reference_list": frozenset({OPTIONAL, AUTH, RESOLVER, CACHE}),
}


class TypeDefinition:
    """Base class of every node in a field definition chain."""

    modifier: Optional[str] = None

    @property
    def base(self) -> "TypeDefinition":
        """The node that carries the SDL type reference."""
        return self

    @property
    def applied(self) -> frozenset[str]:
        """Modifiers already present in this chain."""
        return frozenset()

    @property
    def is_optional(self) -> bool:
        return self.base._optional

    def allowed_modifiers(self) -> frozenset[str]:
        """Modifiers that may be called next on this definition."""
        allowed = NEXT_MODIFIERS[type(self)] & BASE_MODIFIERS[self.base.kind]
        return allowed - (self.applied - {OPTIONAL})

    def _check(self, operation: str):
        if operation not in self.allowed_modifiers():
            raise InvalidOperationForState(operation, type(self).__name__)

    def _with(self, **changes) -> "TypeDefinition":
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def type_ref(self) -> str:
        """Render the SDL type reference, e.g. ``[String!]!``."""
        raise NotImplementedError

    def directives(self) -> dict[str, str]:
        """Directive fragments present in this chain, keyed by modifier."""
        return {}

    def __str__(self) -> str:
        directives = self.directives()
        rendered = [self.type_ref()]
        rendered.extend(directives[name] for name in DIRECTIVE_ORDER if name in directives)
        return " ".join(rendered)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"

    # Modifiers

    def optional(self) -> "TypeDefinition":
        """Set the field optional."""
        self._check(OPTIONAL)
        return self._with(_optional=True)

    def list(self) -> "ListDefinition":
        """Allow multiple values to be used for the field."""
        self._check(LIST)
        return ListDefinition(self)

    def auth(self, rules: AuthRuleF) -> "AuthDefinition":
        """Set the field-level auth directive.

        Args:
            rules: A callback that receives an AuthRules collector
        """
        self._check(AUTH)
        return AuthDefinition(self, rules)

    def search(self) -> "SearchDefinition":
        """Make the field searchable."""
        self._check(SEARCH)
        return SearchDefinition(self)

    def unique(self, scope: Optional[Iterable[str]] = None) -> "UniqueDefinition":
        """Make the field unique.

        Args:
            scope: Additional fields to be added to the constraint
        """
        self._check(UNIQUE)
        return UniqueDefinition(self, scope)

    def default(self, value: Any) -> "DefaultDefinition":
        """Set the default value of the field.

        Raises:
            InvalidDefaultValue: If the value is not in the field's value domain
        """
        self._check(DEFAULT)
        return DefaultDefinition(self, value)

    def resolver(self, name: str) -> "ResolverDefinition":
        """Attach a resolver function to the field.

        Args:
            name: The name of the resolver function file without the extension
        """
        self._check(RESOLVER)
        return ResolverDefinition(self, name)

    def cache(self, params: Any) -> "CacheDefinition":
        """Set the field-level cache directive.

        Args:
            params: FieldCacheParams or a mapping with maxAge and friends
        """
        self._check(CACHE)
        return CacheDefinition(self, params)


class ScalarDefinition(TypeDefinition):
    """A built-in scalar field type."""

    kind = "scalar"

    def __init__(self, scalar: ScalarType, registry: Optional[ScalarRegistry] = None):
        if not isinstance(scalar, ScalarType):
            try:
                scalar = ScalarType(scalar)
            except ValueError as e:
                raise InvalidIdentifier(scalar, "scalar type") from e
        self.scalar = scalar
        self.registry = registry if registry is not None else default_registry
        self._optional = False

    @property
    def type_name(self) -> str:
        return self.scalar.value

    def type_ref(self) -> str:
        return self.type_name if self._optional else f"{self.type_name}!"

    def accepts(self, value: Any) -> bool:
        handler = self.registry.get(self.scalar)
        return handler is not None and handler.accepts(value)

    def render_value(self, value: Any) -> str:
        return self.registry.get(self.scalar).serialize(value)


class EnumDefinition(TypeDefinition):
    """A field typed by a declared enum.

    The variants are copied when the definition is built, so later changes
    to the ``Enum`` do not affect it.
    """

    kind = "enum"

    def __init__(self, referenced_enum: Enum):
        self.enum_name = referenced_enum.name
        self.enum_variants = tuple(referenced_enum.variants)
        self._optional = False

    @property
    def type_name(self) -> str:
        return self.enum_name

    def type_ref(self) -> str:
        return self.enum_name if self._optional else f"{self.enum_name}!"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str) and value in self.enum_variants

    def render_value(self, value: str) -> str:
        return value

    def field_type_val(self) -> Enum:
        """Rebuild the enum this definition was taken from."""
        return Enum(self.enum_name, self.enum_variants)


class ReferenceDefinition(TypeDefinition):
    """A field referencing another object type by name."""

    kind = "reference"

    def __init__(self, referenced_type: Any):
        name = getattr(referenced_type, "name", referenced_type)
        self.referenced_type = validate_name(name, "type name")
        self._optional = False

    @property
    def type_name(self) -> str:
        return self.referenced_type

    def type_ref(self) -> str:
        return self.referenced_type if self._optional else f"{self.referenced_type}!"


class ListDefinition(TypeDefinition):
    """A list of a scalar, enum or reference.

    The list has its own optional flag, independent of its element's.
    """

    def __init__(self, field_definition: TypeDefinition):
        if not isinstance(field_definition, (ScalarDefinition, EnumDefinition, ReferenceDefinition)):
            raise InvalidOperationForState(LIST, type(field_definition).__name__)
        self.field_definition = field_definition
        self._optional = False

    @property
    def kind(self) -> str:
        if isinstance(self.field_definition, ReferenceDefinition):
            return "reference_list"
        return "list"

    def type_ref(self) -> str:
        inner = f"[{self.field_definition.type_ref()}]"
        return inner if self._optional else f"{inner}!"


class ModifierDefinition(TypeDefinition):
    """A node adding one directive around an inner definition."""

    def __init__(self, field: TypeDefinition):
        self.field = field

    @property
    def base(self) -> TypeDefinition:
        return self.field.base

    @property
    def applied(self) -> frozenset[str]:
        return self.field.applied | {self.modifier}

    def optional(self) -> "ModifierDefinition":
        self._check(OPTIONAL)
        return self._with(field=self.field.optional())

    def type_ref(self) -> str:
        return self.field.type_ref()

    def directive(self) -> str:
        raise NotImplementedError

    def directives(self) -> dict[str, str]:
        directives = self.field.directives()
        directives[self.modifier] = self.directive()
        return directives


class AuthDefinition(ModifierDefinition):
    modifier = AUTH

    def __init__(self, field: TypeDefinition, rules: AuthRuleF):
        super().__init__(field)
        self.rules = build_rules(rules)

    def directive(self) -> str:
        return f"@auth(rules: {self.rules})"


class SearchDefinition(ModifierDefinition):
    modifier = SEARCH

    def directive(self) -> str:
        return "@search"


class UniqueDefinition(ModifierDefinition):
    """Uniqueness constraint, optionally scoped by other fields."""

    modifier = UNIQUE

    def __init__(self, field: TypeDefinition, scope: Optional[Iterable[str]] = None):
        super().__init__(field)
        if isinstance(scope, str):
            raise InvalidIdentifier(scope, "unique scope (expected a list of field names)")
        names: tuple[str, ...] = ()
        for name in scope or ():
            validate_name(name, "unique scope field")
            if name in names:
                raise DuplicateScopeField(name)
            names += (name,)
        self.scope = names

    def directive(self) -> str:
        if not self.scope:
            return "@unique"
        fields = ", ".join(quote(name) for name in self.scope)
        return f"@unique(fields: [{fields}])"


class DefaultDefinition(ModifierDefinition):
    """Default value, checked against the field's value domain."""

    modifier = DEFAULT

    def __init__(self, field: TypeDefinition, value: Any):
        super().__init__(field)
        leaf = field.base
        if not leaf.accepts(value):
            raise InvalidDefaultValue(value, leaf.type_name)
        self.value = value
        self.rendered_value = leaf.render_value(value)

    def directive(self) -> str:
        return f"@default(value: {self.rendered_value})"


class ResolverDefinition(ModifierDefinition):
    modifier = RESOLVER

    def __init__(self, field: TypeDefinition, name: str):
        super().__init__(field)
        if not isinstance(name, str) or not name.strip():
            raise InvalidIdentifier(name, "resolver name")
        self.resolver_name = name

    def directive(self) -> str:
        return f"@resolver(name: {quote(self.resolver_name)})"


class CacheDefinition(ModifierDefinition):
    modifier = CACHE

    def __init__(self, field: TypeDefinition, params: Any):
        super().__init__(field)
        self.params = FieldCacheParams.coerce(params)

    def directive(self) -> str:
        return str(self.params)


# Definition type -> modifiers it exposes next
NEXT_MODIFIERS: dict[type, frozenset[str]] = {
    ScalarDefinition: ALL_MODIFIERS,
    EnumDefinition: ALL_MODIFIERS,
    ReferenceDefinition: frozenset({OPTIONAL, LIST, AUTH, RESOLVER, CACHE}),
    ListDefinition: frozenset({OPTIONAL, AUTH, SEARCH, RESOLVER, CACHE}),
    AuthDefinition: frozenset({OPTIONAL, SEARCH, UNIQUE, DEFAULT, RESOLVER, CACHE}),
    SearchDefinition: frozenset({OPTIONAL, AUTH, UNIQUE, DEFAULT, CACHE}),
    UniqueDefinition: frozenset({OPTIONAL, AUTH, SEARCH, DEFAULT}),
    DefaultDefinition: frozenset({OPTIONAL, AUTH, SEARCH, UNIQUE}),
    ResolverDefinition: frozenset({OPTIONAL, AUTH, CACHE}),
    CacheDefinition: frozenset({OPTIONAL, AUTH, RESOLVER}),
}
