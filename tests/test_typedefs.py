"""Tests for field definitions and the modifier chain."""

import pytest

from gql_sdl.core import (
    Enum,
    FieldCacheParams,
    InvalidDefaultValue,
    InvalidIdentifier,
    InvalidOperationForState,
    DuplicateScopeField,
    ListDefinition,
    ReferenceDefinition,
    ScalarDefinition,
    ScalarType,
    ScalarRegistry,
    SchemaError,
    g,
)
from gql_sdl.core.typedefs import DIRECTIVE_ORDER, EnumDefinition


@pytest.fixture
def role():
    return Enum("Role", ["ADMIN", "USER"])


def private(rules):
    rules.private()


class TestLeaves:
    """Tests for scalar, enum and reference leaves."""

    @pytest.mark.parametrize("scalar", list(ScalarType))
    def test_scalar_required_by_default(self, scalar):
        assert str(ScalarDefinition(scalar)) == f"{scalar.value}!"

    @pytest.mark.parametrize("scalar", list(ScalarType))
    def test_scalar_optional(self, scalar):
        assert str(ScalarDefinition(scalar).optional()) == scalar.value

    def test_scalar_from_name(self):
        assert str(ScalarDefinition("Email")) == "Email!"

    def test_unknown_scalar(self):
        with pytest.raises(InvalidIdentifier):
            ScalarDefinition("Money")

    def test_enum_leaf(self, role):
        assert str(g.enum_ref(role)) == "Role!"
        assert str(g.enum_ref(role).optional()) == "Role"

    def test_reference_leaf(self):
        assert str(ReferenceDefinition("Post")) == "Post!"
        assert str(g.ref("Post").optional()) == "Post"

    def test_reference_rejects_bad_name(self):
        with pytest.raises(InvalidIdentifier):
            ReferenceDefinition("not a name")

    def test_optional_does_not_mutate(self):
        base = g.string()
        optional = base.optional()
        assert str(base) == "String!"
        assert str(optional) == "String"
        assert base is not optional


class TestEnumSnapshot:
    """Enum variants are copied into the definition."""

    def test_mutating_enum_after_build(self, role):
        definition = EnumDefinition(role)
        with_default = definition.default("USER")
        role.variants.append("GUEST")

        assert definition.enum_variants == ("ADMIN", "USER")
        assert str(with_default) == "Role! @default(value: USER)"
        with pytest.raises(InvalidDefaultValue):
            definition.default("GUEST")

    def test_field_type_val(self, role):
        rebuilt = EnumDefinition(role).field_type_val()
        assert rebuilt.name == "Role"
        assert rebuilt.variants == ["ADMIN", "USER"]


class TestList:
    """Tests for list definitions."""

    def test_list_wraps_inner(self):
        assert str(g.string().list()) == "[String!]!"

    def test_optional_inner_vs_optional_list(self):
        inner_optional = g.string().optional().list()
        list_optional = g.string().list().optional()
        assert str(inner_optional) == "[String]!"
        assert str(list_optional) == "[String!]"
        assert str(inner_optional) != str(list_optional)

    def test_fully_optional(self):
        assert str(g.ref("Post").optional().list().optional()) == "[Post]"

    def test_list_of_constructor(self):
        assert str(ListDefinition(ReferenceDefinition("Post"))) == "[Post!]!"

    def test_nested_list_not_allowed(self):
        with pytest.raises(InvalidOperationForState):
            g.string().list().list()

    def test_list_after_directive_not_allowed(self):
        with pytest.raises(InvalidOperationForState):
            g.string().search().list()

    def test_list_of_modifier_rejected(self):
        with pytest.raises(InvalidOperationForState):
            ListDefinition(g.string().unique())

    def test_list_directives(self):
        assert str(g.string().list().search()) == "[String!]! @search"
        assert str(g.ref("Post").list().resolver("posts")) == '[Post!]! @resolver(name: "posts")'

    def test_no_default_or_unique_on_list(self):
        with pytest.raises(InvalidOperationForState):
            g.string().list().default("a")
        with pytest.raises(InvalidOperationForState):
            g.string().list().unique()
        with pytest.raises(InvalidOperationForState):
            g.string().list().auth(private).default("a")

    def test_no_search_on_reference_list(self):
        with pytest.raises(InvalidOperationForState):
            g.ref("Post").list().search()


class TestDefault:
    """Tests for default values."""

    def test_enum_default(self, role):
        assert str(g.enum_ref(role).default("ADMIN")) == "Role! @default(value: ADMIN)"

    def test_enum_default_outside_domain(self, role):
        with pytest.raises(InvalidDefaultValue) as exc:
            g.enum_ref(role).default("ROOT")
        assert exc.value.value == "ROOT"
        assert exc.value.type_name == "Role"

    @pytest.mark.parametrize(
        "definition, value, rendered",
        [
            (g.string(), "hello", '"hello"'),
            (g.string(), 'say "hi"', '"say \\"hi\\""'),
            (g.int(), 42, "42"),
            (g.float(), 1.5, "1.5"),
            (g.float(), 2, "2"),
            (g.boolean(), False, "false"),
            (g.id(), 7, '"7"'),
            (g.email(), "a@example.com", '"a@example.com"'),
            (g.url(), "https://example.com", '"https://example.com"'),
            (g.ip_address(), "127.0.0.1", '"127.0.0.1"'),
            (g.phone_number(), "+15555550100", '"+15555550100"'),
            (g.date(), "2024-01-15", '"2024-01-15"'),
            (g.json(), {"a": [1, True]}, "{ a: [1, true] }"),
        ],
    )
    def test_scalar_defaults(self, definition, value, rendered):
        assert str(definition.default(value)).endswith(f"@default(value: {rendered})")

    @pytest.mark.parametrize(
        "definition, value",
        [
            (g.string(), 1),
            (g.int(), "1"),
            (g.int(), True),
            (g.int(), 2**40),
            (g.float(), float("nan")),
            (g.boolean(), 0),
            (g.email(), "not-an-email"),
            (g.url(), "example.com"),
            (g.ip_address(), "999.1.1.1"),
            (g.date(), "yesterday"),
            (g.datetime(), "later"),
            (g.json(), {"a-b": 1}),
            (g.json(), {"a": float("inf")}),
            (g.json(), [float("nan")]),
            (g.json(), {1: "x"}),
        ],
    )
    def test_scalar_defaults_outside_domain(self, definition, value):
        with pytest.raises(InvalidDefaultValue):
            definition.default(value)

    def test_custom_registry_decides_domain(self):
        class PositiveIntHandler:
            def accepts(self, value):
                return isinstance(value, int) and value > 0

            def serialize(self, value):
                return str(value)

        registry = ScalarRegistry()
        registry.register(ScalarType.INT, PositiveIntHandler())
        definition = ScalarDefinition(ScalarType.INT, registry=registry)
        with pytest.raises(InvalidDefaultValue):
            definition.default(-1)
        with pytest.raises(InvalidDefaultValue):
            definition.optional().default(0)
        assert str(definition.default(3)) == "Int! @default(value: 3)"
        assert str(g.int().default(-1)) == "Int! @default(value: -1)"

    def test_invalid_default_is_schema_error(self):
        with pytest.raises(SchemaError):
            g.int().default("x")

    def test_default_keeps_optional(self):
        assert str(g.string().optional().default("x")) == 'String @default(value: "x")'
        assert str(g.string().default("x").optional()) == 'String @default(value: "x")'

    def test_no_default_on_reference(self):
        with pytest.raises(InvalidOperationForState):
            g.ref("Post").default("x")


class TestUnique:
    """Tests for uniqueness constraints."""

    def test_single_field(self):
        assert str(g.email().unique()) == "Email! @unique"

    def test_empty_scope(self):
        assert str(g.email().unique([])) == "Email! @unique"

    def test_composite_scope(self):
        rendered = str(g.string().unique(["owner", "kind"]))
        assert rendered == 'String! @unique(fields: ["owner", "kind"])'

    def test_duplicate_scope(self):
        with pytest.raises(DuplicateScopeField):
            g.string().unique(["owner", "owner"])

    def test_invalid_scope_name(self):
        with pytest.raises(InvalidIdentifier):
            g.string().unique(["bad name"])

    def test_scope_must_be_list(self):
        with pytest.raises(InvalidIdentifier):
            g.string().unique("owner")


class TestDirectives:
    """Tests for auth, search, resolver and cache."""

    def test_auth(self):
        assert str(g.string().auth(private)) == "String! @auth(rules: [{ allow: private }])"

    def test_search(self):
        assert str(g.string().search()) == "String! @search"

    def test_resolver(self):
        assert str(g.int().resolver("count")) == 'Int! @resolver(name: "count")'

    def test_resolver_requires_name(self):
        with pytest.raises(InvalidIdentifier):
            g.int().resolver("")

    def test_cache(self):
        assert str(g.string().cache({"maxAge": 60})) == "String! @cache(maxAge: 60)"

    def test_cache_full(self):
        params = FieldCacheParams(max_age=60, stale_while_revalidate=30, mutation_invalidation="entity")
        assert str(g.string().cache(params)) == (
            "String! @cache(maxAge: 60, staleWhileRevalidate: 30, mutationInvalidation: entity)"
        )

    def test_cache_invalid(self):
        with pytest.raises(SchemaError):
            g.string().cache({"maxAge": -1})

    def test_cached_field_can_be_optional(self):
        assert str(g.string().cache({"maxAge": 10}).optional()) == "String @cache(maxAge: 10)"

    def test_optional_reaches_only_the_type(self):
        chained = g.string().list().auth(private).optional()
        assert str(chained) == "[String!] @auth(rules: [{ allow: private }])"


class TestDirectiveOrder:
    """Directives render in a fixed order whatever the call order."""

    def test_order_constant(self):
        assert DIRECTIVE_ORDER == ("auth", "search", "unique", "default", "resolver", "cache")

    def test_reverse_call_order(self):
        a = g.string().search().unique().default("x").auth(private)
        b = g.string().auth(private).unique().search().default("x")
        expected = 'String! @auth(rules: [{ allow: private }]) @search @unique @default(value: "x")'
        assert str(a) == expected
        assert str(b) == expected

    def test_resolver_and_cache(self):
        a = g.string().cache({"maxAge": 5}).resolver("r")
        b = g.string().resolver("r").cache({"maxAge": 5})
        assert str(a) == str(b) == 'String! @resolver(name: "r") @cache(maxAge: 5)'


class TestLegality:
    """Illegal transitions fail at call time."""

    def test_modifier_not_repeated(self):
        with pytest.raises(InvalidOperationForState):
            g.string().auth(private).search().auth(private)

    @pytest.mark.parametrize(
        "build, operation",
        [
            (lambda: g.string().unique(), "unique"),
            (lambda: g.string().unique(), "resolver"),
            (lambda: g.string().default("x"), "resolver"),
            (lambda: g.string().resolver("r"), "search"),
            (lambda: g.string().cache({"maxAge": 1}), "unique"),
            (lambda: g.ref("Post"), "search"),
            (lambda: g.ref("Post"), "unique"),
        ],
    )
    def test_not_exposed(self, build, operation):
        definition = build()
        assert operation not in definition.allowed_modifiers()
        with pytest.raises(InvalidOperationForState) as exc:
            if operation == "resolver":
                definition.resolver("r")
            else:
                getattr(definition, operation)()
        assert exc.value.operation == operation

    def test_allowed_modifiers_shrink(self):
        leaf = g.string()
        assert "unique" in leaf.allowed_modifiers()
        assert "unique" not in leaf.unique().search().allowed_modifiers()

    def test_optional_always_allowed(self, role):
        assert str(g.enum_ref(role).unique().optional().optional()) == "Role @unique"


class TestReuse:
    """A leaf can seed independent chains and renders are idempotent."""

    def test_independent_chains(self):
        leaf = g.string()
        searchable = leaf.search()
        unique = leaf.unique()
        assert str(searchable) == "String! @search"
        assert str(unique) == "String! @unique"
        assert str(leaf) == "String!"

    def test_repeated_render(self, role):
        definition = g.enum_ref(role).optional().default("USER").auth(private)
        assert str(definition) == str(definition) == str(definition)
