"""Tests for render hooks."""

import pytest

from gql_sdl.core import g
from gql_sdl.core.hooks import (
    AddHeaderHook,
    FilterNamesHook,
    HookRunner,
    PostRenderHook,
    PreRenderHook,
)
from gql_sdl.core.schema import Schema


@pytest.fixture
def sample_schema():
    """Create a sample schema for testing."""
    schema = Schema()
    schema.enum("Status", ["ACTIVE"])
    schema.enum("_Internal", ["X"])
    schema.type("User", {"name": g.string()})
    schema.type("_Meta", {"version": g.int()})
    schema.type("Product", {"sku": g.string()})
    schema.query("userCount", g.int(), "userCount")
    schema.query("_debug", g.string(), "debug")
    return schema


class TestAddHeaderHook:
    """Tests for AddHeaderHook."""

    def test_adds_header(self):
        hook = AddHeaderHook("Generated")
        result = hook.post_render("type User")
        assert result == "# Generated\n\ntype User"

    def test_keeps_existing_comment_marker(self):
        hook = AddHeaderHook("# Header\n")
        assert hook.post_render("code") == "# Header\n\ncode"

    def test_multiline_header(self):
        hook = AddHeaderHook("Generated\ndo not edit")
        assert hook.post_render("x").startswith("# Generated\n# do not edit\n\n")


class TestFilterNamesHook:
    """Tests for FilterNamesHook."""

    def test_exclude_prefix(self, sample_schema):
        hook = FilterNamesHook(exclude_prefix="_")
        result = hook.pre_render(sample_schema.copy())

        assert [t.name for t in result.types] == ["User", "Product"]
        assert [e.name for e in result.enums] == ["Status"]
        assert [q.name for q in result.queries] == ["userCount"]

    def test_exclude_suffix(self, sample_schema):
        hook = FilterNamesHook(exclude_suffix="Count")
        result = hook.pre_render(sample_schema.copy())
        assert [q.name for q in result.queries] == ["_debug"]

    def test_include_prefix(self, sample_schema):
        hook = FilterNamesHook(include_prefix="P")
        result = hook.pre_render(sample_schema.copy())
        assert [t.name for t in result.types] == ["Product"]
        assert result.enums == []

    def test_include_suffix(self, sample_schema):
        hook = FilterNamesHook(include_suffix="er")
        result = hook.pre_render(sample_schema.copy())
        assert [t.name for t in result.types] == ["User"]


class TestHookRunner:
    """Tests for HookRunner."""

    def test_runs_hooks_in_order(self):
        runner = HookRunner()
        runner.add_post_hook(AddHeaderHook("first"))
        runner.add_post_hook(AddHeaderHook("second"))
        assert runner.run_post_hooks("body") == "# second\n\n# first\n\nbody"

    def test_render_does_not_modify_schema(self, sample_schema):
        runner = HookRunner()
        runner.add_pre_hook(FilterNamesHook(exclude_prefix="_"))
        filtered = sample_schema.render(runner)

        assert "_Meta" not in filtered
        assert "_Meta" in sample_schema.render()
        assert len(sample_schema.types) == 3

    def test_empty_runner(self, sample_schema):
        assert sample_schema.render(HookRunner()) == sample_schema.render()


class TestProtocols:
    """Tests for hook protocol compliance."""

    def test_builtin_hooks(self):
        assert isinstance(AddHeaderHook("x"), PostRenderHook)
        assert isinstance(FilterNamesHook(), PreRenderHook)

    def test_custom_hook(self):
        class Upper:
            def post_render(self, content):
                return content.upper()

        assert isinstance(Upper(), PostRenderHook)
        assert not isinstance(Upper(), PreRenderHook)
