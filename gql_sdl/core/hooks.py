"""Render hooks for customizing schema output.

Provides protocols for pre- and post-render hooks that can filter the
schema before rendering or transform the rendered document.

Example usage:
    from gql_sdl.core.hooks import HookRunner, AddHeaderHook, FilterNamesHook

    hooks = HookRunner()
    hooks.add_pre_hook(FilterNamesHook(exclude_prefix="_"))
    hooks.add_post_hook(AddHeaderHook("# Generated - do not edit"))
    sdl = schema.render(hooks)
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .schema import Schema


@runtime_checkable
class PreRenderHook(Protocol):
    """Protocol for pre-render hooks.

    Pre-render hooks receive a copy of the schema before rendering and
    return the schema to render. The caller's schema is never modified.
    """

    def pre_render(self, schema: "Schema") -> "Schema":
        """Called before rendering.

        Args:
            schema: A copy of the schema being rendered

        Returns:
            The (possibly modified) schema to render
        """
        ...


@runtime_checkable
class PostRenderHook(Protocol):
    """Protocol for post-render hooks.

    Post-render hooks receive the rendered document and return the text
    that is handed back to the caller.
    """

    def post_render(self, content: str) -> str:
        """Called after rendering.

        Args:
            content: The rendered SDL document

        Returns:
            The (possibly transformed) document
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a comment header to the document.

    Example:
        hook = AddHeaderHook("Generated - do not edit")
    """

    def __init__(self, header: str):
        self.header = header

    def post_render(self, content: str) -> str:
        """Add the header, one ``#`` comment line per header line."""
        lines = self.header.rstrip("\n").split("\n")
        header = "\n".join(line if line.startswith("#") else f"# {line}" for line in lines)
        return f"{header}\n\n{content}"


class FilterNamesHook:
    """Built-in hook to drop enums, types and queries by name prefix/suffix.

    Example:
        # Remove everything starting with underscore
        hook = FilterNamesHook(exclude_prefix="_")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if a definition should be rendered."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_render(self, schema: "Schema") -> "Schema":
        """Filter definitions from the schema."""
        schema.enums = [e for e in schema.enums if self._should_include(e.name)]
        schema.types = [t for t in schema.types if self._should_include(t.name)]
        schema.queries = [q for q in schema.queries if self._should_include(q.name)]
        return schema


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreRenderHook] = []
        self.post_hooks: list[PostRenderHook] = []

    def add_pre_hook(self, hook: PreRenderHook):
        """Add a pre-render hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostRenderHook):
        """Add a post-render hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, schema: "Schema") -> "Schema":
        """Run all pre-render hooks in order."""
        for hook in self.pre_hooks:
            schema = hook.pre_render(schema)
        return schema

    def run_post_hooks(self, content: str) -> str:
        """Run all post-render hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_render(content)
        return content
