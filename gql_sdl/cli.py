"""Command-line interface for gql-sdl."""

import importlib.util
import sys
from pathlib import Path

import click

from .core.errors import SchemaError
from .core.hooks import AddHeaderHook, FilterNamesHook, HookRunner
from .core.schema import Schema


def load_schema(config_path: Path, variable: str) -> Schema:
    """Import a Python config module and return its schema object."""
    spec = importlib.util.spec_from_file_location(config_path.stem, config_path)
    if spec is None or spec.loader is None:
        raise click.ClickException(f"Cannot load config module: {config_path}")
    module = importlib.util.module_from_spec(spec)
    # Let the config import helpers that live next to it
    sys.path.insert(0, str(config_path.parent))
    try:
        spec.loader.exec_module(module)
    except SchemaError as e:
        raise click.ClickException(f"{config_path.name}: {e}") from e
    finally:
        sys.path.remove(str(config_path.parent))

    schema = getattr(module, variable, None)
    if not isinstance(schema, Schema):
        raise click.ClickException(
            f"{config_path.name} must define '{variable}' as a gql_sdl Schema"
        )
    return schema


@click.group()
@click.version_option(package_name="gql-sdl")
def main():
    """GraphQL SDL builder.

    Render backend schemas described in Python.
    """
    pass


@main.command()
@click.argument("config", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file for the rendered SDL (default: stdout).",
)
@click.option(
    "--variable",
    default="schema",
    show_default=True,
    help="Name of the Schema object in the config module.",
)
@click.option(
    "--header",
    help="Comment header to prepend to the document.",
)
@click.option(
    "--exclude-prefix",
    help="Skip enums, types and queries whose name starts with this prefix.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Parse the rendered document and fail on syntax errors.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def render(config: str, output: str | None, variable: str, header: str | None,
           exclude_prefix: str | None, check: bool, verbose: bool):
    """Render the schema defined in a Python config module.

    Examples:

        gql-sdl render ./grafbase/config.py

        gql-sdl render ./config.py -o ./schema.graphql --check
    """
    config_path = Path(config).resolve()

    if verbose:
        click.echo(f"Config: {config_path}", err=True)

    schema = load_schema(config_path, variable)

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterNamesHook(exclude_prefix=exclude_prefix))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    if verbose:
        click.echo(f"  Enums: {len(schema.enums)}", err=True)
        click.echo(f"  Types: {len(schema.types)}", err=True)
        click.echo(f"  Queries: {len(schema.queries)}", err=True)
        click.echo(f"  Connectors: {len(schema.connectors)}", err=True)

    try:
        if check:
            schema.to_ast(hooks)
            if verbose:
                click.echo("Syntax check passed", err=True)
        sdl = schema.render(hooks)
    except SchemaError as e:
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(sdl)
        return

    output_path = Path(output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(sdl + "\n")
    click.echo(f"Done! Wrote schema to {output_path}", err=True)


if __name__ == "__main__":
    main()
