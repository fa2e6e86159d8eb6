"""Command-line interface for gql-loader."""

import asyncio
import logging
from pathlib import Path

import click
from graphql import GraphQLSyntaxError

from .core.errors import LoaderError
from .core.generator import build_graphql_module
from .core.graph import generate_graphql_string
from .core.hooks import AddHeaderHook, AddTypenameTransform, HookRunner


def configure_logging(verbose: bool):
    """Send debug logging to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@click.group()
@click.version_option(package_name="gql-loader")
def main():
    """GraphQL document loader.

    Resolve #import directives in .graphql files and generate document-node
    modules for JavaScript GraphQL clients.
    """
    pass


@main.command()
@click.argument("entry", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file for the generated module (default: stdout).",
)
@click.option(
    "--add-typename",
    is_flag=True,
    help="Add __typename to every selection set below the operation root.",
)
@click.option(
    "--header",
    default=None,
    help="Header text to prepend to the generated module.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Directory with a custom module.js.j2 template.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def build(entry: str, output: str | None, add_typename: bool, header: str | None,
          template_dir: str | None, verbose: bool):
    """Generate a document-node module from a GraphQL entry file.

    Examples:

        gql-loader build ./queries/user.graphql

        gql-loader build ./queries/user.graphql -o ./generated/user.js --add-typename
    """
    configure_logging(verbose)
    entry_path = Path(entry).resolve()

    hooks = HookRunner()
    if add_typename:
        hooks.add_document_transform(AddTypenameTransform())
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    if verbose:
        click.echo(f"Entry: {entry_path}", err=True)

    try:
        module = asyncio.run(build_graphql_module(
            str(entry_path),
            map_document_node=hooks.run_document_transforms if hooks.document_transforms else None,
            template_dir=template_dir,
            hooks=hooks,
        ))
    except (LoaderError, GraphQLSyntaxError) as e:
        raise click.ClickException(str(e)) from e

    contents = module.contents
    if output is None:
        click.echo(contents)
        return

    output_path = Path(output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(contents + "\n", encoding="utf-8")

    num_exports = len(module.operation_names)
    click.echo(f"Done! Generated {num_exports} operation export(s) in {output_path}", err=True)


@main.command()
@click.argument("entry", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def assemble(entry: str, verbose: bool):
    """Print the GraphQL source assembled from an entry file and its imports.

    Examples:

        gql-loader assemble ./queries/user.graphql
    """
    configure_logging(verbose)
    try:
        graphql_string = asyncio.run(generate_graphql_string(str(Path(entry).resolve())))
    except LoaderError as e:
        raise click.ClickException(str(e)) from e
    click.echo(graphql_string)


if __name__ == "__main__":
    main()
