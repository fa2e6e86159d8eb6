"""Load .graphql files with #import directives as document-node modules."""

from .core import (
    CodeGenerator,
    generate_contents_from_graphql_string,
    generate_graphql_string,
    load_graphql_module,
)
from .plugin import LoaderPlugin, graphql_loader_plugin

__all__ = [
    "CodeGenerator",
    "LoaderPlugin",
    "generate_contents_from_graphql_string",
    "generate_graphql_string",
    "graphql_loader_plugin",
    "load_graphql_module",
]
