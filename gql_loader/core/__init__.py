"""Core modules for GraphQL import resolution and module generation."""

from .errors import (
    ImportNotFoundError,
    InvalidEncodingError,
    LoaderError,
    MissingFragmentError,
)
from .fragments import (
    collect_all_fragment_definitions,
    collect_fragment_references,
    fragments_for_operation,
)
from .generator import (
    CodeGenerator,
    GeneratedModule,
    build_graphql_module,
    generate_contents_from_graphql_string,
    load_graphql_module,
)
from .graph import (
    assemble_graphql_string,
    generate_graphql_string,
    topologically_sort_parsed_files,
)
from .hooks import (
    AddHeaderHook,
    AddTypenameTransform,
    DocumentTransform,
    HookRunner,
    PostGenerateHook,
)
from .ir import ImportReference, ParsedFile, ResolutionCache
from .parser import parse_graphql_file, parse_import_lines
from .resolver import ImportGraphResolver, resolve_imports
from .serializer import (
    UNDEFINED,
    generate_document_node_string,
    serialize_document_node,
)

__all__ = [
    # Errors
    "LoaderError",
    "ImportNotFoundError",
    "InvalidEncodingError",
    "MissingFragmentError",
    # IR types
    "ImportReference",
    "ParsedFile",
    "ResolutionCache",
    # Parser
    "parse_import_lines",
    "parse_graphql_file",
    # Resolver
    "ImportGraphResolver",
    "resolve_imports",
    # Ordering and assembly
    "topologically_sort_parsed_files",
    "assemble_graphql_string",
    "generate_graphql_string",
    # Fragments
    "collect_all_fragment_definitions",
    "collect_fragment_references",
    "fragments_for_operation",
    # Serializer
    "UNDEFINED",
    "serialize_document_node",
    "generate_document_node_string",
    # Hooks
    "DocumentTransform",
    "PostGenerateHook",
    "AddTypenameTransform",
    "AddHeaderHook",
    "HookRunner",
    # Generator
    "CodeGenerator",
    "GeneratedModule",
    "build_graphql_module",
    "generate_contents_from_graphql_string",
    "load_graphql_module",
]
