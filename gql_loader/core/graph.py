"""Ordering and assembly of resolved GraphQL files."""

import logging
from typing import Iterable

from .ir import ParsedFile, ResolutionCache
from .resolver import resolve_imports

logger = logging.getLogger(__name__)


def topologically_sort_parsed_files(
    parsed_files: Iterable[ParsedFile], cache: ResolutionCache
) -> list[ParsedFile]:
    """Order files so that every import precedes the file importing it.

    Depth-first post-order walk over parsed_files in the given order. Each
    file is visited once; in an import cycle the second visit is skipped,
    so the edge that closes the cycle is not honored.

    Args:
        parsed_files: Starting points of the walk, in a fixed order
        cache: Lookup from canonical path to ParsedFile for the imports

    Returns:
        Files with dependencies first
    """
    visited: set[str] = set()
    ordered: list[ParsedFile] = []

    def visit(parsed: ParsedFile):
        if parsed.file_path in visited:
            return
        visited.add(parsed.file_path)
        for import_path in parsed.import_paths:
            visit(cache[import_path])
        ordered.append(parsed)

    for parsed in parsed_files:
        visit(parsed)
    return ordered


def assemble_graphql_string(sorted_files: Iterable[ParsedFile]) -> str:
    """Concatenate file bodies in order, separated by a blank line."""
    return "\n\n".join(parsed.body for parsed in sorted_files)


async def generate_graphql_string(entry_path: str) -> str:
    """Resolve, order and concatenate everything reachable from entry_path."""
    cache = await resolve_imports(entry_path)
    sorted_files = topologically_sort_parsed_files(cache.values(), cache)
    logger.debug("Assembly order: %s", [f.file_path for f in sorted_files])
    return assemble_graphql_string(sorted_files)
