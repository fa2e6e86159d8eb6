"""Intermediate Representation (IR) for GraphQL import graphs.

This module defines the dataclasses produced while resolving ``#import``
directives: one ParsedFile per canonical path, each holding the imports it
declares and the GraphQL body left once those directives are stripped.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ImportReference:
    """A normalized pointer from one GraphQL file to another."""
    relative_path: str  # As written after the directive, quotes removed
    absolute_path: str  # Canonical identity used for deduplication


@dataclass(frozen=True)
class ParsedFile:
    """A GraphQL file split into its import header and body.

    Created once per canonical path by the import parser and never
    modified afterwards.
    """
    file_path: str
    body: str
    imports: tuple[ImportReference, ...] = field(default_factory=tuple)

    @property
    def import_paths(self) -> list[str]:
        """Return the canonical paths of every declared import, in order."""
        return [ref.absolute_path for ref in self.imports]


# Canonical file path -> ParsedFile. At most one entry per path.
ResolutionCache = dict[str, ParsedFile]
