"""GraphQL file parser for ``#import`` directives.

Splits a .graphql file into the imports declared in its header and the
GraphQL body that follows. Imports must form a contiguous header: once a
line of real content has been seen, nothing else is treated as an import.
"""

import logging
import os
from typing import Iterable

from .ir import ImportReference, ParsedFile

logger = logging.getLogger(__name__)

IMPORT_PREFIXES = ("#import ", "# import ")


def _resolve_import(prefix: str, line: str, file_path: str) -> ImportReference:
    """Build an ImportReference from an import line relative to file_path."""
    relative_path = line[len(prefix):].replace('"', "").replace("'", "")
    absolute_path = os.path.normpath(
        os.path.join(os.path.dirname(file_path), relative_path)
    )
    return ImportReference(relative_path=relative_path, absolute_path=absolute_path)


def parse_import_lines(lines: Iterable[str], file_path: str) -> ParsedFile:
    """Split a file's lines into its imports and body.

    Args:
        lines: The file's lines in order, with or without line terminators
        file_path: Canonical path of the file, used to resolve imports

    Returns:
        The ParsedFile with a trimmed body and imports in declaration order
    """
    body_lines: list[str] = []
    imports: list[ImportReference] = []
    has_exhausted_imports = False

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if has_exhausted_imports:
            body_lines.append(line + "\n")
            continue

        prefix = next((p for p in IMPORT_PREFIXES if line.startswith(p)), None)
        if prefix is not None:
            imports.append(_resolve_import(prefix, line, file_path))
        elif line == "" or line.startswith("#"):
            # Header comments and blank lines are dropped
            continue
        else:
            has_exhausted_imports = True
            body_lines.append(line + "\n")

    return ParsedFile(
        file_path=file_path,
        body="".join(body_lines).strip(),
        imports=tuple(imports),
    )


def parse_graphql_file(file_path: str) -> ParsedFile:
    """Read a .graphql file line by line and parse its import header.

    Raises:
        FileNotFoundError: If file_path does not exist
    """
    with open(file_path, encoding="utf-8") as f:
        parsed = parse_import_lines(f, file_path)
    logger.debug("Parsed %s (%d imports)", file_path, len(parsed.imports))
    return parsed
