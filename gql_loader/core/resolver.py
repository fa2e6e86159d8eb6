"""Recursive ``#import`` resolution.

Starting from an entry file, discovers and parses every transitively
imported GraphQL file exactly once. File reads run concurrently in worker
threads; each newly discovered file is spawned as a task in one shared
task group, and resolution finishes when the group joins.
"""

import asyncio
import logging
import os

from .errors import ImportNotFoundError, InvalidEncodingError
from .ir import ParsedFile, ResolutionCache
from .parser import parse_graphql_file

logger = logging.getLogger(__name__)


def canonical_path(path: str) -> str:
    """Return the absolute, normalized form of path used as cache key."""
    return os.path.normpath(os.path.abspath(path))


class ImportGraphResolver:
    """Resolves the import graph reachable from one entry file.

    Example:
        resolver = ImportGraphResolver("queries/user.graphql")
        cache = await resolver.resolve()
        for path, parsed in cache.items():
            ...
    """

    def __init__(self, entry_path: str):
        """Initialize a resolver for a single entry file."""
        self.entry_path = canonical_path(entry_path)
        self.cache: ResolutionCache = {}
        self._scheduled: set[str] = set()
        self._group: asyncio.TaskGroup | None = None

    async def resolve(self) -> ResolutionCache:
        """Parse the entry file and everything it imports.

        Returns:
            The resolution cache, with the entry file inserted first

        Raises:
            ImportNotFoundError: If any reachable file does not exist
        """
        self._scheduled.add(self.entry_path)
        try:
            async with asyncio.TaskGroup() as group:
                self._group = group
                group.create_task(self._visit(self.entry_path, None))
        except ExceptionGroup as eg:
            # Fail fast: surface the first failure as-is
            error = eg.exceptions[0]
            raise error from error.__cause__
        finally:
            self._group = None

        logger.debug("Resolved %d file(s) from %s", len(self.cache), self.entry_path)
        return self.cache

    async def _visit(self, file_path: str, imported_from: str | None):
        """Parse one file and schedule its not-yet-seen imports."""
        if file_path in self.cache:
            return

        parsed = await self._parse(file_path, imported_from)
        self.cache[parsed.file_path] = parsed

        for ref in parsed.imports:
            if ref.absolute_path in self._scheduled:
                continue
            self._scheduled.add(ref.absolute_path)
            logger.debug("Scheduling %s (imported from %s)", ref.absolute_path, file_path)
            self._group.create_task(self._visit(ref.absolute_path, file_path))

    @staticmethod
    async def _parse(file_path: str, imported_from: str | None) -> ParsedFile:
        try:
            return await asyncio.to_thread(parse_graphql_file, file_path)
        except FileNotFoundError as e:
            raise ImportNotFoundError(file_path, imported_from) from e
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(file_path, imported_from) from e


async def resolve_imports(entry_path: str) -> ResolutionCache:
    """Resolve every file reachable from entry_path through ``#import``."""
    return await ImportGraphResolver(entry_path).resolve()
