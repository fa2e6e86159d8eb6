"""Build-tool integration for the GraphQL loader.

A build host asks the plugin which files it handles and, for each match,
hands over the file path and gets generated module text back. Any host
that implements the BuildHost protocol can register the plugin.
"""

import asyncio
import re
from dataclasses import dataclass, field
from re import Pattern
from typing import Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

from .core.generator import load_graphql_module
from .core.hooks import HookRunner
from .core.serializer import DocumentMapper

DEFAULT_FILTER = re.compile(r"\.graphql$")


@dataclass
class LoadResult:
    """Contents returned to the build host for one loaded file."""
    contents: str
    loader: str = "js"


@runtime_checkable
class BuildHost(Protocol):
    """Protocol for build tools that intercept file loads.

    Example:
        class MyBundler:
            def on_load(self, filter, callback):
                self.loaders.append((filter, callback))
    """

    def on_load(
        self,
        filter: Pattern[str],
        callback: Callable[[str], Awaitable[LoadResult]],
    ) -> None:
        """Register callback for files whose path matches filter."""
        ...


@dataclass
class LoaderPlugin:
    """Loads .graphql entry files as generated document-node modules."""
    filter_regex: Pattern[str] = DEFAULT_FILTER
    map_document_node: Optional[DocumentMapper] = None
    hooks: Optional[HookRunner] = None
    template_dir: Optional[str] = None
    name: str = field(default="graphql-loader", init=False)

    def matches(self, path: str) -> bool:
        """Check if the plugin handles path."""
        return self.filter_regex.search(path) is not None

    async def on_load(self, path: str) -> LoadResult:
        """Generate the module for an entry file. Errors propagate to the host."""
        contents = await load_graphql_module(
            path,
            map_document_node=self.map_document_node,
            template_dir=self.template_dir,
            hooks=self.hooks,
        )
        return LoadResult(contents=contents)

    def load(self, path: str) -> str:
        """Synchronous form of on_load, returning just the module text."""
        return asyncio.run(self.on_load(path)).contents

    def setup(self, build: BuildHost):
        """Register this plugin's load callback with a build host."""
        build.on_load(self.filter_regex, self.on_load)


def graphql_loader_plugin(
    filter_regex: Union[str, Pattern[str], None] = None,
    map_document_node: Optional[DocumentMapper] = None,
    hooks: Optional[HookRunner] = None,
    template_dir: Optional[str] = None,
) -> LoaderPlugin:
    """Create a loader plugin.

    Args:
        filter_regex: Pattern selecting the files to load (default: ``\\.graphql$``)
        map_document_node: Optional transform applied to every document
        hooks: Optional hook runner for post-generation hooks
        template_dir: Optional directory overriding the module template

    Returns:
        The configured LoaderPlugin
    """
    if filter_regex is None:
        pattern = DEFAULT_FILTER
    elif isinstance(filter_regex, str):
        pattern = re.compile(filter_regex)
    else:
        pattern = filter_regex
    return LoaderPlugin(
        filter_regex=pattern,
        map_document_node=map_document_node,
        hooks=hooks,
        template_dir=template_dir,
    )
