#!/usr/bin/env python3
"""
Demo: load a GraphQL entry file with #import directives.

This demonstrates:
1. Resolving imports into one ordered GraphQL string
2. Generating the document-node module for the entry file
3. Registering the loader with a build host
"""

import asyncio
import tempfile
from pathlib import Path

from gql_loader import graphql_loader_plugin
from gql_loader.core import (
    AddHeaderHook,
    AddTypenameTransform,
    HookRunner,
    generate_graphql_string,
)

FILES = {
    "fragments/user.graphql": """\
fragment UserParts on User {
  id
  name
}
""",
    "fragments/viewer.graphql": """\
#import "./user.graphql"

fragment ViewerParts on Viewer {
  user { ...UserParts }
}
""",
    "viewer.graphql": """\
# Queries for the current viewer
#import "./fragments/viewer.graphql"

query Viewer {
  viewer { ...ViewerParts }
}
""",
}


class PrintingBuild:
    """Stand-in for a bundler that loads one file through its plugins."""

    def __init__(self):
        self.loaders = []

    def on_load(self, filter, callback):
        self.loaders.append((filter, callback))

    def load(self, path: str) -> str:
        for pattern, callback in self.loaders:
            if pattern.search(path):
                return asyncio.run(callback(path)).contents
        raise LookupError(f"No loader for {path}")


def main():
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        for name, content in FILES.items():
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        entry = str(root / "viewer.graphql")

        print("=== GraphQL Loader Demo ===\n")

        print("1. Assembled GraphQL (imports first):\n")
        print(asyncio.run(generate_graphql_string(entry)))

        print("\n2. Generated module:\n")
        hooks = HookRunner()
        hooks.add_document_transform(AddTypenameTransform())
        hooks.add_post_hook(AddHeaderHook("/* Generated by gql-loader */"))
        plugin = graphql_loader_plugin(
            map_document_node=hooks.run_document_transforms,
            hooks=hooks,
        )

        build = PrintingBuild()
        plugin.setup(build)
        contents = build.load(entry)
        for line in contents.split("\n"):
            print(line if len(line) <= 120 else line[:117] + "...")

        print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
