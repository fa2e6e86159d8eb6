"""Shared test fixtures for gql-loader."""

from pathlib import Path

import pytest


@pytest.fixture()
def write_graphql(tmp_path: Path):
    """Return a helper that writes a .graphql file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def simple_import(write_graphql) -> Path:
    """An operation in a.graphql spreading a fragment imported from b.graphql."""
    write_graphql("b.graphql", "fragment Frag on T { id }\n")
    return write_graphql("a.graphql", '#import "./b.graphql"\nquery A { ...Frag }\n')


@pytest.fixture()
def diamond_graph(write_graphql) -> Path:
    """A imports B and C; both import D."""
    write_graphql("d.graphql", "fragment D on T { id }\n")
    write_graphql("b.graphql", '#import "./d.graphql"\nfragment B on T { ...D }\n')
    write_graphql("c.graphql", "#import './d.graphql'\nfragment C on T { ...D }\n")
    return write_graphql(
        "a.graphql",
        '#import "./b.graphql"\n#import "./c.graphql"\n\nquery A { t { ...B ...C } }\n',
    )


@pytest.fixture()
def cyclic_graph(write_graphql) -> Path:
    """A imports B, B imports A."""
    write_graphql("b.graphql", '#import "./a.graphql"\nfragment B on T { id }\n')
    return write_graphql("a.graphql", '#import "./b.graphql"\nquery A { t { ...B } }\n')
