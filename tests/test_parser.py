"""Tests for the #import directive parser."""

import os

import pytest

from gql_loader.core.ir import ImportReference
from gql_loader.core.parser import parse_graphql_file, parse_import_lines

FILE_PATH = "/project/queries/user.graphql"


def parse(text: str):
    return parse_import_lines(text.splitlines(), FILE_PATH)


class TestImportLines:
    """Tests for recognizing import directives."""

    def test_double_quoted_import(self):
        parsed = parse('#import "./fragments.graphql"\nquery A { id }')
        assert parsed.imports == (
            ImportReference(
                relative_path="./fragments.graphql",
                absolute_path="/project/queries/fragments.graphql",
            ),
        )

    def test_single_quoted_import_with_space_prefix(self):
        parsed = parse("# import '../shared/user.graphql'\nquery A { id }")
        assert parsed.import_paths == ["/project/shared/user.graphql"]

    def test_unbalanced_quotes_are_stripped(self):
        parsed = parse('#import "./a.graphql\nquery A { id }')
        assert parsed.imports[0].relative_path == "./a.graphql"

    def test_imports_keep_declaration_order(self):
        parsed = parse('#import "./b.graphql"\n#import "./a.graphql"\nquery A { id }')
        assert [ref.relative_path for ref in parsed.imports] == ["./b.graphql", "./a.graphql"]

    def test_import_lines_are_not_body(self):
        parsed = parse('#import "./b.graphql"\nquery A { id }')
        assert "#import" not in parsed.body


class TestHeader:
    """Tests for the import header rules."""

    def test_comments_and_blank_lines_before_content_are_dropped(self):
        parsed = parse('# Queries for users\n\n#import "./b.graphql"\n\nquery A { id }')
        assert parsed.body == "query A { id }"
        assert len(parsed.imports) == 1

    def test_import_after_content_is_body(self):
        parsed = parse('query A { id }\n#import "./late.graphql"')
        assert parsed.imports == ()
        assert parsed.body == 'query A { id }\n#import "./late.graphql"'

    def test_comments_after_content_are_kept(self):
        parsed = parse("query A {\n  # the id\n\n  id\n}")
        assert parsed.body == "query A {\n  # the id\n\n  id\n}"

    def test_body_is_trimmed(self):
        parsed = parse("\n\nquery A { id }\n\n\n")
        assert parsed.body == "query A { id }"

    def test_hash_without_space_is_a_comment(self):
        parsed = parse('#imports "./b.graphql"\nquery A { id }')
        assert parsed.imports == ()
        assert parsed.body == "query A { id }"

    def test_crlf_line_endings(self):
        parsed = parse_import_lines(
            ['#import "./b.graphql"\r\n', "query A { id }\r\n"], FILE_PATH
        )
        assert parsed.import_paths == ["/project/queries/b.graphql"]
        assert parsed.body == "query A { id }"

    def test_only_imports(self):
        parsed = parse('#import "./b.graphql"')
        assert parsed.body == ""
        assert len(parsed.imports) == 1


class TestParseGraphQLFile:
    """Tests for reading files from disk."""

    def test_reads_file(self, write_graphql, tmp_path):
        path = write_graphql("a.graphql", '#import "./b.graphql"\nquery A { id }\n')
        parsed = parse_graphql_file(str(path))
        assert parsed.file_path == str(path)
        assert parsed.body == "query A { id }"
        assert parsed.import_paths == [os.path.join(str(tmp_path), "b.graphql")]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_graphql_file(str(tmp_path / "missing.graphql"))
