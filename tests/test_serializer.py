"""Tests for document node serialization."""

import json

import pytest
from graphql import DocumentNode, FieldNode, NameNode, parse

from gql_loader.core.serializer import (
    UNDEFINED,
    camel_case,
    generate_document_node_string,
    node_kind,
    serialize_document_node,
)


def load(text: str):
    """Decode serialized text, reading undefined as None."""
    return json.loads(text.replace("undefined", "null"))


class TestUndefined:
    """Tests for explicit undefined values."""

    def test_none_becomes_bare_undefined(self):
        assert serialize_document_node({"alias": None}) == "{\"alias\":undefined}"

    def test_undefined_key_is_not_dropped(self):
        text = serialize_document_node({"a": 1, "b": None, "c": 2})
        assert text == "{\"a\":1,\"b\":undefined,\"c\":2}"

    def test_undefined_string_stays_quoted(self):
        assert serialize_document_node({"value": "undefined"}) == "{\"value\":\"undefined\"}"

    def test_placeholder_like_string_stays_quoted(self):
        assert serialize_document_node(["__undefined"]) == "[\"__undefined\"]"

    def test_sentinel_value(self):
        assert serialize_document_node([UNDEFINED]) == "[undefined]"
        assert repr(UNDEFINED) == "undefined"

    def test_undefined_in_parsed_document(self):
        text = serialize_document_node(parse("query A { id }"))
        assert "\"alias\":undefined" in text
        assert "\"alias\":\"" not in text


class TestStructure:
    """Tests for the serialized node shape."""

    def test_scalars(self):
        assert serialize_document_node([True, False, 3, 1.5, "x"]) == "[true,false,3,1.5,\"x\"]"

    def test_non_ascii_is_not_escaped(self):
        assert serialize_document_node({"s": "héllo"}) == "{\"s\":\"héllo\"}"

    def test_document_shape(self):
        data = load(serialize_document_node(parse("query A { id }")))
        assert data["kind"] == "Document"
        operation = data["definitions"][0]
        assert operation["kind"] == "OperationDefinition"
        assert operation["operation"] == "query"
        assert operation["name"] == {"kind": "Name", "value": "A"}
        assert operation["variableDefinitions"] == []
        field = operation["selectionSet"]["selections"][0]
        assert field["kind"] == "Field"
        assert field["name"]["value"] == "id"
        assert field["selectionSet"] is None

    def test_only_root_has_loc(self):
        source = "query A { id }"
        text = serialize_document_node(parse(source))
        assert text.count("\"loc\"") == 1
        assert load(text)["loc"] == {"start": 0, "end": len(source)}

    def test_synthetic_document_has_no_loc(self):
        operation = parse("query A { id }").definitions[0]
        data = load(serialize_document_node(DocumentNode(definitions=(operation,))))
        assert "loc" not in data

    def test_fragment_definition(self):
        data = load(serialize_document_node(parse("fragment F on User { id }")))
        fragment = data["definitions"][0]
        assert fragment["kind"] == "FragmentDefinition"
        assert fragment["typeCondition"]["kind"] == "NamedType"
        assert fragment["typeCondition"]["name"]["value"] == "User"

    def test_empty_lists_are_arrays(self):
        text = serialize_document_node(parse("query A { t { id } }"))
        assert "\"arguments\":[]" in text
        assert "\"directives\":[]" in text
        assert "\"arguments\":undefined" not in text
        assert "\"directives\":undefined" not in text

    def test_missing_list_keys_become_empty_arrays(self):
        field = FieldNode(name=NameNode(value="id"))
        data = load(serialize_document_node(field))
        assert data["arguments"] == []
        assert data["directives"] == []
        assert data["alias"] is None
        assert "\"alias\":undefined" in serialize_document_node(field)

    def test_operation_has_no_description_key(self):
        operation = load(serialize_document_node(parse("query A { id }")))["definitions"][0]
        assert "description" not in operation

    def test_unknown_type_raises(self):
        with pytest.raises(TypeError):
            serialize_document_node({"x": object()})

    def test_custom_value_mapper(self):
        def mapper(value):
            return "<none>" if value is None else value

        assert serialize_document_node({"a": None}, map_value=mapper) == "{\"a\":\"<none>\"}"


class TestGenerateDocumentNodeString:
    """Tests for transform-then-serialize."""

    def test_without_transform(self):
        document = parse("query A { id }")
        assert generate_document_node_string(document) == serialize_document_node(document)

    def test_transform_is_applied(self):
        document = parse("query A { id }\nquery B { id }")

        def only_first(doc):
            return DocumentNode(definitions=doc.definitions[:1])

        data = load(generate_document_node_string(document, only_first))
        assert len(data["definitions"]) == 1

    def test_transform_error_propagates(self):
        class TransformFailed(Exception):
            pass

        def broken(_doc):
            raise TransformFailed("boom")

        with pytest.raises(TransformFailed, match="boom"):
            generate_document_node_string(parse("query A { id }"), broken)


def test_camel_case():
    assert camel_case("selection_set") == "selectionSet"
    assert camel_case("variable_definitions") == "variableDefinitions"
    assert camel_case("kind") == "kind"


def test_node_kind():
    assert node_kind(parse("{ id }")) == "Document"
