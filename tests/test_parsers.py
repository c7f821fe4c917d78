"""Tests for SDL and introspection parsers."""
import json
import os

import pytest
from graphql import GraphQLError, introspection_from_schema

from gqlsort_py.errors import SchemaSourceError
from gqlsort_py.parser.introspection_parser import parse_introspection, parse_introspection_file
from gqlsort_py.parser.sdl_parser import parse_sdl, parse_sdl_file

DATASET_DIR = os.path.join(os.path.dirname(__file__), "..", "dataset")
STARWARS = os.path.join(DATASET_DIR, "starwars.graphql")


def test_parse_sdl_file():
    schema = parse_sdl_file(STARWARS)
    assert schema.query_type.name == "Query"
    assert schema.mutation_type.name == "Mutation"
    assert schema.subscription_type.name == "Subscription"
    assert "SearchResult" in schema.type_map


def test_parse_sdl_accepts_path_or_text():
    from_path = parse_sdl(STARWARS)
    with open(STARWARS, encoding="utf-8") as f:
        from_text = parse_sdl(f.read())
    assert list(from_path.type_map) == list(from_text.type_map)


def test_parse_sdl_syntax_error():
    with pytest.raises(GraphQLError):
        parse_sdl("type Query {")


def test_parse_introspection_response():
    schema = parse_sdl_file(STARWARS)
    payload = json.dumps({"data": introspection_from_schema(schema)})
    client = parse_introspection(payload)
    assert set(client.type_map) == set(schema.type_map)
    assert list(client.type_map["Query"].fields) == list(schema.type_map["Query"].fields)


def test_parse_introspection_file(tmp_path):
    schema = parse_sdl_file(STARWARS)
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(introspection_from_schema(schema)), encoding="utf-8")
    assert parse_introspection_file(str(path)).query_type.name == "Query"
    assert parse_introspection(str(path)).query_type.name == "Query"


def test_parse_introspection_without_schema():
    with pytest.raises(SchemaSourceError):
        parse_introspection(json.dumps({"data": {"types": []}}))


def test_parse_sdl_text_with_nul_byte_reaches_parser():
    with pytest.raises(GraphQLError):
        parse_sdl("type Query { name: String }\x00")


def test_parse_introspection_text_with_nul_byte_reaches_json():
    with pytest.raises(json.JSONDecodeError):
        parse_introspection('{"data": null}\x00')
