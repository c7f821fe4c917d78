"""Tests for the sortedness check."""
import os

from graphql import build_schema

from gqlsort_py.converter.lexicographic_sort import lexicographic_sort_schema
from gqlsort_py.converter.sort_check import is_lexicographically_sorted
from gqlsort_py.parser.sdl_parser import parse_sdl, parse_sdl_file
from gqlsort_py.schema.options import CompareOptions
from gqlsort_py.serializer.sdl_serializer import serialize_sdl

DATASET_DIR = os.path.join(os.path.dirname(__file__), "..", "dataset")


def test_unsorted_fixture_detected():
    schema = parse_sdl_file(os.path.join(DATASET_DIR, "starwars.graphql"))
    assert not is_lexicographically_sorted(schema)


def test_sorted_sdl_reparsed_is_sorted():
    schema = parse_sdl_file(os.path.join(DATASET_DIR, "starwars.graphql"))
    reparsed = parse_sdl(serialize_sdl(lexicographic_sort_schema(schema)))
    assert is_lexicographically_sorted(reparsed)


def test_unsorted_enum_values_detected():
    schema = build_schema("""
        type Query { size: Size }
        enum Size { SMALL LARGE }
    """)
    assert not is_lexicographically_sorted(schema)


def test_unsorted_arguments_detected():
    schema = build_schema("type Query { find(b: Int, a: Int): Int }")
    assert not is_lexicographically_sorted(schema)


def test_unsorted_directive_locations_detected():
    schema = build_schema("""
        directive @tag on OBJECT | FIELD_DEFINITION
        type Query { x: Int }
    """)
    assert not is_lexicographically_sorted(schema)


def test_check_uses_compare_options():
    schema = build_schema("type Query { alpha: Int Beta: Int }")
    assert not is_lexicographically_sorted(schema)
    assert is_lexicographically_sorted(schema, CompareOptions(locales="en"))


def test_built_in_scalars_and_directives_not_checked():
    schema = build_schema("type Query { a: Int b: String }")
    type_names = list(schema.type_map)
    directive_names = [d.name for d in schema.directives]
    assert type_names.index("Int") > type_names.index("Query")
    assert directive_names != sorted(directive_names)
    assert is_lexicographically_sorted(schema)
