"""gqlsort-py: canonical lexicographic ordering for GraphQL schemas.

Sorted copies of graphql-core schemas give diff-stable snapshots and
fingerprints that do not depend on declaration order.
"""
__version__ = "0.1.0"

from gqlsort_py.errors import (
    CollationError,
    SchemaSortError,
    SchemaSourceError,
    UnexpectedTypeKindError,
    UnknownTypeError,
)
from gqlsort_py.schema.options import CompareOptions

from gqlsort_py.converter.collation import build_sort_key
from gqlsort_py.converter.lexicographic_sort import lexicographic_sort_schema
from gqlsort_py.converter.sort_check import is_lexicographically_sorted

from gqlsort_py.parser.sdl_parser import parse_sdl, parse_sdl_file
from gqlsort_py.parser.introspection_parser import parse_introspection, parse_introspection_file

from gqlsort_py.serializer.sdl_serializer import serialize_sdl
from gqlsort_py.serializer.json_serializer import serialize_json
from gqlsort_py.serializer.fingerprint import compute_schema_fingerprint

__all__ = [
    # Errors
    "SchemaSortError", "UnknownTypeError", "UnexpectedTypeKindError",
    "CollationError", "SchemaSourceError",
    # Options
    "CompareOptions",
    # Sorting
    "build_sort_key", "lexicographic_sort_schema", "is_lexicographically_sorted",
    # Parsers
    "parse_sdl", "parse_sdl_file",
    "parse_introspection", "parse_introspection_file",
    # Serializers
    "serialize_sdl", "serialize_json", "compute_schema_fingerprint",
]
