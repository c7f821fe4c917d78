"""Order-insensitive fingerprints of GraphQL schemas."""
from __future__ import annotations

from hashlib import sha256
from typing import Any, Mapping, Union

from graphql import GraphQLSchema, print_schema

from gqlsort_py.converter.lexicographic_sort import lexicographic_sort_schema
from gqlsort_py.schema.options import CompareOptions


def compute_schema_fingerprint(
    schema: GraphQLSchema,
    compare_options: Union[CompareOptions, Mapping[str, Any], None] = None,
) -> str:
    """Compute a fingerprint compactly representing all the data in the given schema.

    The fingerprint is not sensitive to type, field, argument or directive
    order: two schemas that differ only in declaration order share it.

    Args:
        schema: the schema to use.
        compare_options: name comparison used for sorting before hashing.

    Returns:
        SHA-256 hex digest of the SDL of the sorted schema.
    """
    text = print_schema(lexicographic_sort_schema(schema, compare_options))
    return sha256(text.encode("utf-8")).hexdigest()
