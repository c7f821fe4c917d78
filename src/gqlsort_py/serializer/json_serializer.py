"""Serialize a GraphQLSchema to an introspection JSON document."""
from __future__ import annotations

import json

from graphql import GraphQLSchema, introspection_from_schema


def serialize_json(schema: GraphQLSchema) -> str:
    """Serialize a schema as the JSON of its introspection result.

    Lists in the output follow the schema's own order, so sorting the schema
    first gives deterministic output.

    Args:
        schema: The schema to serialize.

    Returns:
        Pretty-printed JSON string.
    """
    return json.dumps(introspection_from_schema(schema), indent=2, ensure_ascii=False) + "\n"
