"""Serialize a GraphQLSchema to SDL text."""
from __future__ import annotations

from graphql import GraphQLSchema, print_schema


def serialize_sdl(schema: GraphQLSchema) -> str:
    """Print ``schema`` as SDL, in the schema's own type and field order."""
    return print_schema(schema) + "\n"
