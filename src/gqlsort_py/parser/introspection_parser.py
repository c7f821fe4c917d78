"""Parse introspection query results (JSON) into GraphQLSchema."""
from __future__ import annotations

import json
import logging
from typing import Any

from graphql import GraphQLSchema, build_client_schema

from gqlsort_py.errors import SchemaSourceError

logger = logging.getLogger(__name__)


def _introspection_data(data: Any) -> dict:
    """Accept either a full response ({"data": {...}}) or its data member."""
    if isinstance(data, dict) and isinstance(data.get("data"), dict):
        data = data["data"]
    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaSourceError("Introspection result has no '__schema' entry")
    return data


def parse_introspection(source: str) -> GraphQLSchema:
    """Parse an introspection JSON string or file path into a GraphQLSchema.

    Args:
        source: JSON string or file path.

    Returns:
        Client schema built from the introspection result.
    """
    try:
        f = open(source, "r", encoding="utf-8")
    except (OSError, ValueError):
        return build_client_schema(_introspection_data(json.loads(source)))

    with f:
        logger.debug("Reading introspection result from %s", source)
        data = json.load(f)
    return build_client_schema(_introspection_data(data))


def parse_introspection_file(filepath: str) -> GraphQLSchema:
    """Parse an introspection JSON file from a file path."""
    with open(filepath, "r", encoding="utf-8") as f:
        return build_client_schema(_introspection_data(json.load(f)))
