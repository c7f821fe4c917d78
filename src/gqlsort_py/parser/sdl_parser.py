"""Parse GraphQL SDL documents into GraphQLSchema using graphql-core."""
from __future__ import annotations

import logging

from graphql import GraphQLSchema, build_schema

logger = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    """Return the contents of ``source`` if it names a file, else ``source``."""
    # open() raises ValueError for text holding a NUL byte
    try:
        f = open(source, "r", encoding="utf-8")
    except (OSError, ValueError):
        return source
    with f:
        logger.debug("Reading SDL from %s", source)
        return f.read()


def parse_sdl(source: str, assume_valid: bool = False) -> GraphQLSchema:
    """Parse an SDL string or file path into a GraphQLSchema.

    Args:
        source: File path or SDL text.
        assume_valid: Skip schema validation when building.

    Returns:
        The schema described by the document.
    """
    return build_schema(_read_source(source), assume_valid=assume_valid)


def parse_sdl_file(filepath: str) -> GraphQLSchema:
    """Parse an SDL file from a file path."""
    with open(filepath, "r", encoding="utf-8") as f:
        return build_schema(f.read())
