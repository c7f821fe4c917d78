"""Exception types raised by gqlsort-py.

- SchemaSortError: base class
- UnknownTypeError: a type reference names a type the schema does not hold
- UnexpectedTypeKindError: a named type matches none of the known kinds
- CollationError: invalid locale tags or collator options
- SchemaSourceError: parser input is not a schema document
"""
from __future__ import annotations

from typing import Any


class SchemaSortError(Exception):
    """Base exception for all gqlsort-py errors."""
    pass


class UnknownTypeError(SchemaSortError):
    """A type reference points at a name missing from the schema's type map."""

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"Type {type_name!r} is referenced but not present in the schema."
        )
        self.type_name = type_name


class UnexpectedTypeKindError(SchemaSortError, TypeError):
    """A named type is not a scalar, object, interface, union, enum or input object."""

    def __init__(self, type_: Any) -> None:
        super().__init__(f"Unexpected type: {type_!r}.")
        self.type_ = type_


class CollationError(SchemaSortError, ValueError):
    """Raised when compare options cannot configure the collator."""
    pass


class SchemaSourceError(SchemaSortError, ValueError):
    """Raised when a parser input does not hold a schema."""
    pass
