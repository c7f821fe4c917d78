"""Check whether a schema is already in lexicographic order.

Built-in scalars, specified directives and introspection types are not
inspected: SDL does not record their position, so a schema parsed back from
sorted SDL holds them wherever graphql-core put them.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Union

from graphql import (
    GraphQLNamedType,
    GraphQLSchema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_object_type,
    is_specified_directive,
    is_specified_scalar_type,
    is_union_type,
)

from gqlsort_py.converter.collation import SortKey, build_sort_key
from gqlsort_py.schema.options import CompareOptions

logger = logging.getLogger(__name__)


def _is_ordered(names: Iterable[str], sort_key: SortKey) -> bool:
    keys = [sort_key(name) for name in names]
    return all(a <= b for a, b in zip(keys, keys[1:]))


def _type_collections(type_: GraphQLNamedType) -> Iterator[tuple[str, list[str]]]:
    """Yield (label, names) for every ordered collection of a named type."""
    if is_object_type(type_) or is_interface_type(type_):
        yield f"{type_.name} interfaces", [i.name for i in type_.interfaces]
        yield f"{type_.name} fields", list(type_.fields)
        for field_name, field in type_.fields.items():
            yield f"{type_.name}.{field_name} arguments", list(field.args)
    elif is_union_type(type_):
        yield f"{type_.name} members", [t.name for t in type_.types]
    elif is_enum_type(type_):
        yield f"{type_.name} values", list(type_.values)
    elif is_input_object_type(type_):
        yield f"{type_.name} fields", list(type_.fields)


def _schema_collections(schema: GraphQLSchema) -> Iterator[tuple[str, list[str]]]:
    user_types = [
        type_ for type_ in schema.type_map.values()
        if not is_introspection_type(type_) and not is_specified_scalar_type(type_)
    ]
    user_directives = [d for d in schema.directives if not is_specified_directive(d)]

    yield "types", [type_.name for type_ in user_types]
    yield "directives", [d.name for d in user_directives]
    for directive in user_directives:
        yield f"@{directive.name} locations", [loc.name for loc in directive.locations]
        yield f"@{directive.name} arguments", list(directive.args)
    for type_ in user_types:
        yield from _type_collections(type_)


def is_lexicographically_sorted(
    schema: GraphQLSchema,
    compare_options: Union[CompareOptions, Mapping[str, Any], None] = None,
) -> bool:
    """Return True if every user-defined collection of ``schema`` is in name order."""
    sort_key = build_sort_key(compare_options)
    for label, names in _schema_collections(schema):
        if not _is_ordered(names, sort_key):
            logger.debug("Out of order: %s", label)
            return False
    return True
