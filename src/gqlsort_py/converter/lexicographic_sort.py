"""Produce a copy of a GraphQLSchema with every named collection sorted by name.

Sorted collections:
- types of the schema (the order of ``type_map``)
- directives, their locations and arguments
- fields and interfaces of object and interface types
- arguments of every field
- member types of unions
- values of enums
- fields of input object types

The type graph may be cyclic. Sorting runs in two passes over one index
(type name -> sorted replacement): the first pass allocates every
replacement with its nested collections deferred, the second pass sorts the
nested collections and resolves each type reference by looking the name up
in the index. Every replacement is built exactly once and every reference
points at the instance stored in the index.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, Mapping, Optional, Union

from graphql import (
    GraphQLArgument,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLType,
    GraphQLUnionType,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from gqlsort_py.converter.collation import SortKey, build_sort_key, sort_by, sort_by_name
from gqlsort_py.errors import UnexpectedTypeKindError, UnknownTypeError
from gqlsort_py.schema.options import CompareOptions

logger = logging.getLogger(__name__)


class SchemaSorter:
    """Builds the sorted copy of one schema.

    One instance per sort call; it owns the name index and is discarded
    afterwards.
    """

    def __init__(self, sort_key: SortKey):
        self.sort_key = sort_key
        self.type_map: dict[str, GraphQLNamedType] = {}
        # type name -> {"fields": ..., "interfaces": ..., "types": ...}
        self._collections: dict[str, dict[str, Any]] = {}

    # -- graph copier -------------------------------------------------------

    def sort_schema(self, schema: GraphQLSchema) -> GraphQLSchema:
        named_types = sort_by_name(schema.type_map.values(), self.sort_key)

        for type_ in named_types:
            self.type_map[type_.name] = self.sort_named_type(type_)

        for type_ in named_types:
            collections = self.sort_collections(type_)
            if collections is not None:
                self._collections[type_.name] = collections

        directives = [
            self.sort_directive(directive)
            for directive in sort_by_name(schema.directives, self.sort_key)
        ]
        logger.debug(
            "Sorted %d types and %d directives", len(self.type_map), len(directives)
        )

        kwargs = schema.to_kwargs()
        kwargs.update(
            types=list(self.type_map.values()),
            directives=directives,
            query=self.replace_maybe_type(schema.query_type),
            mutation=self.replace_maybe_type(schema.mutation_type),
            subscription=self.replace_maybe_type(schema.subscription_type),
        )
        return GraphQLSchema(**kwargs)

    def sort_directive(self, directive: GraphQLDirective) -> GraphQLDirective:
        kwargs = directive.to_kwargs()
        kwargs.update(
            locations=sort_by(directive.locations, lambda loc: loc.name, self.sort_key),
            args=self.sort_args(directive.args),
        )
        return GraphQLDirective(**kwargs)

    # -- type-kind sorter ---------------------------------------------------

    def sort_named_type(self, type_: GraphQLNamedType) -> GraphQLNamedType:
        """Allocate the replacement of ``type_``.

        Collections that hold type references are read back from the
        second pass through thunks, so no other replacement needs to exist
        yet.
        """
        if is_scalar_type(type_) or is_introspection_type(type_):
            return type_
        deferred = functools.partial(self._deferred, type_.name)
        if is_object_type(type_):
            return GraphQLObjectType(**{
                **type_.to_kwargs(),
                "fields": functools.partial(deferred, "fields"),
                "interfaces": functools.partial(deferred, "interfaces"),
            })
        if is_interface_type(type_):
            return GraphQLInterfaceType(**{
                **type_.to_kwargs(),
                "fields": functools.partial(deferred, "fields"),
                "interfaces": functools.partial(deferred, "interfaces"),
            })
        if is_union_type(type_):
            return GraphQLUnionType(**{
                **type_.to_kwargs(),
                "types": functools.partial(deferred, "types"),
            })
        if is_enum_type(type_):
            return GraphQLEnumType(**{
                **type_.to_kwargs(),
                "values": {
                    name: type_.values[name]
                    for name in sorted(type_.values, key=self.sort_key)
                },
            })
        if is_input_object_type(type_):
            return GraphQLInputObjectType(**{
                **type_.to_kwargs(),
                "fields": functools.partial(deferred, "fields"),
            })
        raise UnexpectedTypeKindError(type_)

    def sort_collections(self, type_: GraphQLNamedType) -> Optional[dict[str, Any]]:
        """Sort the nested collections of ``type_`` that hold type references."""
        if is_introspection_type(type_):
            return None
        if is_object_type(type_) or is_interface_type(type_):
            return {
                "fields": self.sort_fields(type_.fields),
                "interfaces": self.sort_types(type_.interfaces),
            }
        if is_union_type(type_):
            return {"types": self.sort_types(type_.types)}
        if is_input_object_type(type_):
            return {"fields": self.sort_input_fields(type_.fields)}
        return None

    def _deferred(self, type_name: str, collection: str) -> Any:
        return self._collections[type_name][collection]

    def sort_fields(self, fields: Mapping[str, GraphQLField]) -> dict[str, GraphQLField]:
        return {
            name: GraphQLField(**{
                **field.to_kwargs(),
                "type_": self.replace_type(field.type),
                "args": self.sort_args(field.args),
            })
            for name, field in self._sorted_items(fields)
        }

    def sort_args(self, args: Mapping[str, GraphQLArgument]) -> dict[str, GraphQLArgument]:
        return {
            name: GraphQLArgument(**{
                **arg.to_kwargs(),
                "type_": self.replace_type(arg.type),
            })
            for name, arg in self._sorted_items(args)
        }

    def sort_input_fields(
        self, fields: Mapping[str, GraphQLInputField]
    ) -> dict[str, GraphQLInputField]:
        return {
            name: GraphQLInputField(**{
                **field.to_kwargs(),
                "type_": self.replace_type(field.type),
            })
            for name, field in self._sorted_items(fields)
        }

    def sort_types(self, types) -> list[GraphQLNamedType]:
        return [self.replace_named_type(type_) for type_ in sort_by_name(types, self.sort_key)]

    def _sorted_items(self, mapping: Mapping[str, Any]) -> list[tuple[str, Any]]:
        return sort_by(mapping.items(), lambda item: item[0], self.sort_key)

    # -- reference resolver -------------------------------------------------

    def replace_type(self, type_: GraphQLType) -> GraphQLType:
        if is_list_type(type_):
            return GraphQLList(self.replace_type(type_.of_type))
        if is_non_null_type(type_):
            return GraphQLNonNull(self.replace_type(type_.of_type))
        return self.replace_named_type(type_)

    def replace_named_type(self, type_: GraphQLNamedType) -> GraphQLNamedType:
        try:
            return self.type_map[type_.name]
        except KeyError:
            raise UnknownTypeError(type_.name) from None

    def replace_maybe_type(
        self, type_: Optional[GraphQLNamedType]
    ) -> Optional[GraphQLNamedType]:
        return self.replace_named_type(type_) if type_ else None


def lexicographic_sort_schema(
    schema: GraphQLSchema,
    compare_options: Union[CompareOptions, Mapping[str, Any], None] = None,
) -> GraphQLSchema:
    """Sort a GraphQLSchema.

    Returns a sorted copy of the given schema; the input is left untouched.

    Args:
        schema: A well-formed, self-contained schema.
        compare_options: Locale and collator options used to compare names.
            ``None`` orders names by code point.

    Returns:
        A new schema whose types, directives, fields, arguments, interfaces,
        union members, enum values and directive locations are ordered by
        name.

    Raises:
        UnknownTypeError: if a reference names a type missing from the schema.
        UnexpectedTypeKindError: if a named type has no known kind.
        CollationError: if ``compare_options`` is invalid.
    """
    sort_key = build_sort_key(compare_options)
    return SchemaSorter(sort_key).sort_schema(schema)
