"""Resolve schema paths against a GraphQL type graph."""

from __future__ import annotations

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    get_named_type,
    is_leaf_type,
)

from explorer.engine.paths import split_path


def root_type(schema: GraphQLSchema, operation: str) -> GraphQLObjectType | None:
    """Return the schema's root type for an operation type name."""
    if operation == "query":
        return schema.query_type
    if operation == "mutation":
        return schema.mutation_type
    if operation == "subscription":
        return schema.subscription_type
    return None


def has_fields(type_: GraphQLNamedType | None) -> bool:
    """True for types a selection set can be made on (objects and interfaces)."""
    return isinstance(type_, (GraphQLObjectType, GraphQLInterfaceType))


def is_leaf(type_: GraphQLNamedType | None) -> bool:
    """True for scalars and enums."""
    return type_ is not None and is_leaf_type(type_)


def resolve_field_type(path: str, schema: GraphQLSchema) -> GraphQLNamedType | None:
    """Return the named type a schema path points at.

    ``"query"`` resolves to the root query type, ``"query.user"`` to the type
    of ``Query.user`` with its list and non-null wrappers removed, and so on.
    Returns ``None`` as soon as a segment cannot be found.
    """
    if not path:
        return None

    operation, segments = split_path(path)
    type_: GraphQLNamedType | None = root_type(schema, operation)

    for segment in segments:
        if not has_fields(type_):
            return None
        field = type_.fields.get(segment)  # type: ignore[union-attr]
        if field is None:
            return None
        type_ = get_named_type(field.type)

    return type_


def resolve_field(path: str, schema: GraphQLSchema) -> GraphQLField | None:
    """Return the field definition at the last segment of a schema path.

    Used whenever argument metadata is needed.  A bare operation path has no
    field and resolves to ``None``.
    """
    if not path:
        return None

    operation, segments = split_path(path)
    if not segments:
        return None

    type_: GraphQLNamedType | None = root_type(schema, operation)
    field: GraphQLField | None = None

    for segment in segments:
        if not has_fields(type_):
            return None
        field = type_.fields.get(segment)  # type: ignore[union-attr]
        if field is None:
            return None
        type_ = get_named_type(field.type)

    return field
