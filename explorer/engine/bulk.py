"""Select or deselect every field of the type at a schema path."""

from __future__ import annotations

from graphql import GraphQLField, GraphQLSchema, get_named_type

from explorer.engine.edits import add_field_to_query, remove_field_from_query
from explorer.engine.presence import is_field_in_query
from explorer.engine.schema_walker import has_fields, is_leaf, resolve_field_type
from explorer.engine.types import EditResult, VariableStub

# Levels of nested types expanded by add_all_type_fields_to_query_recursively.
MAX_RECURSION_DEPTH = 6


def _type_fields(path: str, schema: GraphQLSchema) -> dict[str, GraphQLField] | None:
    """Direct fields of the type at *path*, or None if it has none."""
    type_ = resolve_field_type(path, schema)
    if not has_fields(type_):
        return None
    return type_.fields  # type: ignore[union-attr]


def add_all_type_fields_to_query(
    query: str,
    path: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
) -> EditResult:
    """Select every direct field of the type at *path*."""
    fields = _type_fields(path, schema)
    if fields is None:
        return EditResult(query=query)

    variables: list[VariableStub] = []
    for name in fields:
        result = add_field_to_query(query, f"{path}.{name}", schema, operation_name)
        query = result.query
        variables.extend(result.variables)

    return EditResult(query=query, variables=variables)


def add_all_type_fields_to_query_recursively(
    query: str,
    path: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
    depth: int = 0,
    visited: list[str] | None = None,
) -> EditResult:
    """Select every field of the type at *path* and, recursively, of their types.

    Recursion stops after MAX_RECURSION_DEPTH levels.  *visited* holds the
    names of the types already expanded and is shared by every recursive call
    of one top-level call, so each type is expanded once: a type reached
    again (through a cycle, or under a later sibling) is selected but not
    expanded.
    """
    if depth >= MAX_RECURSION_DEPTH:
        return EditResult(query=query)

    if visited is None:
        visited = []

    type_ = resolve_field_type(path, schema)
    if not has_fields(type_) or type_.name in visited:  # type: ignore[union-attr]
        return EditResult(query=query)

    visited.append(type_.name)  # type: ignore[union-attr]

    variables: list[VariableStub] = []
    for name in type_.fields:  # type: ignore[union-attr]
        field_path = f"{path}.{name}"

        result = add_field_to_query(query, field_path, schema, operation_name)
        query = result.query
        variables.extend(result.variables)

        nested = add_all_type_fields_to_query_recursively(
            query,
            field_path,
            schema,
            operation_name,
            depth + 1,
            visited,
        )
        query = nested.query
        variables.extend(nested.variables)

    return EditResult(query=query, variables=variables)


def add_all_scalar_type_fields_to_query(
    query: str,
    path: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
) -> EditResult:
    """Select the direct fields of the type at *path* that are scalars or enums."""
    fields = _type_fields(path, schema)
    if fields is None:
        return EditResult(query=query)

    variables: list[VariableStub] = []
    for name, field in fields.items():
        if not is_leaf(get_named_type(field.type)):
            continue
        result = add_field_to_query(query, f"{path}.{name}", schema, operation_name)
        query = result.query
        variables.extend(result.variables)

    return EditResult(query=query, variables=variables)


def remove_type_fields_from_query(
    query: str,
    path: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
) -> str:
    """Deselect every direct field of the type at *path*."""
    fields = _type_fields(path, schema)
    if fields is None:
        return query

    for name in fields:
        query = remove_field_from_query(query, f"{path}.{name}", operation_name)

    return query


def are_all_type_fields_in_query(
    query: str,
    path: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
) -> bool:
    """True if every direct field of the type at *path* is selected."""
    if not path:
        return False

    fields = _type_fields(path, schema)
    if fields is None:
        return False

    return all(
        is_field_in_query(query, f"{path}.{name}", operation_name)
        for name in fields
    )
