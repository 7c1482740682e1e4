"""Query-document editing engine: edit GraphQL query text by schema path."""

from __future__ import annotations

from explorer.engine.bulk import (
    add_all_scalar_type_fields_to_query as add_all_scalar_type_fields_to_query,
    add_all_type_fields_to_query as add_all_type_fields_to_query,
    add_all_type_fields_to_query_recursively as add_all_type_fields_to_query_recursively,
    are_all_type_fields_in_query as are_all_type_fields_in_query,
    remove_type_fields_from_query as remove_type_fields_from_query,
)
from explorer.engine.edits import (
    add_arg_to_field as add_arg_to_field,
    add_field_to_query as add_field_to_query,
    remove_arg_from_field as remove_arg_from_field,
    remove_field_from_query as remove_field_from_query,
)
from explorer.engine.presence import (
    is_arg_in_query as is_arg_in_query,
    is_field_in_query as is_field_in_query,
)
from explorer.engine.schema_walker import (
    resolve_field as resolve_field,
    resolve_field_type as resolve_field_type,
)
from explorer.engine.sentinel import heal as heal
from explorer.engine.types import (
    EditResult as EditResult,
    VariableStub as VariableStub,
)

__all__ = [
    "EditResult",
    "VariableStub",
    "add_all_scalar_type_fields_to_query",
    "add_all_type_fields_to_query",
    "add_all_type_fields_to_query_recursively",
    "add_arg_to_field",
    "add_field_to_query",
    "are_all_type_fields_in_query",
    "heal",
    "is_arg_in_query",
    "is_field_in_query",
    "remove_arg_from_field",
    "remove_field_from_query",
    "remove_type_fields_from_query",
    "resolve_field",
    "resolve_field_type",
]
