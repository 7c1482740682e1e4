"""Keep the JSON variables buffer in step with query edits.

Edits that bind arguments to new variables report them as
:class:`~explorer.engine.types.VariableStub`; this module turns each stub into
a placeholder JSON value of the right shape and merges it into the buffer.
"""

from __future__ import annotations

from collections.abc import Iterable
import json
from typing import Any

from graphql import (
    GraphQLInputType,
    GraphQLSchema,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_scalar_type,
    parse_type,
    type_from_ast,
)
from graphql.error import GraphQLSyntaxError
from graphql.language.ast import OperationDefinitionNode

from explorer.engine.sentinel import parse_document
from explorer.engine.types import VariableStub

_SCALAR_DEFAULTS: dict[str, Any] = {
    "Int": 0,
    "Float": 0.0,
    "Boolean": False,
    "String": "",
    "ID": "",
}


class InvalidVariablesError(Exception):
    """Raised when the variables buffer is not a JSON object."""


def default_value_for_type(type_string: str, schema: GraphQLSchema) -> Any:
    """Return a placeholder JSON value for a printed input type like ``"[ID!]!"``.

    Unknown types (and custom scalars) get ``None``.
    """
    try:
        type_node = parse_type(type_string)
    except GraphQLSyntaxError:
        return None

    type_ = type_from_ast(schema, type_node)
    if type_ is None:
        return None
    return _mock(type_, set())


def _mock(type_: GraphQLInputType, seen: set[str]) -> Any:
    if is_non_null_type(type_):
        return _mock(type_.of_type, seen)  # type: ignore[union-attr]
    if is_list_type(type_):
        return [_mock(type_.of_type, seen)]  # type: ignore[union-attr]
    if is_scalar_type(type_):
        return _SCALAR_DEFAULTS.get(type_.name)  # type: ignore[union-attr]
    if is_enum_type(type_):
        values = list(type_.values)  # type: ignore[union-attr]
        return values[0] if values else None
    if is_input_object_type(type_):
        # Input objects may reference themselves through nullable fields.
        if type_.name in seen:  # type: ignore[union-attr]
            return None
        nested = seen | {type_.name}  # type: ignore[union-attr]
        return {
            name: _mock(field.type, nested)
            for name, field in type_.fields.items()  # type: ignore[union-attr]
        }
    return None


def parse_variables(variables_text: str | None) -> dict[str, Any]:
    """Parse the buffer; an empty buffer is an empty object."""
    if not variables_text or not variables_text.strip():
        return {}
    try:
        data = json.loads(variables_text)
    except json.JSONDecodeError as e:
        raise InvalidVariablesError(f"Variables are not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidVariablesError("Variables must be a JSON object")
    return data


def merge_variable_stubs(
    variables_text: str | None,
    stubs: Iterable[VariableStub],
    schema: GraphQLSchema,
) -> str:
    """Set a placeholder value for each stub in the buffer and return it re-serialized."""
    variables = parse_variables(variables_text)
    for stub in stubs:
        variables[stub.name] = default_value_for_type(stub.type, schema)
    return json.dumps(variables, indent=2)


def variables_template(query: str, operation_name: str | None = None) -> dict[str, None]:
    """Map every variable declared by the selected operation to ``None``.

    Without *operation_name*, the first operation of the document is used.
    """
    document = parse_document(query)
    if document is None:
        return {}

    for defn in document.definitions:
        if not isinstance(defn, OperationDefinitionNode):
            continue
        if operation_name and (defn.name is None or defn.name.value != operation_name):
            continue
        return {
            var_def.variable.name.value: None
            for var_def in defn.variable_definitions or []
        }

    return {}
