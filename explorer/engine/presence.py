"""Read-only checks used to render checkbox state."""

from __future__ import annotations

from explorer.engine.document import find_operation
from explorer.engine.matcher import find_field
from explorer.engine.paths import split_path
from explorer.engine.sentinel import parse_document


def is_field_in_query(query: str, path: str, operation_name: str | None = None) -> bool:
    """True if the field at *path* is selected.

    A bare operation path is "in the query" when the operation exists.
    """
    operation_type, segments = split_path(path)
    document = parse_document(query)
    if document is None:
        return False

    operation = find_operation(document, operation_type, operation_name)
    if operation is None:
        return False
    if not segments:
        return True

    return find_field(operation, segments) is not None


def is_arg_in_query(
    query: str,
    path: str,
    arg_name: str,
    operation_name: str | None = None,
) -> bool:
    """True if the field at *path* is selected and passes *arg_name*."""
    operation_type, segments = split_path(path)
    document = parse_document(query)
    if document is None:
        return False

    operation = find_operation(document, operation_type, operation_name)
    if operation is None:
        return False

    field = find_field(operation, segments)
    if field is None:
        return False

    return any(arg.name.value == arg_name for arg in field.arguments or [])
