"""Locate or synthesize the operation an edit applies to."""

from __future__ import annotations

from graphql.language.ast import (
    DocumentNode,
    NameNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
)


def default_operation_name(operation: str) -> str:
    """Name given to operations the editor creates: NewQuery, NewMutation..."""
    return f"New{operation.capitalize()}"


def new_operation(operation: str, operation_name: str | None = None) -> OperationDefinitionNode:
    """Build an operation with an explicitly empty selection set."""
    return OperationDefinitionNode(
        operation=OperationType(operation),
        name=NameNode(value=operation_name or default_operation_name(operation)),
        variable_definitions=(),
        directives=(),
        selection_set=SelectionSetNode(selections=()),
    )


def new_document(operation: str, operation_name: str | None = None) -> DocumentNode:
    return DocumentNode(definitions=(new_operation(operation, operation_name),))


def find_operation(
    document: DocumentNode,
    operation: str,
    operation_name: str | None = None,
) -> OperationDefinitionNode | None:
    """Return the first operation of the given type (and name, if given)."""
    for defn in document.definitions:
        if not isinstance(defn, OperationDefinitionNode):
            continue
        if defn.operation.value != operation:
            continue
        if operation_name and (defn.name is None or defn.name.value != operation_name):
            continue
        return defn
    return None


def ensure_operation(
    document: DocumentNode,
    operation: str,
    operation_name: str | None = None,
) -> OperationDefinitionNode:
    """Return the matching operation, appending a new empty one if missing."""
    found = find_operation(document, operation, operation_name)
    if found is not None:
        return found

    created = new_operation(operation, operation_name)
    document.definitions = (*document.definitions, created)
    return created
