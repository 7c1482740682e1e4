"""Add and remove fields and arguments in query text.

Each function takes the current query text and a schema path, reparses the
text, edits the AST and prints it again.  Edits are idempotent so they can be
re-issued on every checkbox toggle without tracking earlier calls.
"""

from __future__ import annotations

from graphql import GraphQLSchema
from graphql.language.ast import FieldNode, NameNode, VariableNode

from explorer.engine.document import ensure_operation, find_operation, new_document
from explorer.engine.matcher import append_child, child_field, find_field, find_selection_owner, remove_child
from explorer.engine.paths import is_operation_type, join_path, split_path
from explorer.engine.schema_walker import resolve_field
from explorer.engine.sentinel import parse_document, print_document
from explorer.engine.types import EditResult, VariableStub
from explorer.engine.variables import bind_argument, bind_required_arguments, prune_variable


def add_field_to_query(
    query: str,
    path: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
) -> EditResult:
    """Select the field at *path*, creating every missing field on the way.

    Newly created fields get their required arguments bound to fresh
    variables, which are reported in the result.  Unparsable text is
    replaced by a new operation of the requested type.  A bare operation
    path (``"query"``) only makes sure the operation exists.
    """
    operation_type, segments = split_path(path)
    if not is_operation_type(operation_type):
        return EditResult(query=query)

    document = parse_document(query)
    if document is None:
        document = new_document(operation_type, operation_name)
    operation = ensure_operation(document, operation_type, operation_name)

    variables: list[VariableStub] = []
    owner: FieldNode | None = None
    walked: list[str] = []

    for segment in segments:
        walked.append(segment)
        parent = owner if owner is not None else operation
        field = child_field(parent, segment)

        if field is None:
            field = FieldNode(name=NameNode(value=segment), arguments=(), directives=())
            field_def = resolve_field(join_path(operation_type, walked), schema)
            if field_def is not None:
                variables.extend(bind_required_arguments(operation, field, field_def))
            append_child(parent, field)

        owner = field

    return EditResult(query=print_document(document), variables=variables)


def remove_field_from_query(
    query: str,
    path: str,
    operation_name: str | None = None,
) -> str:
    """Deselect the field at *path*.

    When this empties the operation, it is kept as ``operationType Name {}``
    (without its variable definitions) after the document's other
    operations; an emptied nested field keeps an explicit ``{}``.
    """
    operation_type, segments = split_path(path)
    if not segments:
        return query

    document = parse_document(query)
    if document is None:
        return query

    operation = find_operation(document, operation_type, operation_name)
    if operation is None:
        return query

    owner = find_selection_owner(operation, segments)
    if owner is None or not remove_child(owner, segments[-1]):
        return query

    if owner is operation and not operation.selection_set.selections:
        # An emptied operation moves after the others, as a bare "query Name {}".
        operation.variable_definitions = ()
        document.definitions = (
            *(defn for defn in document.definitions if defn is not operation),
            operation,
        )

    return print_document(document)


def add_arg_to_field(
    query: str,
    path: str,
    arg_name: str,
    schema: GraphQLSchema,
    operation_name: str | None = None,
) -> EditResult:
    """Pass *arg_name* to the field at *path*, bound to a new variable."""
    operation_type, segments = split_path(path)
    document = parse_document(query)
    if document is None or not segments:
        return EditResult(query=query)

    operation = find_operation(document, operation_type, operation_name)
    if operation is None:
        return EditResult(query=query)

    field = find_field(operation, segments)
    if field is None:
        return EditResult(query=query)

    if any(arg.name.value == arg_name for arg in field.arguments or []):
        return EditResult(query=print_document(document))

    field_def = resolve_field(path, schema)
    argument = field_def.args.get(arg_name) if field_def is not None else None
    if argument is None:
        return EditResult(query=query)

    stub = bind_argument(operation, field, arg_name, argument)
    return EditResult(query=print_document(document), variables=[stub])


def remove_arg_from_field(
    query: str,
    path: str,
    arg_name: str,
    operation_name: str | None = None,
    prune_variables: bool = True,
) -> str:
    """Stop passing *arg_name* to the field at *path*.

    With *prune_variables*, the variable the argument was bound to is also
    undeclared once nothing else in the operation uses it.
    """
    operation_type, segments = split_path(path)
    document = parse_document(query)
    if document is None or not segments:
        return query

    operation = find_operation(document, operation_type, operation_name)
    if operation is None:
        return query

    field = find_field(operation, segments)
    if field is None or not field.arguments:
        return query

    removed = [arg for arg in field.arguments if arg.name.value == arg_name]
    if not removed:
        return query

    field.arguments = tuple(arg for arg in field.arguments if arg.name.value != arg_name)

    if prune_variables:
        for arg in removed:
            if isinstance(arg.value, VariableNode):
                prune_variable(operation, arg.value.name.value)

    return print_document(document)
