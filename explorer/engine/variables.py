"""Bind field arguments to operation variables.

The editor never writes literal argument values: every argument it adds is
bound to a freshly declared variable, named after the argument and suffixed
(``id``, ``id2``, ``id3``...) until it is unique within the operation.
"""

from __future__ import annotations

from graphql import GraphQLArgument, GraphQLField, is_required_argument, parse_type
from graphql.language.ast import (
    ArgumentNode,
    FieldNode,
    NameNode,
    OperationDefinitionNode,
    VariableDefinitionNode,
    VariableNode,
)
from graphql.language.visitor import Visitor, visit

from explorer.engine.types import VariableStub


def unique_variable_name(operation: OperationDefinitionNode, base: str) -> str:
    """Return *base*, or *base* plus the first free numeric suffix from 2."""
    taken = {defn.variable.name.value for defn in operation.variable_definitions or []}
    name = base
    i = 2
    while name in taken:
        name = f"{base}{i}"
        i += 1
    return name


def bind_argument(
    operation: OperationDefinitionNode,
    field: FieldNode,
    arg_name: str,
    argument: GraphQLArgument,
) -> VariableStub:
    """Declare a new variable on *operation* and pass it as *arg_name* to *field*."""
    variable_name = unique_variable_name(operation, arg_name)
    type_string = str(argument.type)

    definition = VariableDefinitionNode(
        variable=VariableNode(name=NameNode(value=variable_name)),
        type=parse_type(type_string),
        directives=(),
    )
    operation.variable_definitions = (*(operation.variable_definitions or ()), definition)

    argument_node = ArgumentNode(
        name=NameNode(value=arg_name),
        value=VariableNode(name=NameNode(value=variable_name)),
    )
    field.arguments = (*(field.arguments or ()), argument_node)

    return VariableStub(name=variable_name, type=type_string)


def bind_required_arguments(
    operation: OperationDefinitionNode,
    field: FieldNode,
    field_def: GraphQLField,
) -> list[VariableStub]:
    """Bind every required argument (non-null, no default) of *field_def*."""
    return [
        bind_argument(operation, field, arg_name, argument)
        for arg_name, argument in field_def.args.items()
        if is_required_argument(argument)
    ]


class _VariableCollector(Visitor):
    def __init__(self) -> None:
        super().__init__()
        self.names: set[str] = set()

    def enter_variable(self, node: VariableNode, *_args: object) -> None:
        self.names.add(node.name.value)


def referenced_variables(operation: OperationDefinitionNode) -> set[str]:
    """Names of the variables used anywhere in the operation's selections."""
    collector = _VariableCollector()
    visit(operation.selection_set, collector)
    return collector.names


def prune_variable(operation: OperationDefinitionNode, name: str) -> bool:
    """Remove the definition of *name* if nothing references it any more."""
    if name in referenced_variables(operation):
        return False

    definitions = operation.variable_definitions or ()
    kept = tuple(defn for defn in definitions if defn.variable.name.value != name)
    operation.variable_definitions = kept
    return len(kept) != len(definitions)
