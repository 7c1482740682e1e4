"""Find field nodes in a selection tree by their path of field names."""

from __future__ import annotations

from typing import Union

from graphql.language.ast import (
    FieldNode,
    OperationDefinitionNode,
    SelectionSetNode,
)
from graphql.language.visitor import BREAK, SKIP, Visitor, visit

# Anything a field can be selected on: the operation itself or a parent field.
SelectionOwner = Union[OperationDefinitionNode, FieldNode]


class _FieldPathMatcher(Visitor):
    """Depth-first walk over field nodes, tracking the path visited so far.

    Branches whose path is not a prefix of the target are skipped; the walk
    stops at the first field whose path equals the target.
    """

    def __init__(self, segments: list[str]) -> None:
        super().__init__()
        self.segments = segments
        self.current_path: list[str] = []
        self.match: FieldNode | None = None

    def enter_field(self, node: FieldNode, *_args: object) -> object:
        self.current_path.append(node.name.value)

        if self.current_path == self.segments:
            self.match = node
            return BREAK

        if self.current_path != self.segments[: len(self.current_path)]:
            # leave_field is not called for skipped nodes
            self.current_path.pop()
            return SKIP

        return None

    def leave_field(self, _node: FieldNode, *_args: object) -> None:
        self.current_path.pop()


def find_field(operation: OperationDefinitionNode, segments: list[str]) -> FieldNode | None:
    """Return the first field node whose path from the operation is *segments*."""
    if not segments or operation.selection_set is None:
        return None

    matcher = _FieldPathMatcher(segments)
    visit(operation.selection_set, matcher)
    return matcher.match


def find_selection_owner(
    operation: OperationDefinitionNode,
    segments: list[str],
) -> SelectionOwner | None:
    """Return the node whose selection set holds the last segment."""
    if len(segments) <= 1:
        return operation
    return find_field(operation, segments[:-1])


def child_field(owner: SelectionOwner, name: str) -> FieldNode | None:
    """Return the direct child field called *name*, if selected."""
    if owner.selection_set is None:
        return None
    for selection in owner.selection_set.selections:
        if isinstance(selection, FieldNode) and selection.name.value == name:
            return selection
    return None


def append_child(owner: SelectionOwner, field: FieldNode) -> None:
    """Append *field* to the owner's selection set, creating it if needed."""
    if owner.selection_set is None:
        owner.selection_set = SelectionSetNode(selections=(field,))
    else:
        owner.selection_set.selections = (*owner.selection_set.selections, field)


def remove_child(owner: SelectionOwner, name: str) -> bool:
    """Drop every direct child field called *name*.

    An emptied selection set stays in place, explicitly empty.  Returns
    whether anything was removed.
    """
    if owner.selection_set is None:
        return False

    selections = owner.selection_set.selections
    kept = tuple(
        sel for sel in selections
        if not (isinstance(sel, FieldNode) and sel.name.value == name)
    )
    owner.selection_set.selections = kept
    return len(kept) != len(selections)
