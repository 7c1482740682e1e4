"""Parse and print query documents that contain empty ``{}`` placeholders.

When the last field of an operation (or of a nested field) is removed, the
editor leaves the selection set behind as an explicit ``{}`` so the operation
keeps its type and name as an anchor for the next addition.  GraphQL's grammar
has no such thing as an empty selection set, so this module:

* reads each ``{}`` in selection-set position as
  ``SelectionSetNode(selections=())``, the explicit "declared but empty"
  state (``selection_set=None`` on a field still means "not expanded");
* prints that state back as ``{}``.
"""

from __future__ import annotations

import re
from typing import Any

from graphql import parse as gql_parse
from graphql.error import GraphQLSyntaxError
from graphql.language import Lexer, Source, Token, TokenKind
from graphql.language.ast import DocumentNode, FieldNode, SelectionNode, SelectionSetNode
from graphql.language.printer import PrintAstVisitor
from graphql.language.visitor import Visitor, visit

EMPTY_BLOCK = "{}"

_EMPTY_BLOCK_RE = re.compile(r"\{\s*\}")

# Names starting with "__" are reserved for introspection, so no schema field
# can collide with the marker.
_PLACEHOLDER_FIELD = "__placeholder"
_MARKED_BLOCK = f"{{ {_PLACEHOLDER_FIELD} }}"


def heal(query: str) -> str:
    """Strip every empty ``{}`` block (with optional inner whitespace).

    >>> heal("query Foo { user {  } }")
    'query Foo { user  }'
    """
    return _EMPTY_BLOCK_RE.sub("", query)


def _is_placeholder(selection: SelectionNode) -> bool:
    return isinstance(selection, FieldNode) and selection.name.value == _PLACEHOLDER_FIELD


class _PlaceholderCollapser(Visitor):
    """Turn marker-only selection sets into explicitly empty ones."""

    def enter_selection_set(
        self,
        node: SelectionSetNode,
        *_args: object,
    ) -> SelectionSetNode | None:
        kept = tuple(sel for sel in node.selections if not _is_placeholder(sel))
        if len(kept) == len(node.selections):
            return None
        return SelectionSetNode(selections=kept)


def _empty_selection_spans(query: str) -> list[tuple[int, int]]:
    """Offsets of the ``{}`` blocks that stand where a selection set goes.

    Values only ever appear inside parentheses (arguments, variable
    defaults), so a ``{}`` there is an empty input object and is left alone.
    Braces inside strings and comments never become tokens.
    """
    lexer = Lexer(Source(query))
    spans: list[tuple[int, int]] = []
    depth = 0
    previous: Token | None = None

    token = lexer.advance()
    while token.kind != TokenKind.EOF:
        if token.kind == TokenKind.PAREN_L:
            depth += 1
        elif token.kind == TokenKind.PAREN_R:
            depth = max(depth - 1, 0)
        elif (
            token.kind == TokenKind.BRACE_R
            and previous is not None
            and previous.kind == TokenKind.BRACE_L
            and depth == 0
        ):
            spans.append((previous.start, token.end))
        previous = token
        token = lexer.advance()

    return spans


def _mark_empty_selection_sets(query: str) -> str:
    try:
        spans = _empty_selection_spans(query)
    except GraphQLSyntaxError:
        return query

    for start, end in reversed(spans):
        query = query[:start] + _MARKED_BLOCK + query[end:]
    return query


def parse_document(query: str) -> DocumentNode | None:
    """Parse query text, keeping ``{}`` placeholders as empty selection sets.

    Falls back to parsing the healed text (placeholders stripped), and
    returns ``None`` if that fails too.
    """
    marked = _mark_empty_selection_sets(query)

    for source in (marked, heal(query)):
        try:
            document = gql_parse(source)
        except GraphQLSyntaxError:
            continue
        return visit(document, _PlaceholderCollapser())

    return None


class _PlaceholderPrinter(PrintAstVisitor):
    """graphql-core's printer, plus ``{}`` for explicitly empty selection sets."""

    def leave_selection_set(self, node: Any, *args: Any) -> str:
        if not node.selections:
            return EMPTY_BLOCK
        return super().leave_selection_set(node, *args)

    def leave_operation_definition(self, node: Any, *args: Any) -> str:
        printed = super().leave_operation_definition(node, *args)
        # Anonymous queries print in short form, which would lose the keyword.
        if printed == EMPTY_BLOCK:
            return f"{node.operation.value} {EMPTY_BLOCK}"
        return printed


def print_document(document: DocumentNode) -> str:
    """Print a document, emitting ``{}`` for explicitly empty selection sets."""
    return visit(document, _PlaceholderPrinter())
