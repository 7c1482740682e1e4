"""Request payload sent to a GraphQL endpoint for the current query buffer."""

from __future__ import annotations

import json
import re
from typing import Any

from graphql import parse as gql_parse, print_ast
from graphql.error import GraphQLSyntaxError
from graphql.language.ast import OperationDefinitionNode
from pydantic import BaseModel, Field

_TEMPLATE_RE = re.compile(r"{{(.+?)}}")


class InvalidQueryError(Exception):
    """Raised when the query buffer cannot be parsed."""


class GraphQLRequest(BaseModel):
    query: str
    variables: dict[str, Any] = Field(default_factory=dict)
    operation_name: str | None = Field(default=None, alias="operationName")

    model_config = {"populate_by_name": True}

    @property
    def is_subscription(self) -> bool:
        """Subscriptions go over a websocket transport instead of HTTP."""
        return self.query.startswith("subscription")


def strip_comments(query: str) -> str:
    """Drop every line that is only a ``#`` comment."""
    return "\n".join(
        line for line in query.split("\n") if not line.strip().startswith("#")
    )


def _lookup(env: dict[str, Any], dotted: str) -> Any:
    value: Any = env
    for key in dotted.split("."):
        if not isinstance(value, dict) or key not in value:
            raise KeyError(dotted)
        value = value[key]
    return value


def render_template(text: str, env: dict[str, Any]) -> str:
    """Replace ``{{a.b}}`` placeholders with values from *env*.

    Unknown keys are left as written.
    """

    def replace(match: re.Match[str]) -> str:
        try:
            return str(_lookup(env, match.group(1).strip()))
        except KeyError:
            return match.group(0)

    return _TEMPLATE_RE.sub(replace, text)


def build_request(
    query: str,
    variables_text: str | None = None,
    operation_name: str | None = None,
    env: dict[str, Any] | None = None,
) -> GraphQLRequest:
    """Build the payload for a query buffer.

    When *operation_name* names one of the document's operations, the others
    are left out.  Variables that are not a valid JSON object are sent as
    ``{}``.
    """
    try:
        document = gql_parse(strip_comments(query))
    except GraphQLSyntaxError as e:
        raise InvalidQueryError("Query is not valid") from e

    if operation_name and any(
        isinstance(defn, OperationDefinitionNode) and defn.name and defn.name.value == operation_name
        for defn in document.definitions
    ):
        document.definitions = tuple(
            defn for defn in document.definitions
            if not isinstance(defn, OperationDefinitionNode)
            or (defn.name is not None and defn.name.value == operation_name)
        )

    variables: dict[str, Any] = {}
    if variables_text:
        if env:
            variables_text = render_template(variables_text, env)
        try:
            parsed = json.loads(variables_text)
        except json.JSONDecodeError:
            parsed = {}
        if isinstance(parsed, dict):
            variables = parsed

    return GraphQLRequest(
        query=print_ast(document),
        variables=variables,
        operation_name=operation_name,
    )
