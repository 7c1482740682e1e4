"""Load a GraphQL schema from SDL or from an introspection result (.json)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphql import GraphQLError, GraphQLSchema, build_client_schema, build_schema


class SchemaLoadError(Exception):
    """Raised when a schema file cannot be read or built."""


def load_schema(path: str | Path) -> GraphQLSchema:
    """Load a schema file from disk.

    ``.json`` files are read as introspection results, anything else as SDL.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Invalid JSON in {path}: {e}") from e
        return schema_from_introspection(data)

    return schema_from_sdl(text)


def schema_from_sdl(sdl: str) -> GraphQLSchema:
    try:
        return build_schema(sdl)
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(f"Invalid schema SDL: {e}") from e


def schema_from_introspection(data: Any) -> GraphQLSchema:
    """Build a schema from an introspection result.

    Accepts both ``{"__schema": ...}`` and the full response shape
    ``{"data": {"__schema": ...}}``.
    """
    if isinstance(data, dict) and "__schema" not in data and isinstance(data.get("data"), dict):
        data = data["data"]

    if not isinstance(data, dict) or "__schema" not in data:
        raise SchemaLoadError("Introspection result has no __schema key")

    try:
        return build_client_schema(data)
    except (GraphQLError, TypeError, KeyError) as e:
        raise SchemaLoadError(f"Invalid introspection result: {e}") from e
