"""Schema paths: ``operationType.field1.field2...``.

The first segment names the operation type, every following segment names a
field (never a type), so the same path addresses both the type graph and the
selection tree of a query.
"""

from __future__ import annotations

OPERATION_TYPES = ("query", "mutation", "subscription")


def split_path(path: str) -> tuple[str, list[str]]:
    """Split a schema path into its operation type and field segments.

    >>> split_path("query.user.name")
    ('query', ['user', 'name'])
    """
    operation, *segments = path.split(".")
    return operation, segments


def join_path(operation: str, segments: list[str]) -> str:
    """Inverse of :func:`split_path`."""
    return ".".join([operation, *segments])


def is_operation_type(operation: str) -> bool:
    return operation in OPERATION_TYPES
