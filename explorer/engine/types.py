"""Result types returned by the query editing operations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class VariableStub:
    """A variable declaration created while editing a query.

    Callers use it to seed a default JSON value in their variables buffer.
    """

    name: str  # without $
    type: str  # printed GraphQL type, e.g. "ID!", "[String]", "UserFilter!"


@dataclass
class EditResult:
    """New query text plus the variables the edit declared."""

    query: str
    variables: list[VariableStub] = field(default_factory=lambda: list[VariableStub]())
