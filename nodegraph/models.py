"""Node and edge value types for the directed graph."""

from __future__ import annotations

from collections.abc import Hashable
from numbers import Number
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

IdT = TypeVar("IdT", bound=Hashable)


def _is_blank_id(value: object) -> bool:
    """True for identifiers that cannot name an edge endpoint."""
    if value is None:
        return True
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, (str, bytes)):
        return not value
    return False


class Node(BaseModel, Generic[IdT]):
    """A vertex of the graph.

    The identifier should be unique across a graph. Nothing enforces this;
    lookups by id return the first match when it is violated.
    """

    model_config = ConfigDict(frozen=True)

    id: IdT

    def __init__(self, id: IdT, **data: Any) -> None:
        super().__init__(id=id, **data)


class Edge(BaseModel, Generic[IdT]):
    """A directed connection from one node id to another."""

    model_config = ConfigDict(frozen=True)

    from_node_id: IdT
    to_node_id: IdT

    def __init__(self, from_node_id: IdT, to_node_id: IdT, **data: Any) -> None:
        super().__init__(from_node_id=from_node_id, to_node_id=to_node_id, **data)

    @field_validator("from_node_id", "to_node_id")
    @classmethod
    def validate_endpoint(cls, v: IdT) -> IdT:
        if _is_blank_id(v):
            raise ValueError(f"edge endpoints must not be null or zero, got {v!r}")
        return v

    @property
    def is_self_loop(self) -> bool:
        return self.from_node_id == self.to_node_id
