"""
lifochain.core.link — Exclusive slot holding the next node.

A Link is either absent (end of chain) or owns exactly one Node.
Nodes are moved between links with take/put:

    node = slot.take()   # slot is now absent
    other.put(node)      # other must be absent

The slot is never read and overwritten in one step, so it never
aliases a node that another link also owns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lifochain.core.node import Node


class ChainError(Exception):
    """Base class for chain misuse errors."""
    pass


class LinkOccupiedError(ChainError):
    """put() on a slot that still owns a node."""
    pass


class Empty:
    """Type of the EMPTY marker returned when the chain has no front."""

    _instance: Empty | None = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


class Link:
    """Nullable, exclusively owning slot."""

    __slots__ = ("_node",)

    def __init__(self, node: Node[Any] | None = None):
        self._node = node

    def is_absent(self) -> bool:
        return self._node is None

    def take(self) -> Node[Any] | None:
        """Move the node out, leaving the slot absent."""
        node, self._node = self._node, None
        return node

    def put(self, node: Node[Any] | None) -> None:
        """Install a node (or absence) into an absent slot."""
        if self._node is not None:
            raise LinkOccupiedError(
                "Link already owns a node; take() it before installing another"
            )
        self._node = node

    def get(self) -> Node[Any] | None:
        """Borrow the node without moving it."""
        return self._node

    def __repr__(self) -> str:
        return "Link(absent)" if self._node is None else "Link(present)"
