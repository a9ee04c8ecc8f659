"""
lifochain.core.node — One chain element plus its successor link.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from lifochain.core.link import Link

T = TypeVar("T")

# Placeholder left in a released node's element slot.
_VACANT = object()


class Node(Generic[T]):
    """A single owned node.

    `alive` is True while some Link owns the node. release() drops the
    element reference so a lingering FrontRef cannot keep it reachable.
    """

    __slots__ = ("elem", "next", "alive")

    def __init__(self, elem: T, next_node: Node[T] | None = None):
        self.elem = elem
        self.next = Link(next_node)
        self.alive = True

    def release(self) -> T:
        """Mark the node dead and hand back its element."""
        elem = self.elem
        self.elem = _VACANT  # type: ignore[assignment]
        self.alive = False
        return elem
