"""
lifochain.core.chain — Stack-ordered singly-linked chain.

    with Chain() as chain:
        chain.push(1)
        chain.push(2)
        chain.pop()     # 2
        chain.peek()    # 1
    # every remaining node is released here

Every structural change goes through Link.take() first, so the head
slot is absent (never stale) while the new contents are being built.
Teardown drains the chain front to back in a loop instead of letting
node destruction recurse down the successor links.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Generic, TypeVar

from lifochain.core.link import EMPTY, ChainError, Empty, Link
from lifochain.core.node import Node

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ChainClosedError(ChainError):
    """Operation on a chain that has been torn down."""
    pass


class StaleViewError(ChainError):
    """FrontRef used after the chain changed shape."""
    pass


class FrontRef(Generic[T]):
    """Mutable view of the front element's storage.

    Only the value can be read or replaced; the view has no access to
    the successor link. It is valid until the chain's next structural
    change (push, pop or teardown).
    """

    __slots__ = ("_chain", "_node", "_generation")

    def __init__(self, chain: Chain[T], node: Node[T]):
        self._chain = weakref.ref(chain)
        self._node = node
        self._generation = chain._generation

    def _is_stale(self) -> bool:
        chain = self._chain()
        return (
            chain is None
            or not self._node.alive
            or chain._generation != self._generation
        )

    def _live_node(self) -> Node[T]:
        if self._is_stale():
            raise StaleViewError("Chain changed since the front view was taken")
        return self._node

    @property
    def value(self) -> T:
        return self._live_node().elem

    @value.setter
    def value(self, new: T) -> None:
        self._live_node().elem = new

    def replace(self, new: T) -> T:
        """Install `new` in place and return the previous value."""
        node = self._live_node()
        old, node.elem = node.elem, new
        return old

    def __repr__(self) -> str:
        if self._is_stale():
            return "FrontRef(<stale>)"
        return f"FrontRef({self._node.elem!r})"


class Chain(Generic[T]):
    """Last-in-first-out chain of exclusively owned nodes.

    pop(), peek() and peek_mut() return EMPTY when there is no front
    element. Length is not cached.
    """

    def __init__(self) -> None:
        self._head = Link()
        self._closed = False
        # Bumped on every structural change; invalidates FrontRefs.
        self._generation = 0

    def _check_open(self) -> None:
        if self._closed:
            raise ChainClosedError("Chain has been torn down")

    def push(self, value: T) -> None:
        """Insert `value` as the new front element."""
        self._check_open()
        self._generation += 1
        node = Node(value, self._head.take())
        self._head.put(node)

    def pop(self) -> T | Empty:
        """Remove and return the front element, or EMPTY."""
        self._check_open()
        node = self._head.take()
        if node is None:
            return EMPTY
        self._generation += 1
        self._head.put(node.next.take())
        return node.release()

    def peek(self) -> T | Empty:
        """Return the front element without removing it, or EMPTY."""
        self._check_open()
        node = self._head.get()
        if node is None:
            return EMPTY
        return node.elem

    def peek_mut(self) -> FrontRef[T] | Empty:
        """Return a FrontRef over the front element, or EMPTY."""
        self._check_open()
        node = self._head.get()
        if node is None:
            return EMPTY
        return FrontRef(self, node)

    def is_empty(self) -> bool:
        self._check_open()
        return self._head.is_absent()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> int:
        """Tear the chain down. Returns the number of nodes released.

        Idempotent: a closed chain releases nothing and returns 0.
        """
        if self._closed:
            return 0
        return self._teardown()

    def _teardown(self) -> int:
        released = self._drain()
        logger.debug("Chain torn down, %d node(s) released", released)
        return released

    def _drain(self) -> int:
        self._closed = True
        self._generation += 1
        released = 0
        current = self._head.take()
        while current is not None:
            # Detach the successor first so dropping `current` is O(1).
            successor = current.next.take()
            current.release()
            current = successor
            released += 1
        return released

    def __enter__(self) -> Chain[T]:
        return self

    def __exit__(self, *exc: Any) -> bool:
        self.close()
        return False

    def __del__(self) -> None:
        # __init__ may not have run (e.g. __new__ without init)
        if hasattr(self, "_head") and not self._closed:
            self._teardown()

    def __repr__(self) -> str:
        if self._closed:
            return "Chain(<closed>)"
        front = self._head.get()
        if front is None:
            return "Chain(<empty>)"
        return f"Chain(front={front.elem!r})"
