"""
lifochain — Stack-ordered singly-linked chain with iterative teardown.

Push, pop and peek at the front in O(1), with an explicit EMPTY
result instead of exceptions, and teardown that never recurses.
"""

from lifochain.core.link import Link, Empty, EMPTY, ChainError, LinkOccupiedError
from lifochain.core.node import Node
from lifochain.core.chain import Chain, FrontRef, ChainClosedError, StaleViewError

__version__ = "0.1.0"

__all__ = [
    # core
    "Chain",
    "FrontRef",
    "Link",
    "Node",
    "Empty",
    "EMPTY",
    # errors
    "ChainError",
    "ChainClosedError",
    "StaleViewError",
    "LinkOccupiedError",
]
