"""In-order successor in a binary tree whose nodes link to their parents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["BinNodeLink", "get_top_left", "successor"]


@dataclass(eq=False)
class BinNodeLink:
    """A binary tree node that also knows its parent."""

    value: int
    left: Optional["BinNodeLink"] = None
    right: Optional["BinNodeLink"] = None
    father: Optional["BinNodeLink"] = field(default=None, repr=False)


def get_top_left(node: Optional[BinNodeLink]) -> Optional[BinNodeLink]:
    """Return the leftmost node of the subtree rooted at ``node``."""
    if node is None:
        return None
    while node.left is not None:
        node = node.left
    return node


def successor(node: Optional[BinNodeLink]) -> Optional[BinNodeLink]:
    """Return the node that follows ``node`` in an in-order walk.

    Raises ValueError when the parent links needed to find it are missing.
    """
    if node is None:
        return None
    if node.right is not None:
        return get_top_left(node.right)
    father = node.father
    if father is None:
        raise ValueError("node has no parent")
    if father.left is node:
        return father
    grand_father = father.father
    if grand_father is None:
        raise ValueError("node has no grandparent")
    return successor(grand_father)