"""Linked list lookups: k-th element from the end and middle-node removal."""

from __future__ import annotations

from itertools import islice
from typing import Any, Optional

from ctcikit.linked_list import LinkedList, Node, NotFoundError

__all__ = ["return_kth_to_last", "delete_middle_node"]


def return_kth_to_last(linked_list: LinkedList, k: int) -> Optional[Any]:
    """Return the item ``k`` places before the last one, or None if out of range."""
    return next(islice(reversed(linked_list), k, None), None)


def delete_middle_node(node: Node) -> str:
    """Unlink ``node`` from its neighbours and describe what was removed.

    Raises NotFoundError if the node lacks a previous or a next neighbour.
    """
    previous, following = node.previous, node.next
    if previous is None or following is None:
        raise NotFoundError()
    previous.next = following
    following.previous = previous
    return f"Element with the value: {node.item} removed"