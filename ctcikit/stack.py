"""A singly linked LIFO stack."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["StackNode", "Stack"]


@dataclass(eq=False)
class StackNode:
    """A stack node pointing to the node beneath it."""

    item: Any
    previous: Optional["StackNode"] = None


class Stack:
    """A last-in, first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[StackNode] = None

    def is_empty(self) -> bool:
        """Return True if the stack holds no items."""
        return self._top is None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = StackNode(value, self._top)

    def peek(self) -> Optional[Any]:
        """Return the top item without removing it, or None if empty."""
        if self._top is None:
            return None
        return self._top.item

    def pop(self) -> Optional[Any]:
        """Remove and return the top item, or None if empty."""
        if self._top is None:
            return None
        node = self._top
        self._top = node.previous
        return node.item

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.item
            node = node.previous