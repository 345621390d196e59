"""A doubly linked list with its node type and error classes."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = [
    "LinkedListError",
    "NotFoundError",
    "EmptyListError",
    "Node",
    "LinkedList",
]


class LinkedListError(Exception):
    """Base class for linked list errors."""


class NotFoundError(LinkedListError, LookupError):
    """Raised when an item or node cannot be found."""

    def __init__(self, message: str = "Item/Node not found") -> None:
        super().__init__(message)


class EmptyListError(LinkedListError, IndexError):
    """Raised when an operation needs a non-empty list."""

    def __init__(self, message: str = "The linked list is empty") -> None:
        super().__init__(message)


@dataclass(eq=False, repr=False)
class Node:
    """A list node linked to its neighbours in both directions."""

    item: Any
    next: Optional["Node"] = field(default=None)
    previous: Optional["Node"] = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.item!r})"


class LinkedList:
    """A doubly linked list that keeps track of its first and last nodes."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.first: Optional[Node] = None
        self.last: Optional[Node] = None
        if items is not None:
            for item in items:
                self.push_back(item)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` before the first node."""
        node = Node(item, next=self.first)
        if self.first is not None:
            self.first.previous = node
        self.first = node
        if self.last is None:
            self.last = node

    def push_back(self, item: Any) -> None:
        """Append ``item`` after the last node."""
        node = Node(item, previous=self.last)
        if self.last is not None:
            self.last.next = node
        self.last = node
        if self.first is None:
            self.first = node

    def pop_back(self) -> Any:
        """Remove the last node and return its item.

        Raises EmptyListError if the list has no nodes.
        """
        node = self.last
        if node is None:
            raise EmptyListError()
        previous = node.previous
        if previous is None:
            self.first = None
            self.last = None
        else:
            previous.next = None
            self.last = previous
        return node.item

    def remove_dups(self) -> None:
        """Unlink every node whose item already appeared earlier in the list."""
        seen: set[Hashable] = set()
        duplicates: list[Node] = []
        for node in self.nodes():
            if node.item in seen:
                duplicates.append(node)
            else:
                seen.add(node.item)

        for node in duplicates:
            previous, following = node.previous, node.next
            if previous is None:
                self.first = following
            else:
                previous.next = following
            if following is None:
                self.last = previous
            else:
                following.previous = previous

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from first to last, following ``next`` links."""
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def reversed_nodes(self) -> Iterator[Node]:
        """Yield the nodes from last to first, following ``previous`` links."""
        node = self.last
        while node is not None:
            yield node
            node = node.previous

    def __iter__(self) -> Iterator[Any]:
        return (node.item for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.item for node in self.reversed_nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        sentinel = object()
        mine, theirs = iter(self), iter(other)
        while True:
            a = next(mine, sentinel)
            b = next(theirs, sentinel)
            if a is sentinel or b is sentinel:
                return a is sentinel and b is sentinel
            if a != b:
                return False

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ",".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return str(self)