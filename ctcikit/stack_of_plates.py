"""A stack split into a series of fixed-capacity stacks."""

from __future__ import annotations

from typing import Any, Optional

from ctcikit.stack import Stack

__all__ = ["SizedStack", "StackOfPlates"]


class SizedStack(Stack):
    """A stack that ignores pushes once it holds ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        super().__init__()
        self.capacity = capacity
        self.size = 0

    def is_full(self) -> bool:
        """Return True if no more items can be pushed."""
        return self.capacity <= self.size

    def push(self, value: Any) -> None:
        """Push ``value`` unless the stack is full."""
        if not self.is_full():
            super().push(value)
            self.size += 1

    def pop(self) -> Optional[Any]:
        """Remove and return the top item, or None if empty."""
        if self.is_empty():
            return None
        self.size -= 1
        return super().pop()


class StackOfPlates:
    """A set of sized stacks that behaves like one stack."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.stacks: list[SizedStack] = [SizedStack(capacity)]

    def push(self, value: Any) -> None:
        """Push onto the first stack with room, opening a new one if all are full."""
        for stack in self.stacks:
            if not stack.is_full():
                stack.push(value)
                return
        stack = SizedStack(self.capacity)
        stack.push(value)
        self.stacks.append(stack)

    def pop(self) -> Optional[Any]:
        """Pop from the last stack, dropping it once it becomes empty.

        Raises IndexError if no stacks are left.
        """
        if not self.stacks:
            raise IndexError("pop from empty stack of plates")
        last = self.stacks[-1]
        result = last.pop()
        if last.is_empty():
            self.stacks.pop()
        return result

    def pop_at(self, index: int) -> Optional[Any]:
        """Pop from the stack at ``index``; None if ``index`` is past the end."""
        if index > len(self.stacks):
            return None
        return self.stacks[index].pop()