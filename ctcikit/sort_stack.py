"""A stack of integers that can sort itself using one auxiliary stack."""

from __future__ import annotations

from typing import Optional

from ctcikit.stack import Stack

__all__ = ["SortStack"]


class SortStack(Stack):
    """A stack that can be sorted so the smallest item sits on top."""

    def __init__(self) -> None:
        super().__init__()
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        super().push(value)
        self._len += 1

    def pop(self) -> Optional[int]:
        """Remove and return the top item, or None if empty."""
        if self.is_empty():
            return None
        self._len -= 1
        return super().pop()

    def sort(self) -> None:
        """Sort in place so that items pop in ascending order."""
        for index in range(self._len):
            remaining = self._len - index
            held = Stack()
            greatest = super().pop()
            for _ in range(remaining - 1):
                item = super().pop()
                if greatest < item:
                    held.push(greatest)
                    greatest = item
                else:
                    held.push(item)
            super().push(greatest)
            while not held.is_empty():
                super().push(held.pop())