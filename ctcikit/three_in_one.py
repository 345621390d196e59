"""Three stacks sharing one growable list."""

from __future__ import annotations

from typing import Optional

__all__ = ["StackSimulation"]

_STACK_COUNT = 3


class StackSimulation:
    """Three stacks, numbered 1 to 3, stored side by side in ``stacks_data``.

    Each stack occupies a region of the list delimited by a marker slot; the
    regions after a stack shift whenever that stack grows or shrinks.
    """

    def __init__(self) -> None:
        self.stacks_data: list[int] = [0] * (2 * _STACK_COUNT)
        self._ends = [2 * i for i in range(_STACK_COUNT)]
        self._tops = [2 * i + 1 for i in range(_STACK_COUNT)]

    @staticmethod
    def _index(stack_number: int) -> Optional[int]:
        if 1 <= stack_number <= _STACK_COUNT:
            return stack_number - 1
        return None

    def _shift_after(self, index: int, delta: int) -> None:
        for later in range(index + 1, _STACK_COUNT):
            self._ends[later] += delta
            self._tops[later] += delta

    def push(self, stack_number: int, value: int) -> None:
        """Push ``value`` onto stack ``stack_number``; unknown numbers are ignored."""
        index = self._index(stack_number)
        if index is None:
            return
        self.stacks_data.insert(self._tops[index], value)
        self._tops[index] += 1
        self._shift_after(index, 1)

    def is_empty(self, stack_number: int) -> bool:
        """Return True if the stack is empty; unknown numbers count as empty."""
        index = self._index(stack_number)
        if index is None:
            return True
        return self._tops[index] == self._ends[index] + 1

    def pop(self, stack_number: int) -> Optional[int]:
        """Remove and return the top of the stack, or None if there is none."""
        index = self._index(stack_number)
        if index is None or self.is_empty(stack_number):
            return None
        self._tops[index] -= 1
        self._shift_after(index, -1)
        return self.stacks_data.pop(self._tops[index])