"""A first-in, first-out queue built from two stacks."""

from __future__ import annotations

from typing import Any, Optional

from ctcikit.stack import Stack

__all__ = ["StackedQueue"]


def _drain(source: Stack, target: Stack) -> None:
    while not source.is_empty():
        target.push(source.pop())


class StackedQueue:
    """A queue that keeps new items on one stack and serves from another."""

    def __init__(self) -> None:
        self._input = Stack()
        self._output = Stack()

    def change_stacks(self) -> None:
        """Move every item onto whichever stack is empty, if exactly one is."""
        input_empty = self._input.is_empty()
        output_empty = self._output.is_empty()
        if input_empty and not output_empty:
            _drain(self._output, self._input)
        elif output_empty and not input_empty:
            _drain(self._input, self._output)

    def push(self, value: Any) -> None:
        """Add ``value`` to the back of the queue."""
        if self._input.is_empty():
            self.change_stacks()
        self._input.push(value)

    def pop(self) -> Optional[Any]:
        """Remove and return the front item, or None if the queue is empty."""
        if self._output.is_empty():
            self.change_stacks()
        return self._output.pop()