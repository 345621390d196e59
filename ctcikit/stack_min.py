"""A stack that remembers the smallest value pushed onto it."""

from __future__ import annotations

from ctcikit.stack import Stack

__all__ = ["MinStack"]

_INT32_MAX = 2**31 - 1


class MinStack(Stack):
    """A stack of integers whose ``min`` is the smallest value ever pushed."""

    def __init__(self) -> None:
        super().__init__()
        self.min: int = _INT32_MAX

    def push(self, value: int) -> None:
        """Push ``value`` and update the running minimum."""
        super().push(value)
        self.min = min(self.min, value)