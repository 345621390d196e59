"""Linked list algorithms: partition, digit sums, palindromes, shared and looping nodes."""

from __future__ import annotations

from itertools import zip_longest
from typing import Any

from ctcikit.linked_list import LinkedList

__all__ = [
    "partition",
    "sum_lists_in_reverse",
    "is_palindrome",
    "intersection",
    "detect_loop",
]


def partition(linked_list: LinkedList, value: Any) -> LinkedList:
    """Return a new list with the items below ``value`` before all the others.

    The relative order within each part is kept. The input list is not changed.
    """
    lower = [item for item in linked_list if item < value]
    upper = [item for item in linked_list if item >= value]
    return LinkedList(lower + upper)


def sum_lists_in_reverse(l1: LinkedList, l2: LinkedList) -> LinkedList:
    """Add two numbers stored as digit lists, least significant digit first.

    The result uses the same digit order. A final zero carry is dropped.
    """
    result = LinkedList()
    carry = 0
    for a, b in zip_longest(l1, l2, fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.push_back(digit)
    result.push_back(carry)

    if result.last is not None and result.last.item == 0:
        result.pop_back()
    return result


def is_palindrome(linked_list: LinkedList) -> bool:
    """Return True if the list reads the same from both ends."""
    return all(a == b for a, b in zip(linked_list, reversed(linked_list)))


def intersection(l1: LinkedList, l2: LinkedList) -> bool:
    """Return True if the two lists share at least one node object."""
    shared = {id(node) for node in l2.nodes()}
    return any(id(node) in shared for node in l1.nodes())


def detect_loop(linked_list: LinkedList) -> bool:
    """Return True if following ``next`` links ever revisits a node."""
    seen: set[int] = set()
    for node in linked_list.nodes():
        if id(node) in seen:
            return True
        seen.add(id(node))
    return False