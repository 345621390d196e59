"""Binary trees: minimal-height construction, depth lists, balance and BST checks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "BinNode",
    "create_binary_search_tree",
    "list_of_depths",
    "is_balanced",
    "validate_bst",
]


@dataclass
class BinNode:
    """A binary tree node holding an integer value."""

    value: int
    left: Optional["BinNode"] = None
    right: Optional["BinNode"] = None


def create_binary_search_tree(numbers: Sequence[int]) -> Optional[BinNode]:
    """Build a minimal-height tree from ``numbers``, using each middle item as a root.

    Returns None for an empty sequence.
    """
    if not numbers:
        return None
    pivot = len(numbers) // 2
    if pivot == 0:
        return BinNode(numbers[pivot])
    return BinNode(
        numbers[pivot],
        create_binary_search_tree(numbers[:pivot]),
        create_binary_search_tree(numbers[pivot + 1 :]),
    )


def list_of_depths(node: Optional[BinNode]) -> list[list[int]]:
    """Return the values of the tree grouped by depth, left to right within a depth."""
    depths: list[list[int]] = []

    def visit(current: Optional[BinNode], depth: int) -> None:
        if current is None:
            return
        if depth >= len(depths):
            depths.append([])
        depths[depth].append(current.value)
        visit(current.left, depth + 1)
        visit(current.right, depth + 1)

    visit(node, 0)
    return depths


def is_balanced(node: Optional[BinNode]) -> tuple[int, bool]:
    """Return the height of the tree and whether it is balanced.

    A node is unbalanced when its two subtrees differ in height by more than
    one, or when it has a single subtree taller than one level.
    """
    if node is None:
        return 0, True

    def measure(current: BinNode) -> tuple[int, bool]:
        left, right = current.left, current.right
        if left is not None and right is not None:
            right_height, right_ok = measure(right)
            left_height, left_ok = measure(left)
            balanced = right_ok and left_ok and abs(right_height - left_height) <= 1
            return max(right_height, left_height) + 1, balanced
        child = left if left is not None else right
        if child is None:
            return 1, True
        height, ok = measure(child)
        return height + 1, ok and height <= 1

    return measure(node)


def validate_bst(node: Optional[BinNode]) -> bool:
    """Return True if every node is not below its left child nor above its right one.

    Raises ValueError if ``node`` is None.
    """
    if node is None:
        raise ValueError("cannot validate an empty tree")
    left, right = node.left, node.right
    if left is not None and not (node.value >= left.value and validate_bst(left)):
        return False
    if right is not None and not (node.value <= right.value and validate_bst(right)):
        return False
    return True