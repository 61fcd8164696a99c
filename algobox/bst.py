"""Binary search trees: array-backed and linked, with traversal and BST checks."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any


class ArrayBST:
    """A binary search tree stored by heap index: root at 1, children at 2i and 2i+1.

    Indices must stay below ``capacity``; equal keys go to the right.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.capacity = capacity
        self._slots: dict[int, Any] = {}

    def __len__(self) -> int:
        return len(self._slots)

    def insert(self, key: Any) -> int:
        """Insert key and return the index it was stored at.

        Raises OverflowError if the key would land beyond the capacity.
        """
        index = 1
        while index in self._slots:
            index = 2 * index if self._slots[index] > key else 2 * index + 1
        if index >= self.capacity:
            raise OverflowError(f"index {index} exceeds capacity {self.capacity}")
        self._slots[index] = key
        return index

    def inorder(self) -> list[Any]:
        """Keys in sorted (in-order) sequence."""
        result: list[Any] = []
        stack: list[int] = []
        index = 1
        while stack or index in self._slots:
            while index in self._slots:
                stack.append(index)
                index *= 2
            index = stack.pop()
            result.append(self._slots[index])
            index = 2 * index + 1
        return result


@dataclass(eq=False)
class TreeNode:
    """A node of a linked binary tree."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert key into the tree at root and return the (possibly new) root.

    Equal keys go to the right subtree.
    """
    node = TreeNode(key)
    if root is None:
        return node
    current = root
    while True:
        if current.key > key:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.key
        yield from _inorder(root.right)


def _preorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield root.key
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def inorder(root: TreeNode | None) -> list[Any]:
    """Keys visited left, node, right."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Keys visited node, left, right."""
    return list(_preorder(root))


def build_from_traversals(preorder_keys: Sequence[Any], inorder_keys: Sequence[Any]) -> TreeNode | None:
    """Rebuild a binary tree from its preorder and inorder key sequences.

    Raises ValueError if the sequences do not describe the same tree.
    """
    if len(preorder_keys) != len(inorder_keys):
        raise ValueError("traversals must have the same length")
    keys = iter(preorder_keys)

    def build(start: int, end: int) -> TreeNode | None:
        if start >= end:
            return None
        key = next(keys)
        matches = [j for j in range(start, end) if inorder_keys[j] == key]
        if not matches:
            raise ValueError(f"{key!r} is missing from the inorder range")
        mid = matches[-1]
        node = TreeNode(key)
        node.left = build(start, mid)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(inorder_keys))


def is_bst(root: TreeNode | None) -> bool:
    """True if every key is strictly between the bounds set by its ancestors."""

    def check(node: TreeNode | None, low: Any, high: Any) -> bool:
        if node is None:
            return True
        if (low is not None and node.key <= low) or (high is not None and node.key >= high):
            return False
        return check(node.left, low, node.key) and check(node.right, node.key, high)

    return check(root, None, None)


def size(root: TreeNode | None) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + size(root.left) + size(root.right)


def largest_bst_size(root: TreeNode | None) -> int:
    """Node count of the largest subtree that is itself a binary search tree."""
    if root is None:
        return 0
    if is_bst(root):
        return size(root)
    return max(largest_bst_size(root.left), largest_bst_size(root.right))