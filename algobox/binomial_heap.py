"""A mergeable min-heap built as a forest of binomial trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _BNode:
    key: Any
    degree: int = 0
    parent: _BNode | None = None
    child: _BNode | None = None
    sibling: _BNode | None = None


def _link(child: _BNode, parent: _BNode) -> None:
    child.parent = parent
    child.sibling = parent.child
    parent.child = child
    parent.degree += 1


def _merge_roots(a: _BNode | None, b: _BNode | None) -> _BNode | None:
    head: _BNode | None = None
    tail: _BNode | None = None
    while a is not None and b is not None:
        if a.degree <= b.degree:
            taken, a = a, a.sibling
        else:
            taken, b = b, b.sibling
        if tail is None:
            head = taken
        else:
            tail.sibling = taken
        tail = taken
    rest = a if a is not None else b
    if tail is None:
        return rest
    tail.sibling = rest
    return head


def _union(a: _BNode | None, b: _BNode | None) -> _BNode | None:
    head = _merge_roots(a, b)
    if head is None:
        return None
    previous: _BNode | None = None
    x = head
    following = x.sibling
    while following is not None:
        if x.degree != following.degree or (
            following.sibling is not None and following.sibling.degree == x.degree
        ):
            previous, x = x, following
        elif x.key <= following.key:
            x.sibling = following.sibling
            _link(following, x)
        else:
            if previous is None:
                head = following
            else:
                previous.sibling = following
            _link(x, following)
            x = following
        following = x.sibling
    return head


def _children_as_roots(node: _BNode) -> _BNode | None:
    reversed_head: _BNode | None = None
    child = node.child
    while child is not None:
        following = child.sibling
        child.parent = None
        child.sibling = reversed_head
        reversed_head = child
        child = following
    return reversed_head


class BinomialHeap:
    """A binomial min-heap supporting decrease-key and deletion by key."""

    def __init__(self) -> None:
        self._head: _BNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(roots={self.roots()!r})"

    def _root_nodes(self) -> Iterator[_BNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.sibling

    def _find(self, key: Any) -> _BNode | None:
        stack = list(self._root_nodes())
        while stack:
            node = stack.pop()
            if node.key == key:
                return node
            child = node.child
            while child is not None:
                stack.append(child)
                child = child.sibling
        return None

    def _remove_root(self, root: _BNode) -> None:
        previous: _BNode | None = None
        for node in self._root_nodes():
            if node is root:
                break
            previous = node
        if previous is None:
            self._head = root.sibling
        else:
            previous.sibling = root.sibling
        self._head = _union(self._head, _children_as_roots(root))
        self._size -= 1

    def insert(self, key: Any) -> None:
        """Add key to the heap."""
        self._head = _union(self._head, _BNode(key))
        self._size += 1

    def extract_min(self) -> Any:
        """Remove and return the smallest key; raises IndexError when empty."""
        if self._head is None:
            raise IndexError("heap is empty")
        smallest = min(self._root_nodes(), key=lambda node: node.key)
        self._remove_root(smallest)
        return smallest.key

    def decrease_key(self, old: Any, new: Any) -> None:
        """Replace key old by the smaller or equal key new.

        Raises KeyError if old is not in the heap and ValueError if new is
        greater than old.
        """
        node = self._find(old)
        if node is None:
            raise KeyError(old)
        if new > old:
            raise ValueError("new key is greater than the current one")
        node.key = new
        parent = node.parent
        while parent is not None and node.key < parent.key:
            node.key, parent.key = parent.key, node.key
            node, parent = parent, parent.parent

    def delete(self, key: Any) -> None:
        """Remove one occurrence of key; raises KeyError if it is absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        while node.parent is not None:
            parent = node.parent
            node.key, parent.key = parent.key, node.key
            node = parent
        self._remove_root(node)

    def roots(self) -> list[Any]:
        """Keys at the roots of the binomial trees, in increasing tree order."""
        return [node.key for node in self._root_nodes()]