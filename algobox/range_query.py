"""Structures for set merging and prefix/range sum queries."""

from __future__ import annotations

from collections.abc import Iterable


class DisjointSet:
    """Union-find over the elements 0 .. size-1 with path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, v: int) -> int:
        """Representative of the set containing v."""
        if not 0 <= v < len(self._parent):
            raise IndexError(f"element {v} is out of range")
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b; False if they were already together."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True


class FenwickTree:
    """Binary indexed tree over positions 1 .. size holding running totals."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def update(self, index: int, delta: int) -> None:
        """Add delta to the value at index (1-based)."""
        if not 1 <= index <= self.size:
            raise IndexError(f"index {index} is out of range")
        while index <= self.size:
            self._tree[index] += delta
            index += index & -index

    def query(self, index: int) -> int:
        """Sum of the values at positions 1 .. index."""
        if not 0 <= index <= self.size:
            raise IndexError(f"index {index} is out of range")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


class SegmentTree:
    """Sum segment tree supporting point assignment and half-open range sums."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._n = len(self._values)
        self._tree = [0] * (4 * max(self._n, 1))
        if self._n:
            self._build(0, 0, self._n)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int) -> None:
        if hi - lo < 2:
            self._tree[node] = self._values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node + 1, lo, mid)
        self._build(2 * node + 2, mid, hi)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def update(self, position: int, value: int) -> None:
        """Set the element at position to value."""
        if not 0 <= position < self._n:
            raise IndexError(f"position {position} is out of range")
        diff = value - self._values[position]
        node, lo, hi = 0, 0, self._n
        while True:
            self._tree[node] += diff
            if hi - lo < 2:
                break
            mid = (lo + hi) // 2
            if position < mid:
                node, hi = 2 * node + 1, mid
            else:
                node, lo = 2 * node + 2, mid
        self._values[position] = value

    def sum(self, left: int, right: int) -> int:
        """Sum of the elements at positions left .. right-1."""
        if not 0 <= left <= right <= self._n:
            raise ValueError(f"invalid range [{left}, {right})")
        return self._sum(left, right, 0, 0, self._n)

    def _sum(self, x: int, y: int, node: int, lo: int, hi: int) -> int:
        if x >= hi or y <= lo:
            return 0
        if x <= lo and y >= hi:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._sum(x, y, 2 * node + 1, lo, mid) + self._sum(x, y, 2 * node + 2, mid, hi)