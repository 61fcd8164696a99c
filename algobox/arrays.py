"""Array searching, subarray, merging and prefix-sum algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate
from typing import Any


def linear_search(items: Iterable[Any], target: Any) -> int:
    """Return the index of the first element equal to target.

    Raises ValueError if target is not present.
    """
    for index, item in enumerate(items):
        if item == target:
            return index
    raise ValueError(f"{target!r} is not present")


def min_max_pages(pages: Iterable[int], students: int) -> int:
    """Smallest possible maximum load when splitting books consecutively.

    Each student reads a run of consecutive books; the result is the lowest
    achievable value of the largest number of pages given to one student.
    """
    books = list(pages)
    if not books:
        raise ValueError("at least one book is required")
    if students < 1:
        raise ValueError("at least one student is required")

    def fits(limit: int) -> bool:
        needed, load = 1, 0
        for count in books:
            load += count
            if load > limit:
                needed += 1
                load = count
                if needed > students:
                    return False
        return True

    low, high = max(books), sum(books)
    best = high
    while low <= high:
        mid = (low + high) // 2
        if fits(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def kadane(values: Iterable[int]) -> int:
    """Largest subarray sum, where the empty subarray (sum 0) is allowed."""
    best = current = 0
    for value in values:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous subarray."""
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray needs at least one value") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def longest_increasing_subsequence(values: Sequence[Any]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if values[j] < value), default=0)
        )
    return max(lengths, default=0)


def merge_k_sorted(arrays: Iterable[Sequence[Any]]) -> list[Any]:
    """Merge several sorted sequences into one sorted list using a min-heap."""
    rows = [list(row) for row in arrays]
    heap = [(row[0], i, 0) for i, row in enumerate(rows) if row]
    heapq.heapify(heap)
    merged = []
    while heap:
        value, i, j = heapq.heappop(heap)
        merged.append(value)
        if j + 1 < len(rows[i]):
            heapq.heappush(heap, (rows[i][j + 1], i, j + 1))
    return merged


def atm_order(amounts: Iterable[int], limit: int) -> list[int]:
    """Order in which people leave an ATM queue with a per-visit limit.

    Each person withdraws at most ``limit`` per visit and rejoins the back
    of the queue until done. Returns 1-based positions in leaving order.
    """
    if limit <= 0:
        raise ValueError("limit must be positive")
    visits = [(-(-amount // limit), position) for position, amount in enumerate(amounts, 1)]
    return [position for _, position in sorted(visits)]


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Running totals: element i is the sum of values[0..i]."""
    return list(accumulate(values))


def prefix_sums_2d(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    """Cumulative sums: element [r][c] is the sum of grid[0..r][0..c]."""
    result: list[list[int]] = []
    above: list[int] | None = None
    for row in grid:
        if above is not None and len(row) != len(above):
            raise ValueError("all rows must have the same length")
        current = []
        running = 0
        for col, value in enumerate(row):
            running += value
            current.append(running + (above[col] if above is not None else 0))
        result.append(current)
        above = current
    return result


def range_sum(psum: Sequence[int], start: int, end: int) -> int:
    """Sum of the original values in positions start..end, inclusive."""
    if start == 0:
        return psum[end]
    return psum[end] - psum[start - 1]


def range_sum_2d(psum: Sequence[Sequence[int]], r1: int, c1: int, r2: int, c2: int) -> int:
    """Sum of the original rectangle with corners (r1, c1) and (r2, c2), inclusive."""
    total = psum[r2][c2]
    if r1 > 0:
        total -= psum[r1 - 1][c2]
    if c1 > 0:
        total -= psum[r2][c1 - 1]
    if r1 > 0 and c1 > 0:
        total += psum[r1 - 1][c1 - 1]
    return total