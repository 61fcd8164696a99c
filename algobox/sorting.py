"""In-memory sorting algorithms that return new, sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort_passes(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield a snapshot of the list after each selection-sort pass."""
    result = list(items)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
        yield list(result)


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    result = list(items)
    for state in selection_sort_passes(result):
        result = state
    return result


def _partition_first_hoare(a: list[Any], low: int, high: int) -> int:
    pivot = a[low]
    i, j = low + 1, high
    while True:
        while i <= high and a[i] < pivot:
            i += 1
        while a[j] > pivot:
            j -= 1
        if i >= j:
            break
        a[i], a[j] = a[j], a[i]
        i += 1
        j -= 1
    a[low], a[j] = a[j], a[low]
    return j


def _partition_last(a: list[Any], low: int, high: int) -> int:
    pivot = a[high]
    i = low - 1
    for j in range(low, high):
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]
    a[i + 1], a[high] = a[high], a[i + 1]
    return i + 1


def _partition_first_lomuto(a: list[Any], low: int, high: int) -> int:
    pivot = a[low]
    i = low
    for j in range(low + 1, high + 1):
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]
    a[low], a[i] = a[i], a[low]
    return i


def _quick_sort(items: Iterable[Any], partition) -> tuple[list[Any], int]:
    result = list(items)
    comparisons = 0
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        comparisons += high - low
        split = partition(result, low, high)
        pending.append((split + 1, high))
        pending.append((low, split - 1))
    return result, comparisons


def quick_sort_first_pivot(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the first element as pivot and a two-sided partition."""
    return _quick_sort(items, _partition_first_hoare)[0]


def quick_sort_last_pivot(items: Iterable[Any]) -> list[Any]:
    """Quicksort using the last element as pivot (Lomuto partition)."""
    return _quick_sort(items, _partition_last)[0]


def quick_sort_comparisons(items: Iterable[Any]) -> tuple[list[Any], int]:
    """Quicksort with the first element as pivot, counting comparisons.

    Returns the sorted list and the total number of element comparisons
    made by all partition steps.
    """
    return _quick_sort(items, _partition_first_lomuto)


def _sift_down(a: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and a[left] > a[largest]:
            largest = left
        if right < size and a[right] > a[largest]:
            largest = right
        if largest == root:
            return
        a[root], a[largest] = a[largest], a[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort using a binary max-heap built in place."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(result, n, i)
    for end in range(n - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by recursively splitting in half and merging the sorted halves."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) + 1) // 2
    left, right = merge_sort(result[:mid]), merge_sort(result[mid:])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the range [0, 1) by distributing them into buckets.

    Raises ValueError for any value outside [0, 1).
    """
    data = list(values)
    n = len(data)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in data:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def dutch_flag_sort(items: Iterable[int]) -> list[int]:
    """Sort a sequence holding only 0, 1 and 2 in a single pass.

    Raises ValueError if any other value is present.
    """
    result = list(items)
    for value in result:
        if value not in (0, 1, 2):
            raise ValueError(f"only 0, 1 and 2 are allowed, got {value!r}")
    low, mid, high = 0, 0, len(result) - 1
    while mid <= high:
        if result[mid] == 0:
            result[low], result[mid] = result[mid], result[low]
            low += 1
            mid += 1
        elif result[mid] == 1:
            mid += 1
        else:
            result[mid], result[high] = result[high], result[mid]
            high -= 1
    return result


def swap_with_next_but_one(items: Iterable[Any]) -> list[Any]:
    """Swap each i-th element with the (i+2)-th, in order from the front."""
    result = list(items)
    for i in range(len(result) - 2):
        result[i], result[i + 2] = result[i + 2], result[i]
    return result