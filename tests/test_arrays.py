import random

import pytest

from algobox.arrays import (
    atm_order,
    kadane,
    linear_search,
    longest_increasing_subsequence,
    max_subarray,
    merge_k_sorted,
    min_max_pages,
    prefix_sums,
    prefix_sums_2d,
    range_sum,
    range_sum_2d,
)


def _random_lists(seed, count=8, size=15):
    rng = random.Random(seed)
    return [[rng.randint(-20, 20) for _ in range(rng.randint(1, size))] for _ in range(count)]


def test_linear_search_source_example():
    data = [8, 4, 5, 10, 60]
    index = linear_search(data, 10)
    assert data[index] == 10
    assert index == data.index(10)


def test_linear_search_first_occurrence():
    assert linear_search(["a", "b", "a"], "a") == 0


def test_linear_search_missing_raises():
    with pytest.raises(ValueError):
        linear_search([8, 4, 5], 99)


def test_min_max_pages_sample():
    assert min_max_pages([12, 34, 67, 90], 2) == 113


def test_min_max_pages_one_student_reads_everything():
    pages = [12, 34, 67, 90]
    assert min_max_pages(pages, 1) == sum(pages)


def test_min_max_pages_enough_students():
    pages = [12, 34, 67, 90]
    assert min_max_pages(pages, len(pages)) == max(pages)
    assert min_max_pages(pages, 50) == max(pages)


def test_min_max_pages_monotone_in_students():
    pages = [3, 8, 11, 20, 25, 40, 41, 70]
    results = [min_max_pages(pages, m) for m in range(1, len(pages) + 1)]
    assert results == sorted(results, reverse=True)


@pytest.mark.parametrize("pages, students", [([], 2), ([1, 2], 0)])
def test_min_max_pages_invalid(pages, students):
    with pytest.raises(ValueError):
        min_max_pages(pages, students)


@pytest.mark.parametrize("values", _random_lists(7))
def test_kadane_and_max_subarray_agree(values):
    best = max_subarray(values)
    assert kadane(values) == max(0, best)
    assert best >= max(values)


def test_kadane_all_negative_allows_empty():
    assert kadane([-3, -1, -2]) == 0


def test_max_subarray_all_negative_is_largest_element():
    values = [-3, -1, -2]
    assert max_subarray(values) == max(values)


def test_max_subarray_whole_positive_array():
    values = [4, 1, 7, 3]
    assert max_subarray(values) == sum(values)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


def test_lis_increasing_and_decreasing():
    increasing = [10, 22, 33, 50, 60]
    assert longest_increasing_subsequence(increasing) == len(increasing)
    assert longest_increasing_subsequence(increasing[::-1]) == longest_increasing_subsequence([7])


def test_lis_source_array_bounds():
    data = [10, 22, 9, 33, 21, 50, 41, 60]
    length = longest_increasing_subsequence(data)
    assert length == longest_increasing_subsequence(data + [min(data) - 1])
    assert length + 1 == longest_increasing_subsequence(data + [max(data) + 1])


def test_lis_empty():
    assert longest_increasing_subsequence([]) == 0


def test_merge_k_sorted_matches_sorted_concatenation():
    rng = random.Random(99)
    arrays = [sorted(rng.randint(0, 100) for _ in range(6)) for _ in range(4)]
    merged = merge_k_sorted(arrays)
    assert merged == sorted(v for row in arrays for v in row)


def test_merge_k_sorted_uneven_and_empty_rows():
    arrays = [[1, 5, 9], [], [2], [0, 3, 4, 8]]
    assert merge_k_sorted(arrays) == sorted(v for row in arrays for v in row)
    assert merge_k_sorted([]) == []


def test_atm_order_example():
    assert atm_order([2, 7, 4], 3) == [1, 3, 2]


def test_atm_order_large_limit_keeps_queue_order():
    amounts = [5, 9, 1, 7]
    assert atm_order(amounts, 100) == list(range(1, len(amounts) + 1))


def test_atm_order_is_permutation():
    amounts = [13, 2, 8, 8, 21, 1]
    order = atm_order(amounts, 4)
    assert sorted(order) == list(range(1, len(amounts) + 1))


def test_atm_order_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        atm_order([1, 2], 0)


@pytest.mark.parametrize("values", _random_lists(3))
def test_prefix_sums_range_sum(values):
    psum = prefix_sums(values)
    assert len(psum) == len(values)
    assert psum[-1] == sum(values)
    for start in range(len(values)):
        for end in range(start, len(values)):
            assert range_sum(psum, start, end) == sum(values[start : end + 1])


def test_prefix_sums_empty():
    assert prefix_sums([]) == []


def test_prefix_sums_2d_range_sum():
    rng = random.Random(5)
    grid = [[rng.randint(-9, 9) for _ in range(5)] for _ in range(4)]
    psum = prefix_sums_2d(grid)
    assert psum[-1][-1] == sum(map(sum, grid))
    for r1 in range(4):
        for r2 in range(r1, 4):
            for c1 in range(5):
                for c2 in range(c1, 5):
                    expected = sum(sum(row[c1 : c2 + 1]) for row in grid[r1 : r2 + 1])
                    assert range_sum_2d(psum, r1, c1, r2, c2) == expected


def test_prefix_sums_2d_rejects_ragged_rows():
    with pytest.raises(ValueError):
        prefix_sums_2d([[1, 2], [3]])