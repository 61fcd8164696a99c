# algobox

Classic algorithms and data structures in plain Python, using only the
standard library.

## Installation

```
pip install algobox
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `selection_sort_passes`, `quick_sort_first_pivot`, `quick_sort_last_pivot`, `quick_sort_comparisons`, `heap_sort`, `merge_sort`, `bucket_sort`, `dutch_flag_sort`, `swap_with_next_but_one` |
| `algobox.arrays` | `linear_search`, `min_max_pages`, `kadane`, `max_subarray`, `longest_increasing_subsequence`, `merge_k_sorted`, `atm_order`, `prefix_sums`, `prefix_sums_2d`, `range_sum`, `range_sum_2d` |
| `algobox.number_theory` | `pow_mod`, `is_prime`, `chinese_remainder`, `fibonacci`, `gcd`, `is_leap_year`, `is_palindrome_number`, `sieve`, `smallest_prime_factors`, `prime_factors`, `nth_ugly_number`, `collatz` |
| `algobox.text` | `infix_to_postfix`, `permutations` |
| `algobox.n_queens` | `solve_n_queens` |
| `algobox.grid` | `flood_fill`, `GridMap` |
| `algobox.range_query` | `DisjointSet`, `FenwickTree`, `SegmentTree` |
| `algobox.stacks` | `BoundedStack`, `LinkedStack`, `StackEmptyError`, `StackFullError` |
| `algobox.queues` | `BoundedQueue`, `CircularQueue`, `TwoStackQueue`, `QueueEmptyError`, `QueueFullError` |
| `algobox.linked_list` | `Node`, `LinkedList`, `has_cycle` |
| `algobox.bst` | `ArrayBST`, `TreeNode`, `insert`, `inorder`, `preorder`, `build_from_traversals`, `is_bst`, `size`, `largest_bst_size` |
| `algobox.binomial_heap` | `BinomialHeap` |
| `algobox.traversal` | `UndirectedGraph`, `bfs_order`, `bfs_all`, `dfs_all_recursive`, `dfs_all_stack`, `count_reachable`, `transitive_closure` |
| `algobox.shortest_paths` | `WeightedGraph`, `Floyd`, `dijkstra`, `floyd_warshall` |
| `algobox.topological` | `kahn_order`, `has_cycle`, `topological_sort`, `topological_sort_min_heap`, `CycleError` |
| `algobox.spanning_tree` | `kruskal`, `prim` |

## Examples

```python
from algobox.sorting import merge_sort
from algobox.number_theory import pow_mod, nth_ugly_number
from algobox.text import infix_to_postfix
from algobox.stacks import BoundedStack, StackEmptyError
from algobox.topological import kahn_order
from algobox.spanning_tree import kruskal

merge_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
pow_mod(2, 10, 1_000_000_007)   # 1024
nth_ugly_number(10)             # 12
infix_to_postfix("a+b*c")       # "abc*+"
kahn_order([[1], [2], []])      # [0, 1, 2]
kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])   # [(0, 1, 1), (1, 2, 2)]

stack = BoundedStack()          # capacity 10 by default
stack.push(5)
stack.pop()                     # 5
try:
    stack.pop()
except StackEmptyError:
    print("nothing left")
```

## Conventions

- The sorting functions take any iterable and return a new list; the input
  is left alone. `selection_sort_passes` yields a snapshot after each pass,
  and `quick_sort_comparisons` returns the sorted list together with the
  number of comparisons made.
- Bounded containers raise their own errors: `StackFullError` and
  `QueueFullError` when there is no room, `StackEmptyError` and
  `QueueEmptyError` when there is nothing to take.
- Vertex numbering differs by function and is stated in each docstring:
  `traversal`, `dijkstra`, `floyd_warshall`, `kahn_order`, `has_cycle` and
  `kruskal` use vertices from 0; `WeightedGraph`, `Floyd`,
  `topological_sort`, `topological_sort_min_heap`, `prim` and `GridMap`
  use vertices or coordinates from 1.
- Unreachable distances in `algobox.shortest_paths` are `math.inf`.
- `kahn_order` raises `CycleError` on a cyclic graph, while
  `topological_sort` and `topological_sort_min_heap` leave out the vertices
  that a cycle keeps from being ordered.

## What it does not do

algobox is a library only. It has no command-line program and no
interactive menus for driving the stacks, queues, lists or heaps; every
structure and algorithm is used by calling it from Python.