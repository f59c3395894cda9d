# dsakit

A collection of classic data-structure and algorithm routines, written as
plain Python functions and classes. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `delete_first`, `two_sum`, `two_sum_indexed`, `is_anagram`, `is_anagram_counted`, `group_anagrams` |
| `dsakit.searching` | `binary_search`, `binary_search_recursive`, `first_occurrence`, `last_occurrence`, `integer_sqrt`, `has_pair_with_sum`, `find_triplet` |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sorted` |
| `dsakit.sliding_window` | `window_sums`, `max_window_sum`, `max_sliding_window`, `max_sliding_window_heap` |
| `dsakit.hashing` | `intersection`, `union`, `pairs_with_sum`, `has_zero_sum_subarray`, `count_frequencies`, `sorted_by_key` |
| `dsakit.matrix` | `snake_order`, `boundary_order`, `transpose`, `transpose_in_place`, `spiral_order`, `rotate_anticlockwise` |
| `dsakit.dp` | `fibonacci`, `climb_stairs`, `frog_jump`, `frog_jump_k`, `max_non_adjacent_sum`, `house_robber`, `ninja_training`, `unique_paths`, `unique_paths_with_obstacles` |
| `dsakit.selection` | `digit_indices`, `second_largest`, `majority_element`, `common_chars` |
| `dsakit.graphs` | `undirected_adjacency`, `bfs_order`, `dfs_order`, cycle checks (`has_cycle_undirected_bfs`, `has_cycle_undirected_dfs`, `has_cycle_directed_dfs`, `has_cycle_directed_kahn`), `oranges_rotting`, `count_distinct_islands`, `is_bipartite_bfs`, `is_bipartite_dfs`, `topological_sort_dfs`, `topological_sort_kahn`, `can_finish`, `shortest_path_dag`, `shortest_path_unweighted`, `dijkstra`, `bellman_ford`, `NegativeCycleError` |
| `dsakit.tree` | `BinaryTree`, a binary tree filled level by level |
| `dsakit.singly` | `SinglyLinkedList` |
| `dsakit.doubly` | `DoublyLinkedList` |
| `dsakit.circular` | `CircularDoublyLinkedList` |
| `dsakit.stacks_queues` | `longest_unique_substring`, `next_larger`, `next_greater_circular`, `subarrays`, `subarray_minimums`, `sum_subarray_mins`, `trap_rain_water`, `trap_rain_water_two_pointer`, `largest_rectangle_area`, `reversed_queue` |

## Conventions

- Functions return new values and leave their inputs alone. The one exception
  is `matrix.transpose_in_place`, which changes a square matrix in place.
- Where a search finds nothing the result is `None`: `two_sum`,
  `binary_search`, `first_occurrence`, `find_triplet`, `second_largest`,
  `majority_element`, `oranges_rotting` and the like. `next_larger` and
  `next_greater_circular` put `None` where no larger element exists.
- Graphs are adjacency lists: `adj[u]` lists the neighbours of node `u`, and
  nodes are numbered from `0`. `dijkstra` takes `(node, weight)` pairs.
  Weighted distances use `math.inf` for unreachable nodes;
  `shortest_path_unweighted` uses `None`.
- `bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a negative
  cycle is reachable; `dijkstra` raises `ValueError` on a negative weight and
  `shortest_path_dag` on a cycle.

## Examples

```python
from dsakit.searching import binary_search, first_occurrence
from dsakit.dp import frog_jump, unique_paths
from dsakit.graphs import undirected_adjacency, bfs_order

binary_search([10, 20, 30, 40, 50, 60], 20)       # 1
first_occurrence([5, 10, 10, 10, 20], 10)         # 1

unique_paths(3, 3)                                # 6

adj = undirected_adjacency(5, [(0, 1), (0, 2), (1, 2), (2, 3), (1, 3), (3, 4), (2, 4)])
bfs_order(adj, 0)                                 # [0, 1, 2, 3, 4]
```

The containers behave like ordinary Python collections:

```python
from dsakit.tree import BinaryTree
from dsakit.doubly import DoublyLinkedList

tree = BinaryTree()
for value in (10, 20, 30, 40, 50):
    tree.insert(value)
tree.inorder()        # [40, 20, 50, 10, 30]
len(tree)             # 5
30 in tree            # True

items = DoublyLinkedList([1, 2, 4])
items.insert_before(4, 3)
list(items)           # [1, 2, 3, 4]
list(reversed(items)) # [4, 3, 2, 1]
```

The linked lists address nodes by the first one holding a given value.
Popping from an empty list raises `IndexError`; naming a value that is not in
the list raises `ValueError`.

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menu for building or editing lists; the containers are driven from Python code.