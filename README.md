# dsakit

A collection of classic algorithms and data structures, written in plain Python. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `max_window_sum`: the largest sum of `size` consecutive values |
| `dsakit.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bits_range`, `count_set_bits`, `count_set_bits_fast` |
| `dsakit.mathutils` | `gcd` by Euclid's algorithm |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort` (last-element pivot), `quick_sort_first_pivot`, `dutch_flag_sort`, `count_inversions` |
| `dsakit.hanoi` | `hanoi_moves`, which returns a list of `Move` records |
| `dsakit.searching` | `linear_search`, `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences` |
| `dsakit.strings` | `reverse_string`, `sort_by_length`, `tokenize` |
| `dsakit.backtracking` | `hamiltonian_cycles`, `solve_n_queens`, `rat_in_maze_paths` |
| `dsakit.dynamic` | `knapsack_01`, `travelling_salesman` (tries every tour) |
| `dsakit.greedy` | `max_activities`, `fractional_knapsack` with `Item`, `sequence_jobs` with `Job` |
| `dsakit.heaps` | `sift_down`, `build_max_heap`, `heap_sort`, `MaxHeap` (`push`, `pop_root`, `remove`) |
| `dsakit.stack` | `BoundedStack` (default capacity 5), `StackOverflow`, `StackUnderflow` |
| `dsakit.disjoint_set` | `UnionFind` with path compression and union by rank |
| `dsakit.bst` | `Node`, `insert`, `inorder`, `preorder`, `postorder`, `level_order`, `height` |
| `dsakit.graph` | `Graph` with weighted adjacency lists, `bfs` and `dfs` |
| `dsakit.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `dsakit.spanning_tree` | `Edge`, `kruskal_mst`, `kruskal_mst_weight`, `prim_mst`, `prim_mst_weight` |
| `dsakit.flow` | `max_flow` (Ford–Fulkerson with breadth-first search), returning a `FlowResult` with the flow value and its augmenting paths |
| `dsakit.graph_analysis` | `articulation_points`, `greedy_coloring` |

## Examples

```python
from dsakit.arrays import max_window_sum
from dsakit.sorting import merge_sort, count_inversions
from dsakit.searching import lower_bound, upper_bound, count_occurrences

max_window_sum([2, 3, 4, 2, 4, 5, 2, 4, 5, 2], 4)    # 16
merge_sort([5, 4, 3, 6, 1, 2, 7])                    # [1, 2, 3, 4, 5, 6, 7]
count_inversions([5, 4, 3, 6, 1, 2, 7])              # 11

data = [10, 20, 40, 40, 40, 70, 100, 130, 560]
lower_bound(data, 40), upper_bound(data, 40)         # (2, 5)
count_occurrences(data, 40)                          # 3
```

```python
from dsakit.disjoint_set import UnionFind

sets = UnionFind(5)
sets.union(0, 1)
sets.same_set(0, 1)   # True
sets.num_sets()       # 4
sets.set_size(1)      # 2
```

```python
from dsakit.graph import Graph
from dsakit.shortest_paths import dijkstra

g = Graph()
g.add_edge(0, 1)      # weight 1, both directions by default
g.add_edge(1, 2)
g.bfs(0)              # [0, 1, 2]
dijkstra(g, 0)        # {0: 0, 1: 1, 2: 2}
```

```python
from dsakit.stack import BoundedStack, StackOverflow

stack = BoundedStack(2)
stack.push(10)
stack.push(20)
try:
    stack.push(30)
except StackOverflow:
    pass
stack.pop()           # 20
```

## Behaviour notes

- The sorting functions, `build_max_heap` and `heap_sort` return new lists and leave their input unchanged; `sift_down` works in place.
- Errors are raised as exceptions: `bellman_ford` raises `NegativeCycleError` when a negative cycle can be reached from the source, `kruskal_mst` and `prim_mst` raise `ValueError` for a disconnected graph, and `BoundedStack` raises `StackOverflow` and `StackUnderflow`.
- Unreachable vertices get `math.inf` from `bellman_ford` and `dijkstra`; `floyd_warshall` expects `math.inf` (or any large number) where there is no edge.

## What it does not do

dsakit is a library only. It has no command-line program and no interactive menus: every function takes its input as arguments and returns its result rather than reading from standard input or printing.