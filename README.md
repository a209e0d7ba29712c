# algokit

A small library of classic algorithms and data structures, written in plain
Python with no dependencies beyond the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.bits` | Bit tests and updates, one's and two's complement, binary/decimal conversion, XOR of ranges, set-bit counting |
| `algokit.arrays` | Kadane's maximum subarray sum, exponentiation by repeated squaring |
| `algokit.text` | Splitting a sentence on single spaces |
| `algokit.recursion` | Power sets, subsequences, unique permutations, subsequences with a given sum |
| `algokit.trie` | `Trie` of words: insert, search, prefix test, remove |
| `algokit.graph_traversal` | BFS/DFS order, bipartite checks, cycle detection, topological sort, adjacency matrix to list |
| `algokit.disjoint_set` | `DisjointSet` over the nodes `0 .. n` with union by rank or by size |
| `algokit.shortest_paths` | Bellman–Ford, Dijkstra (binary heap, or one pending entry per vertex), Floyd–Warshall, DAG and unit-weight shortest paths |
| `algokit.spanning_tree` | Minimum spanning tree weight by Kruskal and by Prim |
| `algokit.singly_linked` | `ListNode` and functions to build, edit, merge, reverse, sort and inspect singly linked lists |
| `algokit.doubly_linked` | `DNode` and functions to build, edit and reverse doubly linked lists |

Functions raise `ValueError` or `IndexError` on input they cannot handle,
for example a negative bit index, an empty list for `max_subarray_sum`, or a
source vertex out of range.

## Examples

```python
from algokit.arrays import max_subarray_sum, power
from algokit.bits import to_binary, to_decimal, xor_in_range

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
power(2, 10)                                      # 1024
to_binary(23)                                     # "10111"
to_decimal("101")                                 # 5
xor_in_range(3, 5)                                # 3 ^ 4 ^ 5
```

```python
from algokit.recursion import permute_unique, count_subsequences_with_sum

permute_unique([1, 1, 2])
# [[1, 1, 2], [1, 2, 1], [2, 1, 1]]
count_subsequences_with_sum([1, 2, 1], 2)  # 2
```

```python
from algokit.trie import Trie

trie = Trie()
trie.insert("ABCD")
trie.search("ABCD")     # True
trie.starts_with("AB")  # True
trie.remove("ABCD")
trie.search("ABCD")     # False
trie.starts_with("AB")  # still True: removal only unmarks the word
```

Graphs are given as adjacency lists, one list of neighbours per vertex:

```python
from algokit.graph_traversal import bfs_order, topo_sort_kahn
from algokit.disjoint_set import DisjointSet

graph = [[1, 2], [3], [3], []]
bfs_order(graph)        # [0, 1, 2, 3]
topo_sort_kahn(graph)   # [0, 1, 2, 3]

ds = DisjointSet(7)
ds.union_by_size(1, 2)
ds.union_by_size(2, 3)
ds.connected(1, 3)      # True
```

Weighted graphs carry `(neighbour, weight)` pairs; edge lists carry
`(u, v, weight)` triples. Bellman–Ford and Dijkstra report unreachable
vertices as `math.inf`; Floyd–Warshall, `dag_shortest_path` and
`unweighted_shortest_path` report them as `-1`.

```python
from algokit.shortest_paths import dijkstra_heap, bellman_ford, NegativeCycleError
from algokit.spanning_tree import kruskal, prim

adjacency = [[(1, 1), (2, 6)], [(0, 1), (2, 3)], [(0, 6), (1, 3)]]
dijkstra_heap(adjacency, 0)  # [0, 1, 4]
kruskal(adjacency)           # 4
prim(adjacency)              # 4

try:
    bellman_ford(2, [(0, 1, -1), (1, 0, -1)], 0)
except NegativeCycleError:
    ...
```

Linked lists are built from and read back into Python lists:

```python
from algokit import singly_linked as sll

head = sll.from_list([5, 3, 4, 6, 7])
head = sll.sort_list(head)
sll.to_list(head)              # [3, 4, 5, 6, 7]
sll.to_list(sll.reverse(head)) # [7, 6, 5, 4, 3]
```

## What it does not do

algokit is a library only: it has no command-line program and reads no
input of its own. Graphs, lists and numbers are passed to its functions as
Python values.