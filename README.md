# dsakit

Classic data structures and algorithms in plain Python, with no runtime
dependencies. It is a library only: it has no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.notation` | `infix_to_postfix`, `infix_to_prefix`, `prefix_to_infix`, `prefix_to_postfix`, `postfix_to_infix`, `postfix_to_prefix`, plus `is_operator` and `precedence` |
| `dsakit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `counting_sort`, `counting_sort_by_tally`, `merge_sort`, `quick_sort`, `shell_sort` |
| `dsakit.searching` | `linear_search`, `binary_search`, `interpolation_search` |
| `dsakit.binary_strings` | `binary_strings(n)`: every string of `n` binary digits, in ascending order |
| `dsakit.xor_list` | `XorLinkedList`: doubly linked list keeping one XOR-combined link per node |
| `dsakit.unrolled_list` | `UnrolledLinkedList`: a chain of blocks of at most `block_size` items |
| `dsakit.stacks` | `ArrayStack` (fixed capacity), `DynamicArrayStack` (doubles when full), `LinkedStack` |
| `dsakit.queues` | `CircularQueue` (fixed capacity), `DynamicQueue` (doubles when full), `LinkedQueue` |
| `dsakit.binary_tree` | `BinaryTreeNode`, recursive and iterative in/pre/post-order, `level_order`, `build_expression_tree` |
| `dsakit.avl` | `AVLTree` and `AVLNode` |
| `dsakit.generic_tree` | `TreeNode` with first-child / next-sibling links, and `traverse` |
| `dsakit.threaded_tree` | `ThreadedBinaryTree` with stackless in-order and pre-order walks |
| `dsakit.bst` | `BinarySearchTree`: iterative and recursive insert, find, min and max; `delete` |
| `dsakit.red_black` | `RedBlackTree` with insert and delete, `Color`, `RBNode` |
| `dsakit.heaps` | Bounded `MinHeap` and `MaxHeap` |
| `dsakit.heapsort` | `heapify`, `heap_sort`, `count_inversions` |
| `dsakit.splay` | `SplayNode`, `splay`, `search`, `pre_order` |
| `dsakit.disjoint_set` | `DisjointSet` (union by rank, path compression) and `QuickUnion` |
| `dsakit.graphs` | `AdjacencyListGraph`, `AdjacencyMatrixGraph` (with `dfs` and `bfs`), `dfs_of_graph` |
| `dsakit.shortest_paths` | `bfs`, `dfs`, `unweighted_shortest_path`, `dijkstra`, `bellman_ford`, `prim`, `kruskal`, `paths_from` |

The sorting functions and `heap_sort` return a new list and leave their
input alone. The search functions return an index, or `None` when the
target is absent.

## Errors

Operations that cannot succeed raise exceptions:

- `dsakit.stacks`: `StackOverflowError` when pushing onto a full
  `ArrayStack`, `StackEmptyError` when popping or peeking an empty stack.
- `dsakit.queues`: `QueueOverflowError` when adding to a full
  `CircularQueue`, `QueueEmptyError` when removing from or inspecting an
  empty queue.
- `dsakit.heaps`: `HeapOverflowError` and `HeapEmptyError`.
- `dsakit.shortest_paths`: `NegativeCycleError` from `bellman_ford`.
- Deleting an absent key from `BinarySearchTree` or `RedBlackTree` raises
  `KeyError`; malformed expressions raise `ValueError`.

## Examples

Expression notation:

```python
from dsakit.notation import infix_to_postfix, infix_to_prefix, postfix_to_infix

infix_to_postfix("a+b*c")   # 'abc*+'
infix_to_prefix("a+b*c")    # '+a*bc'
postfix_to_infix("abc*+")   # '(a+(b*c))'
```

Sorting and searching:

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search

data = merge_sort([6, 3, 9, 7, 1, 3])   # [1, 3, 3, 6, 7, 9]
binary_search(data, 7)                   # 4
binary_search(data, 5)                   # None
```

Stacks:

```python
from dsakit.stacks import ArrayStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    ...
list(stack)   # [2, 1], top first
```

Balanced trees:

```python
from dsakit.avl import AVLTree

tree = AVLTree()
for key in (10, 8, 9, 5, 6, 11, 4, 3, 2, 1):
    tree.insert(key)
list(tree)   # [1, 2, 3, 4, 5, 6, 8, 9, 10, 11]
```

Shortest paths over an adjacency list and a weight matrix:

```python
from dsakit.shortest_paths import connect_directed, dijkstra, paths_from

adjacency = [[] for _ in range(5)]
connect_directed(adjacency, 0, 1, 5)
connect_directed(adjacency, 0, 2, 5)
connect_directed(adjacency, 2, 1, 5)
weight = [[0] * 5 for _ in range(5)]
weight[0][1] = 4
weight[0][2] = 1
weight[2][1] = 2

distance, path = dijkstra(adjacency, 0, 5, weight)
# distance == [0, 3, 1, inf, inf]
# path == [0, 2, 0, None, None]
paths_from(path, 0)   # [[0], [0, 2, 1], [0, 2], None, None]
```