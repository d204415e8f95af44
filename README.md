# dsalabs

A collection of classic data structures written in plain Python, several of
them with a small console front end that drives the structure interactively.
The package has no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalabs.matrix` | Ragged integer matrix read from the console; `individual` counts, for every row, how many of its items are absent from the next row (the last row wraps to the first). Also `count_common`, `format_line`, `format_matrix`, `read_matrix`. |
| `dsalabs.ring_queue` | Queues of `(angle, sine)` pairs: `BoundedQueue`, which raises `QueueFull` at its capacity, and `LinkedQueue`, which has no limit. Both raise `QueueEmpty` when read empty. |
| `dsalabs.server` | `factorial`, `taylor_sine` (sine of an angle in degrees from a Taylor series), `SineTable`, `Host` and `Slave`. |
| `dsalabs.simulation` | `Settings`, `read_settings` and `simulate`: a randomised host/worker pipeline that fills a table of sines. |
| `dsalabs.parent_table` | `ParentTable`, a bounded table of `Record`s kept ordered by parent key, with child lookup; errors derive from `TableError`. |
| `dsalabs.table_iterator` | `TableCursor` and the cursor-based operations `cursor_insert`, `cursor_search_key`, `cursor_search_child`, `cursor_delete`, `cursor_format`. |
| `dsalabs.parent_dialog` | Interactive menu for `ParentTable` and `import_file` / `read_records` for tab- or newline-separated text files. |
| `dsalabs.hash_table` | `HashTable`: open addressing with double hashing, deleted-slot marks, growth through a series of primes, and a binary format (`export`, `HashTable.load`). |
| `dsalabs.hash_dialog` | Interactive menu for `HashTable`, including binary import and export. |
| `dsalabs.threaded_tree` | `ThreadedTree`: a string-keyed binary search tree that keeps repeated keys as numbered releases and threads every node to its in-order predecessor; range queries, reverse walk, DOT text, sideways text view. |
| `dsalabs.tree_timing` | Functions that time insert, delete, search, maximum and traversal on randomly filled `ThreadedTree`s, returning microseconds. |
| `dsalabs.graph_containers` | `FifoQueue` and `LifoStack`. |
| `dsalabs.avl_tree` | `AvlTree`: an integer-keyed AVL tree holding several values per key, with versioned delete, closest-key search, descending traversal, DOT text and a sideways text view. |
| `dsalabs.string_table` | `StringTable`, a string-keyed open-addressing hash table with the same growth rule as `HashTable`. |
| `dsalabs.graph` | `Graph`: an undirected weighted graph with node and edge editing, handshake search, groups joined by positive edges, Bellman–Ford shortest path and DOT text. |

## Installing

```
pip install .
```

## Commands

```
dsalabs-matrix         # read a ragged matrix and print it with the derived vector
dsalabs-sine           # run the host/worker sine simulation
dsalabs-parent-table   # interactive menu for the parent-ordered table
dsalabs-hash-table     # interactive menu for the hash table
```

Each command reads from standard input and stops at end of input.
`dsalabs-sine` also takes `--queue vector|list` (choose `BoundedQueue` or
`LinkedQueue`, default `vector`) and `--seed N` for a repeatable run.

## Using the library

```python
from dsalabs.hash_table import HashTable

table = HashTable(23)
table.insert(7, "seven")
index = table.search_index(7)
print(table.format_cell(index))
```

```python
from dsalabs.graph import Graph

graph = Graph()
for name in ("a", "b", "c"):
    graph.insert_node(name)
graph.insert_edge("a", "b", 2)
graph.insert_edge("b", "c", 3)
weight, path = graph.shortest_path("a", "c")
print(weight, path)
print(graph.to_dot())
```

```python
from dsalabs.avl_tree import AvlTree

tree = AvlTree()
for key in (10, 20, 30):
    tree.insert(key, key * 100)
print(tree.closest(24))
print(tree.format_sideways())
```

## What the package does not do

- The threaded tree, the AVL tree and the graph are libraries only: there is
  no console menu or command for them.
- `to_dot` methods return Graphviz text; nothing renders it to an image.
- The timing functions return numbers; they do not write CSV files or plots.

## Running the tests

```
pip install .[test]
pytest
```