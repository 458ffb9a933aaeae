# algoshelf

A collection of classic algorithms and data structures written as plain
Python with no third-party dependencies. It is meant for study and for small
tasks where a clear reference implementation is enough.

## Installation

```
pip install algoshelf
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "algoshelf[test]"
pytest
```

## What is on the shelf

- `algoshelf.searching`: `binary_search` and `linear_search` (both return an
  index or `None`), `find_sequence` (locates a run inside sorted values and
  returns `(start, end)` with `end` exclusive) and `k_closest`.
- `algoshelf.segment_tree`: `SegmentTree` with `update(position, value)` and
  `query(left, right)` for inclusive range sums.
- `algoshelf.graph_traversal`: `Graph` with `add_edge`, `add_undirected_edge`,
  `neighbours`, `bfs`, `bfs_trace` and `dfs`, plus
  `strongly_connected_components` (Kosaraju).
- `algoshelf.shortest_paths`: `dijkstra` and `all_pairs_shortest_paths`;
  unreachable vertices get `math.inf`.
- `algoshelf.mst`: `boruvka_mst`, returning a `SpanningTree` of `Edge`
  objects with a `weight` property, built on `DisjointSet`.
- `algoshelf.circular_list`: `CircularDoublyLinkedList` with 1-based
  `insert_at` / `delete_at`, `insert_first`, `insert_last`, `delete_first`,
  `delete_last`, `sort`, `update`, `search` and reverse iteration.
- `algoshelf.linked_list`: `LinkedList` with `append`, `push` and
  `segregate_even_odd`.
- `algoshelf.hashtable`: `ChainedHashTable`, integer keys in chained buckets,
  doubling its capacity once three quarters full.
- `algoshelf.scheduling`: `Process`, and the schedulers
  `first_come_first_served`, `shortest_remaining_time_first` and
  `round_robin`, each returning a `Schedule` with `average_turnaround()` and
  `average_waiting()`.
- `algoshelf.numbers`: Fibonacci by several methods (`fibonacci_naive`,
  `fibonacci_fast`, `fibonacci_memo`, `fibonacci_iterative`,
  `fibonacci_matrix`, and the floating-point `fibonacci_binet` and
  `fibonacci_binet_const`), `pisano_period`, `fibonacci_mod`, `is_armstrong`,
  `factorial`, `minimum` and `parity_report`.
- `algoshelf.puzzles`: `matrix_multiply`, `circles_orthogonal`, `calculate`,
  `concatenate`, `day_of_programmer`, `magic_square_cost`, `check_username`
  (raises `BadLengthError` for names under five characters), `left_rotate`,
  `rotation_queries`, `fractional_knapsack` and `n_queens`.
- `algoshelf.tictactoe`: `TicTacToe` with `play`, `outcome` and `render`,
  the `Outcome` enum and `InvalidMoveError`.
- `algoshelf.people`: `Professor` and `Student` read from tokens with
  `read_people`, and `report` to list them.

## Examples

```python
from algoshelf.shortest_paths import dijkstra
from algoshelf.mst import boruvka_mst
from algoshelf.numbers import fibonacci_mod
from algoshelf.scheduling import Process, round_robin

dijkstra(3, [(0, 1, 5), (0, 2, 45), (1, 2, 17)], 0)   # [0, 5, 22]

tree = boruvka_mst(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
tree.weight                                            # 19

fibonacci_mod(2816213588, 30524)                       # 10249

schedule = round_robin([Process(1, 0, 5), Process(2, 1, 3)], quantum=2)
schedule.average_waiting()
```

## Commands

Play tic-tac-toe for two players in the terminal, entering square numbers
1 to 9:

```
algoshelf-tictactoe
```

Read professors and students from standard input and print their report.
The input is a count, then for each person a type code (`1` for a professor,
anything else for a student) followed by name, age and either a publication
count or six marks:

```
algoshelf-people < people.txt
```

## What it does not include

The shelf has no sorting routines and no Huffman coding; use Python's
built-in `sorted` for ordering values.