# compkit

A toolbox of algorithms and data structures for programming contests and
heuristic optimisation: number theory, graph search, dynamic programming,
linked and skip lists, min-cost flow, a seeded xoshiro256** random generator
and a few estimation models (Kalman filter, Gaussian process regression, PID
control, Sinkhorn–Knopp optimal transport).

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
| `compkit.util` | `Extremum` (`chmin` / `chmax`), `get_time`, `next_permutation`, `transpose` |
| `compkit.modint` | `ModInt` arithmetic modulo 998244353 |
| `compkit.xoshiro` | `SplitMix64`, `Xoshiro256` seeded generator |
| `compkit.number_theory` | `change_radix`, `ncr_small`, `ncr_mod_table`, `ncr_lucas`, `modpow`, `modinv`, `is_prime`, `prime_factorization`, `sieve_of_eratosthenes`, `sieve_range` |
| `compkit.sequences` | `argsort`, `run_length_encoding` |
| `compkit.dp` | `largest_square_in_grid`, `lis`, `memo_rec` |
| `compkit.graph` | `bfs`, `restore_path`, `zero_one_bfs`, `dijkstra`, `prim`, `warshall_floyd` |
| `compkit.grid` | `grid_bfs`, `restore_grid_path`, `bfs_until_wall`, `grid_zero_one_bfs` |
| `compkit.linked_list` | `DLList` doubly linked list |
| `compkit.removability` | `RemovabilityChecker`, `is_connected`, `has_no_corner` |
| `compkit.skiplist` | `SkipList` indexable list |
| `compkit.min_cost_flow` | `CapacityScalingSuccessiveShortestPath`, `Status`, `EdgeHandle` |
| `compkit.pid` | `PID` controller |
| `compkit.gaussian_process` | `GaussianProcessRegression`, `KernelParams` |
| `compkit.kalman` | `KalmanFilter` |
| `compkit.sinkhorn` | `sinkhorn_knopp` |

## Examples

```python
from compkit.number_theory import change_radix, ncr_small, sieve_of_eratosthenes
from compkit.sequences import argsort
from compkit.graph import dijkstra, restore_path

change_radix("7", 10, 2)        # "111"
ncr_small(16, 11)               # 4368
sieve_of_eratosthenes(10)       # [2, 3, 5, 7]
argsort([3, 2, 1, 5, 7])        # [2, 1, 0, 3, 4]

edges = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2)], []]
dist, prev = dijkstra(edges, 0)
restore_path(prev, 3)           # [0, 2, 1, 3]
```

Minimum-cost flow:

```python
from compkit.min_cost_flow import CapacityScalingSuccessiveShortestPath, Status

flow = CapacityScalingSuccessiveShortestPath(3)
e = flow.add_edge(0, 1, 0, 5, 2)
flow.add_edge(1, 2, 0, 5, 3)
flow.add_supply(0, 4)
flow.add_demand(2, 4)
assert flow.solve(2) is Status.OPTIMAL
flow.result_cost()              # 20
flow.edge_flow(e)               # 4
```

Optimal transport with Sinkhorn–Knopp:

```python
from compkit.sinkhorn import sinkhorn_knopp

plan = sinkhorn_knopp(
    [18.0, 22.0, 26.0],
    [12.0, 20.0, 16.0, 18.0],
    [[7.0, 3.0, 2.0, 10.0], [9.0, 3.0, 6.0, 8.0], [8.0, 7.0, 8.0, 6.0]],
    10.0,
    0.001,
)
```

## What it does not do

compkit is a library only: it has no command-line tool, and it does not
include search drivers such as beam search, simulated annealing or Monte
Carlo playouts. Build those on top of the pieces above (for example
`Xoshiro256` for randomness and `get_time` for time limits).