import pytest

from compkit.graph import (
    INF,
    UNREACHED,
    ZERO_ONE_INF,
    bfs,
    dijkstra,
    prim,
    restore_path,
    warshall_floyd,
    zero_one_bfs,
)

SAMPLE = [[1, 2], [3], [3, 4], [5], [5], [], [0]]

WEIGHTED = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], [], []]


def _undirected(n, edge_list):
    adj = [[] for _ in range(n)]
    for u, v, w in edge_list:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


def test_bfs_on_chain_gives_index_distances():
    n = 8
    edges = [[i + 1] for i in range(n - 1)] + [[]]
    dist, _ = bfs(edges, 0)
    assert dist == list(range(n))


def test_bfs_unreachable_vertex():
    dist, prev = bfs(SAMPLE, 0)
    assert dist[6] == UNREACHED
    assert prev[6] is None and prev[0] is None


def test_bfs_distances_are_consistent():
    dist, prev = bfs(SAMPLE, 0)
    for u, targets in enumerate(SAMPLE):
        if dist[u] == UNREACHED:
            continue
        for v in targets:
            assert dist[v] != UNREACHED
            assert dist[v] <= dist[u] + 1
    for v, p in enumerate(prev):
        if p is not None:
            assert v in SAMPLE[p]
            assert dist[v] == dist[p] + 1


def test_restore_path_is_shortest_walk():
    dist, prev = bfs(SAMPLE, 0)
    path = restore_path(prev, 5)
    assert path[0] == 0
    assert path[-1] == 5
    assert len(path) == dist[5] + 1
    for a, b in zip(path, path[1:]):
        assert b in SAMPLE[a]


def test_restore_path_of_start_is_itself():
    _, prev = bfs(SAMPLE, 0)
    assert restore_path(prev, 0) == [0]


def test_dijkstra_small_example():
    dist, _ = dijkstra(WEIGHTED, 0)
    assert dist[1] == 3
    assert dist[3] == 4
    assert dist[4] == INF


def test_dijkstra_path_weight_matches_distance():
    dist, prev = dijkstra(WEIGHTED, 0)
    weights = {(u, v): w for u, es in enumerate(WEIGHTED) for v, w in es}
    for t in range(len(WEIGHTED)):
        if dist[t] == INF:
            continue
        path = restore_path(prev, t)
        assert path[0] == 0
        assert sum(weights[a, b] for a, b in zip(path, path[1:])) == dist[t]


def test_dijkstra_satisfies_triangle_inequality():
    dist, _ = dijkstra(WEIGHTED, 0)
    for u, es in enumerate(WEIGHTED):
        if dist[u] == INF:
            continue
        for v, w in es:
            assert dist[v] <= dist[u] + w


def test_dijkstra_with_unit_weights_matches_bfs():
    weighted = [[(v, 1) for v in targets] for targets in SAMPLE]
    bfs_dist, _ = bfs(SAMPLE, 0)
    dij_dist, _ = dijkstra(weighted, 0)
    expected = [INF if d == UNREACHED else d for d in bfs_dist]
    assert dij_dist == expected


def test_zero_one_bfs_with_unit_costs_matches_bfs():
    weighted = [[(v, 1) for v in targets] for targets in SAMPLE]
    bfs_dist, _ = bfs(SAMPLE, 0)
    expected = [ZERO_ONE_INF if d == UNREACHED else d for d in bfs_dist]
    assert zero_one_bfs(weighted, 0) == expected


def test_zero_one_bfs_with_zero_costs():
    weighted = [[(v, 0) for v in targets] for targets in SAMPLE]
    dist = zero_one_bfs(weighted, 0)
    assert dist[:6] == [0] * 6
    assert dist[6] == ZERO_ONE_INF


def test_zero_one_bfs_matches_dijkstra_on_mixed_costs():
    edges = [
        [(1, 0), (2, 1)],
        [(3, 1), (2, 0)],
        [(3, 0), (4, 1)],
        [(4, 0)],
        [(0, 1)],
    ]
    zo = zero_one_bfs(edges, 0)
    dij, _ = dijkstra(edges, 0)
    assert zo == dij


def test_warshall_floyd_matches_dijkstra_and_keeps_input():
    n = len(WEIGHTED)
    matrix = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for u, es in enumerate(WEIGHTED):
        for v, w in es:
            matrix[u][v] = min(matrix[u][v], w)
    snapshot = [row[:] for row in matrix]
    result = warshall_floyd(matrix)
    assert matrix == snapshot
    for s in range(n):
        dist, _ = dijkstra(WEIGHTED, s)
        assert result[s] == dist


def test_warshall_floyd_rejects_non_square():
    with pytest.raises(ValueError):
        warshall_floyd([[0, 1], [1]])


def test_prim_on_tree_is_total_weight():
    edge_list = [(0, 1, 5), (1, 2, 3), (1, 3, 7), (3, 4, 2)]
    adj = _undirected(5, edge_list)
    assert prim(adj) == sum(w for _, _, w in edge_list)


def test_prim_on_cycle_drops_heaviest_edge():
    edge_list = [(0, 1, 4), (1, 2, 9), (2, 3, 2), (3, 0, 6)]
    adj = _undirected(4, edge_list)
    weights = [w for _, _, w in edge_list]
    assert prim(adj) == sum(weights) - max(weights)


def test_prim_empty_graph_raises():
    with pytest.raises(ValueError):
        prim([])