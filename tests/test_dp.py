import pytest

from compkit.dp import largest_square_in_grid, lis, memo_rec


def _source_grid():
    grid = [[True] * 10 for _ in range(6)]
    for i, j in [(0, 1), (2, 4), (2, 6), (2, 9), (3, 9), (5, 7)]:
        grid[i][j] = False
    return grid


def test_largest_square_source_case():
    dp = largest_square_in_grid(_source_grid())
    max_edge = max(max(row) for row in dp)
    assert max_edge * max_edge == 16


def test_largest_square_shape_and_blocked_cells():
    grid = _source_grid()
    dp = largest_square_in_grid(grid)
    assert len(dp) == 6
    assert all(len(row) == 10 for row in dp)
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            assert (dp[i][j] == 0) == (not cell)


def test_largest_square_full_grid():
    dp = largest_square_in_grid([[True] * 3 for _ in range(3)])
    assert dp == [[1, 1, 1], [1, 2, 2], [1, 2, 3]]


def test_largest_square_empty():
    with pytest.raises(ValueError):
        largest_square_in_grid([])


def test_lis_source_case():
    assert lis([4, 2, 3, 1, 5]) == 3


def test_lis_strict_and_edges():
    assert lis([]) == 0
    assert lis([7, 7, 7]) == 1
    assert lis([1, 2, 3, 4]) == 4
    assert lis([4, 3, 2, 1]) == 1


def test_memo_rec_leaf_score_propagates():
    a = [3, 1, 4, 1, 5]
    assert memo_rec(2, 2, a) == 0
    assert memo_rec(0, 4, a) == 0


def test_memo_rec_bounds():
    a = [1, 2, 3]
    with pytest.raises(ValueError):
        memo_rec(2, 1, a)
    with pytest.raises(ValueError):
        memo_rec(0, 3, a)