import random

from greedy8.domains.puzzle8 import GOAL, Board, random_board
from greedy8.heuristics.linear_conflict import linear_conflict
from greedy8.heuristics.manhattan import manhattan, tile_distance


def test_manhattan_goal_is_zero():
    assert manhattan(GOAL) == 0
    assert linear_conflict(GOAL) == 0


def test_manhattan_one_slide_scenario(one_slide_board):
    assert manhattan(one_slide_board.tiles) == 1


def test_manhattan_known_values():
    # blank in the top-left corner, every tile shifted one cell forward
    assert manhattan((0, 1, 2, 3, 4, 5, 6, 7, 8)) == 12
    assert manhattan((8, 7, 6, 5, 4, 3, 2, 1, 0)) == 16


def test_manhattan_is_sum_of_tile_distances(rng):
    for _ in range(50):
        s = random_board(rng).tiles
        per_tile = [tile_distance(s, i) for i in range(9)]
        assert all(d >= 0 for d in per_tile)
        assert per_tile[s.index(0)] == 0
        assert manhattan(s) == sum(per_tile)


def test_single_slide_changes_manhattan_by_one(rng):
    for _ in range(50):
        b = random_board(rng)
        for child in b.neighbors():
            assert abs(manhattan(child.tiles) - manhattan(b.tiles)) == 1


def test_heuristics_are_idempotent():
    s = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    assert manhattan(s) == manhattan(s)
    assert linear_conflict(s) == linear_conflict(s)


def test_linear_conflict_row_pair():
    s = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert manhattan(s) == 2
    assert linear_conflict(s) == 4


def test_linear_conflict_column_pair():
    s = (4, 2, 3, 1, 5, 6, 7, 8, 0)
    assert manhattan(s) == 2
    assert linear_conflict(s) == 4


def test_linear_conflict_never_below_manhattan():
    rng = random.Random(99)
    for _ in range(100):
        s = random_board(rng).tiles
        assert linear_conflict(s) >= manhattan(s)
        assert (linear_conflict(s) - manhattan(s)) % 2 == 0


def test_heuristics_accept_board_tiles(goal_board):
    child = goal_board.neighbors()[0]
    assert isinstance(child, Board)
    assert manhattan(child.tiles) == 1
