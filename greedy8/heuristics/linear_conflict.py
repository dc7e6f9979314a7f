from greedy8.domains.puzzle8 import N, State
from greedy8.heuristics.manhattan import _goal_pos, manhattan


def linear_conflict(s: State) -> int:
    """Manhattan + 2 per linear conflict (row & column)."""
    m = manhattan(s)
    # Row conflicts
    for r in range(N):
        row = s[N*r:N*r+N]
        tiles = [t for t in row if t != 0 and _goal_pos[t][0] == r]
        for i in range(len(tiles)):
            gi = _goal_pos[tiles[i]][1]
            for j in range(i+1, len(tiles)):
                if gi > _goal_pos[tiles[j]][1]:
                    m += 2
    # Column conflicts
    for c in range(N):
        col = [s[c + N*r] for r in range(N)]
        tiles = [t for t in col if t != 0 and _goal_pos[t][1] == c]
        for i in range(len(tiles)):
            gi = _goal_pos[tiles[i]][0]
            for j in range(i+1, len(tiles)):
                if gi > _goal_pos[tiles[j]][0]:
                    m += 2
    return m
