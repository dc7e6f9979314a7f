from typing import Dict, Tuple

from greedy8.domains.puzzle8 import GOAL, N, State

_goal_pos: Dict[int, Tuple[int, int]] = {GOAL[i]: divmod(i, N) for i in range(len(GOAL))}


def tile_distance(s: State, idx: int) -> int:
    """Manhattan distance of the tile at ``idx`` from its goal cell (0 for the blank)."""
    tile = s[idx]
    if tile == 0:
        return 0
    r, c = divmod(idx, N)
    gr, gc = _goal_pos[tile]
    return abs(r - gr) + abs(c - gc)


def manhattan(s: State) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    return sum(tile_distance(s, idx) for idx in range(len(s)))
