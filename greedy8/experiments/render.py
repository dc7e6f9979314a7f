from typing import Tuple

from greedy8.domains.puzzle8 import N

State = Tuple[int, ...]


def render(state: State) -> str:
    """Bordered text block of a 3x3 board; the blank is shown as 0."""
    border = "+" + "-" * (N * 2 + 1) + "+"
    lines = [border]
    for r in range(N):
        row = state[N*r:N*r+N]
        lines.append("|" + "".join(f" {v}" for v in row) + " |")
    lines.append(border)
    return "\n".join(lines)
