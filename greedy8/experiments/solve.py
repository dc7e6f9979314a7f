#!/usr/bin/env python3
import random

from greedy8.domains.puzzle8 import Board, random_solvable_board
from greedy8.experiments.render import render
from greedy8.search.greedy import greedy_best_first


def report(start: Board, res) -> str:
    """Console text for a search result: every board of the path, or the start plus a notice."""
    if res["path"] is None:
        return render(start.tiles) + "\nNo solution found.\n"
    out = ["Solution found:"]
    for s in res["path"]:
        out.append(render(s))
        out.append("")
    return "\n".join(out) + "\n"


def main():
    rng = random.Random()
    start = random_solvable_board(rng)
    res = greedy_best_first(start)
    print(report(start, res), end="")


if __name__ == "__main__":
    main()
