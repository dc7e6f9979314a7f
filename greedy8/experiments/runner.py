#!/usr/bin/env python3
from __future__ import annotations
import argparse
import random
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from greedy8.domains.puzzle8 import Board, make_unsolvable_variant, random_solvable_board
from greedy8.heuristics.linear_conflict import linear_conflict
from greedy8.heuristics.manhattan import manhattan
from greedy8.search.greedy import TIE_BREAKS, greedy_best_first

HEURISTICS = {"manhattan": manhattan, "linear_conflict": linear_conflict}

COLUMNS = [
    "algorithm", "heuristic", "seed", "index", "h0",
    "moves", "expanded", "generated", "duplicates",
    "peak_open", "peak_closed", "time_sec", "tie_break",
    "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    index: int
    board: Board


def make_instances(count: int, seed: int) -> List[Instance]:
    """``count`` solvable boards drawn from one generator seeded with ``seed``."""
    rng = random.Random(seed)
    return [Instance(seed=seed, index=i, board=random_solvable_board(rng)) for i in range(count)]


def run(insts: List[Instance], heuristic: str = "manhattan", tie_break: str = "fifo",
        include_unsolvable: bool = False) -> pd.DataFrame:
    hfun = HEURISTICS[heuristic]
    rows = []

    def add_row(res, inst: Instance, board: Board, solvable_flag: int):
        rows.append({
            "algorithm": res["algorithm"], "heuristic": heuristic,
            "seed": inst.seed, "index": inst.index, "h0": hfun(board.tiles),
            "moves": res["moves"], "expanded": res["expanded"],
            "generated": res["generated"], "duplicates": res["duplicates"],
            "peak_open": res["peak_open"], "peak_closed": res["peak_closed"],
            "time_sec": res["time"], "tie_break": res["tie_break"],
            "termination": res["termination"], "solvable": solvable_flag,
        })

    for inst in insts:
        add_row(greedy_best_first(inst.board, hfun, tie_break=tie_break), inst, inst.board, 1)
        # Parity-flipped twin: explores the whole unreachable half of the state space.
        if include_unsolvable:
            u = Board.from_state(make_unsolvable_variant(inst.board.tiles))
            add_row(greedy_best_first(u, hfun, tie_break=tie_break), inst, u, 0)

    df = pd.DataFrame(rows, columns=COLUMNS)
    df["moves"] = df["moves"].astype(float)  # None for exhausted runs
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/median/max of the effort columns, one row per (solvable, termination)."""
    metrics = ["moves", "expanded", "generated", "duplicates", "peak_closed", "time_sec"]
    out = (df.groupby(["solvable", "termination"])[metrics]
             .agg(["mean", "median", "max"]))
    out.insert(0, ("instances", "count"), df.groupby(["solvable", "termination"]).size())
    return out


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Greedy best-first 8-puzzle benchmark (prints a summary, writes nothing)")
    ap.add_argument("--count", type=int, default=50, help="Number of random solvable puzzles")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="fifo")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also search a parity-flipped twin of each puzzle")
    ap.add_argument("--show", action="store_true", help="Display a histogram of solution lengths")
    args = ap.parse_args(argv)

    insts = make_instances(args.count, args.seed)
    print(f"Running GBFS ({args.heuristic}, tie_break={args.tie_break}) on {len(insts)} instances")
    df = run(insts, args.heuristic, args.tie_break, args.include_unsolvable)

    with pd.option_context("display.width", 160, "display.max_columns", None):
        print(summarize(df))

    if args.show:
        import matplotlib.pyplot as plt
        from greedy8.experiments.visualize_path import moves_histogram
        moves_histogram(df)
        plt.show()
    return df


if __name__ == "__main__":
    main()
