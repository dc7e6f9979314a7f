#!/usr/bin/env python3
from typing import Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from greedy8.domains.puzzle8 import N

State = Tuple[int, ...]


def draw_board(state: State, ax):
    ax.set_xlim(0, N); ax.set_ylim(0, N)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(N+1):
        ax.plot([0,N],[i,i], linewidth=1, color="black")
        ax.plot([i,i],[0,N], linewidth=1, color="black")
    # tiles
    for idx, t in enumerate(state):
        if t == 0: continue
        r, c = divmod(idx, N)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    return ax


def path_figure(path: Sequence[State], max_cols: int = 6):
    """One panel per board along ``path``, wrapped into rows of ``max_cols``."""
    if not path:
        raise ValueError("path is empty")
    cols = min(max_cols, len(path))
    rows = (len(path) + cols - 1) // cols
    fig, axes = plt.subplots(rows, cols, figsize=(2*cols, 2*rows), squeeze=False)
    for k, ax in enumerate(axes.flat):
        if k < len(path):
            draw_board(path[k], ax)
            ax.set_title(f"step {k}", fontsize=9)
        else:
            ax.axis("off")
    fig.tight_layout()
    return fig


def moves_histogram(df: pd.DataFrame):
    """Histogram of solution lengths for the solved rows of a benchmark frame."""
    solved = df[df["termination"] == "ok"]["moves"].astype(int)
    fig, ax = plt.subplots(figsize=(6, 4))
    if len(solved):
        bins = np.arange(solved.min(), solved.max() + 2) - 0.5
        ax.hist(solved, bins=bins)
    ax.set_xlabel("moves")
    ax.set_ylabel("instances")
    ax.set_title("Greedy best-first solution length")
    fig.tight_layout()
    return fig
