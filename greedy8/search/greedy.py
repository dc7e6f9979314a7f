from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Set, Tuple, Union
import heapq
import itertools
from time import perf_counter

from greedy8.domains.puzzle8 import Board, State, move_between
from greedy8.heuristics.manhattan import manhattan

TIE_BREAKS = ("fifo", "lifo")


@dataclass
class PQItem:
    h: int
    board: Board
    parent: Optional["PQItem"] = None


def reconstruct_path(node: Optional[PQItem]) -> List[State]:
    path: List[State] = []
    while node is not None:
        path.append(node.board.tiles)
        node = node.parent
    path.reverse()
    return path


def path_is_legal(path: Sequence[State]) -> bool:
    """True if every consecutive pair differs by exactly one blank slide."""
    return all(move_between(a, b) is not None for a, b in zip(path, path[1:]))


def move_names(path: Sequence[State]) -> List[str]:
    """Direction letters (U/D/L/R) of the blank for each step of ``path``."""
    out: List[str] = []
    for a, b in zip(path, path[1:]):
        m = move_between(a, b)
        if m is None:
            raise ValueError(f"Not a single slide: {a} -> {b}")
        out.append(m)
    return out


def greedy_best_first(
    start: Union[Board, State],
    hfun: Callable[[State], int] = manhattan,
    tie_break: str = "fifo",
):
    """
    Greedy best-first search: always expands the open node with the lowest h.
    Path cost is ignored, so the returned path is not guaranteed shortest.

    Boards are marked closed when popped; children already closed are never
    pushed, and stale duplicates still on the heap are skipped when popped.
    Returns a dict in the same shape for success ("ok") and exhaustion.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
    if not isinstance(start, Board):
        start = Board.from_state(start)
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, int], int, PQItem]] = []
    counter = itertools.count()

    def priority_tuple(h: int, ctr: int) -> Tuple[int, int]:
        if tie_break == "lifo": return (h, -ctr)
        return (h, ctr)

    h0 = hfun(start.tiles)
    heapq.heappush(open_heap, (priority_tuple(h0, next(counter)), next(counter), PQItem(h=h0, board=start)))

    closed: Set[int] = set()

    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1

    def result(node: Optional[PQItem], termination: str):
        path = reconstruct_path(node) if node is not None else None
        return {
            "path": path,
            "moves": len(path) - 1 if path is not None else None,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "peak_closed": len(closed),
            "time": perf_counter() - t0,
            "algorithm": "GBFS",
            "tie_break": tie_break,
            "termination": termination,
        }

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)
        key = node.board.key
        if key in closed:
            duplicates += 1
            continue
        closed.add(key)

        if node.board.is_goal():
            return result(node, "ok")

        expanded += 1
        for child in node.board.neighbors():
            if child.key in closed:
                continue
            h2 = hfun(child.tiles)
            generated += 1
            heapq.heappush(open_heap, (priority_tuple(h2, next(counter)), next(counter), PQItem(h=h2, board=child, parent=node)))

    # Open exhausted without finding goal
    return result(None, "exhausted")
