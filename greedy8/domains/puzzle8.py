from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union
import random

N = 3
SIZE = N * N

State = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
GOAL: State = (1,2,3,4,5,6,7,8,0)

# Precomputed blank moves on the 3x3 grid: index -> ((target index, letter), ...)
# The letter is the direction the blank travels.
_NEI = {}
for _i in range(SIZE):
    _r, _c = divmod(_i, N)
    _moves = []
    if _r > 0:     _moves.append((_i - N, "U"))
    if _r < N - 1: _moves.append((_i + N, "D"))
    if _c > 0:     _moves.append((_i - 1, "L"))
    if _c < N - 1: _moves.append((_i + 1, "R"))
    _NEI[_i] = tuple(_moves)
del _i, _r, _c, _moves


def pack(s: State) -> int:
    """Canonical key: 4 bits per cell, first cell in the most significant nibble."""
    key = 0
    for t in s:
        key = (key << 4) | t
    return key


def _validate(tiles: Sequence[int]) -> State:
    s = tuple(tiles)
    if len(s) != SIZE:
        raise ValueError(f"Board must have exactly {SIZE} cells, got {len(s)}.")
    if sorted(s) != list(range(SIZE)):
        raise ValueError(f"Board must contain each of 0..{SIZE - 1} exactly once: {s}")
    return s


@dataclass(frozen=True)
class Board:
    """A 3x3 grid plus the index of its blank.

    ``blank`` is derived once when a board is built from outside input and is
    carried along by :meth:`slide` afterwards, so it always matches ``tiles``.
    """
    tiles: State
    blank: int

    @classmethod
    def from_state(cls, tiles: Iterable[int]) -> "Board":
        s = _validate(list(tiles))
        return cls(s, s.index(0))

    @classmethod
    def from_grid(cls, rows: Sequence[Sequence[int]]) -> "Board":
        if len(rows) != N or any(len(r) != N for r in rows):
            raise ValueError(f"Grid must be {N}x{N}.")
        return cls.from_state(v for r in rows for v in r)

    @property
    def blank_pos(self) -> Tuple[int, int]:
        return divmod(self.blank, N)

    @property
    def key(self) -> int:
        return pack(self.tiles)

    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(self.tiles[N*r:N*r+N] for r in range(N))

    def is_goal(self) -> bool:
        return self.tiles == GOAL

    def slide(self, j: int) -> "Board":
        """Move the tile at index ``j`` (adjacent to the blank) into the blank."""
        lst = list(self.tiles)
        lst[self.blank], lst[j] = lst[j], lst[self.blank]
        return Board(tuple(lst), j)

    def neighbors(self) -> List["Board"]:
        """Boards reachable by one blank slide, in U, D, L, R order."""
        return [self.slide(j) for j, _ in _NEI[self.blank]]


def move_between(a: State, b: State) -> Union[str, None]:
    """Letter of the blank move turning ``a`` into ``b``, or None if not one slide apart."""
    z = a.index(0)
    for j, letter in _NEI[z]:
        lst = list(a)
        lst[z], lst[j] = lst[j], lst[z]
        if tuple(lst) == b:
            return letter
    return None


def is_solvable(s: Union[State, Board]) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    if isinstance(s, Board):
        s = s.tiles
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0


def random_board(rng: random.Random) -> Board:
    """Uniformly random permutation of 0..8, row-major. May be unsolvable."""
    tiles = list(range(SIZE))
    rng.shuffle(tiles)
    return Board.from_state(tiles)


def random_solvable_board(rng: random.Random, max_attempts: int = 1000) -> Board:
    """Re-roll :func:`random_board` until the solvability check passes."""
    for _ in range(max_attempts):
        b = random_board(rng)
        if is_solvable(b):
            return b
    raise RuntimeError(f"No solvable board after {max_attempts} attempts. Check solvability logic.")


def make_unsolvable_variant(s: State) -> State:
    """Swap the first two non-blank tiles, flipping inversion parity."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)
