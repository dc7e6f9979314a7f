"""Pytest configuration and fixtures for the greedy8 tests."""

import random

import matplotlib
matplotlib.use("Agg")
import pytest

from greedy8.domains.puzzle8 import GOAL, Board


@pytest.fixture
def goal_board():
    return Board.from_state(GOAL)


@pytest.fixture
def one_slide_board():
    """Goal with the blank swapped up over tile 6."""
    return Board.from_grid([[1, 2, 3], [4, 5, 0], [7, 8, 6]])


@pytest.fixture
def rng():
    return random.Random(1234)
