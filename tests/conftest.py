# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# render without a display
os.environ.setdefault("MPLBACKEND", "Agg")

# Add project root to sys.path so the sudoku modules can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def dead_end_board():
    """
    Classic solution with r1c1, r1c2, r7c1 and r9c9 blanked and r9c1 changed to 9.
    The clues do not clash, but r7c1 and r9c9 have no legal value, and r1c1/r1c2
    still admit assignments before the dead end is reached.
    """
    grid = [row[:] for row in CLASSIC_SOLUTION]
    grid[0][0] = 0
    grid[0][1] = 0
    grid[6][0] = 0
    grid[8][8] = 0
    grid[8][0] = 9
    return grid
