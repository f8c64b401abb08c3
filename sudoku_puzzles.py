# sudoku_puzzles.py
from typing import Dict

from sudoku_csp import Grid

# ----------------------------
# Example boards (0 = blank)
# ----------------------------

EASY: Grid = [
    [0, 6, 1, 0, 0, 0, 0, 5, 2],
    [8, 0, 0, 0, 0, 0, 0, 0, 1],
    [7, 0, 0, 5, 0, 0, 4, 0, 0],
    [9, 0, 3, 6, 0, 2, 0, 4, 7],
    [0, 0, 6, 7, 0, 1, 5, 0, 0],
    [5, 7, 0, 9, 0, 3, 2, 0, 6],
    [0, 0, 4, 0, 0, 9, 0, 0, 5],
    [1, 0, 0, 0, 0, 0, 0, 0, 8],
    [6, 2, 0, 0, 0, 0, 9, 3, 0],
]

MEDIUM: Grid = [
    [5, 0, 0, 6, 1, 0, 0, 0, 0],
    [0, 2, 0, 4, 5, 7, 8, 0, 0],
    [1, 0, 0, 0, 0, 0, 5, 0, 3],
    [0, 0, 0, 0, 2, 1, 0, 0, 0],
    [4, 0, 0, 0, 0, 0, 0, 0, 6],
    [0, 0, 0, 3, 6, 0, 0, 0, 0],
    [9, 0, 3, 0, 0, 0, 0, 0, 2],
    [0, 0, 6, 7, 3, 9, 0, 8, 0],
    [0, 0, 0, 0, 8, 6, 0, 0, 5],
]

HARD: Grid = [
    [0, 4, 0, 0, 2, 5, 9, 0, 0],
    [0, 0, 0, 0, 3, 9, 4, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 6, 1],
    [0, 1, 7, 0, 0, 0, 0, 0, 0],
    [6, 0, 0, 7, 5, 4, 0, 0, 9],
    [0, 0, 0, 0, 0, 0, 7, 3, 0],
    [4, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 9, 0, 5, 4, 0, 0, 0, 0],
    [0, 0, 8, 9, 6, 0, 0, 5, 0],
]

EVIL: Grid = [
    [0, 6, 0, 8, 2, 0, 0, 0, 0],
    [0, 0, 2, 0, 0, 0, 8, 0, 1],
    [0, 0, 0, 7, 0, 0, 0, 5, 0],
    [4, 0, 0, 5, 0, 0, 0, 0, 6],
    [0, 9, 0, 6, 0, 7, 0, 3, 0],
    [2, 0, 0, 0, 0, 1, 0, 0, 7],
    [0, 2, 0, 0, 0, 9, 0, 0, 0],
    [8, 0, 4, 0, 0, 0, 7, 0, 0],
    [0, 0, 0, 0, 4, 8, 0, 2, 0],
]

CLASSIC: Grid = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],

    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],

    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

# 17 clues, the minimum for a uniquely solvable board
MINIMAL_17: Grid = [
    [0, 0, 0, 0, 0, 0, 0, 1, 0],
    [4, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 5, 0, 4, 0, 7],
    [0, 0, 8, 0, 0, 0, 3, 0, 0],
    [0, 0, 1, 0, 9, 0, 0, 0, 0],
    [3, 0, 0, 4, 0, 0, 2, 0, 0],
    [0, 5, 0, 1, 0, 0, 0, 0, 0],
    [0, 0, 0, 8, 0, 6, 0, 0, 0],
]

PUZZLES: Dict[str, Grid] = {
    "easy": EASY,
    "medium": MEDIUM,
    "hard": HARD,
    "evil": EVIL,
    "classic": CLASSIC,
    "minimal17": MINIMAL_17,
}

def get_puzzle(name: str) -> Grid:
    """Return a fresh copy of a named board."""
    if name not in PUZZLES:
        raise ValueError(f"Unknown puzzle {name!r}. Available: " + ", ".join(sorted(PUZZLES)))
    return [row[:] for row in PUZZLES[name]]
