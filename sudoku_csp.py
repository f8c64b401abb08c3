# sudoku_csp.py
from typing import Dict, FrozenSet, List, Optional, Set, Tuple
from dataclasses import dataclass
import logging
import random

# ----------------------------
# Types
# ----------------------------
Cell = int                    # cell id, 1..81 in row-major order
Coordinate = Tuple[int, int]  # (row, column), both 1..9
Grid = List[List[int]]
Assignment = Dict[Cell, int]
Domains = Dict[Cell, List[int]]

VALUES: List[int] = list(range(1, 10))
ALL_CELLS: List[Cell] = list(range(1, 82))

# ----------------------------
# Logging
# ----------------------------
LOGGER_NAME = "sudoku"

def get_logger() -> logging.Logger:
    """Return the shared solver logger, attaching a console handler at INFO on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] [%(name)s] %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger

logger = get_logger()

# ----------------------------
# Board model: cell ids <-> coordinates, constraint groups
# ----------------------------

def cell_to_coord(cell: Cell) -> Coordinate:
    """Return (row, column) of a cell id. Column is 9 when the id is a multiple of 9."""
    if cell % 9 == 0:
        return cell // 9, 9
    return cell // 9 + 1, cell % 9

def coord_to_cell(row: int, column: int) -> Cell:
    """Return the cell id for a 1-based (row, column)."""
    return (row - 1) * 9 + column

def row_cells(row: int) -> List[Cell]:
    return [coord_to_cell(row, column) for column in range(1, 10)]

def column_cells(column: int) -> List[Cell]:
    return [coord_to_cell(row, column) for row in range(1, 10)]

def region_cells(row: int, column: int) -> List[Cell]:
    """Return the 9 cells of the 3x3 region containing (row, column)."""
    region_row, region_column = (row - 1) // 3, (column - 1) // 3
    return [
        coord_to_cell(3 * region_row + row_offset, 3 * region_column + column_offset)
        for row_offset in range(1, 4)
        for column_offset in range(1, 4)
    ]

def constraint_groups(cell: Cell) -> List[List[Cell]]:
    """Return the row, column and region groups a cell belongs to."""
    row, column = cell_to_coord(cell)
    return [row_cells(row), column_cells(column), region_cells(row, column)]

def _build_peers() -> Dict[Cell, FrozenSet[Cell]]:
    peers: Dict[Cell, FrozenSet[Cell]] = {}
    for cell in ALL_CELLS:
        members: Set[Cell] = set()
        for group in constraint_groups(cell):
            members.update(group)
        members.discard(cell)
        peers[cell] = frozenset(members)
    return peers

PEERS: Dict[Cell, FrozenSet[Cell]] = _build_peers()

def peers_of(cell: Cell) -> FrozenSet[Cell]:
    """Return the 20 cells that share a row, column, or 3x3 region with cell (excluding cell)."""
    return PEERS[cell]

# ----------------------------
# CSP components: constraint, domains, neighbours
# ----------------------------

def is_consistent(assignment: Assignment, cell: Cell, value: int) -> bool:
    """Check row, column and region constraints. The cell's own entry is never consulted."""
    for peer in PEERS[cell]:
        if assignment.get(peer) == value:
            return False
    return True

def compute_domains(unassigned, assignment: Assignment) -> Domains:
    """
    Build the current domain of every cell in `unassigned`:
    the values 1..9 (ascending) that pass is_consistent against `assignment`.
    The result is a snapshot; later assignments do not update it.
    """
    domains: Domains = {}
    for cell in unassigned:
        used_values = {assignment[peer] for peer in PEERS[cell] if peer in assignment}
        domains[cell] = [value for value in VALUES if value not in used_values]
    return domains

def affected_unassigned(unassigned, assignment: Assignment, cell: Cell) -> Set[Cell]:
    """Return the peers of cell that are not assigned yet."""
    return {peer for peer in PEERS[cell] if peer not in assignment}

def degree(unassigned, assignment: Assignment, cell: Cell) -> int:
    """Number of unassigned constraint neighbours of cell."""
    return len(affected_unassigned(unassigned, assignment, cell))

# ----------------------------
# Board I/O
# ----------------------------

def read_initial_board(grid: Grid) -> Tuple[Assignment, List[Cell]]:
    """
    Split a 9x9 grid (0 = blank) into the clue assignment and the queue of unassigned cells.
    The queue is in ascending cell order.
    """
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("Sudoku board must be 9 rows of 9 cells")

    assignment: Assignment = {}
    unassigned: List[Cell] = []
    for row_index, row in enumerate(grid, start=1):
        for column_index, value in enumerate(row, start=1):
            if not isinstance(value, int) or not 0 <= value <= 9:
                raise ValueError(f"Invalid value {value!r} at row {row_index}, column {column_index}")
            cell = coord_to_cell(row_index, column_index)
            if value != 0:
                assignment[cell] = value
            else:
                unassigned.append(cell)
    return assignment, unassigned

def assignment_to_grid(assignment: Assignment) -> Grid:
    """Map every cell back to its (row, column); cells without a value become 0."""
    grid: Grid = [[0] * 9 for _ in range(9)]
    for cell, value in assignment.items():
        row, column = cell_to_coord(cell)
        grid[row - 1][column - 1] = value
    return grid

def clues_consistent(assignment: Assignment) -> bool:
    """True when no two given clues clash in a row, column or region."""
    return all(is_consistent(assignment, cell, value) for cell, value in assignment.items())

# ----------------------------
# Search bookkeeping
# ----------------------------

class SearchLimitExceeded(RuntimeError):
    """Raised when a search makes more tentative assignments than its node budget allows."""

@dataclass
class SearchStats:
    """
    Counters for one search run.

    nodes starts at 1 (the root) and grows by one per tentative assignment.
    backtracks counts undone assignments.
    max_nodes, when set, is a budget on nodes.
    """
    nodes: int = 1
    backtracks: int = 0
    max_nodes: Optional[int] = None

    def count_node(self):
        self.nodes += 1
        if self.max_nodes is not None and self.nodes > self.max_nodes:
            raise SearchLimitExceeded(f"search exceeded {self.max_nodes} nodes")

# ----------------------------
# CSP Backtracking Solver (plain)
# ----------------------------

def backtrack_solve(unassigned: List[Cell], assignment: Assignment, stats: SearchStats,
                    rng: Optional[random.Random] = None, verbose: bool = False) -> Optional[Assignment]:
    """
    Plain backtracking: take the cell at the front of the queue and try 1..9
    (shuffled when rng is given), keeping the first consistent value whose subtree succeeds.
    On failure the cell goes back to the front of the queue and out of the assignment.
    """
    if len(assignment) == 81:
        return assignment  # solved

    variable = unassigned.pop(0)
    values = list(VALUES)
    if rng is not None:
        rng.shuffle(values)

    if verbose:
        logger.info("Selecting variable: %s, domain = %s", cell_to_coord(variable), values)

    solved = False
    try:
        for value in values:
            if not is_consistent(assignment, variable, value):
                continue

            # assign
            assignment[variable] = value
            stats.count_node()
            if verbose:
                logger.info("  ASSIGN %s = %d", cell_to_coord(variable), value)

            if backtrack_solve(unassigned, assignment, stats, rng, verbose) is not None:
                solved = True
                return assignment

            # undo
            if verbose:
                logger.info("  UNASSIGN %s (backtracking)", cell_to_coord(variable))
            del assignment[variable]
            stats.backtracks += 1
    finally:
        if not solved:
            assignment.pop(variable, None)
            unassigned.insert(0, variable)

    return None

# ----------------------------
# Print Sudoku
# ----------------------------
def print_grid(grid: Grid):
    for row_index in range(9):
        row_str = ""
        for column_index in range(9):
            val = grid[row_index][column_index]
            row_str += str(val) if val != 0 else "."
            if column_index in (2, 5):
                row_str += " | "
            else:
                row_str += " "
        print(row_str)
        if row_index in (2, 5):
            print("-" * 21)
    print()
