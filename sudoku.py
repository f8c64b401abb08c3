# sudoku.py
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass
import random
import time

import sudoku_csp
import sudoku_forward_check
from sudoku_csp import (
    Assignment,
    Cell,
    Domains,
    Grid,
    SearchStats,
    affected_unassigned,
    assignment_to_grid,
    cell_to_coord,
    clues_consistent,
    column_cells,
    compute_domains,
    degree,
    is_consistent,
    logger,
    print_grid,
    read_initial_board,
    region_cells,
    row_cells,
)
from sudoku_forward_check import forward_check

# ----------------------------
# Config
# ----------------------------
DEFAULT_STRATEGY = "heuristics"
DEFAULT_PUZZLE = "evil"
MAX_SEARCH_NODES: Optional[int] = None   # no budget by default
OUTPUT_PNG = "sudoku_solution.png"

# ----------------------------
# MRV selection with degree tie-break
# ----------------------------
def select_unassigned_variable(unassigned: List[Cell], assignment: Assignment, domains: Domains) -> Optional[Cell]:
    """
    Find next unassigned variable using MRV:
    choose the cell with the fewest legal values (according to domains).
    Ties go to the cell with more unassigned neighbours (degree), then to queue order.
    """
    best_variable: Optional[Cell] = None
    best_domain_size = 10  # larger than max domain size 9

    for variable in unassigned:
        domain_size = len(domains[variable])
        if domain_size < best_domain_size:
            best_domain_size = domain_size
            best_variable = variable
        elif domain_size == best_domain_size:
            # prefer the most constraining variable
            if degree(unassigned, assignment, variable) > degree(unassigned, assignment, best_variable):
                best_variable = variable

    return best_variable

# ----------------------------
# LCV value ordering
# ----------------------------
def order_domain_values(unassigned: List[Cell], assignment: Assignment, domains: Domains, variable: Cell) -> List[int]:
    """
    Order the domain of variable by least constraining value: a value's cost is the number
    of unassigned neighbours whose domain still contains it. The sort is stable, so equal
    costs keep the domain order.
    """
    affected = affected_unassigned(unassigned, assignment, variable)
    ruled_out: Dict[int, int] = {}
    for value in domains[variable]:
        ruled_out[value] = sum(1 for peer in affected if value in domains.get(peer, []))
    return sorted(domains[variable], key=lambda value: ruled_out[value])

# ----------------------------
# CSP Backtracking Solver (MRV + Degree + LCV + Forward Checking)
# ----------------------------
def backtrack_solve(unassigned: List[Cell], assignment: Assignment, stats: SearchStats,
                    rng: Optional[random.Random] = None, verbose: bool = False) -> Optional[Assignment]:
    """
    Backtracking solver that uses MRV + degree for selection, LCV for value order and
    forward checking for pruning. Ordering is fully heuristic, so rng is not consulted here;
    randomness only enters through the initial queue order.
    The selected cell is taken out of its queue position and put back there on failure.
    """
    if len(assignment) == 81:
        return assignment  # solved

    domains = compute_domains(unassigned, assignment)
    variable = select_unassigned_variable(unassigned, assignment, domains)
    position = unassigned.index(variable)
    del unassigned[position]

    ordered_values = order_domain_values(unassigned, assignment, domains, variable)

    if verbose:
        logger.info("Selecting variable: %s, domain = %s", cell_to_coord(variable), ordered_values)

    solved = False
    try:
        for value in ordered_values:
            if not is_consistent(assignment, variable, value):
                continue

            # assign
            assignment[variable] = value
            stats.count_node()
            if verbose:
                logger.info("  ASSIGN %s = %d", cell_to_coord(variable), value)

            if forward_check(unassigned, assignment, variable):
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
            unassigned.insert(position, variable)

    return None

# ----------------------------
# Driver
# ----------------------------
SearchFunction = Callable[..., Optional[Assignment]]

STRATEGIES: Dict[str, SearchFunction] = {
    "backtracking": sudoku_csp.backtrack_solve,
    "forward_checking": sudoku_forward_check.backtrack_solve,
    "heuristics": backtrack_solve,
}

@dataclass
class SolveResult:
    """Outcome of one solve() call. grid is None when the board has no solution."""
    solved: bool
    grid: Optional[Grid]
    strategy: str
    nodes: int
    backtracks: int
    elapsed: float

def solve(puzzle: Grid, strategy: str = DEFAULT_STRATEGY, rng: Optional[random.Random] = None,
          randomize: bool = True, max_nodes: Optional[int] = MAX_SEARCH_NODES,
          verbose: bool = False) -> SolveResult:
    """
    Solve a 9x9 board (0 = blank) with one of the STRATEGIES.

    With randomize=True the unassigned queue (and, for the plain and forward checking
    variants, each value list) is shuffled with rng, or with a fresh random.Random()
    if none is given. With randomize=False the run is deterministic.
    Boards whose clues already clash are reported unsolvable without searching.
    Raises ValueError for a malformed board or an unknown strategy, and
    SearchLimitExceeded when max_nodes is set and exhausted.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy {strategy!r}. Choose from: " + ", ".join(STRATEGIES))

    assignment, unassigned = read_initial_board(puzzle)
    stats = SearchStats(max_nodes=max_nodes)

    if randomize:
        rng = rng if rng is not None else random.Random()
        rng.shuffle(unassigned)
    else:
        rng = None

    start_time = time.perf_counter()
    if clues_consistent(assignment):
        solution = STRATEGIES[strategy](unassigned, assignment, stats, rng, verbose)
    else:
        logger.warning("Given clues violate a row, column or region constraint")
        solution = None
    elapsed_time = time.perf_counter() - start_time

    logger.info(
        "strategy=%s solved=%s nodes=%d backtracks=%d time=%.4fs",
        strategy, solution is not None, stats.nodes, stats.backtracks, elapsed_time,
    )
    return SolveResult(
        solved=solution is not None,
        grid=assignment_to_grid(solution) if solution is not None else None,
        strategy=strategy,
        nodes=stats.nodes,
        backtracks=stats.backtracks,
        elapsed=elapsed_time,
    )

# ----------------------------
# Solution checks
# ----------------------------
def is_valid_solution(grid: Grid) -> bool:
    """True when every row, column and region holds exactly the digits 1..9."""
    values = {sudoku_csp.coord_to_cell(row + 1, column + 1): grid[row][column]
              for row in range(9) for column in range(9)}
    groups = [row_cells(index) for index in range(1, 10)]
    groups += [column_cells(index) for index in range(1, 10)]
    groups += [region_cells(row, column) for row in (1, 4, 7) for column in (1, 4, 7)]
    return all({values[cell] for cell in group} == set(range(1, 10)) for group in groups)

def preserves_clues(puzzle: Grid, grid: Grid) -> bool:
    """True when every non-zero cell of puzzle has the same value in grid."""
    return all(
        grid[row][column] == puzzle[row][column]
        for row in range(9)
        for column in range(9)
        if puzzle[row][column] != 0
    )

# ----------------------------
# Example Puzzle
# ----------------------------
if __name__ == "__main__":
    from sudoku_puzzles import get_puzzle
    from sudoku_plot import plot_grid

    puzzle = get_puzzle(DEFAULT_PUZZLE)

    print(f"=== Given puzzle ({DEFAULT_PUZZLE}) ===")
    print_grid(puzzle)

    result = solve(puzzle, strategy=DEFAULT_STRATEGY)

    if result.solved:
        print(f"=== Solved puzzle ({result.strategy}) ===")
        print_grid(result.grid)

        # optional: save PNG
        try:
            plot_grid(result.grid, puzzle=puzzle, out_png=OUTPUT_PNG)
        except Exception as plot_exc:
            print("Plotting failed:", plot_exc)
    else:
        print("No solution found.")

    print(f"Assignments: {result.nodes}, Backtracks: {result.backtracks}, Time: {result.elapsed:.4f}s")
