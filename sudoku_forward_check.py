# sudoku_forward_check.py
from typing import List, Optional
import random

from sudoku_csp import (
    Assignment,
    Cell,
    SearchStats,
    affected_unassigned,
    cell_to_coord,
    compute_domains,
    is_consistent,
    logger,
)

# ----------------------------
# Forward checking
# ----------------------------
def forward_check(unassigned: List[Cell], assignment: Assignment, assign_variable: Cell) -> bool:
    """
    Look ahead after assign_variable has been given a value in `assignment`.
    Recompute the domains of its unassigned neighbours and return False if any is empty.
    Nothing is pruned in place, so there is nothing to undo on backtrack.
    """
    affected = affected_unassigned(unassigned, assignment, assign_variable)
    domains = compute_domains(affected, assignment)
    for peer_variable in affected:
        if not domains[peer_variable]:
            # domain wiped out -> failure
            return False
    return True

# ----------------------------
# CSP Backtracking Solver (with forward checking only)
# ----------------------------

def backtrack_solve(unassigned: List[Cell], assignment: Assignment, stats: SearchStats,
                    rng: Optional[random.Random] = None, verbose: bool = False) -> Optional[Assignment]:
    """
    Backtracking solver that uses forward checking.
    Variable order is the queue order; values come from the cell's current domain
    (shuffled when rng is given) and an assignment is only explored if forward_check passes.
    """
    if len(assignment) == 81:
        return assignment  # solved

    domains = compute_domains(unassigned, assignment)
    variable = unassigned.pop(0)

    domain_values = domains[variable]
    if rng is not None:
        rng.shuffle(domain_values)

    if verbose:
        logger.info("Selecting variable: %s, domain = %s", cell_to_coord(variable), domain_values)

    solved = False
    try:
        for value in domain_values:
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
            elif verbose:
                logger.info("  forward check failed for %s = %d", cell_to_coord(variable), value)

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
