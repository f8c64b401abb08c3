"""End-to-end runs through solve()."""

import random

import pytest

from sudoku import STRATEGIES, is_valid_solution, preserves_clues, solve
from sudoku_csp import SearchLimitExceeded
from sudoku_puzzles import CLASSIC, EASY, MINIMAL_17, PUZZLES, get_puzzle

MINIMAL_17_SOLUTION = [
    [6, 9, 3, 7, 8, 4, 5, 1, 2],
    [4, 8, 7, 5, 1, 2, 9, 3, 6],
    [1, 2, 5, 9, 6, 3, 8, 7, 4],
    [9, 3, 2, 6, 5, 1, 4, 8, 7],
    [5, 6, 8, 2, 4, 7, 3, 9, 1],
    [7, 4, 1, 3, 9, 8, 6, 2, 5],
    [3, 1, 9, 4, 7, 5, 2, 6, 8],
    [8, 5, 6, 1, 2, 9, 7, 4, 3],
    [2, 7, 4, 8, 3, 6, 1, 5, 9],
]


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_every_strategy_solves_easy_board(strategy):
    result = solve(EASY, strategy=strategy, randomize=False)
    assert result.solved
    assert result.strategy == strategy
    assert is_valid_solution(result.grid)
    assert preserves_clues(EASY, result.grid)
    assert result.elapsed >= 0


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_every_strategy_reports_dead_end_unsolvable(strategy, dead_end_board):
    result = solve(dead_end_board, strategy=strategy, randomize=False)
    assert not result.solved
    assert result.grid is None


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_complete_board_needs_no_assignments(strategy, classic_solution):
    result = solve(classic_solution, strategy=strategy)
    assert result.solved
    assert result.grid == classic_solution
    assert result.nodes == 1
    assert result.backtracks == 0


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_one_blank_costs_one_node(strategy, classic_solution):
    puzzle = [row[:] for row in classic_solution]
    puzzle[4][4] = 0
    result = solve(puzzle, strategy=strategy, rng=random.Random(0))
    assert result.grid == classic_solution
    assert result.nodes == 2


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_duplicate_clues_are_unsolvable(strategy):
    puzzle = get_puzzle("classic")
    puzzle[0][2] = 5  # second 5 in row 1
    result = solve(puzzle, strategy=strategy)
    assert not result.solved
    assert result.grid is None
    assert result.nodes == 1


def test_minimal_17_clue_board_has_its_unique_solution():
    result = solve(MINIMAL_17, strategy="heuristics", rng=random.Random(17))
    assert result.solved
    assert result.grid == MINIMAL_17_SOLUTION


def test_seeded_runs_are_reproducible():
    first = solve(CLASSIC, strategy="heuristics", rng=random.Random(42))
    second = solve(CLASSIC, strategy="heuristics", rng=random.Random(42))
    assert first.grid == second.grid
    assert first.nodes == second.nodes


def test_solve_leaves_puzzle_untouched():
    puzzle = get_puzzle("classic")
    solve(puzzle, randomize=False)
    assert puzzle == CLASSIC


def test_unknown_strategy():
    with pytest.raises(ValueError):
        solve(CLASSIC, strategy="simulated_annealing")


def test_node_budget():
    with pytest.raises(SearchLimitExceeded):
        solve(CLASSIC, strategy="heuristics", max_nodes=3)


def test_verbose_trace(caplog, classic_solution):
    puzzle = [row[:] for row in classic_solution]
    puzzle[0][0] = 0
    with caplog.at_level("INFO", logger="sudoku"):
        solve(puzzle, strategy="forward_checking", verbose=True)
    assert "ASSIGN (1, 1) = 5" in caplog.text
    assert "solved=True" in caplog.text


def test_invalid_solution_detected(classic_solution):
    assert is_valid_solution(classic_solution)
    classic_solution[0][0], classic_solution[0][1] = classic_solution[0][1], classic_solution[0][0]
    assert not is_valid_solution(classic_solution)
    assert not preserves_clues(CLASSIC, classic_solution)


def test_get_puzzle_returns_copy():
    puzzle = get_puzzle("evil")
    puzzle[0][0] = 9
    assert PUZZLES["evil"][0][0] == 0
    with pytest.raises(ValueError):
        get_puzzle("impossible")
