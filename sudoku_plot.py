# sudoku_plot.py
from typing import Optional

import matplotlib.pyplot as plt

from sudoku_csp import Grid

# ----------------------------
# Config
# ----------------------------
FIGURE_SIZE = (6, 6)
GIVEN_COLOR = "#000000"
FILLED_COLOR = "#1f78b4"
GIVEN_FILL = "#eeeeee"

# ----------------------------
# Visualization helper (optional)
# ----------------------------
def plot_grid(grid: Grid, puzzle: Optional[Grid] = None, out_png: str = "sudoku_solution.png",
              title: str = "Sudoku (CSP solver)") -> str:
    """
    Draw a 9x9 board to a PNG. Cells given in `puzzle` are shaded and drawn in bold black,
    cells filled by the solver in blue. Blank cells (0) are left empty.
    Returns the path written.
    """
    fig, ax = plt.subplots(1, 1, figsize=FIGURE_SIZE)

    for row in range(9):
        for column in range(9):
            is_given = puzzle is not None and puzzle[row][column] != 0
            if is_given:
                ax.add_patch(plt.Rectangle((column, 8 - row), 1, 1, color=GIVEN_FILL))
            value = grid[row][column]
            if value == 0:
                continue
            ax.text(
                column + 0.5, 8 - row + 0.5, str(value),
                ha="center", va="center", fontsize=16,
                color=GIVEN_COLOR if is_given or puzzle is None else FILLED_COLOR,
                fontweight="bold" if is_given else "normal",
            )

    # thin cell lines, thick region lines
    for index in range(10):
        linewidth = 2.0 if index % 3 == 0 else 0.5
        ax.plot([0, 9], [index, index], color="black", linewidth=linewidth)
        ax.plot([index, index], [0, 9], color="black", linewidth=linewidth)

    ax.set_xlim(0, 9)
    ax.set_ylim(0, 9)
    ax.set_aspect("equal")
    ax.set_axis_off()
    plt.title(title)
    plt.tight_layout()
    fig.savefig(out_png, dpi=200)
    print("Saved board to", out_png)
    plt.close(fig)
    return out_png
