"""
Grid mode feedback: a whole player grid against the solution grid.

A wrong letter is "wrong-position" when it appears anywhere in the same
row or the same column of the solution. This is a local rule, unlike the
whole-word accounting of word mode.
"""

from typing import List

from ..squares.models import Grid, LengthMismatch
from ..squares.words import normalize_word
from .models import GridFeedbackCell, GridCheckResult


def _normalize_grid(grid: Grid, language: str) -> Grid:
    return [[normalize_word(cell or '', language) for cell in row] for row in grid]


def check_grid(player_grid: Grid, solution_grid: Grid, language: str = 'en') -> List[GridFeedbackCell]:
    """
    Per-cell feedback in row-major order.

    Empty player cells are always incorrect.

    Raises:
        LengthMismatch: If the grids differ in shape
    """
    if len(player_grid) != len(solution_grid):
        raise LengthMismatch(
            f"Player grid has {len(player_grid)} rows, solution has {len(solution_grid)}",
            expected=len(solution_grid),
            actual=len(player_grid),
        )
    for row, (player_row, solution_row) in enumerate(zip(player_grid, solution_grid)):
        if len(player_row) != len(solution_row):
            raise LengthMismatch(
                f"Row {row} has {len(player_row)} cells, solution has {len(solution_row)}",
                expected=len(solution_row),
                actual=len(player_row),
            )

    player = _normalize_grid(player_grid, language)
    solution = _normalize_grid(solution_grid, language)

    cells: List[GridFeedbackCell] = []
    for row, solution_row in enumerate(solution):
        for col, correct_letter in enumerate(solution_row):
            player_letter = player[row][col]

            if player_letter and player_letter == correct_letter:
                status = "correct"
            else:
                row_letters = solution_row
                col_letters = [r[col] for r in solution if col < len(r)]
                if player_letter and (player_letter in row_letters or player_letter in col_letters):
                    status = "wrong-position"
                else:
                    status = "incorrect"

            cells.append(GridFeedbackCell(
                row=row,
                col=col,
                player_letter=player_letter,
                correct_letter=correct_letter,
                status=status,
            ))

    return cells


def grade_grid(player_grid: Grid, solution_grid: Grid, language: str = 'en') -> GridCheckResult:
    """Check a full grid and report whether every cell is correct."""
    cells = check_grid(player_grid, solution_grid, language)
    return GridCheckResult(correct=all(cell.correct for cell in cells), cells=cells)
