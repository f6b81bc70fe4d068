"""Grid building and rendering utilities."""

from typing import List, Sequence

from .models import Grid, Cell


def build_grid(words: Sequence[str]) -> Grid:
    """Build a grid whose row i holds the characters of words[i]."""
    return [list(word) for word in words]


def row_words(grid: Grid) -> List[str]:
    """Read every row left to right."""
    return [''.join(row) for row in grid]


def column_words(grid: Grid) -> List[str]:
    """Read every column top to bottom."""
    size = len(grid)
    return [''.join(grid[i][j] for i in range(size)) for j in range(size)]


def is_square_shape(grid: Grid) -> bool:
    """True when the grid has as many rows as each row has cells."""
    size = len(grid)
    return size > 0 and all(len(row) == size for row in grid)


def asymmetric_cells(grid: Grid) -> List[Cell]:
    """
    Cells (i, j) with i < j where grid[i][j] != grid[j][i].

    Each mirrored pair is reported once. Cells outside ragged rows are skipped.
    """
    cells: List[Cell] = []
    size = len(grid)
    for i in range(size):
        for j in range(i + 1, size):
            if j >= len(grid[i]) or i >= len(grid[j]):
                continue
            if grid[i][j] != grid[j][i]:
                cells.append((i, j))
    return cells


def is_symmetric(grid: Grid) -> bool:
    size = len(grid)
    for i in range(size):
        for j in range(size):
            if grid[i][j] != grid[j][i]:
                return False
    return True


def render_grid(grid: Grid) -> str:
    """Render the grid to a string, empty cells as '.'."""
    if not grid:
        return ""

    return '\n'.join(''.join(cell or '.' for cell in row) for row in grid)
