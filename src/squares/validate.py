"""
Word square validation.

Two forms of the same four rules:
1. Symmetry (grid[i][j] == grid[j][i])
2. Row membership (every row is a word in the word set)
3. Uniqueness (row words are pairwise distinct)
4. Column membership (every column is a word in the word set)

`is_valid_square` is the short-circuiting boolean used by the search.
`validate_grid` and `validate_square` run every check and collect all
violations, for grids that come from outside the search (e.g. an editor).
"""

from typing import Container, Dict, Iterable, List, Optional, Tuple

from .models import Grid, Square, ValidationError, ValidationResult
from .grid import asymmetric_cells, is_square_shape, is_symmetric, render_grid, row_words, column_words


def is_valid_square(grid: Grid, word_set: Container[str]) -> bool:
    """True if the grid is a symmetric square of distinct words from `word_set`."""
    if not is_square_shape(grid):
        return False

    if not is_symmetric(grid):
        return False

    rows = row_words(grid)
    for word in rows:
        if word not in word_set:
            return False

    if len(set(rows)) != len(rows):
        return False

    # Implied by symmetry and row membership, checked anyway
    for word in column_words(grid):
        if word not in word_set:
            return False

    return True


def validate_shape(grid: Grid, size: int) -> List[ValidationError]:
    """Check the grid is size x size with one character per cell."""
    errors: List[ValidationError] = []

    if not isinstance(grid, (list, tuple)):
        return [ValidationError(
            code="GRID_SHAPE",
            message=f"Grid must be a list of rows (found {type(grid).__name__})",
        )]

    if len(grid) != size:
        errors.append(ValidationError(
            code="GRID_SHAPE",
            message=f"Grid must have {size} rows (found {len(grid)})",
        ))

    for i, row in enumerate(grid):
        if not isinstance(row, (list, tuple)):
            errors.append(ValidationError(
                code="GRID_SHAPE",
                message=f"Row {i} must be a list of characters (found {type(row).__name__})",
            ))
            continue
        if len(row) != size:
            errors.append(ValidationError(
                code="GRID_SHAPE",
                message=f"Row {i} must have {size} characters (found {len(row)})",
                cells=[(i, j) for j in range(len(row))],
            ))
            continue
        for j, cell in enumerate(row):
            if not isinstance(cell, str) or len(cell) != 1:
                errors.append(ValidationError(
                    code="GRID_SHAPE",
                    message=f"Cell [{i}][{j}] must hold exactly one character (found {cell!r})",
                    cells=[(i, j)],
                ))

    return errors


def validate_symmetry(grid: Grid) -> List[ValidationError]:
    """One error per mirrored cell pair that disagrees."""
    return [
        ValidationError(
            code="NOT_SYMMETRIC",
            message=f"Grid is not symmetric at [{i}][{j}]: '{grid[i][j]}' vs '{grid[j][i]}'",
            cells=[(i, j), (j, i)],
        )
        for i, j in asymmetric_cells(grid)
    ]


def validate_uniqueness(indexed_words: Iterable[Tuple[int, str]], what: str = "row") -> List[ValidationError]:
    """
    One error per word that appears more than once, naming every position.

    Takes (position, word) pairs so that skipped rows keep the numbering
    of the grid they came from.
    """
    positions: Dict[str, List[int]] = {}
    for i, word in indexed_words:
        positions.setdefault(word, []).append(i)

    errors: List[ValidationError] = []
    for word, indexes in positions.items():
        if len(indexes) < 2:
            continue
        joined = " and ".join(str(i) for i in indexes)
        errors.append(ValidationError(
            code="DUPLICATE_WORD",
            message=f"Word '{word}' is repeated in {what}s {joined}; all words must be unique",
            word=word,
            cells=[(i, j) for i in indexes for j in range(len(word))],
        ))
    return errors


def validate_membership(grid: Grid, word_set: Container[str], size: int) -> List[ValidationError]:
    """Check every complete row and column against the word set."""
    errors: List[ValidationError] = []

    for i, row in enumerate(grid):
        if len(row) != size:
            continue
        word = ''.join(row)
        if word not in word_set:
            errors.append(ValidationError(
                code="ROW_NOT_IN_WORDSET",
                message=f"Row {i} '{word}' is not in the word list",
                word=word,
                cells=[(i, j) for j in range(size)],
            ))

    if len(grid) != size:
        return errors

    for j in range(size):
        if any(len(row) <= j for row in grid):
            continue
        word = ''.join(row[j] for row in grid)
        if word not in word_set:
            errors.append(ValidationError(
                code="COLUMN_NOT_IN_WORDSET",
                message=f"Column {j} '{word}' is not in the word list",
                word=word,
                cells=[(i, j) for i in range(size)],
            ))

    return errors


def validate_grid(grid: Grid, word_set: Container[str], size: Optional[int] = None) -> ValidationResult:
    """
    Run all square checks on a grid without stopping at the first failure.

    Never raises: malformed grids are reported as GRID_SHAPE errors and
    the remaining checks skip cells they cannot read.

    Args:
        grid: Rows of single characters
        word_set: Words the rows and columns must belong to
        size: Expected side length (defaults to the word set's length,
            then to the number of rows)

    Returns:
        ValidationResult listing every violation found
    """
    rows = grid if isinstance(grid, (list, tuple)) else []
    if size is None:
        size = getattr(word_set, 'length', None) or len(rows)

    errors: List[ValidationError] = []
    errors.extend(validate_shape(grid, size))

    # Unreadable rows become empty, unreadable cells become ''
    grid = [
        [cell if isinstance(cell, str) else '' for cell in row] if isinstance(row, (list, tuple)) else []
        for row in rows
    ]
    errors.extend(validate_symmetry(grid))

    complete_rows = [(i, ''.join(row)) for i, row in enumerate(grid) if len(row) == size]
    errors.extend(validate_membership(grid, word_set, size))
    errors.extend(validate_uniqueness(complete_rows))

    return ValidationResult(
        valid=not errors,
        errors=errors,
        words=row_words(grid),
        grid=render_grid(grid) if grid else None,
    )


def validate_square(square: Square, word_set: Optional[Container[str]] = None) -> ValidationResult:
    """
    Validate a Square object, e.g. one built in a puzzle editor.

    Checks the grid shape and symmetry, that `words` matches the grid rows
    and that the words are unique. Membership is only checked when a word
    set is supplied.
    """
    size = len(square.words) or len(square.grid)
    errors: List[ValidationError] = []
    errors.extend(validate_shape(square.grid, size))
    errors.extend(validate_symmetry(square.grid))

    for i, word in enumerate(square.words):
        if i >= len(square.grid):
            break
        row = ''.join(square.grid[i])
        if row != word:
            errors.append(ValidationError(
                code="WORDS_MISMATCH",
                message=f"Word {i} '{word}' does not match grid row '{row}'",
                word=word,
                cells=[(i, j) for j in range(len(square.grid[i]))],
            ))

    errors.extend(validate_uniqueness(enumerate(square.words), what="word"))

    if word_set is not None:
        errors.extend(validate_membership(square.grid, word_set, size))

    return ValidationResult(
        valid=not errors,
        errors=errors,
        words=list(square.words),
        grid=render_grid(square.grid) if square.grid else None,
    )
