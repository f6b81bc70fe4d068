"""Symmetric word square search and validation."""

from .models import Square, ValidationError, ValidationResult, LengthMismatch
from .words import WordSet, normalize_word, fold_letters, char_length, get_direction, load_word_list
from .index import WordIndex
from .grid import build_grid, render_grid, row_words, column_words, is_symmetric
from .validate import is_valid_square, validate_grid, validate_square
from .search import SquareSearcher, SearchOrder, SearchEvent, find_squares, fits_prefix

__all__ = [
    # Models
    "Square",
    "ValidationError",
    "ValidationResult",
    "LengthMismatch",
    # Words
    "WordSet",
    "normalize_word",
    "fold_letters",
    "char_length",
    "get_direction",
    "load_word_list",
    "WordIndex",
    # Grid utilities
    "build_grid",
    "render_grid",
    "row_words",
    "column_words",
    "is_symmetric",
    # Validation
    "is_valid_square",
    "validate_grid",
    "validate_square",
    # Search
    "SquareSearcher",
    "SearchOrder",
    "SearchEvent",
    "find_squares",
    "fits_prefix",
]
