"""Wordle-style letter feedback for words and grids."""

from .models import (
    FeedbackStatus,
    FeedbackCell,
    GridFeedbackCell,
    FeedbackStats,
    FeedbackSummary,
    AttemptResult,
    GridCheckResult,
)
from .word import (
    check_word,
    is_correct,
    summarize,
    check_multiple,
    generate_hint,
    similarity,
    validate_comparison,
)
from .grid import check_grid, grade_grid

__all__ = [
    "FeedbackStatus",
    "FeedbackCell",
    "GridFeedbackCell",
    "FeedbackStats",
    "FeedbackSummary",
    "AttemptResult",
    "GridCheckResult",
    # Word mode
    "check_word",
    "is_correct",
    "summarize",
    "check_multiple",
    "generate_hint",
    "similarity",
    "validate_comparison",
    # Grid mode
    "check_grid",
    "grade_grid",
]
