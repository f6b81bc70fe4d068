"""Data models for word squares and their validation."""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field


Grid = List[List[str]]
Cell = Tuple[int, int]


class LengthMismatch(ValueError):
    """Raised when words or grids that must share a length do not."""

    def __init__(self, message: str, expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class Square(BaseModel):
    """An accepted word square: the grid plus its row words in order."""
    grid: Grid
    words: List[str]

    @property
    def size(self) -> int:
        return len(self.grid)

    @property
    def rows(self) -> List[str]:
        return [''.join(row) for row in self.grid]

    @property
    def columns(self) -> List[str]:
        return [''.join(row[j] for row in self.grid) for j in range(len(self.grid))]

    def render(self) -> str:
        """Render the grid as newline-separated rows."""
        return '\n'.join(self.rows)


class ValidationError(BaseModel):
    """A single rule violation found in a grid."""
    code: str
    message: str
    word: Optional[str] = None
    cells: List[Cell] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Result of structured grid validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    grid: Optional[str] = None

    def codes(self) -> List[str]:
        return [e.code for e in self.errors]
