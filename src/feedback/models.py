"""Data models for letter feedback."""

from typing import List, Literal
from pydantic import BaseModel, Field


FeedbackStatus = Literal["correct", "wrong-position", "incorrect"]


class FeedbackCell(BaseModel):
    """Feedback for one letter of a guessed word."""
    position: int
    char: str
    status: FeedbackStatus


class GridFeedbackCell(BaseModel):
    """Feedback for one cell of a player grid."""
    row: int
    col: int
    player_letter: str
    correct_letter: str
    status: FeedbackStatus

    @property
    def correct(self) -> bool:
        return self.status == "correct"


class FeedbackStats(BaseModel):
    """Status counts for one guess."""
    correct_positions: int = 0
    wrong_positions: int = 0
    incorrect: int = 0


class FeedbackSummary(BaseModel):
    """Result of checking a single guess against an answer."""
    correct: bool
    feedback: List[FeedbackCell] = Field(default_factory=list)
    stats: FeedbackStats = Field(default_factory=FeedbackStats)


class AttemptResult(FeedbackSummary):
    """A FeedbackSummary tagged with its attempt number."""
    attempt: int
    guess: str


class GridCheckResult(BaseModel):
    """Result of checking a full player grid against the solution."""
    correct: bool
    cells: List[GridFeedbackCell] = Field(default_factory=list)

    @property
    def incorrect_count(self) -> int:
        return sum(1 for cell in self.cells if not cell.correct)
