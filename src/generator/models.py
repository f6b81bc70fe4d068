"""
Pydantic models for the puzzle generator.

Configuration, riddles, and the puzzle artifact document. Artifact models
serialize with camelCase keys (`model_dump(by_alias=True)`), which is the
format the puzzle player loads.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..squares.search import SearchOrder


Difficulty = Literal["easy", "medium", "hard"]
Direction = Literal["ltr", "rtl"]

PUZZLE_VERSION = "1.0.0"


class GeneratorConfig(BaseModel):
    """Configuration for a generation run."""
    wordlist: str
    output: str = "puzzles"
    language: str = Field(default="en", pattern=r'^[a-z]{2}$')
    count: int = Field(default=5, ge=1, le=100)
    difficulty: Difficulty = "medium"
    seed: Optional[int] = None
    search_order: SearchOrder = SearchOrder.FIRST_WORD
    strict_quality: bool = True
    # LiteLLM model string; None means template riddles only
    model: Optional[str] = None
    temperature: float = 0.7
    max_tokens: Optional[int] = 200


class ArtifactModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Riddle(ArtifactModel):
    """A riddle whose answer is one word of the square."""
    id: int = Field(..., ge=1, le=4)
    prompt: str = Field(..., min_length=1)
    answer: str
    solution_word: Optional[str] = None
    position: int = Field(..., ge=0, le=3)
    hint: Optional[str] = None
    explanation: Optional[str] = None

    def model_post_init(self, __context) -> None:
        if self.solution_word is None:
            self.solution_word = self.answer


class PuzzleMetadata(ArtifactModel):
    created_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    difficulty: Difficulty = "medium"


class Puzzle(ArtifactModel):
    """A complete puzzle artifact: square, riddles, metadata."""
    puzzle_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    version: str = Field(default=PUZZLE_VERSION, pattern=r'^\d+\.\d+\.\d+$')
    language: str = Field(default="en", pattern=r'^[a-z]{2}$')
    direction: Direction = "ltr"
    grid: List[List[str]] = Field(..., min_length=4, max_length=4)
    words: List[str] = Field(..., min_length=4, max_length=4)
    riddles: List[Riddle] = Field(..., min_length=4, max_length=4)
    metadata: PuzzleMetadata = Field(default_factory=PuzzleMetadata)

    @field_validator('puzzle_id')
    @classmethod
    def check_uuid(cls, value: str) -> str:
        uuid.UUID(value)
        return value

    @field_validator('grid')
    @classmethod
    def check_grid_cells(cls, value: List[List[str]]) -> List[List[str]]:
        for i, row in enumerate(value):
            if len(row) != 4:
                raise ValueError(f"Grid row {i} must have 4 cells")
            if any(len(cell) != 1 for cell in row):
                raise ValueError(f"Grid row {i} must hold single characters")
        return value

    @field_validator('words')
    @classmethod
    def check_word_lengths(cls, value: List[str]) -> List[str]:
        for word in value:
            if len(word) != 4:
                raise ValueError(f"Word '{word}' must be 4 characters")
        return value


class QualityReport(BaseModel):
    """Result of riddle quality checks."""
    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class ManifestEntry(ArtifactModel):
    filename: str
    language: str
    difficulty: Difficulty
    puzzle_id: str


class Manifest(ArtifactModel):
    version: str = PUZZLE_VERSION
    puzzles: List[ManifestEntry] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Result of a complete generation run."""
    config: GeneratorConfig
    words_loaded: int = 0
    squares_found: int = 0
    puzzles: List[Puzzle] = Field(default_factory=list)
    files: List[str] = Field(default_factory=list)
    rejected: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
