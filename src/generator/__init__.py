"""Puzzle generation around the word square search."""

from .models import (
    GeneratorConfig,
    Riddle,
    Puzzle,
    PuzzleMetadata,
    QualityReport,
    Manifest,
    ManifestEntry,
    GenerationResult,
)
from .llm_client import LLMClient, Message, Role
from .riddles import RiddleGenerator, parse_riddle_response
from .quality import validate_riddle, validate_puzzle_quality, format_report
from .artifacts import PuzzleRejected, create_puzzle, write_puzzle, write_many, update_manifest, read_puzzle
from .pipeline import PuzzleGenerator, log_search_event

__all__ = [
    "GeneratorConfig",
    "Riddle",
    "Puzzle",
    "PuzzleMetadata",
    "QualityReport",
    "Manifest",
    "ManifestEntry",
    "GenerationResult",
    "LLMClient",
    "Message",
    "Role",
    "RiddleGenerator",
    "parse_riddle_response",
    "validate_riddle",
    "validate_puzzle_quality",
    "format_report",
    "PuzzleRejected",
    "create_puzzle",
    "write_puzzle",
    "write_many",
    "update_manifest",
    "read_puzzle",
    "PuzzleGenerator",
    "log_search_event",
]
