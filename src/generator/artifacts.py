"""Puzzle artifact creation and JSON output."""

import json
import logging
import time
from pathlib import Path
from typing import List

from pydantic import ValidationError as SchemaError

from ..squares.models import Square
from ..squares.words import get_direction
from .models import Difficulty, Manifest, ManifestEntry, Puzzle, PuzzleMetadata, Riddle
from .quality import format_report, validate_puzzle_quality


logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"


class PuzzleRejected(Exception):
    """Raised when a puzzle fails its schema or quality checks."""


def create_puzzle(
    square: Square,
    riddles: List[Riddle],
    language: str = "en",
    difficulty: Difficulty = "medium",
) -> Puzzle:
    """
    Assemble a puzzle from a square and its riddles.

    Raises:
        PuzzleRejected: If the result does not fit the artifact schema
    """
    try:
        return Puzzle(
            language=language,
            direction=get_direction(language),
            grid=[list(row) for row in square.grid],
            words=list(square.words),
            riddles=riddles,
            metadata=PuzzleMetadata(difficulty=difficulty),
        )
    except SchemaError as e:
        raise PuzzleRejected(f"Puzzle validation failed: {e}") from e


def generate_filename(language: str, index: int) -> str:
    timestamp = int(time.time() * 1000)
    return f"puzzle-{language}-{index}-{timestamp}.json"


def write_puzzle(puzzle: Puzzle, output_path: str | Path, strict: bool = True) -> Path:
    """
    Write a puzzle to a JSON file after checking riddle quality.

    Args:
        puzzle: The puzzle to write
        output_path: Destination file; parent directories are created
        strict: Reject puzzles whose riddles fail the quality checks

    Returns:
        Path of the written file

    Raises:
        PuzzleRejected: If strict and the quality checks fail
    """
    report = validate_puzzle_quality(puzzle)
    logger.info("%s", format_report(report))

    if not report.valid:
        if strict:
            raise PuzzleRejected(f"Puzzle quality validation failed: {'; '.join(report.errors)}")
        logger.warning("Puzzle %s has %d quality error(s), writing anyway", puzzle.puzzle_id, len(report.errors))

    if report.warnings:
        logger.warning("Puzzle has %d warning(s). Review recommended.", len(report.warnings))

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(puzzle.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("Puzzle artifact written to: %s", output_path)
    return output_path


def load_manifest(output_dir: str | Path) -> Manifest:
    """Load the output directory's manifest, or an empty one."""
    manifest_path = Path(output_dir) / MANIFEST_NAME
    if not manifest_path.exists():
        return Manifest()

    try:
        return Manifest.model_validate_json(manifest_path.read_text(encoding="utf-8"))
    except (SchemaError, ValueError) as e:
        logger.warning("Could not read existing manifest, creating new one: %s", e)
        return Manifest()


def update_manifest(output_dir: str | Path, entries: List[ManifestEntry]) -> Path:
    """Append entries to manifest.json, skipping puzzle ids already listed."""
    output_dir = Path(output_dir)
    manifest = load_manifest(output_dir)

    existing_ids = {entry.puzzle_id for entry in manifest.puzzles}
    for entry in entries:
        if entry.puzzle_id not in existing_ids:
            manifest.puzzles.append(entry)
            existing_ids.add(entry.puzzle_id)

    output_dir.mkdir(parents=True, exist_ok=True)
    manifest_path = output_dir / MANIFEST_NAME
    manifest_path.write_text(
        json.dumps(manifest.model_dump(by_alias=True), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return manifest_path


def write_many(
    puzzles: List[Puzzle],
    output_dir: str | Path,
    strict: bool = True,
) -> List[Path]:
    """
    Write puzzles into a directory and record them in the manifest.

    Rejected puzzles are logged and skipped.

    Returns:
        Paths of the files written, in puzzle order
    """
    output_dir = Path(output_dir)
    written: List[Path] = []
    entries: List[ManifestEntry] = []

    for index, puzzle in enumerate(puzzles, start=1):
        filename = generate_filename(puzzle.language, index)
        try:
            path = write_puzzle(puzzle, output_dir / filename, strict=strict)
        except PuzzleRejected as e:
            logger.error("Puzzle %d rejected: %s", index, e)
            continue

        written.append(path)
        entries.append(ManifestEntry(
            filename=filename,
            language=puzzle.language,
            difficulty=puzzle.metadata.difficulty,
            puzzle_id=puzzle.puzzle_id,
        ))

    logger.info("Successfully wrote %d/%d puzzles", len(written), len(puzzles))
    rejected = len(puzzles) - len(written)
    if rejected:
        logger.warning("Rejected %d puzzle(s) due to quality issues", rejected)

    if entries:
        update_manifest(output_dir, entries)

    return written


def read_puzzle(path: str | Path) -> Puzzle:
    """Load a puzzle artifact from JSON."""
    return Puzzle.model_validate_json(Path(path).read_text(encoding="utf-8"))
