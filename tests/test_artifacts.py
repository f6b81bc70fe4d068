"""Test puzzle assembly, JSON artifacts and the manifest."""

import json

import pytest

from src.generator import (
    Puzzle,
    PuzzleRejected,
    Riddle,
    create_puzzle,
    read_puzzle,
    update_manifest,
    validate_puzzle_quality,
    write_many,
    write_puzzle,
    ManifestEntry,
)
from src.squares import Square, build_grid


WORDS = ["ABLE", "BARE", "LREA", "EEAR"]
SQUARE = Square(grid=build_grid(WORDS), words=WORDS)


def good_riddles(words=WORDS):
    return [
        Riddle(
            id=i + 1,
            prompt=f"A clear description of the meaning of word number {i + 1}.",
            answer=word,
            position=i,
            hint="Think about everyday objects",
            explanation="The description matches the meaning of this word.",
        )
        for i, word in enumerate(words)
    ]


def template_riddles(words=WORDS):
    return [
        Riddle(
            id=i + 1,
            prompt=f"A four-letter word that starts with {word[0]} and ends with {word[3]}",
            answer=word,
            position=i,
            hint="Think of common words with these letters",
            explanation=f'The word "{word}" matches the pattern',
        )
        for i, word in enumerate(words)
    ]


class TestCreatePuzzle:
    """Test cases for puzzle assembly."""

    def test_create(self):
        puzzle = create_puzzle(SQUARE, good_riddles(), language="en", difficulty="hard")

        assert puzzle.grid == SQUARE.grid
        assert puzzle.words == WORDS
        assert puzzle.direction == "ltr"
        assert puzzle.version == "1.0.0"
        assert puzzle.metadata.difficulty == "hard"
        assert len(puzzle.puzzle_id) == 36

    def test_hebrew_is_rtl(self):
        words = ["שלום", "לאבג", "ובדה", "םגהז"]
        square = Square(grid=build_grid(words), words=words)

        puzzle = create_puzzle(square, good_riddles(words), language="he")

        assert puzzle.direction == "rtl"

    def test_wrong_riddle_count(self):
        with pytest.raises(PuzzleRejected):
            create_puzzle(SQUARE, good_riddles()[:3])

    def test_wrong_size_square(self):
        words = ["AB", "BC"]
        square = Square(grid=build_grid(words), words=words)

        with pytest.raises(PuzzleRejected):
            create_puzzle(square, good_riddles())


class TestWritePuzzle:
    """Test cases for writing single artifacts."""

    def test_camel_case_keys(self, tmp_path):
        puzzle = create_puzzle(SQUARE, good_riddles())

        path = write_puzzle(puzzle, tmp_path / "nested" / "puzzle.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert set(data) == {"puzzleId", "version", "language", "direction", "grid", "words", "riddles", "metadata"}
        assert data["riddles"][0]["solutionWord"] == "ABLE"
        assert "createdAt" in data["metadata"]

    def test_round_trip(self, tmp_path):
        puzzle = create_puzzle(SQUARE, good_riddles())

        loaded = read_puzzle(write_puzzle(puzzle, tmp_path / "puzzle.json"))

        assert loaded == puzzle

    def test_hebrew_written_unescaped(self, tmp_path):
        words = ["שלום", "לאבג", "ובדה", "םגהז"]
        riddles = [
            r.model_copy(update={"prompt": "חידה ברורה על משמעות המילה."})
            for r in good_riddles(words)
        ]
        puzzle = create_puzzle(Square(grid=build_grid(words), words=words), riddles, language="he")

        path = write_puzzle(puzzle, tmp_path / "puzzle.json")

        assert "שלום" in path.read_text(encoding="utf-8")

    def test_strict_rejects_poor_riddles(self, tmp_path):
        puzzle = create_puzzle(SQUARE, template_riddles())

        with pytest.raises(PuzzleRejected, match="quality validation failed"):
            write_puzzle(puzzle, tmp_path / "puzzle.json", strict=True)
        assert not (tmp_path / "puzzle.json").exists()

    def test_lenient_writes_poor_riddles(self, tmp_path):
        puzzle = create_puzzle(SQUARE, template_riddles())

        path = write_puzzle(puzzle, tmp_path / "puzzle.json", strict=False)

        assert path.exists()

    def test_quality_messages_name_the_riddle(self):
        report = validate_puzzle_quality(create_puzzle(SQUARE, template_riddles()))

        assert report.valid is False
        assert report.errors[0].startswith("Riddle 1: ")


class TestWriteMany:
    """Test cases for directory output and the manifest."""

    def test_writes_files_and_manifest(self, tmp_path):
        puzzles = [create_puzzle(SQUARE, good_riddles()) for _ in range(2)]

        paths = write_many(puzzles, tmp_path)

        assert len(paths) == 2
        assert paths[0].name.startswith("puzzle-en-1-")
        assert paths[1].name.startswith("puzzle-en-2-")

        manifest = json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8"))
        assert manifest["version"] == "1.0.0"
        assert [entry["puzzleId"] for entry in manifest["puzzles"]] == [p.puzzle_id for p in puzzles]
        assert manifest["puzzles"][0]["filename"] == paths[0].name

    def test_rejected_puzzles_are_skipped(self, tmp_path):
        puzzles = [
            create_puzzle(SQUARE, template_riddles()),
            create_puzzle(SQUARE, good_riddles()),
        ]

        paths = write_many(puzzles, tmp_path, strict=True)

        assert len(paths) == 1
        manifest = json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8"))
        assert [entry["puzzleId"] for entry in manifest["puzzles"]] == [puzzles[1].puzzle_id]

    def test_nothing_written_no_manifest(self, tmp_path):
        assert write_many([create_puzzle(SQUARE, template_riddles())], tmp_path) == []
        assert not (tmp_path / "manifest.json").exists()

    def test_manifest_skips_known_ids(self, tmp_path):
        entry = ManifestEntry(
            filename="puzzle-en-1-0.json",
            language="en",
            difficulty="medium",
            puzzle_id="2f1c6a8e-3b5d-4c1a-9e7f-0a1b2c3d4e5f",
        )

        update_manifest(tmp_path, [entry])
        path = update_manifest(tmp_path, [entry])

        manifest = json.loads(path.read_text(encoding="utf-8"))
        assert len(manifest["puzzles"]) == 1

    def test_corrupt_manifest_is_replaced(self, tmp_path):
        (tmp_path / "manifest.json").write_text("not json", encoding="utf-8")

        write_many([create_puzzle(SQUARE, good_riddles())], tmp_path)

        manifest = json.loads((tmp_path / "manifest.json").read_text(encoding="utf-8"))
        assert len(manifest["puzzles"]) == 1


class TestPuzzleSchema:
    """Test cases for the artifact schema."""

    def test_invalid_puzzle_id(self):
        with pytest.raises(ValueError):
            Puzzle(puzzle_id="not-a-uuid", grid=SQUARE.grid, words=WORDS, riddles=good_riddles())

    def test_multi_character_cell(self):
        grid = [row[:] for row in SQUARE.grid]
        grid[0][0] = "AB"

        with pytest.raises(ValueError):
            Puzzle(grid=grid, words=WORDS, riddles=good_riddles())

    def test_accepts_camel_case_input(self):
        puzzle = create_puzzle(SQUARE, good_riddles())
        data = puzzle.model_dump(by_alias=True)

        assert Puzzle.model_validate(data) == puzzle
