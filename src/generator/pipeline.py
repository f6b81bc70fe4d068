"""
Puzzle generation pipeline.

Loads the word list, runs the square search, writes riddles for each
square and saves the puzzles with their manifest.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..squares.index import WordIndex
from ..squares.models import Square
from ..squares.search import Observer, SearchEvent, SquareSearcher
from ..squares.words import WordSet, get_direction, load_word_list
from .artifacts import PuzzleRejected, create_puzzle, write_many
from .models import GeneratorConfig, GenerationResult, Puzzle
from .riddles import RiddleGenerator


logger = logging.getLogger(__name__)


def log_search_event(event: SearchEvent) -> None:
    """Search observer that reports progress through the module logger."""
    if event.kind == "started":
        logger.info("Searching for squares in %d words...", event.words_total)
    elif event.kind == "found" and event.square is not None:
        logger.info("Found square %d: %s", event.found, ", ".join(event.square.words))
    elif event.kind == "finished":
        logger.info("Found %d squares", event.found)


class PuzzleGenerator(BaseModel):
    """
    Top-level orchestrator for puzzle generation.

    Loads the word list, searches for squares, writes riddles for each
    square and saves the resulting puzzles as JSON artifacts.

    Attributes:
        config: Generation configuration
        word_set: Normalized words of the configured language
        riddle_generator: Riddle writer for the squares' words
        observer: Search observer (defaults to logging progress)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GeneratorConfig
    word_set: WordSet
    riddle_generator: RiddleGenerator
    observer: Optional[Observer] = Field(default=log_search_event, exclude=True)

    @classmethod
    def create(cls, config: GeneratorConfig, observer: Optional[Observer] = log_search_event) -> "PuzzleGenerator":
        """
        Factory method to load the word list and set up riddle generation.

        Raises:
            FileNotFoundError: If the word list does not exist
            ValueError: If it holds no usable words
        """
        logger.info("Loading word list from: %s", config.wordlist)
        word_set = load_word_list(config.wordlist, language=config.language)
        logger.info(
            "Loaded %d unique words (language: %s, direction: %s)",
            len(word_set), config.language, get_direction(config.language),
        )

        riddle_generator = RiddleGenerator.create(
            model=config.model,
            language=config.language,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
        return cls(config=config, word_set=word_set, riddle_generator=riddle_generator, observer=observer)

    def find_squares(self) -> List[Square]:
        searcher = SquareSearcher(
            index=WordIndex.build(self.word_set),
            order=self.config.search_order,
            seed=self.config.seed,
            observer=self.observer,
        )
        return searcher.find(self.config.count)

    def build_puzzles(self, squares: List[Square]) -> List[Puzzle]:
        """Generate riddles for each square and assemble the puzzles."""
        puzzles: List[Puzzle] = []
        for i, square in enumerate(squares, start=1):
            logger.info("Generating riddles for puzzle %d/%d: %s", i, len(squares), ", ".join(square.words))
            riddles = self.riddle_generator.generate_riddles(square.words)
            try:
                puzzles.append(create_puzzle(square, riddles, self.config.language, self.config.difficulty))
            except PuzzleRejected as e:
                logger.error("Puzzle %d rejected: %s", i, e)
        return puzzles

    def run(self, output: Optional[str | Path] = None) -> GenerationResult:
        """
        Run the full pipeline.

        Finding no squares is not an error: the result reports zero
        squares and nothing is written.
        """
        started_at = datetime.now()
        output_dir = Path(output or self.config.output)

        squares = self.find_squares()
        puzzles: List[Puzzle] = []
        files: List[Path] = []
        if squares:
            puzzles = self.build_puzzles(squares)
            logger.info("Writing puzzle artifacts to: %s", output_dir)
            files = write_many(puzzles, output_dir, strict=self.config.strict_quality)
        else:
            logger.warning("No squares found in the word list. Try a larger word list.")

        written = {path.name for path in files}
        ended_at = datetime.now()
        return GenerationResult(
            config=self.config,
            words_loaded=len(self.word_set),
            squares_found=len(squares),
            puzzles=puzzles,
            files=[str(path) for path in files],
            rejected=len(squares) - len(written),
            started_at=started_at.isoformat(),
            ended_at=ended_at.isoformat(),
            duration_seconds=(ended_at - started_at).total_seconds(),
        )
