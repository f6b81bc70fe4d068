"""Backtracking search for symmetric word squares."""

import random
from enum import Enum
from typing import Callable, Iterable, List, Literal, Optional, Sequence
from pydantic import BaseModel, ConfigDict, Field

from .models import Square
from .grid import build_grid
from .index import WordIndex
from .validate import is_valid_square
from .words import DEFAULT_LENGTH, WordSet


class SearchOrder(str, Enum):
    """Which candidate lists the search shuffles."""
    FIRST_WORD = "first_word"  # shuffle first words only, deeper rows in index order
    ALL_LEVELS = "all_levels"  # shuffle first words and every depth's candidates
    NONE = "none"  # index order everywhere


class SearchEvent(BaseModel):
    """Progress notification sent to a search observer."""
    kind: Literal["started", "found", "finished"]
    words_total: int
    found: int = 0
    square: Optional[Square] = None


Observer = Callable[[SearchEvent], None]


def fits_prefix(candidate: str, rows: Sequence[str], depth: int) -> bool:
    """
    True if `candidate` agrees with every cell already fixed for row `depth`.

    Row `depth` has its first `depth` cells fixed by symmetry:
    grid[depth][j] == grid[j][depth] for each placed row j.
    """
    for j in range(depth):
        if candidate[j] != rows[j][depth]:
            return False
    return True


class SquareSearcher(BaseModel):
    """
    Finds symmetric word squares in a WordIndex.

    Each first word is tried once; the remaining rows are filled by a
    depth-first search where row k may only use words starting with
    first_word[k] whose first k letters match the columns placed so far.

    Attributes:
        index: Index over the word set to search
        order: Shuffle policy for candidate lists
        seed: Optional random seed for reproducibility
        observer: Optional callback receiving SearchEvent notifications
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    index: WordIndex
    order: SearchOrder = SearchOrder.FIRST_WORD
    seed: Optional[int] = None
    observer: Optional[Observer] = Field(default=None, exclude=True)
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @property
    def length(self) -> int:
        return self.index.length

    def find(self, max_results: int = 10) -> List[Square]:
        """
        Find up to `max_results` squares, at most one per first word.

        Args:
            max_results: Maximum number of squares to return (>= 1)

        Returns:
            Accepted squares, possibly empty when the word set has none

        Raises:
            ValueError: If max_results is less than 1
        """
        if max_results < 1:
            raise ValueError(f"max_results must be at least 1 (got {max_results})")

        first_words = list(self.index.words)
        if self.order != SearchOrder.NONE:
            self._rng.shuffle(first_words)

        self._notify(SearchEvent(kind="started", words_total=len(first_words)))

        results: List[Square] = []
        for word in first_words:
            if len(results) >= max_results:
                break

            square = self.complete(word)
            if square is not None:
                results.append(square)
                self._notify(SearchEvent(
                    kind="found",
                    words_total=len(first_words),
                    found=len(results),
                    square=square,
                ))

        self._notify(SearchEvent(kind="finished", words_total=len(first_words), found=len(results)))
        return results

    def complete(self, first_word: str) -> Optional[Square]:
        """Complete a square with `first_word` as row 0, or None if impossible."""
        if len(first_word) != self.length:
            return None
        return self._extend([first_word])

    def candidates(self, rows: Sequence[str]) -> List[str]:
        """Words that may fill the next row given the rows already placed."""
        depth = len(rows)
        pool: Iterable[str] = self.index.candidates_starting_with(rows[0][depth])

        if self.order == SearchOrder.ALL_LEVELS:
            pool = list(pool)
            self._rng.shuffle(pool)

        return [
            word for word in pool
            if word not in rows and fits_prefix(word, rows, depth)
        ]

    def _extend(self, rows: List[str]) -> Optional[Square]:
        if len(rows) == self.length:
            grid = build_grid(rows)
            if is_valid_square(grid, self.index.word_set):
                return Square(grid=grid, words=list(rows))
            return None

        for candidate in self.candidates(rows):
            rows.append(candidate)
            square = self._extend(rows)
            rows.pop()
            if square is not None:
                return square

        return None

    def _notify(self, event: SearchEvent) -> None:
        if self.observer is not None:
            self.observer(event)


def find_squares(
    words: Iterable[str] | WordSet,
    max_results: int = 10,
    order: SearchOrder = SearchOrder.FIRST_WORD,
    seed: Optional[int] = None,
    observer: Optional[Observer] = None,
    length: int = DEFAULT_LENGTH,
) -> List[Square]:
    """
    Find up to `max_results` squares in a list of words.

    Raw words are normalized and length-filtered; a WordSet is used as is.
    """
    word_set = words if isinstance(words, WordSet) else WordSet.from_words(words, length=length)
    searcher = SquareSearcher(
        index=WordIndex.build(word_set),
        order=order,
        seed=seed,
        observer=observer,
    )
    return searcher.find(max_results)
