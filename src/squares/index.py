"""First-character index over a WordSet."""

from typing import Dict, List, Tuple

from .models import LengthMismatch
from .words import WordSet


class WordIndex:
    """
    Immutable lookup of words by their first character.

    Buckets keep the WordSet's insertion order.
    """

    __slots__ = ('_word_set', '_buckets')

    def __init__(self, word_set: WordSet, buckets: Dict[str, Tuple[str, ...]]):
        self._word_set = word_set
        self._buckets = buckets

    @classmethod
    def build(cls, words: WordSet) -> "WordIndex":
        """
        Build the index.

        Raises:
            LengthMismatch: If any word's length differs from the set's length
        """
        grouped: Dict[str, List[str]] = {}
        for word in words:
            if len(word) != words.length:
                raise LengthMismatch(
                    f"Word '{word}' has length {len(word)}, expected {words.length}",
                    expected=words.length,
                    actual=len(word),
                )
            grouped.setdefault(word[0], []).append(word)

        buckets = {char: tuple(bucket) for char, bucket in grouped.items()}
        return cls(words, buckets)

    @property
    def length(self) -> int:
        return self._word_set.length

    @property
    def word_set(self) -> WordSet:
        return self._word_set

    @property
    def words(self) -> Tuple[str, ...]:
        return self._word_set.words

    def candidates_starting_with(self, char: str) -> Tuple[str, ...]:
        """All words whose first character is `char` (empty when none)."""
        return self._buckets.get(char, ())

    def __contains__(self, word: object) -> bool:
        return word in self._word_set

    def __len__(self) -> int:
        return len(self._word_set)
