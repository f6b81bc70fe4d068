"""Word normalization, the fixed-length WordSet, and word list loading."""

import unicodedata
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from .models import LengthMismatch


DEFAULT_LENGTH = 4

RTL_LANGUAGES = ('he', 'ar', 'fa', 'ur', 'yi')

# Word-final letter forms folded to their standard forms
LETTER_FOLDS: Dict[str, Dict[str, str]] = {
    'he': {
        'ך': 'כ',  # final kaf
        'ם': 'מ',  # final mem
        'ן': 'נ',  # final nun
        'ף': 'פ',  # final pe
        'ץ': 'צ',  # final tsadi
    },
}


def fold_letters(text: str, language: str = 'en') -> str:
    """Apply the language's letter folding (e.g. Hebrew final forms)."""
    folds = LETTER_FOLDS.get(language)
    if not folds:
        return text
    return ''.join(folds.get(ch, ch) for ch in text)


def normalize_word(word: str, language: str = 'en') -> str:
    """
    Normalize a word for comparison.

    Strips whitespace, uppercases, composes to NFC and folds
    language-specific letter forms so that visually equivalent
    spellings compare equal.
    """
    if not word:
        return ''
    text = unicodedata.normalize('NFC', word.strip().upper())
    return fold_letters(text, language)


def char_length(word: str) -> int:
    """Length in characters of the NFC-composed word (never bytes)."""
    return len(unicodedata.normalize('NFC', word))


def get_direction(language: str) -> str:
    """Text direction for a language code."""
    return 'rtl' if language in RTL_LANGUAGES else 'ltr'


class WordSet:
    """
    Immutable, deduplicated collection of normalized words of one length.

    The constructor expects already-normalized words and refuses any word
    of the wrong length; use `from_words` to normalize and filter raw input.
    """

    __slots__ = ('_words', '_members', '_length', '_language')

    def __init__(self, words: Iterable[str], length: int = DEFAULT_LENGTH, language: str = 'en'):
        ordered: List[str] = []
        seen = set()
        for word in words:
            actual = char_length(word)
            if actual != length:
                raise LengthMismatch(
                    f"Word '{word}' has length {actual}, expected {length}",
                    expected=length,
                    actual=actual,
                )
            if word not in seen:
                seen.add(word)
                ordered.append(word)

        self._words: Tuple[str, ...] = tuple(ordered)
        self._members = frozenset(ordered)
        self._length = length
        self._language = language

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        length: int = DEFAULT_LENGTH,
        language: str = 'en',
    ) -> "WordSet":
        """Normalize raw words, keep those of `length` characters, dedupe."""
        normalized = (normalize_word(w, language) for w in words)
        return cls((w for w in normalized if char_length(w) == length), length=length, language=language)

    @property
    def length(self) -> int:
        return self._length

    @property
    def language(self) -> str:
        return self._language

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __contains__(self, word: object) -> bool:
        return word in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordSet({len(self._words)} words, length={self._length}, language={self._language!r})"


def load_word_list(path: str | Path, length: int = DEFAULT_LENGTH, language: str = 'en') -> WordSet:
    """
    Load a word list file into a WordSet.

    Args:
        path: UTF-8 text file with one word per line
        length: Word length to keep, counted in characters
        language: Language code used for normalization

    Returns:
        The normalized, deduplicated WordSet

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is empty or has no words of `length`
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Word list file not found: {path}")

    lines = [line.strip() for line in path.read_text(encoding='utf-8').splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise ValueError(f"Word list file is empty: {path}")

    word_set = WordSet.from_words(lines, length=length, language=language)
    if not len(word_set):
        raise ValueError(f"No {length}-letter words found in: {path}")

    return word_set
