"""
Word mode feedback: one guess against one answer.

Wrong-position credit uses consumed answer positions, so an answer
letter can justify at most one correct or wrong-position mark.
"""

from typing import List, Optional

from ..squares.models import LengthMismatch
from ..squares.words import normalize_word
from .models import FeedbackCell, FeedbackStats, FeedbackSummary, AttemptResult


def check_word(guess: str, answer: str, language: str = 'en') -> List[FeedbackCell]:
    """
    Wordle-style per-letter feedback for `guess` against `answer`.

    Pass 1 marks exact matches and consumes those answer positions.
    Pass 2 gives each remaining guess letter the first unconsumed answer
    position holding the same letter, or marks it incorrect.

    Raises:
        LengthMismatch: If guess and answer differ in length after normalization
    """
    guess_chars = list(normalize_word(guess, language))
    answer_chars = list(normalize_word(answer, language))

    if len(guess_chars) != len(answer_chars):
        raise LengthMismatch(
            f"Guess has {len(guess_chars)} characters, answer has {len(answer_chars)}",
            expected=len(answer_chars),
            actual=len(guess_chars),
        )

    feedback: List[Optional[FeedbackCell]] = [None] * len(guess_chars)
    answer_used = [False] * len(answer_chars)

    for i, char in enumerate(guess_chars):
        if char == answer_chars[i]:
            feedback[i] = FeedbackCell(position=i, char=char, status="correct")
            answer_used[i] = True

    for i, char in enumerate(guess_chars):
        if feedback[i] is not None:
            continue

        status = "incorrect"
        for j, answer_char in enumerate(answer_chars):
            if not answer_used[j] and answer_char == char:
                answer_used[j] = True
                status = "wrong-position"
                break

        feedback[i] = FeedbackCell(position=i, char=char, status=status)

    return feedback


def is_correct(guess: str, answer: str, language: str = 'en') -> bool:
    return normalize_word(guess, language) == normalize_word(answer, language)


def count_statuses(feedback: List[FeedbackCell]) -> FeedbackStats:
    return FeedbackStats(
        correct_positions=sum(1 for f in feedback if f.status == "correct"),
        wrong_positions=sum(1 for f in feedback if f.status == "wrong-position"),
        incorrect=sum(1 for f in feedback if f.status == "incorrect"),
    )


def summarize(guess: str, answer: str, language: str = 'en') -> FeedbackSummary:
    """Feedback plus status counts for one guess."""
    feedback = check_word(guess, answer, language)
    return FeedbackSummary(
        correct=is_correct(guess, answer, language),
        feedback=feedback,
        stats=count_statuses(feedback),
    )


def check_multiple(guesses: List[str], answer: str, language: str = 'en') -> List[AttemptResult]:
    """Summaries for a history of guesses, numbered from 1."""
    results: List[AttemptResult] = []
    for attempt, guess in enumerate(guesses, start=1):
        summary = summarize(guess, answer, language)
        results.append(AttemptResult(attempt=attempt, guess=guess, **summary.model_dump()))
    return results


def generate_hint(guess: str, answer: str, language: str = 'en') -> str:
    """A short progress message for a wrong guess."""
    stats = count_statuses(check_word(guess, answer, language))
    length = len(normalize_word(answer, language))
    correct = stats.correct_positions

    if correct == length:
        return "Perfect! All letters are correct!"
    if correct == length - 1:
        return f"Very close! {correct} letters are in the right position."
    if correct > 1:
        return f"Getting there! {correct} letters are correct."
    if correct == 1:
        return "1 letter is in the right position."
    if stats.wrong_positions == 1:
        return "1 letter is in the word but in the wrong position."
    if stats.wrong_positions > 1:
        return f"{stats.wrong_positions} letters are in the word but in wrong positions."
    return "None of the letters are in the word. Try again!"


def similarity(guess: str, answer: str, language: str = 'en') -> int:
    """Score from 0 to 100: 25 per correct letter, 10 per wrong-position letter."""
    stats = count_statuses(check_word(guess, answer, language))
    return min(100, stats.correct_positions * 25 + stats.wrong_positions * 10)


def validate_comparison(guess: str, answer: str, length: int = 4, language: str = 'en') -> Optional[str]:
    """
    Check that a guess and answer can be compared.

    Returns:
        Error message if they cannot, None if they can
    """
    if not guess or not answer:
        return "Both guess and answer are required"

    if len(normalize_word(guess, language)) != length:
        return f"Guess must be exactly {length} characters"

    if len(normalize_word(answer, language)) != length:
        return f"Answer must be exactly {length} characters"

    return None
