"""Riddle quality checks run before a puzzle is written."""

import re
from typing import Dict, List

from .models import Puzzle, QualityReport, Riddle


LETTER_KEYWORDS: Dict[str, List[str]] = {
    "en": ["letter", "letters", "with the letters"],
    "he": ["אות", "אותיות", "עם האותיות", "האותיות"],
}

PATTERN_KEYWORDS: Dict[str, List[str]] = {
    "en": [
        "starts with",
        "ends with",
        "begins with",
        "pattern",
        "sequence",
        "combination of letters",
    ],
    "he": [
        "מתחיל ב",
        "מסתיים ב",
        "תבנית",
        "רצף",
        "שילוב של אותיות",
        "מילה עם",
        "מילה זו",
    ],
}


def is_letter_spelling_riddle(prompt: str, answer: str, language: str = "en") -> bool:
    """True if the prompt mentions letters and names every letter of the answer."""
    keywords = LETTER_KEYWORDS.get(language, LETTER_KEYWORDS["en"])
    lower_prompt = prompt.lower()
    if not any(keyword.lower() in lower_prompt for keyword in keywords):
        return False
    return all(letter in prompt for letter in answer)


def is_pattern_riddle(prompt: str, language: str = "en") -> bool:
    """True if the prompt describes a letter pattern instead of a meaning."""
    keywords = PATTERN_KEYWORDS.get(language, PATTERN_KEYWORDS["en"])
    lower_prompt = prompt.lower()
    return any(keyword.lower() in lower_prompt for keyword in keywords)


def ends_with_proper_punctuation(text: str) -> bool:
    trimmed = text.strip()
    return bool(re.search(r'[.!?。！？]$', trimmed) or re.search(r'[א-ת]$', trimmed))


def contains_hebrew(text: str) -> bool:
    return bool(re.search("[\u0590-\u05FF]", text))


def validate_riddle(riddle: Riddle, language: str = "en") -> QualityReport:
    """Check one riddle for empty fields, fallback text and letter-pattern riddles."""
    errors: List[str] = []
    warnings: List[str] = []

    prompt = riddle.prompt or ""
    hint = riddle.hint or ""
    explanation = riddle.explanation or ""

    if not prompt.strip():
        errors.append("Prompt is empty")
    if not hint.strip():
        errors.append("Hint is empty")
    if not explanation.strip():
        errors.append("Explanation is empty")

    if "{" in prompt and '"riddle"' in prompt:
        errors.append("Prompt contains JSON structure - malformed AI response")

    if prompt and riddle.answer and is_letter_spelling_riddle(prompt, riddle.answer, language):
        errors.append("Riddle spells out the letters - defeats game purpose")

    if "The answer is" in explanation:
        errors.append("Explanation uses generic fallback text - not acceptable")
    if "Starts with" in hint:
        errors.append("Hint uses generic fallback text - not acceptable")

    if prompt and is_pattern_riddle(prompt, language):
        errors.append("Riddle describes letter pattern instead of word meaning")

    if prompt and len(prompt) < 10:
        warnings.append("Prompt is very short (< 10 characters)")
    if len(prompt) > 200:
        warnings.append("Prompt is very long (> 200 characters)")

    if prompt and not ends_with_proper_punctuation(prompt):
        warnings.append("Prompt may be truncated (no proper ending)")
    if explanation and not ends_with_proper_punctuation(explanation):
        warnings.append("Explanation may be truncated (no proper ending)")

    if language == "he" and prompt and not contains_hebrew(prompt):
        errors.append("Prompt should contain Hebrew characters for Hebrew puzzle")

    return QualityReport(valid=not errors, errors=errors, warnings=warnings)


def validate_puzzle_quality(puzzle: Puzzle) -> QualityReport:
    """Check every riddle of a puzzle, prefixing messages with the riddle number."""
    errors: List[str] = []
    warnings: List[str] = []

    for index, riddle in enumerate(puzzle.riddles, start=1):
        report = validate_riddle(riddle, puzzle.language)
        errors.extend(f"Riddle {index}: {e}" for e in report.errors)
        warnings.extend(f"Riddle {index}: {w}" for w in report.warnings)

    return QualityReport(valid=not errors, errors=errors, warnings=warnings)


def format_report(report: QualityReport) -> str:
    """Format a quality report for logs."""
    lines = ["=== Puzzle Quality Report ==="]
    lines.append("Puzzle passed validation" if report.valid else "Puzzle failed validation")

    if report.errors:
        lines.append("Errors:")
        lines.extend(f"  - {e}" for e in report.errors)

    if report.warnings:
        lines.append("Warnings:")
        lines.extend(f"  - {w}" for w in report.warnings)

    if report.valid and not report.warnings:
        lines.append("No issues found!")

    return "\n".join(lines)
