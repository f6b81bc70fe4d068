"""Prompt templates for riddle generation."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .riddle_prompt import build_riddle_prompt, fallback_template, LANGUAGE_NAMES

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_riddle_prompt",
    "fallback_template",
    "LANGUAGE_NAMES",
]
