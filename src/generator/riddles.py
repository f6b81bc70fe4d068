"""
Riddle generation for the words of a square.

Asks an LLM for one JSON riddle per word and falls back to template
riddles when no model is configured or the reply cannot be used.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

from .llm_client import LLMClient
from .models import Riddle
from .prompts import get_system_prompt, build_riddle_prompt, fallback_template


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("riddle", "hint", "explanation")


def parse_riddle_response(content: str) -> Dict[str, str]:
    """
    Extract the riddle JSON object from a model reply.

    Markdown code fences and text around the object are tolerated.

    Raises:
        ValueError: If no JSON object is found or a required field is missing
    """
    content = re.sub(r'```(?:json)?\n?', '', content)

    match = re.search(r'\{.*\}', content, re.DOTALL)
    if not match:
        raise ValueError("No JSON object in response")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in response: {e}") from e

    missing = [field for field in REQUIRED_FIELDS if not str(data.get(field, "")).strip()]
    if missing:
        raise ValueError(f"Missing required fields in JSON response: {', '.join(missing)}")

    return {field: str(data[field]).strip() for field in REQUIRED_FIELDS}


class RiddleGenerator(BaseModel):
    """
    Writes one riddle per word of a square.

    Attributes:
        language: Puzzle language code
        llm_client: LLM client, or None for template riddles only
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    language: str = "en"
    llm_client: Optional[LLMClient] = None

    @classmethod
    def create(
        cls,
        model: Optional[str] = None,
        language: str = "en",
        temperature: float = 0.7,
        max_tokens: Optional[int] = 200,
        **llm_kwargs: Any
    ) -> "RiddleGenerator":
        """
        Factory method to create a generator with an optional LLM client.

        Args:
            model: LiteLLM model name (e.g., "gpt-4o"), None for templates only
            language: Puzzle language code
            temperature: LLM temperature setting
            max_tokens: Optional max tokens for responses
            **llm_kwargs: Additional arguments for the LLM client
        """
        llm_client = None
        if model:
            llm_client = LLMClient(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                **llm_kwargs
            )
        return cls(language=language, llm_client=llm_client)

    def generate_riddles(self, words: List[str]) -> List[Riddle]:
        """Generate riddles for the words of a square, in row order."""
        riddles = []
        for index, word in enumerate(words):
            logger.info("Generating riddle for word: %s", word)
            riddles.append(self.generate_riddle(word, index))
        return riddles

    def generate_riddle(self, word: str, index: int) -> Riddle:
        """Generate the riddle for row/column `index`, falling back to a template."""
        if self.llm_client is None:
            return self.fallback_riddle(word, index)

        try:
            content = self.llm_client.ask(
                get_system_prompt(self.language),
                build_riddle_prompt(word, self.language),
            )
            data = parse_riddle_response(content)
        except Exception as e:
            logger.warning("Failed to generate AI riddle for %r, using fallback: %s", word, e)
            return self.fallback_riddle(word, index)

        return Riddle(
            id=index + 1,
            prompt=data["riddle"],
            answer=word,
            position=index,
            hint=data["hint"],
            explanation=data["explanation"],
        )

    def fallback_riddle(self, word: str, index: int) -> Riddle:
        data = fallback_template(word, self.language, index)
        return Riddle(
            id=index + 1,
            prompt=data["riddle"],
            answer=word,
            position=index,
            hint=data["hint"],
            explanation=data["explanation"],
        )
