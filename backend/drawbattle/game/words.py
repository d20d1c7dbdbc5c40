"""Word source backed by a text-generation model.

Words are requested from an OpenAI-compatible chat-completions endpoint
(OpenRouter by default) as a newline-delimited list. There is no retry and no
built-in fallback list: any failure of the request propagates to the caller.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from openai import OpenAI


logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "I'm building a drawing-based guessing game like Pictionary. "
    "Do not include any explanations, numbers, or extra text.\n\n"
    'Please give me a list of {count} words for the topic: "{topic}".\n\n'
    "These words should:\n"
    "- Be visually representable by drawing (no abstract ideas).\n"
    "- Be easy to guess by players (not too obscure).\n"
    "- Be appropriate for all age groups.\n\n"
    "Return ONLY the list of words in plain text format, one word per line."
)


class WordSource(Protocol):
    def fetch_words(self, topic: str, count: int) -> list[str]:
        ...


def build_prompt(topic: str, count: int) -> str:
    return PROMPT_TEMPLATE.format(topic=topic, count=count)


def parse_words(text: str) -> list[str]:
    words = []
    for line in re.split(r"\r?\n", text or ""):
        w = line.strip()
        if w:
            words.append(w)
    return words


class OpenRouterWordSource:
    def __init__(self, api_key: str, model: str, base_url: str) -> None:
        self.model = model
        self.client = OpenAI(api_key=api_key, base_url=base_url)

    @classmethod
    def from_config(cls, config) -> "OpenRouterWordSource":
        return cls(
            api_key=config.get("OPENROUTER_API_KEY", ""),
            model=config.get("WORD_MODEL", "mistralai/mistral-7b-instruct"),
            base_url=config.get("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"),
        )

    def fetch_words(self, topic: str, count: int) -> list[str]:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": build_prompt(topic, count)}],
        )
        words = parse_words(response.choices[0].message.content)
        logger.info("[words-fetch] topic=%s requested=%d received=%d", topic, count, len(words))
        return words
