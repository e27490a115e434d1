"""Claude-backed text generation and keyword metric estimates."""

from __future__ import annotations

import json
import time

import anthropic

import src.config as config
from src.models import coerce_count, coerce_difficulty
from src.pipeline.anthropic_retry import messages_create_with_retry
from src.pipeline.prompts import build_keyword_estimate_prompt
from src.providers.base import KeywordMetrics, SearchProvider


def make_client() -> anthropic.Anthropic:
    if not config.ANTHROPIC_API_KEY:
        raise ValueError("ANTHROPIC_API_KEY not set. Add it to your .env file.")
    return anthropic.Anthropic(api_key=config.ANTHROPIC_API_KEY)


def _message_text(message) -> str:
    return "".join(block.text for block in message.content if block.type == "text")


def _parse_json_object(text: str) -> dict:
    """Parse a JSON object from a model reply, tolerating code fences."""
    text = text.strip()
    if "```" in text:
        text = text.split("```")[1]
        if text.startswith("json"):
            text = text[4:]
    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end < start:
        raise ValueError("no JSON object in response")
    data = json.loads(text[start:end + 1])
    if not isinstance(data, dict):
        raise ValueError("response is not a JSON object")
    return data


class ClaudeTextGenerator:
    """TextGenerator backed by the Anthropic Messages API."""

    def __init__(
        self,
        client: anthropic.Anthropic | None = None,
        model: str | None = None,
        temperature: float | None = None,
    ):
        self.client = client or make_client()
        self.model = model or config.CLAUDE_MODEL
        self.temperature = config.CLAUDE_TEMPERATURE if temperature is None else temperature

    def generate_text(self, prompt: str, max_tokens: int) -> str:
        start = time.time()
        message = messages_create_with_retry(
            self.client,
            model=self.model,
            max_tokens=max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        text = _message_text(message)
        usage = message.usage
        print(
            f"  OK {len(text.split())} words from {self.model} in {time.time() - start:.1f}s "
            f"({usage.input_tokens} in / {usage.output_tokens} out)"
        )
        return text


class ClaudeKeywordEstimator:
    """KeywordEstimator: a fast model reads the top results and estimates metrics."""

    def __init__(
        self,
        search: SearchProvider,
        client: anthropic.Anthropic | None = None,
        model: str | None = None,
    ):
        self.search = search
        self.client = client or make_client()
        self.model = model or config.ESTIMATOR_MODEL

    def estimate(self, keyword: str) -> KeywordMetrics:
        """Estimate monthly search volume and difficulty for ``keyword``.

        Falls back to zero metrics if the reply cannot be parsed.
        """
        results = self.search.search(keyword, limit=config.KEYWORD_RESULT_LIMIT)
        prompt = build_keyword_estimate_prompt(keyword, results)

        print(f"  -> Estimating metrics for '{keyword}' ({self.model})...")
        message = messages_create_with_retry(
            self.client,
            model=self.model,
            max_tokens=200,
            temperature=0,
            messages=[{"role": "user", "content": prompt}],
        )

        try:
            data = _parse_json_object(_message_text(message))
        except (json.JSONDecodeError, ValueError, IndexError):
            print(f"  Warning: keyword estimate for '{keyword}' failed to parse, using 0")
            return KeywordMetrics()

        return KeywordMetrics(
            search_volume=coerce_count(data.get("search_volume")),
            difficulty=coerce_difficulty(data.get("difficulty")),
        )
