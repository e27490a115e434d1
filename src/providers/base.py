"""Capability interfaces for the external AI and search services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class KeywordMetrics:
    search_volume: int = 0
    difficulty: int = 0


class TextGenerator(Protocol):
    def generate_text(self, prompt: str, max_tokens: int) -> str: ...


class ImageGenerator(Protocol):
    def generate_image(self, prompt: str, n: int = 1) -> list[dict]:
        """Return one dict per image, each with a ``url`` key."""
        ...


class SearchProvider(Protocol):
    def search(self, query: str, limit: int = 10) -> list[dict]:
        """Return results in rank order, each with ``title``, ``url``, ``snippet``."""
        ...


class KeywordEstimator(Protocol):
    def estimate(self, keyword: str) -> KeywordMetrics: ...
