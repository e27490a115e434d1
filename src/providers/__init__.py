"""AI text/image generation, web search and keyword metric providers."""

from src.providers.base import (
    ImageGenerator,
    KeywordEstimator,
    KeywordMetrics,
    SearchProvider,
    TextGenerator,
)

__all__ = [
    "ImageGenerator",
    "KeywordEstimator",
    "KeywordMetrics",
    "SearchProvider",
    "TextGenerator",
]
