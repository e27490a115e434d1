"""Article generation: prompts, Claude/OpenAI calls and local export."""

from src.pipeline.generator import GeneratedArticle, generate_article

__all__ = ["GeneratedArticle", "generate_article"]
