"""Generate an article draft: body, meta description and featured image.

Three calls, in order:
1. Article body (text model, markdown)
2. Meta description (text model, short)
3. Featured image (image model, one 16:9 image)
"""

from __future__ import annotations

from dataclasses import dataclass

import src.config as config
from src.pipeline.prompts import build_article_prompt, build_image_prompt, build_meta_prompt
from src.providers.base import ImageGenerator, TextGenerator


@dataclass(frozen=True)
class GeneratedArticle:
    title: str
    content: str
    meta_description: str
    image_url: str = ""


def generate_article(
    keywords: str,
    title: str,
    text_gen: TextGenerator,
    image_gen: ImageGenerator | None = None,
) -> GeneratedArticle:
    """Generate an article preview for the given keywords.

    Args:
        keywords: Comma-separated target keywords (required).
        title: Article title; blank means use the keywords as the title.
        text_gen: Text generation service.
        image_gen: Image generation service, or None to skip the image.

    Returns:
        GeneratedArticle ready to be reviewed and saved.
    """
    keywords = keywords.strip()
    if not keywords:
        raise ValueError("Please enter keywords")

    article_title = title.strip() or keywords

    print(f"  -> Generating article content for '{article_title}'...")
    content = text_gen.generate_text(
        build_article_prompt(article_title, keywords),
        max_tokens=config.CONTENT_MAX_TOKENS,
    )

    print("  -> Generating meta description...")
    meta = text_gen.generate_text(
        build_meta_prompt(article_title, keywords),
        max_tokens=config.META_MAX_TOKENS,
    )

    image_url = ""
    if image_gen is not None:
        print("  -> Generating featured image...")
        images = image_gen.generate_image(build_image_prompt(article_title), n=1)
        image_url = images[0].get("url", "") if images else ""

    return GeneratedArticle(
        title=article_title,
        content=content,
        meta_description=meta.strip().strip('"'),
        image_url=image_url or "",
    )
