"""Prompt builders for article, meta description, image and keyword estimates."""

from __future__ import annotations

from src.config import KEYWORD_RESULT_LIMIT


def build_article_prompt(title: str, keywords: str) -> str:
    """Prompt for the article body (markdown, 1500-2000 words)."""
    return f"""Write a comprehensive, SEO-optimized blog article about "{title}".

Target keywords: {keywords}

Requirements:
- Length: 1500-2000 words
- Include an engaging introduction
- Use clear headings and subheadings (H2, H3)
- Write in a conversational yet professional tone
- Include actionable tips and insights
- Add a compelling conclusion
- Optimize for the target keywords naturally

Format the article in markdown with proper headings."""


def build_meta_prompt(title: str, keywords: str) -> str:
    return (
        f'Write a compelling SEO meta description (150-160 characters) for this '
        f'article title: "{title}". Include the main keyword: {keywords}\n\n'
        f"Respond with the meta description only."
    )


def build_image_prompt(title: str) -> str:
    return (
        f"Professional blog header image for article about {title}. "
        f"Modern, clean, high-quality, relevant imagery. 16:9 aspect ratio."
    )


def build_keyword_estimate_prompt(keyword: str, results: list[dict]) -> str:
    """Ask for search volume and difficulty, grounded on the current top results."""
    top = results[:KEYWORD_RESULT_LIMIT]
    if top:
        listing = "\n".join(
            f"  {i + 1}. {r.get('title', '')} ({r.get('url', '')})"
            for i, r in enumerate(top)
        )
    else:
        listing = "  (no results returned)"

    return f"""You are an SEO analyst estimating metrics for the keyword "{keyword}".

Current top search results:
{listing}

Estimate:
- search_volume: average monthly searches (integer, 0 or more)
- difficulty: how hard it is to reach the first page (integer 0-100), judged by the authority of the ranking domains

Respond with ONLY a JSON object. Example: {{"search_volume": 2400, "difficulty": 45}}

JSON object:"""
