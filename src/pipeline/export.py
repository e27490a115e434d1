"""Local previews of generated articles: HTML rendering and image download."""

from __future__ import annotations

from pathlib import Path

import markdown as md_lib
import requests

REQUEST_TIMEOUT_SECONDS = 60


def ensure_html(article: str) -> str:
    """If the article already looks like HTML keep it, otherwise convert from markdown."""
    html_indicators = ["<h2>", "<h2 ", "<p>", "<p ", "<a href="]
    if any(indicator in article for indicator in html_indicators):
        return article.strip()

    return md_lib.markdown(article, extensions=["extra", "sane_lists", "smarty"])


def render_preview(title: str, body_markdown: str, meta_description: str = "",
                   image_url: str = "") -> str:
    """Standalone HTML page for reviewing a generated article."""
    parts = ["<!DOCTYPE html>", "<html>", "<head>", '<meta charset="utf-8">',
             f"<title>{title}</title>"]
    if meta_description:
        safe = meta_description.replace('"', "&quot;")
        parts.append(f'<meta name="description" content="{safe}">')
    parts += ["</head>", "<body>", f"<h1>{title}</h1>"]
    if image_url:
        parts.append(f'<img src="{image_url}" alt="{title}">')
    parts += [ensure_html(body_markdown), "</body>", "</html>"]
    return "\n".join(parts)


def download_image(url: str, dest: Path) -> Path:
    """Save a hosted image locally (generated image URLs expire)."""
    response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
    response.raise_for_status()
    dest = Path(dest)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(response.content)
    return dest
