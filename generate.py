#!/usr/bin/env python3
"""Generate an SEO article with AI and save it as a draft.

Usage:
    python generate.py --keywords "best seo tools, content marketing"
    python generate.py --keywords "seo tools" --title "Best SEO Tools in 2026"
    python generate.py --keywords "seo tools" --no-image       # Skip the featured image
    python generate.py --keywords "seo tools" --no-save        # Preview only
    python generate.py --keywords "seo tools" --download-image # Keep a local copy of the image
    python generate.py --keywords "seo tools" --dry-run        # Show prompts, don't call APIs
"""

from __future__ import annotations

import argparse
import os
import sys
from datetime import datetime, timezone

from src.actions.articles import list_articles, save_article
from src.actions.plans import articles_used, current_plan, remaining_articles
from src.cli import add_user_argument, load_store_settings, require_user
from src.config import ARTICLE_OUTPUT_DIR
from src.models import slugify
from src.pipeline import generate_article
from src.pipeline.export import download_image, render_preview
from src.pipeline.prompts import build_article_prompt, build_image_prompt, build_meta_prompt
from src.store import open_store


def check_allowance(store, user_id: str) -> None:
    """Exit when the plan's monthly article allowance is used up."""
    plan = current_plan(store, user_id)
    now = datetime.now(timezone.utc)
    generated = articles_used(store, user_id, list_articles(store, user_id), now)
    remaining = remaining_articles(plan, generated)
    if remaining is None:
        return
    if remaining == 0:
        print(f"Monthly limit reached on the {plan.name} plan ({plan.monthly_articles} articles).")
        print("Run: python dashboard.py --plans")
        sys.exit(1)
    print(f"  {remaining} articles left this month on the {plan.name} plan")


def main():
    parser = argparse.ArgumentParser(description="Generate an SEO-optimized article")
    add_user_argument(parser)
    parser.add_argument("--keywords", type=str, required=True,
                        help="Target keywords, comma-separated")
    parser.add_argument("--title", type=str, default="",
                        help="Article title (defaults to the keywords)")
    parser.add_argument("--no-image", action="store_true", help="Skip the featured image")
    parser.add_argument("--no-save", action="store_true", help="Preview only, don't save a draft")
    parser.add_argument("--download-image", action="store_true",
                        help="Save the featured image next to the HTML preview")
    parser.add_argument("--dry-run", action="store_true", help="Show prompts without calling APIs")
    args = parser.parse_args()

    if not args.keywords.strip():
        print("Error: please enter keywords")
        sys.exit(1)

    title = args.title.strip() or args.keywords.strip()
    if args.dry_run:
        print("[DRY RUN] Would send these prompts:\n")
        print(build_article_prompt(title, args.keywords.strip()))
        print(f"\n{build_meta_prompt(title, args.keywords.strip())}")
        if not args.no_image:
            print(f"\n{build_image_prompt(title)}")
        return

    user_id = require_user(args)
    store = open_store()
    load_store_settings(store)
    if not args.no_save:
        check_allowance(store, user_id)

    from src.providers.claude import ClaudeTextGenerator

    try:
        text_gen = ClaudeTextGenerator()
        image_gen = None
        if not args.no_image:
            from src.providers.openai_images import OpenAIImageGenerator
            image_gen = OpenAIImageGenerator()
        generated = generate_article(args.keywords, args.title, text_gen, image_gen)
    except Exception as e:
        print(f"Failed to generate article: {e}")
        sys.exit(1)
    print("  OK Article generated")

    # ── Local preview ─────────────────────────────────────────────────
    slug = slugify(generated.title) or "article"
    os.makedirs(ARTICLE_OUTPUT_DIR, exist_ok=True)
    image_src = generated.image_url
    if args.download_image and generated.image_url:
        try:
            image_path = download_image(generated.image_url, ARTICLE_OUTPUT_DIR / f"{slug}.png")
            image_src = image_path.name
            print(f"  Saved image to {image_path}")
        except Exception as e:
            print(f"  Warning: image download failed ({e}), keeping remote URL")
    preview_path = ARTICLE_OUTPUT_DIR / f"{slug}.html"
    preview_path.write_text(render_preview(
        generated.title, generated.content, generated.meta_description, image_src
    ))
    print(f"  Preview saved to {preview_path}")
    print(f"\n  Title: {generated.title}")
    print(f"  Meta:  {generated.meta_description}")
    print(f"  Words: {len(generated.content.split())}")

    if args.no_save:
        return

    try:
        article = save_article(store, user_id, generated, args.keywords)
    except Exception as e:
        print(f"Failed to save article: {e}")
        sys.exit(1)
    print(f"\nArticle saved as draft ({article.id}, /{article.slug})")


if __name__ == "__main__":
    main()
