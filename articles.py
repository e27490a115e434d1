#!/usr/bin/env python3
"""Manage saved articles.

Usage:
    python articles.py                        # List all articles
    python articles.py --status published     # List published only
    python articles.py --toggle article_abc   # Publish a draft / unpublish a published article
    python articles.py --delete article_abc   # Delete an article
"""

from __future__ import annotations

import argparse
import sys

from src.actions.articles import delete_article, get_article, toggle_publish
from src.cli import add_user_argument, require_user
from src.dashboard import DashboardSnapshot
from src.models import DRAFT, PUBLISHED, parse_timestamp
from src.store import open_store


def print_articles(articles) -> None:
    print(f"All Articles ({len(articles)})")
    if not articles:
        print("  No articles yet. Run: python generate.py --keywords \"...\"")
    for a in articles:
        created = parse_timestamp(a.created_at)
        date = created.strftime("%Y-%m-%d") if created else "?"
        print(f"  {a.id}  [{a.status:9}] {date}  {a.title}")
        if a.keywords:
            print(f"      keywords: {a.keywords}")


def main():
    parser = argparse.ArgumentParser(description="Manage SEO articles")
    add_user_argument(parser)
    parser.add_argument("--status", choices=[DRAFT, PUBLISHED], help="Filter the list by status")
    parser.add_argument("--toggle", type=str, default="", help="Article id to publish/unpublish")
    parser.add_argument("--delete", type=str, default="", help="Article id to delete")
    parser.add_argument("--yes", action="store_true", help="Don't ask before deleting")
    args = parser.parse_args()

    user_id = require_user(args)
    store = open_store()

    try:
        snapshot = DashboardSnapshot.fetch(store, user_id)
    except Exception as e:
        print(f"Failed to load articles: {e}")
        sys.exit(1)

    if args.toggle:
        try:
            article = toggle_publish(store, get_article(store, user_id, args.toggle))
        except Exception as e:
            print(f"Failed to update article: {e}")
            sys.exit(1)
        snapshot = snapshot.with_article_status(article.id, article.status, article.updated_at)
        print("Article published" if article.is_published else "Article unpublished")

    elif args.delete:
        article = next((a for a in snapshot.articles if a.id == args.delete), None)
        if article is None:
            print(f"Article not found: {args.delete}")
            sys.exit(1)
        if not args.yes:
            answer = input(f"Delete '{article.title}'? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                return
        try:
            delete_article(store, article.id)
        except Exception as e:
            print(f"Failed to delete article: {e}")
            sys.exit(1)
        snapshot = snapshot.without_article(article.id)
        print("Article deleted")

    articles = list(snapshot.articles)
    if args.status:
        articles = [a for a in articles if a.status == args.status]
    print_articles(articles)

    summary = snapshot.summary()
    print(f"\n{summary.published_articles}/{summary.total_articles} published")


if __name__ == "__main__":
    main()
