#!/usr/bin/env python3
"""Track target keywords.

Usage:
    python keywords.py                          # List tracked keywords
    python keywords.py --add "best seo tools"   # Estimate metrics and start tracking
    python keywords.py --delete keyword_abc     # Stop tracking a keyword
"""

from __future__ import annotations

import argparse
import sys

from src.actions.keywords import add_keyword, delete_keyword, list_keywords
from src.cli import add_user_argument, load_store_settings, require_user
from src.models import parse_timestamp
from src.store import open_store


def print_keywords(keywords) -> None:
    print(f"Tracked Keywords ({len(keywords)})")
    if not keywords:
        print("  Add keywords to track their search rankings: python keywords.py --add \"...\"")
    for k in keywords:
        created = parse_timestamp(k.created_at)
        date = created.strftime("%Y-%m-%d") if created else "?"
        bar = "#" * (k.difficulty // 10)
        print(f"  {k.id}  {k.keyword:35.35}  {k.search_volume:>8,}/mo  "
              f"difficulty {k.difficulty:>3} {bar:10}  {date}")


def main():
    parser = argparse.ArgumentParser(description="Manage tracked keywords")
    add_user_argument(parser)
    parser.add_argument("--add", type=str, default="", help="Keyword to add")
    parser.add_argument("--delete", type=str, default="", help="Keyword id to delete")
    args = parser.parse_args()

    user_id = require_user(args)
    store = open_store()

    if args.add:
        if not args.add.strip():
            print("Error: keyword is empty")
            sys.exit(1)
        load_store_settings(store)
        from src.providers.claude import ClaudeKeywordEstimator
        from src.providers.google_search import GoogleSearchProvider

        try:
            estimator = ClaudeKeywordEstimator(search=GoogleSearchProvider())
            keyword = add_keyword(store, user_id, args.add, estimator)
        except Exception as e:
            print(f"Failed to add keyword: {e}")
            sys.exit(1)
        print(f"Keyword added: {keyword.keyword} "
              f"({keyword.search_volume:,}/mo, difficulty {keyword.difficulty})")

    elif args.delete:
        try:
            delete_keyword(store, args.delete)
        except Exception as e:
            print(f"Failed to delete keyword: {e}")
            sys.exit(1)
        print("Keyword deleted")

    try:
        print_keywords(list_keywords(store, user_id))
    except Exception as e:
        print(f"Failed to load keywords: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
