#!/usr/bin/env python3
"""Check search rankings for published articles against tracked keywords.

Usage:
    python check_rankings.py                     # First 3 published articles x first 2 keywords
    python check_rankings.py --articles 10 --keywords 5
    python check_rankings.py --site https://blog.example.com
"""

from __future__ import annotations

import argparse
import sys

import src.config as config
from src.actions.rankings import check_rankings, list_rankings
from src.cli import add_user_argument, require_user
from src.dashboard import classify, format_position
from src.dashboard.stats import average_position
from src.store import open_store


def main():
    parser = argparse.ArgumentParser(description="Check search engine positions")
    add_user_argument(parser)
    parser.add_argument("--articles", type=int, default=config.RANKING_MAX_ARTICLES,
                        help="Number of published articles to check")
    parser.add_argument("--keywords", type=int, default=config.RANKING_MAX_KEYWORDS,
                        help="Number of keywords to check per article")
    parser.add_argument("--depth", type=int, default=config.RANKING_RESULT_LIMIT,
                        help="Search results to scan (max 100)")
    parser.add_argument("--site", type=str, default=config.SITE_URL,
                        help="Base URL the articles are published under")
    args = parser.parse_args()

    user_id = require_user(args)
    store = open_store()

    from src.providers.google_search import GoogleSearchProvider

    print("Checking rankings... This may take a moment")
    try:
        rankings = check_rankings(
            store,
            GoogleSearchProvider(),
            user_id,
            site_url=args.site,
            max_articles=args.articles,
            max_keywords=args.keywords,
            result_limit=args.depth,
        )
    except Exception as e:
        print(f"Failed to check rankings: {e}")
        sys.exit(1)

    print(f"\nRankings updated! ({len(rankings)} checks)")
    for r in rankings:
        print(f"  {format_position(r.position):>5}  {classify(r.position).label:10}  "
              f"{r.keyword}  {r.url}")

    history = list_rankings(store, user_id)
    print(f"\nAverage position over {len(history)} checks: "
          f"{format_position(average_position(history))}")


if __name__ == "__main__":
    main()
