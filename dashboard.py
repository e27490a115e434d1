#!/usr/bin/env python3
"""Show the dashboard: stats cards, recent articles, rankings and plan.

Usage:
    python dashboard.py                  # Stats + recent articles
    python dashboard.py --rankings       # Also list every ranking with its badge
    python dashboard.py --plans          # Show current plan and the plan catalog
    python dashboard.py --upgrade pro    # Request a plan upgrade
    python dashboard.py --json           # Print the summary as JSON
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone

from src.actions.plans import PLANS, articles_used, current_plan, remaining_articles, upgrade
from src.cli import add_user_argument, require_user
from src.dashboard import DashboardSnapshot, classify, format_position
from src.dashboard.ranking import attach_article_titles, tier_counts
from src.dashboard.stats import count_created_in_month
from src.models import parse_timestamp
from src.store import open_store


def _date(value: str) -> str:
    parsed = parse_timestamp(value)
    return parsed.strftime("%Y-%m-%d") if parsed else "?"


def print_summary(snapshot: DashboardSnapshot) -> None:
    summary = snapshot.summary()
    now = datetime.now(timezone.utc)
    this_month = count_created_in_month(snapshot.articles, now.year, now.month)

    print(f"\n{'='*60}")
    print("DASHBOARD")
    print(f"{'='*60}")
    print(f"  Total articles:  {summary.total_articles}  ({summary.published_articles} published, "
          f"{summary.publish_rate:.0%})")
    print(f"  Keywords:        {summary.total_keywords}  (being tracked)")
    print(f"  Avg. position:   {format_position(summary.avg_position)}  (across all keywords)")
    print(f"  This month:      {this_month}  (articles generated)")

    print(f"\nRECENT ARTICLES")
    recent = snapshot.recent()
    if not recent:
        print("  No articles yet. Run: python generate.py --keywords \"...\"")
    for article in recent:
        print(f"  [{article.status:9}] {_date(article.created_at)}  {article.title}")


def print_rankings(snapshot: DashboardSnapshot) -> None:
    print(f"\nRANKINGS ({len(snapshot.rankings)})")
    if not snapshot.rankings:
        print("  No rankings yet. Run: python check_rankings.py")
        return
    for ranking, title in attach_article_titles(snapshot.rankings, snapshot.articles):
        badge = classify(ranking.position)
        print(f"  {format_position(ranking.position):>5}  {badge.label:10}  "
              f"{ranking.keyword:30.30}  {title:40.40}  {_date(ranking.checked_at)}")
    counts = tier_counts(snapshot.rankings)
    print("  " + ", ".join(f"{tier.value}: {n}" for tier, n in counts.items()))


def print_plans(store, user_id: str, snapshot: DashboardSnapshot) -> None:
    plan = current_plan(store, user_id)
    now = datetime.now(timezone.utc)
    remaining = remaining_articles(plan, articles_used(store, user_id, snapshot.articles, now))

    print(f"\nCURRENT PLAN: {plan.name} ({plan.price_label})")
    if remaining is None:
        print("  You have access to all features")
    else:
        print(f"  {remaining} articles left this month. Upgrade to unlock unlimited articles")
    print("\nPLANS")
    for p in PLANS:
        marker = " (most popular)" if p.popular else ""
        print(f"  {p.name} {p.price_label}{marker}: {p.description}")
        for feature in p.features:
            print(f"    - {feature}")


def main():
    parser = argparse.ArgumentParser(description="SEO content dashboard")
    add_user_argument(parser)
    parser.add_argument("--rankings", action="store_true", help="List rankings with tier badges")
    parser.add_argument("--plans", action="store_true", help="Show subscription plans")
    parser.add_argument("--upgrade", type=str, default="", help="Request an upgrade to this plan id")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    args = parser.parse_args()

    user_id = require_user(args)

    try:
        store = open_store()
        snapshot = DashboardSnapshot.fetch(store, user_id)
    except Exception as e:
        print(f"Failed to load dashboard data: {e}")
        sys.exit(1)

    if args.json:
        print(json.dumps(snapshot.summary().to_record(), indent=2))
        return

    if args.upgrade:
        try:
            print(upgrade(current_plan(store, user_id).id, args.upgrade))
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            sys.exit(1)
        return

    print_summary(snapshot)
    if args.rankings:
        print_rankings(snapshot)
    if args.plans:
        print_plans(store, user_id, snapshot)


if __name__ == "__main__":
    main()
