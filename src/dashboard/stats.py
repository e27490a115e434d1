"""Summary statistics for the dashboard cards.

Pure functions over already-fetched, owner-scoped records. Nothing here
talks to the store, and malformed numeric values are excluded rather than
raised on.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from src.config import RECENT_ARTICLES_LIMIT
from src.models import PUBLISHED, Article, Keyword, Ranking, coerce_position, parse_timestamp

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class DashboardSummary:
    """Derived card values. ``avg_position`` is 0 when nothing is ranked."""

    total_articles: int = 0
    published_articles: int = 0
    total_keywords: int = 0
    avg_position: int = 0

    @property
    def publish_rate(self) -> float:
        if not self.total_articles:
            return 0.0
        return self.published_articles / self.total_articles

    def to_record(self) -> dict:
        return {
            "totalArticles": self.total_articles,
            "publishedArticles": self.published_articles,
            "totalKeywords": self.total_keywords,
            "avgPosition": self.avg_position,
        }


def average_position(rankings: Iterable[Ranking]) -> int:
    """Round-half-up mean of the rankings that have a position, else 0.

    Rankings without a valid position are left out of both the sum and the
    count; they are never treated as position 0.
    """
    positions = [
        p for p in (coerce_position(r.position) for r in rankings) if p is not None
    ]
    if not positions:
        return 0
    # exact integer form of floor(total / count + 0.5)
    total, count = sum(positions), len(positions)
    return (2 * total + count) // (2 * count)


def summarize(
    articles: Iterable[Article],
    keywords: Iterable[Keyword],
    rankings: Iterable[Ranking],
) -> DashboardSummary:
    """Compute the dashboard summary for one owner's records.

    Args:
        articles: All of the owner's articles (drafts and published).
        keywords: The owner's tracked keywords.
        rankings: The owner's ranking checks.

    Returns:
        DashboardSummary with counts and the average ranking position.
    """
    articles = list(articles)
    return DashboardSummary(
        total_articles=len(articles),
        published_articles=sum(1 for a in articles if a.status == PUBLISHED),
        total_keywords=sum(1 for _ in keywords),
        avg_position=average_position(rankings),
    )


def _created_key(article: Article) -> datetime:
    return parse_timestamp(article.created_at) or _OLDEST


def recent_articles(
    articles: Iterable[Article], limit: int = RECENT_ARTICLES_LIMIT
) -> list[Article]:
    """Return the ``limit`` newest articles, newest first.

    Articles created at the same instant are ordered by id so the result does
    not depend on the order the store returned them in.
    """
    ordered = sorted(articles, key=lambda a: a.id)
    ordered.sort(key=_created_key, reverse=True)  # stable: keeps id order on ties
    return ordered[:max(limit, 0)]


def count_created_in_month(articles: Iterable[Article], year: int, month: int) -> int:
    """Count articles created in a calendar month (UTC)."""
    count = 0
    for article in articles:
        created = parse_timestamp(article.created_at)
        if created and created.year == year and created.month == month:
            count += 1
    return count
