"""One owner's records as fetched from the store, plus optimistic edits.

After a store mutation succeeds the caller applies the same change to its
snapshot and re-runs the aggregation instead of refetching everything.
Snapshots are immutable: every edit returns a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from src.config import RECENT_ARTICLES_LIMIT
from src.dashboard.stats import DashboardSummary, recent_articles, summarize
from src.models import Article, Keyword, Ranking
from src.store.base import ARTICLES, KEYWORDS, RANKINGS, DocumentStore


@dataclass(frozen=True)
class DashboardSnapshot:
    user_id: str
    articles: tuple[Article, ...] = ()
    keywords: tuple[Keyword, ...] = ()
    rankings: tuple[Ranking, ...] = ()

    @classmethod
    def fetch(cls, store: DocumentStore, user_id: str) -> DashboardSnapshot:
        """Load everything the dashboard shows for ``user_id``."""
        where = {"userId": user_id}
        articles = store.list(ARTICLES, where=where, order_by=("createdAt", "desc"))
        keywords = store.list(KEYWORDS, where=where, order_by=("createdAt", "desc"))
        rankings = store.list(RANKINGS, where=where, order_by=("checkedAt", "desc"))
        return cls(
            user_id=user_id,
            articles=tuple(Article.from_record(r) for r in articles),
            keywords=tuple(Keyword.from_record(r) for r in keywords),
            rankings=tuple(Ranking.from_record(r) for r in rankings),
        )

    def summary(self) -> DashboardSummary:
        return summarize(self.articles, self.keywords, self.rankings)

    def recent(self, limit: int = RECENT_ARTICLES_LIMIT) -> list[Article]:
        return recent_articles(self.articles, limit)

    # ── Optimistic edits ──────────────────────────────────────────────────

    def with_article(self, article: Article) -> DashboardSnapshot:
        return replace(self, articles=(article,) + self.articles)

    def without_article(self, article_id: str) -> DashboardSnapshot:
        return replace(
            self, articles=tuple(a for a in self.articles if a.id != article_id)
        )

    def with_article_status(
        self, article_id: str, status: str, updated_at: str | None = None
    ) -> DashboardSnapshot:
        return replace(
            self,
            articles=tuple(
                a.with_status(status, updated_at) if a.id == article_id else a
                for a in self.articles
            ),
        )

    def with_keyword(self, keyword: Keyword) -> DashboardSnapshot:
        return replace(self, keywords=(keyword,) + self.keywords)

    def without_keyword(self, keyword_id: str) -> DashboardSnapshot:
        return replace(
            self, keywords=tuple(k for k in self.keywords if k.id != keyword_id)
        )

    def with_rankings(self, rankings: list[Ranking]) -> DashboardSnapshot:
        return replace(self, rankings=tuple(rankings) + self.rankings)
