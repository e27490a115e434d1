"""Check where published articles rank for tracked keywords."""

from __future__ import annotations

from urllib.parse import urlparse

import src.config as config
from src.actions.articles import list_articles
from src.actions.keywords import list_keywords
from src.models import PUBLISHED, Ranking, new_id, utc_now_iso
from src.providers.base import SearchProvider
from src.store.base import RANKINGS, DocumentStore


def normalize_url(url: str) -> str:
    """Comparable form of a URL: no scheme, no 'www.', lower-case host, no trailing slash."""
    url = url.strip()
    if "://" not in url:
        url = "http://" + url
    parsed = urlparse(url)
    host = parsed.netloc.lower()
    if host.startswith("www."):
        host = host[4:]
    path = parsed.path.rstrip("/")
    query = f"?{parsed.query}" if parsed.query else ""
    return f"{host}{path}{query}"


def find_position(results: list[dict], url: str) -> int | None:
    """1-based rank of ``url`` in ``results``, None if it is not in the window."""
    target = normalize_url(url)
    for i, result in enumerate(results, 1):
        if result.get("url") and normalize_url(result["url"]) == target:
            return i
    return None


def article_url(site_url: str, slug: str) -> str:
    return f"{site_url.rstrip('/')}/{slug}"


def check_rankings(
    store: DocumentStore,
    search: SearchProvider,
    user_id: str,
    site_url: str | None = None,
    max_articles: int | None = None,
    max_keywords: int | None = None,
    result_limit: int | None = None,
    now: str | None = None,
) -> list[Ranking]:
    """Search each tracked keyword and record where each published article ranks.

    Args:
        store: Document store holding the owner's records.
        search: Search service used to fetch the result window.
        user_id: Owner whose articles and keywords are checked.
        site_url: Base URL the articles are published under.
        max_articles: How many published articles to check.
        max_keywords: How many keywords to check per article.
        result_limit: Size of the result window; deeper positions are "not ranked".
        now: Timestamp recorded as checkedAt.

    Returns:
        The rankings that were stored. Pairs whose search failed are skipped.
    """
    site_url = site_url or config.SITE_URL
    max_articles = config.RANKING_MAX_ARTICLES if max_articles is None else max_articles
    max_keywords = config.RANKING_MAX_KEYWORDS if max_keywords is None else max_keywords
    result_limit = config.RANKING_RESULT_LIMIT if result_limit is None else result_limit

    articles = list_articles(store, user_id, status=PUBLISHED)
    keywords = list_keywords(store, user_id)
    if not articles or not keywords:
        raise ValueError("You need published articles and keywords to check rankings")

    checked_at = now or utc_now_iso()
    results_cache: dict[str, list[dict]] = {}
    rankings = []
    for article in articles[:max_articles]:
        url = article_url(site_url, article.slug)
        for keyword in keywords[:max_keywords]:
            try:
                if keyword.keyword not in results_cache:
                    print(f"  -> Searching '{keyword.keyword}' (top {result_limit})...")
                    results_cache[keyword.keyword] = search.search(keyword.keyword, limit=result_limit)
                position = find_position(results_cache[keyword.keyword], url)
                ranking = Ranking(
                    id=new_id("ranking"),
                    user_id=user_id,
                    article_id=article.id,
                    keyword=keyword.keyword,
                    position=position,
                    url=url,
                    checked_at=checked_at,
                )
                store.create(RANKINGS, ranking.to_record())
                rankings.append(ranking)
            except Exception as e:
                print(f"  Warning: ranking check failed for '{article.title}' / '{keyword.keyword}': {e}")
    return rankings


def list_rankings(store: DocumentStore, user_id: str) -> list[Ranking]:
    records = store.list(RANKINGS, where={"userId": user_id}, order_by=("checkedAt", "desc"))
    return [Ranking.from_record(r) for r in records]
