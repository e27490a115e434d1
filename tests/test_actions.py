import pytest

from src.actions.articles import (
    delete_article,
    get_article,
    list_articles,
    save_article,
    toggle_publish,
)
from src.actions.keywords import add_keyword, delete_keyword, list_keywords
from src.actions.rankings import check_rankings, find_position, list_rankings, normalize_url
from src.pipeline.generator import GeneratedArticle
from src.providers.base import KeywordMetrics
from src.store.base import ARTICLES, KEYWORDS, RANKINGS, MemoryStore

NOW = "2026-03-01T12:00:00+00:00"


class FixedEstimator:
    def __init__(self, metrics: KeywordMetrics):
        self.metrics = metrics
        self.seen: list[str] = []

    def estimate(self, keyword: str) -> KeywordMetrics:
        self.seen.append(keyword)
        return self.metrics


class FakeSearch:
    def __init__(self, results: dict[str, list[str]], failing: tuple[str, ...] = ()):
        self.results = results
        self.failing = failing
        self.queries: list[tuple[str, int]] = []

    def search(self, query: str, limit: int = 10) -> list[dict]:
        self.queries.append((query, limit))
        if query in self.failing:
            raise RuntimeError("quota exceeded")
        return [{"title": "", "url": url, "snippet": ""} for url in self.results.get(query, [])][:limit]


def _generated(title: str = "Best SEO Tools!") -> GeneratedArticle:
    return GeneratedArticle(title=title, content="Body", meta_description="Meta",
                            image_url="https://img.example/1.png")


# ── Articles ──────────────────────────────────────────────────────────────


def test_save_article_stores_draft_with_slug() -> None:
    store = MemoryStore()

    article = save_article(store, "u1", _generated(), " seo, tools ", now=NOW)

    assert article.status == "draft"
    assert article.slug == "best-seo-tools"
    assert article.keywords == "seo, tools"
    assert article.id.startswith("article_")
    stored = store.list(ARTICLES)[0]
    assert stored["userId"] == "u1"
    assert stored["featuredImage"] == "https://img.example/1.png"
    assert stored["createdAt"] == stored["updatedAt"] == NOW


def test_toggle_publish_round_trip() -> None:
    store = MemoryStore()
    article = save_article(store, "u1", _generated(), "seo", now=NOW)

    published = toggle_publish(store, article, now="2026-03-02T00:00:00+00:00")
    assert published.is_published
    assert store.list(ARTICLES)[0]["status"] == "published"

    draft = toggle_publish(store, published)
    assert draft.status == "draft"
    assert store.list(ARTICLES)[0]["status"] == "draft"


def test_list_filter_get_and_delete() -> None:
    store = MemoryStore()
    first = save_article(store, "u1", _generated("One"), "seo", now="2026-03-01T00:00:00+00:00")
    second = save_article(store, "u1", _generated("Two"), "seo", now="2026-03-02T00:00:00+00:00")
    save_article(store, "u2", _generated("Other"), "seo", now=NOW)
    toggle_publish(store, first)

    assert [a.title for a in list_articles(store, "u1")] == ["Two", "One"]
    assert [a.title for a in list_articles(store, "u1", status="published")] == ["One"]
    assert get_article(store, "u1", second.id).title == "Two"

    delete_article(store, second.id)
    with pytest.raises(KeyError):
        get_article(store, "u1", second.id)


# ── Keywords ──────────────────────────────────────────────────────────────


def test_add_keyword_clamps_estimates() -> None:
    store = MemoryStore()
    estimator = FixedEstimator(KeywordMetrics(search_volume=-10, difficulty=250))

    keyword = add_keyword(store, "u1", "  seo tools ", estimator, now=NOW)

    assert estimator.seen == ["seo tools"]
    assert keyword.keyword == "seo tools"
    assert keyword.search_volume == 0
    assert keyword.difficulty == 100
    assert list_keywords(store, "u1") == [keyword]

    delete_keyword(store, keyword.id)
    assert store.list(KEYWORDS) == []


def test_blank_keyword_is_rejected() -> None:
    estimator = FixedEstimator(KeywordMetrics())
    with pytest.raises(ValueError, match="Keyword is empty"):
        add_keyword(MemoryStore(), "u1", "   ", estimator)
    assert estimator.seen == []


# ── Rankings ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("a, b", [
    ("https://www.example.com/guide/", "http://example.com/guide"),
    ("example.com/guide", "https://EXAMPLE.com/guide"),
])
def test_normalize_url_ignores_scheme_www_and_slash(a: str, b: str) -> None:
    assert normalize_url(a) == normalize_url(b)


def test_find_position_is_one_based() -> None:
    results = [{"url": "https://a.com/x"}, {"url": ""}, {"url": "https://www.example.com/guide/"}]
    assert find_position(results, "https://example.com/guide") == 3
    assert find_position(results, "https://example.com/other") is None
    assert find_position([], "https://example.com/guide") is None


def _published(store: MemoryStore, title: str) -> None:
    article = save_article(store, "u1", _generated(title), "seo", now=NOW)
    toggle_publish(store, article, now=NOW)


def test_check_rankings_records_positions() -> None:
    store = MemoryStore()
    _published(store, "SEO Guide")
    add_keyword(store, "u1", "seo", FixedEstimator(KeywordMetrics()), now=NOW)
    search = FakeSearch({"seo": ["https://other.com", "https://example.com/seo-guide"]})

    rankings = check_rankings(store, search, "u1", site_url="https://example.com/",
                              result_limit=50, now=NOW)

    assert [r.position for r in rankings] == [2]
    assert rankings[0].url == "https://example.com/seo-guide"
    assert search.queries == [("seo", 50)]
    assert list_rankings(store, "u1") == rankings


def test_check_rankings_absent_url_is_not_ranked() -> None:
    store = MemoryStore()
    _published(store, "SEO Guide")
    add_keyword(store, "u1", "seo", FixedEstimator(KeywordMetrics()), now=NOW)

    rankings = check_rankings(store, FakeSearch({}), "u1", site_url="https://example.com", now=NOW)

    assert rankings[0].position is None
    assert store.list(RANKINGS)[0]["position"] is None


def test_check_rankings_skips_failing_pairs_and_caches_searches() -> None:
    store = MemoryStore()
    _published(store, "First")
    _published(store, "Second")
    add_keyword(store, "u1", "good", FixedEstimator(KeywordMetrics()), now="2026-03-01T00:00:00+00:00")
    add_keyword(store, "u1", "bad", FixedEstimator(KeywordMetrics()), now="2026-03-02T00:00:00+00:00")
    search = FakeSearch({"good": ["https://example.com/first"]}, failing=("bad",))

    rankings = check_rankings(store, search, "u1", site_url="https://example.com", now=NOW)

    assert sorted(r.keyword for r in rankings) == ["good", "good"]
    assert len(store.list(RANKINGS)) == 2
    assert [q for q, _ in search.queries].count("good") == 1


def test_check_rankings_limits_pairs() -> None:
    store = MemoryStore()
    for title in ("One", "Two", "Three", "Four"):
        _published(store, title)
    for i, text in enumerate(("a", "b", "c")):
        add_keyword(store, "u1", text, FixedEstimator(KeywordMetrics()), now=f"2026-03-0{i + 1}T00:00:00+00:00")

    rankings = check_rankings(store, FakeSearch({}), "u1", site_url="https://example.com",
                              max_articles=3, max_keywords=2, now=NOW)

    assert len(rankings) == 6


def test_check_rankings_requires_articles_and_keywords() -> None:
    store = MemoryStore()
    save_article(store, "u1", _generated(), "seo", now=NOW)  # draft only
    add_keyword(store, "u1", "seo", FixedEstimator(KeywordMetrics()), now=NOW)

    with pytest.raises(ValueError, match="published articles and keywords"):
        check_rankings(store, FakeSearch({}), "u1")
