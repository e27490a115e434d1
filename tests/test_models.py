from datetime import datetime, timezone

import pytest

from src.models import (
    Article,
    Keyword,
    Ranking,
    Subscription,
    coerce_position,
    parse_timestamp,
    slugify,
)


@pytest.mark.parametrize("title, slug", [
    ("Best SEO Tools!! 2024", "best-seo-tools-2024"),
    ("  --Hello, World--  ", "hello-world"),
    ("Content Marketing: A Guide", "content-marketing-a-guide"),
    ("!!!", ""),
])
def test_slugify(title: str, slug: str) -> None:
    assert slugify(title) == slug


@pytest.mark.parametrize("value, expected", [
    (None, None),
    ("", None),
    ("abc", None),
    (0, None),
    (-2, None),
    (7, 7),
    ("7", 7),
    (3.5, 4),
    (12.4, 12),
])
def test_coerce_position(value, expected) -> None:
    assert coerce_position(value) == expected


def test_parse_timestamp_variants() -> None:
    expected = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert parse_timestamp("2026-03-01T12:00:00Z") == expected
    assert parse_timestamp("2026-03-01T14:00:00+02:00") == expected
    assert parse_timestamp("2026-03-01T12:00:00") == expected
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp(None) is None


def test_article_from_sheet_record() -> None:
    record = {
        "id": "article_1", "userId": "u1", "title": "SEO Guide", "content": "Body",
        "slug": "seo-guide", "keywords": "seo, guide ,", "metaDescription": "",
        "featuredImage": "https://img.example/1.png", "status": "Published",
        "createdAt": "2026-03-01T12:00:00Z", "updatedAt": "2026-03-01T12:00:00Z",
    }

    article = Article.from_record(record)

    assert article.is_published
    assert article.meta_description is None
    assert article.keyword_list == ["seo", "guide"]
    assert Article.from_record(article.to_record()) == article


def test_article_unknown_status_is_draft() -> None:
    assert Article.from_record({"id": "a", "status": "archived"}).status == "draft"


def test_keyword_metrics_are_coerced() -> None:
    keyword = Keyword.from_record({
        "id": "k1", "userId": "u1", "keyword": "seo", "searchVolume": "-5", "difficulty": "140",
    })
    assert keyword.search_volume == 0
    assert keyword.difficulty == 100

    keyword = Keyword.from_record({"id": "k2", "searchVolume": "2400", "difficulty": "oops"})
    assert keyword.search_volume == 2400
    assert keyword.difficulty == 0


def test_ranking_blank_position_is_absent() -> None:
    ranking = Ranking.from_record({"id": "r1", "articleId": "a1", "keyword": "seo", "position": ""})
    assert ranking.position is None
    assert ranking.to_record()["position"] is None


def test_subscription_defaults() -> None:
    sub = Subscription.from_record({"id": "s1", "userId": "u1", "planType": "PRO"})
    assert sub.plan_type == "pro"
    assert sub.is_active
    assert sub.articles_generated == 0


@pytest.mark.parametrize("value, expected", [
    (50.5, 51),
    ("49.5", 50),
    (100.4, 100),
    (10**400, 100),
    (-(10**400), 0),
])
def test_difficulty_rounds_half_up_and_clamps(value, expected) -> None:
    assert Keyword.from_record({"id": "k", "difficulty": value}).difficulty == expected


def test_huge_counts_do_not_overflow() -> None:
    assert Keyword.from_record({"id": "k", "searchVolume": 10**400}).search_volume == 10**400
    assert coerce_position(-(10**400)) is None
