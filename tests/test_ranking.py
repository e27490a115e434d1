import pytest

from src.dashboard.ranking import (
    Badge,
    Tier,
    attach_article_titles,
    classify,
    format_position,
    tier_counts,
)
from src.models import Article, Ranking


@pytest.mark.parametrize("position, expected", [
    (None, Badge(Tier.NOT_RANKED)),
    (1, Badge(Tier.TOP_10)),
    (10, Badge(Tier.TOP_10)),
    (11, Badge(Tier.TOP_20)),
    (20, Badge(Tier.TOP_20)),
    (21, Badge(Tier.TOP_50)),
    (50, Badge(Tier.TOP_50)),
    (51, Badge(Tier.OTHER, 51)),
    (0, Badge(Tier.NOT_RANKED)),
    (-3, Badge(Tier.NOT_RANKED)),
])
def test_classify_boundaries(position, expected) -> None:
    assert classify(position) == expected


@pytest.mark.parametrize("value", ["", "n/a", float("nan"), True])
def test_classify_malformed_is_not_ranked(value) -> None:
    assert classify(value).tier is Tier.NOT_RANKED


def test_classify_numeric_string() -> None:
    assert classify("12") == Badge(Tier.TOP_20)


def test_classify_is_repeatable() -> None:
    assert classify(73) == classify(73)


@pytest.mark.parametrize("position, label", [
    (None, "Not Ranked"),
    (3, "Top 10"),
    (15, "Top 20"),
    (42, "Top 50"),
    (87, "#87"),
])
def test_badge_labels(position, label) -> None:
    assert classify(position).label == label


def test_format_position() -> None:
    assert format_position(7) == "#7"
    assert format_position(None) == "N/A"
    assert format_position(0) == "N/A"


def test_tier_counts_includes_every_tier() -> None:
    rankings = [
        Ranking(id=str(i), user_id="u1", article_id="a1", keyword="seo", position=p)
        for i, p in enumerate([1, 5, 18, None, 70])
    ]
    counts = tier_counts(rankings)
    assert counts == {
        Tier.NOT_RANKED: 1,
        Tier.TOP_10: 2,
        Tier.TOP_20: 1,
        Tier.TOP_50: 0,
        Tier.OTHER: 1,
    }


def test_attach_article_titles_tolerates_deleted_articles() -> None:
    articles = [Article(id="a1", user_id="u1", title="SEO Guide")]
    rankings = [
        Ranking(id="r1", user_id="u1", article_id="a1", keyword="seo", position=4),
        Ranking(id="r2", user_id="u1", article_id="gone", keyword="seo", position=9),
    ]

    pairs = attach_article_titles(rankings, articles)

    assert [title for _, title in pairs] == ["SEO Guide", "Unknown"]


@pytest.mark.parametrize("position", [51, 2**53 + 1, 10**400])
def test_classify_keeps_large_positions_exact(position: int) -> None:
    badge = classify(position)
    assert badge == Badge(Tier.OTHER, position)
    assert badge.label == f"#{position}"


def test_classify_out_of_float_range_string_is_not_ranked() -> None:
    assert classify("1e400").tier is Tier.NOT_RANKED
