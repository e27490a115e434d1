"""Map search positions to the tier badges shown next to each ranking."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from src.models import Article, Ranking, coerce_position


class Tier(Enum):
    NOT_RANKED = "Not Ranked"
    TOP_10 = "Top 10"
    TOP_20 = "Top 20"
    TOP_50 = "Top 50"
    OTHER = "Other"


# Upper bound (inclusive) of each tier, checked in order
TIER_BOUNDS = (
    (10, Tier.TOP_10),
    (20, Tier.TOP_20),
    (50, Tier.TOP_50),
)


@dataclass(frozen=True)
class Badge:
    """A ranking tier. ``position`` is only carried for ``Tier.OTHER``."""

    tier: Tier
    position: int | None = None

    @property
    def label(self) -> str:
        if self.tier is Tier.OTHER:
            return f"#{self.position}"
        return self.tier.value


def classify(position) -> Badge:
    """Classify a search position into a badge.

    Absent, zero, negative and non-numeric positions are all Not Ranked.
    """
    position = coerce_position(position)
    if position is None:
        return Badge(Tier.NOT_RANKED)
    for bound, tier in TIER_BOUNDS:
        if position <= bound:
            return Badge(tier)
    return Badge(Tier.OTHER, position)


def format_position(position) -> str:
    """'#12' for a valid position, 'N/A' otherwise (0 is the no-data sentinel)."""
    position = coerce_position(position)
    return f"#{position}" if position is not None else "N/A"


def tier_counts(rankings: Iterable[Ranking]) -> dict[Tier, int]:
    """Number of rankings in each tier, every tier present (zero if empty)."""
    counts = Counter(classify(r.position).tier for r in rankings)
    return {tier: counts.get(tier, 0) for tier in Tier}


def attach_article_titles(
    rankings: Iterable[Ranking], articles: Iterable[Article]
) -> list[tuple[Ranking, str]]:
    """Pair each ranking with its article title.

    Rankings hold a weak reference to the article; deleted articles show as
    'Unknown'.
    """
    titles = {a.id: a.title for a in articles}
    return [(r, titles.get(r.article_id) or "Unknown") for r in rankings]
