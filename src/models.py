"""Records read from and written to the document store.

Stored documents use camelCase keys; the dataclasses use snake_case.
Numeric fields arrive from spreadsheets, JSON files and estimators, so
``from_record`` coerces them instead of trusting their type.
"""

from __future__ import annotations

import math
import re
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone

DRAFT = "draft"
PUBLISHED = "published"


# ── Helpers ───────────────────────────────────────────────────────────────


def slugify(title: str) -> str:
    """Derive a URL-safe slug from an article title.

    Example: 'Best SEO Tools!! 2024' -> 'best-seo-tools-2024'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
    return slug.strip("-")


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Naive values are read as UTC. Returns None for missing or malformed input.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_number(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_position(value) -> int | None:
    """Normalize a search position: a positive int, or None when absent/invalid.

    Fractional positions (e.g. averaged over several checks) round half up.
    Integers are kept exact, however large.
    """
    if _is_int(value):
        return value if value >= 1 else None
    number = _to_number(value)
    if number is None:
        return None
    position = math.floor(number + 0.5)
    return position if position >= 1 else None


def coerce_count(value) -> int:
    """Non-negative integer, 0 when malformed."""
    if _is_int(value):
        return max(value, 0)
    number = _to_number(value)
    if number is None or number < 0:
        return 0
    return int(number)


def coerce_difficulty(value) -> int:
    """Integer clamped to 0-100 (halves round up), 0 when malformed."""
    if _is_int(value):
        return max(0, min(100, value))
    number = _to_number(value)
    if number is None:
        return 0
    return max(0, min(100, math.floor(number + 0.5)))


def _optional(value) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


# ── Records ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class User:
    id: str
    email: str = ""


@dataclass(frozen=True)
class Article:
    id: str
    user_id: str
    title: str
    content: str = ""
    slug: str = ""
    keywords: str = ""
    meta_description: str | None = None
    featured_image: str | None = None
    status: str = DRAFT
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_published(self) -> bool:
        return self.status == PUBLISHED

    @property
    def keyword_list(self) -> list[str]:
        """Comma-separated keywords as a list."""
        return [k.strip() for k in self.keywords.split(",") if k.strip()]

    def with_status(self, status: str, updated_at: str | None = None) -> Article:
        return replace(self, status=status, updated_at=updated_at or self.updated_at)

    @classmethod
    def from_record(cls, record: dict) -> Article:
        status = str(record.get("status") or DRAFT).strip().lower()
        return cls(
            id=str(record.get("id", "")),
            user_id=str(record.get("userId", "")),
            title=str(record.get("title", "")),
            content=str(record.get("content") or ""),
            slug=str(record.get("slug") or ""),
            keywords=str(record.get("keywords") or ""),
            meta_description=_optional(record.get("metaDescription")),
            featured_image=_optional(record.get("featuredImage")),
            status=PUBLISHED if status == PUBLISHED else DRAFT,
            created_at=str(record.get("createdAt") or ""),
            updated_at=str(record.get("updatedAt") or ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "content": self.content,
            "slug": self.slug,
            "keywords": self.keywords,
            "metaDescription": self.meta_description,
            "featuredImage": self.featured_image,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class Keyword:
    id: str
    user_id: str
    keyword: str
    search_volume: int = 0
    difficulty: int = 0
    created_at: str = ""

    @classmethod
    def from_record(cls, record: dict) -> Keyword:
        return cls(
            id=str(record.get("id", "")),
            user_id=str(record.get("userId", "")),
            keyword=str(record.get("keyword", "")),
            search_volume=coerce_count(record.get("searchVolume")),
            difficulty=coerce_difficulty(record.get("difficulty")),
            created_at=str(record.get("createdAt") or ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "keyword": self.keyword,
            "searchVolume": self.search_volume,
            "difficulty": self.difficulty,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class Ranking:
    id: str
    user_id: str
    article_id: str
    keyword: str
    position: int | None = None
    url: str = ""
    checked_at: str = ""

    @classmethod
    def from_record(cls, record: dict) -> Ranking:
        return cls(
            id=str(record.get("id", "")),
            user_id=str(record.get("userId", "")),
            article_id=str(record.get("articleId", "")),
            keyword=str(record.get("keyword", "")),
            position=coerce_position(record.get("position")),
            url=str(record.get("url") or ""),
            checked_at=str(record.get("checkedAt") or ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "articleId": self.article_id,
            "keyword": self.keyword,
            "position": self.position,
            "url": self.url,
            "checkedAt": self.checked_at,
        }


@dataclass(frozen=True)
class Subscription:
    id: str
    user_id: str
    plan_type: str = "free"  # free | starter | pro | enterprise
    status: str = "active"  # active | canceled | past_due
    stripe_customer_id: str | None = None
    stripe_subscription_id: str | None = None
    current_period_start: str | None = None
    current_period_end: str | None = None
    articles_generated: int = 0
    created_at: str = ""
    updated_at: str = ""

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @classmethod
    def from_record(cls, record: dict) -> Subscription:
        return cls(
            id=str(record.get("id", "")),
            user_id=str(record.get("userId", "")),
            plan_type=str(record.get("planType") or "free").strip().lower(),
            status=str(record.get("status") or "active").strip().lower(),
            stripe_customer_id=_optional(record.get("stripeCustomerId")),
            stripe_subscription_id=_optional(record.get("stripeSubscriptionId")),
            current_period_start=_optional(record.get("currentPeriodStart")),
            current_period_end=_optional(record.get("currentPeriodEnd")),
            articles_generated=coerce_count(record.get("articlesGenerated")),
            created_at=str(record.get("createdAt") or ""),
            updated_at=str(record.get("updatedAt") or ""),
        )

    def to_record(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "planType": self.plan_type,
            "status": self.status,
            "stripeCustomerId": self.stripe_customer_id,
            "stripeSubscriptionId": self.stripe_subscription_id,
            "currentPeriodStart": self.current_period_start,
            "currentPeriodEnd": self.current_period_end,
            "articlesGenerated": self.articles_generated,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
