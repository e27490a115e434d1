"""Subscription plan catalog and monthly article allowance."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from src.dashboard.stats import count_created_in_month
from src.models import Article, Subscription, new_id, parse_timestamp, utc_now_iso
from src.store.base import SUBSCRIPTIONS, DocumentStore


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    price: str
    description: str
    features: tuple[str, ...]
    monthly_articles: int | None = None  # None = unlimited
    stripe_price_id: str | None = None
    popular: bool = False

    @property
    def price_label(self) -> str:
        return f"{self.price}/month"


PLANS = (
    Plan(
        id="free",
        name="Free",
        price="$0",
        description="Perfect for getting started",
        features=("5 articles per month", "Basic AI writing", "Standard images", "Email support"),
        monthly_articles=5,
    ),
    Plan(
        id="pro",
        name="Pro",
        price="$29",
        description="For serious content creators",
        features=(
            "Unlimited articles", "Advanced AI writing", "Premium images",
            "Rank tracking", "Priority support", "API access",
        ),
        stripe_price_id="price_pro_monthly",
        popular=True,
    ),
    Plan(
        id="enterprise",
        name="Enterprise",
        price="$99",
        description="For teams and agencies",
        features=(
            "Everything in Pro", "Team collaboration", "Custom AI models",
            "White-label options", "Dedicated support", "SLA guarantee",
        ),
        stripe_price_id="price_enterprise_monthly",
    ),
)

_BY_ID = {plan.id: plan for plan in PLANS}


def get_plan(plan_id: str) -> Plan:
    try:
        return _BY_ID[plan_id.strip().lower()]
    except KeyError:
        raise KeyError(f"Unknown plan: {plan_id}") from None


def current_subscription(store: DocumentStore, user_id: str) -> Subscription | None:
    """The owner's most recent active subscription, if any."""
    records = store.list(
        SUBSCRIPTIONS,
        where={"userId": user_id, "status": "active"},
        order_by=("createdAt", "desc"),
        limit=1,
    )
    return Subscription.from_record(records[0]) if records else None


def current_plan(store: DocumentStore, user_id: str) -> Plan:
    """Plan of the active subscription; Free when there is none or it is unknown."""
    subscription = current_subscription(store, user_id)
    if subscription is None or subscription.plan_type not in _BY_ID:
        return _BY_ID["free"]
    return _BY_ID[subscription.plan_type]


def remaining_articles(plan: Plan, generated_this_month: int) -> int | None:
    """Articles left this month, None for unlimited plans."""
    if plan.monthly_articles is None:
        return None
    return max(plan.monthly_articles - generated_this_month, 0)


def _same_month(value: str, now: datetime) -> bool:
    parsed = parse_timestamp(value)
    return parsed is not None and (parsed.year, parsed.month) == (now.year, now.month)


def record_generated_article(store: DocumentStore, user_id: str, now: str | None = None) -> None:
    """Count one generated article on the owner's active subscription.

    The counter restarts when the subscription was last updated in an
    earlier month. Owners without one get a free-plan subscription record.
    """
    now = now or utc_now_iso()
    subscription = current_subscription(store, user_id)
    if subscription is None:
        subscription = Subscription(
            id=new_id("subscription"),
            user_id=user_id,
            articles_generated=1,
            created_at=now,
            updated_at=now,
        )
        store.create(SUBSCRIPTIONS, subscription.to_record())
        return
    at = parse_timestamp(now) or datetime.now(timezone.utc)
    generated = subscription.articles_generated if _same_month(subscription.updated_at, at) else 0
    store.update(
        SUBSCRIPTIONS,
        subscription.id,
        {"articlesGenerated": generated + 1, "updatedAt": now},
    )


def articles_used(
    store: DocumentStore,
    user_id: str,
    articles: Iterable[Article],
    now: datetime | None = None,
) -> int:
    """Articles generated this month, deleted ones included.

    The larger of the stored articles created this month and the active
    subscription's counter for this month.
    """
    now = now or datetime.now(timezone.utc)
    stored = count_created_in_month(articles, now.year, now.month)
    subscription = current_subscription(store, user_id)
    if subscription is None or not _same_month(subscription.updated_at, now):
        return stored
    return max(stored, subscription.articles_generated)


def upgrade(current_id: str, target_id: str) -> str:
    """User-facing result of an upgrade request. Checkout is not wired up yet."""
    target = get_plan(target_id)
    if target.id == "free":
        return "You are already on the free plan"
    if target.id == get_plan(current_id).id:
        return f"You are already on the {target.name} plan"
    return (
        f"Checkout for {target.name} ({target.price_label}) is not available yet. "
        f"Contact support to upgrade."
    )
