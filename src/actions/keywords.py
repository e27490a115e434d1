"""Track keywords with estimated search volume and difficulty."""

from __future__ import annotations

from src.models import Keyword, coerce_count, coerce_difficulty, new_id, utc_now_iso
from src.providers.base import KeywordEstimator
from src.store.base import KEYWORDS, DocumentStore


def add_keyword(
    store: DocumentStore,
    user_id: str,
    text: str,
    estimator: KeywordEstimator,
    now: str | None = None,
) -> Keyword:
    """Estimate metrics for a keyword and start tracking it."""
    text = text.strip()
    if not text:
        raise ValueError("Keyword is empty")

    metrics = estimator.estimate(text)
    keyword = Keyword(
        id=new_id("keyword"),
        user_id=user_id,
        keyword=text,
        search_volume=coerce_count(metrics.search_volume),
        difficulty=coerce_difficulty(metrics.difficulty),
        created_at=now or utc_now_iso(),
    )
    store.create(KEYWORDS, keyword.to_record())
    return keyword


def list_keywords(store: DocumentStore, user_id: str) -> list[Keyword]:
    records = store.list(KEYWORDS, where={"userId": user_id}, order_by=("createdAt", "desc"))
    return [Keyword.from_record(r) for r in records]


def delete_keyword(store: DocumentStore, keyword_id: str) -> None:
    store.delete(KEYWORDS, keyword_id)
