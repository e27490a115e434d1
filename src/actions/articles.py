"""Save, list, publish and delete articles."""

from __future__ import annotations

from src.actions.plans import record_generated_article
from src.models import DRAFT, PUBLISHED, Article, new_id, slugify, utc_now_iso
from src.pipeline.generator import GeneratedArticle
from src.store.base import ARTICLES, DocumentStore


def save_article(
    store: DocumentStore,
    user_id: str,
    generated: GeneratedArticle,
    keywords: str,
    now: str | None = None,
) -> Article:
    """Store a generated article as a draft and return it."""
    now = now or utc_now_iso()
    article = Article(
        id=new_id("article"),
        user_id=user_id,
        title=generated.title,
        content=generated.content,
        slug=slugify(generated.title),
        keywords=keywords.strip(),
        meta_description=generated.meta_description or None,
        featured_image=generated.image_url or None,
        status=DRAFT,
        created_at=now,
        updated_at=now,
    )
    store.create(ARTICLES, article.to_record())
    record_generated_article(store, user_id, now)
    return article


def list_articles(
    store: DocumentStore, user_id: str, status: str | None = None
) -> list[Article]:
    """The owner's articles, newest first, optionally filtered by status."""
    where = {"userId": user_id}
    if status:
        where["status"] = status
    records = store.list(ARTICLES, where=where, order_by=("createdAt", "desc"))
    return [Article.from_record(r) for r in records]


def get_article(store: DocumentStore, user_id: str, article_id: str) -> Article:
    records = store.list(ARTICLES, where={"userId": user_id, "id": article_id}, limit=1)
    if not records:
        raise KeyError(f"Article not found: {article_id}")
    return Article.from_record(records[0])


def delete_article(store: DocumentStore, article_id: str) -> None:
    store.delete(ARTICLES, article_id)


def toggle_publish(store: DocumentStore, article: Article, now: str | None = None) -> Article:
    """Flip draft <-> published. Returns the article as stored after the update."""
    now = now or utc_now_iso()
    status = DRAFT if article.is_published else PUBLISHED
    store.update(ARTICLES, article.id, {"status": status, "updatedAt": now})
    return article.with_status(status, now)
