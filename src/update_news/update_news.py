"""Fetch, reconcile and persist the latest news for the topic."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from common.config import NewsApiConfig
from common.errors import PersistenceError, UpstreamFetchError
from common.notifications import Notifier
from fetch_news.fetch_news import fetch_news
from news_store.news_items import load_existing_news_items, upsert_news_items
from reconcile_stories.models import CanonicalNewsItem
from reconcile_stories.reconcile_stories import reconcile
from update_news.sync import plan_upserts

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractContextManager[Session]]


@dataclass
class UpdateResult:
    processed: int
    inserted: int
    updated: int
    unchanged: int
    items: list[CanonicalNewsItem]


def sync_news_items(session: Session, items: list[CanonicalNewsItem]) -> tuple[int, int, int]:
    """
    Write the items that changed since the last run.

    Returns:
        Tuple of (inserted, updated, unchanged)

    Raises:
        PersistenceError: If reading the snapshot or the batch write fails.
    """
    try:
        existing = load_existing_news_items(session, [item.identity for item in items])
    except SQLAlchemyError as e:
        raise PersistenceError(f"Failed to load existing news items: {e}") from e

    plan = plan_upserts(items, existing)
    upsert_news_items(session, plan.items)
    return len(plan.inserts), len(plan.updates), plan.unchanged


def run_update_news(
    config: NewsApiConfig,
    api_key: str,
    session_factory: SessionFactory | None,
    notifier: Notifier,
) -> UpdateResult:
    """
    Run one reconciliation pass.

    Pass ``session_factory=None`` to reconcile without touching the store.
    Failures are reported to ``notifier`` and re-raised; nothing is retried.
    """
    try:
        articles, events = fetch_news(config, api_key)
        items = reconcile(articles, events)

        inserted = updated = 0
        unchanged = len(items)
        if session_factory is not None:
            with session_factory() as session:
                inserted, updated, unchanged = sync_news_items(session, items)
    except (UpstreamFetchError, PersistenceError) as e:
        logger.error("News update failed: %s", e)
        notifier.news_update_error(
            e,
            {"stage": type(e).__name__, "timestamp": datetime.now(timezone.utc).isoformat()},
        )
        raise

    notifier.news_update_success(len(items))
    return UpdateResult(
        processed=len(items),
        inserted=inserted,
        updated=updated,
        unchanged=unchanged,
        items=items,
    )
