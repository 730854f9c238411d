"""Reads and writes against the news_items table."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from sqlalchemy import or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from common.errors import PersistenceError
from news_store.models import NewsItem, PersistedNewsRecord
from reconcile_stories.models import CanonicalNewsItem, ItemIdentity

logger = logging.getLogger(__name__)

UPDATABLE_COLUMNS = ("title", "type", "url", "body", "summary", "date", "updated_at")


def load_existing_news_items(
    session: Session,
    identities: Iterable[ItemIdentity],
) -> list[PersistedNewsRecord]:
    """Load stored items that share an article or event URI with any of ``identities``."""
    article_uris = sorted({i.article_uri for i in identities if i.article_uri})
    event_uris = sorted({i.event_uri for i in identities if i.event_uri})

    conditions = []
    if article_uris:
        conditions.append(NewsItem.article_uri.in_(article_uris))
    if event_uris:
        conditions.append(NewsItem.event_uri.in_(event_uris))
    if not conditions:
        return []

    rows = session.execute(select(NewsItem).where(or_(*conditions))).scalars().all()
    logger.info("Loaded %d existing news items", len(rows))
    return [PersistedNewsRecord.from_row(row) for row in rows]


def _to_row(item: CanonicalNewsItem, updated_at: datetime) -> dict[str, Any]:
    return {
        "title": item.title,
        "type": item.type,
        "url": item.url,
        "body": item.body,
        "summary": item.summary,
        "date": item.date,
        "article_uri": item.identity.article_uri,
        "event_uri": item.identity.event_uri,
        "updated_at": updated_at,
    }


def upsert_news_items(
    session: Session,
    items: list[CanonicalNewsItem],
    now: Optional[datetime] = None,
) -> int:
    """
    Write items in one batch, last write wins on (article_uri, event_uri).

    Clicks are never part of the write so engagement survives updates.

    Raises:
        PersistenceError: If the batch fails; the session is rolled back.
    """
    if not items:
        return 0

    updated_at = now or datetime.now(timezone.utc)
    stmt = insert(NewsItem).values([_to_row(item, updated_at) for item in items])
    stmt = stmt.on_conflict_do_update(
        constraint="uq_news_items_identity",
        set_={column: stmt.excluded[column] for column in UPDATABLE_COLUMNS},
    )

    try:
        session.execute(stmt)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        raise PersistenceError(f"Upsert of {len(items)} news items failed: {e}") from e

    logger.info("Upserted %d news items", len(items))
    return len(items)


def load_news_items_between(
    session: Session,
    start: datetime,
    end: datetime,
    limit: Optional[int] = None,
) -> list[PersistedNewsRecord]:
    """Items dated in [start, end), most clicked first."""
    stmt = (
        select(NewsItem)
        .where(NewsItem.date >= start, NewsItem.date < end)
        .order_by(NewsItem.clicks.desc(), NewsItem.date.desc())
    )
    if limit is not None:
        stmt = stmt.limit(limit)

    rows = session.execute(stmt).scalars().all()
    logger.info(
        "Loaded %d news items dated %s to %s", len(rows), start.isoformat(), end.isoformat()
    )
    return [PersistedNewsRecord.from_row(row) for row in rows]


def increment_clicks(session: Session, item_id: int) -> Optional[int]:
    """Atomically add one click; returns the new count, or None if the item does not exist."""
    stmt = (
        update(NewsItem)
        .where(NewsItem.id == item_id)
        .values(clicks=NewsItem.clicks + 1)
        .returning(NewsItem.clicks)
    )
    clicks = session.execute(stmt).scalar_one_or_none()
    session.commit()
    return clicks
