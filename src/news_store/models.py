"""Tables and records of the news store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from common.datetime import parse_datetime
from reconcile_stories.models import ItemIdentity


class Base(DeclarativeBase):
    pass


class NewsItem(Base):
    __tablename__ = "news_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    body: Mapped[Optional[str]] = mapped_column(Text)
    summary: Mapped[Optional[str]] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    article_uri: Mapped[Optional[str]] = mapped_column(String(255))
    event_uri: Mapped[Optional[str]] = mapped_column(String(255))
    clicks: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint(
            "article_uri",
            "event_uri",
            name="uq_news_items_identity",
            postgresql_nulls_not_distinct=True,
        ),
    )


@dataclass
class PersistedNewsRecord:
    """Stored news item plus its engagement counter."""
    id: int
    title: str
    type: str
    url: str
    date: datetime
    identity: ItemIdentity
    clicks: int = 0
    body: Optional[str] = None
    summary: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: NewsItem) -> PersistedNewsRecord:
        return cls(
            id=row.id,
            title=row.title,
            type=row.type,
            url=row.url or "",
            date=parse_datetime(row.date),
            identity=ItemIdentity(article_uri=row.article_uri, event_uri=row.event_uri),
            clicks=row.clicks or 0,
            body=row.body,
            summary=row.summary,
            updated_at=row.updated_at,
        )
