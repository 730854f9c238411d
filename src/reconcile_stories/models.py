"""Data models for the reconcile_stories pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

ItemType = Literal["article", "event"]


@dataclass(frozen=True)
class ItemIdentity:
    """Natural key of a news item: (article_uri, event_uri)."""
    article_uri: Optional[str] = None
    event_uri: Optional[str] = None

    @property
    def key(self) -> tuple[Optional[str], Optional[str]]:
        return (self.article_uri, self.event_uri)

    @property
    def is_empty(self) -> bool:
        return self.article_uri is None and self.event_uri is None


@dataclass
class CanonicalNewsItem:
    """The single deduplicated record representing one logical story."""
    title: str
    type: ItemType
    date: datetime
    url: str
    identity: ItemIdentity
    body: Optional[str] = None
    summary: Optional[str] = None
