"""Data models for the fetch_news pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from common.datetime import parse_datetime


@dataclass
class RawArticle:
    """Article as returned by the topic-page articles call."""
    uri: str
    title: str
    url: str
    date_time: datetime
    event_uri: Optional[str] = None
    body: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawArticle:
        return cls(
            uri=data["uri"],
            title=data.get("title") or "",
            url=data.get("url") or "",
            date_time=_required_datetime(data, "dateTime"),
            event_uri=data.get("eventUri") or None,
            body=data.get("body"),
        )


@dataclass
class MedoidArticle:
    """Most representative article of a story."""
    url: str
    title: str
    date_time: datetime


@dataclass
class Story:
    uri: str
    medoid_article: Optional[MedoidArticle] = None


@dataclass
class RawEvent:
    """Event (cluster of related articles) as returned by the topic-page events call."""
    uri: str
    title: str
    event_date: datetime
    summary: Optional[str] = None
    stories: list[Story] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawEvent:
        stories = []
        for story in data.get("stories") or []:
            medoid = story.get("medoidArticle")
            if medoid and not medoid.get("dateTime"):
                # undated medoid falls back to the event date
                medoid = None
            stories.append(
                Story(
                    uri=story.get("uri", ""),
                    medoid_article=MedoidArticle(
                        url=medoid.get("url") or "",
                        title=medoid.get("title") or "",
                        date_time=_required_datetime(medoid, "dateTime"),
                    )
                    if medoid
                    else None,
                )
            )
        return cls(
            uri=data["uri"],
            title=_english(data.get("title")) or "",
            event_date=_required_datetime(data, "eventDate"),
            summary=_english(data.get("summary")),
            stories=stories,
        )

    @property
    def medoid_article(self) -> Optional[MedoidArticle]:
        """Medoid article of the first story that has one."""
        for story in self.stories:
            if story.medoid_article is not None:
                return story.medoid_article
        return None


def _required_datetime(data: dict[str, Any], key: str) -> datetime:
    """Parse a timestamp the record cannot do without.

    Raises:
        KeyError: If the value is missing or empty.
    """
    value = data.get(key)
    if not value:
        raise KeyError(key)
    return parse_datetime(value)


def _english(value: Any) -> Optional[str]:
    """Pick the English text out of a localized text container."""
    if isinstance(value, dict):
        return value.get("eng")
    return value
