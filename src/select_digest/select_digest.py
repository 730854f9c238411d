"""Pick and format the stories for the periodic digest."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from news_store.models import PersistedNewsRecord
from reconcile_stories.titles import normalize_title

logger = logging.getLogger(__name__)


@dataclass
class DigestEntry:
    title: str
    date: str
    excerpt: str
    link: str
    type: str
    clicks: int


def _outranks(candidate: PersistedNewsRecord, current: PersistedNewsRecord) -> bool:
    if candidate.clicks != current.clicks:
        return candidate.clicks > current.clicks
    return candidate.date > current.date


def select_for_digest(
    all_in_range: list[PersistedNewsRecord],
    max_items: int = 8,
) -> list[PersistedNewsRecord]:
    """
    One record per normalized title, most clicked first.

    Within a title group the most clicked record wins, ties going to the most
    recent. The caller is responsible for restricting the input to the
    digest's date window.
    """
    representatives: dict[str, PersistedNewsRecord] = {}
    for record in all_in_range:
        key = normalize_title(record.title)
        current = representatives.get(key)
        if current is None or _outranks(record, current):
            representatives[key] = record

    selected = sorted(representatives.values(), key=lambda r: r.clicks, reverse=True)[:max_items]
    logger.info(
        "Selected %d digest items from %d records (%d distinct stories)",
        len(selected),
        len(all_in_range),
        len(representatives),
    )
    return selected


def build_excerpt(record: PersistedNewsRecord, excerpt_length: int = 150) -> str:
    if record.summary:
        return record.summary
    if record.body:
        return record.body[:excerpt_length] + "..."
    return record.title


def build_digest_entries(
    records: list[PersistedNewsRecord],
    excerpt_length: int = 150,
) -> list[DigestEntry]:
    return [
        DigestEntry(
            title=record.title,
            date=f"{record.date:%B} {record.date.day}, {record.date.year}",
            excerpt=build_excerpt(record, excerpt_length),
            link=record.url,
            type=record.type,
            clicks=record.clicks,
        )
        for record in records
    ]
