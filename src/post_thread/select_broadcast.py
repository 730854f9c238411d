"""Choose the one story to broadcast as a short post."""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Optional

from news_store.models import PersistedNewsRecord

logger = logging.getLogger(__name__)


def select_for_broadcast(
    yesterday: list[PersistedNewsRecord],
    trailing: list[PersistedNewsRecord],
    candidate_pool: int = 10,
    rng: Optional[random.Random] = None,
) -> Optional[PersistedNewsRecord]:
    """
    Most clicked item from yesterday, else a random pick among the most
    clicked items of the trailing window.

    Returns:
        The chosen record, or None when both windows are empty.
    """
    if yesterday:
        # max() keeps the first of equal maxima, i.e. store order
        chosen = max(yesterday, key=lambda r: r.clicks)
        logger.info("Using most clicked item from yesterday: %r (%d clicks)", chosen.title, chosen.clicks)
        return chosen

    if not trailing:
        logger.info("No items available to broadcast")
        return None

    top = sorted(trailing, key=lambda r: r.clicks, reverse=True)[:candidate_pool]
    chosen = (rng or random).choice(top)
    logger.info(
        "Using random item from top %d of trailing window: %r (%d clicks)",
        len(top),
        chosen.title,
        chosen.clicks,
    )
    return chosen


def format_post_title(record: PersistedNewsRecord, today: date) -> str:
    if record.date.date() == today - timedelta(days=1):
        prefix = "Top story from yesterday:"
    else:
        prefix = f"Featured story from {record.date:%b} {record.date.day}:"
    return f"{prefix}\n{record.title}"
