"""Decide which reconciled items need to be written to the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from news_store.models import PersistedNewsRecord
from reconcile_stories.models import CanonicalNewsItem

logger = logging.getLogger(__name__)


@dataclass
class UpsertPlan:
    inserts: list[CanonicalNewsItem] = field(default_factory=list)
    updates: list[CanonicalNewsItem] = field(default_factory=list)
    unchanged: int = 0

    @property
    def items(self) -> list[CanonicalNewsItem]:
        return self.inserts + self.updates


def _has_changed(item: CanonicalNewsItem, record: PersistedNewsRecord) -> bool:
    # datetimes compare as instants regardless of offset
    return item.title != record.title or item.date != record.date or item.url != record.url


def plan_upserts(
    new_items: list[CanonicalNewsItem],
    existing: list[PersistedNewsRecord],
) -> UpsertPlan:
    """
    Split reconciled items into inserts, updates and unchanged.

    A stored record matches an item only when both identity components are
    equal; an identity with no components never matches anything.
    """
    by_identity = {
        record.identity.key: record for record in existing if not record.identity.is_empty
    }

    plan = UpsertPlan()
    for item in new_items:
        record = None if item.identity.is_empty else by_identity.get(item.identity.key)
        if record is None:
            plan.inserts.append(item)
        elif _has_changed(item, record):
            plan.updates.append(item)
        else:
            plan.unchanged += 1

    logger.info(
        "Upsert plan: %d inserts, %d updates, %d unchanged",
        len(plan.inserts),
        len(plan.updates),
        plan.unchanged,
    )
    return plan


def compute_upsert_set(
    new_items: list[CanonicalNewsItem],
    existing: list[PersistedNewsRecord],
) -> list[CanonicalNewsItem]:
    """Items that are new or whose title, date or url differ from the stored record."""
    return plan_upserts(new_items, existing).items
