"""Merge raw articles and events into one deduplicated list of news items."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fetch_news.models import RawArticle, RawEvent
from reconcile_stories.models import CanonicalNewsItem, ItemIdentity
from reconcile_stories.titles import clean_title, is_priority_source, normalize_title

logger = logging.getLogger(__name__)


@dataclass
class TitleIndex:
    """Items emitted so far, addressable by normalized title.

    When a key is seen again the more recent item keeps the slot; on equal
    dates the item already in the slot stays.
    """
    items: list[CanonicalNewsItem] = field(default_factory=list)
    positions: dict[str, int] = field(default_factory=dict)
    suppressed: int = 0
    superseded: int = 0

    def add(self, item: CanonicalNewsItem) -> None:
        key = normalize_title(item.title)
        position = self.positions.get(key)
        if position is None:
            self.positions[key] = len(self.items)
            self.items.append(item)
            return

        current = self.items[position]
        if item.date > current.date:
            logger.debug("Superseding %r with newer %r", current.title, item.title)
            self.items[position] = item
            self.superseded += 1
        else:
            logger.debug("Suppressing duplicate %r of %r", item.title, current.title)
            self.suppressed += 1


def partition_articles(
    articles: list[RawArticle],
) -> tuple[list[RawArticle], dict[str, list[RawArticle]]]:
    """Split articles into standalone ones and a mapping of event URI to related articles."""
    standalone: list[RawArticle] = []
    by_event: dict[str, list[RawArticle]] = {}
    seen_uris: set[str] = set()

    for article in articles:
        if article.uri in seen_uris:
            logger.warning("Skipping repeated article uri=%s", article.uri)
            continue
        seen_uris.add(article.uri)

        if article.event_uri:
            by_event.setdefault(article.event_uri, []).append(article)
        else:
            standalone.append(article)

    return standalone, by_event


def build_event_item(event: RawEvent, related: list[RawArticle]) -> CanonicalNewsItem:
    """
    Pick the canonical representation of an event.

    Precedence: a related article from a priority source (title, url, date and
    article identity), then the first story medoid (url and date only), then
    the event's own title and date with an empty url.
    """
    title = event.title
    url = ""
    date = event.event_date
    article_uri = None

    priority_article = next((a for a in related if is_priority_source(a.title)), None)
    if priority_article is not None:
        title = priority_article.title
        url = priority_article.url
        date = priority_article.date_time
        article_uri = priority_article.uri
    else:
        medoid = event.medoid_article
        if medoid is not None:
            url = medoid.url
            date = medoid.date_time

    return CanonicalNewsItem(
        title=clean_title(title),
        type="event",
        date=date,
        url=url,
        identity=ItemIdentity(article_uri=article_uri, event_uri=event.uri),
        summary=event.summary,
    )


def build_article_item(article: RawArticle) -> CanonicalNewsItem:
    return CanonicalNewsItem(
        title=clean_title(article.title),
        type="article",
        date=article.date_time,
        url=article.url,
        identity=ItemIdentity(article_uri=article.uri),
        body=article.body,
    )


def add_events(
    index: TitleIndex,
    events: list[RawEvent],
    by_event: dict[str, list[RawArticle]],
) -> TitleIndex:
    seen_uris: set[str] = set()
    for event in events:
        if not event.uri or event.uri in seen_uris:
            logger.warning("Skipping event with missing or repeated uri=%r", event.uri)
            continue
        seen_uris.add(event.uri)
        index.add(build_event_item(event, by_event.get(event.uri, [])))
    return index


def add_standalone_articles(index: TitleIndex, standalone: list[RawArticle]) -> TitleIndex:
    for article in standalone:
        index.add(build_article_item(article))
    return index


def reconcile(articles: list[RawArticle], events: list[RawEvent]) -> list[CanonicalNewsItem]:
    """
    Reconcile raw articles and events into canonical news items.

    Events are indexed before standalone articles so that a standalone
    near-duplicate of an event only replaces it when strictly newer.
    Articles whose event is not in ``events`` are dropped.

    Returns:
        Items ordered most recent first, ties kept in insertion order.
    """
    standalone, by_event = partition_articles(articles)

    event_uris = {event.uri for event in events}
    orphaned = sum(len(related) for uri, related in by_event.items() if uri not in event_uris)
    if orphaned:
        logger.info("Dropping %d articles whose event is not in this batch", orphaned)

    index = add_events(TitleIndex(), events, by_event)
    index = add_standalone_articles(index, standalone)

    logger.info(
        "Reconciled %d events and %d standalone articles into %d items "
        "(%d duplicates suppressed, %d superseded)",
        len(events),
        len(standalone),
        len(index.items),
        index.suppressed,
        index.superseded,
    )
    return sorted(index.items, key=lambda item: item.date, reverse=True)
