"""Fetch articles and events for the configured topic page."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, TypeVar

import requests

from common.config import NewsApiConfig
from common.errors import ConfigurationError, UpstreamFetchError
from fetch_news.models import RawArticle, RawEvent

logger = logging.getLogger(__name__)

ARTICLES_PATH = "/api/v1/article/getArticlesForTopicPage"
EVENTS_PATH = "/api/v1/event/getEventsForTopicPage"

T = TypeVar("T")


def _require_topic(config: NewsApiConfig) -> None:
    if not config.topic_uri:
        raise ConfigurationError("news_api.topic_uri is not configured")


def _post(config: NewsApiConfig, path: str, payload: dict[str, Any]) -> dict[str, Any]:
    url = f"{config.base_url.rstrip('/')}{path}"
    try:
        response = requests.post(url, json=payload, timeout=config.request_timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise UpstreamFetchError(f"Request to {path} failed: {e}") from e

    try:
        data = response.json()
    except ValueError as e:
        raise UpstreamFetchError(f"Response from {path} is not valid JSON") from e
    if not isinstance(data, dict):
        raise UpstreamFetchError(f"Response from {path} is not a JSON object")
    return data


def _extract_results(
    data: dict[str, Any],
    section: str,
    parse: Callable[[dict[str, Any]], T],
) -> list[T]:
    section_data = data.get(section)
    results = section_data.get("results") if isinstance(section_data, dict) else None
    if not isinstance(results, list):
        raise UpstreamFetchError(f"Response has no {section}.results list")

    parsed = []
    for raw in results:
        try:
            parsed.append(parse(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping malformed %s record: %s", section, e)
    return parsed


def fetch_articles(config: NewsApiConfig, api_key: str) -> list[RawArticle]:
    """Fetch the latest articles for the topic page, including full body text."""
    _require_topic(config)
    data = _post(
        config,
        ARTICLES_PATH,
        {
            "uri": config.topic_uri,
            "dataType": config.data_types,
            "resultType": "articles",
            "articlesSortBy": "date",
            "articlesIncludeArticleBody": True,
            "articlesArticleBodyLen": config.article_body_len,
            "apiKey": api_key,
        },
    )
    articles = _extract_results(data, "articles", RawArticle.from_dict)
    logger.info("Fetched %d articles", len(articles))
    return articles


def fetch_events(config: NewsApiConfig, api_key: str) -> list[RawEvent]:
    """Fetch the latest events for the topic page with their story medoid articles."""
    _require_topic(config)
    data = _post(
        config,
        EVENTS_PATH,
        {
            "uri": config.topic_uri,
            "resultType": "events",
            "eventsSortBy": "date",
            "includeEventSummary": True,
            "includeEventStories": True,
            "includeStoryMedoidArticle": True,
            "includeStoryTitle": True,
            "includeStoryDate": True,
            "apiKey": api_key,
        },
    )
    events = _extract_results(data, "events", RawEvent.from_dict)
    logger.info("Fetched %d events", len(events))
    return events


def fetch_news(config: NewsApiConfig, api_key: str) -> tuple[list[RawArticle], list[RawEvent]]:
    """
    Fetch articles and events concurrently.

    Both calls must succeed; the first failure is raised and nothing is returned.

    Raises:
        ConfigurationError: If no topic is configured; nothing is requested.
        UpstreamFetchError: If either call fails or returns an unexpected shape.
    """
    _require_topic(config)
    with ThreadPoolExecutor(max_workers=2) as executor:
        articles_future = executor.submit(fetch_articles, config, api_key)
        events_future = executor.submit(fetch_events, config, api_key)
        try:
            articles = articles_future.result()
        except UpstreamFetchError:
            events_future.cancel()
            raise
        events = events_future.result()

    return articles, events
