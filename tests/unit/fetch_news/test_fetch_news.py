"""Tests for fetch_news.fetch_news module."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from common.config import NewsApiConfig, parse_config
from common.errors import ConfigurationError, UpstreamFetchError
from fetch_news.fetch_news import fetch_articles, fetch_events, fetch_news

CONFIG = NewsApiConfig(base_url="https://newsapi.test/", topic_uri="topic-1", request_timeout=5)


def _response(payload=None, status_error=None, json_error=None) -> MagicMock:
    response = MagicMock()
    if status_error:
        response.raise_for_status.side_effect = status_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


ARTICLES_PAYLOAD = {
    "articles": {
        "results": [
            {"uri": "a1", "title": "T1", "url": "https://a/1", "dateTime": "2024-01-01T00:00:00Z"},
            {"title": "missing uri"},
            {"uri": "a2", "title": "undated", "url": "https://a/2"},
        ]
    }
}

EVENTS_PAYLOAD = {
    "events": {
        "results": [
            {"uri": "e1", "title": {"eng": "E1"}, "eventDate": "2024-01-01"},
        ]
    }
}


@patch("fetch_news.fetch_news.requests.post")
class TestFetchArticles:
    def test_posts_topic_request(self, mock_post) -> None:
        mock_post.return_value = _response(ARTICLES_PAYLOAD)

        fetch_articles(CONFIG, "secret")

        url = mock_post.call_args.args[0]
        payload = mock_post.call_args.kwargs["json"]
        assert url == "https://newsapi.test/api/v1/article/getArticlesForTopicPage"
        assert payload["uri"] == "topic-1"
        assert payload["apiKey"] == "secret"
        assert payload["articlesIncludeArticleBody"] is True
        assert mock_post.call_args.kwargs["timeout"] == 5

    def test_skips_malformed_records(self, mock_post) -> None:
        mock_post.return_value = _response(ARTICLES_PAYLOAD)

        articles = fetch_articles(CONFIG, "secret")

        assert [a.uri for a in articles] == ["a1"]

    def test_http_error_raises_fetch_error(self, mock_post) -> None:
        mock_post.return_value = _response(status_error=requests.HTTPError("503"))

        with pytest.raises(UpstreamFetchError):
            fetch_articles(CONFIG, "secret")

    def test_connection_error_raises_fetch_error(self, mock_post) -> None:
        mock_post.side_effect = requests.ConnectionError("down")

        with pytest.raises(UpstreamFetchError):
            fetch_articles(CONFIG, "secret")

    def test_invalid_json_raises_fetch_error(self, mock_post) -> None:
        mock_post.return_value = _response(json_error=ValueError("bad json"))

        with pytest.raises(UpstreamFetchError, match="not valid JSON"):
            fetch_articles(CONFIG, "secret")

    def test_unexpected_shape_raises_fetch_error(self, mock_post) -> None:
        mock_post.return_value = _response({"error": "quota exceeded"})

        with pytest.raises(UpstreamFetchError, match="articles.results"):
            fetch_articles(CONFIG, "secret")


@patch("fetch_news.fetch_news.requests.post")
class TestFetchEvents:
    def test_parses_events(self, mock_post) -> None:
        mock_post.return_value = _response(EVENTS_PAYLOAD)

        events = fetch_events(CONFIG, "secret")

        assert [e.uri for e in events] == ["e1"]
        payload = mock_post.call_args.kwargs["json"]
        assert payload["includeStoryMedoidArticle"] is True


@patch("fetch_news.fetch_news.fetch_events")
@patch("fetch_news.fetch_news.fetch_articles")
class TestFetchNews:
    def test_returns_both_sides(self, mock_articles, mock_events) -> None:
        mock_articles.return_value = ["article"]
        mock_events.return_value = ["event"]

        assert fetch_news(CONFIG, "secret") == (["article"], ["event"])
        mock_articles.assert_called_once_with(CONFIG, "secret")
        mock_events.assert_called_once_with(CONFIG, "secret")

    def test_articles_failure_aborts(self, mock_articles, mock_events) -> None:
        mock_articles.side_effect = UpstreamFetchError("articles down")
        mock_events.return_value = []

        with pytest.raises(UpstreamFetchError, match="articles down"):
            fetch_news(CONFIG, "secret")

    def test_events_failure_aborts(self, mock_articles, mock_events) -> None:
        mock_articles.return_value = []
        mock_events.side_effect = UpstreamFetchError("events down")

        with pytest.raises(UpstreamFetchError, match="events down"):
            fetch_news(CONFIG, "secret")


@patch("fetch_news.fetch_news.requests.post")
class TestMissingTopic:
    def test_fetch_news_requires_topic_before_any_request(self, mock_post) -> None:
        config = parse_config({"news_api": {}}).news_api

        with pytest.raises(ConfigurationError, match="topic_uri"):
            fetch_news(config, "key")
        mock_post.assert_not_called()

    def test_single_calls_require_topic(self, mock_post) -> None:
        config = NewsApiConfig(base_url="https://newsapi.test", topic_uri="")

        with pytest.raises(ConfigurationError):
            fetch_articles(config, "key")
        with pytest.raises(ConfigurationError):
            fetch_events(config, "key")
        mock_post.assert_not_called()
