"""Tests for fetch_news.models module."""

from datetime import datetime, timezone

import pytest

from fetch_news.models import RawArticle, RawEvent


class TestRawArticleFromDict:
    def test_parses_fields(self) -> None:
        article = RawArticle.from_dict(
            {
                "uri": "art1",
                "title": "Fund X Launches",
                "url": "https://a.com/1",
                "dateTime": "2024-01-01T03:00:00Z",
                "eventUri": "e1",
                "body": "Body",
            }
        )
        assert article.uri == "art1"
        assert article.date_time == datetime(2024, 1, 1, 3, tzinfo=timezone.utc)
        assert article.event_uri == "e1"
        assert article.body == "Body"

    def test_empty_event_uri_is_standalone(self) -> None:
        article = RawArticle.from_dict(
            {"uri": "art1", "title": "T", "url": "u", "dateTime": "2024-01-01T00:00:00Z", "eventUri": ""}
        )
        assert article.event_uri is None

    def test_missing_uri_raises(self) -> None:
        with pytest.raises(KeyError):
            RawArticle.from_dict({"title": "T"})


class TestRawEventFromDict:
    def test_parses_localized_title_summary_and_medoid(self) -> None:
        event = RawEvent.from_dict(
            {
                "uri": "e1",
                "title": {"eng": "Fund X Launches - Decrypt"},
                "eventDate": "2024-01-01",
                "summary": {"eng": "Summary"},
                "stories": [
                    {"uri": "s0"},
                    {
                        "uri": "s1",
                        "medoidArticle": {
                            "url": "https://a.com/1",
                            "title": "Fund X Launches",
                            "dateTime": "2024-01-01T02:00:00Z",
                        },
                    },
                ],
            }
        )
        assert event.title == "Fund X Launches - Decrypt"
        assert event.summary == "Summary"
        assert event.event_date == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert event.stories[0].medoid_article is None
        assert event.medoid_article.url == "https://a.com/1"

    def test_no_stories(self) -> None:
        event = RawEvent.from_dict(
            {"uri": "e1", "title": {"eng": "T"}, "eventDate": "2024-01-01T00:00:00Z"}
        )
        assert event.stories == []
        assert event.medoid_article is None
        assert event.summary is None


class TestMissingTimestamps:
    def test_article_without_date_is_malformed(self) -> None:
        with pytest.raises(KeyError, match="dateTime"):
            RawArticle.from_dict({"uri": "a1", "title": "Fund X", "url": "https://x"})

    def test_article_with_empty_date_is_malformed(self) -> None:
        with pytest.raises(KeyError):
            RawArticle.from_dict({"uri": "a1", "title": "Fund X", "url": "https://x", "dateTime": ""})

    def test_event_without_date_is_malformed(self) -> None:
        with pytest.raises(KeyError, match="eventDate"):
            RawEvent.from_dict({"uri": "e1", "title": {"eng": "T"}})

    def test_undated_medoid_is_ignored(self) -> None:
        event = RawEvent.from_dict(
            {
                "uri": "e1",
                "title": {"eng": "T"},
                "eventDate": "2024-01-01",
                "stories": [
                    {"uri": "s1", "medoidArticle": {"url": "https://undated", "title": "M"}},
                    {
                        "uri": "s2",
                        "medoidArticle": {
                            "url": "https://dated",
                            "title": "M",
                            "dateTime": "2024-01-01T02:00:00Z",
                        },
                    },
                ],
            }
        )
        assert event.stories[0].medoid_article is None
        assert event.medoid_article.url == "https://dated"
