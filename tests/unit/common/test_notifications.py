"""Tests for common.notifications module."""

from unittest.mock import MagicMock, patch

import requests

from common.notifications import LogNotifier, SlackNotifier, build_notifier


@patch("common.notifications.requests.post")
class TestSlackNotifier:
    def test_success_posts_processed_count(self, mock_post) -> None:
        mock_post.return_value = MagicMock(ok=True)
        notifier = SlackNotifier("https://hooks.slack.test/x", environment="production")

        notifier.news_update_success(12)

        mock_post.assert_called_once()
        payload = mock_post.call_args.kwargs["json"]
        assert payload["text"].endswith("Successfully updated news articles")
        fields = payload["attachments"][0]["fields"]
        assert fields == [{"title": "Articles Processed", "value": "12", "short": True}]
        assert payload["attachments"][1]["fields"][0]["value"] == "production"

    def test_error_includes_message(self, mock_post) -> None:
        mock_post.return_value = MagicMock(ok=True)
        notifier = SlackNotifier("https://hooks.slack.test/x")

        notifier.news_update_error(RuntimeError("boom"), {"stage": "fetch"})

        payload = mock_post.call_args.kwargs["json"]
        assert payload["attachments"][0]["fields"][0]["value"] == "boom"
        assert payload["attachments"][1]["color"] == "#f44336"

    def test_sink_failure_is_swallowed(self, mock_post) -> None:
        mock_post.side_effect = requests.ConnectionError("down")
        notifier = SlackNotifier("https://hooks.slack.test/x")

        notifier.news_update_success(1)

    def test_non_2xx_is_swallowed(self, mock_post) -> None:
        mock_post.return_value = MagicMock(ok=False, status_code=500, text="err")
        SlackNotifier("https://hooks.slack.test/x").news_update_success(1)


class TestBuildNotifier:
    def test_without_webhook_logs_only(self, monkeypatch) -> None:
        monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
        assert isinstance(build_notifier(), LogNotifier)

    def test_with_webhook(self, monkeypatch) -> None:
        monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/x")
        monkeypatch.setenv("APP_ENV", "production")
        notifier = build_notifier()
        assert isinstance(notifier, SlackNotifier)
        assert notifier.environment == "production"
