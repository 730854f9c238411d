"""Run notifications for pipeline jobs.

A notifier is built once by the CLI and passed to the job. Notifier failures
are logged and never propagate into the job.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Protocol

import requests

logger = logging.getLogger(__name__)

LEVEL_COLORS = {
    "info": "#2196f3",
    "warning": "#ff9800",
    "error": "#f44336",
}


class Notifier(Protocol):
    def news_update_success(self, processed: int) -> None: ...

    def news_update_error(self, error: Exception, context: dict[str, Any]) -> None: ...


class LogNotifier:
    """Notifier that only writes to the log (no webhook configured)."""

    def news_update_success(self, processed: int) -> None:
        logger.info("News update succeeded (%d items processed)", processed)

    def news_update_error(self, error: Exception, context: dict[str, Any]) -> None:
        logger.error("News update failed: %s (context=%s)", error, context)


class SlackNotifier:
    """Post run status to a Slack incoming webhook."""

    def __init__(self, webhook_url: str, environment: str = "development", timeout: int = 10):
        self.webhook_url = webhook_url
        self.environment = environment
        self.timeout = timeout

    def _build_payload(
        self,
        message: str,
        level: str,
        emoji: str,
        fields: list[dict[str, Any]],
    ) -> dict[str, Any]:
        return {
            "text": f"{emoji} {message}",
            "attachments": [
                {"fields": fields},
                {
                    "color": LEVEL_COLORS[level],
                    "fields": [
                        {"title": "Environment", "value": self.environment, "short": True},
                        {
                            "title": "Timestamp",
                            "value": datetime.now(timezone.utc).isoformat(),
                            "short": True,
                        },
                    ],
                    "footer": "News Service Monitor",
                },
            ],
        }

    def _send(self, payload: dict[str, Any]) -> None:
        try:
            response = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
            if not response.ok:
                logger.error(
                    "Failed to send Slack notification: %s %s",
                    response.status_code,
                    response.text,
                )
        except requests.RequestException as e:
            logger.error("Error sending Slack notification: %s", e)

    def news_update_success(self, processed: int) -> None:
        self._send(
            self._build_payload(
                "Successfully updated news articles",
                "info",
                "✅",
                [{"title": "Articles Processed", "value": str(processed), "short": True}],
            )
        )

    def news_update_error(self, error: Exception, context: dict[str, Any]) -> None:
        self._send(
            self._build_payload(
                "Failed to update news articles",
                "error",
                "🚨",
                [
                    {"title": "Error", "value": str(error), "short": False},
                    {"title": "Context", "value": json.dumps(context, indent=2, default=str), "short": False},
                ],
            )
        )


def build_notifier() -> Notifier:
    """Build the notifier for this process from SLACK_WEBHOOK_URL / APP_ENV."""
    webhook_url = os.environ.get("SLACK_WEBHOOK_URL")
    if not webhook_url:
        logger.info("SLACK_WEBHOOK_URL not set, notifications go to the log only")
        return LogNotifier()
    return SlackNotifier(webhook_url, environment=os.environ.get("APP_ENV", "development"))
