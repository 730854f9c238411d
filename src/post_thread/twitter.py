"""Minimal client for posting a two-tweet thread."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import requests
from requests_oauthlib import OAuth1

from common.errors import PublishError

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.twitter.com/2"
MAX_TWEET_LENGTH = 280


@dataclass
class TwitterCredentials:
    api_key: str
    api_key_secret: str
    access_token: str
    access_token_secret: str


def format_tweet_text(text: str, max_length: int = MAX_TWEET_LENGTH) -> str:
    return text[:max_length].strip()


class TwitterClient:
    """Posts tweets with OAuth1 user-context auth, spacing and retrying posts."""

    def __init__(
        self,
        credentials: TwitterCredentials,
        min_post_interval: float = 2.0,
        max_retries: int = 3,
        retry_delay: float = 5.0,
        timeout: int = 30,
    ):
        self.auth = OAuth1(
            credentials.api_key,
            client_secret=credentials.api_key_secret,
            resource_owner_key=credentials.access_token,
            resource_owner_secret=credentials.access_token_secret,
        )
        self.min_post_interval = min_post_interval
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._last_post_at: float | None = None

    def _wait_for_rate_limit(self) -> None:
        if self._last_post_at is not None:
            elapsed = time.monotonic() - self._last_post_at
            if elapsed < self.min_post_interval:
                time.sleep(self.min_post_interval - elapsed)
        self._last_post_at = time.monotonic()

    def post_tweet(self, text: str, in_reply_to: str | None = None) -> str:
        """Post a tweet and return its id."""
        payload: dict = {"text": text}
        if in_reply_to:
            payload["reply"] = {"in_reply_to_tweet_id": in_reply_to}

        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            if attempt:
                logger.info("Retrying tweet (%d/%d)", attempt, self.max_retries)
                time.sleep(self.retry_delay)

            self._wait_for_rate_limit()
            try:
                response = requests.post(
                    f"{API_BASE_URL}/tweets",
                    json=payload,
                    auth=self.auth,
                    timeout=self.timeout,
                )
                response.raise_for_status()
                return response.json()["data"]["id"]
            except (requests.RequestException, KeyError, ValueError) as e:
                logger.warning("Tweet attempt %d failed: %s", attempt + 1, e)
                last_error = e

        raise PublishError(f"Tweet failed after {self.max_retries + 1} attempts: {last_error}") from last_error

    def create_thread(self, title: str, url: str) -> list[str]:
        """Post the title, then reply with the link. Returns both tweet ids."""
        first_id = self.post_tweet(format_tweet_text(title))
        second_id = self.post_tweet(f"🔗 Read more:\n{url}", in_reply_to=first_id)
        logger.info("Created thread %s for %r", [first_id, second_id], title)
        return [first_id, second_id]
