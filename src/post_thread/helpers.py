"""Helper functions for post_thread CLI."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone

from common.cli_helpers import parse_date
from common.config import require_env
from post_thread.twitter import TwitterCredentials

TWITTER_ENV_VARS = (
    "TWITTER_API_KEY",
    "TWITTER_API_KEY_SECRET",
    "TWITTER_ACCESS_TOKEN",
    "TWITTER_ACCESS_TOKEN_SECRET",
)


def parse_post_thread_args() -> argparse.Namespace:
    """Parse CLI arguments for post_thread."""

    parser = argparse.ArgumentParser(description="Post the daily top story as a two-tweet thread.")

    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ or path to a YAML file (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--today",
        type=lambda v: parse_date(v, "today"),
        default=datetime.now(timezone.utc).date(),
        help="Reference date (UTC, YYYY-MM-DD); 'yesterday' is the day before",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Select and log the story without posting",
    )

    return parser.parse_args()


def load_twitter_credentials() -> TwitterCredentials:
    """Read Twitter credentials from the environment.

    Raises:
        ConfigurationError: If any of the four variables is missing.
    """
    env = require_env(*TWITTER_ENV_VARS)
    return TwitterCredentials(
        api_key=env["TWITTER_API_KEY"],
        api_key_secret=env["TWITTER_API_KEY_SECRET"],
        access_token=env["TWITTER_ACCESS_TOKEN"],
        access_token_secret=env["TWITTER_ACCESS_TOKEN_SECRET"],
    )
