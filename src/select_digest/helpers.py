"""Helper functions for select_digest CLI."""

from __future__ import annotations

import argparse
from datetime import datetime, timezone

from common.cli_helpers import parse_date


def parse_select_digest_args() -> argparse.Namespace:
    """Parse CLI arguments for select_digest."""

    parser = argparse.ArgumentParser(description="Build the monthly digest from last month's news.")

    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ or path to a YAML file (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--today",
        type=lambda v: parse_date(v, "today"),
        default=datetime.now(timezone.utc).date(),
        help="Reference date (UTC, YYYY-MM-DD); the digest covers the month before it",
    )

    # Output options
    parser.add_argument("--send", action="store_true", help="Email the digest to DIGEST_RECIPIENTS")
    parser.add_argument("--load-local", action="store_true", help="Save digest entries to local file")

    return parser.parse_args()


def parse_recipients(value: str | None) -> list[str]:
    """Split a comma-separated recipient list, dropping blanks and duplicates."""
    if not value:
        return []
    recipients = []
    for part in value.split(","):
        email = part.strip()
        if email and email not in recipients:
            recipients.append(email)
    return recipients
