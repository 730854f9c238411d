"""Helper functions for update_news CLI."""

from __future__ import annotations

import argparse


def parse_update_news_args() -> argparse.Namespace:
    """Parse CLI arguments for update_news."""

    parser = argparse.ArgumentParser(description="Fetch, reconcile and store the latest topic news.")

    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ or path to a YAML file (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Reconcile without writing to the database",
    )

    # Output options
    parser.add_argument("--load-s3", action="store_true", help="Upload reconciled items to S3")
    parser.add_argument("--load-local", action="store_true", help="Save reconciled items to local file")

    return parser.parse_args()
