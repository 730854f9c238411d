"""Print stored news items for a date range."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv

from common.cli_helpers import date_to_range, parse_date


def _format_value(value: object, max_len: int = 100) -> str:
    if isinstance(value, str) and len(value) > max_len:
        return f"{value[:max_len]}..."
    return str(value) if value is not None else "None"


def main() -> None:
    parser = argparse.ArgumentParser(description="Print stored news items.")
    parser.add_argument(
        "--start-date",
        type=lambda v: parse_date(v, "start-date"),
        default=(datetime.now(timezone.utc) - timedelta(days=7)).date(),
        help="First UTC date to include (default: 7 days ago)",
    )
    parser.add_argument(
        "--end-date",
        type=lambda v: parse_date(v, "end-date"),
        default=datetime.now(timezone.utc).date(),
        help="Last UTC date to include (default: today)",
    )
    parser.add_argument("--limit", type=int, default=50, help="Max rows to print")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    logger = logging.getLogger(__name__)

    load_dotenv()

    from news_store.connection import get_session
    from news_store.news_items import load_news_items_between

    start, _ = date_to_range(args.start_date)
    _, end = date_to_range(args.end_date)

    with get_session() as session:
        records = load_news_items_between(session, start, end, limit=args.limit)

    logger.info("Fetched %d news items", len(records))
    for record in records:
        print("-" * 80)
        print(f"id:          {record.id}")
        print(f"type:        {record.type}")
        print(f"title:       {_format_value(record.title)}")
        print(f"url:         {_format_value(record.url)}")
        print(f"date:        {record.date.isoformat()}")
        print(f"clicks:      {record.clicks}")
        print(f"article_uri: {_format_value(record.identity.article_uri)}")
        print(f"event_uri:   {_format_value(record.identity.event_uri)}")


if __name__ == "__main__":
    main()
