"""Record a reader click on a stored news item."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

load_dotenv()

from news_store.connection import get_session
from news_store.news_items import increment_clicks

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Increment the click counter of a news item.")
    parser.add_argument("--id", type=int, required=True, help="news_items.id")
    args = parser.parse_args()

    with get_session() as session:
        clicks = increment_clicks(session, args.id)

    if clicks is None:
        raise SystemExit(f"No news item with id {args.id}")
    logger.info("News item %d now has %d clicks", args.id, clicks)


if __name__ == "__main__":
    main()
