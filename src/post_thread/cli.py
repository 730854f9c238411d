"""CLI for broadcasting one story as a short thread."""

from __future__ import annotations

import logging
import sys
from datetime import timedelta

from dotenv import load_dotenv

from common.cli_helpers import date_to_range, setup_logging, trailing_range
from common.config import load_config, require_env
from common.errors import NewsPipelineError
from post_thread.helpers import load_twitter_credentials, parse_post_thread_args
from post_thread.select_broadcast import format_post_title, select_for_broadcast
from post_thread.twitter import TwitterClient

setup_logging()
logger = logging.getLogger(__name__)


def main() -> int:
    args = parse_post_thread_args()

    load_dotenv()

    try:
        config = load_config(args.config)
        require_env("DATABASE_URL")
        credentials = None if args.dry_run else load_twitter_credentials()

        from news_store.connection import get_session
        from news_store.news_items import load_news_items_between

        yesterday_start, yesterday_end = date_to_range(args.today - timedelta(days=1))
        with get_session() as session:
            yesterday = load_news_items_between(
                session, yesterday_start, yesterday_end, limit=config.broadcast.query_limit
            )
            trailing = []
            if not yesterday:
                # includes items dated today
                _, today_end = date_to_range(args.today)
                trailing_start, trailing_end = trailing_range(today_end, config.broadcast.trailing_days)
                trailing = load_news_items_between(
                    session, trailing_start, trailing_end, limit=config.broadcast.query_limit
                )

        record = select_for_broadcast(
            yesterday, trailing, candidate_pool=config.broadcast.candidate_pool
        )
        if record is None:
            logger.info("No news items available to post")
            return 0

        title = format_post_title(record, args.today)
        if args.dry_run:
            logger.info("Dry run, would post: %s %s", title, record.url)
            return 0

        client = TwitterClient(
            credentials,
            min_post_interval=config.broadcast.min_post_interval,
            max_retries=config.broadcast.max_retries,
            retry_delay=config.broadcast.retry_delay,
        )
        tweet_ids = client.create_thread(title, record.url)
    except NewsPipelineError as e:
        logger.error("Thread not posted: %s", e)
        return 1

    logger.info("Posted %r (%d clicks) as tweets %s", record.title, record.clicks, tweet_ids)
    return 0


if __name__ == "__main__":
    sys.exit(main())
