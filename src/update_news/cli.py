"""CLI for the news reconciliation job."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.aws import upload_jsonl_records_to_s3
from common.cli_helpers import setup_logging
from common.config import load_config, require_env
from common.errors import NewsPipelineError
from common.local_io import save_jsonl_records_local
from common.notifications import build_notifier
from update_news.helpers import parse_update_news_args
from update_news.update_news import run_update_news

setup_logging()
logger = logging.getLogger(__name__)


def main() -> int:
    args = parse_update_news_args()

    load_dotenv()

    try:
        config = load_config(args.config)
        required = ["NEWSAPI_API_KEY"] if args.dry_run else ["NEWSAPI_API_KEY", "DATABASE_URL"]
        api_key = require_env(*required)["NEWSAPI_API_KEY"]

        session_factory = None
        if not args.dry_run:
            from news_store.connection import get_session

            session_factory = get_session

        result = run_update_news(config.news_api, api_key, session_factory, build_notifier())

        if args.load_s3:
            upload_jsonl_records_to_s3(result.items, "news_items")
    except NewsPipelineError as e:
        logger.error("News update aborted: %s", e)
        return 1

    logger.info(
        "Processed %d items (%d inserted, %d updated, %d unchanged)",
        result.processed,
        result.inserted,
        result.updated,
        result.unchanged,
    )

    if args.load_local:
        save_jsonl_records_local(result.items, "news_items")

    return 0


if __name__ == "__main__":
    sys.exit(main())
