"""CLI for selecting and sending the monthly digest."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from common.cli_helpers import previous_month_range, setup_logging
from common.config import load_config, require_env
from common.errors import ConfigurationError, NewsPipelineError
from common.local_io import save_jsonl_records_local
from select_digest.helpers import parse_recipients, parse_select_digest_args
from select_digest.select_digest import build_digest_entries, select_for_digest
from select_digest.send_digest import send_digest

setup_logging()
logger = logging.getLogger(__name__)


def main() -> int:
    args = parse_select_digest_args()

    load_dotenv()

    try:
        config = load_config(args.config)
        required = ["DATABASE_URL"]
        if args.send:
            required += ["SENDGRID_API_KEY", "DIGEST_RECIPIENTS"]
        env = require_env(*required)
        recipients = parse_recipients(env.get("DIGEST_RECIPIENTS"))
        if args.send and not recipients:
            raise ConfigurationError("DIGEST_RECIPIENTS contains no email addresses")

        from news_store.connection import get_session
        from news_store.news_items import load_news_items_between

        start, end = previous_month_range(args.today)
        with get_session() as session:
            records = load_news_items_between(session, start, end, limit=config.digest.query_limit)
    except NewsPipelineError as e:
        logger.error("Digest aborted: %s", e)
        return 1

    selected = select_for_digest(records, max_items=config.digest.max_items)
    if not selected:
        logger.warning("No news items between %s and %s, nothing to send", start.date(), end.date())
        return 0

    entries = build_digest_entries(selected, excerpt_length=config.digest.excerpt_length)

    if args.load_local:
        save_jsonl_records_local(entries, "digest_entries")

    if args.send:
        month = f"{start:%B}"
        year = str(start.year)
        results = send_digest(
            entries,
            recipients,
            sender=config.digest.sender,
            subject=config.digest.subject_template.format(month=month, year=year),
            api_key=env["SENDGRID_API_KEY"],
            month=month,
            year=year,
        )
        if not any(result.success for result in results):
            logger.error("Digest could not be delivered to any recipient")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
