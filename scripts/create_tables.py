"""Create the news store tables if they do not exist."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

load_dotenv()

from news_store.connection import get_engine
from news_store.models import Base

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    Base.metadata.create_all(get_engine())
    logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    main()
