"""JSONL snapshots of pipeline output."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from common.serialization import serialize_dataclass

logger = logging.getLogger(__name__)


def snapshot_filename(prefix: str, timestamp: datetime) -> str:
    return f"{prefix}_{timestamp:%Y_%m_%d_%H_%M}.jsonl"


def encode_jsonl(records: list[Any]) -> str:
    """One JSON object per dataclass record, newline terminated."""
    return "".join(
        json.dumps(serialize_dataclass(record), default=str, ensure_ascii=False) + "\n"
        for record in records
    )


def save_jsonl_records_local(
    records: list[Any],
    prefix: str,
    output_dir: str = "output",
    timestamp: Optional[datetime] = None,
) -> Path:
    """
    Save a list of dataclass records to a local JSONL file.

    Args:
        records: Dataclass objects to save
        prefix: Filename prefix (e.g., "news_items", "digest_entries")
        output_dir: Directory to save to, created if missing
        timestamp: Time used in the filename (default: now, UTC)

    Returns:
        Path to the created file.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    filepath = output_path / snapshot_filename(prefix, timestamp or datetime.now(timezone.utc))
    filepath.write_text(encode_jsonl(records), encoding="utf-8")
    logger.info("Saved %d records to %s", len(records), filepath)
    return filepath
