"""S3 export of pipeline snapshots."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import boto3

from common.config import require_env
from common.local_io import encode_jsonl, snapshot_filename

logger = logging.getLogger(__name__)


def get_s3_client():
    return boto3.client("s3")


def build_s3_key(prefix: str, timestamp: datetime) -> str:
    """Date-partitioned key, e.g. news_items/year=2024/month=01/day=02/news_items_2024_01_02_03_04.jsonl"""
    return (
        f"{prefix}/year={timestamp:%Y}/month={timestamp:%m}/day={timestamp:%d}/"
        f"{snapshot_filename(prefix, timestamp)}"
    )


def upload_jsonl_records_to_s3(
    records: list[Any],
    prefix: str,
    bucket: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> str:
    """
    Upload dataclass records to S3 as one JSONL object.

    The bucket defaults to $S3_BUCKET_NAME.

    Returns:
        The S3 key written.

    Raises:
        ConfigurationError: If no bucket is given and S3_BUCKET_NAME is unset.
    """
    bucket = bucket or require_env("S3_BUCKET_NAME")["S3_BUCKET_NAME"]
    key = build_s3_key(prefix, timestamp or datetime.now(timezone.utc))

    get_s3_client().put_object(
        Bucket=bucket,
        Key=key,
        Body=encode_jsonl(records).encode("utf-8"),
        ContentType="application/jsonl",
    )
    logger.info("Uploaded %d records to s3://%s/%s", len(records), bucket, key)
    return key
