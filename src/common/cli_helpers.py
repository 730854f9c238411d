"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
from datetime import date, datetime, timedelta, timezone


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_date(value: str, field_name: str = "date") -> date:
    """Parse a YYYY-MM-DD argparse value.

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid date.
    """
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be YYYY-MM-DD") from exc


def date_to_range(d: date) -> tuple[datetime, datetime]:
    """UTC midnight of ``d`` and of the following day."""
    start = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def trailing_range(end: datetime, days: int) -> tuple[datetime, datetime]:
    """The ``days`` days ending (exclusively) at ``end``."""
    return end - timedelta(days=days), end


def previous_month_range(today: date) -> tuple[datetime, datetime]:
    """Return the (start, end) UTC range of the calendar month before ``today``.

    End is exclusive: midnight on the first day of ``today``'s month.
    """
    end = datetime(today.year, today.month, 1, tzinfo=timezone.utc)
    last_day = end - timedelta(days=1)
    start = datetime(last_day.year, last_day.month, 1, tzinfo=timezone.utc)
    return start, end
