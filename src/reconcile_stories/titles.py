"""Headline cleaning, duplicate keys and priority-source detection."""

from __future__ import annotations

import re

PRIORITY_SOURCES = ("BlackRock", "Franklin Templeton")

TITLE_SUFFIXES_TO_REMOVE = (
    " - Decrypt",
    " | Investing.com",
    ": Report",
    " By Investing.com",
)

# Applied to the lowercased, punctuation-free key until none of them match.
_BOILERPLATE_PATTERNS = (
    re.compile(r"^(?:breaking|update)\b\s*"),
    re.compile(r"\s*\bby invezz\b"),
    re.compile(r"\s*\bledger insights blockchain for enterprise$"),
)


def clean_title(title: str) -> str:
    """Remove known source-attribution suffixes (case-sensitive, each at most once)."""
    cleaned = title
    for suffix in TITLE_SUFFIXES_TO_REMOVE:
        if cleaned.endswith(suffix):
            cleaned = cleaned[: -len(suffix)]
    return cleaned


def _collapse(value: str) -> str:
    return re.sub(r"\s+", " ", value).strip()


def normalize_title(title: str) -> str:
    """
    Build the duplicate-detection key for a headline.

    Two headlines are treated as the same story when their keys are equal.
    The result is lowercase, free of punctuation and single-spaced, and
    ``normalize_title(normalize_title(t)) == normalize_title(t)``.
    """
    key = clean_title(title).lower().strip()
    for suffix in TITLE_SUFFIXES_TO_REMOVE:
        if key.endswith(suffix.lower()):
            key = key[: -len(suffix)]

    key = _collapse(re.sub(r"[^\w\s]", "", key))

    previous = None
    while key != previous:
        previous = key
        for pattern in _BOILERPLATE_PATTERNS:
            key = _collapse(pattern.sub("", key))
    return key


def is_priority_source(title: str) -> bool:
    """True if the raw headline names one of the trusted issuers."""
    return any(source in title for source in PRIORITY_SOURCES)
