"""Tests for select_digest.select_digest module."""

from datetime import datetime, timezone

from news_store.models import PersistedNewsRecord
from reconcile_stories.models import ItemIdentity
from select_digest.select_digest import build_digest_entries, build_excerpt, select_for_digest


def _record(record_id, title, clicks, day=1, body=None, summary=None) -> PersistedNewsRecord:
    return PersistedNewsRecord(
        id=record_id,
        title=title,
        type="article",
        url=f"https://news.test/{record_id}",
        date=datetime(2024, 1, day, tzinfo=timezone.utc),
        identity=ItemIdentity(article_uri=f"a{record_id}"),
        clicks=clicks,
        body=body,
        summary=summary,
    )


class TestSelectForDigest:
    def test_one_per_title_group_most_clicked_first(self) -> None:
        records = [
            _record(1, "Fund X launches", 5),
            _record(2, "Fund X Launches - Decrypt", 9),
            _record(3, "fund x launches!", 1),
            _record(4, "Fund X launches", 2),
            _record(5, "Tether news", 3),
            _record(6, "Tether News | Investing.com", 4),
            _record(7, "tether news", 0),
            _record(8, "Quiet story", 20),
            _record(9, "quiet story", 1),
            _record(10, "Quiet Story: Report", 2),
        ]

        selected = select_for_digest(records, max_items=2)

        assert [r.id for r in selected] == [8, 2]

    def test_ties_within_group_go_to_most_recent(self) -> None:
        selected = select_for_digest([_record(1, "Same", 3, day=1), _record(2, "same", 3, day=5)])
        assert [r.id for r in selected] == [2]

    def test_empty_input(self) -> None:
        assert select_for_digest([]) == []

    def test_default_cap_is_eight(self) -> None:
        records = [_record(i, f"Story {i}", i) for i in range(12)]
        assert len(select_for_digest(records)) == 8


class TestBuildDigestEntries:
    def test_excerpt_prefers_summary_then_body_then_title(self) -> None:
        assert build_excerpt(_record(1, "T", 0, summary="Sum", body="Body")) == "Sum"
        assert build_excerpt(_record(1, "T", 0, body="abcdef"), excerpt_length=3) == "abc..."
        assert build_excerpt(_record(1, "T", 0)) == "T"

    def test_entry_fields(self) -> None:
        entry = build_digest_entries([_record(3, "Fund X", 7, day=5, summary="What")])[0]

        assert entry.title == "Fund X"
        assert entry.date == "January 5, 2024"
        assert entry.excerpt == "What"
        assert entry.link == "https://news.test/3"
        assert entry.clicks == 7
