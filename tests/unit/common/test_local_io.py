"""Tests for common.local_io module."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone

from common.local_io import encode_jsonl, save_jsonl_records_local, snapshot_filename

STAMP = datetime(2024, 1, 2, 3, 4, tzinfo=timezone.utc)


@dataclass
class _Record:
    title: str
    date: datetime


class TestEncodeJsonl:
    def test_one_line_per_record(self) -> None:
        text = encode_jsonl([_Record("A", STAMP), _Record("Ünï", STAMP)])

        lines = text.splitlines()
        assert json.loads(lines[0]) == {"title": "A", "date": "2024-01-02T03:04:00+00:00"}
        assert "Ünï" in lines[1]
        assert text.endswith("\n")

    def test_empty(self) -> None:
        assert encode_jsonl([]) == ""


class TestSaveJsonlRecordsLocal:
    def test_writes_named_snapshot(self, tmp_path) -> None:
        path = save_jsonl_records_local(
            [_Record("A", STAMP)], "news_items", output_dir=str(tmp_path / "out"), timestamp=STAMP
        )

        assert path.name == snapshot_filename("news_items", STAMP) == "news_items_2024_01_02_03_04.jsonl"
        assert json.loads(path.read_text(encoding="utf-8"))["title"] == "A"
