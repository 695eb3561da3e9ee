"""Tests for ExtractedEventInfo schema."""

import json
from datetime import date

from src.event_extraction.schemas import CATEGORIES, ExtractedEventInfo


class TestExtractedEventInfo:
    """Tests for ExtractedEventInfo dataclass."""

    def test_defaults(self):
        info = ExtractedEventInfo()
        assert info.title is None
        assert info.date is None
        assert info.priority == "medium"
        assert info.tags == []
        assert not info.has_date

    def test_tags_not_shared_between_instances(self):
        a = ExtractedEventInfo()
        b = ExtractedEventInfo()
        a.tags.append("x")
        assert b.tags == []

    def test_to_dict_is_json_serializable(self):
        info = ExtractedEventInfo(
            title="meeting with Sarah",
            date=date(2024, 1, 11),
            time="3:00pm",
            priority="high",
            tags=["work"],
        )
        data = info.to_dict()
        assert data["date"] == "2024-01-11"
        assert data["recurring"] is None
        assert json.loads(json.dumps(data))["tags"] == ["work"]

    def test_from_dict_parses_iso_date(self):
        info = ExtractedEventInfo.from_dict(
            {"title": "x", "date": "2024-03-15", "tags": ["a"], "recurring": "yearly"}
        )
        assert info.date == date(2024, 3, 15)
        assert info.recurring == "yearly"
        assert info.priority == "medium"

    def test_from_dict_without_date(self):
        assert ExtractedEventInfo.from_dict({}).date is None


def test_category_vocabulary_order():
    assert CATEGORIES == (
        "work", "personal", "health", "social", "family",
        "shopping", "travel", "education", "finance", "other",
    )
