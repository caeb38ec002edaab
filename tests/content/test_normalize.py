"""Tests for building records from parsed content."""

from datetime import date

import pytest
from pydantic import ValidationError

from world_timeline.content.normalize import (
    normalize_event,
    normalize_events,
    normalize_month_record,
    normalize_year_record,
)
from world_timeline.models import Event, MonthRecord, YearRecord


def raw_event(**overrides) -> dict:
    event = {
        "date": "1923-09-01",
        "title": "関東大震災",
        "category": "災害",
        "description": "相模湾を震源とする大地震",
        "related_countries": ["日本"],
    }
    event.update(overrides)
    return event


def test_normalize_event():
    event = normalize_event(raw_event(sources=["内務省社会局『大正震災志』"]))
    assert isinstance(event, Event)
    assert event.date == "1923-09-01"
    assert event.title == "関東大震災"
    assert event.category == "災害"
    assert event.related_regions == ["日本"]
    assert event.sources == ["内務省社会局『大正震災志』"]


def test_sources_absent_is_none():
    assert normalize_event(raw_event()).sources is None


def test_sources_not_a_list_is_none():
    assert normalize_event(raw_event(sources="single source")).sources is None


def test_related_countries_missing_is_empty():
    raw = raw_event()
    del raw["related_countries"]
    assert normalize_event(raw).related_regions == []


@pytest.mark.parametrize("field", ["date", "title", "category", "description"])
def test_missing_required_field_drops_event(field):
    raw = raw_event()
    del raw[field]
    assert normalize_event(raw) is None


@pytest.mark.parametrize("field", ["title", "category", "description"])
def test_non_string_required_field_drops_event(field):
    assert normalize_event(raw_event(**{field: 42})) is None


@pytest.mark.parametrize("field", ["title", "description"])
def test_blank_required_field_drops_event(field):
    assert normalize_event(raw_event(**{field: "   "})) is None


def test_unsafe_string_drops_event():
    assert normalize_event(raw_event(title="bad\x00title")) is None
    assert normalize_event(raw_event(description="bell\x07")) is None


def test_newlines_and_tabs_are_safe():
    event = normalize_event(raw_event(description="line one\n\tline two"))
    assert event.description == "line one\n\tline two"


def test_whitespace_is_trimmed():
    assert normalize_event(raw_event(title="  関東大震災 ")).title == "関東大震災"


def test_unquoted_yaml_date():
    event = normalize_event(raw_event(date=date(1923, 9, 1)))
    assert event.date == "1923-09-01"


@pytest.mark.parametrize("bad_date", ["1923-02-30", "1923/09/01", "September 1923"])
def test_invalid_date_drops_event(bad_date):
    assert normalize_event(raw_event(date=bad_date)) is None


@pytest.mark.parametrize("value", [None, "text", 1, ["list"]])
def test_non_mapping_event(value):
    assert normalize_event(value) is None


def test_region_list_filters_non_strings():
    event = normalize_event(raw_event(related_countries=["日本", 1, None, "中国", {"x": 1}]))
    assert event.related_regions == ["日本", "中国"]


def test_region_list_is_bounded():
    event = normalize_event(raw_event(related_countries=[f"r{i}" for i in range(150)]))
    assert len(event.related_regions) == 100
    assert event.related_regions[-1] == "r99"


def test_region_items_are_truncated_and_cleaned():
    event = normalize_event(raw_event(related_countries=["x" * 20000, "日\x01本"]))
    assert len(event.related_regions[0]) == 10000
    assert event.related_regions[1] == "日本"


def test_normalize_events_keeps_order_and_drops_failures():
    events = normalize_events(
        [
            raw_event(title="first"),
            raw_event(title=None),
            "garbage",
            raw_event(title="second"),
        ]
    )
    assert [e.title for e in events] == ["first", "second"]


def test_normalize_events_not_a_list():
    assert normalize_events({"date": "1923-09-01"}) == []
    assert normalize_events(None) == []


def test_month_record():
    raw = {"events": [raw_event(), raw_event(category=None)]}
    record = normalize_month_record(raw, 1923, 9)
    assert isinstance(record, MonthRecord)
    assert record.year == 1923
    assert record.month == 9
    assert len(record.events) == 1


def test_month_record_path_identifiers_win():
    raw = {"year": 1800, "month": 1, "events": [raw_event()]}
    record = normalize_month_record(raw, 1923, 9)
    assert (record.year, record.month) == (1923, 9)


def test_month_record_without_events():
    record = normalize_month_record({"note": "nothing yet"}, 1923, 9)
    assert record.events == []


@pytest.mark.parametrize("raw", [None, [], "text", 5])
def test_month_record_not_a_mapping(raw):
    assert normalize_month_record(raw, 1923, 9) is None


def test_year_record():
    raw = {"summary": " 大正デモクラシー ", "majorEvents": [raw_event()]}
    record = normalize_year_record(raw, 1923)
    assert isinstance(record, YearRecord)
    assert record.year == 1923
    assert record.summary == "大正デモクラシー"
    assert len(record.major_events) == 1


def test_year_record_empty_major_events_is_none():
    record = normalize_year_record({"summary": "s", "majorEvents": [{"title": "x"}]}, 1923)
    assert record.major_events is None


def test_year_record_ignores_declared_year():
    assert normalize_year_record({"year": 1999}, 1923).year == 1923


def test_year_record_non_string_summary():
    assert normalize_year_record({"summary": ["a"]}, 1923).summary is None


def test_year_record_not_a_mapping():
    assert normalize_year_record(None, 1923) is None


def test_records_are_frozen():
    record = normalize_month_record({"events": [raw_event()]}, 1923, 9)
    with pytest.raises(ValidationError):
        record.month = 10
