"""Tests for content file schemas."""

from datetime import date

import pytest
from pydantic import ValidationError

from world_timeline.schemas.base import (
    EventCategory,
    EventSchema,
    MonthFileSchema,
    YearFileSchema,
)


def valid_event(**overrides) -> dict:
    event = {
        "date": "1868-10-23",
        "title": "明治改元",
        "category": "政治・経済",
        "description": "慶応から明治へ改元",
        "related_countries": ["日本"],
    }
    event.update(overrides)
    return event


def test_event_category_values():
    assert EventCategory("文化") is EventCategory.CULTURE
    assert len(list(EventCategory)) == 8


def test_event_category_lookup_by_name():
    assert EventCategory("culture") is EventCategory.CULTURE
    assert EventCategory("War_Conflict") is EventCategory.WAR_CONFLICT
    with pytest.raises(ValueError):
        EventCategory("sports")


def test_valid_event():
    event = EventSchema.model_validate(valid_event())
    assert event.date == "1868-10-23"
    assert event.related_countries == ["日本"]
    assert event.sources is None


def test_related_countries_default():
    raw = valid_event()
    del raw["related_countries"]
    assert EventSchema.model_validate(raw).related_countries == []


def test_unquoted_yaml_date_is_accepted():
    event = EventSchema.model_validate(valid_event(date=date(1868, 10, 23)))
    assert event.date == "1868-10-23"


@pytest.mark.parametrize("bad_date", ["1868-02-30", "1868/10/23", 18681023])
def test_invalid_date(bad_date):
    with pytest.raises(ValidationError):
        EventSchema.model_validate(valid_event(date=bad_date))


def test_title_bounds():
    with pytest.raises(ValidationError):
        EventSchema.model_validate(valid_event(title=""))
    with pytest.raises(ValidationError):
        EventSchema.model_validate(valid_event(title="x" * 201))
    EventSchema.model_validate(valid_event(title="x" * 200))


def test_description_bounds():
    with pytest.raises(ValidationError):
        EventSchema.model_validate(valid_event(description="x" * 2001))


def test_unknown_category():
    with pytest.raises(ValidationError) as exc:
        EventSchema.model_validate(valid_event(category="sports"))
    assert "unknown category" in str(exc.value)


def test_empty_source_rejected():
    with pytest.raises(ValidationError):
        EventSchema.model_validate(valid_event(sources=[""]))


def test_strict_types():
    with pytest.raises(ValidationError):
        EventSchema.model_validate(valid_event(title=123))


def test_month_file_schema():
    doc = MonthFileSchema.model_validate({"events": [valid_event()]})
    assert len(doc.events) == 1
    assert doc.year is None


def test_month_file_requires_events():
    with pytest.raises(ValidationError):
        MonthFileSchema.model_validate({})


def test_month_file_declared_month_range():
    with pytest.raises(ValidationError):
        MonthFileSchema.model_validate({"month": 13, "events": []})


def test_year_file_schema():
    doc = YearFileSchema.model_validate(
        {"summary": "明治維新", "majorEvents": [valid_event()]}
    )
    assert doc.summary == "明治維新"
    assert len(doc.major_events) == 1


def test_year_file_all_optional():
    doc = YearFileSchema.model_validate({})
    assert doc.summary is None
    assert doc.major_events is None


def test_year_file_summary_bound():
    with pytest.raises(ValidationError):
        YearFileSchema.model_validate({"summary": "x" * 1001})
