# /tests/test_timetable_service.py

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from app.core.exceptions import RecordNotFoundError, ValidationFailure
from app.models.course_model import CourseCreate
from app.models.schedule_model import ScheduledClassCreate, ScheduledClassUpdate
from app.services import course_service, timetable_service


@pytest.fixture
def cs101(db):
    return course_service.create_course(CourseCreate(course_code="CS101", course_name="Intro", credits=3), db)


def _schedule(db, course_id, day="monday", start="09:00", end="10:30", room="B12"):
    return timetable_service.create_scheduled_class(ScheduledClassCreate(
        course_id=course_id, day_of_week=day, start_time=start, end_time=end, room_number=room,
    ), db)


def test_create_stores_uppercase_day_and_joins_course(db, cs101):
    entry = _schedule(db, cs101["id"])
    assert entry["id"].startswith("sch_")
    assert entry["day_of_week"] == "MONDAY"
    assert entry["course_code"] == "CS101"
    assert entry["course_name"] == "Intro"


def test_create_with_unknown_course_persists_nothing(db):
    with pytest.raises(RecordNotFoundError) as exc_info:
        _schedule(db, "crs_missing")
    assert exc_info.value.detail == "Course not found with id: crs_missing"
    assert timetable_service.get_all_scheduled_classes(db) == []


def test_overlapping_entries_are_allowed(db, cs101):
    _schedule(db, cs101["id"])
    _schedule(db, cs101["id"])
    assert len(timetable_service.get_scheduled_classes_by_course(cs101["id"], db)) == 2


@pytest.mark.parametrize("day", ["tuesday", "TUESDAY", " Tuesday "])
def test_lookup_by_day_is_case_insensitive(db, cs101, day):
    _schedule(db, cs101["id"], day="TUESDAY")
    _schedule(db, cs101["id"], day="FRIDAY")
    entries = timetable_service.get_scheduled_classes_by_day(day, db)
    assert [e["day_of_week"] for e in entries] == ["TUESDAY"]


def test_lookup_by_unknown_day_is_a_validation_failure(db):
    with pytest.raises(ValidationFailure):
        timetable_service.get_scheduled_classes_by_day("Funday", db)


def test_lookup_by_unknown_course(db):
    with pytest.raises(RecordNotFoundError):
        timetable_service.get_scheduled_classes_by_course("crs_missing", db)


def test_update_to_unknown_course_leaves_entry_unchanged(db, cs101):
    entry = _schedule(db, cs101["id"])
    with pytest.raises(RecordNotFoundError):
        timetable_service.update_scheduled_class(entry["id"], ScheduledClassUpdate(course_id="crs_missing"), db)
    assert timetable_service.get_scheduled_class_by_id(entry["id"], db)["course_id"] == cs101["id"]


def test_partial_update_changes_only_supplied_fields(db, cs101):
    entry = _schedule(db, cs101["id"])
    updated = timetable_service.update_scheduled_class(
        entry["id"], ScheduledClassUpdate(room_number="C3", day_of_week="wednesday"), db
    )
    assert updated["room_number"] == "C3"
    assert updated["day_of_week"] == "WEDNESDAY"
    assert updated["start_time"] == "09:00"


def test_deleting_the_course_leaves_entry_with_empty_course_fields(db, cs101):
    entry = _schedule(db, cs101["id"])
    course_service.delete_course(cs101["id"], db)
    view = timetable_service.get_scheduled_class_by_id(entry["id"], db)
    assert view["course_id"] == cs101["id"]
    assert view["course_code"] is None
    assert view["course_name"] is None


@pytest.mark.parametrize("start_time", ["24:00", "09:60", "1٢:30", "0٩:15"])
def test_start_time_must_be_ascii_hh_mm(start_time):
    with pytest.raises(ValidationError):
        ScheduledClassCreate(course_id="crs_1", day_of_week="MONDAY", start_time=start_time, end_time="10:00")


def test_empty_update_is_rejected_before_the_lookup():
    mock_db_service = MagicMock()
    with pytest.raises(ValidationFailure):
        timetable_service.update_scheduled_class("sch_missing", ScheduledClassUpdate(), mock_db_service)
    mock_db_service.get_scheduled_class_by_id.assert_not_called()
