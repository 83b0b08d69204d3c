# /tests/test_grade_attendance_services.py

from datetime import date

import pytest

from app.core.exceptions import ConflictError, RecordNotFoundError
from app.models.attendance_model import AttendanceRecordCreate, AttendanceRecordUpdate
from app.models.course_model import CourseCreate
from app.models.grade_model import GradeCreate, GradeUpdate
from app.models.student_model import StudentCreate
from app.services import attendance_service, course_service, grade_service, student_service
from app.services.record_helpers import uniqueness


@pytest.fixture
def ada(db):
    return student_service.create_student(StudentCreate(
        first_name="Ada", last_name="Lovelace", email="ada@school.edu", student_id_number="S-1001",
    ), db)


@pytest.fixture
def alan(db):
    return student_service.create_student(StudentCreate(
        first_name="Alan", last_name="Turing", email="alan@school.edu", student_id_number="S-1002",
    ), db)


@pytest.fixture
def cs101(db):
    return course_service.create_course(CourseCreate(course_code="CS101", course_name="Intro", credits=3), db)


def _grade(db, student_id, course_id, assessment_type="Midterm", value="A"):
    return grade_service.create_grade(GradeCreate(
        student_id=student_id, course_id=course_id, assessment_type=assessment_type, grade_value=value,
    ), db)


def _mark(db, student_id, course_id, on=date(2024, 1, 10), status="PRESENT"):
    return attendance_service.record_attendance(AttendanceRecordCreate(
        student_id=student_id, course_id=course_id, attendance_date=on, status=status,
    ), db)


# --- Grades ---

def test_grade_view_carries_student_and_course_display_fields(db, ada, cs101):
    grade = _grade(db, ada["id"], cs101["id"])
    assert grade["id"].startswith("grd_")
    assert grade["student_first_name"] == "Ada"
    assert grade["student_last_name"] == "Lovelace"
    assert grade["course_code"] == "CS101"


def test_same_assessment_twice_is_a_conflict(db, ada, cs101):
    _grade(db, ada["id"], cs101["id"])
    with pytest.raises(ConflictError) as exc_info:
        _grade(db, ada["id"], cs101["id"], value="B")
    assert exc_info.value.detail == uniqueness.GRADE_ASSESSMENT.message
    assert len(grade_service.get_grades_by_student(ada["id"], db)) == 1


def test_different_assessment_types_are_separate_grades(db, ada, cs101):
    _grade(db, ada["id"], cs101["id"], "Midterm")
    _grade(db, ada["id"], cs101["id"], "Final")
    assert len(grade_service.get_grades_by_student_and_course(ada["id"], cs101["id"], db)) == 2


@pytest.mark.parametrize("missing", ["student", "course"])
def test_grade_with_unknown_reference_persists_nothing(db, ada, cs101, missing):
    student_id = "stu_missing" if missing == "student" else ada["id"]
    course_id = "crs_missing" if missing == "course" else cs101["id"]
    with pytest.raises(RecordNotFoundError):
        _grade(db, student_id, course_id)
    assert grade_service.get_all_grades(db) == []


def _duplicate_email(db, ada, cs101):
    return student_service.create_student(StudentCreate(
        first_name="Ada", last_name="Byron", email="ada@school.edu", student_id_number="S-9999",
    ), db)


def _duplicate_course_code(db, ada, cs101):
    return course_service.create_course(CourseCreate(course_code="CS101", course_name="Shadow", credits=1), db)


def _duplicate_grade(db, ada, cs101):
    _grade(db, ada["id"], cs101["id"])
    return _grade(db, ada["id"], cs101["id"], value="C")


def _duplicate_attendance(db, ada, cs101):
    _mark(db, ada["id"], cs101["id"])
    return _mark(db, ada["id"], cs101["id"], status="ABSENT")


@pytest.mark.parametrize("write_duplicate, key", [
    (_duplicate_email, uniqueness.STUDENT_EMAIL),
    (_duplicate_course_code, uniqueness.COURSE_CODE),
    (_duplicate_grade, uniqueness.GRADE_ASSESSMENT),
    (_duplicate_attendance, uniqueness.ATTENDANCE_DAY),
])
def test_concurrent_duplicate_is_caught_by_the_storage_constraint(
    db, db_session, ada, cs101, mocker, write_duplicate, key
):
    """
    GIVEN a record already holding a unique key
    WHEN a second writer passes the pre-check (simulated by disabling it)
    THEN the table's unique constraint rejects the commit as the same conflict
    """
    mocker.patch("app.services.record_helpers.uniqueness.ensure_unique")

    with pytest.raises(ConflictError) as exc_info:
        write_duplicate(db, ada, cs101)

    assert exc_info.value.detail == key.message
    assert db_session.query(key.model).count() == 1


def test_update_grade_value_only(db, ada, cs101):
    grade = _grade(db, ada["id"], cs101["id"])
    updated = grade_service.update_grade(grade["id"], GradeUpdate(grade_value="A+", comments="Excellent"), db)
    assert updated["grade_value"] == "A+"
    assert updated["comments"] == "Excellent"
    assert updated["assessment_type"] == "Midterm"


def test_update_grade_onto_an_existing_key_is_a_conflict(db, ada, cs101):
    _grade(db, ada["id"], cs101["id"], "Midterm")
    final = _grade(db, ada["id"], cs101["id"], "Final")
    with pytest.raises(ConflictError):
        grade_service.update_grade(final["id"], GradeUpdate(assessment_type="Midterm"), db)


def test_update_grade_to_another_student(db, ada, alan, cs101):
    grade = _grade(db, ada["id"], cs101["id"])
    updated = grade_service.update_grade(grade["id"], GradeUpdate(student_id=alan["id"]), db)
    assert updated["student_first_name"] == "Alan"


def test_update_grade_to_unknown_student(db, ada, cs101):
    grade = _grade(db, ada["id"], cs101["id"])
    with pytest.raises(RecordNotFoundError):
        grade_service.update_grade(grade["id"], GradeUpdate(student_id="stu_missing"), db)


def test_grade_lookups_by_unknown_reference(db):
    with pytest.raises(RecordNotFoundError):
        grade_service.get_grades_by_student("stu_missing", db)
    with pytest.raises(RecordNotFoundError):
        grade_service.get_grades_by_course("crs_missing", db)


def test_delete_grade(db, ada, cs101):
    grade = _grade(db, ada["id"], cs101["id"])
    grade_service.delete_grade(grade["id"], db)
    with pytest.raises(RecordNotFoundError) as exc_info:
        grade_service.get_grade_by_id(grade["id"], db)
    assert exc_info.value.detail == f"Grade not found with id: {grade['id']}"


# --- Attendance ---

def test_second_mark_for_the_same_day_is_a_conflict(db, ada, cs101):
    _mark(db, ada["id"], cs101["id"])
    with pytest.raises(ConflictError) as exc_info:
        _mark(db, ada["id"], cs101["id"], status="ABSENT")
    assert exc_info.value.detail == uniqueness.ATTENDANCE_DAY.message


def test_attendance_by_course_and_date(db, ada, alan, cs101):
    _mark(db, ada["id"], cs101["id"], on=date(2024, 1, 10))
    _mark(db, alan["id"], cs101["id"], on=date(2024, 1, 10), status="LATE")
    _mark(db, ada["id"], cs101["id"], on=date(2024, 1, 11))

    day = attendance_service.get_attendance_by_course_and_date(cs101["id"], date(2024, 1, 10), db)
    assert sorted(r["student_first_name"] for r in day) == ["Ada", "Alan"]
    assert len(attendance_service.get_attendance_by_student_and_course(ada["id"], cs101["id"], db)) == 2


def test_move_attendance_onto_a_marked_day_is_a_conflict(db, ada, cs101):
    _mark(db, ada["id"], cs101["id"], on=date(2024, 1, 10))
    second = _mark(db, ada["id"], cs101["id"], on=date(2024, 1, 11))
    with pytest.raises(ConflictError):
        attendance_service.update_attendance_record(
            second["id"], AttendanceRecordUpdate(attendance_date=date(2024, 1, 10)), db
        )


def test_update_attendance_status(db, ada, cs101):
    record = _mark(db, ada["id"], cs101["id"])
    updated = attendance_service.update_attendance_record(record["id"], AttendanceRecordUpdate(status="EXCUSED"), db)
    assert updated["status"] == "EXCUSED"
    assert updated["attendance_date"] == date(2024, 1, 10)


def test_attendance_with_unknown_course_persists_nothing(db, ada):
    with pytest.raises(RecordNotFoundError):
        _mark(db, ada["id"], "crs_missing")
    assert attendance_service.get_attendance_by_student(ada["id"], db) == []


def test_delete_unknown_attendance_record(db):
    with pytest.raises(RecordNotFoundError) as exc_info:
        attendance_service.delete_attendance_record("att_missing", db)
    assert exc_info.value.detail == "Attendance record not found with id: att_missing"
