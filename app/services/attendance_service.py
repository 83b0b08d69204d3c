# /app/services/attendance_service.py

import logging
import uuid
from datetime import date
from typing import Dict, List

from ..core.exceptions import RecordNotFoundError, ValidationFailure
from ..models import attendance_model
from .database_service import DatabaseService
from .record_helpers import references, uniqueness
from .record_helpers.views import attendance_view

logger = logging.getLogger(__name__)


def _get_record_or_404(db: DatabaseService, record_id: str):
    record = db.get_attendance_record_by_id(record_id)
    if record is None:
        raise RecordNotFoundError(f"Attendance record not found with id: {record_id}")
    return record


def record_attendance(record_data: attendance_model.AttendanceRecordCreate, db: DatabaseService) -> Dict:
    """One record per (student, course, date); a second mark for the same day is a conflict."""
    record = record_data.model_dump()
    references.students.resolve(db, record["student_id"])
    references.courses.resolve(db, record["course_id"])
    uniqueness.ensure_unique(
        db, uniqueness.ATTENDANCE_DAY,
        {f: record[f] for f in uniqueness.ATTENDANCE_DAY.fields},
    )

    record["id"] = f"att_{uuid.uuid4().hex[:12]}"
    new_record = db.add_attendance_record(record)
    logger.info(
        "Marked student %s %s in course %s on %s",
        new_record.student_id, new_record.status, new_record.course_id, new_record.attendance_date,
    )
    return attendance_view(new_record)


def get_attendance_record_by_id(record_id: str, db: DatabaseService) -> Dict:
    return attendance_view(_get_record_or_404(db, record_id))


def get_attendance_by_student(student_id: str, db: DatabaseService) -> List[Dict]:
    references.students.resolve(db, student_id)
    return [attendance_view(r) for r in db.get_attendance_by_student_id(student_id)]


def get_attendance_by_course(course_id: str, db: DatabaseService) -> List[Dict]:
    references.courses.resolve(db, course_id)
    return [attendance_view(r) for r in db.get_attendance_by_course_id(course_id)]


def get_attendance_by_student_and_course(student_id: str, course_id: str, db: DatabaseService) -> List[Dict]:
    references.students.resolve(db, student_id)
    references.courses.resolve(db, course_id)
    return [attendance_view(r) for r in db.get_attendance_by_student_and_course(student_id, course_id)]


def get_attendance_by_course_and_date(course_id: str, attendance_date: date, db: DatabaseService) -> List[Dict]:
    references.courses.resolve(db, course_id)
    return [attendance_view(r) for r in db.get_attendance_by_course_and_date(course_id, attendance_date)]


def update_attendance_record(
    record_id: str,
    record_update: attendance_model.AttendanceRecordUpdate,
    db: DatabaseService
) -> Dict:
    changes = record_update.model_dump(exclude_none=True)
    if not changes:
        raise ValidationFailure("No update data provided.")
    attendance_record = _get_record_or_404(db, record_id)

    references.students.resolve_if_changed(db, changes.get("student_id"), attendance_record.student_id)
    references.courses.resolve_if_changed(db, changes.get("course_id"), attendance_record.course_id)
    uniqueness.ensure_unique_on_update(db, uniqueness.ATTENDANCE_DAY, attendance_record, changes)

    return attendance_view(db.update_attendance_record(attendance_record, changes))


def delete_attendance_record(record_id: str, db: DatabaseService) -> None:
    if not db.delete_attendance_record(record_id):
        raise RecordNotFoundError(f"Attendance record not found with id: {record_id}")
    logger.info("Deleted attendance record %s", record_id)
