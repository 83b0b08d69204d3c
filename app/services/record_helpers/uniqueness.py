# /app/services/record_helpers/uniqueness.py

"""
The uniqueness guard for every entity kind that carries a distinguishing key.

Two layers enforce each key:

1. `ensure_unique` is an application-level pre-check that runs before a create,
   or before an update that changes one of the key's fields. It produces a clean
   Conflict message without touching the write path.
2. The named `UniqueConstraint` on the table is the real guarantee. Two
   concurrent writers can both pass the pre-check; the second commit then fails
   with an `IntegrityError`, which `conflict_from_integrity_error` translates into
   the same `ConflictError` the pre-check would have raised.
"""

import logging
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple, Type

from sqlalchemy.exc import IntegrityError

from ...core.exceptions import ConflictError
from ...db.models.user_model import User
from ...db.models.student_course_models import Student, Course
from ...db.models.record_models import Grade, AttendanceRecord

logger = logging.getLogger(__name__)


class UniqueKey(NamedTuple):
    constraint_name: str
    model: Type
    fields: Tuple[str, ...]
    message: str

    def values_from(self, source: Any, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Collects the key's field values from `source`, preferring `overrides` where supplied."""
        overrides = overrides or {}
        return {f: overrides[f] if f in overrides else getattr(source, f) for f in self.fields}

    def changed(self, current: Any, changes: Mapping[str, Any]) -> bool:
        return any(f in changes and changes[f] != getattr(current, f) for f in self.fields)

    def matches_error(self, error_text: str) -> bool:
        # PostgreSQL names the violated constraint; SQLite lists the columns.
        if self.constraint_name in error_text:
            return True
        table = self.model.__tablename__
        columns = ", ".join(f"{table}.{f}" for f in self.fields)
        return f"UNIQUE constraint failed: {columns}" in error_text


USERNAME = UniqueKey("uq_users_username", User, ("username",), "Username is already taken!")
STUDENT_EMAIL = UniqueKey("uq_students_email", Student, ("email",), "Email is already in use!")
STUDENT_ID_NUMBER = UniqueKey(
    "uq_students_student_id_number", Student, ("student_id_number",), "Student ID Number is already in use!"
)
COURSE_CODE = UniqueKey("uq_courses_course_code", Course, ("course_code",), "Course Code is already in use!")
GRADE_ASSESSMENT = UniqueKey(
    "uq_grades_student_course_assessment", Grade,
    ("student_id", "course_id", "assessment_type"),
    "Grade already exists for this student, course, and assessment type.",
)
ATTENDANCE_DAY = UniqueKey(
    "uq_attendance_student_course_date", AttendanceRecord,
    ("student_id", "course_id", "attendance_date"),
    "Attendance already recorded for this student, course, and date.",
)

ALL_KEYS = (USERNAME, STUDENT_EMAIL, STUDENT_ID_NUMBER, COURSE_CODE, GRADE_ASSESSMENT, ATTENDANCE_DAY)


def ensure_unique(db, key: UniqueKey, values: Mapping[str, Any], exclude_id: Optional[str] = None) -> None:
    """Raises ConflictError if another record already holds `values` for `key`."""
    if db.record_exists(key.model, exclude_id=exclude_id, **values):
        logger.warning("Uniqueness pre-check rejected %s for %s", key.constraint_name, dict(values))
        raise ConflictError(key.message)


def ensure_unique_on_update(db, key: UniqueKey, current: Any, changes: Mapping[str, Any]) -> None:
    """
    Re-checks `key` only when `changes` alters one of its fields, so a record
    never conflicts with its own stored state.
    """
    if key.changed(current, changes):
        ensure_unique(db, key, key.values_from(current, changes), exclude_id=current.id)


def conflict_from_integrity_error(error: IntegrityError) -> ConflictError:
    """Maps a storage-level unique violation onto the matching key's message."""
    error_text = str(error.orig) if error.orig is not None else str(error)
    for key in ALL_KEYS:
        if key.matches_error(error_text):
            logger.warning("Storage constraint %s rejected a concurrent write", key.constraint_name)
            return ConflictError(key.message)
    logger.warning("Unrecognized integrity error: %s", error_text)
    return ConflictError("The record conflicts with an existing record.")
