# /app/services/student_service.py

"""
Business logic for Student records.

A student carries two independent uniqueness keys (email and student ID
number). Deleting a student removes only the student row; grades and
attendance records that reference it stay behind with a dangling id.
"""

import logging
import uuid
from typing import Dict, List

from ..core.exceptions import RecordNotFoundError, ValidationFailure
from ..models import student_model
from .database_service import DatabaseService
from .record_helpers import uniqueness
from .record_helpers.views import student_view

logger = logging.getLogger(__name__)


def _get_student_or_404(db: DatabaseService, student_id: str):
    student = db.get_student_by_id(student_id)
    if student is None:
        raise RecordNotFoundError(f"Student not found with id: {student_id}")
    return student


def create_student(student_data: student_model.StudentCreate, db: DatabaseService) -> Dict:
    record = student_data.model_dump()
    uniqueness.ensure_unique(db, uniqueness.STUDENT_EMAIL, {"email": record["email"]})
    uniqueness.ensure_unique(db, uniqueness.STUDENT_ID_NUMBER, {"student_id_number": record["student_id_number"]})

    record["id"] = f"stu_{uuid.uuid4().hex[:12]}"
    new_student = db.add_student(record)
    logger.info("Created student %s (%s)", new_student.id, new_student.student_id_number)
    return student_view(new_student)


def get_all_students(db: DatabaseService) -> List[Dict]:
    return [student_view(s) for s in db.get_all_students()]


def get_student_by_id(student_id: str, db: DatabaseService) -> Dict:
    return student_view(_get_student_or_404(db, student_id))


def update_student(student_id: str, student_update: student_model.StudentUpdate, db: DatabaseService) -> Dict:
    changes = student_update.model_dump(exclude_none=True)
    if not changes:
        raise ValidationFailure("No update data provided.")
    student = _get_student_or_404(db, student_id)

    uniqueness.ensure_unique_on_update(db, uniqueness.STUDENT_EMAIL, student, changes)
    uniqueness.ensure_unique_on_update(db, uniqueness.STUDENT_ID_NUMBER, student, changes)

    return student_view(db.update_student(student, changes))


def delete_student(student_id: str, db: DatabaseService) -> None:
    if not db.delete_student(student_id):
        raise RecordNotFoundError(f"Student not found with id: {student_id}")
    logger.info("Deleted student %s; dependent records were left in place", student_id)
