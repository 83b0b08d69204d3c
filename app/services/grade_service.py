# /app/services/grade_service.py

"""
Business logic for Grade records.

A grade references one student and one course, and the triple
(student, course, assessment type) is unique. Every write resolves the
references it touches before the uniqueness check and before persisting, so
a failed resolution or a conflict leaves the store untouched.
"""

import logging
import uuid
from typing import Dict, List

from ..core.exceptions import RecordNotFoundError, ValidationFailure
from ..models import grade_model
from .database_service import DatabaseService
from .record_helpers import references, uniqueness
from .record_helpers.views import grade_view

logger = logging.getLogger(__name__)


def _get_grade_or_404(db: DatabaseService, grade_id: str):
    grade = db.get_grade_by_id(grade_id)
    if grade is None:
        raise RecordNotFoundError(f"Grade not found with id: {grade_id}")
    return grade


def create_grade(grade_data: grade_model.GradeCreate, db: DatabaseService) -> Dict:
    record = grade_data.model_dump()
    references.students.resolve(db, record["student_id"])
    references.courses.resolve(db, record["course_id"])
    uniqueness.ensure_unique(
        db, uniqueness.GRADE_ASSESSMENT,
        {f: record[f] for f in uniqueness.GRADE_ASSESSMENT.fields},
    )

    record["id"] = f"grd_{uuid.uuid4().hex[:12]}"
    new_grade = db.add_grade(record)
    logger.info(
        "Recorded %s grade %s for student %s in course %s",
        new_grade.assessment_type, new_grade.id, new_grade.student_id, new_grade.course_id,
    )
    return grade_view(new_grade)


def get_grade_by_id(grade_id: str, db: DatabaseService) -> Dict:
    return grade_view(_get_grade_or_404(db, grade_id))


def get_all_grades(db: DatabaseService) -> List[Dict]:
    return [grade_view(g) for g in db.get_all_grades()]


def get_grades_by_student(student_id: str, db: DatabaseService) -> List[Dict]:
    references.students.resolve(db, student_id)
    return [grade_view(g) for g in db.get_grades_by_student_id(student_id)]


def get_grades_by_course(course_id: str, db: DatabaseService) -> List[Dict]:
    references.courses.resolve(db, course_id)
    return [grade_view(g) for g in db.get_grades_by_course_id(course_id)]


def get_grades_by_student_and_course(student_id: str, course_id: str, db: DatabaseService) -> List[Dict]:
    references.students.resolve(db, student_id)
    references.courses.resolve(db, course_id)
    return [grade_view(g) for g in db.get_grades_by_student_and_course(student_id, course_id)]


def update_grade(grade_id: str, grade_update: grade_model.GradeUpdate, db: DatabaseService) -> Dict:
    changes = grade_update.model_dump(exclude_none=True)
    if not changes:
        raise ValidationFailure("No update data provided.")
    grade = _get_grade_or_404(db, grade_id)

    references.students.resolve_if_changed(db, changes.get("student_id"), grade.student_id)
    references.courses.resolve_if_changed(db, changes.get("course_id"), grade.course_id)
    uniqueness.ensure_unique_on_update(db, uniqueness.GRADE_ASSESSMENT, grade, changes)

    return grade_view(db.update_grade(grade, changes))


def delete_grade(grade_id: str, db: DatabaseService) -> None:
    if not db.delete_grade(grade_id):
        raise RecordNotFoundError(f"Grade not found with id: {grade_id}")
    logger.info("Deleted grade %s", grade_id)
