# /app/services/course_service.py

import logging
import uuid
from typing import Dict, List

from ..core.exceptions import RecordNotFoundError, ValidationFailure
from ..models import course_model
from .database_service import DatabaseService
from .record_helpers import uniqueness
from .record_helpers.views import course_view

logger = logging.getLogger(__name__)


def _get_course_or_404(db: DatabaseService, course_id: str):
    course = db.get_course_by_id(course_id)
    if course is None:
        raise RecordNotFoundError(f"Course not found with id: {course_id}")
    return course


def create_course(course_data: course_model.CourseCreate, db: DatabaseService) -> Dict:
    record = course_data.model_dump()
    uniqueness.ensure_unique(db, uniqueness.COURSE_CODE, {"course_code": record["course_code"]})

    record["id"] = f"crs_{uuid.uuid4().hex[:12]}"
    new_course = db.add_course(record)
    logger.info("Created course %s (%s)", new_course.id, new_course.course_code)
    return course_view(new_course)


def get_all_courses(db: DatabaseService) -> List[Dict]:
    return [course_view(c) for c in db.get_all_courses()]


def get_course_by_id(course_id: str, db: DatabaseService) -> Dict:
    return course_view(_get_course_or_404(db, course_id))


def update_course(course_id: str, course_update: course_model.CourseUpdate, db: DatabaseService) -> Dict:
    changes = course_update.model_dump(exclude_none=True)
    if not changes:
        raise ValidationFailure("No update data provided.")
    course = _get_course_or_404(db, course_id)

    uniqueness.ensure_unique_on_update(db, uniqueness.COURSE_CODE, course, changes)
    return course_view(db.update_course(course, changes))


def delete_course(course_id: str, db: DatabaseService) -> None:
    """Removes the course only. Timetable entries, grades and attendance that reference it are kept."""
    if not db.delete_course(course_id):
        raise RecordNotFoundError(f"Course not found with id: {course_id}")
    logger.info("Deleted course %s; dependent records were left in place", course_id)
