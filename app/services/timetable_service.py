# /app/services/timetable_service.py

"""
Business logic for timetable entries (ScheduledClass).

Entries only reference a course. There is no uniqueness key and no overlap
detection: two classes may share a room and time slot.
"""

import logging
import uuid
from typing import Dict, List

from ..core.exceptions import RecordNotFoundError, ValidationFailure
from ..models import schedule_model
from ..models.common import DayOfWeek
from .database_service import DatabaseService
from .record_helpers import references
from .record_helpers.views import scheduled_class_view

logger = logging.getLogger(__name__)


def _get_scheduled_class_or_404(db: DatabaseService, scheduled_class_id: str):
    scheduled_class = db.get_scheduled_class_by_id(scheduled_class_id)
    if scheduled_class is None:
        raise RecordNotFoundError(f"Scheduled class not found with id: {scheduled_class_id}")
    return scheduled_class


def parse_day_of_week(day_of_week: str) -> str:
    """Normalizes a day name from a URL to its stored uppercase form."""
    try:
        return DayOfWeek(day_of_week.strip().upper()).value
    except ValueError:
        raise ValidationFailure(f"Unrecognized day of week: {day_of_week}")


def create_scheduled_class(class_data: schedule_model.ScheduledClassCreate, db: DatabaseService) -> Dict:
    record = class_data.model_dump()
    references.courses.resolve(db, record["course_id"])

    record["id"] = f"sch_{uuid.uuid4().hex[:12]}"
    new_class = db.add_scheduled_class(record)
    logger.info("Scheduled class %s for course %s on %s", new_class.id, new_class.course_id, new_class.day_of_week)
    return scheduled_class_view(new_class)


def get_all_scheduled_classes(db: DatabaseService) -> List[Dict]:
    return [scheduled_class_view(sc) for sc in db.get_all_scheduled_classes()]


def get_scheduled_class_by_id(scheduled_class_id: str, db: DatabaseService) -> Dict:
    return scheduled_class_view(_get_scheduled_class_or_404(db, scheduled_class_id))


def get_scheduled_classes_by_course(course_id: str, db: DatabaseService) -> List[Dict]:
    references.courses.resolve(db, course_id)
    return [scheduled_class_view(sc) for sc in db.get_scheduled_classes_by_course_id(course_id)]


def get_scheduled_classes_by_day(day_of_week: str, db: DatabaseService) -> List[Dict]:
    day = parse_day_of_week(day_of_week)
    return [scheduled_class_view(sc) for sc in db.get_scheduled_classes_by_day(day)]


def update_scheduled_class(
    scheduled_class_id: str,
    class_update: schedule_model.ScheduledClassUpdate,
    db: DatabaseService
) -> Dict:
    changes = class_update.model_dump(exclude_none=True)
    if not changes:
        raise ValidationFailure("No update data provided.")
    scheduled_class = _get_scheduled_class_or_404(db, scheduled_class_id)

    references.courses.resolve_if_changed(db, changes.get("course_id"), scheduled_class.course_id)
    return scheduled_class_view(db.update_scheduled_class(scheduled_class, changes))


def delete_scheduled_class(scheduled_class_id: str, db: DatabaseService) -> None:
    if not db.delete_scheduled_class(scheduled_class_id):
        raise RecordNotFoundError(f"Scheduled class not found with id: {scheduled_class_id}")
    logger.info("Deleted scheduled class %s", scheduled_class_id)
