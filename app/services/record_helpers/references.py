# /app/services/record_helpers/references.py

"""
The referential resolver.

Grades, attendance records and timetable entries reference students and
courses by id only; the store does not enforce those references. Every write
that carries a foreign id resolves it here first, so a dangling id aborts the
operation before anything is persisted.
"""

import logging
from typing import Any, Callable, Optional

from ...core.exceptions import RecordNotFoundError

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """Resolves ids of one entity kind through a DatabaseService lookup method."""

    def __init__(self, kind: str, lookup: Callable[[Any, str], Optional[Any]]):
        self.kind = kind
        self._lookup = lookup

    def resolve(self, db, record_id: str) -> Any:
        record = self._lookup(db, record_id)
        if record is None:
            logger.warning("%s reference %s did not resolve", self.kind, record_id)
            raise RecordNotFoundError(f"{self.kind} not found with id: {record_id}")
        return record

    def resolve_if_changed(self, db, supplied_id: Optional[str], current_id: str) -> None:
        """
        Used on update: a supplied id that differs from the stored one must
        resolve. An absent id keeps the stored reference as is.
        """
        if supplied_id is not None and supplied_id != current_id:
            self.resolve(db, supplied_id)


students = ReferenceResolver("Student", lambda db, record_id: db.get_student_by_id(record_id))
courses = ReferenceResolver("Course", lambda db, record_id: db.get_course_by_id(record_id))
