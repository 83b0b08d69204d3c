# /app/services/database_helpers/schedule_repository_sql.py

from typing import Dict, List, Optional

from app.db.models.schedule_models import ScheduledClass
from .base_repository_sql import BaseRepositorySQL


class ScheduleRepositorySQL(BaseRepositorySQL):

    def _ordered(self, query):
        return query.order_by(ScheduledClass.day_of_week, ScheduledClass.start_time)

    def get_all_scheduled_classes(self) -> List[ScheduledClass]:
        return self._ordered(self.db.query(ScheduledClass)).all()

    def get_scheduled_class_by_id(self, scheduled_class_id: str) -> Optional[ScheduledClass]:
        return self.db.query(ScheduledClass).filter(ScheduledClass.id == scheduled_class_id).first()

    def get_scheduled_classes_by_course_id(self, course_id: str) -> List[ScheduledClass]:
        return self._ordered(self.db.query(ScheduledClass).filter(ScheduledClass.course_id == course_id)).all()

    def get_scheduled_classes_by_day(self, day_of_week: str) -> List[ScheduledClass]:
        return self._ordered(self.db.query(ScheduledClass).filter(ScheduledClass.day_of_week == day_of_week)).all()

    def add_scheduled_class(self, record: Dict) -> ScheduledClass:
        return self._add(ScheduledClass, record)

    def update_scheduled_class(self, scheduled_class: ScheduledClass, data: Dict) -> ScheduledClass:
        return self._apply(scheduled_class, data)

    def delete_scheduled_class(self, scheduled_class_id: str) -> bool:
        return self._delete(self.get_scheduled_class_by_id(scheduled_class_id))
