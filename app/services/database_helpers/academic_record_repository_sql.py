# /app/services/database_helpers/academic_record_repository_sql.py

"""
Raw SQLAlchemy queries for the Grade and AttendanceRecord tables. Every
lookup is an exact match on the referenced ids (and date, for attendance).
"""

from datetime import date
from typing import Dict, List, Optional

from app.db.models.record_models import Grade, AttendanceRecord
from .base_repository_sql import BaseRepositorySQL


class AcademicRecordRepositorySQL(BaseRepositorySQL):

    # --- Grade Methods ---

    def get_all_grades(self) -> List[Grade]:
        return self.db.query(Grade).all()

    def get_grade_by_id(self, grade_id: str) -> Optional[Grade]:
        return self.db.query(Grade).filter(Grade.id == grade_id).first()

    def get_grades_by_student_id(self, student_id: str) -> List[Grade]:
        return self.db.query(Grade).filter(Grade.student_id == student_id).all()

    def get_grades_by_course_id(self, course_id: str) -> List[Grade]:
        return self.db.query(Grade).filter(Grade.course_id == course_id).all()

    def get_grades_by_student_and_course(self, student_id: str, course_id: str) -> List[Grade]:
        return self.db.query(Grade).filter(Grade.student_id == student_id, Grade.course_id == course_id).all()

    def add_grade(self, record: Dict) -> Grade:
        return self._add(Grade, record)

    def update_grade(self, grade: Grade, data: Dict) -> Grade:
        return self._apply(grade, data)

    def delete_grade(self, grade_id: str) -> bool:
        return self._delete(self.get_grade_by_id(grade_id))

    # --- Attendance Methods ---

    def get_attendance_record_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self.db.query(AttendanceRecord).filter(AttendanceRecord.id == record_id).first()

    def get_attendance_by_student_id(self, student_id: str) -> List[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.student_id == student_id)
            .order_by(AttendanceRecord.attendance_date)
            .all()
        )

    def get_attendance_by_course_id(self, course_id: str) -> List[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.course_id == course_id)
            .order_by(AttendanceRecord.attendance_date)
            .all()
        )

    def get_attendance_by_student_and_course(self, student_id: str, course_id: str) -> List[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.student_id == student_id, AttendanceRecord.course_id == course_id)
            .order_by(AttendanceRecord.attendance_date)
            .all()
        )

    def get_attendance_by_course_and_date(self, course_id: str, attendance_date: date) -> List[AttendanceRecord]:
        return (
            self.db.query(AttendanceRecord)
            .filter(AttendanceRecord.course_id == course_id, AttendanceRecord.attendance_date == attendance_date)
            .all()
        )

    def add_attendance_record(self, record: Dict) -> AttendanceRecord:
        return self._add(AttendanceRecord, record)

    def update_attendance_record(self, attendance_record: AttendanceRecord, data: Dict) -> AttendanceRecord:
        return self._apply(attendance_record, data)

    def delete_attendance_record(self, record_id: str) -> bool:
        return self._delete(self.get_attendance_record_by_id(record_id))
