# /app/services/database_helpers/student_course_repository_sql.py

"""
Raw SQLAlchemy queries for the Student and Course tables.

Deletes here remove only the targeted row. Records that reference the
student or course are deliberately left in place.
"""

from typing import Dict, List, Optional

from sqlalchemy import func

from app.db.models.student_course_models import Student, Course
from .base_repository_sql import BaseRepositorySQL


class StudentCourseRepositorySQL(BaseRepositorySQL):

    # --- Student Methods ---

    def get_all_students(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.last_name, Student.first_name).all()

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_student_by_email(self, email: str) -> Optional[Student]:
        return self.db.query(Student).filter(func.lower(Student.email) == email.lower()).first()

    def add_student(self, record: Dict) -> Student:
        return self._add(Student, record)

    def update_student(self, student: Student, data: Dict) -> Student:
        return self._apply(student, data)

    def delete_student(self, student_id: str) -> bool:
        return self._delete(self.get_student_by_id(student_id))

    # --- Course Methods ---

    def get_all_courses(self) -> List[Course]:
        return self.db.query(Course).order_by(Course.course_code).all()

    def get_course_by_id(self, course_id: str) -> Optional[Course]:
        return self.db.query(Course).filter(Course.id == course_id).first()

    def add_course(self, record: Dict) -> Course:
        return self._add(Course, record)

    def update_course(self, course: Course, data: Dict) -> Course:
        return self._apply(course, data)

    def delete_course(self, course_id: str) -> bool:
        return self._delete(self.get_course_by_id(course_id))
