# /app/services/database_service.py

from datetime import date
from typing import Generator, List, Optional, Type

from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.student_course_repository_sql import StudentCourseRepositorySQL
from .database_helpers.schedule_repository_sql import ScheduleRepositorySQL
from .database_helpers.academic_record_repository_sql import AcademicRecordRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Single facade over the SQL repositories. All repositories share the
        request's session, so one request is one unit of work.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.user_repo = UserRepositorySQL(db_session)
        self.student_course_repo = StudentCourseRepositorySQL(db_session)
        self.schedule_repo = ScheduleRepositorySQL(db_session)
        self.record_repo = AcademicRecordRepositorySQL(db_session)

    # --- UNIQUENESS PRE-CHECK (DELEGATED) ---
    def record_exists(self, model: Type, exclude_id: Optional[str] = None, **criteria) -> bool:
        return self.user_repo.record_exists(model, exclude_id=exclude_id, **criteria)

    # --- USER METHODS (DELEGATED) ---
    def get_user_by_username(self, username: str): return self.user_repo.get_user_by_username(username)
    def add_user(self, user_record: dict): return self.user_repo.add_user(user_record)

    # --- STUDENT & COURSE METHODS (DELEGATED) ---
    def get_all_students(self) -> List: return self.student_course_repo.get_all_students()
    def get_student_by_id(self, student_id: str): return self.student_course_repo.get_student_by_id(student_id)
    def get_student_by_email(self, email: str): return self.student_course_repo.get_student_by_email(email)
    def add_student(self, student_record: dict): return self.student_course_repo.add_student(student_record)
    def update_student(self, student, data: dict): return self.student_course_repo.update_student(student, data)
    def delete_student(self, student_id: str) -> bool: return self.student_course_repo.delete_student(student_id)
    def get_all_courses(self) -> List: return self.student_course_repo.get_all_courses()
    def get_course_by_id(self, course_id: str): return self.student_course_repo.get_course_by_id(course_id)
    def add_course(self, course_record: dict): return self.student_course_repo.add_course(course_record)
    def update_course(self, course, data: dict): return self.student_course_repo.update_course(course, data)
    def delete_course(self, course_id: str) -> bool: return self.student_course_repo.delete_course(course_id)

    # --- TIMETABLE METHODS (DELEGATED) ---
    def get_all_scheduled_classes(self) -> List: return self.schedule_repo.get_all_scheduled_classes()
    def get_scheduled_class_by_id(self, scheduled_class_id: str): return self.schedule_repo.get_scheduled_class_by_id(scheduled_class_id)
    def get_scheduled_classes_by_course_id(self, course_id: str) -> List: return self.schedule_repo.get_scheduled_classes_by_course_id(course_id)
    def get_scheduled_classes_by_day(self, day_of_week: str) -> List: return self.schedule_repo.get_scheduled_classes_by_day(day_of_week)
    def add_scheduled_class(self, record: dict): return self.schedule_repo.add_scheduled_class(record)
    def update_scheduled_class(self, scheduled_class, data: dict): return self.schedule_repo.update_scheduled_class(scheduled_class, data)
    def delete_scheduled_class(self, scheduled_class_id: str) -> bool: return self.schedule_repo.delete_scheduled_class(scheduled_class_id)

    # --- GRADE METHODS (DELEGATED) ---
    def get_all_grades(self) -> List: return self.record_repo.get_all_grades()
    def get_grade_by_id(self, grade_id: str): return self.record_repo.get_grade_by_id(grade_id)
    def get_grades_by_student_id(self, student_id: str) -> List: return self.record_repo.get_grades_by_student_id(student_id)
    def get_grades_by_course_id(self, course_id: str) -> List: return self.record_repo.get_grades_by_course_id(course_id)
    def get_grades_by_student_and_course(self, student_id: str, course_id: str) -> List:
        return self.record_repo.get_grades_by_student_and_course(student_id, course_id)
    def add_grade(self, grade_record: dict): return self.record_repo.add_grade(grade_record)
    def update_grade(self, grade, data: dict): return self.record_repo.update_grade(grade, data)
    def delete_grade(self, grade_id: str) -> bool: return self.record_repo.delete_grade(grade_id)

    # --- ATTENDANCE METHODS (DELEGATED) ---
    def get_attendance_record_by_id(self, record_id: str): return self.record_repo.get_attendance_record_by_id(record_id)
    def get_attendance_by_student_id(self, student_id: str) -> List: return self.record_repo.get_attendance_by_student_id(student_id)
    def get_attendance_by_course_id(self, course_id: str) -> List: return self.record_repo.get_attendance_by_course_id(course_id)
    def get_attendance_by_student_and_course(self, student_id: str, course_id: str) -> List:
        return self.record_repo.get_attendance_by_student_and_course(student_id, course_id)
    def get_attendance_by_course_and_date(self, course_id: str, attendance_date: date) -> List:
        return self.record_repo.get_attendance_by_course_and_date(course_id, attendance_date)
    def add_attendance_record(self, record: dict): return self.record_repo.add_attendance_record(record)
    def update_attendance_record(self, attendance_record, data: dict): return self.record_repo.update_attendance_record(attendance_record, data)
    def delete_attendance_record(self, record_id: str) -> bool: return self.record_repo.delete_attendance_record(record_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
