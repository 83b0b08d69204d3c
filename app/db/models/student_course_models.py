# /app/db/models/student_course_models.py

"""
SQLAlchemy models for the two root entities, `Student` and `Course`.

Neither model declares relationships to the records that reference it. Grades,
attendance records and timetable entries point at students and courses by id
only, so deleting a student or course never cascades to them.
"""

from sqlalchemy import Column, String, Integer, UniqueConstraint

from ..base_class import Base


class Student(Base):
    # Named constraints so storage-level violations can be mapped back to a
    # readable conflict message (see record_helpers.uniqueness).
    __table_args__ = (
        UniqueConstraint("email", name="uq_students_email"),
        UniqueConstraint("student_id_number", name="uq_students_student_id_number"),
    )

    id = Column(String, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String, nullable=False, index=True)
    student_id_number = Column(String(20), nullable=False)


class Course(Base):
    __table_args__ = (
        UniqueConstraint("course_code", name="uq_courses_course_code"),
    )

    id = Column(String, primary_key=True, index=True)
    course_code = Column(String(20), nullable=False)
    course_name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    credits = Column(Integer, nullable=False)
