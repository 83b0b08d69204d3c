# /app/db/models/record_models.py

"""
SQLAlchemy models for the per-student academic records: `Grade` and
`AttendanceRecord`.

Both reference a student and a course by id without a database foreign key.
Referential checks happen in the service layer before every write; the
composite unique constraints below are the storage-level guarantee that backs
the service-level duplicate checks.
"""

from sqlalchemy import Column, String, Date, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base


class Grade(Base):
    __table_args__ = (
        UniqueConstraint(
            "student_id", "course_id", "assessment_type",
            name="uq_grades_student_course_assessment",
        ),
    )

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, nullable=False, index=True)
    course_id = Column(String, nullable=False, index=True)
    assessment_type = Column(String(50), nullable=False)
    grade_value = Column(String(20), nullable=False)
    assessment_date = Column(Date, nullable=True)
    comments = Column(String(255), nullable=True)

    student = relationship(
        "Student",
        primaryjoin="foreign(Grade.student_id) == Student.id",
        viewonly=True,
    )
    course = relationship(
        "Course",
        primaryjoin="foreign(Grade.course_id) == Course.id",
        viewonly=True,
    )


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"
    __table_args__ = (
        UniqueConstraint(
            "student_id", "course_id", "attendance_date",
            name="uq_attendance_student_course_date",
        ),
    )

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, nullable=False, index=True)
    course_id = Column(String, nullable=False, index=True)
    attendance_date = Column(Date, nullable=False)
    status = Column(String(10), nullable=False)

    student = relationship(
        "Student",
        primaryjoin="foreign(AttendanceRecord.student_id) == Student.id",
        viewonly=True,
    )
    course = relationship(
        "Course",
        primaryjoin="foreign(AttendanceRecord.course_id) == Course.id",
        viewonly=True,
    )
