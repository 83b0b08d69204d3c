# /app/db/models/schedule_models.py

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from ..base_class import Base


class ScheduledClass(Base):
    """
    One weekly timetable slot for a course. Overlapping slots (same room, same
    time) are allowed.
    """
    __tablename__ = "scheduled_classes"

    id = Column(String, primary_key=True, index=True)
    # Weak reference: no ForeignKey, so the course can be deleted underneath us.
    course_id = Column(String, nullable=False, index=True)
    day_of_week = Column(String(10), nullable=False, index=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    room_number = Column(String(20), nullable=True)
    instructor_name = Column(String(100), nullable=True)

    # Read-only join used to denormalize course display fields at read time.
    # Resolves to None when the course no longer exists.
    course = relationship(
        "Course",
        primaryjoin="foreign(ScheduledClass.course_id) == Course.id",
        viewonly=True,
    )
