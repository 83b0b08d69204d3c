# /app/models/schedule_model.py

from pydantic import Field, field_validator
from typing import Optional

from .common import CamelModel, DayOfWeek

# 24-hour HH:mm. No ordering check between start and end is applied.
TIME_PATTERN = r"^([01][0-9]|2[0-3]):([0-5][0-9])$"


def _uppercase_day(value):
    return value.strip().upper() if isinstance(value, str) else value


class ScheduledClassCreate(CamelModel):
    course_id: str = Field(..., min_length=1)
    day_of_week: DayOfWeek = Field(..., description="Day name in any case; stored uppercase.")
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)
    room_number: Optional[str] = Field(default=None, max_length=20)
    instructor_name: Optional[str] = Field(default=None, max_length=100)

    normalize_day = field_validator("day_of_week", mode="before")(_uppercase_day)


class ScheduledClassUpdate(CamelModel):
    course_id: Optional[str] = Field(default=None, min_length=1)
    day_of_week: Optional[DayOfWeek] = None
    start_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    room_number: Optional[str] = Field(default=None, max_length=20)
    instructor_name: Optional[str] = Field(default=None, max_length=100)

    normalize_day = field_validator("day_of_week", mode="before")(_uppercase_day)


class ScheduledClass(CamelModel):
    """Denormalized timetable entry: course display fields are joined at read time."""
    id: str
    course_id: str
    course_code: Optional[str] = None
    course_name: Optional[str] = None
    day_of_week: DayOfWeek
    start_time: str
    end_time: str
    room_number: Optional[str] = None
    instructor_name: Optional[str] = None
