# /app/models/course_model.py

from pydantic import Field
from typing import Optional

from .common import CamelModel


class CourseBase(CamelModel):
    course_code: str = Field(..., min_length=2, max_length=20, description="Unique course code, e.g. CS101.")
    course_name: str = Field(..., min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    credits: int = Field(..., ge=0)


class CourseCreate(CourseBase):
    pass


class CourseUpdate(CamelModel):
    course_code: Optional[str] = Field(default=None, min_length=2, max_length=20)
    course_name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    credits: Optional[int] = Field(default=None, ge=0)


class Course(CourseBase):
    id: str
