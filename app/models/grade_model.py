# /app/models/grade_model.py

from datetime import date
from pydantic import Field
from typing import Optional

from .common import CamelModel


class GradeCreate(CamelModel):
    student_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    assessment_type: str = Field(..., min_length=1, max_length=50, description='Free text, e.g. "Midterm".')
    grade_value: str = Field(..., min_length=1, max_length=20, description='Free text, e.g. "A+", "85", "Pass".')
    assessment_date: Optional[date] = None
    comments: Optional[str] = Field(default=None, max_length=255)


class GradeUpdate(CamelModel):
    student_id: Optional[str] = Field(default=None, min_length=1)
    course_id: Optional[str] = Field(default=None, min_length=1)
    assessment_type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    grade_value: Optional[str] = Field(default=None, min_length=1, max_length=20)
    assessment_date: Optional[date] = None
    comments: Optional[str] = Field(default=None, max_length=255)


class Grade(CamelModel):
    id: str
    student_id: str
    student_first_name: Optional[str] = None
    student_last_name: Optional[str] = None
    course_id: str
    course_code: Optional[str] = None
    course_name: Optional[str] = None
    assessment_type: str
    grade_value: str
    assessment_date: Optional[date] = None
    comments: Optional[str] = None
