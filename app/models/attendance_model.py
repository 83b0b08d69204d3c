# /app/models/attendance_model.py

from datetime import date
from pydantic import Field
from typing import Optional

from .common import CamelModel, AttendanceStatus


class AttendanceRecordCreate(CamelModel):
    student_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    attendance_date: date
    status: AttendanceStatus


class AttendanceRecordUpdate(CamelModel):
    student_id: Optional[str] = Field(default=None, min_length=1)
    course_id: Optional[str] = Field(default=None, min_length=1)
    attendance_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None


class AttendanceRecord(CamelModel):
    id: str
    student_id: str
    student_first_name: Optional[str] = None
    student_last_name: Optional[str] = None
    course_id: str
    course_code: Optional[str] = None
    course_name: Optional[str] = None
    attendance_date: date
    status: AttendanceStatus
