# /app/models/student_model.py

from pydantic import EmailStr, Field
from typing import Optional

from .common import CamelModel


class StudentBase(CamelModel):
    """Fields common to create and read operations."""
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., description="Must be unique. Also the student's login username.")
    student_id_number: str = Field(..., min_length=1, max_length=20, description="The institution-issued ID. Must be unique.")


class StudentCreate(StudentBase):
    pass


class StudentUpdate(CamelModel):
    """
    All fields are optional to allow for partial updates. Omitted (or null)
    fields keep their stored value.
    """
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    student_id_number: Optional[str] = Field(default=None, min_length=1, max_length=20)


class Student(StudentBase):
    """The full representation of a Student resource as returned by the API."""
    id: str
