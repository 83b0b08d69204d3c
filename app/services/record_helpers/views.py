# /app/services/record_helpers/views.py

"""
Assembles the denormalized read views.

Display fields of referenced students and courses are read through the
view-only relationships on every call, never copied into the dependent record.
A reference whose target has been deleted yields empty display fields.
"""

from typing import Dict, Optional

from ...db.models.student_course_models import Student, Course
from ...db.models.schedule_models import ScheduledClass
from ...db.models.record_models import Grade, AttendanceRecord


def _student_display(student: Optional[Student]) -> Dict:
    if student is None:
        return {"student_first_name": None, "student_last_name": None}
    return {"student_first_name": student.first_name, "student_last_name": student.last_name}


def _course_display(course: Optional[Course]) -> Dict:
    if course is None:
        return {"course_code": None, "course_name": None}
    return {"course_code": course.course_code, "course_name": course.course_name}


def student_view(student: Student) -> Dict:
    return {
        "id": student.id,
        "first_name": student.first_name,
        "last_name": student.last_name,
        "email": student.email,
        "student_id_number": student.student_id_number,
    }


def course_view(course: Course) -> Dict:
    return {
        "id": course.id,
        "course_code": course.course_code,
        "course_name": course.course_name,
        "description": course.description,
        "credits": course.credits,
    }


def scheduled_class_view(scheduled_class: ScheduledClass) -> Dict:
    return {
        "id": scheduled_class.id,
        "course_id": scheduled_class.course_id,
        **_course_display(scheduled_class.course),
        "day_of_week": scheduled_class.day_of_week,
        "start_time": scheduled_class.start_time,
        "end_time": scheduled_class.end_time,
        "room_number": scheduled_class.room_number,
        "instructor_name": scheduled_class.instructor_name,
    }


def grade_view(grade: Grade) -> Dict:
    return {
        "id": grade.id,
        "student_id": grade.student_id,
        **_student_display(grade.student),
        "course_id": grade.course_id,
        **_course_display(grade.course),
        "assessment_type": grade.assessment_type,
        "grade_value": grade.grade_value,
        "assessment_date": grade.assessment_date,
        "comments": grade.comments,
    }


def attendance_view(record: AttendanceRecord) -> Dict:
    return {
        "id": record.id,
        "student_id": record.student_id,
        **_student_display(record.student),
        "course_id": record.course_id,
        **_course_display(record.course),
        "attendance_date": record.attendance_date,
        "status": record.status,
    }
