# /app/routers/attendance_router.py

from datetime import date
from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..core.permissions import Capability, require_capability
from ..models import attendance_model
from ..services import attendance_service
from ..services.database_service import DatabaseService, get_db_service

# Attendance is administrator-only end to end.
router = APIRouter(dependencies=[Depends(require_capability(Capability.ADMIN_ONLY))])


@router.post(
    "",
    response_model=attendance_model.AttendanceRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Record Attendance"
)
def record_attendance(
    record_create: attendance_model.AttendanceRecordCreate,
    db: DatabaseService = Depends(get_db_service)
):
    return attendance_service.record_attendance(record_data=record_create, db=db)


@router.get("/student/{student_id}", response_model=List[attendance_model.AttendanceRecord], summary="Get Attendance for a Student")
def get_attendance_by_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    return attendance_service.get_attendance_by_student(student_id=student_id, db=db)


@router.get("/course/{course_id}", response_model=List[attendance_model.AttendanceRecord], summary="Get Attendance for a Course")
def get_attendance_by_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    return attendance_service.get_attendance_by_course(course_id=course_id, db=db)


@router.get(
    "/student/{student_id}/course/{course_id}",
    response_model=List[attendance_model.AttendanceRecord],
    summary="Get a Student's Attendance in a Course"
)
def get_attendance_by_student_and_course(student_id: str, course_id: str, db: DatabaseService = Depends(get_db_service)):
    return attendance_service.get_attendance_by_student_and_course(student_id=student_id, course_id=course_id, db=db)


@router.get(
    "/course/{course_id}/date/{attendance_date}",
    response_model=List[attendance_model.AttendanceRecord],
    summary="Get Attendance for a Course on a Date"
)
def get_attendance_by_course_and_date(
    course_id: str,
    attendance_date: date,
    db: DatabaseService = Depends(get_db_service)
):
    return attendance_service.get_attendance_by_course_and_date(
        course_id=course_id, attendance_date=attendance_date, db=db
    )


@router.get("/{record_id}", response_model=attendance_model.AttendanceRecord, summary="Get an Attendance Record")
def get_attendance_record(record_id: str, db: DatabaseService = Depends(get_db_service)):
    return attendance_service.get_attendance_record_by_id(record_id=record_id, db=db)


@router.put("/{record_id}", response_model=attendance_model.AttendanceRecord, summary="Update an Attendance Record")
def update_attendance_record(
    record_id: str,
    record_update: attendance_model.AttendanceRecordUpdate,
    db: DatabaseService = Depends(get_db_service)
):
    return attendance_service.update_attendance_record(record_id=record_id, record_update=record_update, db=db)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Attendance Record")
def delete_attendance_record(record_id: str, db: DatabaseService = Depends(get_db_service)):
    attendance_service.delete_attendance_record(record_id=record_id, db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
