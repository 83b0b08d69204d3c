# /app/routers/students_router.py

from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..core.permissions import Capability, require_capability
from ..models import student_model
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

# Student records are administrator-only end to end.
router = APIRouter(dependencies=[Depends(require_capability(Capability.ADMIN_ONLY))])


@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Create a Student")
def create_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    return student_service.create_student(student_data=student_create, db=db)


@router.get("", response_model=List[student_model.Student], summary="Get All Students")
def get_all_students(db: DatabaseService = Depends(get_db_service)):
    return student_service.get_all_students(db=db)


@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Student")
def get_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    return student_service.get_student_by_id(student_id=student_id, db=db)


@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student")
def update_student(
    student_id: str,
    student_update: student_model.StudentUpdate,
    db: DatabaseService = Depends(get_db_service)
):
    return student_service.update_student(student_id=student_id, student_update=student_update, db=db)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Student")
def delete_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    student_service.delete_student(student_id=student_id, db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
