# /app/routers/courses_router.py

from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..core.permissions import Capability, require_capability
from ..models import course_model
from ..services import course_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

admin_only = [Depends(require_capability(Capability.ADMIN_ONLY))]
admin_or_student_read = [Depends(require_capability(Capability.ADMIN_OR_STUDENT_READ))]


@router.post(
    "",
    response_model=course_model.Course,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
    summary="Create a Course"
)
def create_course(course_create: course_model.CourseCreate, db: DatabaseService = Depends(get_db_service)):
    return course_service.create_course(course_data=course_create, db=db)


@router.get("", response_model=List[course_model.Course], dependencies=admin_or_student_read, summary="Get All Courses")
def get_all_courses(db: DatabaseService = Depends(get_db_service)):
    return course_service.get_all_courses(db=db)


@router.get("/{course_id}", response_model=course_model.Course, dependencies=admin_or_student_read, summary="Get a Course")
def get_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    return course_service.get_course_by_id(course_id=course_id, db=db)


@router.put("/{course_id}", response_model=course_model.Course, dependencies=admin_only, summary="Update a Course")
def update_course(
    course_id: str,
    course_update: course_model.CourseUpdate,
    db: DatabaseService = Depends(get_db_service)
):
    return course_service.update_course(course_id=course_id, course_update=course_update, db=db)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=admin_only,
    summary="Delete a Course"
)
def delete_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    course_service.delete_course(course_id=course_id, db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
