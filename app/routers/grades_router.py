# /app/routers/grades_router.py

"""
Grade endpoints. Everything is administrator-only except `/my-grades`, which
is self-scoped: a student sees only the grades that reference the Student
record matching their login.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..core.permissions import Capability, get_current_student, require_capability
from ..db.models.student_course_models import Student as StudentModel
from ..models import grade_model
from ..services import grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

admin_only = [Depends(require_capability(Capability.ADMIN_ONLY))]


# Declared before /{grade_id} so "my-grades" is not taken for an id.
@router.get("/my-grades", response_model=List[grade_model.Grade], summary="Get My Grades")
def get_my_grades(
    student: StudentModel = Depends(get_current_student),
    db: DatabaseService = Depends(get_db_service)
):
    return grade_service.get_grades_by_student(student_id=student.id, db=db)


@router.post(
    "",
    response_model=grade_model.Grade,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
    summary="Record a Grade"
)
def create_grade(grade_create: grade_model.GradeCreate, db: DatabaseService = Depends(get_db_service)):
    return grade_service.create_grade(grade_data=grade_create, db=db)


@router.get("", response_model=List[grade_model.Grade], dependencies=admin_only, summary="Get All Grades")
def get_all_grades(db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_all_grades(db=db)


@router.get(
    "/student/{student_id}",
    response_model=List[grade_model.Grade],
    dependencies=admin_only,
    summary="Get Grades for a Student"
)
def get_grades_by_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_grades_by_student(student_id=student_id, db=db)


@router.get(
    "/course/{course_id}",
    response_model=List[grade_model.Grade],
    dependencies=admin_only,
    summary="Get Grades for a Course"
)
def get_grades_by_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_grades_by_course(course_id=course_id, db=db)


@router.get(
    "/student/{student_id}/course/{course_id}",
    response_model=List[grade_model.Grade],
    dependencies=admin_only,
    summary="Get a Student's Grades in a Course"
)
def get_grades_by_student_and_course(student_id: str, course_id: str, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_grades_by_student_and_course(student_id=student_id, course_id=course_id, db=db)


@router.get("/{grade_id}", response_model=grade_model.Grade, dependencies=admin_only, summary="Get a Grade")
def get_grade(grade_id: str, db: DatabaseService = Depends(get_db_service)):
    return grade_service.get_grade_by_id(grade_id=grade_id, db=db)


@router.put("/{grade_id}", response_model=grade_model.Grade, dependencies=admin_only, summary="Update a Grade")
def update_grade(grade_id: str, grade_update: grade_model.GradeUpdate, db: DatabaseService = Depends(get_db_service)):
    return grade_service.update_grade(grade_id=grade_id, grade_update=grade_update, db=db)


@router.delete(
    "/{grade_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=admin_only,
    summary="Delete a Grade"
)
def delete_grade(grade_id: str, db: DatabaseService = Depends(get_db_service)):
    grade_service.delete_grade(grade_id=grade_id, db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
