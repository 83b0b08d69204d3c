# /app/routers/timetable_router.py

from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..core.permissions import Capability, require_capability
from ..models import schedule_model
from ..services import timetable_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

admin_only = [Depends(require_capability(Capability.ADMIN_ONLY))]
admin_or_student_read = [Depends(require_capability(Capability.ADMIN_OR_STUDENT_READ))]


@router.post(
    "",
    response_model=schedule_model.ScheduledClass,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
    summary="Schedule a Class"
)
def create_scheduled_class(
    class_create: schedule_model.ScheduledClassCreate,
    db: DatabaseService = Depends(get_db_service)
):
    return timetable_service.create_scheduled_class(class_data=class_create, db=db)


@router.get(
    "",
    response_model=List[schedule_model.ScheduledClass],
    dependencies=admin_or_student_read,
    summary="Get the Full Timetable"
)
def get_all_scheduled_classes(db: DatabaseService = Depends(get_db_service)):
    return timetable_service.get_all_scheduled_classes(db=db)


@router.get(
    "/course/{course_id}",
    response_model=List[schedule_model.ScheduledClass],
    dependencies=admin_or_student_read,
    summary="Get Scheduled Classes for a Course"
)
def get_scheduled_classes_by_course(course_id: str, db: DatabaseService = Depends(get_db_service)):
    return timetable_service.get_scheduled_classes_by_course(course_id=course_id, db=db)


@router.get(
    "/day/{day_of_week}",
    response_model=List[schedule_model.ScheduledClass],
    dependencies=admin_or_student_read,
    summary="Get Scheduled Classes for a Day"
)
def get_scheduled_classes_by_day(day_of_week: str, db: DatabaseService = Depends(get_db_service)):
    return timetable_service.get_scheduled_classes_by_day(day_of_week=day_of_week, db=db)


@router.get(
    "/{scheduled_class_id}",
    response_model=schedule_model.ScheduledClass,
    dependencies=admin_or_student_read,
    summary="Get a Scheduled Class"
)
def get_scheduled_class(scheduled_class_id: str, db: DatabaseService = Depends(get_db_service)):
    return timetable_service.get_scheduled_class_by_id(scheduled_class_id=scheduled_class_id, db=db)


@router.put(
    "/{scheduled_class_id}",
    response_model=schedule_model.ScheduledClass,
    dependencies=admin_only,
    summary="Update a Scheduled Class"
)
def update_scheduled_class(
    scheduled_class_id: str,
    class_update: schedule_model.ScheduledClassUpdate,
    db: DatabaseService = Depends(get_db_service)
):
    return timetable_service.update_scheduled_class(
        scheduled_class_id=scheduled_class_id, class_update=class_update, db=db
    )


@router.delete(
    "/{scheduled_class_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=admin_only,
    summary="Delete a Scheduled Class"
)
def delete_scheduled_class(scheduled_class_id: str, db: DatabaseService = Depends(get_db_service)):
    timetable_service.delete_scheduled_class(scheduled_class_id=scheduled_class_id, db=db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
