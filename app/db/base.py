# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here ensures the
# Base metadata knows every table when Alembic or `create_all` runs.

from .base_class import Base

from .models.user_model import User
from .models.student_course_models import Student, Course
from .models.schedule_models import ScheduledClass
from .models.record_models import Grade, AttendanceRecord
