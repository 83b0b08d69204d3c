"""Create the records schema with its unique constraints

Revision ID: a1c4e9d2f7b0
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e9d2f7b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables. References between tables are plain id columns without foreign keys."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('roles', sa.JSON(), nullable=False),
        sa.UniqueConstraint('username', name='uq_users_username'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'])

    op.create_table(
        'students',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('student_id_number', sa.String(length=20), nullable=False),
        sa.UniqueConstraint('email', name='uq_students_email'),
        sa.UniqueConstraint('student_id_number', name='uq_students_student_id_number'),
    )
    op.create_index('ix_students_id', 'students', ['id'])
    op.create_index('ix_students_email', 'students', ['email'])

    op.create_table(
        'courses',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('course_code', sa.String(length=20), nullable=False),
        sa.Column('course_name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('credits', sa.Integer(), nullable=False),
        sa.UniqueConstraint('course_code', name='uq_courses_course_code'),
    )
    op.create_index('ix_courses_id', 'courses', ['id'])

    op.create_table(
        'scheduled_classes',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('course_id', sa.String(), nullable=False),
        sa.Column('day_of_week', sa.String(length=10), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('room_number', sa.String(length=20), nullable=True),
        sa.Column('instructor_name', sa.String(length=100), nullable=True),
    )
    op.create_index('ix_scheduled_classes_id', 'scheduled_classes', ['id'])
    op.create_index('ix_scheduled_classes_course_id', 'scheduled_classes', ['course_id'])
    op.create_index('ix_scheduled_classes_day_of_week', 'scheduled_classes', ['day_of_week'])

    op.create_table(
        'grades',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('course_id', sa.String(), nullable=False),
        sa.Column('assessment_type', sa.String(length=50), nullable=False),
        sa.Column('grade_value', sa.String(length=20), nullable=False),
        sa.Column('assessment_date', sa.Date(), nullable=True),
        sa.Column('comments', sa.String(length=255), nullable=True),
        sa.UniqueConstraint('student_id', 'course_id', 'assessment_type', name='uq_grades_student_course_assessment'),
    )
    op.create_index('ix_grades_id', 'grades', ['id'])
    op.create_index('ix_grades_student_id', 'grades', ['student_id'])
    op.create_index('ix_grades_course_id', 'grades', ['course_id'])

    op.create_table(
        'attendance_records',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('student_id', sa.String(), nullable=False),
        sa.Column('course_id', sa.String(), nullable=False),
        sa.Column('attendance_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=10), nullable=False),
        sa.UniqueConstraint('student_id', 'course_id', 'attendance_date', name='uq_attendance_student_course_date'),
    )
    op.create_index('ix_attendance_records_id', 'attendance_records', ['id'])
    op.create_index('ix_attendance_records_student_id', 'attendance_records', ['student_id'])
    op.create_index('ix_attendance_records_course_id', 'attendance_records', ['course_id'])


def downgrade() -> None:
    """Drop all records tables."""
    op.drop_table('attendance_records')
    op.drop_table('grades')
    op.drop_table('scheduled_classes')
    op.drop_table('courses')
    op.drop_table('students')
    op.drop_table('users')
