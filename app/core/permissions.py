# /app/core/permissions.py

"""
The authorization gate.

Every route declares exactly one `Capability` through `require_capability`;
the gate compares it with the caller's role set before the route body (and so
before any service logic) runs. Self-scoped routes additionally depend on
`get_current_student`, which binds the caller to the Student whose email equals
their username.
"""

import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet

from fastapi import Depends

from .deps import get_current_active_user
from .exceptions import ForbiddenError, UnauthorizedError
from ..db.models.student_course_models import Student
from ..db.models.user_model import User
from ..models.user_model import Role
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    ADMIN_ONLY = "admin-only"
    ADMIN_OR_STUDENT_READ = "admin-or-student-read"
    SELF_SCOPED_STUDENT_READ = "self-scoped-student-read"


CAPABILITY_ROLES: Dict[Capability, FrozenSet[Role]] = {
    Capability.ADMIN_ONLY: frozenset({Role.ADMIN}),
    Capability.ADMIN_OR_STUDENT_READ: frozenset({Role.ADMIN, Role.STUDENT}),
    Capability.SELF_SCOPED_STUDENT_READ: frozenset({Role.STUDENT}),
}


def user_roles(user: User) -> FrozenSet[Role]:
    # Unknown role names stored on an account grant nothing.
    return frozenset(Role(r) for r in (user.roles or []) if r in Role._value2member_map_)


def authorize(user: User, capability: Capability) -> None:
    if not user_roles(user) & CAPABILITY_ROLES[capability]:
        logger.warning("User %s denied capability %s", user.username, capability.value)
        raise ForbiddenError("You do not have permission to perform this action.")


def require_capability(capability: Capability) -> Callable[..., User]:
    """Builds the route dependency that enforces `capability` and returns the caller."""

    def gate(current_user: User = Depends(get_current_active_user)) -> User:
        authorize(current_user, capability)
        return current_user

    return gate


def get_current_student(
    current_user: User = Depends(require_capability(Capability.SELF_SCOPED_STUDENT_READ)),
    db: DatabaseService = Depends(get_db_service)
) -> Student:
    student = db.get_student_by_email(current_user.username)
    if student is None:
        raise UnauthorizedError("Student profile not found for the logged-in user.")
    return student
