# /app/services/user_service.py

import logging
import uuid
from typing import List, Optional

from ..core import security
from ..core.exceptions import ValidationFailure
from ..db.models.user_model import User
from ..models.user_model import Role, UserCreate
from .database_service import DatabaseService
from .record_helpers import uniqueness

logger = logging.getLogger(__name__)

# Short role names accepted at registration.
REGISTRATION_ROLES = {"ADMIN": Role.ADMIN, "STUDENT": Role.STUDENT}
DEFAULT_ROLE = Role.STUDENT


def resolve_roles(requested_role: Optional[str]) -> List[str]:
    """
    Absent or blank -> the default STUDENT role. Anything else must name a
    known role (case-insensitive) or the registration is rejected.
    """
    if requested_role is None or not requested_role.strip():
        return [DEFAULT_ROLE.value]
    role = REGISTRATION_ROLES.get(requested_role.strip().upper())
    if role is None:
        raise ValidationFailure(f"Role not found: {requested_role}")
    return [role.value]


def create_user(db: DatabaseService, user: UserCreate) -> User:
    roles = resolve_roles(user.role)
    uniqueness.ensure_unique(db, uniqueness.USERNAME, {"username": user.username})

    new_user = db.add_user({
        "id": f"usr_{uuid.uuid4().hex[:12]}",
        "username": user.username,
        "hashed_password": security.get_password_hash(user.password),
        "roles": roles,
    })
    logger.info("Registered user %s with roles %s", new_user.username, new_user.roles)
    return new_user


def authenticate_user(db: DatabaseService, username: str, password: str) -> Optional[User]:
    user = db.get_user_by_username(username)
    if user is None or not security.verify_password(password, user.hashed_password):
        return None
    return user
