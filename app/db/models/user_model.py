# /app/db/models/user_model.py

from sqlalchemy import Column, String, JSON, UniqueConstraint

from ..base_class import Base


class User(Base):
    """
    A login account. `roles` holds a list of role names such as
    `["ROLE_STUDENT"]`; a student account is linked to its Student record by
    matching `username` against `Student.email`.
    """
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
    )

    id = Column(String, primary_key=True, index=True)
    username = Column(String(50), nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    roles = Column(JSON, nullable=False, default=list)
