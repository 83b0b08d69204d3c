# /app/services/database_helpers/user_repository_sql.py

from typing import Dict, Optional

from app.db.models.user_model import User
from .base_repository_sql import BaseRepositorySQL


class UserRepositorySQL(BaseRepositorySQL):

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def add_user(self, record: Dict) -> User:
        return self._add(User, record)
