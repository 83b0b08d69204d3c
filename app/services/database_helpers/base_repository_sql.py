# /app/services/database_helpers/base_repository_sql.py

"""
Write-path plumbing shared by every SQL repository.

All commits funnel through `_commit`, which is where a storage-level unique
constraint violation is rolled back and surfaced as the canonical ConflictError.
"""

from typing import Any, Dict, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..record_helpers.uniqueness import conflict_from_integrity_error


class BaseRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise conflict_from_integrity_error(e) from e

    def _add(self, model: Type, record: Dict) -> Any:
        new_object = model(**record)
        self.db.add(new_object)
        self._commit()
        self.db.refresh(new_object)
        return new_object

    def _apply(self, db_object: Any, data: Dict) -> Any:
        for key, value in data.items():
            setattr(db_object, key, value)
        self._commit()
        self.db.refresh(db_object)
        return db_object

    def _delete(self, db_object: Optional[Any]) -> bool:
        if db_object is None:
            return False
        self.db.delete(db_object)
        self._commit()
        return True

    def record_exists(self, model: Type, exclude_id: Optional[str] = None, **criteria) -> bool:
        """Exact-match existence test used by the uniqueness pre-check."""
        query = self.db.query(model.id).filter_by(**criteria)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        return query.first() is not None
