# /app/core/deps.py

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from . import security
from ..db.models.user_model import User
from ..services.database_service import DatabaseService, get_db_service

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def get_current_active_user(
    token: str = Depends(oauth2_scheme),
    db: DatabaseService = Depends(get_db_service)
) -> User:
    """Resolves the bearer token to a stored account or fails with 401."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    username = security.decode_access_token(token)
    if not username:
        raise credentials_exception
    user = db.get_user_by_username(username)
    if user is None:
        raise credentials_exception
    return user
