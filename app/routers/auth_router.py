# /app/routers/auth_router.py

"""
Public-facing API for account actions:
- registration (`/register`), which schedules a welcome email in the background
- login and token generation (`/token`), OAuth2 password flow
- the current account's profile (`/me`)
"""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from ..core import security
from ..core.deps import get_current_active_user
from ..db.models.user_model import User as UserModel
from ..models.user_model import User, UserCreate, Token
from ..services import notification_service, user_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED, summary="Register an Account")
def register_user(
    user_in: UserCreate,
    background_tasks: BackgroundTasks,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Creates an account. The role defaults to STUDENT; an unrecognized role is
    rejected. The welcome email is sent after the response and cannot affect it.
    """
    new_user = user_service.create_user(db=db, user=user_in)
    background_tasks.add_task(notification_service.send_welcome_email, new_user.username)
    return new_user


@router.post("/token", response_model=Token, summary="Log In and Obtain an Access Token")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: DatabaseService = Depends(get_db_service)
):
    user = user_service.authenticate_user(db, username=form_data.username, password=form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=security.create_access_token(subject=user.username), token_type="bearer")


@router.get("/me", response_model=User, summary="Get the Current Account")
def read_current_user(current_user: UserModel = Depends(get_current_active_user)):
    return current_user
