# /app/models/user_model.py

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Role(str, Enum):
    ADMIN = "ROLE_ADMIN"
    STUDENT = "ROLE_STUDENT"


class UserCreate(BaseModel):
    """
    Registration payload. `role` is the short form ("ADMIN" / "STUDENT", any
    case); the service rejects anything else rather than silently defaulting.
    """
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=100)
    role: Optional[str] = None


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    roles: List[Role]


class Token(BaseModel):
    access_token: str
    token_type: str
