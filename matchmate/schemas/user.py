# schemas/user.py
from pydantic import Field
from typing import Optional, List
from datetime import datetime

from .common import CamelModel


class UserCreate(CamelModel):
    """Raw signup payload; field rules are applied by the validators module so
    that the first failing field produces its own message."""
    first_name: Optional[str] = ""
    last_name: Optional[str] = ""
    username: Optional[str] = ""
    email: Optional[str] = ""
    password: Optional[str] = ""
    confirm_password: Optional[str] = ""
    phone_number: Optional[str] = ""
    gender: Optional[str] = ""
    interested_in: Optional[str] = ""
    hobbies: Optional[List[str]] = Field(default_factory=list)


class UserResponse(CamelModel):
    """Public user response - excludes sensitive data"""
    id: int
    first_name: str
    last_name: str
    username: str
    email: str
    phone_number: str
    gender: str
    interested_in: str
    hobbies: List[str] = []
    is_verified: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserEnvelope(CamelModel):
    message: str
    user: UserResponse


class UserDataEnvelope(CamelModel):
    message: str
    data: UserResponse


class UserListEnvelope(CamelModel):
    message: str
    users: List[UserResponse]


class UserListDataEnvelope(CamelModel):
    message: str
    data: List[UserResponse]
