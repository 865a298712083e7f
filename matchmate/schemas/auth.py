from typing import Optional

from .common import CamelModel
from .user import UserResponse


class LoginRequest(CamelModel):
    email: Optional[str] = ""
    password: Optional[str] = ""


class LoginResponse(CamelModel):
    message: str
    user: UserResponse
    token: str


class ResendVerificationRequest(CamelModel):
    email: Optional[str] = ""
