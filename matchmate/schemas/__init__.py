from .common import CamelModel, MessageResponse
from .user import UserCreate, UserResponse, UserEnvelope, UserDataEnvelope, UserListEnvelope, UserListDataEnvelope
from .auth import LoginRequest, LoginResponse, ResendVerificationRequest
from .relationship import LoveRequestCreate, GiftCreate, GiftResponse, GiftEnvelope
from .report import ReportCreate, ReportResponse, ReportEnvelope
