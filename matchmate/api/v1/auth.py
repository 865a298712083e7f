# api/auth.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from matchmate.api.deps import get_account_service
from matchmate.core.config import settings
from matchmate.schemas.auth import LoginRequest, LoginResponse, ResendVerificationRequest
from matchmate.schemas.common import MessageResponse
from matchmate.schemas.user import UserCreate, UserEnvelope, UserResponse
from matchmate.services.account_service import AccountService, VerificationOutcome
from matchmate.utils.pages import render_verified_page

router = APIRouter()


def verification_link_builder(request: Request):
    """Absolute verify URL on the host that served this request"""
    def link_for(user_id: int, token: str) -> str:
        return str(request.url_for("verify_email", user_id=user_id, token=token))
    return link_for


@router.post("/signup", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_up(
    user_create: UserCreate,
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    """Create an unverified account and email a verification link"""
    user = service.sign_up(user_create, verification_link_builder(request))
    return {
        "message": "Account created successfully. Please check your email to verify your account.",
        "user": UserResponse.model_validate(user),
    }


@router.post("/login", response_model=LoginResponse)
def log_in(login_data: LoginRequest, service: AccountService = Depends(get_account_service)):
    user, token = service.log_in(login_data.email, login_data.password)
    return {
        "message": "Login successful.",
        "user": UserResponse.model_validate(user),
        "token": token,
    }


@router.get("/verify/{user_id}/{token}", name="verify_email")
def verify_email(
    user_id: int,
    token: str,
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    """Verify email via the emailed link"""
    outcome, user = service.verify_email(user_id, token, verification_link_builder(request))

    if outcome is VerificationOutcome.ALREADY_VERIFIED:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"message": "Your account has already been verified."},
        )
    if outcome is VerificationOutcome.LINK_RENEWED:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "This link has expired. A new verification link has been sent to your email."},
        )
    return HTMLResponse(render_verified_page(user.first_name, settings.login_redirect_url))


@router.post("/newemail", response_model=MessageResponse)
def resend_verification(
    resend_request: ResendVerificationRequest,
    request: Request,
    service: AccountService = Depends(get_account_service),
):
    """Send a fresh verification link to an existing account"""
    service.resend_verification(resend_request.email, verification_link_builder(request))
    return {"message": "A new verification email has been sent. Please check your inbox ❤️"}
