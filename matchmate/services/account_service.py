# services/account_service.py
import enum
import logging
from datetime import timedelta
from typing import Callable, List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from matchmate.core.config import settings
from matchmate.core.exceptions import Conflict, Forbidden, NotFound, ValidationError
from matchmate.core.security import (
    VERIFICATION_TOKEN,
    TokenStatus,
    create_access_token,
    create_verification_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from matchmate.models.user import INTERESTS, User, UserHobby
from matchmate.schemas.user import UserCreate
from matchmate.services.email_service import EmailService
from matchmate.services.validators import normalize_email, validate_signup

logger = logging.getLogger(__name__)

# Builds the absolute verification URL for (user id, token)
LinkBuilder = Callable[[int, str], str]

MAX_USER_ID = 2**31 - 1


class VerificationOutcome(str, enum.Enum):
    VERIFIED = "verified"
    ALREADY_VERIFIED = "already_verified"
    LINK_RENEWED = "link_renewed"


class AccountService:
    def __init__(self, db: Session, email_service: Optional[EmailService] = None):
        self.db = db
        self.email_service = email_service or EmailService()

    def get_user(self, user_id: int) -> Optional[User]:
        # Ids outside the INTEGER column range cannot belong to anyone
        if not 1 <= user_id <= MAX_USER_ID:
            return None
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive lookup, matching the uniqueness index"""
        return self.db.query(User).filter(func.lower(User.username) == username.strip().lower()).first()

    def sign_up(self, user_create: UserCreate, link_for: LinkBuilder) -> User:
        """Validate, persist an unverified user and send the verification email"""
        data = validate_signup(user_create)

        existing = self.db.query(User).filter(
            or_(
                User.email == data.email,
                User.phone_number == data.phone_number,
                func.lower(User.username) == data.username.lower(),
            )
        ).all()
        if any(u.email == data.email for u in existing):
            raise Conflict("Email already in use.")
        if any(u.phone_number == data.phone_number for u in existing):
            raise Conflict("Phone number already in use.")
        if existing:
            raise Conflict("Username already in use.")

        db_user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            username=data.username,
            email=data.email,
            hashed_password=get_password_hash(data.password),
            phone_number=data.phone_number,
            gender=data.gender,
            interested_in=data.interested_in,
            is_verified=False,
        )
        db_user.hobbies = data.hobbies
        self.db.add(db_user)
        try:
            self.db.commit()
        except IntegrityError:
            # Another signup claimed one of the identifiers after our check
            self.db.rollback()
            logger.warning(f"Signup race lost for email={data.email} username={data.username}")
            raise Conflict("Email, phone number, or username already in use.")
        self.db.refresh(db_user)
        logger.info(f"Created user id={db_user.id} username={db_user.username}")

        token = create_verification_token(db_user.id, db_user.email, db_user.username)
        self.email_service.send_verification_email(db_user.email, db_user.first_name, link_for(db_user.id, token))
        return db_user

    def verify_email(self, user_id: int, token: str, link_for: LinkBuilder) -> Tuple[VerificationOutcome, User]:
        user = self.get_user(user_id)
        if not user:
            raise NotFound("User not found.")

        if user.is_verified:
            return VerificationOutcome.ALREADY_VERIFIED, user

        result = decode_token(token, VERIFICATION_TOKEN)
        if result.status is TokenStatus.INVALID or result.claims.get("id") != user.id:
            logger.warning(f"Rejected verification token for user id={user.id}")
            raise ValidationError("Invalid verification link.")

        if result.status is TokenStatus.EXPIRED:
            logger.warning(f"Expired verification link for user id={user.id}; sending a new one")
            new_token = create_verification_token(user.id, user.email)
            self.email_service.send_renewed_link_email(user.email, user.first_name, link_for(user.id, new_token))
            return VerificationOutcome.LINK_RENEWED, user

        user.is_verified = True
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Verified email for user id={user.id}")
        return VerificationOutcome.VERIFIED, user

    def resend_verification(self, email: str, link_for: LinkBuilder) -> User:
        """Issue a fresh link; deliberately does not look at is_verified"""
        if not email or not email.strip():
            raise ValidationError("Email is required.")

        user = self.get_user_by_email(email)
        if not user:
            raise NotFound("User not found.")

        token = create_verification_token(user.id, user.email)
        self.email_service.send_reverification_email(user.email, user.first_name, link_for(user.id, token))
        return user

    def log_in(self, email: str, password: str) -> Tuple[User, str]:
        """Authenticate a verified user and issue a session token"""
        if not email or not email.strip():
            raise ValidationError("Email is required.")
        if not password or not password.strip():
            raise ValidationError("Password is required.")

        user = self.get_user_by_email(email)
        if not user:
            raise NotFound("User not found.")

        if not user.is_verified:
            raise Forbidden("Please verify your email to log in.")

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Failed login for user id={user.id}")
            raise ValidationError("Incorrect email or password.")

        token = create_access_token(
            {"id": user.id, "email": user.email, "username": user.username},
            timedelta(minutes=settings.access_token_expire_minutes),
        )
        return user, token

    def get_users_by_interest(self, caller_id: int, interested_in: Optional[str]) -> List[User]:
        choice = (interested_in or "").strip().lower()
        if choice not in INTERESTS:
            raise ValidationError("Invalid filter. Choose 'male', 'female', or 'both'.")

        if not self.get_user(caller_id):
            raise NotFound("User not found.")

        query = self.db.query(User)
        if choice == "both":
            query = query.filter(User.gender.in_(["male", "female"]))
        else:
            query = query.filter(User.gender == choice)

        return query.filter(User.id != caller_id).order_by(User.id).all()

    def get_users_by_hobbies(self, caller_id: int, hobbies: List[str]) -> List[User]:
        """Users sharing at least one hobby with the request; no match is a 404"""
        if not hobbies:
            raise ValidationError("Please provide at least one hobby to search.")

        matching_ids = select(UserHobby.user_id).where(UserHobby.name.in_(hobbies))
        users = self.db.query(User).filter(
            User.id.in_(matching_ids),
            User.id != caller_id,
        ).order_by(User.id).all()

        if not users:
            raise NotFound("No users found with the specified hobbies.")
        return users

    def get_user_details(self, user_id: int) -> User:
        user = self.get_user(user_id)
        if not user:
            raise NotFound("User not found.")
        return user

    def delete_account(self, user_id: int) -> None:
        """
        Hard delete the user and their hobbies.

        Love requests, gifts and reports that mention the user are left as is.
        """
        user = self.get_user(user_id)
        if not user:
            raise NotFound("User not found.")
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user id={user_id}")


def parse_hobbies(raw: Optional[List[str]]) -> List[str]:
    """Accept repeated query values, comma-joined strings, or a mix of both."""
    hobbies = []
    for value in raw or []:
        for part in value.split(","):
            name = part.strip()
            if name and name not in hobbies:
                hobbies.append(name)
    return hobbies
