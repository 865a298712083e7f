from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from matchmate.core.database import get_db
from matchmate.core.exceptions import InvalidToken, Unauthenticated
from matchmate.core.security import ACCESS_TOKEN, TokenStatus, decode_token
from matchmate.services.account_service import AccountService
from matchmate.services.email_service import EmailService
from matchmate.services.moderation_service import ModerationService
from matchmate.services.relationship_service import RelationshipService


@dataclass(frozen=True)
class Identity:
    """Claims of the bearer token that authenticated the current request."""
    id: int
    email: str
    username: Optional[str] = None


def get_current_identity(authorization: Optional[str] = Header(None)) -> Identity:
    if not authorization or not authorization.startswith("Bearer "):
        raise Unauthenticated("No token provided or invalid token format. Authorization denied.")

    token = authorization[len("Bearer "):].strip()
    if not token:
        raise Unauthenticated("No token provided or invalid token format. Authorization denied.")

    result = decode_token(token, ACCESS_TOKEN)
    if result.status is TokenStatus.EXPIRED:
        raise Unauthenticated("Token expired. Please login again.")
    if result.status is TokenStatus.INVALID or not isinstance(result.claims.get("id"), int):
        raise InvalidToken("Invalid token. Authentication failed.")

    return Identity(
        id=result.claims["id"],
        email=result.claims.get("email", ""),
        username=result.claims.get("username"),
    )


def get_email_service() -> EmailService:
    return EmailService()


def get_account_service(
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
) -> AccountService:
    return AccountService(db, email_service)


def get_relationship_service(db: Session = Depends(get_db)) -> RelationshipService:
    return RelationshipService(db)


def get_moderation_service(db: Session = Depends(get_db)) -> ModerationService:
    return ModerationService(db)
