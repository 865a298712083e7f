"""
Password hashing and signed-token handling.

Tokens are HS256 JWTs signed with ``settings.secret_key``. Verification
returns a ``TokenResult`` rather than raising, so callers have to decide
what an expired token means for them (the email-verification flow renews
the link, the auth dependency rejects the request).
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from .config import settings

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

ACCESS_TOKEN = "access"
VERIFICATION_TOKEN = "verification"


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


class TokenStatus(str, enum.Enum):
    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


@dataclass(frozen=True)
class TokenResult:
    status: TokenStatus
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.status is TokenStatus.VALID


def create_access_token(
    claims: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    token_type: str = ACCESS_TOKEN,
) -> str:
    """Sign ``claims`` into a JWT that expires after ``expires_delta``."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    payload = dict(claims)
    payload.update({
        "type": token_type,
        "iat": now,
        "exp": now + expires_delta,
    })
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, token_type: Optional[str] = None) -> TokenResult:
    """
    Verify a token's signature and expiry.

    An expired token still carries its (signature-checked) claims so that
    callers can tell whom it was issued to.
    """
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        claims = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"verify_exp": False},
        )
        status = TokenStatus.EXPIRED
    except jwt.InvalidTokenError:
        return TokenResult(TokenStatus.INVALID)
    else:
        status = TokenStatus.VALID

    if token_type is not None and claims.get("type") != token_type:
        return TokenResult(TokenStatus.INVALID)

    return TokenResult(status, claims)


def create_verification_token(user_id: int, email: str, username: Optional[str] = None) -> str:
    claims: Dict[str, Any] = {"id": user_id, "email": email}
    if username is not None:
        claims["username"] = username
    return create_access_token(
        claims,
        timedelta(minutes=settings.verification_token_expire_minutes),
        token_type=VERIFICATION_TOKEN,
    )
