"""
Signup field rules.

Checks run in a fixed order and the first failure wins, so every client
sees a single, field-specific message.
"""

import re
from dataclasses import dataclass, field
from typing import List

from matchmate.core.exceptions import ValidationError
from matchmate.models.user import (
    EMAIL_MAX_LENGTH,
    GENDERS,
    HOBBY_MAX_LENGTH,
    INTERESTS,
    NAME_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)
from matchmate.schemas.user import UserCreate

NAME_PATTERN = re.compile(r"[A-Za-z]+(?: [A-Za-z]+)*")
USERNAME_PATTERN = re.compile(r"(?!.*[_.]{2})[A-Za-z0-9_.]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_PATTERN = re.compile(r"(?!.*[\W_]{2})(?=.*[A-Z])(?=.*[\W_]).{6,}", re.ASCII)
PHONE_PATTERN = re.compile(r"[0-9]{11}")

PASSWORD_RULES_MESSAGE = (
    "Password must be at least 6 characters, contain an uppercase letter, "
    "one special character, and no consecutive special characters."
)

REQUIRED_FIELDS = (
    ("first_name", "First name is required."),
    ("last_name", "Last name is required."),
    ("username", "Username is required."),
    ("email", "Email is required."),
    ("password", "Password is required."),
    ("confirm_password", "Confirm password is required."),
    ("phone_number", "Phone number is required."),
    ("gender", "Gender is required."),
    ("interested_in", "InterestedIn field is required."),
)

# Passwords are checked for presence as given, never trimmed
UNTRIMMED_FIELDS = ("password", "confirm_password")


@dataclass
class SignupData:
    first_name: str
    last_name: str
    username: str
    email: str
    password: str
    phone_number: str
    gender: str
    interested_in: str
    hobbies: List[str] = field(default_factory=list)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def normalize_hobbies(hobbies) -> List[str]:
    """Trim, drop blanks and de-duplicate while keeping first-seen order."""
    seen = []
    for hobby in hobbies or []:
        name = hobby.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


def is_valid_name(value: str) -> bool:
    return NAME_PATTERN.fullmatch(value) is not None


def is_valid_username(value: str) -> bool:
    return USERNAME_PATTERN.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_valid_password(value: str) -> bool:
    return PASSWORD_PATTERN.fullmatch(value) is not None


def is_valid_phone_number(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value) is not None


def validate_signup(payload: UserCreate) -> SignupData:
    """Return normalized signup data or raise ``ValidationError``."""
    for name, message in REQUIRED_FIELDS:
        value = getattr(payload, name) or ""
        if name not in UNTRIMMED_FIELDS:
            value = value.strip()
        if not value:
            raise ValidationError(message)

    data = SignupData(
        first_name=payload.first_name.strip(),
        last_name=payload.last_name.strip(),
        username=payload.username.strip(),
        email=normalize_email(payload.email),
        password=payload.password,
        phone_number=payload.phone_number.strip(),
        gender=payload.gender.strip().lower(),
        interested_in=payload.interested_in.strip().lower(),
        hobbies=normalize_hobbies(payload.hobbies),
    )

    if not is_valid_name(data.first_name):
        raise ValidationError("Invalid first name format.")
    if len(data.first_name) > NAME_MAX_LENGTH:
        raise ValidationError(f"First name must be at most {NAME_MAX_LENGTH} characters.")
    if not is_valid_name(data.last_name):
        raise ValidationError("Invalid last name format.")
    if len(data.last_name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Last name must be at most {NAME_MAX_LENGTH} characters.")
    if not is_valid_username(data.username):
        raise ValidationError("Invalid username format.")
    if len(data.username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f"Username must be at most {USERNAME_MAX_LENGTH} characters.")
    if not is_valid_email(data.email):
        raise ValidationError("Invalid email format.")
    if len(data.email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"Email must be at most {EMAIL_MAX_LENGTH} characters.")
    if not is_valid_password(data.password):
        raise ValidationError(PASSWORD_RULES_MESSAGE)
    if data.password != payload.confirm_password:
        raise ValidationError("Passwords do not match.")
    if not is_valid_phone_number(data.phone_number):
        raise ValidationError("Phone number must be exactly 11 digits.")
    if data.gender not in GENDERS:
        raise ValidationError("Invalid gender value.")
    if data.interested_in not in INTERESTS:
        raise ValidationError("Invalid interestedIn value.")
    if any(len(hobby) > HOBBY_MAX_LENGTH for hobby in data.hobbies):
        raise ValidationError(f"Each hobby must be at most {HOBBY_MAX_LENGTH} characters.")

    return data
