# backend/utils/validation.py
import re
from datetime import date, datetime, timezone
from typing import List, Optional, Union

from config import settings
from schemas.user import FieldViolation, UserCreate, UserUpdate

NAME_MAX_LENGTH = 20
USERNAME_MIN_LENGTH = 4
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 8

# Chilean mobile/landline number: +56 then 9 digits, first one 2-9
PHONE_RE = re.compile(r"^\+56[2-9]\d{8}$")
PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*\W).+$")


def _email_re(domain: str) -> re.Pattern:
    return re.compile(rf"^[^@]+@{re.escape(domain)}$", re.IGNORECASE)


def age_on(birthdate: date, today: date) -> int:
    age = today.year - birthdate.year
    # Birthday not reached yet this year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1
    return age


def _check_name(field: str, value: str, errors: List[FieldViolation]):
    if not value or not value.strip():
        errors.append(FieldViolation(field=field, message=f"{field} is required"))
    elif len(value) > NAME_MAX_LENGTH:
        errors.append(FieldViolation(field=field, message=f"{field} must be at most {NAME_MAX_LENGTH} characters"))


def _check_password(password: str, errors: List[FieldViolation]):
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(FieldViolation(
            field="password",
            message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
        ))
    if not PASSWORD_RE.match(password):
        errors.append(FieldViolation(
            field="password",
            message="Password must include an uppercase letter, a lowercase letter, a digit and a special character",
        ))
    # bcrypt cannot hash NUL bytes
    if "\x00" in password:
        errors.append(FieldViolation(field="password", message="Password must not contain NUL characters"))


def _check_profile(payload: Union[UserCreate, UserUpdate], today: date) -> List[FieldViolation]:
    errors: List[FieldViolation] = []

    _check_name("first_name", payload.first_name, errors)
    _check_name("last_name", payload.last_name, errors)

    if not _email_re(settings.EMAIL_DOMAIN).match(str(payload.email)):
        errors.append(FieldViolation(field="email", message=f"Email must belong to @{settings.EMAIL_DOMAIN}"))

    username = payload.username or ""
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        errors.append(FieldViolation(
            field="username",
            message=f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters",
        ))

    if age_on(payload.birthdate, today) < settings.MIN_AGE:
        errors.append(FieldViolation(field="birthdate", message=f"User must be at least {settings.MIN_AGE} years old"))

    if not payload.address or not payload.address.strip():
        errors.append(FieldViolation(field="address", message="address is required"))

    if not PHONE_RE.match(payload.phone_number or ""):
        errors.append(FieldViolation(field="phone_number", message="Invalid phone number. Expected format: +56911223344"))

    return errors


def validate_user_create(payload: UserCreate, today: Optional[date] = None) -> List[FieldViolation]:
    """Return every field-level problem with a registration request; empty means valid."""
    today = today or datetime.now(timezone.utc).date()
    errors = _check_profile(payload, today)
    _check_password(payload.password or "", errors)
    return errors


def validate_user_update(payload: UserUpdate, today: Optional[date] = None) -> List[FieldViolation]:
    today = today or datetime.now(timezone.utc).date()
    errors = _check_profile(payload, today)
    # Password is optional on update; only check it when one was sent
    if payload.password:
        _check_password(payload.password, errors)
    return errors
