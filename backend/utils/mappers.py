# backend/utils/mappers.py
from datetime import datetime, time

from models.users import User, ROLE_USER
from schemas.user import LoginResponse, UserCreate, UserResponse, UserUpdate
from utils.hashing import get_password_hash


# Build a fresh record from a registration request
def to_user(payload: UserCreate) -> User:
    return User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=str(payload.email),
        username=payload.username,
        birthdate=payload.birthdate,
        address=payload.address,
        phone_number=payload.phone_number,
        password_hash=get_password_hash(payload.password),
        role=ROLE_USER,
        is_active=True,
    )


# Map a record to its outward view
def to_view(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        full_name=f"{user.first_name} {user.last_name}",
        email=user.email,
        username=user.username,
        is_active=user.active,
        birthdate=user.birthdate,
        address=user.address,
        phone_number=user.phone_number,
        created_at=datetime.combine(user.created_at, time(0, 0)),
    )


def to_login_view(user: User) -> LoginResponse:
    return LoginResponse(
        id=user.id,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
    )


def apply_update(user: User, payload: UserUpdate) -> None:
    """
    Copy every editable field from ``payload`` onto ``user`` in place.

    id, role, is_active and created_at are left alone. The password hash is
    only replaced when a non-empty password was sent.
    """
    user.first_name = payload.first_name
    user.last_name = payload.last_name
    user.email = str(payload.email)
    user.username = payload.username
    user.birthdate = payload.birthdate
    user.address = payload.address
    user.phone_number = payload.phone_number
    if payload.password:
        user.password_hash = get_password_hash(payload.password)
