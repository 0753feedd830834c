import os
import uuid
from datetime import date

# Minimum bcrypt cost keeps seeding and registration fast under test
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from database import UserStore, get_store
from models.users import User
from schemas.user import UserCreate
from services.users import UserService


@pytest.fixture
def store():
    return UserStore(seed=True)


@pytest.fixture
def empty_store():
    return UserStore(seed=False)


@pytest.fixture
def service(store):
    return UserService(store)


@pytest.fixture
def client(store):
    from main import app

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def new_user_payload():
    return {
        "first_name": "Camila",
        "last_name": "Rojas",
        "email": "camila@insightflow.cl",
        "username": "crojas",
        "birthdate": "1998-07-14",
        "address": "Los Carrera 455",
        "phone_number": "+56922334455",
        "password": "Str0ng!Pass",
    }


@pytest.fixture
def new_user(new_user_payload):
    return UserCreate(**new_user_payload)


def make_user(username, first_name="Test", last_name="User", email=None,
              is_active=True, created_at=date(2024, 1, 1)):
    return User(
        id=uuid.uuid4(),
        first_name=first_name,
        last_name=last_name,
        email=email or f"{username}@insightflow.cl",
        username=username,
        birthdate=date(1990, 1, 1),
        address="Somewhere 1",
        phone_number="+56911111111",
        password_hash="not-a-real-hash",
        is_active=is_active,
        created_at=created_at,
    )


@pytest.fixture
def user_factory():
    return make_user
