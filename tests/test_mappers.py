import uuid
from datetime import date, datetime

from schemas.user import UserUpdate
from utils.hashing import verify_password
from utils.mappers import apply_update, to_login_view, to_user, to_view


def test_to_user(new_user):
    user = to_user(new_user)
    assert isinstance(user.id, uuid.UUID)
    assert user.username == "crojas"
    assert user.email == "camila@insightflow.cl"
    assert user.birthdate == date(1998, 7, 14)
    assert user.role == 0
    assert user.is_active is True
    assert user.password_hash != "Str0ng!Pass"
    assert verify_password("Str0ng!Pass", user.password_hash)


def test_to_user_generates_fresh_ids(new_user):
    assert to_user(new_user).id != to_user(new_user).id


def test_to_view(user_factory):
    user = user_factory("mlopez", first_name="María", last_name="López", created_at=date(2024, 3, 1))
    view = to_view(user)
    assert view.id == user.id
    assert view.full_name == "María López"
    assert view.created_at == datetime(2024, 3, 1, 0, 0)
    assert view.is_active is True
    assert "password_hash" not in view.model_dump()


def test_to_view_unset_active_reads_true(user_factory):
    assert to_view(user_factory("ctapia", is_active=None)).is_active is True
    assert to_view(user_factory("ctapia", is_active=False)).is_active is False


def test_to_login_view(user_factory):
    user = user_factory("mlopez", first_name="María", last_name="López")
    data = to_login_view(user).model_dump()
    assert data == {
        "id": user.id,
        "username": "mlopez",
        "first_name": "María",
        "last_name": "López",
        "email": "mlopez@insightflow.cl",
    }


def _update(new_user_payload, **overrides):
    return UserUpdate(**{**new_user_payload, **overrides})


def test_apply_update_overwrites_editable_fields(user_factory, new_user_payload):
    user = user_factory("mlopez", is_active=False, created_at=date(2024, 3, 1))
    original = (user.id, user.role, user.is_active, user.created_at, user.password_hash)

    apply_update(user, _update(new_user_payload, password=None))

    assert user.username == "crojas"
    assert user.first_name == "Camila"
    assert user.phone_number == "+56922334455"
    assert user.birthdate == date(1998, 7, 14)
    assert (user.id, user.role, user.is_active, user.created_at, user.password_hash) == original


def test_apply_update_empty_password_keeps_hash(user_factory, new_user_payload):
    user = user_factory("mlopez")
    apply_update(user, _update(new_user_payload, password=""))
    assert user.password_hash == "not-a-real-hash"


def test_apply_update_rehashes_new_password(user_factory, new_user_payload):
    user = user_factory("mlopez")
    apply_update(user, _update(new_user_payload, password="N3w!Secret"))
    assert verify_password("N3w!Secret", user.password_hash)
