import uuid

from utils.hashing import verify_password


def test_store_is_seeded(store):
    users = store.all()
    assert [u.username for u in users] == ["admin_if", "iavendano", "daraya"]
    assert all(u.active for u in users)
    assert users[0].role == 1
    assert users[1].role == 0
    assert verify_password("SecurePassword123!", users[0].password_hash)
    assert verify_password("Password123!", users[2].password_hash)


def test_unseeded_store_is_empty(empty_store):
    assert len(empty_store) == 0
    assert empty_store.all() == []


def test_append_keeps_insertion_order(empty_store, user_factory):
    a = empty_store.append(user_factory("zeta"))
    b = empty_store.append(user_factory("alpha"))
    assert empty_store.all() == [a, b]


def test_find_by_id_returns_shared_record(store):
    target = store.all()[1]
    found = store.find_by_id(target.id)
    assert found is target

    found.address = "Nueva 42"
    assert store.find_by_id(target.id).address == "Nueva 42"


def test_find_by_id_unknown(store):
    assert store.find_by_id(uuid.uuid4()) is None


def test_find_first(store):
    user = store.find_first(lambda u: u.email == "david@insightflow.cl")
    assert user.username == "daraya"
    assert store.find_first(lambda u: u.username == "nobody") is None


def test_all_returns_a_new_list(store):
    snapshot = store.all()
    snapshot.clear()
    assert len(store) == 3


def test_mutate_in_place(store):
    target = store.all()[2]
    assert store.mutate_in_place(target.id, lambda u: setattr(u, "is_active", False))
    assert store.find_by_id(target.id).is_active is False
    assert len(store) == 3


def test_mutate_in_place_unknown_id(store):
    calls = []
    assert store.mutate_in_place(uuid.uuid4(), calls.append) is False
    assert calls == []
