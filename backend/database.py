# backend/database.py
import logging
import threading
import uuid
from datetime import date
from typing import Callable, List, Optional

from config import settings
from models.users import User, ROLE_ADMIN, ROLE_USER
from utils.hashing import get_password_hash

logger = logging.getLogger(__name__)

# Bootstrap accounts loaded once per store
SEED_USERS = [
    {
        "first_name": "Admin",
        "last_name": "User",
        "email": "admin@insightflow.cl",
        "username": "admin_if",
        "birthdate": date(1990, 1, 1),
        "address": "Calle Falsa 123",
        "phone_number": "+56912345678",
        "password": "SecurePassword123!",
        "role": ROLE_ADMIN,
    },
    {
        "first_name": "Ignacio",
        "last_name": "Avendaño",
        "email": "ignacio@insightflow.cl",
        "username": "iavendano",
        "birthdate": date(1995, 5, 20),
        "address": "Av. Brasil 123",
        "phone_number": "+56987654321",
        "password": "Password123!",
        "role": ROLE_USER,
    },
    {
        "first_name": "David",
        "last_name": "Araya",
        "email": "david@insightflow.cl",
        "username": "daraya",
        "birthdate": date(1985, 3, 15),
        "address": "Angamos 0610",
        "phone_number": "+56911223344",
        "password": "Password123!",
        "role": ROLE_USER,
    },
]


class UserStore:
    """
    Ordered, process-lifetime collection of user records.

    Lookups hand out the stored ``User`` objects themselves, not copies: a
    caller that mutates a returned record changes what every later read sees.
    Records are never removed; deletion is an ``is_active`` flip done through
    ``mutate_in_place``.

    ``lock`` guards check-then-write sequences. The store itself does not take
    it, so plain reads stay lock-free.
    """

    def __init__(self, seed: bool = True):
        self._users: List[User] = []
        self.lock = threading.RLock()
        if seed:
            self._seed()

    def _seed(self):
        if self._users:
            return
        for data in SEED_USERS:
            fields = dict(data)
            password = fields.pop("password")
            self._users.append(User(password_hash=get_password_hash(password), **fields))
        logger.info(f"Seeded user store with {len(SEED_USERS)} accounts")

    def __len__(self) -> int:
        return len(self._users)

    def append(self, user: User) -> User:
        self._users.append(user)
        return user

    def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.find_first(lambda u: u.id == user_id)

    def find_first(self, predicate: Callable[[User], bool]) -> Optional[User]:
        return next((u for u in self._users if predicate(u)), None)

    def all(self) -> List[User]:
        # New list, same record objects
        return list(self._users)

    def mutate_in_place(self, user_id: uuid.UUID, mutator: Callable[[User], None]) -> bool:
        user = self.find_by_id(user_id)
        if user is None:
            return False
        mutator(user)
        return True


_store: Optional[UserStore] = None


def init_store() -> UserStore:
    global _store
    if _store is None:
        _store = UserStore(seed=settings.SEED_FIXTURES)
    return _store


def get_store() -> UserStore:
    return init_store()
