# backend/services/users.py
import logging
import uuid
from typing import List, Optional, Tuple

from database import UserStore
from models.users import User
from schemas.user import UserCreate, UserQuery, UserUpdate
from utils.errors import Conflict, NotFound, Unauthorized
from utils.hashing import verify_password
from utils.mappers import apply_update, to_user
from utils.query import query_users

logger = logging.getLogger(__name__)

# Same message for every failed login so callers cannot tell which check failed
INVALID_CREDENTIALS = "Invalid credentials"


class UserService:
    def __init__(self, store: UserStore):
        self._store = store

    # --- lookups ---

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower()
        return self._store.find_first(lambda u: u.email.lower() == wanted)

    def get_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        return self._store.find_first(lambda u: u.username.lower() == wanted)

    def _ensure_unique(self, email: str, username: str, exclude_id: Optional[uuid.UUID] = None):
        owner = self.get_by_email(email)
        if owner is not None and owner.id != exclude_id:
            raise Conflict("A user with the same email already exists.")
        owner = self.get_by_username(username)
        if owner is not None and owner.id != exclude_id:
            raise Conflict("A user with the same username already exists.")

    # --- operations ---

    def register(self, data: UserCreate) -> User:
        """
        Create a new active account.

        The uniqueness check and the insert run under the store lock, so two
        concurrent registrations for the same email cannot both succeed.
        """
        # Hashing is slow; do it before taking the lock
        user = to_user(data)
        with self._store.lock:
            self._ensure_unique(user.email, user.username)
            self._store.append(user)
        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise Unauthorized(INVALID_CREDENTIALS)
        if not user.active:
            raise Unauthorized(INVALID_CREDENTIALS)
        return user

    def list_users(self, query: UserQuery) -> Tuple[List[User], int]:
        return query_users(self._store.all(), query)

    def get_user(self, user_id: uuid.UUID) -> User:
        user = self._store.find_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def update_user(self, user_id: uuid.UUID, data: UserUpdate) -> User:
        with self._store.lock:
            user = self.get_user(user_id)
            self._ensure_unique(str(data.email), data.username, exclude_id=user.id)
            apply_update(user, data)
        logger.info(f"Updated user {user.id}")
        return user

    def soft_delete(self, user_id: uuid.UUID) -> None:
        # Deleting an already inactive account is a no-op success
        with self._store.lock:
            found = self._store.mutate_in_place(user_id, _deactivate)
        if not found:
            raise NotFound("User not found")
        logger.info(f"Deactivated user {user_id}")


def _deactivate(user: User) -> None:
    user.is_active = False
