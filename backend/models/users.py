# backend/models/users.py
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

ROLE_USER = 0
ROLE_ADMIN = 1


def _today() -> date:
    return datetime.now(timezone.utc).date()


# Represents a user account held in the in-memory store
@dataclass(eq=False)
class User:
    first_name: str
    last_name: str
    email: str # Must belong to the organization's mail domain
    username: str
    birthdate: date
    address: str
    phone_number: str
    password_hash: str # bcrypt token, never the plaintext

    id: uuid.UUID = field(default_factory=uuid.uuid4) # Immutable identifier
    is_active: Optional[bool] = True # Soft delete flag, None reads as active
    created_at: date = field(default_factory=_today) # Registration date, set once
    role: int = ROLE_USER # 0 = ordinary user, other values are reserved

    @property
    def active(self) -> bool:
        return self.is_active is not False
