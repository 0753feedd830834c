# backend/utils/hashing.py
import logging

from passlib.context import CryptContext

from config import settings

logger = logging.getLogger(__name__)

# bcrypt_sha256 pre-hashes the password, so bytes past bcrypt's 72-byte limit still count.
# Plain bcrypt tokens remain verifiable.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256", "bcrypt"],
    deprecated="auto",
    bcrypt_sha256__rounds=settings.BCRYPT_ROUNDS,
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash a plaintext password; every call produces a fresh salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt token.

    Malformed or empty tokens are reported as a mismatch instead of raising,
    so callers can use this as a plain predicate on the login path.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"Password verification rejected a malformed hash: {e}")
        return False
