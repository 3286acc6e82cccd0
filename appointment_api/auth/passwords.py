import logging

from passlib.context import CryptContext

from appointment_api.core.config import get_settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash of ``password``."""
    rounds = rounds or get_settings().bcrypt_rounds
    return str(pwd_context.using(bcrypt__rounds=rounds).hash(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Compare a plain password against a stored hash.

    Malformed hashes count as a mismatch rather than an error.
    """
    try:
        return bool(pwd_context.verify(plain_password, hashed_password))
    except (ValueError, TypeError) as exc:
        logger.error('Error verifying password: %s', exc)
        return False
