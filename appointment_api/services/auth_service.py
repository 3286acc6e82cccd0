import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from appointment_api.auth.passwords import hash_password, verify_password
from appointment_api.core.exceptions import (
    DuplicateUsername,
    InvalidCredentials,
    InvalidInput,
    StorageError,
)
from appointment_api.models.user import Role, User

logger = logging.getLogger(__name__)


def parse_role(value: str | None) -> Role:
    try:
        return Role(value)
    except ValueError as exc:
        raise InvalidInput("Invalid role") from exc


def register_user(db: Session, username: str | None, password: str | None, role: str | None) -> User:
    """Create a user with a bcrypt-hashed password. No session is issued."""
    if not username or not username.strip() or not password or not role:
        raise InvalidInput("Username, password and role are required")
    user_role = parse_role(role)

    try:
        existing_user = db.query(User).filter(User.username == username).first()
        if existing_user:
            raise DuplicateUsername()

        user = User(
            username=username,
            hashed_password=hash_password(password),
            role=user_role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        # Lost a race with a concurrent registration of the same name.
        db.rollback()
        raise DuplicateUsername() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Registration error for %r', username)
        raise StorageError() from exc

    logger.info('Registered %s %r (id=%s)', user.role.value, user.username, user.id)
    return user


def authenticate_user(db: Session, username: str | None, password: str | None) -> User:
    if not username or not password:
        raise InvalidCredentials()

    try:
        user = db.query(User).filter(User.username == username).first()
    except SQLAlchemyError as exc:
        logger.exception('Login error for %r', username)
        raise StorageError() from exc

    if user is None or not verify_password(password, user.hashed_password):
        logger.info('Rejected login for %r', username)
        raise InvalidCredentials()
    return user
