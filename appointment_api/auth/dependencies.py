import logging
from dataclasses import dataclass

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from appointment_api.auth import jwt_handler
from appointment_api.core.config import Settings, get_settings
from appointment_api.core.exceptions import Forbidden, InvalidToken, Unauthorized
from appointment_api.models.user import Role

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """The caller as decoded from a bearer token."""

    id: int
    role: Role


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    try:
        payload = jwt_handler.decode_access_token(credentials.credentials, settings)
    except jwt.PyJWTError as exc:
        logger.info('Token verification failed: %s', exc)
        raise InvalidToken() from exc

    user_id = payload.get("id")
    if not user_id:
        raise InvalidToken("Invalid token: Missing user ID")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise InvalidToken()

    try:
        role = Role(payload.get("role"))
    except ValueError as exc:
        raise Forbidden() from exc

    return Identity(id=user_id, role=role)


class RoleGuard:
    """Route dependency that admits only callers holding one of ``roles``."""

    def __init__(self, *roles: Role) -> None:
        self.roles = frozenset(roles)

    def __call__(self, identity: Identity = Depends(get_current_identity)) -> Identity:
        if identity.role not in self.roles:
            raise Forbidden()
        return identity


require_student = RoleGuard(Role.STUDENT)
require_professor = RoleGuard(Role.PROFESSOR)
