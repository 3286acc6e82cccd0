from datetime import datetime, timedelta, timezone

import jwt

from appointment_api.core.config import Settings


def create_access_token(user_id: int, role: str, settings: Settings) -> str:
    payload = {"id": user_id, "role": role}
    if settings.jwt_expires_minutes:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_expires_minutes)
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict:
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
