from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from appointment_api.auth import jwt_handler
from appointment_api.core.config import Settings, get_settings
from appointment_api.database import get_db
from appointment_api.schemas import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from appointment_api.services import auth_service

router = APIRouter(tags=['auth'])


@router.post('/register', response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    auth_service.register_user(db, data.username, data.password, data.role)
    return MessageResponse(message='User registered successfully')


@router.post('/login', response_model=TokenResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = auth_service.authenticate_user(db, data.username, data.password)
    token = jwt_handler.create_access_token(user_id=user.id, role=user.role.value, settings=settings)
    return TokenResponse(token=token)
