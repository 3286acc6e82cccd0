"""Request and response bodies. JSON field names are camelCase."""

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class RegisterRequest(CamelModel):
    username: str | None = None
    password: str | None = None
    role: str | None = None


class LoginRequest(CamelModel):
    username: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


class TokenResponse(BaseModel):
    token: str


class CreateAvailabilityRequest(CamelModel):
    time_slots: list[str] | None = None


class AvailabilitySlotResponse(CamelModel):
    id: int
    professor_id: int
    time_slot: str
    created_at: datetime
    updated_at: datetime


class CreateAppointmentRequest(CamelModel):
    professor_id: int | None = None
    time_slot: str | None = None


class AppointmentResponse(CamelModel):
    id: int
    student_id: int
    professor_id: int
    time_slot: str
    created_at: datetime
    updated_at: datetime
