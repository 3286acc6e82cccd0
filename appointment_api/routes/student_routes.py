from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from appointment_api.auth.dependencies import Identity, require_student
from appointment_api.database import get_db
from appointment_api.models.user import Role
from appointment_api.schemas import (
    AppointmentResponse,
    AvailabilitySlotResponse,
    CreateAppointmentRequest,
)
from appointment_api.services import availability_service, booking_service

router = APIRouter(tags=['students'])


@router.get(
    '/professors/{professor_id}/availability',
    response_model=list[AvailabilitySlotResponse],
    dependencies=[Depends(require_student)],
)
def list_professor_availability(professor_id: int, db: Session = Depends(get_db)):
    return availability_service.list_professor_availability(db, professor_id)


@router.post('/appointments', response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def book_appointment(
    data: CreateAppointmentRequest,
    identity: Identity = Depends(require_student),
    db: Session = Depends(get_db),
):
    return booking_service.book_appointment(db, identity.id, data.professor_id, data.time_slot)


@router.get('/appointments', response_model=list[AppointmentResponse])
def list_my_appointments(
    identity: Identity = Depends(require_student),
    db: Session = Depends(get_db),
):
    return booking_service.list_appointments(db, identity.id, Role.STUDENT)


@router.delete('/appointments/{appointment_id}', response_class=PlainTextResponse)
def cancel_my_appointment(
    appointment_id: int,
    identity: Identity = Depends(require_student),
    db: Session = Depends(get_db),
):
    booking_service.cancel_appointment(db, appointment_id, identity.id, Role.STUDENT)
    return 'Appointment cancelled'
