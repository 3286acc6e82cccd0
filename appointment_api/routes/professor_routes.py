from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from appointment_api.auth.dependencies import Identity, require_professor
from appointment_api.database import get_db
from appointment_api.models.user import Role
from appointment_api.schemas import AppointmentResponse, CreateAvailabilityRequest
from appointment_api.services import availability_service, booking_service

router = APIRouter(tags=['professors'])


@router.post('/availability', response_class=PlainTextResponse)
def add_availability(
    data: CreateAvailabilityRequest,
    identity: Identity = Depends(require_professor),
    db: Session = Depends(get_db),
):
    availability_service.publish_availability(db, identity.id, data.time_slots)
    return 'Availability added'


@router.get('/appointments', response_model=list[AppointmentResponse])
def list_my_appointments(
    identity: Identity = Depends(require_professor),
    db: Session = Depends(get_db),
):
    return booking_service.list_appointments(db, identity.id, Role.PROFESSOR)


@router.delete('/appointments/{appointment_id}', response_class=PlainTextResponse)
def cancel_appointment(
    appointment_id: int,
    identity: Identity = Depends(require_professor),
    db: Session = Depends(get_db),
):
    booking_service.cancel_appointment(db, appointment_id, identity.id, Role.PROFESSOR)
    return 'Appointment cancelled'
