"""
Booking, listing and cancellation of appointments.

Booking is a check-then-act sequence: the professor lookup, the
availability lookup, the duplicate check and the insert are separate
statements with no lock around them. Availability rows are never marked
consumed, so any number of students may book the same professor slot,
while a single student may hold only one appointment per slot label
across all professors.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from appointment_api.core.exceptions import (
    AppointmentNotFound,
    DuplicateBooking,
    InvalidInput,
    ProfessorNotFound,
    SlotUnavailable,
    StorageError,
)
from appointment_api.models.appointment import Appointment
from appointment_api.models.availability import Availability
from appointment_api.models.user import Role, User

logger = logging.getLogger(__name__)

# Column holding the caller's id for each role's view of appointments.
OWNER_COLUMNS = {
    Role.STUDENT: Appointment.student_id,
    Role.PROFESSOR: Appointment.professor_id,
}


def book_appointment(
    db: Session,
    student_id: int,
    professor_id: int | None,
    time_slot: str | None,
) -> Appointment:
    if not professor_id or not time_slot:
        raise InvalidInput("Professor ID and time slot are required")

    try:
        professor = db.query(User).filter(
            User.id == professor_id,
            User.role == Role.PROFESSOR,
        ).first()
        if professor is None:
            raise ProfessorNotFound()

        availability = db.query(Availability).filter(
            Availability.professor_id == professor_id,
            Availability.time_slot == time_slot,
        ).first()
        if availability is None:
            raise SlotUnavailable()

        # Matches on the label alone, whichever professor holds the booking.
        existing_appointment = db.query(Appointment).filter(
            Appointment.student_id == student_id,
            Appointment.time_slot == time_slot,
        ).first()
        if existing_appointment is not None:
            raise DuplicateBooking()

        appointment = Appointment(
            student_id=student_id,
            professor_id=professor_id,
            time_slot=time_slot,
        )
        db.add(appointment)
        db.commit()
        db.refresh(appointment)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Error booking appointment for student %s', student_id)
        raise StorageError() from exc

    logger.info(
        'Student %s booked %r with professor %s (appointment %s)',
        student_id, time_slot, professor_id, appointment.id,
    )
    return appointment


def list_appointments(db: Session, owner_id: int, role: Role) -> list[Appointment]:
    """Return every appointment in which ``owner_id`` is the ``role`` party."""
    try:
        return db.query(Appointment).filter(OWNER_COLUMNS[role] == owner_id).all()
    except SQLAlchemyError as exc:
        logger.exception('Error fetching appointments for %s %s', role.value, owner_id)
        raise StorageError() from exc


def cancel_appointment(db: Session, appointment_id: int, owner_id: int, role: Role) -> None:
    """
    Hard-delete an appointment owned by the caller.

    An id that exists under another owner is reported exactly like a
    missing one.
    """
    try:
        appointment = db.query(Appointment).filter(
            Appointment.id == appointment_id,
            OWNER_COLUMNS[role] == owner_id,
        ).first()
        if appointment is None:
            raise AppointmentNotFound()

        db.delete(appointment)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Error canceling appointment %s', appointment_id)
        raise StorageError() from exc

    logger.info('%s %s cancelled appointment %s', role.value.capitalize(), owner_id, appointment_id)
