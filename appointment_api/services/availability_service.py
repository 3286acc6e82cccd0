import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from appointment_api.core.exceptions import InvalidInput, StorageError
from appointment_api.models.availability import Availability

logger = logging.getLogger(__name__)


def publish_availability(db: Session, professor_id: int, time_slots: list[str] | None) -> list[Availability]:
    """
    Insert one availability row per slot label, in the order given.

    Labels are free-form; duplicates and overlaps are stored as-is.
    """
    if not time_slots:
        raise InvalidInput("Invalid time slots")

    rows = [Availability(professor_id=professor_id, time_slot=slot) for slot in time_slots]
    try:
        db.add_all(rows)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Error adding availability for professor %s', professor_id)
        raise StorageError() from exc

    logger.info('Professor %s published %d slot(s)', professor_id, len(rows))
    return rows


def list_professor_availability(db: Session, professor_id: int) -> list[Availability]:
    # Booked slots are included; rows are never consumed.
    try:
        return db.query(Availability).filter(Availability.professor_id == professor_id).all()
    except SQLAlchemyError as exc:
        logger.exception('Error fetching availability for professor %s', professor_id)
        raise StorageError() from exc
