import logging
from typing import List, Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from classroom_booking.db import StorageGateway
from classroom_booking.exceptions import StorageError
from classroom_booking.models.booking import Booking
from classroom_booking.schemas.booking import BookingCreate, BookingResponse

logger = logging.getLogger(__name__)


class BookingRepository:
    """Booking queries against the ``booking`` table.

    Every method opens its own session from the gateway, so no connection
    or transaction outlives a single call. Driver failures are logged and
    re-raised as :class:`StorageError`.
    """

    def __init__(self, gateway: StorageGateway):
        self.gateway = gateway

    def fetch_by_id(self, booking_id: int) -> Optional[BookingResponse]:
        """Return the booking, or ``None`` when no row has this id."""
        try:
            with self.gateway.session() as db:
                booking = db.query(Booking).filter(Booking.booking_id == booking_id).first()
                if booking is None:
                    return None
                return BookingResponse.model_validate(booking)
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch booking {booking_id}: {e}")
            raise StorageError(f"fetch booking {booking_id}") from e

    def fetch_by_booker(self, booker_id: str) -> List[BookingResponse]:
        try:
            with self.gateway.session() as db:
                bookings = db.query(Booking).filter(Booking.booking_student_id == booker_id).all()
                return [BookingResponse.model_validate(b) for b in bookings]
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch bookings of booker {booker_id}: {e}")
            raise StorageError(f"fetch bookings of booker {booker_id}") from e

    def fetch_all(self) -> List[BookingResponse]:
        try:
            with self.gateway.session() as db:
                bookings = db.query(Booking).all()
                return [BookingResponse.model_validate(b) for b in bookings]
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch bookings: {e}")
            raise StorageError("fetch bookings") from e

    def insert(self, booking: BookingCreate) -> int:
        """Insert a booking and return the id assigned by the database.

        A duplicate (time, classroom) pair or an unknown classroom/student
        surfaces as a plain :class:`StorageError`.
        """
        try:
            with self.gateway.session() as db:
                db_booking = Booking(**booking.model_dump())
                db.add(db_booking)
                db.commit()
                db.refresh(db_booking)
                return db_booking.booking_id
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert booking {booking.model_dump(by_alias=True)}: {e}")
            raise StorageError("insert booking") from e

    def delete_by_id(self, booking_id: int) -> int:
        """Delete the booking if present and return the number of removed rows."""
        try:
            with self.gateway.session() as db:
                deleted = (
                    db.query(Booking)
                    .filter(Booking.booking_id == booking_id)
                    .delete(synchronize_session=False)
                )
                db.commit()
                return deleted
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete booking {booking_id}: {e}")
            raise StorageError(f"delete booking {booking_id}") from e


def get_repository(request: Request) -> BookingRepository:
    """Provide the repository bound to the running application."""
    return request.app.state.repository
