from sqlalchemy import Column, String
from classroom_booking.db import Base


class Classroom(Base):
    """Classroom rows are managed outside this service; bookings only reference them."""

    __tablename__ = "classroom"

    classroom_id = Column(String(20), primary_key=True)
