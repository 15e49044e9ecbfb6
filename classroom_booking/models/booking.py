from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from classroom_booking.db import Base


class Booking(Base):
    __tablename__ = "booking"
    __table_args__ = (
        UniqueConstraint("booking_time", "booking_classroom_id", name="booking_UNIQUE"),
    )

    booking_id = Column(Integer, primary_key=True, autoincrement=True)
    # free text, compared as-is by the unique key
    booking_time = Column(String(20), nullable=False)
    booking_classroom_id = Column(
        String(20), ForeignKey("classroom.classroom_id"), nullable=False, index=True
    )
    booking_student_id = Column(
        String(20), ForeignKey("student.student_id"), nullable=False, index=True
    )

