from sqlalchemy import Column, String
from classroom_booking.db import Base


class Student(Base):
    __tablename__ = "student"

    student_id = Column(String(20), primary_key=True)
