from pydantic import BaseModel, ConfigDict, Field


class BookingBase(BaseModel):
    booking_time: str = Field(alias="bookingtime", max_length=20)
    booking_classroom_id: str = Field(alias="bookingclassroomid", max_length=20)
    booking_student_id: str = Field(alias="bookingbookerid", max_length=20)

    model_config = ConfigDict(populate_by_name=True)


class BookingCreate(BookingBase):
    pass


class BookingResponse(BaseModel):
    booking_id: int = Field(alias="bookingid")
    booking_time: str = Field(alias="bookingtime")
    booking_classroom_id: str = Field(alias="bookingclassroomid")
    booking_student_id: str = Field(alias="bookingbookerid")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class BookingCreated(BaseModel):
    booking_id: int = Field(alias="bookingid")

    model_config = ConfigDict(populate_by_name=True)
