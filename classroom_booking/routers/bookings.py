from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from classroom_booking.exceptions import StorageError
from classroom_booking.repository import BookingRepository, get_repository
from classroom_booking.schemas.booking import BookingCreate, BookingCreated, BookingResponse
from classroom_booking.utils.validation_helpers import (
    HTTP_METHODS,
    parse_booking_id,
    read_booking_payload,
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/bookings",
    tags=["bookings"],
)


@router.get(
    "",
    response_model=List[BookingResponse],
    summary="List all bookings",
    description="Retrieve every booking, in no particular order.",
)
def get_bookings(repository: BookingRepository = Depends(get_repository)):
    try:
        bookings = repository.fetch_all()
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.debug(f"Retrieved {len(bookings)} bookings")
    return bookings


@router.post(
    "",
    response_model=BookingCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    description="Book a classroom at a given time for a student.",
)
def create_booking(
    booking: BookingCreate = Depends(read_booking_payload),
    repository: BookingRepository = Depends(get_repository),
):
    """
    Create a new booking.

    - **bookingtime**: Time of the booking, free text of at most 20 characters.
    - **bookingclassroomid**: ID of an existing classroom.
    - **bookingbookerid**: ID of an existing student.

    Returns the ID assigned to the booking. A classroom that is already
    booked at exactly the same time, or an unknown classroom or student,
    is rejected with 400.
    """
    try:
        booking_id = repository.insert(booking)
    except StorageError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    logger.debug(f"Created booking: {booking_id}")
    return BookingCreated(booking_id=booking_id)


@router.options("", summary="CORS preflight")
def preflight_bookings():
    return Response(status_code=status.HTTP_200_OK)


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking by ID",
    description="Retrieve a specific booking by its ID.",
)
def get_booking(
    booking_pk: int = Depends(parse_booking_id),
    repository: BookingRepository = Depends(get_repository),
):
    try:
        booking = repository.fetch_by_id(booking_pk)
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    if booking is None:
        logger.debug(f"Booking not found: {booking_pk}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    logger.debug(f"Retrieved booking: {booking_pk}")
    return booking


@router.delete(
    "/{booking_id}",
    summary="Delete a booking",
    description="Delete a booking. Deleting an unknown ID also succeeds.",
)
def delete_booking(
    booking_pk: int = Depends(parse_booking_id),
    repository: BookingRepository = Depends(get_repository),
):
    try:
        deleted = repository.delete_by_id(booking_pk)
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.debug(f"Deleted booking {booking_pk}: {deleted} row(s)")
    return Response(status_code=status.HTTP_200_OK)


@router.api_route(
    "/{booking_id}",
    methods=[m for m in HTTP_METHODS if m not in ("GET", "DELETE")],
    include_in_schema=False,
)
def booking_method_not_allowed(_: int = Depends(parse_booking_id)):
    # the id is still checked first, so a bad id answers 404 for any verb
    raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)


@router.api_route("/{booking_id}/{extra:path}", methods=HTTP_METHODS, include_in_schema=False)
def reject_nested_booking_path():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
