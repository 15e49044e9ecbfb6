from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from classroom_booking.exceptions import StorageError
from classroom_booking.repository import BookingRepository, get_repository
from classroom_booking.schemas.booking import BookingResponse
from classroom_booking.utils.validation_helpers import HTTP_METHODS
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/booker",
    tags=["booker"],
)


@router.get(
    "/{booker_id}",
    response_model=List[BookingResponse],
    summary="List bookings of a booker",
    description="Retrieve every booking made by a student. Unknown students get an empty list.",
)
def get_booker_bookings(
    booker_id: str,
    repository: BookingRepository = Depends(get_repository),
):
    try:
        bookings = repository.fetch_by_booker(booker_id)
    except StorageError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.debug(f"Retrieved {len(bookings)} bookings for booker: {booker_id}")
    return bookings


@router.api_route("", methods=HTTP_METHODS, include_in_schema=False)
@router.api_route("/", methods=HTTP_METHODS, include_in_schema=False)
@router.api_route("/{booker_id}/{extra:path}", methods=HTTP_METHODS, include_in_schema=False)
def reject_malformed_booker_path():
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
