import re

from fastapi import HTTPException, Request, status
from pydantic import ValidationError

from classroom_booking.schemas.booking import BookingCreate

HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_booking_id(booking_id: str) -> int:
    """Turn the ``{booking_id}`` path segment into an integer or answer 404."""
    if not _INTEGER.fullmatch(booking_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    value = int(booking_id)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return value


async def read_booking_payload(request: Request) -> BookingCreate:
    """Decode the request body as a booking whatever the declared content type."""
    body = await request.body()
    try:
        return BookingCreate.model_validate_json(body)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
