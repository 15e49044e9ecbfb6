import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from classroom_booking.config import Settings, get_settings
from classroom_booking.db import StorageGateway
from classroom_booking.repository import BookingRepository
from classroom_booking.routers import booker, bookings
from classroom_booking.utils.cors import cors_middleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    "lifespan for opening and closing the storage gateway"
    gateway = app.state.gateway
    # an unreachable database aborts startup
    gateway.connect(create_schema=app.state.settings.create_schema)
    yield
    gateway.close()


async def status_only_handler(_: Request, exc: StarletteHTTPException):
    return Response(status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def bad_request_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Rejected request to {request.url.path}: {exc.errors()}")
    return Response(status_code=400)


def create_app(settings: Optional[Settings] = None, gateway: Optional[StorageGateway] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)-20s %(levelname)-7s %(message)s",
    )

    app = FastAPI(
        lifespan=lifespan,
        redirect_slashes=False,
        title="Classroom booking",
        description="Booking API for university classrooms.",
        version="0.1.0",
        license_info={
            "name": "MIT",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    app.state.settings = settings
    app.state.gateway = gateway or StorageGateway.from_settings(settings)
    app.state.repository = BookingRepository(app.state.gateway)

    app.middleware("http")(cors_middleware)
    app.add_exception_handler(StarletteHTTPException, status_only_handler)
    app.add_exception_handler(RequestValidationError, bad_request_handler)

    app.include_router(bookings.router)
    app.include_router(booker.router)
    return app


app = create_app()


def run():
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
