from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from classroom_booking.config import Settings
from classroom_booking.db import StorageGateway
from classroom_booking.main import create_app
from classroom_booking.models.classroom import Classroom
from classroom_booking.models.student import Student
from classroom_booking.repository import BookingRepository

CLASSROOMS = ["101", "1102", "1105", "1108"]
STUDENTS = ["S1", "S2", "63070501005"]


class BrokenSession:
    """Session whose every operation fails like a timed-out connection."""

    def __getattr__(self, name):
        raise OperationalError("SELECT 1", {}, Exception("query timed out"))


class FailingGateway:
    @contextmanager
    def session(self):
        yield BrokenSession()


# Fixtures
@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'tests.db'}",
        log_level="DEBUG",
        _env_file=None,
    )


@pytest.fixture
def gateway(app_settings):  # pylint: disable=redefined-outer-name
    """Gateway on a fresh database holding the reference classrooms and students"""
    gateway = StorageGateway.from_settings(app_settings)
    gateway.connect(create_schema=True)
    with gateway.session() as db:
        db.add_all([Classroom(classroom_id=c) for c in CLASSROOMS])
        db.add_all([Student(student_id=s) for s in STUDENTS])
        db.commit()
    yield gateway
    gateway.close()


@pytest.fixture
def repository(gateway):  # pylint: disable=redefined-outer-name
    return BookingRepository(gateway)


@pytest.fixture
def client(app_settings, gateway):  # pylint: disable=redefined-outer-name
    app = create_app(app_settings, gateway)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_client(client):  # pylint: disable=redefined-outer-name
    """Client whose repository cannot reach the database"""
    client.app.state.repository = BookingRepository(FailingGateway())
    return client
