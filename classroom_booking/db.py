import logging
import math
import os
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def _connect_args(url, call_timeout):
    """Driver arguments bounding every statement by ``call_timeout`` seconds."""
    backend = url.get_backend_name()
    if backend == "sqlite":
        return {"check_same_thread": False, "timeout": call_timeout}
    if backend == "mysql":
        seconds = max(1, math.ceil(call_timeout))
        return {
            "connect_timeout": seconds,
            "read_timeout": seconds,
            "write_timeout": seconds,
        }
    return {}


def _enable_sqlite_foreign_keys(dbapi_connection, _):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class StorageGateway:
    """Pooled connection to the booking store.

    The pool keeps at most ``max_open`` connections, ``max_idle`` of them
    idle, and recycles each one after ``max_lifetime`` seconds.
    """

    def __init__(self, url, max_lifetime=180, max_open=10, max_idle=10, call_timeout=3.0):
        self.url = make_url(url)
        self.call_timeout = call_timeout
        self.engine = create_engine(
            self.url,
            connect_args=_connect_args(self.url, call_timeout),
            pool_recycle=max_lifetime,
            pool_size=max_idle,
            max_overflow=max(0, max_open - max_idle),
            pool_timeout=call_timeout,
        )
        if self.url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings):
        return cls(
            settings.database_url,
            max_lifetime=settings.conn_max_lifetime,
            max_open=settings.max_open_conns,
            max_idle=settings.max_idle_conns,
            call_timeout=settings.query_timeout,
        )

    def connect(self, create_schema=False):
        """Check the database is reachable, optionally creating missing tables."""
        if self.url.get_backend_name() == "sqlite" and self.url.database:
            directory = os.path.dirname(self.url.database)
            if directory and not os.path.exists(directory):
                os.makedirs(directory)

        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        if create_schema:
            # registers the tables on Base.metadata
            from classroom_booking.models import booking, classroom, student  # noqa: F401

            Base.metadata.create_all(bind=self.engine)
        logger.info(f"Connected to {self.url.render_as_string(hide_password=True)}")

    @contextmanager
    def session(self):
        """Provide a database session that is always closed."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def close(self):
        self.engine.dispose()
        logger.info("Connection pool closed")
