from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi import Request
from typing import Iterator
import logging

from .models import Base

logger = logging.getLogger("resume_service.database")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores FOREIGN KEY and ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine and session factory owned by one application instance."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.is_sqlite = url.startswith("sqlite")
        engine_kwargs = {"echo": echo}
        if self.is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(url, **engine_kwargs)
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


# Dependency for FastAPI
def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
