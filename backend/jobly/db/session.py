"""
db/session.py
- Purpose: Engine + session factory built from settings.DATABASE_URL.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from jobly.core.config import settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite leaves FK enforcement (and ON DELETE CASCADE) off per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _foreign_keys_on(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Sync engine; every operation is a single short statement
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
