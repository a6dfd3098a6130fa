"""
init_db.py
- Purpose: Create the companies/jobs tables from the SQLAlchemy metadata.
- Usage: python -m jobly.db.init_db
"""

import logging

from sqlalchemy.engine import Engine

from jobly.models import Base

logger = logging.getLogger("jobly.db.init")


def init_db(bind: Engine | None = None) -> None:
    """Create all tables that do not exist yet. Existing tables are left alone."""
    if bind is None:
        from jobly.db.session import engine as bind

    Base.metadata.create_all(bind=bind)
    logger.info("db.initialized", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    from jobly.core.logging_config import configure_logging

    configure_logging()
    init_db()
