from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from jobly.db.session import SessionLocal
from jobly.services.company_service import CompanyService
from jobly.services.job_service import JobService

def get_db() -> Generator[Session, None, None]:
    """
    Yields a DB session per request.
    Ensures the session is closed even on exceptions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_company_service(db: Session = Depends(get_db)) -> CompanyService:
    return CompanyService(db=db)


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    return JobService(db=db)
