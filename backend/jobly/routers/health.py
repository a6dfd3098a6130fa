from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobly.api.deps import get_db
from jobly.db.client import fetch_one

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/db/health")
def db_health(db: Session = Depends(get_db)):
    fetch_one(db, "SELECT 1 AS ok")
    return {"status": "ok", "db": "connected"}
