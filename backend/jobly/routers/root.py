"""
routers/root.py
- Purpose: Service index. Names the API and the resource collections it serves.
"""

from fastapi import APIRouter

from jobly.core.config import settings

router = APIRouter(prefix="/api", tags=["Root"])

RESOURCES = {
    "companies": "/companies",
    "jobs": "/jobs",
    "token": "/auth/token",
}


@router.get("/")
def root():
    return {
        "name": settings.PROJECT_NAME,
        "resources": RESOURCES,
        "docs": "/docs",
    }
