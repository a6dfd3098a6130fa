"""
jobs.py
- Purpose: HTTP routes for jobs.
"""

from fastapi import APIRouter, Depends, Query, Request, status

from jobly.api.deps import get_job_service
from jobly.api.query import reject_unknown_params
from jobly.auth.deps import require_admin_token
from jobly.schemas.job import JobCreate, JobDeleted, JobListResponse, JobResponse, JobUpdate
from jobly.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def job_filters(
    request: Request,
    title: str | None = Query(None, min_length=1),
    min_salary: int | None = Query(None, alias="minSalary", ge=0),
    has_equity: bool | None = Query(None, alias="hasEquity"),
) -> dict:
    reject_unknown_params(request, {"title", "minSalary", "hasEquity"})
    return {"title": title, "minSalary": min_salary, "hasEquity": has_equity}


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
def create_job(body: JobCreate, svc: JobService = Depends(get_job_service)):
    return {"job": svc.create(body.to_fields())}


@router.get("", response_model=JobListResponse)
def list_jobs(filters: dict = Depends(job_filters), svc: JobService = Depends(get_job_service)):
    return {"jobs": svc.find_all(filters)}


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, svc: JobService = Depends(get_job_service)):
    return {"job": svc.get(job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin_token)],
)
def update_job(job_id: int, body: JobUpdate, svc: JobService = Depends(get_job_service)):
    return {"job": svc.update(job_id, body.to_fields(partial=True))}


@router.delete(
    "/{job_id}",
    response_model=JobDeleted,
    dependencies=[Depends(require_admin_token)],
)
def delete_job(job_id: int, svc: JobService = Depends(get_job_service)):
    svc.remove(job_id)
    return {"deleted": job_id}
