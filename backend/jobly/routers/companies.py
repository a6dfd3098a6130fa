"""
companies.py
- Purpose: HTTP routes for companies.
- Design: Keep router thin. Reads are public; writes need an admin token.
"""

from fastapi import APIRouter, Depends, Query, Request, status

from jobly.api.deps import get_company_service
from jobly.api.query import reject_unknown_params
from jobly.auth.deps import require_admin_token
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDeleted,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["Companies"])


def company_filters(
    request: Request,
    name: str | None = Query(None, min_length=1),
    min_employees: int | None = Query(None, alias="minEmployees", ge=0),
    max_employees: int | None = Query(None, alias="maxEmployees", ge=0),
) -> dict:
    reject_unknown_params(request, {"name", "minEmployees", "maxEmployees"})
    return {"name": name, "minEmployees": min_employees, "maxEmployees": max_employees}


@router.post(
    "",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
def create_company(body: CompanyCreate, svc: CompanyService = Depends(get_company_service)):
    return {"company": svc.create(body.to_fields())}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    filters: dict = Depends(company_filters),
    svc: CompanyService = Depends(get_company_service),
):
    return {"companies": svc.find_all(filters)}


@router.get("/{handle}", response_model=CompanyResponse)
def get_company(handle: str, svc: CompanyService = Depends(get_company_service)):
    return {"company": svc.get(handle)}


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin_token)],
)
def update_company(
    handle: str,
    body: CompanyUpdate,
    svc: CompanyService = Depends(get_company_service),
):
    return {"company": svc.update(handle, body.to_fields(partial=True))}


@router.delete(
    "/{handle}",
    response_model=CompanyDeleted,
    dependencies=[Depends(require_admin_token)],
)
def delete_company(handle: str, svc: CompanyService = Depends(get_company_service)):
    svc.remove(handle)
    return {"deleted": handle}
