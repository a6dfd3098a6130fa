"""
company.py (schemas)
- Purpose: Request/response DTOs for companies.
"""

from pydantic import Field, field_validator

from jobly.schemas.base import CamelInput, CamelModel
from jobly.validations.company_validators import validate_logo_url


class CompanyCreate(CamelInput):
    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, v: str | None) -> str | None:
        return validate_logo_url(v)


class CompanyUpdate(CamelInput):
    """Any subset of the mutable fields. `handle` is not one of them."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, v: str | None) -> str | None:
        return validate_logo_url(v)

    @field_validator("name", "description")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("may not be null")
        return v


class Company(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyResponse(CamelModel):
    company: Company


class CompanyListResponse(CamelModel):
    companies: list[Company]


class CompanyDeleted(CamelModel):
    deleted: str
