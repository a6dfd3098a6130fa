"""
job.py (schemas)
- Purpose: Request/response DTOs for jobs.
- equity travels as a decimal string; numbers are accepted on input.
"""

from decimal import Decimal

from pydantic import Field, field_validator

from jobly.schemas.base import CamelInput, CamelModel


class JobCreate(CamelInput):
    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(CamelInput):
    """Only title/salary/equity; id and companyHandle are fixed."""

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: Decimal | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def reject_null_title(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("may not be null")
        return v


class Job(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company_handle: str


class JobResponse(CamelModel):
    job: Job


class JobListResponse(CamelModel):
    jobs: list[Job]


class JobDeleted(CamelModel):
    deleted: int
