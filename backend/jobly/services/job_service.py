"""
job_service.py
- Purpose: Job operations, keyed by the generated integer id.
- companyHandle must name an existing company at creation and never changes.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core import ErrorCode, ErrorReason
from jobly.core.errors import bad_request, not_found
from jobly.db.errors import Violation, classify_integrity_error
from jobly.db.sql import sql_for_filters, sql_for_partial_update
from jobly.repos.company.read import CompanyReadRepo
from jobly.repos.job.columns import (
    JOB_FIELD_TO_COLUMN,
    JOB_FILTERS,
    JOB_MUTABLE_FIELDS,
    equity_to_str,
)
from jobly.repos.job.read import JobReadRepo
from jobly.repos.job.write import JobWriteRepo
from jobly.validations.filter_validators import clean_filters

logger = logging.getLogger("jobly.job_service")


def _unknown_company(handle: str):
    return bad_request(
        f"No company: {handle}",
        reason=ErrorReason.UNKNOWN_REFERENCE,
        code=ErrorCode.VALIDATION_ERROR,
        details={"companyHandle": handle},
    )


def _rejected(exc: IntegrityError):
    violation = classify_integrity_error(exc)
    return bad_request(
        f"Job rejected by database constraint ({violation.value})",
        details={"violation": violation.value},
    )


class JobService:
    def __init__(self, db: Session):
        self.db = db

        self.company_read = CompanyReadRepo(db)
        self.job_read = JobReadRepo(db)
        self.job_write = JobWriteRepo(db)

    def create(self, data: Mapping[str, Any]) -> dict:
        """
        Create a job from {title, salary?, equity?, companyHandle}.
        Returns {id, title, salary, equity, companyHandle}.
        """
        missing = [f for f in ("title", "companyHandle") if data.get(f) is None]
        if missing:
            raise bad_request(f"Missing fields: {', '.join(missing)}")

        company_handle = data["companyHandle"]
        if not self.company_read.exists(company_handle):
            raise _unknown_company(company_handle)

        try:
            job = self.job_write.insert(
                title=data["title"],
                salary=data.get("salary"),
                equity=data.get("equity"),
                company_handle=company_handle,
            )
        except IntegrityError as e:
            self.db.rollback()
            if classify_integrity_error(e) is Violation.FOREIGN_KEY:
                # Company deleted between the check and the insert
                raise _unknown_company(company_handle) from e
            raise _rejected(e) from e

        logger.info("job.created", extra={"job_id": job["id"], "company_handle": company_handle})
        return job

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[dict]:
        """Jobs ordered by title, optionally filtered by {title, minSalary, hasEquity}."""
        filters = clean_filters(filters, JOB_FILTERS)
        where = sql_for_filters(filters, JOB_FILTERS)
        return self.job_read.find_all(where)

    def get(self, job_id: int) -> dict:
        job = self.job_read.get_by_id(job_id)
        if job is None:
            raise not_found(f"No job: {job_id}")
        return job

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict:
        """Partial update over {title, salary, equity}."""
        data = dict(data)
        if data.get("equity") is not None:
            data["equity"] = equity_to_str(data["equity"])

        set_cols = sql_for_partial_update(data, JOB_FIELD_TO_COLUMN, allowed=JOB_MUTABLE_FIELDS)
        try:
            job = self.job_write.update(job_id, set_cols)
        except IntegrityError as e:
            self.db.rollback()
            raise _rejected(e) from e
        if job is None:
            raise not_found(f"No job: {job_id}")

        logger.info("job.updated", extra={"job_id": job_id, "fields": list(data)})
        return job

    def remove(self, job_id: int) -> None:
        if self.job_write.delete(job_id) is None:
            raise not_found(f"No job: {job_id}")
        logger.info("job.deleted", extra={"job_id": job_id})
