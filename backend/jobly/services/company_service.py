"""
company_service.py
- Purpose: Company operations (create, search, get, partial update, delete).
- Owns: existence/duplicate checks, filter validation, SQL fragment assembly.
- Raises AppError; the API layer turns it into a response.
"""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.errors import bad_request, duplicate, not_found
from jobly.db.errors import Violation, classify_integrity_error
from jobly.db.sql import sql_for_filters, sql_for_partial_update
from jobly.repos.company.columns import (
    COMPANY_FIELD_TO_COLUMN,
    COMPANY_FILTERS,
    COMPANY_MUTABLE_FIELDS,
)
from jobly.repos.company.read import CompanyReadRepo
from jobly.repos.company.write import CompanyWriteRepo
from jobly.validations.company_validators import validate_employee_bounds
from jobly.validations.filter_validators import clean_filters

logger = logging.getLogger("jobly.company_service")

REQUIRED_FIELDS = ("handle", "name", "description")


def _rejected(exc: IntegrityError):
    violation = classify_integrity_error(exc)
    return bad_request(
        f"Company rejected by database constraint ({violation.value})",
        details={"violation": violation.value},
    )


class CompanyService:
    def __init__(self, db: Session):
        self.db = db

        self.company_read = CompanyReadRepo(db)
        self.company_write = CompanyWriteRepo(db)

    def create(self, data: Mapping[str, Any]) -> dict:
        """
        Create a company from {handle, name, description, numEmployees?, logoUrl?}.
        Returns the stored row. Duplicate handle (or name) -> 400.
        """
        missing = [f for f in REQUIRED_FIELDS if data.get(f) is None]
        if missing:
            raise bad_request(f"Missing fields: {', '.join(missing)}")

        handle = data["handle"]
        if self.company_read.exists(handle):
            raise duplicate(f"Duplicate company: {handle}")

        try:
            company = self.company_write.insert(
                handle=handle,
                name=data["name"],
                description=data["description"],
                num_employees=data.get("numEmployees"),
                logo_url=data.get("logoUrl"),
            )
        except IntegrityError as e:
            self.db.rollback()
            if classify_integrity_error(e) is Violation.UNIQUE:
                # Lost a race on the handle, or the name is taken
                raise duplicate(f"Duplicate company: {handle}") from e
            raise _rejected(e) from e

        logger.info("company.created", extra={"handle": handle})
        return company

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[dict]:
        """
        Companies ordered by name, optionally filtered by
        {name, minEmployees, maxEmployees}.
        """
        filters = clean_filters(filters, COMPANY_FILTERS)
        validate_employee_bounds(filters.get("minEmployees"), filters.get("maxEmployees"))

        where = sql_for_filters(filters, COMPANY_FILTERS)
        return self.company_read.find_all(where)

    def get(self, handle: str) -> dict:
        company = self.company_read.get_by_handle(handle)
        if company is None:
            raise not_found(f"No company: {handle}")
        return company

    def update(self, handle: str, data: Mapping[str, Any]) -> dict:
        """
        Partial update: only the fields present in `data` change.
        Allowed: {name, description, numEmployees, logoUrl}.
        """
        set_cols = sql_for_partial_update(
            data, COMPANY_FIELD_TO_COLUMN, allowed=COMPANY_MUTABLE_FIELDS
        )
        try:
            company = self.company_write.update(handle, set_cols)
        except IntegrityError as e:
            self.db.rollback()
            if classify_integrity_error(e) is Violation.UNIQUE:
                raise duplicate(f"Duplicate company name: {data.get('name')}") from e
            raise _rejected(e) from e
        if company is None:
            raise not_found(f"No company: {handle}")

        logger.info("company.updated", extra={"handle": handle, "fields": list(data)})
        return company

    def remove(self, handle: str) -> None:
        if self.company_write.delete(handle) is None:
            raise not_found(f"No company: {handle}")
        logger.info("company.deleted", extra={"handle": handle})
