"""
company_validators.py
- Purpose: Validations specific to company inputs and company search.
- Design: Validate at the boundary, keep services clean.
"""

from urllib.parse import urlparse

from jobly.core import ErrorReason
from jobly.core.errors import bad_request


def validate_logo_url(url: str | None) -> str | None:
    """
    Accept only absolute http(s) URLs. The value is stored exactly as given.
    Raises ValueError so pydantic reports it as a field error.
    """
    if url is None:
        return None
    u = url.strip()
    parsed = urlparse(u)

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError("must be an absolute http(s) URL")

    return u


def validate_employee_bounds(min_employees: int | None, max_employees: int | None) -> None:
    if min_employees is None or max_employees is None:
        return
    if min_employees > max_employees:
        raise bad_request(
            "minEmployees must be <= maxEmployees",
            reason=ErrorReason.INVALID_FILTER,
            details={"minEmployees": min_employees, "maxEmployees": max_employees},
        )
