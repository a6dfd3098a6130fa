"""
query.py
- Purpose: Query-string helpers shared by list endpoints.
"""

from collections.abc import Iterable

from fastapi import Request

from jobly.core import ErrorReason
from jobly.core.errors import bad_request


def reject_unknown_params(request: Request, allowed: Iterable[str]) -> None:
    allowed = set(allowed)
    unknown = sorted(set(request.query_params) - allowed)
    if unknown:
        raise bad_request(
            f"Unknown query parameters: {', '.join(unknown)}",
            reason=ErrorReason.INVALID_FILTER,
            details={"allowed": sorted(allowed)},
        )
