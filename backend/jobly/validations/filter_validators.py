"""
filter_validators.py
- Purpose: Reject search filters a resource does not recognize.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from jobly.core import ErrorReason
from jobly.core.errors import bad_request
from jobly.db.sql import FilterSpec


def clean_filters(filters: Mapping[str, Any] | None, specs: Iterable[FilterSpec]) -> dict[str, Any]:
    """Drop None values; raise 400 for names outside `specs`."""
    known = {spec.name for spec in specs}
    present = {k: v for k, v in (filters or {}).items() if v is not None}

    unknown = sorted(set(present) - known)
    if unknown:
        raise bad_request(
            f"Unknown filters: {', '.join(unknown)}",
            reason=ErrorReason.INVALID_FILTER,
            details={"allowed": sorted(known)},
        )
    return present
