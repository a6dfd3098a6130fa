"""
errors.py
- Purpose: AppError used across services/repos for consistent errors.
- Pattern: raise AppError(...) in service/repo, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status
from jobly.core.error_codes import ErrorCode
from jobly.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return self.message or self.reason

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


# Convenience constructors (keep services terse)
def bad_request(
    message: str | None = None,
    *,
    reason: ErrorReason = ErrorReason.INVALID_INPUT,
    code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    details: dict | None = None,
) -> AppError:
    return AppError(
        code=code,
        reason=reason.value,
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details=details,
        message=message,
    )


def not_found(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.NOT_FOUND,
        reason=ErrorReason.RESOURCE_NOT_FOUND.value,
        status_code=http_status.HTTP_404_NOT_FOUND,
        details=details,
        message=message,
    )


def duplicate(message: str | None = None, *, details: dict | None = None) -> AppError:
    # Duplicates surface as 400, same as any other invalid request.
    return AppError(
        code=ErrorCode.DUPLICATE,
        reason=ErrorReason.ALREADY_EXISTS.value,
        status_code=http_status.HTTP_400_BAD_REQUEST,
        details=details,
        message=message,
    )


def unauthorized(message: str | None = None, *, reason: ErrorReason = ErrorReason.AUTH_REQUIRED) -> AppError:
    return AppError(
        code=ErrorCode.UNAUTHORIZED,
        reason=reason.value,
        status_code=http_status.HTTP_401_UNAUTHORIZED,
        message=message,
    )


def internal_error(message: str | None = None, *, details: dict | None = None) -> AppError:
    return AppError(
        code=ErrorCode.INTERNAL_ERROR,
        reason=ErrorReason.INTERNAL_ERROR.value,
        status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
        details=details,
        message=message,
    )
