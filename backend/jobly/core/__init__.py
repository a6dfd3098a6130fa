# jobly/core/__init__.py
from jobly.core.errors import AppError
from jobly.core.error_codes import ErrorCode
from jobly.core.error_reasons import ErrorReason

__all__ = ["AppError", "ErrorCode", "ErrorReason"]
