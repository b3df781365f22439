"""Error categories shared by all use cases

Use cases report expected failures as libs.result.Error with one of these
codes. The API layer maps each code to exactly one HTTP status.
"""

from enum import Enum
from typing import Any, Optional
from libs.result import Error


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def unauthorized(reason: Optional[str] = None, message: str = "Unauthorized") -> Error:
    # Callers never learn which check failed, the reason stays internal
    return Error(code=ErrorCode.UNAUTHORIZED.value, message=message, reason=reason)


def validation_error(message: str, **details: Any) -> Error:
    return Error(code=ErrorCode.VALIDATION_ERROR.value, message=message, details=details)


def item_error(index: int, field: str, message: str) -> Error:
    """Validation error for a line item, index is 1-based"""
    return validation_error(f"Item {index}: {message}", item=index, field=field)


def conflict(message: str, reason: Optional[str] = None) -> Error:
    return Error(code=ErrorCode.CONFLICT.value, message=message, reason=reason)


def not_found(resource: str) -> Error:
    return Error(code=ErrorCode.NOT_FOUND.value, message=f"{resource} not found")


def internal_error(message: str, exc: Optional[BaseException] = None) -> Error:
    return Error(
        code=ErrorCode.INTERNAL_ERROR.value,
        message=message,
        reason=str(exc) if exc is not None else None,
    )
