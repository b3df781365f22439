"""API error translation

Maps use case Error categories to HTTP statuses and renders every failure
as {"error": {"code", "message", "details"?}}.
"""

import logging
from typing import Any, Dict, Optional
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.use_cases.errors import ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.UNAUTHORIZED.value: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.VALIDATION_ERROR.value: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONFLICT.value: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND.value: status.HTTP_404_NOT_FOUND,
    ErrorCode.INTERNAL_ERROR.value: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

GENERIC_INTERNAL_MESSAGE = "Internal server error"


class ClientError(HTTPException):
    """HTTP error raised by routes for a failed use case Result"""

    def __init__(self, error: Error, status_code: Optional[int] = None):
        super().__init__(
            status_code=status_code or STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
            detail=error.message,
        )
        self.error = error


def error_body(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"code": code, "message": message}
    if details:
        body["details"] = details
    return {"error": body}


def _expose_diagnostics(request: Request) -> bool:
    config = getattr(request.app.state, "config", None)
    return getattr(config, "ENVIRONMENT", "production") != "production"


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    error = exc.error
    if error.code == ErrorCode.INTERNAL_ERROR.value:
        logger.error(f"{request.method} {request.url.path} failed: {error.message} ({error.reason})")
        details = {"diagnostic": error.reason} if error.reason and _expose_diagnostics(request) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(error.code, error.message, details),
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error.code, error.message, dict(error.details) or None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if field:
        message = f"{field}: {message}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(ErrorCode.VALIDATION_ERROR.value, message, {"field": field} if field else None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    details = {"diagnostic": str(exc)} if _expose_diagnostics(request) else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(ErrorCode.INTERNAL_ERROR.value, GENERIC_INTERNAL_MESSAGE, details),
    )


def error_example(code: str, message: str, description: str) -> Dict[str, Any]:
    """OpenAPI response entry for an error envelope"""
    return {
        "description": description,
        "content": {"application/json": {"example": error_body(code, message)}},
    }
