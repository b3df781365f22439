"""Request logging middleware"""

import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("api.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every request with method, path, status code and duration

    Headers and bodies are never logged, they carry credentials.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.monotonic() - start) * 1000, 2)
            tenant_id = getattr(request.state, "tenant_id", "anonymous")
            logger.info(
                f"{request.method} {request.url.path} -> {status_code} "
                f"in {duration_ms}ms (tenant={tenant_id})"
            )
