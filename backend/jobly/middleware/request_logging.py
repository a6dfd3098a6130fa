"""
request_logging.py
- Purpose: One access log pair per HTTP request, tagged with a request id.
- The id is taken from `x-request-id` when an upstream proxy sets it and is
  echoed back on the response.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from jobly.core.request_context import clear_context, set_context


logger = logging.getLogger("jobly.http")

REQUEST_ID_HEADER = "x-request-id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        set_context(request_id=rid)

        started = time.perf_counter()
        try:
            logger.info(
                "http.request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "query": str(request.url.query),
                    "client": request.client.host if request.client else None,
                },
            )
            response: Response = await call_next(request)
            duration_ms = int((time.perf_counter() - started) * 1000)

            # 5xx is already logged with a traceback by the exception handler
            level = logging.WARNING if response.status_code >= 500 else logging.INFO
            logger.log(
                level,
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )

            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            clear_context()
