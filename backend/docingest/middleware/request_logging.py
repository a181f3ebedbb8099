from __future__ import annotations

import time
import uuid
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from docingest.core.request_context import set_context, clear_context


logger = logging.getLogger("docingest.http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags every log line of a request with request_id (and document_id when the caller sends one)."""

    async def dispatch(self, request: Request, call_next):
        # Accept upstream ids if present, else create a request id
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        set_context(request_id=rid, document_id=request.headers.get("x-document-id"))

        t0 = time.perf_counter()
        try:
            logger.info(
                "http.request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "content_length": request.headers.get("content-length"),
                },
            )
            response: Response = await call_next(request)

            logger.info(
                "http.response",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": int((time.perf_counter() - t0) * 1000),
                },
            )

            response.headers["x-request-id"] = rid
            return response
        finally:
            clear_context()
