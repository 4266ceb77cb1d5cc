# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the reminder service: what was asked for, how long
# it took, and whether anything went wrong.
# 🧪 Purpose (Technical Summary):
# Request logging middleware assigning a request id (header or generated), binding it to the
# logging context variables for the duration of the request, and logging timing and status.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration)

import logging
import time
import uuid
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import log_context

from . import should_exclude_path

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Every log line emitted while a request is handled carries its request id,
    and the id is echoed back in the X-Request-ID response header.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        if should_exclude_path(request.url.path):
            return await call_next(request)

        request_id = self._get_or_create_request_id(request)
        start_time = time.perf_counter()

        with log_context(request_id=request_id):
            logger.info(f"HTTP Request: {request.method} {request.url.path}")
            try:
                response = await call_next(request)
            except Exception as e:
                elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
                logger.error(
                    f"HTTP Error: {request.method} {request.url.path} -> "
                    f"{type(e).__name__}: {e} ({elapsed_ms}ms)"
                )
                raise

            elapsed = time.perf_counter() - start_time
            self._log_response(request, response.status_code, elapsed)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    def _get_or_create_request_id(self, request: Request) -> str:
        request_id = getattr(request.state, "request_id", None)
        if not request_id:
            request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
            request.state.request_id = request_id
        return request_id

    def _log_response(self, request: Request, status_code: int, elapsed: float) -> None:
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400 or elapsed > self.slow_request_threshold:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            f"HTTP Response: {request.method} {request.url.path} -> {status_code} "
            f"({round(elapsed * 1000, 2)}ms)",
        )


def get_request_id(request: Request) -> Optional[str]:
    """Request id assigned by RequestLoggingMiddleware, if any."""
    return getattr(request.state, "request_id", None)
