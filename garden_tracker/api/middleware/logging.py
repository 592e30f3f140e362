# 📄 File: garden_tracker/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request to the garden tracker: what was asked for,
# how long it took and whether it worked.
# 🧪 Purpose (Technical Summary):
# Request logging middleware. Assigns or propagates X-Request-ID, binds it to
# the logging context for the duration of the request, and logs timing through
# the performance logger. Health probes are not logged.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, garden_tracker.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# garden_tracker.main (middleware registration)

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from garden_tracker.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

EXCLUDED_PATHS = ("/health", "/api/v1/health")

# Requests slower than this are logged as warnings (seconds)
SLOW_REQUEST_THRESHOLD = 2.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging with correlation ids.

    The request id is taken from the X-Request-ID header when the client
    sends one, stored on ``request.state.request_id`` for the exception
    handlers, and echoed back on the response.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    @staticmethod
    def _is_excluded(path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in EXCLUDED_PATHS)

    @staticmethod
    def _get_or_create_request_id(request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)

        if self._is_excluded(request.url.path):
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        start_time = time.perf_counter()
        with log_context(request_id=request_id):
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"Unhandled error during {request.method} {request.url.path}: {e}",
                    exc_info=True,
                    request_id=request_id,
                )
                raise

            duration = time.perf_counter() - start_time
            logger.performance.log_request(
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=duration * 1000,
                extra={"request_id": request_id},
            )
            if duration > SLOW_REQUEST_THRESHOLD:
                logger.warning(
                    f"Slow request: {request.method} {request.url.path} took {duration:.2f}s",
                    request_id=request_id,
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
