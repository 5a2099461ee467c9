# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the Plant Identifier: who asked, what for, how long
# it took, and tags every log line from that request with the same ID.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: request/client correlation via contextvars (log_context),
# structured request/response log lines, timing and correlation headers.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.core.dependencies import DEFAULT_CLIENT_ID
from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
CLIENT_ID_HEADER = "X-Client-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"

EXCLUDED_PATHS = {
    "/api/v1/health",
    "/api/v1/health/live",
    "/api/v1/health/ready",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Features:
    - Request ID taken from X-Request-ID or generated
    - Client ID bound to every log line of the request
    - Request/response timing
    - Health probe paths are not logged
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 5.0):
        super().__init__(app)
        # Model calls are slow by nature; warn only on outliers
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        client_id = request.headers.get(CLIENT_ID_HEADER) or DEFAULT_CLIENT_ID
        request.state.request_id = request_id

        should_log = request.url.path not in EXCLUDED_PATHS
        start_time = time.time()

        with log_context(request_id=request_id, client_id=client_id):
            if should_log:
                logger.info(
                    "Request started",
                    method=request.method,
                    path=request.url.path,
                    client_host=request.client.host if request.client else None,
                )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                    processing_time=round(time.time() - start_time, 3),
                )
                raise

            processing_time = time.time() - start_time
            if should_log:
                log = logger.warning if processing_time > self.slow_request_threshold else logger.info
                log(
                    "Request completed",
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    processing_time=round(processing_time, 3),
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = f"{processing_time:.3f}s"
        return response
