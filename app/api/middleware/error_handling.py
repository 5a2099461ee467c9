# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches errors anywhere in the app and turns them into one consistent, friendly error
# message format, including whether trying again might help.
# 🧪 Purpose (Technical Summary):
# Exception handlers rendering PlantCareException, request validation errors and unexpected
# exceptions into the {"error": {...}} envelope with request correlation.
# 🔗 Dependencies:
# FastAPI, app.shared.core.exceptions, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.main.py (handler registration)

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantCareException
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


def create_error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    retryable: bool = False,
) -> JSONResponse:
    """
    Create standardized error response

    Args:
        request: HTTP request
        status_code: HTTP status code
        error_code: Machine-readable error code
        message: User-facing message
        details: Additional error details
        retryable: Whether the same request may succeed later

    Returns:
        JSON error response
    """
    request_id = getattr(request.state, "request_id", None)
    response = JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": error_code,
                "message": message,
                "details": details or {},
                "retryable": retryable,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "request_id": request_id,
                "path": str(request.url.path),
            }
        },
    )
    response.headers["X-Error-Code"] = error_code
    return response


async def plant_care_exception_handler(request: Request, exc: PlantCareException) -> JSONResponse:
    """Handle application exceptions."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed with application error",
        error_code=exc.error_code,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return create_error_response(
        request,
        status_code=exc.status_code,
        error_code=exc.error_code,
        message=exc.message,
        details=exc.details,
        retryable=exc.retryable,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body/query/header validation failures."""
    errors = [
        {
            "loc": list(error.get("loc", ())),
            "msg": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    return create_error_response(
        request,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        error_code="REQUEST_VALIDATION_ERROR",
        message="Request validation failed. Please check your input data.",
        details={"validation_errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "Unhandled exception",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
        exc_info=True,
    )

    settings = getattr(request.app.state, "settings", None) or get_settings()
    details: Dict[str, Any] = {}
    # Add debug information in development
    if settings.DEBUG and not settings.is_production:
        details = {
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__),
        }

    return create_error_response(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code="INTERNAL_SERVER_ERROR",
        message="An internal server error occurred. Please try again later.",
        details=details,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlantCareException, plant_care_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
