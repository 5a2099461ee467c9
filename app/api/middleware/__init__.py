# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# The helpers that wrap every request: tagging it for the logs and turning errors into
# friendly messages.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware and exception handler registration.
# 🔗 Dependencies:
# FastAPI middleware components, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.main.py, FastAPI application setup

"""
Plant Identifier API Middleware Package

Components:
    - RequestLoggingMiddleware: request correlation, logging and timing
    - register_exception_handlers: error envelope for all failures

Usage:
    from app.api.middleware import RequestLoggingMiddleware, register_exception_handlers

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
"""

from .error_handling import create_error_response, register_exception_handlers
from .logging import RequestLoggingMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "create_error_response",
    "register_exception_handlers",
]
