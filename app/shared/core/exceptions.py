# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types our Plant Identifier app uses to say
# what went wrong (a blurry photo, a busy AI service, a file that isn't an image)
# in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details and a retryability flag rendered by the API exception handlers.
# 🔗 Dependencies:
# typing, FastAPI HTTP status constants
# 🔄 Connected Modules / Calls From:
# API client, Gemini analyzer, identification service, favourites storage, app.main

from typing import Any, Dict, Optional
from fastapi import status


class PlantCareException(Exception):
    """
    Base exception class for the Plant Identifier application.
    All custom exceptions should inherit from this class.
    """

    retryable: bool = False

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# IDENTIFICATION EXCEPTIONS
# =============================================================================

class NonIdentificationError(PlantCareException):
    """
    The model answered, but the subject could not be identified.
    The user has to supply a different image.
    """

    def __init__(
        self,
        message: str = (
            "Could not identify the plant. It might not be a plant or the image "
            "is unclear. Please try a different image."
        ),
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if reason:
            details["reason"] = reason

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="NON_IDENTIFICATION"
        )


class SchemaReconciliationError(NonIdentificationError):
    """
    The model answered with a named plant, but the answer could not be
    repaired into a valid result. Displayed exactly like a non-identification.
    """

    def __init__(self, errors: Optional[list] = None):
        super().__init__(
            reason="schema_reconciliation_failed",
            details={"validation_errors": errors or []},
        )


# =============================================================================
# VALIDATION EXCEPTIONS
# =============================================================================

class InputValidationError(PlantCareException):
    """
    Exception raised when the submitted image cannot be used.
    Used for non-image uploads, unreadable payloads and missing images.
    """

    def __init__(
        self,
        message: str = "Please upload a valid image file (e.g., JPG, PNG, WEBP).",
        field: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="INPUT_VALIDATION_ERROR"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class TransientServiceError(PlantCareException):
    """
    Exception raised when the external model call fails.
    Covers network faults, quota exhaustion and malformed service responses.
    The same image can be sent again.
    """

    retryable = True

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        service_response: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "TRANSIENT_SERVICE_ERROR"
    ):
        if not details:
            details = {}

        if service:
            details["service"] = service
        if service_response:
            details["service_response"] = service_response
        if retry_after:
            details["retry_after"] = retry_after

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code=error_code
        )


class APITimeoutError(TransientServiceError):
    """External API request timed out."""

    def __init__(self, api_name: str, timeout_seconds: Optional[int] = None):
        super().__init__(
            message=f"Request to {api_name} timed out",
            service=api_name,
            details={"timeout_seconds": timeout_seconds} if timeout_seconds else None,
            error_code="API_TIMEOUT"
        )


class APIQuotaExceededError(TransientServiceError):
    """External API quota or rate limit exhausted."""

    def __init__(self, api_name: str, retry_after: Optional[int] = None):
        super().__init__(
            message=f"API quota exceeded for {api_name}",
            service=api_name,
            retry_after=retry_after,
            error_code="API_QUOTA_EXCEEDED"
        )


class APIAuthenticationError(TransientServiceError):
    """External API rejected our credentials."""

    def __init__(self, api_name: str):
        super().__init__(
            message=f"Authentication failed for {api_name}",
            service=api_name,
            error_code="API_AUTHENTICATION_FAILED"
        )


# =============================================================================
# STORAGE EXCEPTIONS
# =============================================================================

class StorageError(PlantCareException):
    """
    Exception raised when the favourites slot cannot be written.
    """

    def __init__(
        self,
        message: str = "Storage error",
        operation: Optional[str] = None,
        storage_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if storage_key:
            details["storage_key"] = storage_key

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="STORAGE_ERROR"
        )
