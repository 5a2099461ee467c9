# 📄 File: app/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Core building blocks shared by every part of the Plant Identifier app.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the application exception hierarchy.
# 🔗 Dependencies:
# exceptions.py
# 🔄 Connected Modules / Calls From:
# All modules that raise or handle application errors

from .exceptions import (
    PlantCareException,
    NonIdentificationError,
    SchemaReconciliationError,
    InputValidationError,
    TransientServiceError,
    APITimeoutError,
    APIQuotaExceededError,
    APIAuthenticationError,
    StorageError,
)

__all__ = [
    "PlantCareException",
    "NonIdentificationError",
    "SchemaReconciliationError",
    "InputValidationError",
    "TransientServiceError",
    "APITimeoutError",
    "APIQuotaExceededError",
    "APIAuthenticationError",
    "StorageError",
]
