# 📄 File: app/modules/plant_identification/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the request and response formats used by the plant identification endpoints.
# 🧪 Purpose (Technical Summary):
# Schema package exports for identification and care-guidance endpoints.
# 🔗 Dependencies:
# identification_schemas.py
# 🔄 Connected Modules / Calls From:
# app.modules.plant_identification.presentation.api.v1

from .identification_schemas import (
    CareGuidanceRequest,
    CareGuidanceResponse,
    CurrentIdentificationResponse,
    DataUriRequest,
    IdentificationResponse,
    OutcomeErrorResponse,
)

__all__ = [
    "CareGuidanceRequest",
    "CareGuidanceResponse",
    "CurrentIdentificationResponse",
    "DataUriRequest",
    "IdentificationResponse",
    "OutcomeErrorResponse",
]
