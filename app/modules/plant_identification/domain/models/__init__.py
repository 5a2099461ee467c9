from .image import ImageArtifact
from .identification import (
    CARE_INSTRUCTIONS_PLACEHOLDER,
    HEALTH_STATUS_PLACEHOLDER,
    PROPOSED_ACTIONS_PLACEHOLDER,
    Accepted,
    CareGuidance,
    IdentificationResult,
    ReconciliationOutcome,
    Rejected,
)

__all__ = [
    "CARE_INSTRUCTIONS_PLACEHOLDER",
    "HEALTH_STATUS_PLACEHOLDER",
    "PROPOSED_ACTIONS_PLACEHOLDER",
    "ImageArtifact",
    "Accepted",
    "CareGuidance",
    "IdentificationResult",
    "ReconciliationOutcome",
    "Rejected",
]
