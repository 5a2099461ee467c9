# 📄 File: app/modules/plant_identification/application/dto.py
# 🧭 Purpose (Layman Explanation):
# The single answer the app hands back after trying to identify a plant: either the plant,
# or one friendly message explaining what went wrong and whether trying again could help.
# 🧪 Purpose (Technical Summary):
# IdentificationOutcome DTO produced by the identification pipeline. Every failure is
# folded into (status, error code, message, retryable).
# 🔗 Dependencies:
# dataclasses, PlantCareException hierarchy, IdentificationResult
# 🔄 Connected Modules / Calls From:
# identification_service.py, session.py, presentation schemas

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from app.shared.core.exceptions import (
    InputValidationError,
    NonIdentificationError,
    PlantCareException,
)

from ..domain.models.identification import IdentificationResult


class OutcomeStatus(str, Enum):
    IDENTIFIED = "identified"
    NOT_IDENTIFIED = "not_identified"
    INVALID_INPUT = "invalid_input"
    ERROR = "error"


@dataclass(frozen=True)
class OutcomeError:
    code: str
    message: str
    retryable: bool


@dataclass(frozen=True)
class IdentificationOutcome:
    status: OutcomeStatus
    sequence: int
    result: Optional[IdentificationResult] = None
    error: Optional[OutcomeError] = None
    superseded: bool = False

    @classmethod
    def identified(cls, result: IdentificationResult, sequence: int) -> "IdentificationOutcome":
        return cls(status=OutcomeStatus.IDENTIFIED, sequence=sequence, result=result)

    @classmethod
    def from_exception(cls, exc: PlantCareException, sequence: int) -> "IdentificationOutcome":
        if isinstance(exc, NonIdentificationError):
            status = OutcomeStatus.NOT_IDENTIFIED
        elif isinstance(exc, InputValidationError):
            status = OutcomeStatus.INVALID_INPUT
        else:
            status = OutcomeStatus.ERROR

        return cls(
            status=status,
            sequence=sequence,
            error=OutcomeError(code=exc.error_code, message=exc.message, retryable=exc.retryable),
        )

    @property
    def is_identified(self) -> bool:
        return self.status is OutcomeStatus.IDENTIFIED

    def as_superseded(self) -> "IdentificationOutcome":
        return replace(self, superseded=True)
