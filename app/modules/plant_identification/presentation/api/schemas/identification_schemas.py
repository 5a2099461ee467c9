# 📄 File: app/modules/plant_identification/presentation/api/schemas/identification_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the exact shape of what the app sends in (a photo or a plant name) and what it
# gets back (the identified plant, or a message saying what went wrong).
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for identification and care-guidance endpoints, using
# camelCase aliases on the wire.
# 🔗 Dependencies:
# pydantic, plant_identification.application.dto
# 🔄 Connected Modules / Calls From:
# app.modules.plant_identification.presentation.api.v1.identification

"""
Plant Identification API Schemas

Request Schemas:
- DataUriRequest: image submitted as a base64 data URI (camera capture)
- CareGuidanceRequest: plant name for weed classification and care instructions

Response Schemas:
- IdentificationResponse: one identification outcome
- CurrentIdentificationResponse: the session's current state
- CareGuidanceResponse: weed flag and care instructions
"""

from typing import Any, Dict, Optional

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_identification.application.dto import IdentificationOutcome, OutcomeStatus
from app.modules.plant_identification.application.session import IdentificationSession
from app.modules.plant_identification.domain.models.identification import CareGuidance

OUTCOME_HTTP_STATUS = {
    OutcomeStatus.IDENTIFIED: status.HTTP_200_OK,
    OutcomeStatus.NOT_IDENTIFIED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    OutcomeStatus.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    OutcomeStatus.ERROR: status.HTTP_502_BAD_GATEWAY,
}


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class DataUriRequest(BaseModel):
    """Image captured on the client and sent as a data URI."""

    model_config = ConfigDict(populate_by_name=True)

    image_data_uri: str = Field(
        ...,
        alias="imageDataUri",
        description="Base64 image data URI (data:image/<type>;base64,<data>)",
        examples=["data:image/jpeg;base64,/9j/4AAQSkZJRg..."],
    )


class CareGuidanceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plant_name: str = Field(
        ...,
        alias="plantName",
        min_length=1,
        max_length=200,
        description="Common or scientific plant name",
        examples=["Dandelion"],
    )


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class OutcomeErrorResponse(BaseModel):
    code: str
    message: str
    retryable: bool


class IdentificationResponse(BaseModel):
    """
    Outcome of one identification attempt.

    ``result`` holds the identified plant (camelCase, absent fields omitted)
    when ``status`` is ``identified``; otherwise ``error`` explains the
    failure and whether retrying the same image can help.
    """

    model_config = ConfigDict(populate_by_name=True)

    status: OutcomeStatus
    sequence: int
    result: Optional[Dict[str, Any]] = None
    error: Optional[OutcomeErrorResponse] = None
    superseded: bool = False

    @classmethod
    def from_outcome(cls, outcome: IdentificationOutcome) -> "IdentificationResponse":
        return cls(
            status=outcome.status,
            sequence=outcome.sequence,
            result=outcome.result.to_document() if outcome.result is not None else None,
            error=(
                OutcomeErrorResponse(
                    code=outcome.error.code,
                    message=outcome.error.message,
                    retryable=outcome.error.retryable,
                )
                if outcome.error is not None
                else None
            ),
            superseded=outcome.superseded,
        )

    @property
    def http_status(self) -> int:
        return OUTCOME_HTTP_STATUS[self.status]


class CurrentIdentificationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_image: bool = Field(..., alias="hasImage")
    in_flight: bool = Field(..., alias="inFlight")
    sequence: int
    outcome: Optional[IdentificationResponse] = None

    @classmethod
    def from_session(cls, session: IdentificationSession) -> "CurrentIdentificationResponse":
        return cls(
            has_image=session.last_image is not None,
            in_flight=session.in_flight,
            sequence=session.sequence,
            outcome=IdentificationResponse.from_outcome(session.current) if session.current else None,
        )


class CareGuidanceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plant_name: str = Field(..., alias="plantName")
    is_weed: bool = Field(..., alias="isWeed")
    care_instructions: str = Field(..., alias="careInstructions")

    @classmethod
    def from_guidance(cls, plant_name: str, guidance: CareGuidance) -> "CareGuidanceResponse":
        return cls(
            plant_name=plant_name,
            is_weed=guidance.is_weed,
            care_instructions=guidance.care_instructions,
        )
