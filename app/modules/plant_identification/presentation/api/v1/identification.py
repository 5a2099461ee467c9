# 📄 File: app/modules/plant_identification/presentation/api/v1/identification.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints the app calls to identify a plant from a photo, try again, check or
# clear the current result, and ask how to care for a plant by name.
# 🧪 Purpose (Technical Summary):
# FastAPI identification endpoints. Outcomes map to HTTP 200 (identified), 422 (not
# identified / invalid input) and 502 (retryable service failure).
# 🔗 Dependencies:
# FastAPI router, UploadFile, identification schemas, presentation dependencies
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (router inclusion), web and mobile clients

"""
Plant Identification API Endpoints

Endpoints:
- POST /identify: Identify a plant from an uploaded image file
- POST /identify/data-uri: Identify a plant from a captured image data URI
- POST /identify/retry: Re-send the last image
- GET /identify/current: Current session state
- DELETE /identify/current: Clear the image and result
- POST /care-guidance: Weed classification and care instructions for a plant name
"""

from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from fastapi.responses import JSONResponse

from app.shared.utils.logging import get_logger

from ....application.identification_service import PlantIdentificationService
from ....application.session import IdentificationSession
from ...dependencies import get_identification_service, get_identification_session
from ..schemas.identification_schemas import (
    CareGuidanceRequest,
    CareGuidanceResponse,
    CurrentIdentificationResponse,
    DataUriRequest,
    IdentificationResponse,
)

logger = get_logger(__name__)

identification_router = APIRouter()

OUTCOME_RESPONSES = {
    200: {"model": IdentificationResponse, "description": "Plant identified"},
    422: {"model": IdentificationResponse, "description": "Not identified or invalid image"},
    502: {"model": IdentificationResponse, "description": "Analysis service failed; retry is possible"},
}


def _outcome_response(response: IdentificationResponse) -> JSONResponse:
    return JSONResponse(
        status_code=response.http_status,
        content=response.model_dump(mode="json", by_alias=True),
    )


@identification_router.post(
    "/identify",
    response_model=IdentificationResponse,
    summary="Identify a plant from an image file",
    responses=OUTCOME_RESPONSES,
)
async def identify_from_upload(
    image: UploadFile = File(..., description="Plant photo (JPG, PNG, WEBP...)"),
    session: IdentificationSession = Depends(get_identification_session),
    service: PlantIdentificationService = Depends(get_identification_service),
) -> JSONResponse:
    # One byte past the limit is enough for the size check to reject it.
    content = await image.read(service.max_image_size + 1)
    outcome = await service.identify_upload(session, content, image.content_type)
    return _outcome_response(IdentificationResponse.from_outcome(outcome))


@identification_router.post(
    "/identify/data-uri",
    response_model=IdentificationResponse,
    summary="Identify a plant from a captured image",
    responses=OUTCOME_RESPONSES,
)
async def identify_from_data_uri(
    request: DataUriRequest,
    session: IdentificationSession = Depends(get_identification_session),
    service: PlantIdentificationService = Depends(get_identification_service),
) -> JSONResponse:
    outcome = await service.identify(session, request.image_data_uri)
    return _outcome_response(IdentificationResponse.from_outcome(outcome))


@identification_router.post(
    "/identify/retry",
    response_model=IdentificationResponse,
    summary="Retry identification with the last image",
    responses=OUTCOME_RESPONSES,
)
async def retry_identification(
    session: IdentificationSession = Depends(get_identification_session),
    service: PlantIdentificationService = Depends(get_identification_service),
) -> JSONResponse:
    outcome = await service.retry(session)
    return _outcome_response(IdentificationResponse.from_outcome(outcome))


@identification_router.get(
    "/identify/current",
    response_model=CurrentIdentificationResponse,
    response_model_by_alias=True,
    summary="Get the current identification state",
)
async def get_current_identification(
    session: IdentificationSession = Depends(get_identification_session),
) -> CurrentIdentificationResponse:
    return CurrentIdentificationResponse.from_session(session)


@identification_router.delete(
    "/identify/current",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear the current image and result",
)
async def clear_current_identification(
    session: IdentificationSession = Depends(get_identification_session),
) -> Response:
    session.clear()
    logger.info("Identification session cleared", client_id=session.client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@identification_router.post(
    "/care-guidance",
    response_model=CareGuidanceResponse,
    response_model_by_alias=True,
    summary="Weed classification and care instructions for a plant name",
    responses={
        422: {"description": "Blank plant name or unusable answer"},
        502: {"description": "Analysis service failed; retry is possible"},
    },
)
async def get_care_guidance(
    request: CareGuidanceRequest,
    service: PlantIdentificationService = Depends(get_identification_service),
) -> CareGuidanceResponse:
    guidance = await service.care_guidance(request.plant_name)
    return CareGuidanceResponse.from_guidance(request.plant_name.strip(), guidance)
