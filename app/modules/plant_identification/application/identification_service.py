# 📄 File: app/modules/plant_identification/application/identification_service.py
# 🧭 Purpose (Layman Explanation):
# The "brain" of plant identification: sends the photo to the AI, cleans up its answer,
# and always comes back with either a plant or a single clear message for the user.
# 🧪 Purpose (Technical Summary):
# Orchestrates image -> model call -> reconciliation -> session update. All pipeline failures
# are converted into an IdentificationOutcome; stale completions are marked superseded.
# 🔗 Dependencies:
# GeminiPlantAnalyzer, reconciliation service, IdentificationSession, exception hierarchy
# 🔄 Connected Modules / Calls From:
# identification API endpoints, care-guidance endpoint

from typing import Any, Optional

from pydantic import ValidationError

from app.shared.core.exceptions import (
    InputValidationError,
    NonIdentificationError,
    PlantCareException,
    SchemaReconciliationError,
    TransientServiceError,
)
from app.shared.utils.logging import get_logger

from ..domain.models.identification import Accepted, CareGuidance
from ..domain.services.reconciliation import reconcile
from ..infrastructure.external.gemini_client import GeminiPlantAnalyzer
from .dto import IdentificationOutcome
from .image_input import file_to_data_uri, validate_data_uri
from .session import IdentificationSession

logger = get_logger(__name__)


class PlantIdentificationService:
    """Runs the identification pipeline against one client's session."""

    def __init__(self, analyzer: GeminiPlantAnalyzer, max_image_size: int):
        self.analyzer = analyzer
        self.max_image_size = max_image_size

    async def identify(self, session: IdentificationSession, image_data_uri: str) -> IdentificationOutcome:
        """
        Identify the plant in ``image_data_uri`` and record the outcome on the session.

        Rejected input clears the session. A completion that lost the race against a
        newer submission is returned with ``superseded=True`` and not stored.
        """
        try:
            image_data_uri = validate_data_uri(image_data_uri, self.max_image_size)
        except InputValidationError as e:
            return self._reject(session, e)

        return await self._run(session, image_data_uri)

    async def identify_upload(
        self,
        session: IdentificationSession,
        content: bytes,
        content_type: Optional[str],
    ) -> IdentificationOutcome:
        """Identify the plant in an uploaded image file."""
        try:
            image_data_uri = file_to_data_uri(content, content_type, self.max_image_size)
        except InputValidationError as e:
            return self._reject(session, e)

        return await self._run(session, image_data_uri)

    async def retry(self, session: IdentificationSession) -> IdentificationOutcome:
        """Re-send the stored image of ``session``."""
        if not session.last_image:
            error = InputValidationError("No image to retry. Please upload an image first.", field="image")
            return IdentificationOutcome.from_exception(error, session.sequence)

        logger.info("Retrying identification", client_id=session.client_id)
        return await self._run(session, session.last_image)

    async def care_guidance(self, plant_name: str) -> CareGuidance:
        """
        Weed classification and care instructions for a named plant.

        Raises:
            InputValidationError: blank plant name
            NonIdentificationError: the model answer does not fit the schema
            TransientServiceError: the model call failed
        """
        plant_name = (plant_name or "").strip()
        if not plant_name:
            raise InputValidationError("Please provide a plant name.", field="plantName")

        answer = await self.analyzer.care_guidance(plant_name)
        try:
            return CareGuidance.model_validate(answer)
        except ValidationError as e:
            logger.error("Care guidance answer failed validation", plant_name=plant_name)
            raise NonIdentificationError(
                f"Could not provide care instructions for {plant_name}.",
                reason="schema_reconciliation_failed",
                details={"validation_errors": e.errors(include_url=False, include_context=False, include_input=False)},
            )

    @staticmethod
    def _reject(session: IdentificationSession, error: InputValidationError) -> IdentificationOutcome:
        sequence = session.reject_input()
        logger.warning("Rejected image input", client_id=session.client_id, error=error.message)
        outcome = IdentificationOutcome.from_exception(error, sequence)
        session.complete(sequence, outcome)
        return outcome

    async def _run(self, session: IdentificationSession, image_data_uri: str) -> IdentificationOutcome:
        sequence = session.begin(image_data_uri)
        logger.info("Identification started", client_id=session.client_id, sequence=sequence)

        outcome = await self._analyze(image_data_uri, sequence)

        if not session.complete(sequence, outcome):
            return outcome.as_superseded()

        logger.log_business_event(
            "plant_identification",
            f"Identification finished with status {outcome.status.value}",
            entity_id=session.client_id,
            extra={"sequence": sequence},
        )
        return outcome

    async def _analyze(self, image_data_uri: str, sequence: int) -> IdentificationOutcome:
        try:
            candidate = await self.analyzer.identify(image_data_uri)
            return IdentificationOutcome.identified(self._reconciled(candidate), sequence)
        except TransientServiceError as e:
            logger.error("Identification failed", error_code=e.error_code, error=e.message)
            error = TransientServiceError(
                f"An error occurred during analysis: {e.message}",
                details=e.details,
                error_code=e.error_code,
            )
            return IdentificationOutcome.from_exception(error, sequence)
        except PlantCareException as e:
            return IdentificationOutcome.from_exception(e, sequence)
        except Exception as e:
            logger.error("Unexpected identification failure", error=str(e), exc_info=True)
            error = TransientServiceError(f"An error occurred during analysis: {e}")
            return IdentificationOutcome.from_exception(error, sequence)

    @staticmethod
    def _reconciled(candidate: Any):
        if candidate is None:
            raise NonIdentificationError(reason="unidentified")

        outcome = reconcile(candidate)
        if isinstance(outcome, Accepted):
            return outcome.result
        if outcome.reason == "irreparable":
            raise SchemaReconciliationError(outcome.errors)
        raise NonIdentificationError(reason=outcome.reason)
