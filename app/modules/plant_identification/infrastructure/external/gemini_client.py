# 📄 File: app/modules/plant_identification/infrastructure/external/gemini_client.py
# 🧭 Purpose (Layman Explanation):
# Sends the plant photo to Google's Gemini AI together with our botanist instructions
# and brings back its answer, or tells us clearly when the AI could not be reached.
# 🧪 Purpose (Technical Summary):
# Gemini generateContent adapter: builds inline-image requests with a declared
# responseSchema, unwraps the candidates envelope and decodes the JSON answer.
# Returns untyped candidates; validation is left to reconciliation.
# 🔗 Dependencies:
# APIClient (aiohttp + tenacity), prompts, reconciliation.is_unknown_name
# 🔄 Connected Modules / Calls From:
# identification_service.py, presentation dependencies

import json
import re
from typing import Any, Dict, List, Optional

from app.shared.config.settings import Settings
from app.shared.core.exceptions import TransientServiceError
from app.shared.infrastructure.external_apis.api_client import APIClient, create_api_client
from app.shared.utils.logging import get_logger

from ...domain.models.image import ImageArtifact
from ...domain.services.reconciliation import is_unknown_name
from .prompts import (
    CARE_GUIDANCE_PROMPT_TEMPLATE,
    CARE_GUIDANCE_RESPONSE_SCHEMA,
    IDENTIFICATION_RESPONSE_SCHEMA,
    PLANT_ANALYSIS_PROMPT,
)

logger = get_logger(__name__)

GEMINI_API_NAME = "gemini"

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def extract_json_payload(response: Dict[str, Any]) -> Any:
    """
    Pull the JSON answer out of a generateContent response envelope.

    Raises:
        TransientServiceError: a malformed envelope, no text, or text that is not JSON
    """
    if not isinstance(response, dict):
        response = {}
    candidates = response.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        feedback = response.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        raise TransientServiceError(
            "The analysis service returned no answer",
            service=GEMINI_API_NAME,
            details={"block_reason": block_reason} if block_reason else None,
        )

    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        parts = []
    text = "".join(
        part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
    ).strip()
    if not text:
        raise TransientServiceError(
            "The analysis service returned an empty answer",
            service=GEMINI_API_NAME,
            details={"finish_reason": first.get("finishReason")},
        )

    fenced = _CODE_FENCE_RE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        raise TransientServiceError(
            "The analysis service returned malformed JSON",
            service=GEMINI_API_NAME,
            service_response=text[:500],
        )


class GeminiPlantAnalyzer:
    """
    Prompt templates over the Gemini generateContent endpoint.

    No retries happen here beyond the transport retry of the APIClient;
    re-sending the same image is the caller's decision.
    """

    def __init__(self, api_client: APIClient, model: str, temperature: float = 0.4):
        self.api_client = api_client
        self.model = model
        self.temperature = temperature

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiPlantAnalyzer":
        config = settings.get_ai_api_config()
        client = create_api_client(
            api_name=GEMINI_API_NAME,
            base_url=config["api_url"],
            api_key=config["api_key"],
            timeout=config["timeout"],
            max_retries=config["max_retries"],
        )
        return cls(client, model=config["model"], temperature=config["temperature"])

    async def identify(self, image_data_uri: str) -> Optional[Dict[str, Any]]:
        """
        Ask the model to analyze a plant photo.

        Returns:
            The untyped candidate object, or None when the model reports the
            subject as unidentifiable.

        Raises:
            InputValidationError: the data URI is unusable
            TransientServiceError: the model call failed
        """
        image = ImageArtifact.from_data_uri(image_data_uri)
        parts = [
            {"text": PLANT_ANALYSIS_PROMPT},
            {"inline_data": {"mime_type": image.mime_type, "data": image.data}},
        ]

        candidate = await self._generate(parts, IDENTIFICATION_RESPONSE_SCHEMA)

        if not isinstance(candidate, dict):
            raise TransientServiceError(
                "The analysis service returned an unexpected answer shape",
                service=GEMINI_API_NAME,
                details={"answer_type": type(candidate).__name__},
            )

        if is_unknown_name(candidate.get("commonName")):
            logger.warning(
                "Could not identify plant or model returned Unknown",
                common_name=candidate.get("commonName"),
            )
            return None

        return candidate

    async def care_guidance(self, plant_name: str) -> Any:
        """Ask the model whether a named plant is a weed and how to care for it."""
        prompt = CARE_GUIDANCE_PROMPT_TEMPLATE.format(plant_name=plant_name)
        return await self._generate([{"text": prompt}], CARE_GUIDANCE_RESPONSE_SCHEMA)

    async def _generate(self, parts: List[Dict[str, Any]], response_schema: Dict[str, Any]) -> Any:
        if not self.api_client.api_key:
            raise TransientServiceError(
                "The analysis service is not configured",
                service=GEMINI_API_NAME,
            )

        payload = {
            "contents": [{"role": "user", "parts": parts}],
            "generationConfig": {
                "temperature": self.temperature,
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            },
        }

        response = await self.api_client.post(f"models/{self.model}:generateContent", data=payload)
        return extract_json_payload(response)

    async def close(self):
        await self.api_client.close()
