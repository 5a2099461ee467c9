import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.modules.plant_identification.infrastructure.external.gemini_client import (
    GeminiPlantAnalyzer,
    extract_json_payload,
)
from app.modules.plant_identification.infrastructure.external.prompts import IDENTIFICATION_RESPONSE_SCHEMA
from app.shared.core.exceptions import InputValidationError, TransientServiceError

from conftest import PNG_DATA_URI


def gemini_response(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}, "finishReason": "STOP"}]}


def make_analyzer(response=None, api_key="test-key"):
    api_client = MagicMock()
    api_client.api_key = api_key
    api_client.post = AsyncMock(return_value=response)
    return GeminiPlantAnalyzer(api_client, model="gemini-2.0-flash", temperature=0.2)


def test_extract_json_payload_reads_candidate_text(candidate):
    assert extract_json_payload(gemini_response(json.dumps(candidate))) == candidate


def test_extract_json_payload_strips_code_fences():
    text = '```json\n{"commonName": "Fern"}\n```'

    assert extract_json_payload(gemini_response(text)) == {"commonName": "Fern"}


def test_extract_json_payload_joins_text_parts():
    response = {"candidates": [{"content": {"parts": [{"text": '{"commonName": '}, {"text": '"Fern"}'}]}}]}

    assert extract_json_payload(response) == {"commonName": "Fern"}


@pytest.mark.parametrize(
    "response",
    [
        {},
        {"candidates": []},
        {"promptFeedback": {"blockReason": "SAFETY"}},
        {"candidates": ["oops"]},
        {"candidates": [{"content": "x"}]},
        {"candidates": [{"content": {"parts": "x"}}]},
        {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
        {"candidates": {"content": {}}},
        {"promptFeedback": "SAFETY"},
        ["candidates"],
        gemini_response("   "),
        gemini_response("I think this is a fern."),
    ],
)
def test_extract_json_payload_failures_are_transient(response):
    with pytest.raises(TransientServiceError) as exc_info:
        extract_json_payload(response)

    assert exc_info.value.retryable is True


@pytest.mark.asyncio
async def test_care_guidance_malformed_envelope_is_transient():
    analyzer = make_analyzer({"candidates": ["oops"]})

    with pytest.raises(TransientServiceError) as exc_info:
        await analyzer.care_guidance("Bindweed")

    assert exc_info.value.retryable is True


@pytest.mark.asyncio
async def test_identify_sends_inline_image_and_schema(candidate):
    analyzer = make_analyzer(gemini_response(json.dumps(candidate)))

    result = await analyzer.identify(PNG_DATA_URI)

    assert result == candidate
    endpoint = analyzer.api_client.post.await_args.args[0]
    payload = analyzer.api_client.post.await_args.kwargs["data"]
    assert endpoint == "models/gemini-2.0-flash:generateContent"
    inline = payload["contents"][0]["parts"][1]["inline_data"]
    assert inline["mime_type"] == "image/png"
    assert PNG_DATA_URI.endswith(inline["data"])
    assert payload["generationConfig"]["responseMimeType"] == "application/json"
    assert payload["generationConfig"]["responseSchema"] == IDENTIFICATION_RESPONSE_SCHEMA
    assert payload["generationConfig"]["temperature"] == 0.2


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["Unknown", " unknown ", ""])
async def test_identify_returns_none_for_unknown(candidate, name):
    candidate["commonName"] = name
    analyzer = make_analyzer(gemini_response(json.dumps(candidate)))

    assert await analyzer.identify(PNG_DATA_URI) is None


@pytest.mark.asyncio
async def test_identify_rejects_non_object_answer():
    analyzer = make_analyzer(gemini_response('["Fern"]'))

    with pytest.raises(TransientServiceError):
        await analyzer.identify(PNG_DATA_URI)


@pytest.mark.asyncio
async def test_identify_without_api_key_is_transient():
    analyzer = make_analyzer(api_key=None)

    with pytest.raises(TransientServiceError):
        await analyzer.identify(PNG_DATA_URI)

    analyzer.api_client.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_identify_rejects_bad_image_before_calling_model():
    analyzer = make_analyzer()

    with pytest.raises(InputValidationError):
        await analyzer.identify("data:text/plain;base64,aGVsbG8=")

    analyzer.api_client.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_care_guidance_prompt_names_the_plant():
    analyzer = make_analyzer(gemini_response('{"isWeed": true, "careInstructions": "Dig it out."}'))

    answer = await analyzer.care_guidance("Bindweed")

    assert answer == {"isWeed": True, "careInstructions": "Dig it out."}
    payload = analyzer.api_client.post.await_args.kwargs["data"]
    assert "Bindweed" in payload["contents"][0]["parts"][0]["text"]
