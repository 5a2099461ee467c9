from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.modules.plant_identification.application.identification_service import PlantIdentificationService
from app.modules.plant_identification.application.session import IdentificationSession
from app.modules.plant_identification.presentation.api.v1.identification import identify_from_upload
from app.shared.core.exceptions import APIQuotaExceededError, TransientServiceError

from conftest import PNG_BYTES, PNG_DATA_URI

API = "/api/v1"


def upload(client, content=PNG_BYTES, content_type="image/png", client_id=None):
    headers = {"X-Client-ID": client_id} if client_id else {}
    return client.post(
        f"{API}/identify",
        files={"image": ("plant.png", content, content_type)},
        headers=headers,
    )


def test_identify_upload_returns_result(client, analyzer, candidate):
    analyzer.identify.return_value = candidate

    response = upload(client)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "identified"
    assert body["result"]["commonName"] == "Dandelion"
    assert body["result"]["alternativeNames"] == ["Lion's tooth", "Blowball"]
    assert body["error"] is None
    assert response.headers["X-Request-ID"]


def test_identify_upload_rejects_non_image(client, analyzer):
    response = upload(client, content=b"%PDF-1.7", content_type="application/pdf")

    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "invalid_input"
    assert body["error"]["message"] == "Please upload a valid image file (e.g., JPG, PNG, WEBP)."
    analyzer.identify.assert_not_awaited()


def test_identify_upload_rejects_oversized_file(client, analyzer, settings):
    response = upload(client, content=b"\x89PNG" + b"x" * settings.MAX_IMAGE_SIZE)

    assert response.status_code == 422
    assert response.json()["status"] == "invalid_input"
    assert response.json()["error"]["code"] == "INPUT_VALIDATION_ERROR"
    analyzer.identify.assert_not_awaited()


@pytest.mark.asyncio
async def test_upload_read_stops_past_the_size_limit(analyzer):
    image = MagicMock()
    image.read = AsyncMock(return_value=b"x" * 11)
    image.content_type = "image/png"
    service = PlantIdentificationService(analyzer, max_image_size=10)

    response = await identify_from_upload(image, IdentificationSession("tester"), service)

    image.read.assert_awaited_once_with(11)
    assert response.status_code == 422
    analyzer.identify.assert_not_awaited()


def test_identify_data_uri_not_identified(client, analyzer):
    analyzer.identify.return_value = None

    response = client.post(f"{API}/identify/data-uri", json={"imageDataUri": PNG_DATA_URI})

    assert response.status_code == 422
    assert response.json()["status"] == "not_identified"
    assert response.json()["error"]["retryable"] is False


def test_transient_failure_then_retry(client, analyzer, candidate):
    analyzer.identify.side_effect = APIQuotaExceededError("gemini")

    failed = upload(client)

    assert failed.status_code == 502
    assert failed.json()["error"]["retryable"] is True
    assert failed.json()["error"]["message"].startswith("An error occurred during analysis:")

    analyzer.identify.side_effect = None
    analyzer.identify.return_value = candidate
    retried = client.post(f"{API}/identify/retry")

    assert retried.status_code == 200
    assert retried.json()["result"]["commonName"] == "Dandelion"


def test_retry_without_image(client, analyzer):
    response = client.post(f"{API}/identify/retry")

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "No image to retry. Please upload an image first."


def test_current_state_and_clear(client, analyzer, candidate):
    analyzer.identify.return_value = candidate
    upload(client)

    current = client.get(f"{API}/identify/current").json()
    assert current["hasImage"] is True
    assert current["inFlight"] is False
    assert current["outcome"]["result"]["commonName"] == "Dandelion"

    assert client.delete(f"{API}/identify/current").status_code == 204

    cleared = client.get(f"{API}/identify/current").json()
    assert cleared["hasImage"] is False
    assert cleared["outcome"] is None


def test_sessions_are_separated_by_client_id(client, analyzer, candidate):
    analyzer.identify.return_value = candidate
    upload(client, client_id="device-1")

    other = client.get(f"{API}/identify/current", headers={"X-Client-ID": "device-2"}).json()

    assert other["hasImage"] is False


def test_session_count_is_bounded(client, settings):
    for n in range(50):
        client.post(f"{API}/identify/retry", headers={"X-Client-ID": f"device-{n}"})

    assert len(client.app.state.session_registry) <= settings.SESSION_MAX_CLIENTS


def test_invalid_client_id_uses_error_envelope(client):
    response = client.get(f"{API}/favourites", headers={"X-Client-ID": "../../etc/passwd"})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "INPUT_VALIDATION_ERROR"
    assert error["details"]["field"] == "X-Client-ID"
    assert error["path"] == f"{API}/favourites"


def test_care_guidance(client, analyzer):
    analyzer.care_guidance.return_value = {"isWeed": True, "careInstructions": "Dig out every root."}

    response = client.post(f"{API}/care-guidance", json={"plantName": "Bindweed"})

    assert response.status_code == 200
    assert response.json() == {
        "plantName": "Bindweed",
        "isWeed": True,
        "careInstructions": "Dig out every root.",
    }


def test_care_guidance_failures(client, analyzer):
    assert client.post(f"{API}/care-guidance", json={"plantName": "   "}).status_code == 422

    analyzer.care_guidance.return_value = {"careInstructions": 5}
    not_identified = client.post(f"{API}/care-guidance", json={"plantName": "Bindweed"})
    assert not_identified.status_code == 422
    assert not_identified.json()["error"]["message"] == "Could not provide care instructions for Bindweed."

    analyzer.care_guidance.side_effect = TransientServiceError("Service unavailable")
    transient = client.post(f"{API}/care-guidance", json={"plantName": "Bindweed"})
    assert transient.status_code == 502
    assert transient.json()["error"]["retryable"] is True


def test_request_validation_error_envelope(client):
    response = client.post(f"{API}/care-guidance", json={})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "REQUEST_VALIDATION_ERROR"


def test_favourites_round_trip(client, candidate):
    assert client.get(f"{API}/favourites").json() == {"favourites": [], "count": 0}

    added = client.post(f"{API}/favourites", json=candidate)
    assert added.status_code == 200
    assert added.json()["added"] is True
    assert added.json()["message"] == "Dandelion added to your favourites."

    duplicate = client.post(f"{API}/favourites", json=candidate).json()
    assert duplicate["added"] is False
    assert duplicate["message"] == "Dandelion is already in your favourites."
    assert len(duplicate["favourites"]) == 1

    assert client.post(f"{API}/favourites/check", json=candidate).json() == {"isFavourite": True}

    removed = client.request("DELETE", f"{API}/favourites", json=candidate).json()
    assert removed["removed"] is True
    assert removed["favourites"] == []
    assert removed["message"] == "Dandelion removed from your favourites."


def test_favourites_remove_and_check_need_only_identity(client, candidate):
    client.post(f"{API}/favourites", json=candidate)
    identity = {"commonName": "Dandelion", "latinName": "Taraxacum officinale"}

    assert client.post(f"{API}/favourites/check", json=identity).json() == {"isFavourite": True}
    assert client.post(f"{API}/favourites/check", json={"commonName": "Dandelion"}).json() == {"isFavourite": False}

    removed = client.request("DELETE", f"{API}/favourites", json=identity).json()
    assert removed["removed"] is True
    assert removed["favourites"] == []

    assert client.request("DELETE", f"{API}/favourites", json={"latinName": "Rosa"}).status_code == 422


def test_favourites_toggle(client, candidate):
    first = client.post(f"{API}/favourites/toggle", json=candidate).json()
    assert first["isFavourite"] is True

    second = client.post(f"{API}/favourites/toggle", json=candidate).json()
    assert second["isFavourite"] is False
    assert second["favourites"] == []


def test_favourites_are_per_client(client, candidate):
    client.post(f"{API}/favourites", json=candidate, headers={"X-Client-ID": "alice"})

    alice = client.get(f"{API}/favourites", headers={"X-Client-ID": "alice"}).json()
    bob = client.get(f"{API}/favourites", headers={"X-Client-ID": "bob"}).json()

    assert alice["count"] == 1
    assert alice["favourites"][0]["commonName"] == "Dandelion"
    assert bob["count"] == 0


def test_favourites_reject_invalid_result(client, candidate):
    candidate["isWeed"] = "yes"

    response = client.post(f"{API}/favourites", json=candidate)

    assert response.status_code == 422


def test_favourites_persist_to_file(client, settings, candidate):
    client.post(f"{API}/favourites", json=candidate)

    files = list(Path(settings.FAVOURITES_FILE_DIR).glob("*.json"))

    assert [f.name for f in files] == ["plantIdentifierFavorites_anonymous.json"]


def test_health_endpoints(client):
    assert client.get(f"{API}/health").json()["status"] == "healthy"
    assert client.get(f"{API}/health/live").status_code == 200
    assert client.get(f"{API}/health/ready").status_code == 200

    detailed = client.get(f"{API}/health/detailed").json()
    assert detailed["components"]["favourites_storage"]["backend"] == "file"
    # No API key configured in tests.
    assert detailed["status"] == "degraded"
