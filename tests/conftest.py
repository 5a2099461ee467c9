import base64
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import create_application
from app.modules.plant_identification.presentation.dependencies import get_plant_analyzer
from app.shared.config.settings import Settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PNG_DATA_URI = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


class FakeRedis:
    """Just enough of redis.asyncio.Redis for the favourites repository."""

    def __init__(self):
        self.data = {}

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value
        return True


class FakeAnalyzer:
    def __init__(self):
        self.identify = AsyncMock(return_value=None)
        self.care_guidance = AsyncMock()
        self.api_client = MagicMock()
        self.api_client.get_stats.return_value = {"total_requests": 0}


@pytest.fixture
def candidate():
    return {
        "commonName": "Dandelion",
        "latinName": "Taraxacum officinale",
        "alternativeNames": ["Lion's tooth", "Blowball"],
        "isWeed": True,
        "careInstructions": "Remove the whole taproot to stop regrowth.",
        "healthStatus": "Healthy, flowering.",
        "proposedActions": "Pull before the seed heads open.",
        "height": "5-40 cm",
        "isEdibleFruit": False,
    }


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def analyzer():
    return FakeAnalyzer()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        ENVIRONMENT="test",
        DEBUG=False,
        GOOGLE_GEMINI_API_KEY=None,
        FAVOURITES_BACKEND="file",
        FAVOURITES_FILE_DIR=str(tmp_path / "favourites"),
        MAX_IMAGE_SIZE=1024 * 1024,
        SESSION_MAX_CLIENTS=10,
    )


@pytest.fixture
def client(settings, analyzer):
    app = create_application(settings)
    app.dependency_overrides[get_plant_analyzer] = lambda: analyzer
    with TestClient(app) as test_client:
        yield test_client
