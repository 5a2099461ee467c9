# 📄 File: app/modules/plant_identification/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands each identification endpoint the tools it needs: the AI connection, the service
# that runs identification, and the calling user's own session.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the plant identification module. Long-lived objects
# (analyzer, session registry) live on app.state and are created in the app lifespan.
# 🔗 Dependencies:
# FastAPI, app.shared.core.dependencies, plant_identification.application
# 🔄 Connected Modules / Calls From:
# app.modules.plant_identification.presentation.api.v1.identification, app.main, tests

from fastapi import Depends, Request

from app.shared.config.settings import Settings
from app.shared.core.dependencies import get_app_settings, get_client_id

from ..application.identification_service import PlantIdentificationService
from ..application.session import IdentificationSession, SessionRegistry
from ..infrastructure.external.gemini_client import GeminiPlantAnalyzer


def get_plant_analyzer(request: Request) -> GeminiPlantAnalyzer:
    return request.app.state.plant_analyzer


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.session_registry


def get_identification_service(
    analyzer: GeminiPlantAnalyzer = Depends(get_plant_analyzer),
    settings: Settings = Depends(get_app_settings),
) -> PlantIdentificationService:
    return PlantIdentificationService(analyzer, max_image_size=settings.MAX_IMAGE_SIZE)


def get_identification_session(
    client_id: str = Depends(get_client_id),
    registry: SessionRegistry = Depends(get_session_registry),
) -> IdentificationSession:
    """The calling client's identification session, created on first use."""
    return registry.get(client_id)
