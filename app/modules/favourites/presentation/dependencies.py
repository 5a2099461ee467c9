# 📄 File: app/modules/favourites/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Gives each favourites endpoint the calling user's own favourites list, already loaded.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the favourites module. The repository lives on
# app.state; the store is built per request for the client's slot and loaded once.
# 🔗 Dependencies:
# FastAPI, app.shared.core.dependencies, favourites domain
# 🔄 Connected Modules / Calls From:
# app.modules.favourites.presentation.api.v1.favourites, tests

from fastapi import Depends, Request

from app.shared.config.settings import Settings
from app.shared.core.dependencies import get_app_settings, get_client_id

from ..domain.repositories.favourites_repository import FavouritesRepository
from ..domain.services.favourites_store import FavouritesStore


def get_favourites_repository(request: Request) -> FavouritesRepository:
    return request.app.state.favourites_repository


def favourites_slot_key(storage_key: str, client_id: str) -> str:
    return f"{storage_key}:{client_id}"


async def get_favourites_store(
    client_id: str = Depends(get_client_id),
    repository: FavouritesRepository = Depends(get_favourites_repository),
    settings: Settings = Depends(get_app_settings),
) -> FavouritesStore:
    store = FavouritesStore(repository, favourites_slot_key(settings.FAVOURITES_STORAGE_KEY, client_id))
    await store.load()
    return store
