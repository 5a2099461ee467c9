# 📄 File: app/modules/favourites/presentation/api/v1/favourites.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the heart button: list saved plants, save one, remove one,
# flip its saved state, or check whether it is already saved.
# 🧪 Purpose (Technical Summary):
# FastAPI favourites endpoints over FavouritesStore. Add and toggle take full
# IdentificationResult documents; remove and check need only commonName and latinName.
# 🔗 Dependencies:
# FastAPI router, FavouritesStore, favourites schemas, presentation dependencies
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (router inclusion), web and mobile clients

"""
Favourites API Endpoints

Endpoints:
- GET /favourites: List favourites in insertion order
- POST /favourites: Add a plant (no-op when already saved)
- DELETE /favourites: Remove a plant (body needs only commonName and latinName)
- POST /favourites/toggle: Add or remove depending on current state
- POST /favourites/check: Whether a plant is saved (same identity-only body)
"""

from typing import Union

from fastapi import APIRouter, Body, Depends

from app.modules.plant_identification.domain.models.identification import IdentificationResult

from ....domain.models.favourite import FavouriteIdentity
from ....domain.services.favourites_store import FavouritesStore
from ...dependencies import get_favourites_store
from ..schemas.favourites_schemas import (
    FavouriteAddResponse,
    FavouriteRemoveResponse,
    FavouritesListResponse,
    FavouriteStatusResponse,
    FavouriteToggleResponse,
    to_documents,
)

favourites_router = APIRouter()


def added_message(result: IdentificationResult) -> str:
    return f"{result.common_name} added to your favourites."


def removed_message(result: Union[IdentificationResult, FavouriteIdentity]) -> str:
    return f"{result.common_name} removed from your favourites."


@favourites_router.get(
    "",
    response_model=FavouritesListResponse,
    summary="List favourite plants",
)
async def list_favourites(
    store: FavouritesStore = Depends(get_favourites_store),
) -> FavouritesListResponse:
    return FavouritesListResponse.from_results(store.list_all())


@favourites_router.post(
    "",
    response_model=FavouriteAddResponse,
    summary="Add a plant to favourites",
)
async def add_favourite(
    result: IdentificationResult = Body(...),
    store: FavouritesStore = Depends(get_favourites_store),
) -> FavouriteAddResponse:
    added = await store.add(result)
    message = added_message(result) if added else f"{result.common_name} is already in your favourites."
    return FavouriteAddResponse(added=added, favourites=to_documents(store.list_all()), message=message)


@favourites_router.delete(
    "",
    response_model=FavouriteRemoveResponse,
    summary="Remove a plant from favourites",
)
async def remove_favourite(
    identity: FavouriteIdentity = Body(...),
    store: FavouritesStore = Depends(get_favourites_store),
) -> FavouriteRemoveResponse:
    removed = await store.remove(identity)
    message = removed_message(identity) if removed else f"{identity.common_name} is not in your favourites."
    return FavouriteRemoveResponse(removed=removed, favourites=to_documents(store.list_all()), message=message)


@favourites_router.post(
    "/toggle",
    response_model=FavouriteToggleResponse,
    response_model_by_alias=True,
    summary="Add or remove a plant depending on its current state",
)
async def toggle_favourite(
    result: IdentificationResult = Body(...),
    store: FavouritesStore = Depends(get_favourites_store),
) -> FavouriteToggleResponse:
    is_favourite = await store.toggle(result)
    message = added_message(result) if is_favourite else removed_message(result)
    return FavouriteToggleResponse(
        is_favourite=is_favourite,
        favourites=to_documents(store.list_all()),
        message=message,
    )


@favourites_router.post(
    "/check",
    response_model=FavouriteStatusResponse,
    response_model_by_alias=True,
    summary="Check whether a plant is a favourite",
)
async def check_favourite(
    identity: FavouriteIdentity = Body(...),
    store: FavouritesStore = Depends(get_favourites_store),
) -> FavouriteStatusResponse:
    return FavouriteStatusResponse(is_favourite=store.is_favourite(identity))
