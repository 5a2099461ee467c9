# 📄 File: app/modules/favourites/presentation/api/schemas/favourites_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of the answers the favourites endpoints give back: the updated list, whether
# a plant is saved, and a short message to show the user.
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for the favourites endpoints (camelCase aliases). Request bodies
# are IdentificationResult documents.
# 🔗 Dependencies:
# pydantic, IdentificationResult
# 🔄 Connected Modules / Calls From:
# app.modules.favourites.presentation.api.v1.favourites

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_identification.domain.models.identification import IdentificationResult


def to_documents(results: List[IdentificationResult]) -> List[Dict[str, Any]]:
    return [result.to_document() for result in results]


class FavouritesListResponse(BaseModel):
    favourites: List[Dict[str, Any]]
    count: int

    @classmethod
    def from_results(cls, results: List[IdentificationResult]) -> "FavouritesListResponse":
        return cls(favourites=to_documents(results), count=len(results))


class FavouriteAddResponse(BaseModel):
    added: bool
    favourites: List[Dict[str, Any]]
    message: str


class FavouriteRemoveResponse(BaseModel):
    removed: bool
    favourites: List[Dict[str, Any]]
    message: str


class FavouriteStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_favourite: bool = Field(..., alias="isFavourite")


class FavouriteToggleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_favourite: bool = Field(..., alias="isFavourite")
    favourites: List[Dict[str, Any]]
    message: str
