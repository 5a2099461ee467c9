# 📄 File: app/modules/favourites/domain/models/favourite.py
# 🧭 Purpose (Layman Explanation):
# Decides when two saved plants count as "the same favourite": same common name and
# same scientific name.
# 🧪 Purpose (Technical Summary):
# Favourite identity key derived from an IdentificationResult or a bare FavouriteIdentity.
# Recomputed on every comparison and never stored on the record.
# 🔗 Dependencies:
# pydantic, plant_identification IdentificationResult
# 🔄 Connected Modules / Calls From:
# FavouritesStore, favourites endpoints (remove/check bodies), tests

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.modules.plant_identification.domain.models.identification import IdentificationResult

KEY_SEPARATOR = "::"


class FavouriteIdentity(BaseModel):
    """The two fields that identify a favourite. Any other fields are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    common_name: str = Field(..., alias="commonName", min_length=1)
    latin_name: Optional[str] = Field(None, alias="latinName")


def favourite_key(result: Union[IdentificationResult, FavouriteIdentity]) -> str:
    """
    Identity of a favourite: ``commonName + "::" + (latinName or "")``.

    The separator keeps ("Rose", "X") apart from ("RoseX", None).
    """
    return f"{result.common_name}{KEY_SEPARATOR}{result.latin_name or ''}"
