# 📄 File: app/modules/favourites/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the response formats used by the favourites endpoints.
# 🧪 Purpose (Technical Summary):
# Schema package exports for favourites endpoints.
# 🔗 Dependencies:
# favourites_schemas.py
# 🔄 Connected Modules / Calls From:
# app.modules.favourites.presentation.api.v1

from .favourites_schemas import (
    FavouriteAddResponse,
    FavouriteRemoveResponse,
    FavouritesListResponse,
    FavouriteStatusResponse,
    FavouriteToggleResponse,
)

__all__ = [
    "FavouriteAddResponse",
    "FavouriteRemoveResponse",
    "FavouritesListResponse",
    "FavouriteStatusResponse",
    "FavouriteToggleResponse",
]
