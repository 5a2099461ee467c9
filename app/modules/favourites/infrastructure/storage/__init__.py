# 📄 File: app/modules/favourites/infrastructure/storage/__init__.py
# 🧭 Purpose (Layman Explanation):
# The places favourites can be saved: Redis for servers, JSON files for local use.
# 🧪 Purpose (Technical Summary):
# FavouritesRepository implementations and the settings-driven factory.
# 🔗 Dependencies:
# redis.asyncio, pathlib
# 🔄 Connected Modules / Calls From:
# app.main, tests

from .factory import create_favourites_repository
from .file_repository import FileFavouritesRepository
from .redis_repository import RedisFavouritesRepository

__all__ = [
    "create_favourites_repository",
    "FileFavouritesRepository",
    "RedisFavouritesRepository",
]
