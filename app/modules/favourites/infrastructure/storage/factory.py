# 📄 File: app/modules/favourites/infrastructure/storage/factory.py
# 🧭 Purpose (Layman Explanation):
# Picks where favourites are kept (Redis or local files) based on the app settings.
# 🧪 Purpose (Technical Summary):
# FavouritesRepository factory driven by Settings.FAVOURITES_BACKEND.
# 🔗 Dependencies:
# app.shared.config (settings, redis client), storage implementations
# 🔄 Connected Modules / Calls From:
# app.main (lifespan)

from app.shared.config.redis import get_redis_client
from app.shared.config.settings import Settings
from app.shared.utils.logging import get_logger

from ...domain.repositories.favourites_repository import FavouritesRepository
from .file_repository import FileFavouritesRepository
from .redis_repository import RedisFavouritesRepository

logger = get_logger(__name__)


def create_favourites_repository(settings: Settings) -> FavouritesRepository:
    if settings.FAVOURITES_BACKEND == "redis":
        logger.info("Using Redis favourites storage", redis_host=settings.REDIS_HOST)
        return RedisFavouritesRepository(get_redis_client(settings))

    logger.info("Using file favourites storage", directory=settings.FAVOURITES_FILE_DIR)
    return FileFavouritesRepository(settings.FAVOURITES_FILE_DIR)
