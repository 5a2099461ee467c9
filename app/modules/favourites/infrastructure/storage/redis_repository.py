# 📄 File: app/modules/favourites/infrastructure/storage/redis_repository.py
# 🧭 Purpose (Layman Explanation):
# Keeps each user's favourite plants in Redis so they survive server restarts and are
# shared across server instances.
# 🧪 Purpose (Technical Summary):
# Redis implementation of FavouritesRepository: one string key per slot (GET / SET).
# 🔗 Dependencies:
# redis.asyncio, app.shared.core.exceptions.StorageError
# 🔄 Connected Modules / Calls From:
# app.main (backend selection), favourites presentation dependencies

from typing import Optional

import redis.asyncio as redis

from app.shared.core.exceptions import StorageError
from app.shared.utils.logging import get_logger

from ...domain.repositories.favourites_repository import FavouritesRepository

logger = get_logger(__name__)


class RedisFavouritesRepository(FavouritesRepository):
    """Favourites slots as plain Redis string keys."""

    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client

    async def read(self, key: str) -> Optional[str]:
        try:
            return await self.redis.get(key)
        except redis.RedisError as e:
            logger.error("Failed to read favourites from Redis", storage_key=key, error=str(e))
            raise StorageError("Could not load favourites", operation="read", storage_key=key)

    async def write(self, key: str, value: str) -> None:
        try:
            await self.redis.set(key, value)
        except redis.RedisError as e:
            logger.error("Failed to save favourites to Redis", storage_key=key, error=str(e))
            raise StorageError("Could not save favourites", operation="write", storage_key=key)
