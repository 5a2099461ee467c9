# 📄 File: app/shared/config/redis.py
#
# 🧭 Purpose (Layman Explanation):
# Configuration for the Redis server that keeps each user's favourite plants
# safe between app restarts.
#
# 🧪 Purpose (Technical Summary):
# Redis configuration with connection pooling and environment-specific
# settings, plus a health probe used by the health endpoints.
#
# 🔗 Dependencies:
# - redis Python package (redis.asyncio)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.modules.favourites.infrastructure.storage (Redis backend)
# - app.api.v1.health
# - app.main (shutdown)

from typing import Any, Dict, Optional

import redis.asyncio as redis
from redis.asyncio import ConnectionPool, Redis

from .settings import Settings, get_settings


# =============================================================================
# REDIS CONFIGURATION CLASS
# =============================================================================

class RedisConfig:
    """Redis configuration class with connection management."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._connection_pool: ConnectionPool | None = None
        self._redis_client: Redis | None = None

    @property
    def redis_url(self) -> str:
        """Get Redis connection URL."""
        return self.settings.redis_url

    @property
    def connection_kwargs(self) -> Dict[str, Any]:
        """Get Redis connection configuration."""

        base_config = {
            "encoding": "utf-8",
            "decode_responses": True,
            "retry_on_timeout": True,
            "health_check_interval": 30,
        }

        # Environment-specific configurations
        if self.settings.is_production:
            base_config.update({
                "socket_timeout": 5.0,
                "socket_connect_timeout": 5.0,
                "socket_keepalive": True,
            })
        elif self.settings.is_development:
            base_config.update({
                "socket_timeout": 10.0,
                "socket_connect_timeout": 10.0,
            })

        return base_config

    def create_connection_pool(self) -> ConnectionPool:
        """Create Redis connection pool."""
        if self._connection_pool is None:
            self._connection_pool = ConnectionPool.from_url(
                self.redis_url,
                max_connections=self.settings.REDIS_MAX_CONNECTIONS,
                **self.connection_kwargs
            )
        return self._connection_pool

    def create_redis_client(self) -> Redis:
        """Create Redis client with connection pool."""
        if self._redis_client is None:
            pool = self.create_connection_pool()
            self._redis_client = Redis(connection_pool=pool)
        return self._redis_client

    async def close_connections(self):
        """Close Redis connections and cleanup."""
        if self._redis_client:
            await self._redis_client.aclose()
            self._redis_client = None

        if self._connection_pool:
            await self._connection_pool.disconnect()
            self._connection_pool = None


_redis_config: RedisConfig | None = None


def get_redis_config(settings: Optional[Settings] = None) -> RedisConfig:
    global _redis_config
    if _redis_config is None:
        _redis_config = RedisConfig(settings)
    return _redis_config


def get_redis_client(settings: Optional[Settings] = None) -> Redis:
    """Get the shared Redis client, configured from ``settings`` on first use."""
    return get_redis_config(settings).create_redis_client()


async def close_redis() -> None:
    global _redis_config
    if _redis_config is not None:
        await _redis_config.close_connections()
        _redis_config = None


async def check_redis_health() -> Dict[str, Any]:
    """
    Check Redis connectivity.

    Returns:
        Dict containing Redis health status
    """
    try:
        client = get_redis_client()
        ping_result = await client.ping()
        info = await client.info()

        return {
            "status": "healthy",
            "ping": ping_result,
            "version": info.get("redis_version", "Unknown"),
            "connected_clients": info.get("connected_clients", 0),
        }

    except (redis.RedisError, OSError) as e:
        return {
            "status": "unhealthy",
            "error": str(e),
            "type": type(e).__name__,
        }
