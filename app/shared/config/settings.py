# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and provides them to the rest of our Plant Identifier app in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Gemini client, favourites storage backends
# - All modules requiring configuration

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Plant Identifier API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="AI-Powered Plant Identification & Health Check",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format (json or text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:9002",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # REDIS CONFIGURATION
    # =========================================================================

    REDIS_HOST: str = Field(default="localhost", description="Redis host")
    REDIS_PORT: int = Field(default=6379, description="Redis port")
    REDIS_DB: int = Field(default=0, description="Redis database number")
    REDIS_PASSWORD: Optional[str] = Field(None, description="Redis password")
    REDIS_MAX_CONNECTIONS: int = Field(default=20, description="Redis connection pool size")

    # =========================================================================
    # AI / LLM APIs
    # =========================================================================

    GOOGLE_GEMINI_API_KEY: Optional[str] = Field(None, description="Google Gemini API key")
    GOOGLE_GEMINI_MODEL: str = Field(default="gemini-2.0-flash", description="Gemini model")
    GEMINI_API_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST API base URL"
    )
    GEMINI_TIMEOUT_SECONDS: int = Field(default=60, description="Model call timeout")
    GEMINI_MAX_RETRIES: int = Field(
        default=1,
        description="Attempts per model call; re-sending an image is left to the user"
    )
    GEMINI_TEMPERATURE: float = Field(default=0.4, description="Sampling temperature")

    # =========================================================================
    # IMAGE INPUT
    # =========================================================================

    MAX_IMAGE_SIZE: int = Field(default=5242880, description="Max image size (5MB)")
    SESSION_MAX_CLIENTS: int = Field(default=1000, ge=1, description="Identification sessions kept in memory")
    SESSION_TTL_SECONDS: int = Field(default=3600, ge=1, description="Idle time before a session is dropped")

    # =========================================================================
    # FAVOURITES STORAGE
    # =========================================================================

    FAVOURITES_BACKEND: str = Field(default="file", description="Favourites backend (redis or file)")
    FAVOURITES_STORAGE_KEY: str = Field(
        default="plantIdentifierFavorites",
        description="Name of the storage slot holding the favourites list"
    )
    FAVOURITES_FILE_DIR: str = Field(
        default=".favourites",
        description="Directory used by the file favourites backend"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("FAVOURITES_BACKEND")
    @classmethod
    def validate_favourites_backend(cls, v: str) -> str:
        allowed_backends = ["redis", "file"]
        if v.lower() not in allowed_backends:
            raise ValueError(f"Favourites backend must be one of {allowed_backends}")
        return v.lower()

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def redis_url(self) -> str:
        """Get the Redis URL with optional password."""
        if self.REDIS_PASSWORD:
            return (
                f"redis://:{self.REDIS_PASSWORD}@{self.REDIS_HOST}:"
                f"{self.REDIS_PORT}/{self.REDIS_DB}"
            )
        return f"redis://{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    def get_ai_api_config(self) -> dict:
        """Get Gemini API configuration."""
        return {
            "api_key": self.GOOGLE_GEMINI_API_KEY,
            "api_url": self.GEMINI_API_URL,
            "model": self.GOOGLE_GEMINI_MODEL,
            "timeout": self.GEMINI_TIMEOUT_SECONDS,
            "max_retries": self.GEMINI_MAX_RETRIES,
            "temperature": self.GEMINI_TEMPERATURE,
        }


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
