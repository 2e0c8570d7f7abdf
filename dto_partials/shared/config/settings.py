# 📄 File: dto_partials/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads settings from environment variables and hands
# them to the data layer, such as which query parameters carry include/exclude requests.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for logging and partials resolution parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.shared.utils.logging (log level and format)
# - dto_partials.modules.partials.domain.services (recursion limit)
# - dto_partials.modules.partials.presentation (request parameter names)

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Data layer settings loaded from environment variables.

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
    # LOGGING
    # =========================================================================

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format (json or text)")
    LOG_FILE: Optional[str] = Field(default=None, description="Optional log file path")

    # =========================================================================
    # PARTIALS RESOLUTION
    # =========================================================================

    PARTIALS_MAX_DEPTH: int = Field(
        default=16,
        ge=1,
        description="Maximum nesting depth of a requested path or wildcard expansion"
    )

    INCLUDE_PARAM: str = Field(default="include", description="Request parameter for lazy includes")
    EXCLUDE_PARAM: str = Field(default="exclude", description="Request parameter for lazy excludes")
    ONLY_PARAM: str = Field(default="only", description="Request parameter for only-fields")
    EXCEPT_PARAM: str = Field(default="except", description="Request parameter for except-fields")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v.lower()


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get data layer settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Settings instance
    """
    return Settings()
