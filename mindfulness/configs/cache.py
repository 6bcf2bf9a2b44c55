"""
Lookup cache configuration.

Dependencies: pydantic, pydantic_settings
System role: Sizing for the in-process LRU lookup caches
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mindfulness.configs.base import BaseSettings


class CacheSettings(BaseSettings):
    """LRU cache sizes for hot identifier lookups."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CACHE_",
        case_sensitive=False,
        extra="ignore",
    )

    user_max_size: int = Field(default=256, ge=1, description="Cached users by id")
    session_max_size: int = Field(default=256, ge=1, description="Cached sessions by id")
