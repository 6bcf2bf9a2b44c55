"""
Database configuration settings.

Connection parameters for the shared SQLAlchemy connection. Every value
can be overridden with a DB_-prefixed environment variable.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mindfulness.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Relational database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    name: str = Field(default="mindfulnessdb", description="Database name")
    user: str = Field(default="postgres", description="Database user")
    password: str = Field(default="postgres", description="Database password")
    driver: str = Field(
        default="postgresql+psycopg",
        description="SQLAlchemy dialect+driver name",
    )
    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides host/port/name/credentials",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def database_url(self) -> str:
        """
        Construct the SQLAlchemy connection URL.

        Returns:
            str: Explicit url override when set, otherwise built from parts
        """
        if self.url:
            return self.url
        return (
            f"{self.driver}://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}"
        )
