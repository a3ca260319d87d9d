"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from roster.core.merge import MergePolicy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Database
    database_url: str = Field(
        default="sqlite:///./roster.db",
        validation_alias=AliasChoices("DATABASE_URL", "DB_DSN"),
        description="SQLAlchemy database URL (DB_DSN accepted for older deployments)",
    )
    echo_sql: bool = Field(default=False, description="Log every SQL statement")

    # Updates
    merge_policy: MergePolicy = Field(
        default=MergePolicy.PRESENCE,
        validation_alias=AliasChoices("ROSTER_MERGE_POLICY", "MERGE_POLICY"),
        description="Rule deciding which fields of a PUT body overwrite a stored player",
    )

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured store is SQLite."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
