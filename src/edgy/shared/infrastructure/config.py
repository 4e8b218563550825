"""
Application configuration using Pydantic Settings.

Loads configuration from EDGY_* environment variables and .env file.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Words whose presence anywhere on a screen counts as "some edge case state is drawn".
DEFAULT_COMMON_INDICATORS = ["error", "loading", "empty", "skeleton", "spinner", "alert", "toast"]

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="EDGY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")

    # Knowledge base
    knowledge_dir: Optional[str] = Field(
        default=None,
        description="Directory holding edge-case-patterns and shadcn-components tables (packaged defaults if unset)",
    )

    # Batch file interface
    screens_dir: str = Field(default="screens", description="Directory scanned for screen exports")
    results_dir: str = Field(default="results", description="Directory receiving *-results.json files")

    # Detection
    max_tree_depth: int = Field(
        default=512,
        ge=1,
        description="Deepest design node nesting accepted before a tree is rejected as malformed",
    )
    common_indicators: List[str] = Field(
        default_factory=lambda: list(DEFAULT_COMMON_INDICATORS),
        description="Indicator words that mark every edge case of a screen as present",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        if value.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got {value!r}")
        return value.upper()

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env.lower() == "production"


# Global settings instance
settings = Settings()
