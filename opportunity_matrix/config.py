"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from opportunity_matrix.models.enumerations import TechnologyType


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "AI Opportunities Prioritization Matrix"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "console"

    # Session start-up
    LOAD_SEED_DATA: bool = True

    # Draft defaults
    DRAFT_DEFAULT_SCORE: int = Field(default=5, ge=1, le=10)
    DEFAULT_TECHNOLOGY_TYPE: TechnologyType = TechnologyType.MACHINE_LEARNING

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production runs without debug output."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
