"""Configuration settings for the match history service."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .riot_api.constants import Platform, Region


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: Optional[str] = Field(
        default=None,
        description="Riot API key sent as X-Riot-Token on every outbound request",
    )
    riot_platform: str = Field(
        default="na1", description="Platform host used for summoner lookup"
    )
    riot_region: str = Field(
        default="americas", description="Regional routing host used for match-v5"
    )
    summoner_lookup_path: str = Field(
        default="/lol/summoner/v4/summoners/by-name/{summoner_name}",
        description="Path template for resolving a summoner name to a PUUID",
    )
    riot_request_timeout: float = Field(default=10.0, gt=0)

    # Application Configuration
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # CORS Configuration
    cors_origins: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]

    @property
    def api_key_configured(self) -> bool:
        """Whether a usable Riot API key is present."""
        return bool(self.riot_api_key and self.riot_api_key.strip())

    @field_validator("riot_platform")
    @classmethod
    def validate_platform(cls, v: str) -> str:
        """Normalize and check the platform routing value."""
        v = v.strip().lower()
        Platform(v)
        return v

    @field_validator("riot_region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        """Normalize and check the regional routing value."""
        v = v.strip().lower()
        Region(v)
        return v

    @field_validator("summoner_lookup_path")
    @classmethod
    def validate_lookup_path(cls, v: str) -> str:
        """Ensure the lookup path has a slot for the summoner name.

        Raises:
            ValueError: If the template lacks the ``{summoner_name}`` placeholder
        """
        if "{summoner_name}" not in v:
            raise ValueError(
                "summoner_lookup_path must contain the '{summoner_name}' placeholder"
            )
        if not v.startswith("/"):
            v = f"/{v}"
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
