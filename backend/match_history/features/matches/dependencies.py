"""Dependencies for the matches feature.

Builds a request-scoped Riot API client from settings and injects it
through the gateway into the service.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from match_history.core.config import Settings, get_global_settings
from match_history.core.exceptions import ConfigurationError
from match_history.core.riot_api import (
    Platform,
    Region,
    RiotAPIClient,
    RiotAPIEndpoints,
)

from .gateway import RiotMatchHistoryGateway
from .service import MatchHistoryService

API_KEY_NOT_CONFIGURED = "API key is not configured."


def get_app_settings() -> Settings:
    """Get application settings (overridable in tests)."""
    return get_global_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def require_api_key(settings: SettingsDep) -> str:
    """Return the configured Riot API key.

    :raises ConfigurationError: If no key is configured
    """
    if not settings.api_key_configured:
        raise ConfigurationError(API_KEY_NOT_CONFIGURED)
    return settings.riot_api_key.strip()  # type: ignore[union-attr]


async def get_riot_client(
    settings: SettingsDep,
    api_key: Annotated[str, Depends(require_api_key)],
) -> AsyncGenerator[RiotAPIClient, None]:
    """Get a Riot API client for the duration of one request."""
    endpoints = RiotAPIEndpoints(
        region=Region(settings.riot_region.lower()),
        platform=Platform(settings.riot_platform.lower()),
        summoner_lookup_path=settings.summoner_lookup_path,
    )
    client = RiotAPIClient(
        api_key=api_key,
        endpoints=endpoints,
        timeout=settings.riot_request_timeout,
    )
    await client.start_session()
    try:
        yield client
    finally:
        await client.close()


async def get_match_history_gateway(
    riot_client: Annotated[RiotAPIClient, Depends(get_riot_client)],
) -> RiotMatchHistoryGateway:
    """Get Riot match history gateway instance."""
    return RiotMatchHistoryGateway(riot_client)


async def get_match_history_service(
    gateway: Annotated[RiotMatchHistoryGateway, Depends(get_match_history_gateway)],
) -> MatchHistoryService:
    """Get match history service instance."""
    return MatchHistoryService(gateway)


# Type aliases for cleaner dependency injection
MatchHistoryServiceDep = Annotated[
    MatchHistoryService, Depends(get_match_history_service)
]

__all__ = [
    "API_KEY_NOT_CONFIGURED",
    "get_app_settings",
    "require_api_key",
    "get_riot_client",
    "get_match_history_gateway",
    "get_match_history_service",
    "SettingsDep",
    "MatchHistoryServiceDep",
]
