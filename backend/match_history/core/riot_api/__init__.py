"""
Riot API client package for League of Legends API integration.

Provides an authenticated async HTTP client, endpoint routing, typed errors
and the response models the match history pipeline reads.
"""

from .client import RiotAPIClient
from .constants import MATCH_HISTORY_COUNT, Platform, Region
from .endpoints import RiotAPIEndpoints
from .errors import (
    RiotAPIError,
    BadRequestError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServiceUnavailableError,
    error_for_status,
)
from .models import SummonerDTO, ParticipantDTO, MatchDTO

__all__ = [
    "RiotAPIClient",
    "RiotAPIEndpoints",
    "MATCH_HISTORY_COUNT",
    "Platform",
    "Region",
    "RiotAPIError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServiceUnavailableError",
    "error_for_status",
    "SummonerDTO",
    "ParticipantDTO",
    "MatchDTO",
]
