"""Match history API endpoint."""

from typing import Annotated, Optional

import structlog
from fastapi import APIRouter, Depends, Query
from structlog import contextvars as structlog_contextvars

from match_history.core.exceptions import (
    ExternalServiceError,
    ServiceException,
    ValidationError,
)
from match_history.core.riot_api.errors import RiotAPIError

from .dependencies import MatchHistoryServiceDep, require_api_key
from .schemas import ErrorResponse, MatchHistoryResponse
from .service import map_riot_error

logger = structlog.get_logger(__name__)

SUMMONER_NAME_REQUIRED = "Summoner name is required."

router = APIRouter(prefix="/match-history", tags=["matches"])


@router.get(
    "",
    response_model=MatchHistoryResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_match_history(
    _api_key: Annotated[str, Depends(require_api_key)],
    match_service: MatchHistoryServiceDep,
    summoner_name: Optional[str] = Query(
        None, alias="summonerName", description="Summoner display name"
    ),
) -> MatchHistoryResponse:
    """
    Get the five most recent matches for a summoner.

    Each entry has the match id and game mode plus, when the summoner
    appears among the participants, outcome, champion and K/D/A.
    """
    if summoner_name is None or not summoner_name.strip():
        raise ValidationError(SUMMONER_NAME_REQUIRED)

    structlog_contextvars.bind_contextvars(summoner_name=summoner_name)
    try:
        return await match_service.get_match_history(summoner_name)
    except ServiceException:
        raise
    except RiotAPIError as e:
        raise map_riot_error(e, summoner_name) from e
    except Exception as e:
        logger.exception("Unexpected error fetching match history")
        raise ExternalServiceError(f"Failed to fetch match history: {str(e)}") from e
    finally:
        structlog_contextvars.unbind_contextvars("summoner_name")
